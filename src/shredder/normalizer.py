# normalizer.py
from __future__ import annotations

from typing import List

from .errors import NoStepsError
from .model import Step, WorkflowDocument


def normalize(doc: WorkflowDocument) -> List[Step]:
    """
    Flatten every job's steps into one sequence.

    Jobs are taken in declaration order, steps in job order. Job names and
    `needs` edges are dropped.
    """
    steps: List[Step] = []
    for job in doc.jobs.values():
        steps.extend(job.steps)

    if not steps:
        raise NoStepsError(job_count=len(doc.jobs))

    return steps
