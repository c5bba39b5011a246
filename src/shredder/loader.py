# loader.py
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Dict, Mapping

import yaml
from yaml.constructor import ConstructorError

from .errors import NoJobsError, ParseError
from .model import Job, Step, WorkflowDocument

MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                # `<<` merges may legitimately be overridden by explicit keys
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    continue
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _parse(text: str) -> Any:
    try:
        return yaml.load(text, Loader=UniqueKeyLoader)
    except yaml.MarkedYAMLError as e:
        details = {}
        if e.problem_mark is not None:
            # PyYAML marks are 0-based
            details = {"line": e.problem_mark.line + 1, "column": e.problem_mark.column + 1}
        raise ParseError(str(e), **details) from e
    except yaml.YAMLError as e:
        raise ParseError(str(e)) from e
    except ValueError as e:
        # timestamp constructor, e.g. `on: 2024-02-30`
        raise ParseError(str(e)) from e
    except RecursionError as e:
        raise ParseError(f"document is nested too deeply ({e})") from e


def _job_from_raw(name: str, raw: Any) -> Job:
    steps = raw.get("steps") if isinstance(raw, Mapping) else None
    if not isinstance(steps, list):
        return Job(name=name)
    return Job(name=name, steps=[Step.from_raw(s) for s in steps])


def load(text: str) -> WorkflowDocument:
    """
    Parse a GitHub Actions workflow.

    Raises:
      ParseError: text is not valid YAML
      NoJobsError: document is empty or has no `jobs` mapping
    """
    doc = _parse(text)

    if not doc or not isinstance(doc, Mapping):
        raise NoJobsError("empty document" if not doc else "document is not a mapping")

    raw_jobs = doc.get("jobs")
    if raw_jobs is None:
        raise NoJobsError("missing")
    if not isinstance(raw_jobs, Mapping):
        raise NoJobsError("jobs is not a mapping")

    jobs: Dict[str, Job] = {}
    for name, raw_job in raw_jobs.items():
        key = str(name)
        if key in jobs:
            # e.g. `1:` and `'1':` are distinct YAML keys but the same job id
            raise ParseError(f"duplicate job id {key!r}", job=key)
        jobs[key] = _job_from_raw(key, raw_job)

    return WorkflowDocument(jobs=jobs, raw=dict(doc))
