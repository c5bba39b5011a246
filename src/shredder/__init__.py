from .converter import convert
from .emitter import emit, plan
from .errors import ConversionError, NoJobsError, NoStepsError, ParseError
from .languages import DEFAULT_LANGUAGE, Language
from .loader import load
from .model import ConversionResult, Job, Step, WorkflowDocument
from .normalizer import normalize

__all__ = [
    "convert",
    "load",
    "normalize",
    "emit",
    "plan",
    "Language",
    "DEFAULT_LANGUAGE",
    "ConversionResult",
    "WorkflowDocument",
    "Job",
    "Step",
    "ConversionError",
    "ParseError",
    "NoJobsError",
    "NoStepsError",
]
