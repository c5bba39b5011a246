# converter.py
from __future__ import annotations

from typing import Union

from .emitter import emit
from .errors import ConversionError
from .languages import Language
from .loader import load
from .model import ConversionResult
from .normalizer import normalize


def convert(text: str, language: Union[Language, str, None] = None) -> ConversionResult:
    """
    Convert a GitHub Actions workflow into Dagger code.

    Args:
        text: workflow YAML
        language: target SDK; None or unknown values fall back to Go

    Returns:
        ConversionResult with either `code` or `error` populated. Loader and
        normalizer failures are reported through `error`, never raised.
    """
    target = Language.parse(language)
    try:
        steps = normalize(load(text))
    except ConversionError as e:
        return ConversionResult.failure(str(e))

    return ConversionResult.success(emit(steps, target))
