# languages.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Language(str, Enum):
    GO = "go"
    PYTHON = "python"
    TYPESCRIPT = "typescript"

    @property
    def docs_url(self) -> str:
        return DOC_LINKS[self]

    @classmethod
    def parse(
        cls,
        value: Union[str, Language, None],
        default: Optional[Language] = None,
    ) -> Language:
        """
        Resolve a language selector.

        None and unknown values fall back to `default` (Go unless given).
        """
        fallback = default or DEFAULT_LANGUAGE
        if value is None:
            return fallback
        if isinstance(value, Language):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return fallback


DEFAULT_LANGUAGE = Language.GO

DOC_LINKS = {
    Language.GO: "https://docs.dagger.io/sdk/go/",
    Language.PYTHON: "https://docs.dagger.io/sdk/python/",
    Language.TYPESCRIPT: "https://docs.dagger.io/sdk/typescript/",
}
