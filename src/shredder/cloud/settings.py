from __future__ import annotations
import os

OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")
AI_MODEL = os.environ.get("SHREDDER_AI_MODEL", "gpt-4o-mini")
AI_MAX_TOKENS = int(os.environ.get("SHREDDER_AI_MAX_TOKENS", "1200"))
AI_TEMPERATURE = float(os.environ.get("SHREDDER_AI_TEMPERATURE", "0.3"))
DEFAULT_LANGUAGE = os.environ.get("SHREDDER_DEFAULT_LANGUAGE", "go")
