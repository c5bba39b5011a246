from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from shredder.ai import AIConversionError, convert_with_openai
from shredder.converter import convert
from shredder.languages import Language

from . import settings

app = FastAPI(title="YAML Shredder")

# -------------------- Schemas --------------------

class ConvertRequest(BaseModel):
    yaml: str
    language: Language = Field(default_factory=lambda: Language.parse(settings.DEFAULT_LANGUAGE))

class ConvertResponse(BaseModel):
    code: str
    error: Optional[str] = None

class AIConvertResponse(BaseModel):
    code: str

class LanguageInfo(BaseModel):
    name: str
    docs_url: str

# -------------------- Endpoints --------------------

@app.post("/convert", response_model=ConvertResponse)
def convert_workflow(req: ConvertRequest):
    # Conversion failures are part of the result, not an HTTP error
    result = convert(req.yaml, req.language)
    return ConvertResponse(code=result.code, error=result.error)

@app.post("/convert/ai", response_model=AIConvertResponse)
async def convert_workflow_ai(req: ConvertRequest):
    if not settings.OPENAI_API_KEY:
        raise HTTPException(status_code=503, detail="AI conversion is not configured (OPENAI_API_KEY unset)")

    try:
        code = await run_in_threadpool(
            convert_with_openai,
            req.yaml,
            req.language,
            settings.OPENAI_API_KEY,
            model=settings.AI_MODEL,
            max_tokens=settings.AI_MAX_TOKENS,
            temperature=settings.AI_TEMPERATURE,
        )
    except AIConversionError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AIConvertResponse(code=code)

@app.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    return [LanguageInfo(name=lang.value, docs_url=lang.docs_url) for lang in Language]
