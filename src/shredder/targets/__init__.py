from ..languages import Language
from .base import Renderer
from .go import GoRenderer
from .python import PythonRenderer
from .typescript import TypeScriptRenderer

RENDERERS = {
    Language.GO: GoRenderer,
    Language.PYTHON: PythonRenderer,
    Language.TYPESCRIPT: TypeScriptRenderer,
}


def renderer_for(language: Language) -> Renderer:
    return RENDERERS[language]()


__all__ = ["Renderer", "GoRenderer", "PythonRenderer", "TypeScriptRenderer", "RENDERERS", "renderer_for"]
