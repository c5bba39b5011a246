# targets/base.py
from __future__ import annotations

from typing import List

from ..emitter import Exec, Pipeline, Todo
from ..languages import Language


class Renderer:
    """
    Turns a Pipeline into source text for one Dagger SDK.

    Subclasses provide the preamble (imports, connection, container with the
    host mount + workdir), one line per Exec/Todo, and the epilogue
    (stdout + failure handler).
    """
    language: Language
    trailing_newline: bool = True

    def preamble(self, pipeline: Pipeline) -> List[str]:
        raise NotImplementedError

    def exec_line(self, op: Exec) -> str:
        raise NotImplementedError

    def todo_line(self, op: Todo) -> str:
        raise NotImplementedError

    def epilogue(self, pipeline: Pipeline) -> List[str]:
        raise NotImplementedError

    def render(self, pipeline: Pipeline) -> str:
        lines = list(self.preamble(pipeline))
        for op in pipeline.ops:
            if isinstance(op, Exec):
                lines.append(self.exec_line(op))
            else:
                lines.append(self.todo_line(op))
        lines.extend(self.epilogue(pipeline))

        code = "\n".join(lines)
        return code + "\n" if self.trailing_newline else code
