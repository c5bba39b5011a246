# targets/typescript.py
from __future__ import annotations

from typing import List

from ..emitter import Exec, Pipeline, Todo
from ..languages import Language
from .base import Renderer


class TypeScriptRenderer(Renderer):
    language = Language.TYPESCRIPT

    def preamble(self, pipeline: Pipeline) -> List[str]:
        return [
            'import { connect } from "@dagger.io/dagger";',
            "",
            "(async function main() {",
            "  try {",
            "    const client = await connect();",
            f'    let container = client.container().from("{pipeline.base_image}")',
            f'      .withMountedDirectory("{pipeline.mount_path}", client.host().directory("{pipeline.host_dir}"))',
            f'      .withWorkdir("{pipeline.mount_path}");',
        ]

    def exec_line(self, op: Exec) -> str:
        return f'    container = container.withExec(["sh", "-c", "{op.command}"]);'

    def todo_line(self, op: Todo) -> str:
        return f"    // TODO: {op.label}"

    def epilogue(self, pipeline: Pipeline) -> List[str]:
        return [
            "    const out = await container.stdout();",
            "    console.log(out);",
            "  } catch (err) {",
            '    console.error("Pipeline failed:", err);',
            "  }",
            "})();",
        ]
