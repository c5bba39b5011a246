# targets/python.py
from __future__ import annotations

from typing import List

from ..emitter import Exec, Pipeline, Todo
from ..languages import Language
from .base import Renderer


class PythonRenderer(Renderer):
    """
    Builds the container as one parenthesised method chain; each Exec is one
    `.with_exec(...)` link. TODO comments sit inside the parentheses, which
    Python allows at any indentation.
    """
    language = Language.PYTHON

    def preamble(self, pipeline: Pipeline) -> List[str]:
        return [
            "import dagger",
            "import asyncio",
            "",
            "async def main():",
            "    try:",
            "        async with dagger.Connection() as client:",
            f'            container = (client.container().from_("{pipeline.base_image}")',
            f'                .with_mounted_directory("{pipeline.mount_path}", client.host().directory("{pipeline.host_dir}"))',
            f'                .with_workdir("{pipeline.mount_path}")',
        ]

    def exec_line(self, op: Exec) -> str:
        return f'                .with_exec(["sh", "-c", "{op.command}"])'

    def todo_line(self, op: Todo) -> str:
        return f"    # TODO: {op.label}"

    def epilogue(self, pipeline: Pipeline) -> List[str]:
        return [
            "            )",
            "            out = await container.stdout()",
            "            print(out)",
            "    except Exception as e:",
            '        print(f"Pipeline failed: {e}")',
            "",
            "asyncio.run(main())",
        ]
