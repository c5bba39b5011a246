# targets/go.py
from __future__ import annotations

from typing import List

from ..emitter import Exec, Pipeline, Todo
from ..languages import Language
from .base import Renderer


class GoRenderer(Renderer):
    language = Language.GO
    trailing_newline = False

    def preamble(self, pipeline: Pipeline) -> List[str]:
        return [
            "package main",
            "",
            "import (",
            '  "context"',
            '  "fmt"',
            '  "log"',
            '  "dagger.io/dagger"',
            ")",
            "",
            "func main() {",
            "  ctx := context.Background()",
            "  client, err := dagger.Connect(ctx)",
            "  if err != nil {",
            '    log.Fatalf("failed to connect to Dagger: %v", err)',
            "  }",
            "  defer client.Close()",
            f'  container := client.Container().From("{pipeline.base_image}")'
            f'.WithMountedDirectory("{pipeline.mount_path}", client.Host().Directory("{pipeline.host_dir}"))'
            f'.WithWorkdir("{pipeline.mount_path}")',
        ]

    def exec_line(self, op: Exec) -> str:
        return f'  container = container.WithExec([]string{{"sh", "-c", "{op.command}"}})'

    def todo_line(self, op: Todo) -> str:
        return f"  // TODO: {op.label}"

    def epilogue(self, pipeline: Pipeline) -> List[str]:
        # log.Fatalf prints the diagnostic and exits
        return [
            "  out, err := container.Stdout(ctx)",
            "  if err != nil {",
            '    log.Fatalf("pipeline failed: %v", err)',
            "  }",
            "  fmt.Println(out)",
            "}",
        ]
