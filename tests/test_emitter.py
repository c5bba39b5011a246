"""Tests for pipeline planning and per-language rendering."""

from __future__ import annotations

import ast

import pytest

from shredder.emitter import DEFAULT_IMAGE, Exec, Todo, base_image, emit, escape_command, plan
from shredder.languages import Language
from shredder.model import Step
from shredder.targets import RENDERERS, renderer_for

ALL_LANGUAGES = list(Language)


def run(cmd: str, **kw) -> Step:
    return Step(run=cmd, **kw)


def uses(action: str, name: str | None = None, **params) -> Step:
    return Step(uses=action, name=name, with_=params)


def setup_node(version=None, ref: str = "@v4") -> Step:
    params = {"node-version": version} if version is not None else {}
    return Step(uses=f"actions/setup-node{ref}", with_=params)


class TestBaseImage:
    """Base image comes from the first setup-node step with a node-version."""

    def test_defaults_to_alpine(self):
        assert base_image([run("make")]) == DEFAULT_IMAGE == "alpine"

    def test_node_version_selects_node_image(self):
        assert base_image([run("npm ci"), setup_node("20")]) == "node:20"

    def test_numeric_version(self):
        assert base_image([setup_node(18)]) == "node:18"

    def test_first_match_wins(self):
        assert base_image([setup_node("16"), setup_node("22")]) == "node:16"

    def test_setup_node_without_version_is_skipped(self):
        assert base_image([setup_node(), setup_node("22")]) == "node:22"

    def test_other_actions_with_node_version_are_ignored(self):
        step = uses("actions/setup-node-extra@v1", **{"node-version": "12"})
        assert base_image([step]) == "alpine"

    def test_version_suffix_is_ignored(self):
        assert base_image([setup_node("20", ref="")]) == "node:20"
        assert base_image([setup_node("20", ref="@main")]) == "node:20"


class TestPlan:
    """plan() maps steps to Exec / Todo operations."""

    def test_run_becomes_exec(self):
        assert plan([run("npm test")]).ops == [Exec("npm test")]

    @pytest.mark.parametrize(
        "action",
        ["actions/checkout@v4", "actions/checkout@v2", "actions/checkout", "actions/setup-node@v3", "actions/setup-node"],
    )
    def test_absorbed_actions_produce_nothing(self, action):
        assert plan([uses(action)]).ops == []

    def test_named_action_todo(self):
        assert plan([uses("actions/upload-artifact@v4", name="Upload")]).ops == [
            Todo("Upload: actions/upload-artifact@v4")
        ]

    def test_unnamed_action_todo(self):
        assert plan([uses("actions/cache@v4")]).ops == [Todo("actions/cache@v4")]

    def test_step_with_neither_is_ignored(self):
        assert plan([Step(name="nothing"), Step(raw=7)]).ops == []

    def test_run_takes_precedence_over_uses(self):
        step = Step(run="echo hi", uses="actions/cache@v4")
        assert plan([step]).ops == [Exec("echo hi")]

    def test_scaffolding_is_fixed(self):
        p = plan([run("ls")])
        assert (p.mount_path, p.host_dir) == ("/app", ".")


class TestEscaping:
    """Only double quotes are escaped."""

    def test_double_quotes(self):
        assert escape_command('echo "hi"') == 'echo \\"hi\\"'

    def test_other_characters_pass_through(self):
        cmd = "a\\b `c` $d\ne"
        assert escape_command(cmd) == cmd


GO_EXPECTED = """\
package main

import (
  "context"
  "fmt"
  "log"
  "dagger.io/dagger"
)

func main() {
  ctx := context.Background()
  client, err := dagger.Connect(ctx)
  if err != nil {
    log.Fatalf("failed to connect to Dagger: %v", err)
  }
  defer client.Close()
  container := client.Container().From("alpine").WithMountedDirectory("/app", client.Host().Directory(".")).WithWorkdir("/app")
  container = container.WithExec([]string{"sh", "-c", "npm test"})
  // TODO: Upload: actions/upload-artifact@v4
  out, err := container.Stdout(ctx)
  if err != nil {
    log.Fatalf("pipeline failed: %v", err)
  }
  fmt.Println(out)
}"""

PYTHON_EXPECTED = """\
import dagger
import asyncio

async def main():
    try:
        async with dagger.Connection() as client:
            container = (client.container().from_("node:20")
                .with_mounted_directory("/app", client.host().directory("."))
                .with_workdir("/app")
                .with_exec(["sh", "-c", "npm ci"])
    # TODO: actions/cache@v4
            )
            out = await container.stdout()
            print(out)
    except Exception as e:
        print(f"Pipeline failed: {e}")

asyncio.run(main())
"""

TYPESCRIPT_EXPECTED = """\
import { connect } from "@dagger.io/dagger";

(async function main() {
  try {
    const client = await connect();
    let container = client.container().from("alpine")
      .withMountedDirectory("/app", client.host().directory("."))
      .withWorkdir("/app");
    container = container.withExec(["sh", "-c", "echo \\"hi\\""]);
    const out = await container.stdout();
    console.log(out);
  } catch (err) {
    console.error("Pipeline failed:", err);
  }
})();
"""


class TestRenderers:
    """Each SDK renderer produces the expected program text."""

    def test_registry_covers_every_language(self):
        assert set(RENDERERS) == set(Language)
        for lang in Language:
            assert renderer_for(lang).language is lang

    def test_go(self):
        steps = [run("npm test"), uses("actions/checkout@v4"), uses("actions/upload-artifact@v4", name="Upload")]
        assert emit(steps, Language.GO) == GO_EXPECTED

    def test_python(self):
        steps = [setup_node("20"), run("npm ci"), uses("actions/cache@v4")]
        assert emit(steps, Language.PYTHON) == PYTHON_EXPECTED

    def test_typescript(self):
        assert emit([run('echo "hi"')], Language.TYPESCRIPT) == TYPESCRIPT_EXPECTED

    def test_python_output_is_valid_python(self):
        steps = [
            setup_node("20"),
            run('echo "quoted"'),
            uses("actions/upload-artifact@v4", name="Upload"),
            run("npm test"),
        ]
        ast.parse(emit(steps, Language.PYTHON))

    def test_python_output_without_ops_is_valid_python(self):
        ast.parse(emit([uses("actions/checkout@v4")], Language.PYTHON))

    @pytest.mark.parametrize("language", ALL_LANGUAGES)
    def test_one_placeholder_per_unsupported_action(self, language):
        code = emit([uses("actions/upload-artifact@v4"), run("ls")], language)
        lines = [line for line in code.splitlines() if "actions/upload-artifact@v4" in line]
        assert len(lines) == 1
        assert "TODO" in lines[0]

    @pytest.mark.parametrize("language", ALL_LANGUAGES)
    def test_absorbed_actions_never_produce_todo(self, language):
        code = emit([uses("actions/checkout@v3"), setup_node("18", ref="@v1"), run("ls")], language)
        assert "TODO" not in code
        assert "node:18" in code

    @pytest.mark.parametrize("language", ALL_LANGUAGES)
    def test_emit_is_deterministic(self, language):
        steps = [setup_node("20"), run("npm test"), uses("actions/cache@v4")]
        assert emit(steps, language) == emit(steps, language)

    def test_unknown_language_falls_back_to_go(self):
        steps = [run("ls")]
        assert emit(steps, "cobol") == emit(steps, Language.GO)
        assert emit(steps, None) == emit(steps, Language.GO)
