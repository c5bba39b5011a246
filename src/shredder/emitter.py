# emitter.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from .languages import Language
from .model import Step

# ---------------------------------------------------------------------
# Translation rules
# ---------------------------------------------------------------------
# One planner turns the flat step list into a Pipeline. Renderers (see
# shredder.targets) only decide how a Pipeline looks in each SDK.
#
#   setup-node w/ node-version  -> base image node:<version> (first match wins)
#   run                         -> Exec("sh -c <cmd>")
#   uses (absorbed action)      -> nothing
#   uses (anything else)        -> Todo("<name>: <uses>")
#   neither                     -> nothing
# ---------------------------------------------------------------------

SETUP_NODE_ACTION = "actions/setup-node"
CHECKOUT_ACTION = "actions/checkout"

# handled by the base image + host mount scaffolding
ABSORBED_ACTIONS = frozenset({CHECKOUT_ACTION, SETUP_NODE_ACTION})

DEFAULT_IMAGE = "alpine"
MOUNT_PATH = "/app"
HOST_DIR = "."


@dataclass(frozen=True)
class Exec:
    """Shell command, already escaped for a double-quoted string literal."""
    command: str


@dataclass(frozen=True)
class Todo:
    """Inert placeholder for an action with no automatic translation."""
    label: str


Op = Union[Exec, Todo]


@dataclass
class Pipeline:
    base_image: str
    ops: List[Op] = field(default_factory=list)
    mount_path: str = MOUNT_PATH
    host_dir: str = HOST_DIR


def escape_command(cmd: str) -> str:
    # Only double quotes are escaped. Newlines, backslashes and backticks
    # are passed through as-is.
    return cmd.replace('"', '\\"')


def node_version(steps: Iterable[Step]) -> Optional[str]:
    """`with.node-version` of the first setup-node step that has one."""
    for step in steps:
        if step.action != SETUP_NODE_ACTION:
            continue
        version = step.with_.get("node-version")
        if version:
            return str(version)
    return None


def base_image(steps: Sequence[Step]) -> str:
    version = node_version(steps)
    return f"node:{version}" if version else DEFAULT_IMAGE


def todo_label(step: Step) -> str:
    return f"{step.name}: {step.uses}" if step.name else str(step.uses)


def plan_step(step: Step) -> Optional[Op]:
    if step.is_run:
        return Exec(escape_command(step.run or ""))
    if step.is_uses:
        if step.action in ABSORBED_ACTIONS:
            return None
        return Todo(todo_label(step))
    return None


def plan(steps: Sequence[Step]) -> Pipeline:
    pipeline = Pipeline(base_image=base_image(steps))
    for step in steps:
        op = plan_step(step)
        if op is not None:
            pipeline.ops.append(op)
    return pipeline


def emit(steps: Sequence[Step], language: Union[Language, str, None] = None) -> str:
    """Render the step sequence as Dagger code. Never fails."""
    # imported here: targets import Pipeline/Exec/Todo from this module
    from .targets import renderer_for

    return renderer_for(Language.parse(language)).render(plan(steps))
