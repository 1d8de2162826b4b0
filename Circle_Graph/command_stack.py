"""User commands and key bindings without GUI dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .app import GraphApp


class Command:
    """Base class for actions triggered by one input event."""

    name = "command"

    def execute(self) -> Any:  # pragma: no cover - interface
        """Apply the command."""


@dataclass
class ToggleDirectedCommand(Command):
    """Flip between the directed and undirected interpretation."""

    app: GraphApp
    name = "toggle-directed"

    def execute(self) -> bool:
        return self.app.toggle_directed()


@dataclass
class ResetSearchCommand(Command):
    """Clear the traversal and seed it at the first node with an edge."""

    app: GraphApp
    name = "reset-search"

    def execute(self) -> None:
        self.app.reset_search()


@dataclass
class BreadthStepCommand(Command):
    app: GraphApp
    name = "step-breadth"

    def execute(self):
        return self.app.step_breadth()


@dataclass
class DepthStepCommand(Command):
    app: GraphApp
    name = "step-depth"

    def execute(self):
        return self.app.step_depth()


#: Default key bindings: space toggles the mode, s resets, b and d step
KEY_BINDINGS: Dict[str, Callable[[GraphApp], Command]] = {
    " ": ToggleDirectedCommand,
    "s": ResetSearchCommand,
    "b": BreadthStepCommand,
    "d": DepthStepCommand,
}


def command_for_key(key: str, app: GraphApp) -> Command | None:
    """Return the command bound to ``key`` or ``None`` for unbound keys."""

    factory = KEY_BINDINGS.get(key)
    if factory is None:
        return None
    return factory(app)


@dataclass
class CommandStack:
    """Execute commands and keep the history of what ran."""

    history: List[Command] = field(default_factory=list)

    def do(self, command: Command) -> Any:
        """Execute ``command`` and append it to the history."""

        result = command.execute()
        self.history.append(command)
        return result

    def names(self) -> List[str]:
        return [cmd.name for cmd in self.history]

    def clear(self) -> None:
        self.history.clear()
