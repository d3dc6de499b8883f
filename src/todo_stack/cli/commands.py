# src/todo_stack/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import Added, Completed, Deleted, Empty
from .style import Style

CommandHandler = Callable[[AppState, str | None], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuCommand:
    number: int
    name: str
    label: str
    handler: CommandHandler
    # When set, the console reads one line of free text and passes it to the handler.
    prompt: str | None = None
    exits: bool = False


class CommandRegistry:
    """Numbered menu registry used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._commands: dict[int, MenuCommand] = {}
        self._aliases: dict[str, int] = {}

    def register(
        self,
        number: int,
        name: str,
        handler: CommandHandler,
        label: str,
        prompt: str | None = None,
        aliases: list[str] | None = None,
        exits: bool = False,
    ) -> None:
        aliases = aliases or []
        self._commands[number] = MenuCommand(
            number=number,
            name=name.lower(),
            label=label,
            handler=handler,
            prompt=prompt,
            exits=exits,
        )
        self._aliases[name.lower()] = number
        for alias in aliases:
            self._aliases[alias.lower()] = number

    def commands(self) -> list[MenuCommand]:
        return [self._commands[n] for n in sorted(self._commands)]

    def number_range(self) -> tuple[int, int]:
        numbers = sorted(self._commands)
        if not numbers:
            return (0, 0)
        return (numbers[0], numbers[-1])

    def resolve(self, selection: str) -> MenuCommand | None:
        """
        Map a raw menu selection ("3", " view ", "8") to its command.
        Returns None for anything that is not a registered number or alias.
        """
        raw = selection.strip().lower()
        if not raw:
            return None
        if raw.isdecimal():
            return self._commands.get(int(raw))
        number = self._aliases.get(raw)
        if number is None:
            return None
        return self._commands.get(number)

    def handle(self, state: AppState, command: MenuCommand, text: str | None = None) -> str:
        logger.debug("Menu action %s (%s)", command.number, command.name)
        return command.handler(state, text)

    def invalid_selection_message(self) -> str:
        lo, hi = self.number_range()
        return f"Error: Invalid input! Please enter a number between {lo} and {hi}."

    def build_menu(self, style: Style) -> str:
        lines = [style.rule(), style.title("TO-DO LIST MENU"), style.rule(), ""]
        for cmd in self.commands():
            lines.append(style.item(f"{cmd.number}. {cmd.label}"))
        lines.append("")
        lines.append(style.rule())
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, text: str | None) -> str:
    outcome = state.registry.add(text or "")
    if isinstance(outcome, Added):
        return f"Task added: {outcome.task}"
    return "Error: Task already exists."


def cmd_complete(state: AppState, text: str | None) -> str:
    outcome = state.registry.complete_top()
    if isinstance(outcome, Completed):
        return f"Task completed: {outcome.task}"
    return "No tasks to complete."


def cmd_view(state: AppState, text: str | None) -> str:
    outcome = state.registry.view_all()
    if isinstance(outcome, Empty):
        return "No tasks."
    lines = ["Tasks (Top to Bottom):"]
    lines.extend(f"- {task}" for task in outcome)
    return "\n".join(lines)


def cmd_clear(state: AppState, text: str | None) -> str:
    state.registry.clear()
    return "All tasks cleared."


def cmd_search(state: AppState, text: str | None) -> str:
    matches = state.registry.search(text or "")
    if not matches:
        return "No task found with keyword."
    return "\n".join(f"Found: {task}" for task in matches)


def cmd_delete(state: AppState, text: str | None) -> str:
    name = text or ""
    outcome = state.registry.delete_by_name(name)
    if isinstance(outcome, Deleted):
        return f"Task deleted: {outcome.task}"
    return f"Task not found: {name}"


def cmd_count(state: AppState, text: str | None) -> str:
    return f"Total number of tasks: {state.registry.count()}"


def cmd_exit(state: AppState, text: str | None) -> str:
    return "Exiting... Thank you for using the To-Do List!"


registry.register(1, "add", cmd_add, label="Add Task", prompt="Enter the task to add: ")
registry.register(2, "complete", cmd_complete, label="Complete Task", aliases=["done"])
registry.register(3, "view", cmd_view, label="View Tasks", aliases=["list", "ls"])
registry.register(4, "clear", cmd_clear, label="Clear All Tasks")
registry.register(
    5,
    "search",
    cmd_search,
    label="Search Task",
    prompt="Enter the search keyword: ",
    aliases=["find"],
)
registry.register(
    6,
    "delete",
    cmd_delete,
    label="Delete Task",
    prompt="Enter the task to delete: ",
    aliases=["rm", "remove"],
)
registry.register(7, "count", cmd_count, label="Total Tasks", aliases=["total"])
registry.register(8, "exit", cmd_exit, label="Exit", aliases=["quit", "q"], exits=True)
