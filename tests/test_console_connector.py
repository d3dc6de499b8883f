# tests/test_console_connector.py

from __future__ import annotations

import pytest

from todo_stack.cli.commands import CommandRegistry
from todo_stack.connectors.console_connector import run_console_loop

from .fakes import ScriptedInput


def _drive(monkeypatch, lines) -> ScriptedInput:
    scripted = ScriptedInput(lines)
    monkeypatch.setattr("builtins.input", scripted)
    return scripted


def test_console_session_runs_actions_until_exit(state, monkeypatch, capsys) -> None:
    scripted = _drive(
        monkeypatch,
        [
            "1", "Groceries",
            "1", "groceries",
            "1", "Call Bob",
            "6", "GROCERIES",
            "7",
            "2",
            "7",
            "8",
            "1", "never read",
        ],
    )

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task added: Groceries" in out
    assert "Error: Task already exists." in out
    assert "Task deleted: Groceries" in out
    assert "Total number of tasks: 1" in out
    assert "Task completed: Call Bob" in out
    assert "Total number of tasks: 0" in out
    assert out.rstrip().endswith("Exiting... Thank you for using the To-Do List!")
    assert scripted.remaining == 2
    assert state.registry.count() == 0


def test_invalid_selection_reprompts_without_mutation(state, monkeypatch, capsys) -> None:
    state.registry.add("keep me")
    scripted = _drive(monkeypatch, ["abc", "0", "9", "", "3", "8"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.count("Error: Invalid input! Please enter a number between 1 and 8.") == 4
    assert "Tasks (Top to Bottom):\n- keep me" in out
    assert out.count("TO-DO LIST MENU") == 6
    assert scripted.prompts[0] == "Please enter your choice (1-8): "
    assert state.registry.view_all() == ["keep me"]


def test_text_prompts_are_shown_for_text_actions(state, monkeypatch, capsys) -> None:
    scripted = _drive(monkeypatch, ["add", "Read", "find", "rea", "delete", "read", "q"])

    run_console_loop(state)

    assert "Enter the task to add: " in scripted.prompts
    assert "Enter the search keyword: " in scripted.prompts
    assert "Enter the task to delete: " in scripted.prompts
    out = capsys.readouterr().out
    assert "Found: Read" in out
    assert "Task deleted: Read" in out


def test_eof_ends_loop_cleanly(state, monkeypatch, capsys) -> None:
    _drive(monkeypatch, ["1", "Task A"])

    run_console_loop(state)

    assert "Task added: Task A" in capsys.readouterr().out
    assert state.registry.count() == 1


@pytest.mark.parametrize(
    "lines",
    [
        [KeyboardInterrupt()],
        ["1", KeyboardInterrupt()],
        ["5", EOFError()],
    ],
)
def test_interrupts_end_loop_without_mutation(state, monkeypatch, lines) -> None:
    _drive(monkeypatch, lines)

    run_console_loop(state)

    assert state.registry.count() == 0


def test_crashing_action_is_reported_and_loop_continues(state, monkeypatch, capsys) -> None:
    reg = CommandRegistry()

    def boom(state, text):
        raise RuntimeError("kaput")

    reg.register(1, "boom", boom, label="Boom")
    reg.register(2, "count", lambda s, t: f"n={s.registry.count()}", label="Count")
    reg.register(3, "exit", lambda s, t: "bye", label="Exit", exits=True)
    _drive(monkeypatch, ["1", "2", "3"])

    run_console_loop(state, reg)

    out = capsys.readouterr().out
    assert "Internal error while handling a menu action." in out
    assert "n=0" in out
    assert "bye" in out


def test_color_follows_settings(state, monkeypatch, capsys) -> None:
    state.settings.color_enabled = True
    scripted = _drive(monkeypatch, ["x", "8"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "\033[1;31mError: Invalid input!" in out
    assert "\033[1;31mExiting..." in out
    assert scripted.prompts[0].startswith("\033[1;35m")
