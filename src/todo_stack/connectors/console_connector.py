# src/todo_stack/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..cli.style import Style
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _style_for(state: AppState) -> Style:
    settings = getattr(state, "settings", None)
    return Style(enabled=bool(getattr(settings, "color_enabled", False)))


def run_console_loop(state: AppState, commands: CommandRegistry | None = None) -> None:
    """
    Menu loop: draw the menu, read a selection, optionally read one line of
    text, run the action, print its reply. Ends on the exit action, EOF or Ctrl+C.
    """
    commands = commands or command_registry
    style = _style_for(state)
    lo, hi = commands.number_range()

    logger.info("Console menu started (color=%s).", style.enabled)

    while True:
        print(commands.build_menu(style))

        try:
            selection = input(style.prompt(f"Please enter your choice ({lo}-{hi}): "))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        command = commands.resolve(selection)
        if command is None:
            logger.debug("Rejected menu selection %r", selection)
            print(style.error(commands.invalid_selection_message()))
            continue

        print(style.rule("-"))

        text: str | None = None
        if command.prompt:
            try:
                text = input(style.input_prompt(command.prompt))
            except EOFError:
                logger.info("Console EOF received while reading text, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt while reading text, exiting.")
                print()
                break

        try:
            reply = commands.handle(state, command, text)
        except Exception:
            logger.exception("Menu action %r crashed.", command.name)
            reply = style.error("Internal error while handling a menu action.")

        if command.exits:
            print(style.error(reply))
            logger.info("Console exit command received.")
            break

        print(reply)

    logger.info("Console connector finished (tasks left=%d).", state.registry.count())
