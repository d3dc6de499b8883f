# src/todo_stack/cli/style.py

"""ANSI styling for the console menu.

Bold 16-color codes only; the whole thing turns into plain text when
Style(enabled=False) (NO_COLOR, TODO_COLOR=0, output not a TTY).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

RESET = "\033[0m"
RED = "\033[1;31m"
GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
MAGENTA = "\033[1;35m"
CYAN = "\033[1;36m"
WHITE = "\033[1;37m"

RULE_WIDTH = 36
POINTER = "\N{WHITE RIGHT POINTING BACKHAND INDEX}"

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


@dataclass(frozen=True, slots=True)
class Style:
    enabled: bool = True

    def paint(self, text: str, code: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{RESET}"

    def rule(self, char: str = "=") -> str:
        return self.paint(char * RULE_WIDTH, GREEN if char == "=" else WHITE)

    def title(self, text: str) -> str:
        return self.paint(text.center(RULE_WIDTH).rstrip(), YELLOW)

    def item(self, text: str) -> str:
        return f"{self.paint(POINTER, BLUE)} {self.paint(text, CYAN)}"

    def prompt(self, text: str) -> str:
        return self.paint(text, MAGENTA)

    def input_prompt(self, text: str) -> str:
        return self.paint(text, GREEN)

    def error(self, text: str) -> str:
        return self.paint(text, RED)
