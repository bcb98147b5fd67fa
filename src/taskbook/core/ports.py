# src/taskbook/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu handlers.

Handlers talk to the user through a Prompter instead of calling input()/print()
directly. The console connector provides the real one; tests script a fake.
"""

from datetime import date
from typing import Protocol


class Prompter(Protocol):
    def say(self, text: str) -> None: ...

    def ask_int(self, prompt: str, lo: int, hi: int) -> int:
        """Ask until the user enters an integer in [lo, hi]."""
        ...

    def ask_text(self, prompt: str, max_len: int) -> str:
        """Ask for one line of text, cut to max_len characters (may be empty)."""
        ...

    def ask_date(self, prompt: str) -> date:
        """Ask until the user enters a YYYY-MM-DD date."""
        ...

    def confirm(self, prompt: str) -> bool: ...
