# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date


class FakePrompter:
    """
    Scripted Prompter for menu handler tests.

    - Answers are consumed in order, whatever the prompt kind
    - Every prompt and every `say` is recorded for assertions
    - Running out of answers raises EOFError, like input() at end of stdin
    """

    def __init__(self, answers: Iterable[object] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.said: list[str] = []

    def _next(self, prompt: str) -> object:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError(prompt)
        return self.answers.pop(0)

    def say(self, text: str) -> None:
        self.said.append(text)

    def ask_int(self, prompt: str, lo: int, hi: int) -> int:
        value = int(self._next(prompt))  # type: ignore[arg-type]
        assert lo <= value <= hi, f"{prompt}: {value} not in [{lo}, {hi}]"
        return value

    def ask_text(self, prompt: str, max_len: int) -> str:
        return str(self._next(prompt))[:max_len]

    def ask_date(self, prompt: str) -> date:
        value = self._next(prompt)
        assert isinstance(value, date)
        return value

    def confirm(self, prompt: str) -> bool:
        return bool(self._next(prompt))

    @property
    def output(self) -> str:
        return "\n".join(self.said)
