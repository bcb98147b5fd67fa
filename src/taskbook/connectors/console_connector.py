# src/taskbook/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from ..cli.menu import EXIT_CHOICE, MenuRegistry
from ..cli.menu import registry as default_registry
from ..core.ports import Prompter
from ..core.state import AppState
from ..tasks.task_errors import TaskError

logger = logging.getLogger(__name__)

ERR_MARK = "✗"


class ConsolePrompter:
    """
    Prompter backed by input()/print().

    Re-asks on invalid numbers and dates, the same way for every prompt.
    EOFError / KeyboardInterrupt from input() propagate to the loop.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str) -> None:
        self._output(text)

    def ask_int(self, prompt: str, lo: int, hi: int) -> int:
        while True:
            raw = self._input(f"{prompt} ({lo}-{hi}): ").strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and lo <= value <= hi:
                return value
            self._output(f"{ERR_MARK} Invalid input! Please enter a number between {lo} and {hi}.")

    def ask_text(self, prompt: str, max_len: int) -> str:
        return self._input(f"{prompt}: ").rstrip("\r\n")[:max_len]

    def ask_date(self, prompt: str) -> date:
        while True:
            raw = self._input(f"{prompt}: ").strip()
            try:
                return datetime.strptime(raw, "%Y-%m-%d").date()
            except ValueError:
                self._output(f"{ERR_MARK} Invalid date format! Use YYYY-MM-DD")

    def confirm(self, prompt: str) -> bool:
        return self._input(f"{prompt} (y/n): ").strip().lower() in ("y", "yes")


def run_console_loop(
    state: AppState,
    prompter: Prompter | None = None,
    registry: MenuRegistry | None = None,
) -> None:
    """
    Menu loop. Returns on choice 0, EOF or Ctrl+C; saving is left to the caller.

    Task errors (not found, store full, I/O, ...) are reported and the loop
    goes on.
    """
    prompter = prompter or ConsolePrompter()
    registry = registry or default_registry
    app_name = str(getattr(state.settings, "app_name", "Task Manager"))

    logger.info("Console started tasks=%d file=%s", len(state.task_store), state.tasks_path)
    prompter.say(f"\n{'=' * 40}\n   {app_name.upper()}\n{'=' * 40}")

    while True:
        try:
            prompter.say("\n" + registry.build_menu())
            choice = prompter.ask_int("Enter your choice", EXIT_CHOICE, registry.max_choice)
            if choice == EXIT_CHOICE:
                logger.info("Console exit command received.")
                break
            reply = registry.handle(state, choice, prompter)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            prompter.say("")
            break
        except TaskError as e:
            logger.info("Menu choice failed: %s", e)
            prompter.say(f"\n{ERR_MARK} {e}")
            continue
        except Exception:
            logger.exception("Menu handler crashed.")
            prompter.say(f"\n{ERR_MARK} Internal error while handling this choice.")
            continue

        prompter.say(f"\n{reply}")

    logger.info("Console finished.")
