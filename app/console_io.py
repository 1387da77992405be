"""
Line-oriented console input shared by both demos.

Reads from stdin by default, or from a supplied text stream so the
shells can be driven by a script.
"""

from decimal import Decimal
from typing import Optional, TextIO

from rich.console import Console

from pattern_demos.models.transaction import to_money


class Prompter:
    """Asks questions on a rich Console and reads one line per answer."""

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        self.console = console
        self._stream = stream

    def ask(self, prompt: str) -> str:
        """
        Read one line of input.

        Raises:
            EOFError: When the input is exhausted
        """
        line = self.console.input(prompt, markup=False, emoji=False, stream=self._stream)
        if self._stream is not None and line == "":
            raise EOFError
        return line.strip()

    def ask_int(self, prompt: str) -> Optional[int]:
        """Read a whole number, or None if the answer is not one."""
        try:
            return int(self.ask(prompt))
        except ValueError:
            return None

    def ask_amount(self, prompt: str) -> Decimal:
        """Read a money amount, asking again until one is given."""
        while True:
            answer = self.ask(prompt)
            try:
                return to_money(answer)
            except ValueError:
                self.say("Invalid input. Please enter an amount.")

    def say(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
