"""Prompts — safe console input with retry on bad values.

Invariants:
    - Every answer is stripped of surrounding whitespace
    - ask_int / ask_float only return values inside [lo, hi]; they re-ask otherwise
    - End of input (EOFError) propagates: the menu loop decides how to stop

Design Decisions:
    - input_fn / output_fn injected: tests drive the prompts with a scripted list
    - Numeric parsing reuses core.field_parsing so the CLI and update_fields
      accept exactly the same text
"""

from collections.abc import Callable

from moviedms.core.errors import FieldParseError
from moviedms.core.field_parsing import parse_int, parse_float

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class Prompter:
    """Console question/answer helpers."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print):
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str) -> None:
        self._output(text)

    def ask(self, prompt: str) -> str:
        answer = self._input(prompt)
        return "" if answer is None else answer.strip()

    def ask_non_empty(self, prompt: str) -> str:
        while True:
            answer = self.ask(prompt)
            if answer:
                return answer
            self.say("Value required.")

    def ask_int(self, prompt: str, lo: int, hi: int) -> int:
        while True:
            try:
                value = parse_int(self.ask(prompt))
            except FieldParseError:
                value = None
            if value is not None and lo <= value <= hi:
                return value
            self.say("Invalid integer. Try again.")

    def ask_float(self, prompt: str, lo: float, hi: float) -> float:
        while True:
            try:
                value = parse_float(self.ask(prompt))
            except FieldParseError:
                value = None
            if value is not None and lo <= value <= hi:
                return value
            self.say("Invalid number. Try again.")

    def confirm(self, prompt: str) -> bool:
        """True for 'y' or 'yes' in any case."""
        return self.ask(prompt).lower() in ("y", "yes")
