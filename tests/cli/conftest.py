"""CLI test fixtures — scripted console for Prompter / MovieMenu.

Invariants:
    - Answers are consumed in order; running out raises EOFError like a closed stdin
    - Every prompt and every printed line is recorded for assertions
"""

import pytest

from moviedms.cli.prompts import Prompter


class ScriptedConsole:
    """Feeds canned answers to input() and records output."""

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, text: str) -> None:
        self.lines.append(text)

    def prompter(self) -> Prompter:
        return Prompter(input_fn=self.input, output_fn=self.output)


@pytest.fixture
def console():
    """Factory: console(["1", "path.csv", ...]) -> ScriptedConsole."""
    return ScriptedConsole
