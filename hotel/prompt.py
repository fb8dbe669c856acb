"""Keyboard input helpers that re-prompt until a value parses."""

import sys
from datetime import date, datetime

INVALID_INPUT = "Your input is invalid!"


class Prompter:
    """Reads typed values from an input stream.

    Replaces a process-wide reader with an explicit handle so menu actions
    can be driven from any stream.
    """

    def __init__(self, stream=None, out=None):
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout

    def _readline(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        if prompt:
            print(prompt, end="", file=self.out, flush=True)
        return self._readline()

    def _read_parsed(self, prompt: str, parse):
        while True:
            text = self._ask(prompt)
            try:
                return parse(text.strip())
            except ValueError:
                print(INVALID_INPUT, file=self.out)

    def read_text(self, prompt: str = "") -> str:
        return self._ask(prompt)

    def read_int(self, prompt: str = "") -> int:
        return self._read_parsed(prompt, int)

    def read_float(self, prompt: str = "") -> float:
        return self._read_parsed(prompt, float)

    def read_choice(self) -> int:
        """Read a menu choice. Only returns once a whole number is entered."""
        return self.read_int("Please make your choice: ")

    def read_yes_no(self, prompt: str) -> bool:
        answer = self._ask(prompt).strip().lower()
        while answer not in ("yes", "no"):
            print("Wrong format.", file=self.out)
            answer = self._ask(prompt).strip().lower()
        return answer == "yes"

    def read_date(self, prompt: str, fmt: str = "%m/%d/%Y") -> date:
        return self._read_parsed(prompt, lambda s: datetime.strptime(s, fmt).date())
