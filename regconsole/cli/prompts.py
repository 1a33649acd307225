"""
Operator prompts that re-ask until the input parses.
"""
from typing import Callable, Optional

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

# Whole numbers are stored as 32-bit BSON ints
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Prompter:
    """
    Reads validated values from the operator.

    Input and output are injectable so the menu can be driven from tests.
    End of input propagates as EOFError.
    """

    def __init__(
        self,
        read: Optional[InputFunc] = None,
        write: Optional[OutputFunc] = None,
    ):
        self.read = read or input
        self.write = write or print

    def ask_text(self, prompt: str) -> str:
        """Trimmed, non-empty text."""
        while True:
            value = self.read(prompt).strip()
            if value:
                return value
            self.write("Input cannot be empty. Please try again.")

    def ask_int(self, prompt: str) -> int:
        """Whole number in the 32-bit signed range."""
        while True:
            try:
                value = int(self.read(prompt))
            except ValueError:
                value = None
            if value is not None and INT32_MIN <= value <= INT32_MAX:
                return value
            self.write("Invalid input. Please enter a valid integer.")

    def ask_float(self, prompt: str) -> float:
        while True:
            try:
                return float(self.read(prompt))
            except ValueError:
                self.write("Invalid input. Please enter a valid decimal number.")
