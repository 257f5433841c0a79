import sys
from typing import List

DEFAULT_PROMPT = "Enter numbers separated by spaces (e.g., 3 0 1):"
CONTINUE_PROMPT = "\nDo you want to try another array? (y/n):"
FORMAT_ERROR = "Invalid input format. Please enter integers separated by spaces."
YES_ANSWERS = ("y", "yes")


class InputFormatError(ValueError):
    """Algún token de la línea no es un entero."""


def parse_numbers(line: str) -> List[int]:
    """
    Parte la línea por espacios y convierte cada token a int.
    """
    try:
        return [int(token) for token in line.split()]
    except ValueError:
        raise InputFormatError(FORMAT_ERROR) from None


def is_yes(answer: str) -> bool:
    return (answer or "").strip().lower() in YES_ANSWERS


class ConsoleUserInterface:
    """
    Lectura/escritura por consola. stdin/stdout se pueden inyectar (tests).
    """

    def __init__(self, stdin=None, stdout=None, prompt: str = DEFAULT_PROMPT,
                 continue_prompt: str = CONTINUE_PROMPT):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.continue_prompt = continue_prompt

    def _read_line(self) -> str:
        # EOF -> "" (readline no lanza excepción)
        return self.stdin.readline()

    def display_message(self, text: str = ""):
        print(text, file=self.stdout)

    def get_numbers_from_user(self) -> List[int]:
        self.display_message(self.prompt)
        return parse_numbers(self._read_line())

    def display_result(self, missing_number: int):
        self.display_message(f"The missing number is: {missing_number}")

    def display_error(self, error: str):
        self.display_message(f"Error: {error}")

    def ask_to_continue(self) -> bool:
        self.display_message(self.continue_prompt)
        return is_yes(self._read_line())
