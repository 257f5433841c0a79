from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


class InputValidator:
    """
    Revisa que una secuencia pueda ser "n enteros distintos en [0, n]".

    Orden de chequeo (el primero que falle define el mensaje):
      1. nula o vacía
      2. repetidos
      3. fuera de rango [0, n], con n = len(numbers) (incluye n)
    """

    def validate(self, numbers: Optional[Sequence[int]]) -> ValidationResult:
        if numbers is None:
            return ValidationResult(False, "Input array cannot be null")

        values = list(numbers)
        if not values:
            return ValidationResult(False, "Input array cannot be empty")

        n = len(values)
        distinct = set(values)
        if len(distinct) != n:
            return ValidationResult(False, "All numbers must be distinct")

        if any(num < 0 or num > n for num in distinct):
            return ValidationResult(False, f"All numbers must be in range [0, {n}]")

        return ValidationResult(True)

    def is_valid_input(self, numbers: Optional[Sequence[int]]) -> bool:
        return self.validate(numbers).is_valid

    def get_validation_error(self, numbers: Optional[Sequence[int]]) -> str:
        return self.validate(numbers).error or ""
