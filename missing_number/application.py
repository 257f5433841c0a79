"""
Orquestador: pide números, valida, calcula y pregunta si seguir.

Estados: RUNNING -> STOPPED. Nada se guarda entre iteraciones salvo ese flag.
"""
from enum import Enum
from typing import Sequence

from missing_number import log
from missing_number.user_interface import InputFormatError

BANNER = (
    "Missing Number Finder",
    "====================",
    "Find the missing number in an array containing n distinct numbers from range [0, n]",
    "",
)
FAREWELL = "Thank you for using Missing Number Finder!"


class ApplicationState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class MissingNumberApplication:
    def __init__(self, finder, validator, user_interface, explain: bool = False):
        for name, dep in (("finder", finder), ("validator", validator),
                          ("user_interface", user_interface)):
            if dep is None:
                raise ValueError(f"{name} cannot be None.")
        self.finder = finder
        self.validator = validator
        self.ui = user_interface
        self.explain = explain
        self.state = ApplicationState.RUNNING

    def _solve(self, numbers: Sequence[int]) -> bool:
        """
        Valida y, si pasa, calcula y muestra. Devuelve False si la entrada no sirve.
        """
        result = self.validator.validate(numbers)
        if not result.is_valid:
            log.info(f"Entrada rechazada: {result.error}")
            self.ui.display_error(result.error)
            return False

        missing = self.finder.find_missing_number(numbers)
        self.ui.display_result(missing)
        if self.explain:
            for line in self.finder.explain(numbers):
                self.ui.display_message(f"    {line}")
        return True

    def _iteration(self):
        try:
            numbers = self.ui.get_numbers_from_user()
        except InputFormatError as exc:
            self.ui.display_error(str(exc))
            return
        log.info(f"Secuencia leída ({len(numbers)} valores)")
        self._solve(numbers)

    def run(self) -> int:
        for line in BANNER:
            self.ui.display_message(line)

        self.state = ApplicationState.RUNNING
        while self.state is ApplicationState.RUNNING:
            try:
                self._iteration()
            except Exception as exc:
                # Cualquier falla inesperada se muestra y el loop sigue
                self.ui.display_error(str(exc) or exc.__class__.__name__)

            if not self.ui.ask_to_continue():
                self.state = ApplicationState.STOPPED

        self.ui.display_message(FAREWELL)
        return 0

    def run_once(self, numbers: Sequence[int]) -> int:
        """
        Un solo ciclo sin preguntar nada (modo --numbers). 0 si hubo resultado, 2 si no.
        """
        try:
            ok = self._solve(numbers)
        except Exception as exc:
            self.ui.display_error(str(exc) or exc.__class__.__name__)
            ok = False
        self.state = ApplicationState.STOPPED
        return 0 if ok else 2
