import argparse
import sys

from missing_number import __version__, log
from missing_number.application import MissingNumberApplication
from missing_number.config import ALGORITHMS, load_settings
from missing_number.finder import get_finder
from missing_number.user_interface import (
    ConsoleUserInterface,
    InputFormatError,
    parse_numbers,
)
from missing_number.validator import InputValidator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="missing-number",
        description="Find the missing number in an array of n distinct integers from range [0, n]."
    )
    parser.add_argument(
        "--algorithm",
        default=None,
        help=f"Algoritmo de cálculo: {', '.join(ALGORITHMS)} (default: $MNF_ALGORITHM o 'sum')."
    )
    parser.add_argument(
        "--numbers", nargs="+", metavar="N",
        help="Calcula una sola vez con estos números y sale (sin modo interactivo)."
    )
    parser.add_argument(
        "--explain", action="store_true",
        help="Muestra los valores intermedios del cálculo."
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Mensajes [INFO] a stderr (también con MNF_VERBOSE=1)."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # 1) Config: entorno primero, flags encima
    settings = load_settings()
    if args.algorithm:
        settings.algorithm = args.algorithm.strip().lower()
    settings.verbose = settings.verbose or args.verbose
    settings.explain = args.explain
    log.set_verbose(settings.verbose)

    # 2) Armar dependencias
    try:
        finder = get_finder(settings.algorithm)
    except ValueError as exc:
        log.error(str(exc))
        return 1
    log.info(f"Algoritmo: {settings.algorithm}")

    ui = ConsoleUserInterface()
    app = MissingNumberApplication(finder, InputValidator(), ui, explain=settings.explain)

    # 3) Una sola vez o interactivo
    if args.numbers is not None:
        try:
            numbers = parse_numbers(" ".join(args.numbers))
        except InputFormatError as exc:
            ui.display_error(str(exc))
            return 2
        return app.run_once(numbers)

    return app.run()


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
