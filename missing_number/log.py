"""
Mensajes de diagnóstico con el mismo formato de siempre: [INFO], [WARN], [ERROR].

Todo va a stderr para no mezclarse con la salida del usuario (stdout).
"""
import sys

_verbose = False


def set_verbose(enabled: bool):
    global _verbose
    _verbose = bool(enabled)


def info(msg: str):
    # Solo si se pidió --verbose
    if _verbose:
        print(f"[INFO] {msg}", file=sys.stderr)


def warn(msg: str):
    print(f"[WARN] {msg}", file=sys.stderr)


def error(msg: str):
    print(f"[ERROR] {msg}", file=sys.stderr)
