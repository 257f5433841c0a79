import os
from dataclasses import dataclass

ALGORITHMS = ("sum", "xor")
TRUTHY = ("1", "true", "yes", "y", "on")


def env(name: str, default=None):
    """
    Toma una variable de entorno; si viene vacía, usa el default.
    """
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


@dataclass
class Settings:
    algorithm: str = "sum"
    verbose: bool = False
    explain: bool = False


def load_settings() -> Settings:
    """
    Defaults desde el entorno (MNF_ALGORITHM, MNF_VERBOSE).
    Los flags del CLI los pisan después.
    """
    algorithm = env("MNF_ALGORITHM", "sum").strip().lower()
    verbose = env("MNF_VERBOSE", "").strip().lower() in TRUTHY
    return Settings(algorithm=algorithm, verbose=verbose)
