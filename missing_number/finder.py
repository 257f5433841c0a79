from typing import List, Optional, Sequence


class SumMissingNumberFinder:
    """
    Suma esperada de 0..n menos la suma real = el faltante.

    Asume entrada ya validada: n distintos en [0, n]. O(n) tiempo, O(1) espacio.
    """
    name = "sum"

    def _check(self, numbers: Optional[Sequence[int]]) -> List[int]:
        if numbers is None:
            raise ValueError("numbers cannot be None.")
        return list(numbers)

    def find_missing_number(self, numbers: Sequence[int]) -> int:
        values = self._check(numbers)
        n = len(values)
        expected = n * (n + 1) // 2
        return expected - sum(values)

    def explain(self, numbers: Sequence[int]) -> List[str]:
        values = self._check(numbers)
        n = len(values)
        expected = n * (n + 1) // 2
        actual = sum(values)
        return [
            f"n = {n}",
            f"EXPECTED = 0+1+...+{n} = {n}*({n}+1)/2 = {expected}",
            f"ACTUAL = sum(input) = {actual}",
            f"RESULT = EXPECTED - ACTUAL = {expected - actual}",
        ]


def xor_upto(n: int) -> int:
    """
    0 ^ 1 ^ ... ^ n en O(1). El patrón se repite cada 4:
        n % 4 == 0 -> n
        n % 4 == 1 -> 1
        n % 4 == 2 -> n + 1
        n % 4 == 3 -> 0
    """
    return (n, 1, n + 1, 0)[n % 4]


class XorMissingNumberFinder(SumMissingNumberFinder):
    """
    ALL = 0^1^...^n, NOW = x1^x2^...^xn; como a^a = 0, ALL^NOW deja solo el faltante.
    """
    name = "xor"

    def _xor_all(self, values: List[int]) -> int:
        acc = 0
        for x in values:
            acc ^= x
        return acc

    def find_missing_number(self, numbers: Sequence[int]) -> int:
        values = self._check(numbers)
        return xor_upto(len(values)) ^ self._xor_all(values)

    def explain(self, numbers: Sequence[int]) -> List[str]:
        values = self._check(numbers)
        n = len(values)
        all_xor = xor_upto(n)
        now = self._xor_all(values)
        result = all_xor ^ now
        return [
            f"n = {n}",
            f"ALL = 0^1^...^{n} = {bin(all_xor)}",
            f"NOW = x1^...^x{n} = {bin(now)}",
            f"RESULT = ALL^NOW = {bin(all_xor)} ^ {bin(now)} = {bin(result)} = {result}",
        ]


FINDERS = {
    SumMissingNumberFinder.name: SumMissingNumberFinder,
    XorMissingNumberFinder.name: XorMissingNumberFinder,
}


def get_finder(name: str):
    try:
        return FINDERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown algorithm '{name}'. Choose one of: {', '.join(sorted(FINDERS))}."
        ) from None
