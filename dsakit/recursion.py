"""Classic recursive algorithms and their iterative counterparts."""

from __future__ import annotations

from collections.abc import Iterator


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class CountingSum:
    """Recursive sum whose counter survives between calls.

    Every level of recursion with ``n > 0`` bumps a shared counter, and each
    level adds the counter's value once the deeper calls have finished. The
    counter is never reset, so repeated calls give growing results.
    """

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, n: int) -> int:
        if n > 0:
            self.count += 1
            deeper = self(n - 1)
            return deeper + self.count
        return 0


def tail_sequence(n: int) -> list[int]:
    """Values emitted before recursing: n, n-1, ..., 1."""
    if n > 0:
        return [n, *tail_sequence(n - 1)]
    return []


def head_sequence(n: int) -> list[int]:
    """Values emitted after recursing: 1, 2, ..., n."""
    if n > 0:
        return [*head_sequence(n - 1), n]
    return []


def tree_sequence(n: int) -> list[int]:
    """Values emitted by a function that calls itself twice per level."""
    if n > 0:
        return [n, *tree_sequence(n - 1), *tree_sequence(n - 1)]
    return []


def _indirect_a(n: int) -> Iterator[int]:
    if n > 0:
        yield n
        yield from _indirect_b(n - 1)


def _indirect_b(n: int) -> Iterator[int]:
    if n > 1:
        yield n
        yield from _indirect_a(n // 2)


def indirect_sequence(n: int) -> list[int]:
    """Values emitted by two functions calling each other in turn."""
    return list(_indirect_a(n))


def mccarthy91(n: int) -> int:
    """The nested-recursion McCarthy 91 function."""
    if n > 100:
        return n - 10
    return mccarthy91(mccarthy91(n + 11))


def sum_recursive(n: int) -> int:
    """Sum of 1..n by recursion."""
    _require_non_negative("n", n)
    if n == 0:
        return 0
    return sum_recursive(n - 1) + n


def sum_iterative(n: int) -> int:
    """Sum of 1..n with a loop."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def factorial(n: int) -> int:
    """n! by recursion."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    return factorial(n - 1) * n


def factorial_iterative(n: int) -> int:
    """n! with a loop."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def power(m: int, n: int) -> int:
    """m to the power n by n recursive multiplications."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    return power(m, n - 1) * m


def power_fast(m: int, n: int) -> int:
    """m to the power n by recursive squaring."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return power_fast(m * m, n // 2)
    return m * power_fast(m * m, n // 2)


def power_iterative(m: int, n: int) -> int:
    """m to the power n by iterative squaring."""
    _require_non_negative("n", n)
    result = 1
    while n > 0:
        if n % 2:
            result *= m
        m *= m
        n //= 2
    return result


def taylor_exp(x: float, n: int) -> float:
    """e**x from the first n+1 terms of its Taylor series, recursively."""
    _require_non_negative("n", n)

    def terms(k: int) -> tuple[float, float, float]:
        if k == 0:
            return 1.0, 1.0, 1.0
        total, numerator, denominator = terms(k - 1)
        numerator *= x
        denominator *= k
        return total + numerator / denominator, numerator, denominator

    return terms(n)[0]


def horner_exp_iterative(x: float, n: int) -> float:
    """e**x from n terms using Horner's rule with a loop."""
    _require_non_negative("n", n)
    s = 1.0
    while n:
        s = 1 + x * s / n
        n -= 1
    return s


def horner_exp_recursive(x: float, n: int) -> float:
    """e**x from n terms using Horner's rule by recursion."""
    _require_non_negative("n", n)

    def step(k: int, s: float) -> float:
        if k == 0:
            return s
        return step(k - 1, 1 + x * s / k)

    return step(n, 1.0)


def fib_iterative(n: int) -> int:
    """n-th Fibonacci number with a loop."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fib_recursive(n: int) -> int:
    """n-th Fibonacci number by plain tree recursion."""
    if n <= 1:
        return n
    return fib_recursive(n - 2) + fib_recursive(n - 1)


def fib_memo(n: int) -> int:
    """n-th Fibonacci number by recursion with memoization."""
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 2) + fib(k - 1)
        return memo[k]

    return fib(n)


def _check_ncr(n: int, r: int) -> None:
    if not 0 <= r <= n:
        raise ValueError(f"need 0 <= r <= n, got n={n}, r={r}")


def ncr_factorial(n: int, r: int) -> int:
    """Binomial coefficient as n! / (r! (n-r)!)."""
    _check_ncr(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def ncr_pascal(n: int, r: int) -> int:
    """Binomial coefficient by Pascal's triangle recursion."""
    _check_ncr(n, r)
    if r == 0 or r == n:
        return 1
    return ncr_pascal(n - 1, r - 1) + ncr_pascal(n - 1, r)


def hanoi(n: int, source, via, target) -> Iterator[tuple]:
    """Yield the (from, to) moves that carry n discs from source to target."""
    if n > 0:
        yield from hanoi(n - 1, source, target, via)
        yield (source, target)
        yield from hanoi(n - 1, via, source, target)