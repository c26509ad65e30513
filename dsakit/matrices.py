"""Space-saving storage for diagonal and lower-triangular square matrices."""

from __future__ import annotations

from collections.abc import Iterable


def _format(rows: list[list[int]]) -> str:
    return "\n".join(" ".join(str(value) for value in row) for row in rows)


class _SquareMatrix:
    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"dimension must be non-negative, got {n}")
        self.n = n

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"({i}, {j}) is outside a {self.n}x{self.n} matrix")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> int:
        raise NotImplementedError

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        return [[self[i, j] for j in range(self.n)] for i in range(self.n)]

    def __str__(self) -> str:
        return _format(self.rows())


class DiagonalMatrix(_SquareMatrix):
    """An n x n matrix whose only non-zero elements lie on the diagonal."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._diagonal = [0] * n

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._check(key)
        return self._diagonal[i] if i == j else 0

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._check(key)
        if i != j:
            raise IndexError(f"({i}, {j}) is not on the diagonal")
        self._diagonal[i] = value

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()


class LowerTriangularMatrix(_SquareMatrix):
    """An n x n matrix stored row by row without its zero upper triangle."""

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self._cells = [0] * (n * (n + 1) // 2)

    @staticmethod
    def _offset(i: int, j: int) -> int:
        return i * (i + 1) // 2 + j

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._check(key)
        return self._cells[self._offset(i, j)] if i >= j else 0

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._check(key)
        if i < j:
            if value != 0:
                raise IndexError(f"({i}, {j}) lies in the zero upper triangle")
            return
        self._cells[self._offset(i, j)] = value

    def fill(self, values: Iterable[int]) -> None:
        """Fill from n*n values in row-major order; upper-triangle values are ignored."""
        flat = list(values)
        if len(flat) != self.n * self.n:
            raise ValueError(f"expected {self.n * self.n} values, got {len(flat)}")
        for position, value in enumerate(flat):
            i, j = divmod(position, self.n)
            if i >= j:
                self._cells[self._offset(i, j)] = value

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        return super().rows()

    def __str__(self) -> str:
        return super().__str__()