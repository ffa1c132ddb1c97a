"""3x3 and 4x4 matrices for object and camera transforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


def _rows(values: Iterable[Iterable[float]], size: int) -> tuple[tuple[float, ...], ...]:
    rows = tuple(tuple(float(v) for v in row) for row in values)
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError(f"expected a {size}x{size} matrix")
    return rows


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix, used for minors of 4x4 matrices."""

    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _rows(self.rows, 3))

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    def det(self) -> float:
        """Determinant by the rule of Sarrus."""
        m = self.rows
        return (
            m[0][0] * m[1][1] * m[2][2]
            + m[0][1] * m[1][2] * m[2][0]
            + m[1][0] * m[2][1] * m[0][2]
            - m[0][2] * m[1][1] * m[2][0]
            - m[0][1] * m[1][0] * m[2][2]
            - m[2][1] * m[1][2] * m[0][0]
        )


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix; ``exist`` marks a matrix that holds a composed transform."""

    rows: tuple[tuple[float, ...], ...]
    exist: bool = field(default=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _rows(self.rows, 4))

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix, not marked as an applied transform."""
        return cls(
            tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)),
            exist=False,
        )

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        cols = list(zip(*other.rows))
        product = tuple(
            tuple(sum(a * b for a, b in zip(row, col)) for col in cols)
            for row in self.rows
        )
        return Matrix4(product, exist=True)

    def divide(self, divisor: float) -> Matrix4:
        """Divide every element by ``divisor``."""
        return Matrix4(
            tuple(tuple(v / divisor for v in row) for row in self.rows),
            exist=self.exist,
        )

    def transpose(self) -> Matrix4:
        return Matrix4(tuple(zip(*self.rows)), exist=self.exist)

    def minor(self, row: int, col: int) -> Matrix3:
        """The 3x3 matrix left after removing ``row`` and ``col``."""
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError("row and column must be in 0..3")
        return Matrix3(
            tuple(
                tuple(v for j, v in enumerate(r) if j != col)
                for i, r in enumerate(self.rows)
                if i != row
            )
        )

    def det(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return sum(
            v * (-1) ** j * self.minor(0, j).det() for j, v in enumerate(self.rows[0])
        )

    def adjugate(self) -> Matrix4:
        """Matrix of cofactors: element (i, j) is the signed minor at (i, j)."""
        return Matrix4(
            tuple(
                tuple((-1) ** (i + j) * self.minor(i, j).det() for j in range(4))
                for i in range(4)
            ),
            exist=self.exist,
        )

    def inverse(self) -> Matrix4:
        """Inverse matrix; raises ZeroDivisionError when the matrix is singular."""
        return self.transpose().adjugate().divide(self.det())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], exist: bool = False) -> Matrix4:
        return cls(tuple(tuple(r) for r in rows), exist=exist)