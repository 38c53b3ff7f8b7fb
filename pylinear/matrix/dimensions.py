"""Dimensions value type shared by matrices and size errors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """
    Size of a matrix.

    Attributes:
        width: Number of columns
        height: Number of rows
    """
    width: int
    height: int

    def is_square(self) -> bool:
        return self.width == self.height

    def __str__(self) -> str:
        return f"{self.height}x{self.width}"
