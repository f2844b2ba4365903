"""A dense three-dimensional array of floats."""

from __future__ import annotations

from functools import reduce

_MAX_SIZE = 2**64 - 1


def _multiply_pair(i: int, j: int) -> int:
    if i < 0 or j < 0:
        raise ValueError("dimensions must be non-negative")
    if i == 0 or j == 0:
        return 0
    product = i * j
    if product > _MAX_SIZE:
        raise MemoryError("array size overflows the addressable range")
    return product


def checked_multiply(*args: int) -> int:
    """Multiply sizes, raising ``MemoryError`` if the product would overflow."""
    if len(args) < 2:
        raise TypeError("checked_multiply needs at least two sizes")
    return reduce(_multiply_pair, args)


class Array3D:
    """Float values indexed by ``(i, j, k)``, with ``i`` varying fastest."""

    def __init__(self, i: int = 0, j: int = 0, k: int = 0) -> None:
        self._dims = (i, j, k)
        self._data = [0.0] * checked_multiply(i, j, k)

    @property
    def dim0(self) -> int:
        return self._dims[0]

    @property
    def dim1(self) -> int:
        return self._dims[1]

    @property
    def dim2(self) -> int:
        return self._dims[2]

    def dim(self, i: int) -> int:
        if i not in (0, 1, 2):
            raise IndexError(f"dimension index {i} out of range")
        return self._dims[i]

    def resize(self, i: int, j: int, k: int) -> None:
        """Change the dimensions; existing contents are not rearranged."""
        size = checked_multiply(i, j, k)
        self._dims = (i, j, k)
        del self._data[size:]
        self._data.extend([0.0] * (size - len(self._data)))

    def __len__(self) -> int:
        return len(self._data)

    def _offset(self, index: tuple[int, int, int]) -> int:
        i, j, k = index
        for value, bound in zip(index, self._dims):
            if not 0 <= value < bound:
                raise IndexError(f"index {index} out of range for {self._dims}")
        return i + self._dims[0] * (j + self._dims[1] * k)

    def __getitem__(self, index: tuple[int, int, int]) -> float:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int, int], value: float) -> None:
        self._data[self._offset(index)] = value