"""
Animatable vector: a series viewed as a point in R^n.

Only the algebra a host animation driver needs is provided:
current = current + (target - current) * t, plus a squared magnitude to
decide when the interpolation has converged.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class AnimatableVector:
    """
    A fixed-length vector of floats with value semantics.

    Arithmetic returns new vectors; `scale_in_place` is the only mutating
    operation. Combining vectors of different length raises ValueError.
    """
    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | npt.ArrayLike = ()) -> None:
        if not isinstance(values, np.ndarray):
            values = list(values)
        self._values: npt.NDArray[np.float64] = np.array(values, dtype=float).reshape(-1)

    @classmethod
    def zero(cls) -> AnimatableVector:
        """The empty vector."""
        return cls()

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._values.shape[0]

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __repr__(self) -> str:
        return f"AnimatableVector({self._values.tolist()!r})"

    def to_array(self) -> npt.NDArray[np.float64]:
        return self._values.copy()

    def tolist(self) -> list[float]:
        return self._values.tolist()

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def _check_size(self, other: AnimatableVector) -> None:
        if len(self) != len(other):
            raise ValueError(f"Mismatched vector sizes: {len(self)} != {len(other)}")

    def __add__(self, other: AnimatableVector) -> AnimatableVector:
        if not isinstance(other, AnimatableVector):
            return NotImplemented
        self._check_size(other)
        return AnimatableVector(self._values + other._values)

    def __sub__(self, other: AnimatableVector) -> AnimatableVector:
        if not isinstance(other, AnimatableVector):
            return NotImplemented
        self._check_size(other)
        return AnimatableVector(self._values - other._values)

    def __neg__(self) -> AnimatableVector:
        return AnimatableVector(-self._values)

    def __mul__(self, scalar: float) -> AnimatableVector:
        return self.scale(scalar)

    __rmul__ = __mul__

    def scale(self, scalar: float) -> AnimatableVector:
        return AnimatableVector(self._values * float(scalar))

    def scale_in_place(self, scalar: float) -> None:
        """Mutating variant of `scale`, for drivers that own the vector."""
        self._values *= float(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimatableVector):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable through scale_in_place

    def isclose(self, other: AnimatableVector, tol: float = 1e-9) -> bool:
        """Equal length and every component within `tol`."""
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._values, other._values, rtol=0.0, atol=tol))

    @property
    def magnitude_squared(self) -> float:
        return float(np.dot(self._values, self._values))

    @property
    def average(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(self._values.mean())

    def lerp(self, other: AnimatableVector, t: float) -> AnimatableVector:
        """Point at fraction `t` of the way from self to `other`."""
        return self + (other - self) * t

    def shuffled(self, rng: Optional[np.random.Generator] = None) -> AnimatableVector:
        """A permuted copy (demo transitions between random orderings)."""
        rng = rng if rng is not None else np.random.default_rng()
        return AnimatableVector(rng.permutation(self._values))
