"""
Result types for orthogonalization algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from pylinalg.core.matrix import Matrix


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Unpacks as a pair: ``Q, R = qr_decomposition(A)``.

    Attributes:
        Q: Matrix with orthonormal columns (m x n)
        R: Upper triangular matrix (n x n), equal to ``transpose(Q) @ A``
    """
    Q: Matrix
    R: Matrix

    def __iter__(self) -> Iterator[Matrix]:
        yield self.Q
        yield self.R

    def reconstruct(self) -> Matrix:
        """``Q @ R``, which reproduces the decomposed matrix within QR.atol."""
        return self.Q.multiply(self.R)
