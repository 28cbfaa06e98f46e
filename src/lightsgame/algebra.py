from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .board import neighbors

logger = logging.getLogger(__name__)


def build_A(n: int) -> np.ndarray:
    """Return the N×N effect matrix A over GF(2) for Lights Out.
    Column j encodes the cells toggled when pressing cell j.
    The result is read-only; build a new one for a new size.
    """
    if n < 1:
        raise ValueError(f"Board size must be positive, got {n}")
    N = n * n
    A = np.zeros((N, N), dtype=np.uint8)  # use 0/1 ints for XOR via mod2
    for j in range(N):
        A[neighbors(n, j), j] = 1
    A.setflags(write=False)
    logger.debug("Built %dx%d incidence matrix for n=%d", N, N, n)
    return A


def gf2_row_echelon(
    A: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, list[int]]:
    """Return row-echelon form of augmented matrix [A|b] over GF(2) and the pivot columns.

    Only rows below each pivot are cleared; pivot i sits in row i.
    """
    A = (np.asarray(A) % 2).astype(np.uint8)
    b = (np.asarray(b) % 2).astype(np.uint8).reshape(-1, 1)
    m, n = A.shape
    M = np.concatenate([A, b], axis=1)  # shape (m, n+1)

    row = 0
    pivcols: list[int] = []
    for col in range(n):
        if row == m:
            break
        # any row at or below the current one with a 1 will do
        candidates = np.flatnonzero(M[row:, col])
        if len(candidates) == 0:
            continue
        pivot = row + int(candidates[0])
        if pivot != row:
            M[[row, pivot]] = M[[pivot, row]]
        below = row + 1 + np.flatnonzero(M[row + 1 :, col])
        M[below, :] ^= M[row, :]
        pivcols.append(col)
        row += 1
    return M, pivcols


def gf2_solve(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], bool]:
    """Solve A x = b over GF(2).

    Returns:
        x: one solution (length n, uint8) with free variables set to 0,
           or None if inconsistent
        solvable: bool
    """
    m, n = np.shape(A)
    R, pivcols = gf2_row_echelon(A, b)
    R_A = R[:, :n]
    R_b = R[:, n]

    # Inconsistency check: 0...0 | 1 rows
    if np.any(~R_A.any(axis=1) & (R_b == 1)):
        return None, False

    x = np.zeros((n,), dtype=np.uint8)
    for ri in range(len(pivcols) - 1, -1, -1):
        pc = pivcols[ri]
        # Row ri: x_pc = R_b[ri] ^ sum_{j>pc} R_A[ri, j]*x_j
        rhs = int(R_b[ri])
        if pc + 1 < n:
            rhs ^= int(np.bitwise_and(R_A[ri, pc + 1 :], x[pc + 1 :]).sum() % 2)
        x[pc] = rhs
    return x, True


def is_solvable(A: np.ndarray, b: np.ndarray) -> bool:
    _, ok = gf2_solve(A, b)
    return ok


def gf2_rank(A: np.ndarray) -> int:
    m = np.shape(A)[0]
    _, pivcols = gf2_row_echelon(A, np.zeros(m, dtype=np.uint8))
    return len(pivcols)
