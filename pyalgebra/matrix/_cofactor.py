"""
Cofactor-expansion kernels over square numpy blocks.

These work on raw float64/complex128 arrays and do no validation; the
matrix classes check shapes before calling in. Every kernel is O(n!).

The determinant of a 0x0 block is 1 (the empty product). This is only
reachable through minors of a 1x1 block, where it makes the adjugate of
[[a]] equal to [[1]].
"""

import numpy as np


def minor_block(block: np.ndarray, row: int, col: int) -> np.ndarray:
    """block with one row and one column removed."""
    return np.delete(np.delete(block, row, axis=0), col, axis=1)


def determinant(block: np.ndarray):
    """Determinant by recursive first-row cofactor expansion."""
    n = block.shape[0]
    if n == 0:
        return block.dtype.type(1)
    if n == 1:
        return block[0, 0]
    if n == 2:
        return block[0, 0] * block[1, 1] - block[0, 1] * block[1, 0]

    total = block.dtype.type(0)
    for c in range(n):
        coefficient = block[0, c]
        if coefficient == 0:
            continue
        term = coefficient * determinant(minor_block(block, 0, c))
        if c % 2 == 0:
            total = total + term
        else:
            total = total - term
    return total


def minors(block: np.ndarray) -> np.ndarray:
    """Matrix whose (r, c) cell is the determinant of minor_block(block, r, c)."""
    n = block.shape[0]
    out = np.zeros_like(block)
    for r in range(n):
        for c in range(n):
            out[r, c] = determinant(minor_block(block, r, c))
    return out


def cofactor_signs(n: int) -> np.ndarray:
    """Checkerboard of +1/-1 with +1 at (0, 0)."""
    index_sum = np.add.outer(np.arange(n), np.arange(n))
    return np.where(index_sum % 2 == 0, 1.0, -1.0)


def cofactors(block: np.ndarray) -> np.ndarray:
    """Matrix of minors with the checkerboard sign pattern applied."""
    return minors(block) * cofactor_signs(block.shape[0])
