"""Reduced generalized eigenproblem behind the Taubin conic fit."""

import numpy as np


def _pivot_order(diagonal):
    """Row order chosen by diagonal pivoting on the original diagonal."""
    magnitudes = np.abs(np.asarray(diagonal, dtype=float))
    order = np.arange(len(magnitudes))
    for k in range(len(magnitudes)):
        biggest = k + int(np.argmax(magnitudes[k:]))
        if biggest != k:
            magnitudes[[k, biggest]] = magnitudes[[biggest, k]]
            order[[k, biggest]] = order[[biggest, k]]
    return order


def _ldlt(matrix):
    """Pivoted LDL^T factorization; returns the factors in pivoted order."""
    order = _pivot_order(np.diag(matrix))
    permuted = matrix[np.ix_(order, order)]
    size = len(permuted)
    lower = np.eye(size)
    diagonal = np.zeros(size)
    for k in range(size):
        row = lower[k, :k]
        scaled = diagonal[:k] * row
        diagonal[k] = permuted[k, k] - row @ scaled
        column = permuted[k + 1:, k] - lower[k + 1:, :k] @ scaled
        if diagonal[k] != 0:
            lower[k + 1:, k] = column / diagonal[k]
        elif k == 0 or column.any():
            raise ValueError(
                "LDLT decomposition failed. Ensure N is positive semidefinite."
            )
    return lower, diagonal


def _factor(n, tolerance):
    """Split N into a scaled factor of its range and a complementary basis."""
    lower, diagonal = _ldlt(n)
    rank = int(np.count_nonzero(np.abs(diagonal) > tolerance))
    with np.errstate(invalid="ignore"):
        range_part = lower[:, :rank] * np.sqrt(diagonal[:rank])
    complement = np.eye(len(n))[:, rank:]
    return range_part, complement


def _blocks(h, size):
    """Blocks H1, H2, H3 of the transformed matrix for a leading block of `size`."""
    rows, cols = h.shape
    if rows != cols:
        raise ValueError("Matrix H must be square.")
    if size >= rows or size <= 0:
        raise ValueError("Invalid block size h.")
    h1 = h[size:, size:]
    if np.linalg.det(h1) == 0:
        h2 = np.zeros((size, rows - size))
        h3 = h[:size, :size]
    else:
        h2 = h[:size, size:] @ np.linalg.inv(h1)
        h3 = h[:size, :size] - h2 @ h1 @ h2.T
    return h1, h2, h3


def solve(m, n, tolerance=1e-8):
    """Vector F minimizing F^T M F subject to the constraint given by N."""
    m = np.asarray(m, dtype=float)
    n = np.asarray(n, dtype=float)
    if n.ndim != 2 or n.shape[0] != n.shape[1]:
        raise ValueError("Matrix N must be square.")
    if m.shape != n.shape:
        raise ValueError("Matrices M and N must have the same shape.")
    range_part, complement = _factor(n, tolerance)
    size = range_part.shape[1]
    inverse = np.linalg.inv(np.hstack([range_part, complement]))
    transformed = inverse @ m @ inverse.T
    _, h2, h3 = _blocks(transformed, size)
    try:
        _, vectors = np.linalg.eigh(h3)
    except np.linalg.LinAlgError as error:
        raise RuntimeError("Reduced generalized eigenproblem failed") from error
    u1 = vectors[:, 0]
    u2 = -u1 @ h2
    return np.concatenate([u1, u2]) @ inverse