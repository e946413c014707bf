import numpy as np

from .division import require_field
from .errors import ConstructionError

def sylvester_matrix(ring, p, q):
    """Sylvester matrix of two coefficient lists, each highest power first."""
    m, n = len(p) - 1, len(q) - 1
    size = m + n
    matrix = np.empty((size, size), dtype=object)
    matrix.fill(ring.zero)
    for row in range(n):
        for i, c in enumerate(p):
            matrix[row, row + i] = c
    for row in range(m):
        for i, c in enumerate(q):
            matrix[n + row, row + i] = c
    return matrix

def determinant(field, matrix):
    """Exact determinant by Gaussian elimination over `field`."""
    require_field(field)
    a = np.array(matrix, dtype=object)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ConstructionError(f"matrix of shape {a.shape} is not square")
    for index in np.ndindex(a.shape):
        a[index] = field.coerce(a[index])
    n = a.shape[0]
    det = field.one
    for col in range(n):
        pivot = next((r for r in range(col, n) if not field.is_zero(a[r, col])), None)
        if pivot is None:
            return field.zero
        if pivot != col:
            a[[col, pivot]] = a[[pivot, col]]
            det = field.neg(det)
        p = a[col, col]
        det = field.mul(det, p)
        for r in range(col + 1, n):
            f = field.div(a[r, col], p)
            if field.is_zero(f):
                continue
            for c in range(col, n):
                a[r, c] = field.sub(a[r, c], field.mul(f, a[col, c]))
    return det
