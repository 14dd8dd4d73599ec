# distance.py
# Edit distance used for spelling suggestions.

import numpy as np


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic Levenshtein distance (insert, delete, substitute each cost 1).
    Fills the full (len(a)+1) x (len(b)+1) table one vectorised row at a time.
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    b_codes = np.fromiter(map(ord, b), dtype=np.int64, count=n)
    offsets = np.arange(n + 1, dtype=np.int64)

    d = np.zeros((m + 1, n + 1), dtype=np.int64)
    d[0] = offsets
    row = np.empty(n + 1, dtype=np.int64)

    for i in range(1, m + 1):
        prev = d[i - 1]
        cost = (b_codes != ord(a[i - 1])).astype(np.int64)
        row[0] = i
        # deletion and substitution only depend on the previous row
        np.minimum(prev[1:] + 1, prev[:-1] + cost, out=row[1:])
        # insertions chain left to right: row[j] = min over k <= j of row[k] + (j - k)
        d[i] = np.minimum.accumulate(row - offsets) + offsets

    return int(d[m, n])
