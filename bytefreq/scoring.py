"""
Comparison of two byte histograms.

The frequency score is a reference-weighted average of per-byte agreement:
    score = sum_i r_i * (1 - reldiff(r_i, t_i))
where r and t are the normalized reference and target frequencies. Since the
r_i sum to 1 and every agreement term lies in [0, 1], the score lies in [0, 1].

A histogram with no observations normalizes to all-NaN (0/0), and the NaN
carries through to the score. Callers must train the reference and pass
non-empty content before treating a score as meaningful.
"""
import numpy as np


def normalize(counts: np.ndarray) -> np.ndarray:
    """
    Convert raw counts to relative frequencies.

    Args:
        counts: Array of non-negative counters

    Returns:
        float64 array summing to 1, or all NaN when counts sum to 0
    """
    total = counts.sum()
    with np.errstate(divide="ignore", invalid="ignore"):
        return counts / total


def relative_difference(a, b):
    """
    Relative difference of a and b as a value in [0, 1].

    Zero when both are exactly zero, otherwise |a - b| / max(a, b).
    Works elementwise on arrays; NaN inputs give NaN.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        diff = np.abs(a - b) / np.maximum(a, b)
    both_zero = (a == 0) & (b == 0)
    return np.where(both_zero, 0.0, diff)


def score_frequencies(reference: np.ndarray, target: np.ndarray) -> float:
    """
    Score target counts against reference counts, in [0, 1] or NaN.

    Agreement is weighted by the raw reference counts and divided by their
    total once, so a histogram scored against itself gives exactly 1.0.
    """
    r = normalize(reference)
    t = normalize(target)
    agreement = np.sum(reference * (1.0 - relative_difference(r, t)))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(agreement / reference.sum())


def _set_relative_difference(a: np.ndarray, b: np.ndarray) -> float:
    """Relative difference of two boolean membership masks, in [0, 1]."""
    if np.array_equal(a, b):
        return 0.0

    ci = int(np.count_nonzero(a & b))
    if ci == 0:
        return 1.0

    ca = int(np.count_nonzero(a))
    cb = int(np.count_nonzero(b))
    return max(ca - ci, cb - ci) / max(ca, cb)


def score_occurrences(reference: np.ndarray, target: np.ndarray) -> float:
    """
    Score which byte values occur at all, ignoring how often.

    1.0 when both histograms use the same set of byte values, 0.0 when the
    sets are disjoint or the target is empty. Extra byte values in the
    target reduce the score even if the shared ones have matching
    frequencies.
    """
    if not target.any():
        return 0.0
    return 1.0 - _set_relative_difference(reference > 0, target > 0)
