"""
Byte-frequency model.
"""
import logging
from typing import Union

import numpy as np

from ..config import COUNT_DTYPE, NUM_SYMBOLS, TEXT_ENCODING
from ..exceptions import ModelFormatError
from ..locks import ReadWriteLock
from ..scoring import score_frequencies, score_occurrences

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _check_counts(counts: np.ndarray) -> np.ndarray:
    """Validate a decoded histogram and return it as a fresh int64 array."""
    if counts.shape != (NUM_SYMBOLS,):
        raise ModelFormatError(
            f"Expected {NUM_SYMBOLS} counters, got array of shape {counts.shape}"
        )
    if counts.dtype.kind not in "iu":
        raise ModelFormatError(f"Expected integer counters, got dtype {counts.dtype}")
    if (counts < 0).any():
        raise ModelFormatError("Counters must be non-negative")
    limit = int(np.iinfo(COUNT_DTYPE).max)
    if (counts > limit).any():
        raise ModelFormatError(f"Counters must not exceed {limit}")
    if sum(counts.tolist()) > limit:
        raise ModelFormatError(f"Counter total must not exceed {limit}")
    return counts.astype(COUNT_DTYPE, copy=True)


class Analyzer:
    """
    Running histogram of raw byte values.

    The model is trained by feeding it byte buffers and compares new content
    against what it has seen. It is safe to share between threads: feed and
    restore take the lock exclusively, score and save take it shared.

    Usage:
        analyzer = Analyzer()
        analyzer.feed(corpus_bytes)
        analyzer.score(b"some content")   # value in [0, 1]
        analyzer.save("model.npy")

    Scoring against an untrained analyzer, or scoring empty content, returns
    NaN rather than raising.
    """

    def __init__(self):
        self._counts = np.zeros(NUM_SYMBOLS, dtype=COUNT_DTYPE)
        self._size = 0
        self._lock = ReadWriteLock()

    @classmethod
    def from_counts(cls, counts) -> "Analyzer":
        """Build an analyzer whose histogram is a copy of `counts`."""
        analyzer = cls()
        analyzer._counts = _check_counts(np.asarray(counts))
        analyzer._size = int(analyzer._counts.sum())
        return analyzer

    @property
    def counts(self) -> np.ndarray:
        """Copy of the 256 byte counters."""
        with self._lock.read():
            return self._counts.copy()

    @property
    def size(self) -> int:
        """Total number of bytes observed."""
        with self._lock.read():
            return self._size

    def feed(self, contents: BytesLike) -> None:
        """
        Add the bytes of `contents` to the histogram.

        Multiple calls accumulate; feeding A then B is the same as feeding B
        then A, or A + B at once.
        """
        data = np.frombuffer(contents, dtype=np.uint8)
        if data.size == 0:
            return
        observed = np.bincount(data, minlength=NUM_SYMBOLS)

        with self._lock.write():
            self._counts += observed
            self._size += int(data.size)

    def score(self, contents: BytesLike) -> float:
        """
        Score how closely `contents` matches the trained distribution.

        Returns:
            Value in [0, 1], or NaN if either side has no observations
        """
        target = Analyzer()
        target.feed(contents)

        with self._lock.read():
            return score_frequencies(self._counts, target._counts)

    def score_string(
        self, text: str, encoding: str = TEXT_ENCODING, errors: str = "surrogatepass"
    ) -> float:
        """
        Score the encoded bytes of `text`.

        Lone surrogates are encoded as-is rather than rejected; with an
        encoding that cannot represent them, the codec's UnicodeEncodeError
        propagates.
        """
        return self.score(text.encode(encoding, errors))

    def score_occurrences(self, contents: BytesLike) -> float:
        """
        Score whether `contents` uses the same set of byte values.

        Returns:
            1.0 for identical sets, 0.0 for disjoint sets or empty content
        """
        target = Analyzer()
        target.feed(contents)

        with self._lock.read():
            return score_occurrences(self._counts, target._counts)

    def save(self, path) -> None:
        """Save counts to `path`, creating or truncating it."""
        with open(path, "wb") as f:
            with self._lock.read():
                np.save(f, self._counts, allow_pickle=False)
                logger.debug("Saved %d observed bytes to %s", self._size, path)

    def restore(self, path) -> None:
        """
        Replace the histogram with counts previously saved at `path`.

        Raises:
            OSError: If the file cannot be opened
            ValueError: If the file is not a readable .npy array
            ModelFormatError: If the array is not 256 non-negative integers

        The current state is kept if any of these is raised.
        """
        with open(path, "rb") as f:
            with self._lock.write():
                counts = _check_counts(np.lib.format.read_array(f, allow_pickle=False))
                self._counts = counts
                self._size = int(counts.sum())
                logger.debug("Restored %d observed bytes from %s", self._size, path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"
