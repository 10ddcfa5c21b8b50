import numpy as np
import pytest

from bytefreq import Analyzer


@pytest.fixture
def abc_analyzer():
    """An analyzer trained on three each of 'a', 'b' and 'c'."""
    analyzer = Analyzer()
    analyzer.feed(b"aaabbbccc")
    return analyzer


@pytest.fixture
def random_bytes():
    """Deterministic uniformly random binary content."""
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=4096, dtype=np.uint8).tobytes()


@pytest.fixture
def model_path(tmp_path, abc_analyzer):
    """Path of a saved copy of abc_analyzer."""
    path = tmp_path / "model.npy"
    abc_analyzer.save(path)
    return path
