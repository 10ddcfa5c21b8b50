"""
Configuration for the byte-frequency analyzer.
"""
import os
from pathlib import Path

import numpy as np

# Paths
MODEL_DIR = Path(os.environ.get("BYTEFREQ_MODEL_DIR", Path.cwd() / "checkpoints"))
MODEL_FILE = "model.npy"

# Histogram properties
NUM_SYMBOLS = 256          # one counter per raw byte value
COUNT_DTYPE = np.int64     # persisted counter width
TEXT_ENCODING = "utf-8"    # used when scoring str input

# Presets
DEFAULT_PRESET = "english"

# Corpus loading (Hugging Face datasets)
DATASET_NAME = "wikitext"
DATASET_CONFIG = "wikitext-103-raw-v1"
DATASET_SPLIT = "train"
TEXT_FIELD = "text"

# Corpus files
READ_CHUNK_SIZE = 1 << 20  # 1 MiB per feed call when streaming files
