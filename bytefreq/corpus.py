"""
Corpus readers that turn files and datasets into byte buffers for training.
"""
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .config import (
    DATASET_CONFIG, DATASET_NAME, DATASET_SPLIT, READ_CHUNK_SIZE,
    TEXT_ENCODING, TEXT_FIELD,
)


def collect_files(paths: Iterable) -> List[Path]:
    """
    Expand paths into a sorted list of files.

    Directories are walked recursively; hidden files and directories are skipped.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    files = []
    for path in map(Path, paths):
        if path.is_dir():
            for f in sorted(path.rglob("*")):
                rel = f.relative_to(path)
                if f.is_file() and not any(part.startswith(".") for part in rel.parts):
                    files.append(f)
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")
    return files


def iter_file_chunks(path, chunk_size: int = READ_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the contents of a file in chunks of at most `chunk_size` bytes."""
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk


def iter_dataset_texts(
    name: str = DATASET_NAME,
    config: Optional[str] = DATASET_CONFIG,
    split: str = DATASET_SPLIT,
    text_field: str = TEXT_FIELD,
    limit: Optional[int] = None,
    encoding: str = TEXT_ENCODING,
) -> Iterator[bytes]:
    """
    Yield encoded text rows from a Hugging Face dataset.

    The dataset is streamed, so only the rows consumed are downloaded.

    Args:
        name: Dataset name on the Hub
        config: Dataset configuration, or None for the default
        split: Split to read
        text_field: Column holding the text
        limit: Maximum number of rows to read
        encoding: Encoding used to turn text into bytes
    """
    from datasets import load_dataset

    ds = load_dataset(name, config, split=split, streaming=True)
    for example in islice(ds, limit):
        text = example[text_field]
        if text:
            yield text.encode(encoding)
