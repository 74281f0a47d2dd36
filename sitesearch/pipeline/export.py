"""Newline-delimited JSON export of search documents."""

import json
from pathlib import Path
from typing import Iterable, Iterator

from sitesearch.domain.page import SearchDocument


def write_jsonl(documents: Iterable[SearchDocument], path: str) -> int:
    """Write one document per line.

    Args:
        documents: Documents to export
        path: Output JSONL path (parent directories are created)

    Returns:
        Number of documents written
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with open(output, "w", encoding="utf-8") as f:
        for document in documents:
            f.write(json.dumps(document.to_dict(), ensure_ascii=False))
            f.write("\n")
            written += 1

    return written


def read_jsonl(path: str) -> Iterator[SearchDocument]:
    """Load documents from a JSONL file (streaming)."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                yield SearchDocument.from_dict(json.loads(line))
