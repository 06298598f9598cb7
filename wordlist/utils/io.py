"""I/O utilities with atomic writes."""

import json
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

from wordlist.models import Concordance


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps the final move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """
    Write JSON file atomically.

    Args:
        path: Destination path
        data: Data to serialize
        indent: JSON indentation
    """

    def _write(tmp_path: Path) -> None:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)

    atomic_write(path, _write)


def read_json(path: Path) -> Any:
    """Read JSON file."""
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def read_text(path: Path) -> str:
    """
    Read a marked-up text file.

    A UTF-8 byte order mark, common in Paratext exports, is dropped.
    """
    return Path(path).read_text(encoding="utf-8-sig")


def write_concordance(path: Path, concordance: Concordance) -> None:
    """Write a concordance as JSON."""
    write_json(path, concordance.to_dict())


def read_concordance(path: Path) -> Concordance:
    """Read a concordance JSON file written by write_concordance."""
    return Concordance.from_dict(read_json(path))
