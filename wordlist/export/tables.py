"""Export concordances as occurrence and frequency tables."""

import logging
from pathlib import Path

import pandas as pd

from wordlist.models import Concordance, ScriptureReference
from wordlist.utils.io import atomic_write


OCCURRENCE_COLUMNS = ["word", "book_num", "chapter_num", "verse_num", "occurrence", "snippet"]
FREQUENCY_COLUMNS = ["word", "count"]


def occurrences_frame(concordance: Concordance) -> pd.DataFrame:
    """
    One row per recorded occurrence, in concordance order.

    ``occurrence`` is the 1-based ordinal of the word within its verse.
    """
    rows = []
    for entry in concordance:
        seen: dict[ScriptureReference, int] = {}
        for location, snippet in entry.occurrences():
            seen[location] = seen.get(location, 0) + 1
            rows.append(
                {
                    "word": entry.word,
                    "book_num": location.book_num,
                    "chapter_num": location.chapter_num,
                    "verse_num": location.verse_num,
                    "occurrence": seen[location],
                    "snippet": snippet,
                }
            )

    return pd.DataFrame(rows, columns=OCCURRENCE_COLUMNS)


def frequencies_frame(concordance: Concordance) -> pd.DataFrame:
    """Word counts, most frequent first; ties keep first-appearance order."""
    df = pd.DataFrame(
        [{"word": entry.word, "count": entry.count} for entry in concordance],
        columns=FREQUENCY_COLUMNS,
    )
    # Stable sort keeps first-appearance order among equal counts
    return df.sort_values("count", ascending=False, kind="mergesort").reset_index(drop=True)


def write_table(df: pd.DataFrame, path: Path, compression: str = "zstd") -> Path:
    """
    Write a DataFrame atomically as Parquet or CSV, chosen by suffix.

    Args:
        df: Table to write
        path: Output path (.parquet or .csv)
        compression: Parquet compression codec

    Returns:
        Path written
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".parquet":

        def _write(tmp_path: Path) -> None:
            df.to_parquet(tmp_path, engine="pyarrow", compression=compression, index=False)

    elif suffix == ".csv":

        def _write(tmp_path: Path) -> None:
            df.to_csv(tmp_path, index=False, encoding="utf-8")

    else:
        raise ValueError(f"Unsupported table format {suffix!r} (use .parquet or .csv)")

    atomic_write(path, _write)
    return path


def export_occurrences(
    concordance: Concordance,
    output_path: Path,
    logger: logging.Logger,
) -> Path:
    """
    Export the occurrence table.

    Args:
        concordance: Concordance to export
        output_path: Output path (.parquet or .csv)
        logger: Logger instance

    Returns:
        Path to generated table
    """
    df = occurrences_frame(concordance)
    write_table(df, output_path)
    logger.info(f"Exported {len(df)} occurrences of {len(concordance)} words to {output_path}")
    return output_path


def export_frequencies(
    concordance: Concordance,
    output_path: Path,
    logger: logging.Logger,
) -> Path:
    """
    Export the word frequency table.

    Args:
        concordance: Concordance to export
        output_path: Output path (.parquet or .csv)
        logger: Logger instance

    Returns:
        Path to generated table
    """
    df = frequencies_frame(concordance)
    write_table(df, output_path)
    logger.info(f"Exported {len(df)} word frequencies to {output_path}")
    return output_path
