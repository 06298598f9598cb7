"""Integration tests for the command-line pipeline.

These tests drive the CLI end to end:
  1. Build a concordance from a marked-up book file
  2. Validate it against the schema
  3. Inspect one word
  4. Export occurrence and frequency tables
  5. Batch-build from a book list
"""

import json
import logging
from pathlib import Path
from typing import Generator

import pandas as pd
import pytest
import yaml
from click.testing import CliRunner

from wordlist.cli import cli


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def test_workspace(tmp_path: Path, sample_book_text: str) -> Path:
    """Create a temporary workspace with settings and a book file."""
    workspace = tmp_path / "wordlist_test"
    (workspace / "raw").mkdir(parents=True)
    (workspace / "raw" / "01GEN.SFM").write_text(sample_book_text, encoding="utf-8")

    settings = {
        "logging": {"level": "WARNING", "format": "pretty"},
        "paths": {"derived": str(workspace / "derived")},
        "concordance": {"context_chars": 40, "default_scope": "Book"},
    }
    (workspace / "settings.yaml").write_text(yaml.safe_dump(settings), encoding="utf-8")

    return workspace


def run(workspace: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(
        cli, ["--settings", str(workspace / "settings.yaml"), *args], obj={}
    )


def build_book(workspace: Path, *extra: str) -> Path:
    output = workspace / "derived" / "gen.json"
    result = run(
        workspace,
        "concordance", "build", str(workspace / "raw" / "01GEN.SFM"),
        "--book", "1", "--output", str(output), *extra,
    )
    assert result.exit_code == 0, result.output
    return output


class TestBuild:
    """Concordance build command."""

    def test_build_book(self, test_workspace: Path):
        output = build_book(test_workspace)
        data = json.loads(output.read_text(encoding="utf-8"))

        assert data["scope"] == "Book"
        assert data["entries"][0]["word"] == "in"
        assert len(data["entries"]) == 18

    def test_build_default_output(self, test_workspace: Path):
        result = run(
            test_workspace,
            "concordance", "build", str(test_workspace / "raw" / "01GEN.SFM"), "--book", "1",
        )

        assert result.exit_code == 0, result.output
        assert (test_workspace / "derived" / "01GEN.concordance.json").exists()
        assert "Wrote 18 words (30 occurrences)" in result.output

    def test_build_verse_scope_with_filter(self, test_workspace: Path):
        output = build_book(
            test_workspace, "--chapter", "2", "--verse", "2", "--scope", "verse", "--filter", "e",
        )
        data = json.loads(output.read_text(encoding="utf-8"))

        assert data["scope"] == "Verse"
        assert [e["word"] for e in data["entries"]] == ["the", "seventh", "rested"]

    def test_build_rejects_bad_scope(self, test_workspace: Path):
        result = run(
            test_workspace,
            "concordance", "build", str(test_workspace / "raw" / "01GEN.SFM"),
            "--book", "1", "--scope", "testament",
        )

        assert result.exit_code != 0

    def test_missing_settings(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli, ["--settings", str(tmp_path / "nope.yaml"), "concordance", "batch"], obj={}
        )

        assert result.exit_code == 1
        assert "settings.yaml not found" in result.output


class TestInspect:
    """Validate and show commands."""

    def test_validate(self, test_workspace: Path):
        output = build_book(test_workspace)
        result = run(test_workspace, "concordance", "validate", str(output))

        assert result.exit_code == 0, result.output
        assert "All validations passed" in result.output

    def test_validate_reports_errors(self, test_workspace: Path):
        output = build_book(test_workspace)
        data = json.loads(output.read_text(encoding="utf-8"))
        data["entries"][0]["snippets"] = []
        output.write_text(json.dumps(data), encoding="utf-8")

        result = run(test_workspace, "concordance", "validate", str(output))

        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_show(self, test_workspace: Path):
        output = build_book(test_workspace)
        result = run(test_workspace, "concordance", "show", str(output), "God")

        assert result.exit_code == 0, result.output
        assert "god: 2 occurrences" in result.output
        assert "1:2:2  On the seventh day GOD rested." in result.output

    def test_show_unknown_word(self, test_workspace: Path):
        output = build_book(test_workspace)
        result = run(test_workspace, "concordance", "show", str(output), "sea")

        assert result.exit_code == 1


class TestExport:
    """Table exports."""

    def test_export_occurrences_csv(self, test_workspace: Path):
        output = build_book(test_workspace)
        table = test_workspace / "exports" / "occ.csv"
        result = run(test_workspace, "export", "occurrences", str(output), "--output", str(table))

        assert result.exit_code == 0, result.output
        assert len(pd.read_csv(table)) == 30

    def test_export_frequencies_parquet(self, test_workspace: Path):
        output = build_book(test_workspace)
        table = test_workspace / "exports" / "freq.parquet"
        result = run(test_workspace, "export", "frequencies", str(output), "--output", str(table))

        assert result.exit_code == 0, result.output
        df = pd.read_parquet(table)
        assert df.iloc[0]["word"] == "the"
        assert int(df.iloc[0]["count"]) == 7

    def test_export_bad_suffix(self, test_workspace: Path):
        output = build_book(test_workspace)
        result = run(
            test_workspace, "export", "frequencies", str(output),
            "--output", str(test_workspace / "freq.txt"),
        )

        assert result.exit_code == 1
        assert "Unsupported" in result.output


class TestBatch:
    """Batch builds from a book list."""

    def test_batch(self, test_workspace: Path):
        books = {
            "books": {
                "genesis": {
                    "enabled": True,
                    "book_num": 1,
                    "path": str(test_workspace / "raw" / "01GEN.SFM"),
                },
                "exodus": {
                    "enabled": False,
                    "book_num": 2,
                    "path": str(test_workspace / "raw" / "02EXO.SFM"),
                },
                "missing": {
                    "enabled": True,
                    "book_num": 3,
                    "path": str(test_workspace / "raw" / "03LEV.SFM"),
                },
            }
        }
        books_path = test_workspace / "books.yaml"
        books_path.write_text(yaml.safe_dump(books), encoding="utf-8")

        result = run(test_workspace, "concordance", "batch", "--books", str(books_path))

        assert result.exit_code == 0, result.output
        assert (test_workspace / "derived" / "genesis.concordance.json").exists()
        assert not (test_workspace / "derived" / "exodus.concordance.json").exists()
        assert "Built 1 concordances" in result.output
        assert "Failed: 1 books" in result.output

    def test_batch_without_books(self, test_workspace: Path):
        result = run(
            test_workspace, "concordance", "batch", "--books", str(test_workspace / "none.yaml"),
        )

        assert result.exit_code == 0
        assert "No enabled books" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
