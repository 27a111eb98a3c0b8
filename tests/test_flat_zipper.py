"""End-to-end tests for the command-line entry point."""

import json
import os
import sys
import zipfile
from pathlib import Path

import pytest
import yaml

from flatzip.flat_zipper import main


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Fixture building a small tree with a duplicate and a name collision."""
    root = tmp_path / "root"
    for rel, data in {
        "a/x.txt": b"hello",
        "b/x.txt": b"hello",
        "c/x.txt": b"world",
        "c/skip.md": b"ignored",
    }.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return root


def test_main_builds_archive(
    tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify the full run produces a flat, deduplicated archive."""
    out = tmp_path / "out.zip"
    assert main(["-o", str(out), "-r", r".*\.txt", "-p", str(tree)]) == 0

    with zipfile.ZipFile(out) as zf:
        assert sorted(zf.namelist()) == ["x.txt", "x_2.txt"]
        assert zf.read("x.txt") == b"hello"
        assert zf.read("x_2.txt") == b"world"
    assert "All done." in capsys.readouterr().out


def test_main_no_files_found(
    tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that nothing matching means no archive and a clear message."""
    out = tmp_path / "out.zip"
    assert main(["-o", str(out), "-r", r"\.jpg$", "-p", str(tree)]) == 0
    assert not out.exists()
    assert "No files found." in capsys.readouterr().out


def test_main_invalid_pattern(
    tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a malformed pattern aborts with an error status."""
    out = tmp_path / "out.zip"
    assert main(["-o", str(out), "-r", "(", "-p", str(tree)]) == 1
    assert not out.exists()
    assert "Invalid pattern" in capsys.readouterr().err


def test_main_missing_root(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a nonexistent root is fatal."""
    out = tmp_path / "out.zip"
    assert main(["-o", str(out), "-r", "x", "-p", str(tmp_path / "nope")]) == 1
    assert "Cannot list directory" in capsys.readouterr().err


def test_main_existing_output(tree: Path, tmp_path: Path) -> None:
    """Verify that an existing archive is kept unless --overwrite is passed."""
    out = tmp_path / "out.zip"
    out.write_bytes(b"previous")
    args = ["-o", str(out), "-r", "txt", "-p", str(tree)]

    assert main(args) == 1
    assert out.read_bytes() == b"previous"

    assert main([*args, "--overwrite"]) == 0
    assert zipfile.is_zipfile(out)


def test_main_dry_run_with_report(tree: Path, tmp_path: Path) -> None:
    """Verify that a dry run writes the report but no archive."""
    out = tmp_path / "out.zip"
    report = tmp_path / "report.json"
    args = ["-o", str(out), "-r", "txt", "-p", str(tree)]
    code = main([*args, "--dry-run", "--report", str(report)])
    assert code == 0
    assert not out.exists()

    content = json.loads(report.read_text(encoding="utf-8"))
    assert content["stats"]["outcome_counts"] == {
        "added": 1,
        "duplicate": 1,
        "renamed": 1,
    }


def test_main_with_config_file(tree: Path, tmp_path: Path) -> None:
    """Verify that config file settings reach the archive writer."""
    config_file = tmp_path / "flatzip.yml"
    config_file.write_text(yaml.dump({"archive": {"compression": "stored"}}))
    out = tmp_path / "out.zip"

    code = main(
        ["-o", str(out), "-r", "txt", "-p", str(tree), "--config", str(config_file)]
    )
    assert code == 0
    with zipfile.ZipFile(out) as zf:
        assert all(i.compress_type == zipfile.ZIP_STORED for i in zf.infolist())


def test_main_output_inside_tree_is_excluded(tree: Path) -> None:
    """Verify that the archive being replaced is not collected into itself."""
    out = tree / "bundle.zip"
    out.write_bytes(b"stale")
    args = ["-o", str(out), "-r", r"\.(txt|zip)$", "-p", str(tree), "--overwrite"]
    assert main(args) == 0
    with zipfile.ZipFile(out) as zf:
        assert "bundle.zip" not in zf.namelist()


@pytest.mark.skipif(
    sys.platform in {"win32", "darwin"},
    reason="filesystem requires names to be valid Unicode",
)
def test_main_undecodable_filename(tmp_path: Path) -> None:
    """Verify that a non-UTF-8 file name does not sink the other entries."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "good.txt").write_bytes(b"fine")
    (root / os.fsdecode(b"bad\xff.txt")).write_bytes(b"odd name")
    out = tmp_path / "out.zip"

    assert main(["-o", str(out), "-r", "txt", "-p", str(root)]) == 0
    with zipfile.ZipFile(out) as zf:
        assert sorted(zf.namelist()) == ["bad\\xff.txt", "good.txt"]
        assert zf.read("bad\\xff.txt") == b"odd name"


def test_main_report_in_new_directory(tree: Path, tmp_path: Path) -> None:
    """Verify that the report's parent directory is created on demand."""
    out = tmp_path / "out.zip"
    report = tmp_path / "reports" / "run.json"
    args = ["-o", str(out), "-r", "txt", "-p", str(tree), "--report", str(report)]
    assert main(args) == 0

    content = json.loads(report.read_text(encoding="utf-8"))
    assert content["meta"]["archive"] == str(out)
    assert content["errors"] == []


def test_main_unwritable_report(
    tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify that a report path that cannot be written is a clean error."""
    out = tmp_path / "out.zip"
    report = tmp_path / "taken"
    report.mkdir()
    code = main(["-o", str(out), "-r", "txt", "-p", str(tree), "--report", str(report)])
    assert code == 1
    assert "Cannot write report" in capsys.readouterr().err


def test_main_report_records_archive_failure(tree: Path, tmp_path: Path) -> None:
    """Verify that the report says why no archive was written."""
    out = tmp_path / "out.zip"
    out.write_bytes(b"previous")
    report = tmp_path / "report.json"
    code = main(["-o", str(out), "-r", "txt", "-p", str(tree), "--report", str(report)])
    assert code == 1

    content = json.loads(report.read_text(encoding="utf-8"))
    assert content["meta"]["archive"] is None
    assert any("already exists" in e for e in content["errors"])
