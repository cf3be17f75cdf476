from __future__ import annotations

from pathlib import Path

import pytest

from sanchez_files.cli import main


def test_main_lists_resolved_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "in"
    src.mkdir()
    (src / "a.jpg").write_bytes(b"x")
    out = tmp_path / "out"

    code = main(["-s", str(src), "-o", str(out), "--list"])

    assert code == 0
    assert out.is_dir()
    assert capsys.readouterr().out.strip() == f"{src / 'a.jpg'} -> {out / 'a-fc.jpg'}"


def test_main_flags_override_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[source]\npath = "ignored.jpg"\n\n[output]\npath = "ignored-out.jpg"\n',
        encoding="utf-8",
    )
    target = tmp_path / "result.jpg"

    code = main(["--config", str(config_path), "-s", str(tmp_path / "a.jpg"), "-o", str(target), "--list"])

    assert code == 0
    assert capsys.readouterr().out.strip() == f"{tmp_path / 'a.jpg'} -> {target}"


def test_main_reports_missing_glob_base(tmp_path: Path) -> None:
    code = main(["-s", str(tmp_path / "missing" / "*.jpg"), "-o", str(tmp_path / "out")])
    assert code == 1


def test_main_reports_bad_config(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "nope.toml")]) == 1
    assert main(["-s", "a.jpg", "-o", "b.jpg", "--tint", "nothex"]) == 1


def test_main_requires_output_for_single_file(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-s", "a.jpg", "--list"]) == 1
    assert capsys.readouterr().out == ""


def test_main_no_batch_overrides_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "in"
    src.mkdir()
    (src / "a.jpg").write_bytes(b"x")
    target = tmp_path / "result.jpg"
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f'[source]\npath = "{src.as_posix()}"\nbatch = true\n\n[output]\npath = "{target.as_posix()}"\n',
        encoding="utf-8",
    )

    code = main(["--config", str(config_path), "--no-batch", "--list"])

    assert code == 0
    assert capsys.readouterr().out.strip() == f"{src} -> {target}"
