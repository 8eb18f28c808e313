from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture(name="runner")
def cli_runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[CliRunner]:
    for name in ("PRESETS_DIR", "RULES_DIR", "LOG_LEVEL", "DEFAULT_DOMAIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("COLUMNS", "200")
    yield CliRunner()

    # handlers configured by the CLI point at streams the runner has closed
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.name in ("file", "stderr"):
            root.removeHandler(handler)
            handler.close()


def _invoke(runner: CliRunner, tmp_path: Path, *args: str):
    return runner.invoke(cli, ["--env-file", str(tmp_path / "missing.env"), *args])


def test_classify_article(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "classify", "如何提升知识管理效率")
    assert result.exit_code == 0, result.output
    assert "notion" in result.output


def test_classify_social(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "classify", "--domain", "social", "AI 工具效率翻倍")
    assert result.exit_code == 0, result.output
    assert "tech" in result.output


def test_presets_lists_catalog(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "presets", "--domain", "social", "--layouts")
    assert result.exit_code == 0, result.output
    for layout_id in ("sparse", "balanced", "comparison"):
        assert layout_id in result.output


def test_presets_without_layouts(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "presets", "--domain", "article", "--layouts")
    assert result.exit_code == 0
    assert "no layouts" in result.output


def test_show_preset(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "show", "--domain", "article", "blueprint")
    assert result.exit_code == 0, result.output
    assert "#1E3A5F" in result.output


def test_show_unknown_preset(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "show", "--domain", "article", "nope")
    assert result.exit_code == 2
    assert "Unknown preset" in result.output


def test_plan_social_article(runner: CliRunner, tmp_path: Path) -> None:
    article = tmp_path / "post.md"
    article.write_text("iPhone vs Android 对比，AI 工具效率", encoding="utf-8")
    result = _invoke(runner, tmp_path, "plan", "--domain", "social", str(article))
    assert result.exit_code == 0, result.output
    assert "tech" in result.output
    assert "comparison" in result.output


def test_plan_manual_body_count(runner: CliRunner, tmp_path: Path) -> None:
    article = tmp_path / "post.md"
    article.write_text("短文", encoding="utf-8")
    result = _invoke(runner, tmp_path, "plan", "--body-count", "6", "--style", "warm", str(article))
    assert result.exit_code == 0, result.output
    assert "warm" in result.output
    assert "6" in result.output


def test_check_shipped_catalogs(runner: CliRunner, tmp_path: Path) -> None:
    result = _invoke(runner, tmp_path, "check")
    assert result.exit_code == 0, result.output
    assert result.output.count("ok") == 3


def test_missing_catalog_directory(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRESETS_DIR", str(tmp_path / "nowhere"))
    result = _invoke(runner, tmp_path, "classify", "text")
    assert result.exit_code == 1
    assert "Missing preset file" in result.output


def test_malformed_rules_file(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    rules_dir = tmp_path / "rules"
    rules_dir.mkdir()
    (rules_dir / "article.json").write_text(
        json.dumps({"fallback": "notion", "rules": [{"keywords": ["a"]}]}), encoding="utf-8"
    )
    monkeypatch.setenv("RULES_DIR", str(rules_dir))
    result = _invoke(runner, tmp_path, "classify", "abc")
    assert result.exit_code == 1
    assert "rule without" in result.output
