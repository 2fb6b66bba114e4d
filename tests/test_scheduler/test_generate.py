"""Tests for the template generation command line."""

from __future__ import annotations

from pathlib import Path

import json

import pytest

from scheduler import generate


@pytest.fixture(autouse=True)
def store_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(generate, "TEMPLATE_STORE_DIR", tmp_path)
    monkeypatch.setattr(generate, "ONE_REP_MAX_FILE", None)
    return tmp_path


class TestMain:
    def test_dry_run_for_category(self, store_dir: Path, capsys) -> None:
        assert generate.main(["--category", "1", "--dry-run"]) == 0
        assert "Would create 252, skipped 0, failed 0 (of 252)" in capsys.readouterr().out
        assert list(store_dir.iterdir()) == []

    def test_generate_then_status(self, store_dir: Path, capsys) -> None:
        assert generate.main(["--category", "2"]) == 0
        assert len(list(store_dir.glob("*.json"))) == 252
        capsys.readouterr()
        assert generate.main(["--status"]) == 0
        out = capsys.readouterr().out
        assert "252/1008 templates (25%), 756 remaining" in out
        assert "category 2: 252" in out

    def test_three_day_mode(self, capsys) -> None:
        assert generate.main(["--mode", "THREE_DAY", "--dry-run"]) == 0
        assert "(of 432)" in capsys.readouterr().out

    def test_preview(self, store_dir: Path, capsys) -> None:
        assert generate.main(["--preview", "1-GPP-NOVICE-w1-d1"]) == 0
        assert "Lower Body A - Foundation" in capsys.readouterr().out
        assert list(store_dir.iterdir()) == []

    def test_regenerate_then_scale(self, store_dir: Path, capsys) -> None:
        assert generate.main(["--regenerate", "2-SPP-ADVANCED-w3-d5"]) == 0
        assert (store_dir / "2-SPP-ADVANCED-w3-d5.json").exists()
        capsys.readouterr()
        assert generate.main(["--scale", "2-SPP-ADVANCED-w3-d5", "--intensity", "Low"]) == 0
        assert '"appliedIntensity": "Low"' in capsys.readouterr().out

    def test_clear_needs_yes(self, store_dir: Path) -> None:
        generate.main(["--regenerate", "1-GPP-NOVICE-w1-d1"])
        assert generate.main(["--clear"]) == 1
        assert len(list(store_dir.glob("*.json"))) == 1
        assert generate.main(["--clear", "--yes"]) == 0
        assert list(store_dir.glob("*.json")) == []

    def test_scale_with_max_option(self, capsys) -> None:
        assert generate.main(["--regenerate", "1-GPP-MODERATE-w1-d1"]) == 0
        capsys.readouterr()
        argv = [
            "--scale", "1-GPP-MODERATE-w1-d1", "--intensity", "High", "--max", "back_squat=200",
        ]
        assert generate.main(argv) == 0
        assert '"targetWeight": 175' in capsys.readouterr().out

    def test_scale_with_max_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        max_file = tmp_path / "maxes.json"
        max_file.write_text(json.dumps({"a-1": {"back_squat": 200}}))
        monkeypatch.setattr(generate, "ONE_REP_MAX_FILE", max_file)
        assert generate.main(["--regenerate", "1-GPP-MODERATE-w1-d1"]) == 0
        capsys.readouterr()
        argv = ["--scale", "1-GPP-MODERATE-w1-d1", "--intensity", "High", "--athlete", "a-1"]
        assert generate.main(argv) == 0
        assert '"targetWeight": 175' in capsys.readouterr().out

        assert generate.main(argv[:-1] + ["someone-else"]) == 0
        assert "targetWeight" not in capsys.readouterr().out

    def test_scale_with_profile(self, capsys) -> None:
        assert generate.main(["--regenerate", "2-SSP-NOVICE-w1-d1"]) == 0
        capsys.readouterr()
        argv = ["--scale", "2-SSP-NOVICE-w1-d1", "--age-group", "18+", "--experience", "8"]
        assert generate.main(argv) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["scalingContext"]["experienceBucket"] == "6+"
        assert out["scalingContext"]["categoryId"] == 2
        assert any(ex.get("tempo") == "x.x.x" for ex in out["exercises"])

    @pytest.mark.parametrize("bad", ["back_squat", "back_squat=heavy", "=200", "back_squat=-5"])
    def test_malformed_max_exits_nonzero(self, bad: str) -> None:
        generate.main(["--regenerate", "1-GPP-NOVICE-w1-d1"])
        assert generate.main(["--scale", "1-GPP-NOVICE-w1-d1", "--max", bad]) == 1

    @pytest.mark.parametrize(
        "argv",
        [["--preview", "bad-key"], ["--category", "7"], ["--scale", "1-GPP-NOVICE-w1-d1"]],
    )
    def test_engine_errors_exit_nonzero(self, argv: list[str]) -> None:
        assert generate.main(argv) == 1
