"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from notefinder.cli import app

from generate_test_audio import generate_sine_wave, write_wav

runner = CliRunner()


class TestResolveCommand:
    """Tests for `notefinder resolve`."""

    def test_single_frequency(self):
        result = runner.invoke(app, ["resolve", "440"])
        assert result.exit_code == 0, result.output
        assert "A4" in result.output
        assert "in tune" in result.output

    def test_several_frequencies(self):
        result = runner.invoke(app, ["resolve", "82.41", "110", "146.83"])
        assert result.exit_code == 0, result.output
        for name in ("E2", "A2", "D3"):
            assert name in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["resolve", "430", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data[0]["pitch_name"] == "A4"
        assert data[0]["direction"] == "flat"
        assert data[0]["percent_diff"] == pytest.approx(-40.49, abs=0.01)

    def test_json_nan_is_null(self):
        result = runner.invoke(app, ["resolve", "nan", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data[0]["percent_diff"] is None
        assert data[0]["direction"] == "unknown"

    def test_out_of_range_warns(self):
        result = runner.invoke(app, ["resolve", "8000"])
        assert result.exit_code == 0, result.output
        assert "Warning" in result.output

    def test_strict_rejects_out_of_range(self):
        result = runner.invoke(app, ["resolve", "8000", "--strict"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_tie_break(self):
        result = runner.invoke(app, ["resolve", "440", "--tie-break", "median"])
        assert result.exit_code == 1
        assert "Unknown tie_break" in result.output


class TestTableCommand:
    """Tests for `notefinder table`."""

    def test_lists_notes(self):
        result = runner.invoke(app, ["table"])
        assert result.exit_code == 0, result.output
        assert "F8" in result.output
        assert "A4" in result.output
        assert "C0" in result.output


class TestDetectCommand:
    """Tests for `notefinder detect`."""

    @pytest.fixture
    def a4_wav(self, tmp_path):
        return write_wav(str(tmp_path / "a4.wav"), generate_sine_wave(440.0, 1.0))

    def test_detect_sine(self, a4_wav):
        result = runner.invoke(app, ["detect", a4_wav, "--method", "yin"])
        assert result.exit_code == 0, result.output
        assert "A4" in result.output

    def test_detect_json_frames(self, a4_wav):
        result = runner.invoke(app, ["detect", a4_wav, "-m", "yin", "--frames", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["pitch_name"] == "A4"
        assert len(data["frames"]) > 0

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["detect", str(tmp_path / "missing.wav")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_unknown_method(self, a4_wav):
        result = runner.invoke(app, ["detect", a4_wav, "--method", "crepe"])
        assert result.exit_code == 1
        assert "Unknown pitch method" in result.output
