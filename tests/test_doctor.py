"""Tests for the ``tubefetch doctor`` command (cli/doctor.py).

External lookups (ffmpeg, yt-dlp) are mocked — no system dependency,
no internet.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tubefetch.cli import exit_codes
from tubefetch.exceptions import ToolStagingError
from tubefetch.infra.ffmpeg_detector import FfmpegStatus


def _ffmpeg_found(colocated: bool = False) -> FfmpegStatus:
    return FfmpegStatus(
        found=True,
        path=Path("/usr/bin/ffmpeg"),
        colocated=colocated,
        install_commands=(),
    )


def _ffmpeg_missing() -> FfmpegStatus:
    return FfmpegStatus(
        found=False,
        path=None,
        colocated=False,
        install_commands=("brew install ffmpeg",),
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from tubefetch.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestYtdlpCheck:
    @patch("tubefetch.cli.doctor.find_tool", return_value=["/opt/yt-dlp"])
    def test_found(self, _locate: MagicMock) -> None:
        from tubefetch.cli.doctor import _ytdlp_check

        label, value, status = _ytdlp_check()
        assert label == "yt-dlp"
        assert value == "/opt/yt-dlp"
        assert "OK" in status

    @patch("tubefetch.cli.doctor.find_tool", side_effect=ToolStagingError("missing"))
    def test_missing(self, _locate: MagicMock) -> None:
        from tubefetch.cli.doctor import _ytdlp_check

        _label, value, status = _ytdlp_check()
        assert value == "not found"
        assert "FAIL" in status

    @patch("tubefetch.cli.doctor.find_tool", return_value=["/x"])
    def test_override_forwarded(self, mock_locate: MagicMock) -> None:
        from tubefetch.cli.doctor import _ytdlp_check

        _ytdlp_check("/custom/yt-dlp")
        mock_locate.assert_called_once_with("/custom/yt-dlp")

    def test_frozen_build_is_not_staged(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from tubefetch.cli.doctor import _ytdlp_check
        from tubefetch.infra.tool_locator import tool_name

        bundle = tmp_path / "bundle"
        bundle.mkdir()
        (bundle / tool_name()).write_bytes(b"bundled")
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "_MEIPASS", str(bundle), raising=False)

        _label, value, status = _ytdlp_check()

        assert value == str(bundle / tool_name())
        assert "OK" in status
        assert list(work.iterdir()) == []


class TestFfmpegCheck:
    def test_found(self) -> None:
        from tubefetch.cli.doctor import _ffmpeg_check

        _label, value, status = _ffmpeg_check(_ffmpeg_found())
        assert "OK" in status
        assert "next to program" not in value

    def test_colocated_is_marked(self) -> None:
        from tubefetch.cli.doctor import _ffmpeg_check

        _label, value, _status = _ffmpeg_check(_ffmpeg_found(colocated=True))
        assert "next to program" in value

    def test_missing_is_warning(self) -> None:
        from tubefetch.cli.doctor import _ffmpeg_check

        _label, _value, status = _ffmpeg_check(_ffmpeg_missing())
        assert "WARN" in status


class TestOsCheck:
    @patch("tubefetch.cli.doctor.platform.machine", return_value="arm64")
    @patch("tubefetch.cli.doctor.platform.release", return_value="23.4.0")
    @patch("tubefetch.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(self, *_mocks: MagicMock) -> None:
        from tubefetch.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("tubefetch.cli.doctor.find_tool", return_value=["/opt/yt-dlp"])
    @patch("tubefetch.cli.doctor.detect_ffmpeg", return_value=_ffmpeg_found())
    def test_all_pass_returns_success(self, *_mocks: MagicMock) -> None:
        from tubefetch.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch("tubefetch.cli.doctor.find_tool", return_value=["/opt/yt-dlp"])
    @patch("tubefetch.cli.doctor.detect_ffmpeg", return_value=_ffmpeg_missing())
    def test_ffmpeg_missing_still_succeeds(self, *_mocks: MagicMock) -> None:
        from tubefetch.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.SUCCESS

    @patch("tubefetch.cli.doctor.find_tool", side_effect=ToolStagingError("missing"))
    @patch("tubefetch.cli.doctor.detect_ffmpeg", return_value=_ffmpeg_found())
    def test_missing_tool_fails(self, *_mocks: MagicMock) -> None:
        from tubefetch.cli.doctor import run_doctor

        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("tubefetch.cli.doctor.find_tool", return_value=["/opt/yt-dlp"])
    @patch("tubefetch.cli.doctor.detect_ffmpeg", return_value=_ffmpeg_missing())
    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self,
        _detect: MagicMock,
        _locate: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from tubefetch.cli.doctor import run_doctor

        run_doctor()
        err = capsys.readouterr().err
        assert "tubefetch doctor" in err
        assert "/opt/yt-dlp" in err
        assert "brew install ffmpeg" in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("tubefetch.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches_with_tool(self, mock_run: MagicMock) -> None:
        from tubefetch.cli.app import main

        assert main(["doctor", "--tool", "/opt/yt-dlp"]) == exit_codes.SUCCESS
        mock_run.assert_called_once_with("/opt/yt-dlp")

    @patch("tubefetch.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, _mock_run: MagicMock) -> None:
        from tubefetch.cli.app import main

        assert main(["DOCTOR"]) == exit_codes.GENERAL_ERROR
