"""Tests for the interactive prompt sequence (cli/prompts.py).

``questionary`` is replaced by a fake that replays scripted answers —
no terminal interaction.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tubefetch.cli.prompts import collect_session_input
from tubefetch.exceptions import InvalidURLError


def _scripted(*answers: str | None) -> tuple[MagicMock, list[str]]:
    """Return a fake questionary module plus the list of asked questions."""
    asked: list[str] = []
    queue = list(answers)

    def _text(message: str, default: str = "") -> MagicMock:
        asked.append(message)
        question = MagicMock()
        question.unsafe_ask.return_value = queue.pop(0)
        return question

    fake = MagicMock()
    fake.text.side_effect = _text
    return fake, asked


def _collect(fake: MagicMock, url: str | None = None, cwd: Path | None = None):  # type: ignore[no-untyped-def]
    with patch("tubefetch.cli.prompts._import_questionary", return_value=fake):
        return collect_session_input(url, cwd=cwd)


class TestCollectSessionInput:
    def test_mp4_sequence(self, tmp_path: Path) -> None:
        fake, asked = _scripted(
            "https://www.youtube.com/watch?v=abc123&list=xyz",
            "mp4",
            "720P",
            "",
        )

        session = _collect(fake, cwd=tmp_path)

        assert session.url == "https://www.youtube.com/watch?v=abc123"
        assert session.media_format == "mp4"
        assert session.quality == "720p"
        assert session.folder == tmp_path / "downloaded"
        assert len(asked) == 4
        assert "URL" in asked[0]
        assert "Quality" in asked[2]

    def test_mp3_skips_quality(self, tmp_path: Path) -> None:
        fake, asked = _scripted("https://youtu.be/x?v=abc123", "MP3", "music")

        session = _collect(fake, cwd=tmp_path)

        assert session.media_format == "mp3"
        assert session.quality == ""
        assert session.folder == tmp_path / "music"
        assert not any("Quality" in q for q in asked)

    def test_unknown_format_becomes_mp4(self, tmp_path: Path) -> None:
        fake, _ = _scripted("https://example.com/v", "anything-else", "", "")
        session = _collect(fake, cwd=tmp_path)
        assert session.media_format == "mp4"
        assert session.url == "https://example.com/v"

    def test_url_argument_skips_url_prompt(self, tmp_path: Path) -> None:
        fake, asked = _scripted("mp3", "")
        session = _collect(fake, url="https://www.youtube.com/watch?v=abc123", cwd=tmp_path)
        assert session.url == "https://www.youtube.com/watch?v=abc123"
        assert len(asked) == 2

    def test_invalid_url_aborts_immediately(self, tmp_path: Path) -> None:
        fake, asked = _scripted("not a url", "mp4", "", "")
        with pytest.raises(InvalidURLError):
            _collect(fake, cwd=tmp_path)
        assert len(asked) == 1

    def test_none_answer_treated_as_empty(self, tmp_path: Path) -> None:
        fake, _ = _scripted("https://example.com/v", None, None, None)
        session = _collect(fake, cwd=tmp_path)
        assert session.media_format == "mp4"
        assert session.quality == ""
        assert session.folder == tmp_path / "downloaded"

    def test_prompts_do_not_create_folder(self, tmp_path: Path) -> None:
        fake, _ = _scripted("https://example.com/v", "mp4", "", "")
        session = _collect(fake, cwd=tmp_path)
        assert not session.folder.exists()

    def test_ctrl_c_propagates(self, tmp_path: Path) -> None:
        fake = MagicMock()
        fake.text.return_value.unsafe_ask.side_effect = KeyboardInterrupt
        with pytest.raises(KeyboardInterrupt):
            _collect(fake, cwd=tmp_path)
