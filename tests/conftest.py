# tests/conftest.py
from pathlib import Path
import pytest

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:00:10,000 --> 00:00:12,000\n"
    "{\\an8}Top line\n"
    "second line\n"
    "\n"
    "3\n"
    "00:00:30,000 --> 00:00:31,500  X1:201 X2:516 Y1:397 Y2:423\n"
    "Boxed\n"
    "\n"
)

SAMPLE_ASS = (
    "[Script Info]\n"
    "ScriptType: v4.00+\n"
    "\n"
    "[V4+ Styles]\n"
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, "
    "Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, "
    "Shadow, Alignment, MarginL, MarginR, MarginV, Encoding\n"
    "Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H64000000,0,0,0,0,100,100,0,0,1,2,0,2,10,10,10,1\n"
    "\n"
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
    "Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,Hello\n"
)


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def tmp_repo(tmp_path: Path):
    """Simulated workspace: one SRT, one ASS and an (empty) video file."""
    root = tmp_path
    srt = root / "movie.srt"
    srt.write_text(SAMPLE_SRT, encoding="utf-8", newline="")
    ass = root / "movie_styled.ass"
    ass.write_text(SAMPLE_ASS, encoding="utf-8")
    video = root / "movie.mkv"
    video.write_bytes(b"")  # filename only; ffmpeg is faked
    return {
        "root": root,
        "srt": srt,
        "ass": ass,
        "video": video,
        "settings": root / "settings.json",
    }


@pytest.fixture
def base_config():
    """Plain dict with the keys AppConfig provides."""
    return {
        'ffmpeg_path': '',
        'extract_subtitle_stream': 0,
        'make_backup': True,
        'backup_suffix': '.bak',
        'output_encoding': '',
        'log_level': 'WARNING',
        'log_compact': True,
        'log_error_tail': 20,
        'log_tail_lines': 0,
    }


@pytest.fixture
def capture_log():
    lines = []
    def cb(msg: str):
        lines.append(msg)
    return lines, cb


@pytest.fixture
def fake_runner(monkeypatch):
    """Patch CommandRunner used by the pipeline to FakeCommandRunner; returns the list of created runners."""
    from tests.fakes import FakeCommandRunner
    import subadjust_core.pipeline as pl

    created = []
    def factory(config, log_callback):
        runner = FakeCommandRunner(config, log_callback)
        created.append(runner)
        return runner
    monkeypatch.setattr(pl, "CommandRunner", factory)
    return created
