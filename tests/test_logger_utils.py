# tests/test_logger_utils.py
from markov_textgen.utils.logger_utils import Log


def test_write_appends_levelled_lines(tmp_path):
    path = tmp_path / "logs" / "run.log"
    log = Log(path=str(path), echo=False)
    log.info("trained")
    log.error("boom")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "INFO" in lines[0] and lines[0].endswith("| trained")
    assert "ERROR" in lines[1] and lines[1].endswith("| boom")


def test_echo_without_color(tmp_path, capsys):
    log = Log(path=str(tmp_path / "run.log"), use_color=False, echo=True)
    log.warning("careful")
    out = capsys.readouterr().out
    assert "WARNING" in out and "careful" in out
    assert "\033[" not in out


def test_time_block_records_metric(tmp_path, capsys):
    path = tmp_path / "run.log"
    log = Log(path=str(path), echo=False)
    with log.time_block("train") as t:
        sum(range(1000))
    assert t.elapsed >= 0.0
    assert "train done:" in path.read_text(encoding="utf-8")
    assert capsys.readouterr().out == ""


def test_debug_and_warning_levels(tmp_path):
    path = tmp_path / "run.log"
    log = Log(path=str(path), echo=False)
    log.debug("details")
    log.warning("odd input")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert "DEBUG" in lines[0] and lines[0].endswith("| details")
    assert "WARNING" in lines[1] and lines[1].endswith("| odd input")
