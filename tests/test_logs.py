import io
from datetime import datetime

import pytest

from cacapalavras.logs import (
    STARS,
    LogLevel,
    format_banner,
    format_log_line,
    log_to_file,
    print_error,
    print_success,
    print_warning,
)

WHEN = datetime(2024, 1, 2, 3, 4, 5)


def test_format_log_line_pinned():
    assert format_log_line(LogLevel.INFO, "hello\n", WHEN) == "[2024-01-02 03:04:05] [INFO] hello\n"


@pytest.mark.parametrize(
    "level, label",
    [(LogLevel.INFO, "INFO"), (LogLevel.WARNING, "WARNING"), (LogLevel.ERROR, "ERROR")],
)
def test_format_log_line_level_label(level, label):
    line = format_log_line(level, "msg", WHEN)
    assert f"[{label}] msg" in line


def test_format_log_line_defaults_to_now():
    line = format_log_line(LogLevel.ERROR, "x")
    assert line.startswith("[")
    assert line.endswith("] [ERROR] x")


def test_log_to_file_appends(tmp_path):
    path = tmp_path / "run.log"
    log_to_file(str(path), LogLevel.INFO, "first\n", WHEN)
    log_to_file(str(path), LogLevel.ERROR, "second\n", WHEN)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("[INFO] first")
    assert lines[1].endswith("[ERROR] second")


def test_log_to_file_unopenable_reports_on_stderr(tmp_path, capsys):
    log_to_file(str(tmp_path), LogLevel.INFO, "lost\n", WHEN)
    assert "Erro ao abrir o arquivo de log" in capsys.readouterr().err


def test_format_banner_shape():
    banner = format_banner("ERRO", 31, "falhou")
    lines = banner.splitlines()
    assert lines[0] == STARS
    assert lines[-1] == STARS
    assert "\033[1;31mERRO:\033[0m falhou" in banner


def test_print_error_disabled_writes_nothing():
    stream = io.StringIO()
    print_error("nada", enabled=False, stream=stream)
    assert stream.getvalue() == ""


def test_print_success_writes_green_banner():
    stream = io.StringIO()
    print_success("ok", stream=stream)
    assert "\033[1;32mSUCESSO:\033[0m ok" in stream.getvalue()


def test_print_warning_writes_yellow_banner():
    stream = io.StringIO()
    print_warning("cuidado", enabled=True, stream=stream)
    assert stream.getvalue() == format_banner("AVISO", 33, "cuidado")


def test_print_error_defaults_to_stdout(capsys):
    print_error("ruim")
    assert "\033[1;31mERRO:\033[0m ruim" in capsys.readouterr().out