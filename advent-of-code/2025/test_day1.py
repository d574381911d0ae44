import contextlib
import io

import pytest

import day1
from file_errors import EXIT_FILE_ERROR, EXIT_OK, report_file_error


def test_reads_input_txt_from_working_directory(tmp_path, monkeypatch, capsys):
    (tmp_path / "input.txt").write_text("R10\n\nBOGUS\nL60\n")
    monkeypatch.chdir(tmp_path)

    assert day1.main([]) == EXIT_OK

    out, err = capsys.readouterr()
    assert out == "Password: 1\n"
    assert err == "Warning: Invalid rotation 'BOGUS': Invalid direction in 'BOGUS'\n"


def test_explicit_path_and_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")

    assert day1.main([str(path)]) == EXIT_OK

    out, err = capsys.readouterr()
    assert out == "Password: 0\n"
    assert err == ""


def test_verbose_trace(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("R25\nL75\n")

    assert day1.main(["-v", str(path)]) == EXIT_OK

    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        "The dial starts by pointing at 50",
        "After R25: position = 75 (zero hits: 0)",
        "After L75: position = 0 (zero hits: 1)",
        "Password: 1",
    ]


def test_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert day1.main([]) == EXIT_FILE_ERROR

    out, err = capsys.readouterr()
    assert out == ""
    assert err.splitlines() == [
        "Error: File 'input.txt' not found",
        "Make sure you're running from the correct directory",
    ]


def test_permission_denied(monkeypatch, capsys):
    def deny(filename):
        raise PermissionError(13, "Permission denied", filename)

    monkeypatch.setattr(day1, "read_input_file", deny)

    assert day1.main(["secret.txt"]) == EXIT_FILE_ERROR

    _, err = capsys.readouterr()
    assert err.splitlines() == [
        "Error: Permission denied reading 'secret.txt'",
        "Check file permissions",
    ]


def test_other_read_error(tmp_path, capsys):
    # a directory can't be read as a file
    assert day1.main([str(tmp_path)]) == EXIT_FILE_ERROR

    _, err = capsys.readouterr()
    assert err.startswith("Error reading file: ")


def test_report_file_error_writes_to_given_stream():
    stream = io.StringIO()
    code = report_file_error(OSError(5, "Input/output error"), "input.txt", stream)

    assert code == EXIT_FILE_ERROR
    assert stream.getvalue() == "Error reading file: [Errno 5] Input/output error\n"


def test_report_file_error_follows_redirected_stderr(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    buf = io.StringIO()

    with contextlib.redirect_stderr(buf):
        assert day1.main([]) == EXIT_FILE_ERROR

    assert "Error: File 'input.txt' not found" in buf.getvalue()


def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(day1, "main", lambda: EXIT_FILE_ERROR)

    with pytest.raises(SystemExit) as info:
        day1.run()

    assert info.value.code == EXIT_FILE_ERROR
