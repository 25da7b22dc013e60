from pathlib import Path

import pytest

from lifo.driver import main


@pytest.fixture
def write_script(tmp_path: Path):
    def write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return write


def test_runs_script(write_script, capsys) -> None:
    script = write_script("ok.lifo", "push 1\npush 2\ncount\npop\nassert pop == 1\n")

    main([str(script)])

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["2", "2"]
    assert captured.err == ""


def test_each_input_gets_a_fresh_stack(write_script, capsys) -> None:
    first = write_script("first.lifo", "push 1 2\n")
    second = write_script("second.lifo", "count\n")

    main([str(first), str(second)])

    assert capsys.readouterr().out.splitlines() == ["0"]


def test_shared_stack(write_script, capsys) -> None:
    first = write_script("first.lifo", "push 1 2\n")
    second = write_script("second.lifo", "count\npop\n")

    main(["--shared-stack", str(first), str(second)])

    assert capsys.readouterr().out.splitlines() == ["2", "2"]


def test_failed_assertion_exits_with_location(write_script, capsys) -> None:
    script = write_script("bad.lifo", "push 1\ncount\nassert peek == 2\ncount\n")

    with pytest.raises(SystemExit) as exc_info:
        main([str(script)])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1"]
    assert captured.err.splitlines() == [
        f"File '{script}', line 3, in 'assert peek'",
        "    Error: expected `peek` to be `2` but got `1`",
    ]


def test_syntax_error_exits_with_location(write_script, capsys) -> None:
    script = write_script("bad.lifo", "push 1\npeek 2\n")

    with pytest.raises(SystemExit) as exc_info:
        main([str(script)])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        f"File '{script}', line 2",
        "    peek 2",
        "         ^",
        "    Error: invalid syntax, unexpected '2'",
    ]


def test_missing_file(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.lifo"

    with pytest.raises(SystemExit) as exc_info:
        main([str(missing)])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.splitlines() == [
        f"Error: file '{missing}' does not exist"
    ]


def test_debug_interpreter_prints_traceback(write_script, capsys) -> None:
    script = write_script("bad.lifo", "assert empty == false\n")

    with pytest.raises(SystemExit):
        main(["--debug-interpreter", str(script)])

    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "~~~ User-facing error message ~~~" in err
    assert err.rstrip().endswith("Error: expected `empty` to be `false` but got `true`")


def test_verbose(write_script, capsys) -> None:
    script = write_script("trace.lifo", "push 5\npeek\n")

    main(["-v", str(script)])

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["5"]
    assert captured.err.splitlines() == ["1: push 5", "2: peek"]


def test_requires_an_input(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
