"""Test the command-line entry point."""
import pytest

from arithmetic_cli.main import build_parser, main, parse_args


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["-o", "add", "5.2", "3"], "Result: 8.2"),
        (["--operation", "power", "2", "10"], "Result: 1024"),
        (["-o", "subtract", "1", "3"], "Result: -2"),
        (["-o", "divide", "1", "4"], "Result: 0.25"),
        (["-o", "sqrt", "9"], "Result: 3"),
        (["-o", "modulo", "-5", "3"], "Result: -2"),
        (["-o", "power", "-1", "0.5"], "Result: NaN"),
    ],
)
def test_main_success(capsys, argv, expected) -> None:
    """A successful calculation prints one result line and returns 0."""
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert out == f"{expected}\n"


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["-o", "divide", "6", "0"], "Error: Division by zero is not allowed."),
        (["-o", "sqrt", "-4"], "Error: Cannot square root a negative number"),
        (["-o", "multiply", "abc"], "Error: Failed to parse operand"),
        (["-o", "add", "1"], "Error: Missing second operand for addition"),
    ],
)
def test_main_failure(capsys, argv, expected) -> None:
    """Errors are printed to stdout and give a non-zero status."""
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert out == f"{expected}\n"


def test_unknown_operation_is_usage_error(capsys) -> None:
    """argparse rejects names outside the allow-list."""
    with pytest.raises(SystemExit) as exc_info:
        main(["-o", "log", "1"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_operation_is_required() -> None:
    """Leaving out --operation is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["1", "2"])
    assert exc_info.value.code == 2


def test_version(capsys) -> None:
    """--version prints the program name and version."""
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == "calc 1.0.1"


def test_parse_args() -> None:
    """parse_args builds a validated request."""
    request, verbose = parse_args(["-v", "-o", "sqrt", "4"])
    assert request.operation.value == "sqrt"
    assert request.operand1 == "4"
    assert request.operand2 is None
    assert verbose is True


def test_verbose_logs_to_stderr(capsys) -> None:
    """Verbose logging never reaches stdout."""
    assert main(["-v", "-o", "add", "1", "2"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Result: 3\n"
    assert "Calculation started" in captured.err
