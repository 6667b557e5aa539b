"""Error taxonomy for operand parsing and operation evaluation."""


class CalcError(Exception):
    """Base class for every error the calculator reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class OperandParseError(CalcError):
    """
    An operand could not be used.

    Covers malformed number text, a missing second operand and
    domain violations (e.g. square root of a negative number).
    """


class DivisionByZero(CalcError):
    """The divisor of a division is zero (or negative zero)."""

    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed.")
