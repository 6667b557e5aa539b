"""Convert operand text to numbers and numbers back to text."""
from decimal import Decimal
import math

from arithmetic_cli.common.errors import OperandParseError


def parse_operand(text: str) -> float:
    """
    Parse a textual operand into a float.

    Accepts anything ``float()`` accepts: sign, decimal point,
    exponent notation, ``inf`` and ``nan``.

    :param str text: Raw operand as received on the command line

    :return: Parsed value
    :rtype: float
    :raises OperandParseError: If the text is not a number
    """
    try:
        return float(text)
    except (TypeError, ValueError) as exc:
        raise OperandParseError("Failed to parse operand") from exc


def format_number(value: float) -> str:
    """
    Render a float without exponent notation and without a trailing ``.0``.

    Examples:
        - 1024.0 -> "1024"
        - 8.2 -> "8.2"
        - 1e-07 -> "0.0000001"
        - -0.0 -> "-0"
        - nan -> "NaN"

    :param float value: Number to render

    :return: Display text
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() gives the shortest digits that round-trip, Decimal drops the exponent
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
