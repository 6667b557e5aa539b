"""Supported arithmetic operations and their dispatch table."""
from enum import Enum
import math
import operator
from typing import Callable, Dict, List, NamedTuple


class Operation(str, Enum):
    """Closed set of operations selectable from the command line."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    SQRT = "sqrt"
    MODULO = "modulo"

    @classmethod
    def names(cls) -> List[str]:
        """Return the allow-list of operation names in declaration order."""
        return [member.value for member in cls]


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def power(base: float, exponent: float) -> float:
    """
    Raise ``base`` to ``exponent`` with IEEE-754 results instead of exceptions.

    ``math.pow`` raises where IEEE-754 defines a value:
        - negative base with a non-integer exponent -> NaN
        - zero base with a negative exponent -> infinity
        - overflow -> signed infinity

    :param float base: Base
    :param float exponent: Exponent

    :return: ``base ** exponent``
    :rtype: float
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0.0 and exponent < 0:
            # Only negative zero with an odd exponent keeps its sign
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def modulo(dividend: float, divisor: float) -> float:
    """
    Floating point remainder with truncated quotient (sign follows ``dividend``).

    A zero divisor or an infinite dividend gives NaN.
    """
    try:
        return math.fmod(dividend, divisor)
    except ValueError:
        return math.nan


class OperationSpec(NamedTuple):
    """Dispatch entry: arity, implementation and wording used in errors."""

    arity: int
    function: Callable[..., float]
    noun: str


OPERATIONS: Dict[Operation, OperationSpec] = {
    Operation.ADD: OperationSpec(2, operator.add, "addition"),
    Operation.SUBTRACT: OperationSpec(2, operator.sub, "subtraction"),
    Operation.MULTIPLY: OperationSpec(2, operator.mul, "multiplication"),
    Operation.DIVIDE: OperationSpec(2, operator.truediv, "division"),
    Operation.POWER: OperationSpec(2, power, "power"),
    Operation.SQRT: OperationSpec(1, math.sqrt, "square root"),
    Operation.MODULO: OperationSpec(2, modulo, "modulo"),
}

# Adding a member to Operation without a table entry must fail loudly
_unhandled = set(Operation) - set(OPERATIONS)
if _unhandled:
    raise RuntimeError(f"Operations without an implementation: {sorted(op.value for op in _unhandled)}")
