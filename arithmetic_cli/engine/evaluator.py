"""Evaluate a selected operation against parsed operands."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_cli.common.errors import CalcError, DivisionByZero, OperandParseError
from arithmetic_cli.common.logger import logger
from arithmetic_cli.common.models import CalculationRequest, CalculationResult
from arithmetic_cli.common.operations import OPERATIONS, Operation
from arithmetic_cli.common.parser import parse_operand


def evaluate(operation: Operation, operand1: float, operand2: Optional[float] = None) -> float:
    """
    Apply ``operation`` to the operands.

    Binary operations need ``operand2``; ``sqrt`` ignores it.
    Infinite and NaN results are returned as they are.

    :param Operation operation: Selected operation
    :param float operand1: First operand
    :param Optional[float] operand2: Second operand, ``None`` when absent

    :return: Computed value
    :rtype: float
    :raises OperandParseError: If operand2 is missing or operand1 is outside the sqrt domain
    :raises DivisionByZero: If dividing by zero (including negative zero)
    """
    spec = OPERATIONS[operation]

    if spec.arity == 1:
        if operand1 < 0.0:
            raise OperandParseError("Cannot square root a negative number")
        return spec.function(operand1)

    if operand2 is None:
        raise OperandParseError(f"Missing second operand for {spec.noun}")

    # -0.0 == 0.0 holds, so negative zero is rejected too
    if operation is Operation.DIVIDE and operand2 == 0.0:
        raise DivisionByZero()

    return spec.function(operand1, operand2)


class Calculation(BaseModel):
    """
    One calculation, from raw operand text to result.

    Lifecycle:
        - Built from a validated CalculationRequest
        - Parses operand1, then operand2 when present
        - Evaluates only if every present operand parsed
    """

    model_config = ConfigDict(frozen=True)

    request: CalculationRequest = Field(..., description="Operation and raw operands")

    def run(self) -> CalculationResult:
        """
        Parse the operands and evaluate the request.

        :return: Parsed operands and computed value
        :rtype: CalculationResult
        :raises CalcError: If parsing or evaluation fails
        """
        request = self.request
        logger.info(f"Calculation started: {request.operation.value} {request.operand1!r} {request.operand2!r}")

        try:
            operand1 = parse_operand(request.operand1)
            operand2 = None if request.operand2 is None else parse_operand(request.operand2)
            result = evaluate(request.operation, operand1, operand2)
        except CalcError as exc:
            logger.error(f"Calculation failed for {request.operation.value}: {exc}")
            raise

        logger.info(f"Calculation finished: {result!r}")
        return CalculationResult(
            operation=request.operation,
            operand1=operand1,
            operand2=operand2,
            result=result,
        )
