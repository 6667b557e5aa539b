"""Pydantic models for calculation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_cli.common.operations import Operation
from arithmetic_cli.common.parser import format_number


class CalculationRequest(BaseModel):
    """A single operation and its raw operand text, as given on the command line."""

    model_config = ConfigDict(frozen=True)

    operation: Operation = Field(..., description="Operation to perform")
    operand1: str = Field(..., description="First operand, unparsed")
    operand2: Optional[str] = Field(default=None, description="Second operand, unparsed")


class CalculationResult(BaseModel):
    """The parsed operands and the computed result of a calculation."""

    model_config = ConfigDict(frozen=True)

    operation: Operation = Field(..., description="Operation performed")
    operand1: float = Field(..., description="First operand")
    operand2: Optional[float] = Field(default=None, description="Second operand, if any")
    result: float = Field(..., description="Computed value")

    def render(self) -> str:
        """Return the line printed for a successful calculation."""
        return f"Result: {format_number(self.result)}"
