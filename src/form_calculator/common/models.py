"""Pydantic models and enums exchanged between parser, evaluator and controller."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    """Binary operation selectable in the form, in selector order."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def index(self) -> int:
        """Position of the operation in the selector."""
        return list(Operation).index(self)

    @property
    def symbol(self) -> str:
        """Symbol shown to the user."""
        return SYMBOLS[self]

    @classmethod
    def from_index(cls, index: int) -> "Operation":
        """
        Map a selector index to an operation.

        Unknown indexes fall back to ADD, as the selector widget may report
        values outside the four known options.

        :param int index: Selector index, 0 to 3

        :return: Selected operation
        :rtype: Operation
        """
        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return cls.ADD

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """
        Map a display or ASCII symbol to an operation.

        :param str symbol: One of + - * / or their display forms

        :return: Matching operation
        :rtype: Operation
        :raises ValueError: If the symbol is unknown
        """
        for op, candidates in ACCEPTED_SYMBOLS.items():
            if symbol.strip() in candidates:
                return op
        raise ValueError(f"Unknown operation symbol: {symbol!r}")


SYMBOLS: dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "−",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}

ACCEPTED_SYMBOLS: dict[Operation, tuple[str, ...]] = {
    Operation.ADD: ("+",),
    Operation.SUBTRACT: ("−", "-"),
    Operation.MULTIPLY: ("×", "*"),
    Operation.DIVIDE: ("÷", "/"),
}


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    UNPARSEABLE = "unparseable"


class ParsedNumber(BaseModel):
    """A successfully parsed operand."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Parsed numeric value")


class ParseFailure(BaseModel):
    """An operand that could not be parsed."""

    model_config = ConfigDict(frozen=True)

    kind: ParseErrorKind = Field(..., description="Why parsing failed")
    raw: str = Field(..., description="Original raw text")
    detail: str = Field(..., description="Text describing the offending input")


ParseResult = Union[ParsedNumber, ParseFailure]


class FailureCategory(str, Enum):
    INVALID_INPUT_A = "invalid_input_a"
    INVALID_INPUT_B = "invalid_input_b"
    DIVISION_BY_ZERO = "division_by_zero"


class Success(BaseModel):
    """Result of a completed computation."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Computed numeric result")
    display: str = Field(..., description="Locale-independent formatted result")


class Failure(BaseModel):
    """A classified evaluation failure."""

    model_config = ConfigDict(frozen=True)

    category: FailureCategory = Field(..., description="Which problem stopped the evaluation")
    detail: str = Field(default="", description="Context such as the offending raw text")
    reason: Optional[ParseErrorKind] = Field(default=None, description="Parse failure kind for invalid inputs")


EvaluationOutcome = Union[Success, Failure]


class Status(str, Enum):
    """Presentation category of a display message."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Display(BaseModel):
    """Text and status rendered by the UI layer."""

    model_config = ConfigDict(frozen=True)

    message: str
    status: Status
