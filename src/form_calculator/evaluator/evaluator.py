"""Evaluate one form submission: two raw operands and an operation."""
from pydantic import BaseModel, ConfigDict, Field

from form_calculator.common.config import INVARIANT_FORMAT, NumberFormat
from form_calculator.common.logger import logger
from form_calculator.common.models import (
    EvaluationOutcome,
    Failure,
    FailureCategory,
    Operation,
    ParseFailure,
    ParseResult,
)
from form_calculator.common.operations import DEFAULT_SIGNIFICANT_DIGITS, apply
from form_calculator.common.parser import NumberParser


class Evaluator(BaseModel):
    """
    Stateless evaluator of two-operand computations.

    Lifecycle:
        - Built once with its number format and output precision
        - Called once per compute event, never mutated
        - Safe to share between callers
    """

    # Make the Pydantic instance immutable (read-only), evaluation must not depend on call history
    model_config = ConfigDict(frozen=True)

    number_format: NumberFormat = Field(default=INVARIANT_FORMAT, description="Separators for the fallback parse")
    significant_digits: int = Field(
        default=DEFAULT_SIGNIFICANT_DIGITS,
        ge=15,
        le=17,
        description="Significant digits of the formatted result",
    )

    def evaluate(self, raw_a: str, raw_b: str, op: Operation) -> EvaluationOutcome:
        """
        Parse both operands and apply the operation.

        The first invalid operand stops the evaluation: raw_b is not parsed when raw_a is invalid.

        :param str raw_a: Raw text of the first operand
        :param str raw_b: Raw text of the second operand
        :param Operation op: Operation to apply

        :return: Success, or Failure describing the single most relevant problem
        :rtype: EvaluationOutcome
        """
        parsed_a: ParseResult = NumberParser.parse(raw_a, self.number_format)
        if isinstance(parsed_a, ParseFailure):
            logger.warning(f"🧮❌ Invalid input A: {parsed_a.detail!r}")
            return Failure(category=FailureCategory.INVALID_INPUT_A, detail=parsed_a.detail, reason=parsed_a.kind)

        parsed_b: ParseResult = NumberParser.parse(raw_b, self.number_format)
        if isinstance(parsed_b, ParseFailure):
            logger.warning(f"🧮❌ Invalid input B: {parsed_b.detail!r}")
            return Failure(category=FailureCategory.INVALID_INPUT_B, detail=parsed_b.detail, reason=parsed_b.kind)

        outcome: EvaluationOutcome = apply(op, parsed_a.value, parsed_b.value, self.significant_digits)
        if isinstance(outcome, Failure):
            logger.warning(f"🧮❌ Division by zero: {parsed_a.value} {op.symbol} {parsed_b.value}")
        else:
            logger.info(f"🧮✅ {parsed_a.value} {op.symbol} {parsed_b.value} = {outcome.display}")
        return outcome
