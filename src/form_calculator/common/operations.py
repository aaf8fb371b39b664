"""Apply a binary operation to two parsed operands."""
from collections.abc import Callable
import math
import operator

from form_calculator.common.models import EvaluationOutcome, Failure, FailureCategory, Operation, Success


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

OPERATORS: dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}

# Smallest positive subnormal double: only an exact zero is below it
ZERO_THRESHOLD: float = math.ulp(0.0)

DEFAULT_SIGNIFICANT_DIGITS = 15


def format_result(value: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """
    Format a result in general notation, independently of the locale.

    :param float value: Computed value
    :param int significant_digits: Number of significant digits

    :return: Formatted value, e.g. "7" or "0.333333333333333"
    :rtype: str
    """
    return f"{value:.{significant_digits}g}"


def apply(
    op: Operation,
    a: float,
    b: float,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> EvaluationOutcome:
    """
    Apply an operation to two operands, refusing to divide by zero.

    :param Operation op: Operation to apply
    :param float a: Left operand
    :param float b: Right operand
    :param int significant_digits: Digits kept in the formatted result

    :return: Success with the value, or Failure(DIVISION_BY_ZERO)
    :rtype: EvaluationOutcome
    :raises ValueError: If op is not an Operation
    """
    if not isinstance(op, Operation):
        raise ValueError(f"Unsupported operation: {op!r}")

    if op is Operation.DIVIDE and abs(b) < ZERO_THRESHOLD:
        return Failure(category=FailureCategory.DIVISION_BY_ZERO)

    result: float = OPERATORS[op](a, b)
    return Success(value=result, display=format_result(result, significant_digits))
