"""Boundary between the calculator form and the evaluator."""
from pydantic import BaseModel, Field

from form_calculator.common.config import DisplayMessages
from form_calculator.common.logger import logger
from form_calculator.common.models import (
    Display,
    EvaluationOutcome,
    Failure,
    FailureCategory,
    Operation,
    ParseErrorKind,
    Status,
)
from form_calculator.evaluator.evaluator import Evaluator


class CalculatorController(BaseModel):
    """
    Controller called by the UI layer on form events.

    The controller:
    - owns the currently selected operation (initially ADD)
    - forwards compute events to the evaluator with that operation
    - turns outcomes into a single message and a status for the display

    Clearing the input fields and coloring the display stay in the UI layer.
    """

    evaluator: Evaluator = Field(default_factory=Evaluator, description="Evaluator used on compute events")
    messages: DisplayMessages = Field(default_factory=DisplayMessages, description="User-facing strings")
    operation: Operation = Field(default=Operation.ADD, description="Currently selected operation")

    @property
    def operation_symbol(self) -> str:
        """Symbol of the currently selected operation."""
        return self.operation.symbol

    def select_operation(self, index: int) -> Operation:
        """
        Handle a selector change event.

        :param int index: Selector index, unknown values select ADD

        :return: Newly selected operation
        :rtype: Operation
        """
        self.operation = Operation.from_index(index)
        logger.info(f"🔀 Operation selected: {self.operation_symbol}")
        return self.operation

    def select_symbol(self, symbol: str) -> int:
        """
        Handle an operator key press, such as "÷" or "/".

        :param str symbol: Display or ASCII operator symbol

        :return: Selector index the UI should show to stay consistent
        :rtype: int
        :raises ValueError: If the symbol is unknown
        """
        index: int = self.set_operation(Operation.from_symbol(symbol))
        logger.info(f"🔀 Operation selected: {self.operation_symbol}")
        return index

    def set_operation(self, op: Operation) -> int:
        """
        Select an operation programmatically.

        :param Operation op: Operation to select

        :return: Selector index the UI should show to stay consistent
        :rtype: int
        """
        self.operation = Operation(op)
        return self.operation.index

    def start(self) -> Display:
        """Display shown before the first computation."""
        return Display(message=self.messages.idle, status=Status.INFO)

    def clear(self) -> Display:
        """Display shown after the form is cleared."""
        return Display(message=self.messages.ready, status=Status.INFO)

    def compute(self, raw_a: str, raw_b: str) -> Display:
        """
        Handle a compute event.

        :param str raw_a: Text of the first input field
        :param str raw_b: Text of the second input field

        :return: Formatted result, or a single error message
        :rtype: Display
        """
        try:
            outcome: EvaluationOutcome = self.evaluator.evaluate(raw_a, raw_b, self.operation)
        except ArithmeticError as exc:
            logger.error(f"🧮❌ Calculation failed for {raw_a!r} {self.operation_symbol} {raw_b!r}: {exc}")
            return Display(message=self.messages.calculation_error, status=Status.ERROR)

        if isinstance(outcome, Failure):
            return Display(message=self._failure_message(outcome), status=Status.ERROR)
        return Display(message=outcome.display, status=Status.SUCCESS)

    def _failure_message(self, failure: Failure) -> str:
        """
        Build the message describing a failed evaluation.

        :param Failure failure: Evaluation failure

        :return: Message for the display
        :rtype: str
        """
        if failure.category is FailureCategory.DIVISION_BY_ZERO:
            return self.messages.division_by_zero

        operand: str = "A" if failure.category is FailureCategory.INVALID_INPUT_A else "B"
        detail: str = self.messages.empty_input if failure.reason is ParseErrorKind.EMPTY_INPUT else failure.detail
        return self.messages.invalid_input.format(operand=operand, detail=detail)
