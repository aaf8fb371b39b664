"""Test class CalculatorController."""
import pytest

from form_calculator.common.config import DisplayMessages
from form_calculator.common.models import Operation, Status
from form_calculator.controller.controller import CalculatorController
from form_calculator.evaluator.evaluator import Evaluator


@pytest.fixture
def controller() -> CalculatorController:
    """Controller with default evaluator and messages."""
    return CalculatorController()


def test_controller_defaults(controller):
    """A new controller starts on ADD with an idle message."""
    assert controller.operation is Operation.ADD
    assert controller.operation_symbol == "+"
    display = controller.start()
    assert display.status is Status.INFO
    assert display.message == "Enter values before calculating."


@pytest.mark.parametrize("index,expected", [
    (1, Operation.SUBTRACT),
    (3, Operation.DIVIDE),
    (7, Operation.ADD),
])
def test_select_operation(controller, index, expected):
    """Selector events change the current operation."""
    assert controller.select_operation(index) is expected
    assert controller.operation is expected


def test_set_operation_returns_selector_index(controller):
    """set_operation reports the index the selector should show."""
    assert controller.set_operation(Operation.MULTIPLY) == 2
    assert controller.operation_symbol == "×"


@pytest.mark.parametrize("symbol,index", [
    ("÷", 3),
    ("/", 3),
    ("-", 1),
    ("×", 2),
])
def test_select_symbol(controller, symbol, index):
    """Operator key presses select the operation and report its selector index."""
    assert controller.select_symbol(symbol) == index
    assert controller.operation is Operation.from_index(index)


def test_select_symbol_then_compute(controller):
    """compute applies an operation chosen by symbol."""
    controller.select_symbol("/")
    assert controller.compute("10", "0").status is Status.ERROR
    assert controller.compute("10", "4").message == "2.5"


def test_select_unknown_symbol_keeps_operation(controller):
    """Unknown symbols are rejected and the operation is unchanged."""
    controller.select_operation(2)
    with pytest.raises(ValueError):
        controller.select_symbol("%")
    assert controller.operation is Operation.MULTIPLY


def test_compute_success(controller):
    """A valid computation is shown as a success."""
    display = controller.compute("3", "4")
    assert display.message == "7"
    assert display.status is Status.SUCCESS


def test_compute_uses_selected_operation(controller):
    """compute applies the operation selected last."""
    controller.select_operation(2)
    assert controller.compute("3,5", "2").message == "7"


def test_compute_division_by_zero(controller):
    """Division by zero is shown as a single error."""
    controller.select_operation(3)
    display = controller.compute("10", "0")
    assert display.status is Status.ERROR
    assert "division" in display.message


@pytest.mark.parametrize("raw_a,raw_b,message", [
    ("", "5", "Invalid input A: empty"),
    ("abc", "5", "Invalid input A: “abc”"),
    ("1", "x y", "Invalid input B: “x y”"),
    ("", "", "Invalid input A: empty"),
])
def test_compute_invalid_input(controller, raw_a, raw_b, message):
    """Only the first invalid input is reported."""
    display = controller.compute(raw_a, raw_b)
    assert display.status is Status.ERROR
    assert display.message == message


def test_compute_arithmetic_error(controller, monkeypatch, caplog):
    """Unexpected arithmetic errors are logged and shown as a calculation error."""
    def failing_evaluate(self, raw_a, raw_b, op):
        raise OverflowError("too large")

    monkeypatch.setattr(Evaluator, "evaluate", failing_evaluate)
    with caplog.at_level("ERROR", logger="form_calculator"):
        display = controller.compute("1", "2")
    assert display.status is Status.ERROR
    assert display.message == "Calculation error"
    assert "too large" in caplog.text


def test_clear_resets_display_and_keeps_operation(controller):
    """clear shows the ready message and keeps the selected operation."""
    controller.select_operation(1)
    controller.compute("abc", "1")
    display = controller.clear()
    assert display.status is Status.INFO
    assert display.message == "Ready."
    assert controller.operation is Operation.SUBTRACT
    assert controller.compute("5", "3").message == "2"


def test_custom_messages():
    """Messages can be replaced, e.g. for another language."""
    messages = DisplayMessages(
        invalid_input="Entrée {operand} invalide : {detail}",
        empty_input="vide",
        division_by_zero="Erreur : division par zéro",
    )
    controller = CalculatorController(messages=messages)
    assert controller.compute(" ", "1").message == "Entrée A invalide : vide"
    controller.select_operation(3)
    assert controller.compute("1", "0").message == "Erreur : division par zéro"
