"""
Basic four-operation calculator.

The engine owns two raw operand strings, the last result (or error message),
the operator that produced it, per-field validation errors, and a short
newest-first history of successful calculations.
"""
import logging
import time
import uuid
from dataclasses import asdict, dataclass, field

from dual_calculator.projects.calculators.core.constants import (
    DIVISION_BY_ZERO_MESSAGE,
    HISTORY_LIMIT,
    OPERATOR_SYMBOLS,
)
from dual_calculator.projects.calculators.core.formatting import format_number
from dual_calculator.projects.calculators.core.messages import InputChange
from dual_calculator.projects.calculators.core.validation import (
    parse_number,
    validate_operands,
)

logger = logging.getLogger(__name__)

INPUT_FIELDS = ("first", "second")


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Raises ZeroDivisionError when b is zero (either sign)."""
    return a / b


OPERATIONS = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


def apply_operation(operator: str, a: float, b: float) -> float:
    """Dispatch to the arithmetic for operator. Unknown operators raise ValueError."""
    if operator not in OPERATIONS:
        raise ValueError(f"Unknown operator: {operator!r}")
    return OPERATIONS[operator](a, b)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CalculationRecord:
    """One completed calculation, kept for display."""

    expression: str
    result: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: int = field(default_factory=_now_ms)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CalculationRecord":
        return cls(
            expression=data["expression"],
            result=data["result"],
            id=data["id"],
            timestamp=int(data["timestamp"]),
        )


class BasicCalculator:
    """Component state for the basic calculator."""

    def __init__(self):
        self.first = ""
        self.second = ""
        self.result: str | None = None
        self.selected_operation: str | None = None
        self.errors: dict[str, str] = {}
        self.history: list[CalculationRecord] = []

    # --- Input ---

    def apply(self, change: InputChange) -> None:
        """Apply a field edit. Unknown fields raise ValueError."""
        if change.field not in INPUT_FIELDS:
            raise ValueError(f"Unknown basic calculator field: {change.field!r}")
        setattr(self, change.field, change.value)

    def validate(self) -> bool:
        self.errors = validate_operands(self.first, self.second)
        return not self.errors

    # --- Actions ---

    def calculate(self, operator: str) -> str | None:
        """
        Run operator on the current operands.
        Returns the new result string, or None if validation failed.
        """
        if operator not in OPERATIONS:
            raise ValueError(f"Unknown operator: {operator!r}")
        if not self.validate():
            logger.info(f"Basic calculation rejected: {sorted(self.errors)}")
            return None

        a = parse_number(self.first)
        b = parse_number(self.second)
        try:
            value = apply_operation(operator, a, b)
        except ZeroDivisionError:
            # Terminal display state; not recorded in history
            self.result = DIVISION_BY_ZERO_MESSAGE
            self.selected_operation = operator
            logger.info(f"Division by zero attempted: {self.first} / {self.second}")
            return self.result

        result = format_number(value)
        expression = f"{self.first} {OPERATOR_SYMBOLS[operator]} {self.second}"
        self.result = result
        self.selected_operation = operator

        record = CalculationRecord(expression=expression, result=result)
        self.history = [record] + self.history[:HISTORY_LIMIT - 1]
        logger.info(f"Calculated {expression} = {result}")
        return result

    def clear(self) -> None:
        """Reset inputs, result, operator and errors. History is kept."""
        self.first = ""
        self.second = ""
        self.result = None
        self.selected_operation = None
        self.errors = {}

    def clear_history(self) -> None:
        self.history = []

    # --- Display ---

    @property
    def is_error(self) -> bool:
        return self.result is not None and "Error" in self.result

    @property
    def expression_summary(self) -> str | None:
        """'<first> <symbol> <second> = <result>' for the current fields, if there is a result."""
        if self.result is None or self.selected_operation is None or self.is_error:
            return None
        symbol = OPERATOR_SYMBOLS[self.selected_operation]
        return f"{self.first} {symbol} {self.second} = {self.result}"

    # --- Session storage ---

    def to_dict(self) -> dict:
        return {
            "first": self.first,
            "second": self.second,
            "result": self.result,
            "selected_operation": self.selected_operation,
            "errors": dict(self.errors),
            "history": [record.to_dict() for record in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BasicCalculator":
        calculator = cls()
        calculator.first = data.get("first", "")
        calculator.second = data.get("second", "")
        calculator.result = data.get("result")
        calculator.selected_operation = data.get("selected_operation")
        if calculator.selected_operation not in (None, *OPERATIONS):
            raise ValueError(f"Unknown operator: {calculator.selected_operation!r}")
        calculator.errors = dict(data.get("errors") or {})
        calculator.history = [
            CalculationRecord.from_dict(item) for item in data.get("history") or []
        ][:HISTORY_LIMIT]
        return calculator
