"""
BMI calculator: weight in kg, height in cm or m.
"""
import logging
import math
from dataclasses import asdict, dataclass

from dual_calculator.projects.calculators.core.constants import (
    BMI_CATEGORIES,
    BMI_DESCRIPTIONS,
    DEFAULT_HEIGHT_UNIT,
    HEIGHT_UNITS,
)
from dual_calculator.projects.calculators.core.messages import InputChange
from dual_calculator.projects.calculators.core.validation import (
    parse_number,
    validate_body_measurements,
)

logger = logging.getLogger(__name__)

INPUT_FIELDS = ("weight", "height")


@dataclass(frozen=True)
class BmiResult:
    value: float
    category: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "BmiResult":
        if data["category"] not in BMI_DESCRIPTIONS:
            raise ValueError(f"Unknown BMI category: {data['category']!r}")
        return cls(
            value=float(data["value"]),
            category=data["category"],
            description=data["description"],
        )


def height_in_meters(height: float, unit: str) -> float:
    if unit == "cm":
        return height / 100
    if unit == "m":
        return height
    raise ValueError(f"Unknown height unit: {unit!r}")


def classify_bmi(value: float) -> str:
    """Category for an unrounded BMI value. Upper bounds are exclusive."""
    for category, upper in BMI_CATEGORIES:
        if upper is not None and value < upper:
            return category
    return BMI_CATEGORIES[-1][0]


def round_bmi(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def calculate_bmi(weight: float, height: float, unit: str) -> BmiResult:
    """Compute BMI for already-validated inputs."""
    meters = height_in_meters(height, unit)
    raw = weight / (meters * meters)
    category = classify_bmi(raw)
    return BmiResult(
        value=round_bmi(raw),
        category=category,
        description=BMI_DESCRIPTIONS[category],
    )


class BmiCalculator:
    """Component state for the BMI calculator."""

    def __init__(self, height_unit: str = DEFAULT_HEIGHT_UNIT):
        if height_unit not in HEIGHT_UNITS:
            raise ValueError(f"Unknown height unit: {height_unit!r}")
        self.weight = ""
        self.height = ""
        self.height_unit = height_unit
        self.result: BmiResult | None = None
        self.errors: dict[str, str] = {}

    def apply(self, change: InputChange) -> None:
        """Apply a field edit. Unknown fields raise ValueError."""
        if change.field not in INPUT_FIELDS:
            raise ValueError(f"Unknown BMI calculator field: {change.field!r}")
        setattr(self, change.field, change.value)

    def set_unit(self, unit: str) -> None:
        """Change the height unit without re-validating."""
        if unit not in HEIGHT_UNITS:
            raise ValueError(f"Unknown height unit: {unit!r}")
        self.height_unit = unit

    def toggle_unit(self) -> str:
        self.set_unit("m" if self.height_unit == "cm" else "cm")
        return self.height_unit

    def validate(self) -> bool:
        self.errors = validate_body_measurements(self.weight, self.height, self.height_unit)
        return not self.errors

    def calculate(self) -> BmiResult | None:
        """Validate and compute. Returns None (result untouched) if validation failed."""
        if not self.validate():
            logger.info(f"BMI calculation rejected: {sorted(self.errors)}")
            return None

        self.result = calculate_bmi(
            parse_number(self.weight),
            parse_number(self.height),
            self.height_unit,
        )
        logger.info(
            f"BMI calculated: {self.result.value} ({self.result.category}) "
            f"for {self.weight} kg, {self.height} {self.height_unit}"
        )
        return self.result

    def reset(self) -> None:
        """Clear weight, height, result and errors. The height unit is kept."""
        self.weight = ""
        self.height = ""
        self.result = None
        self.errors = {}

    # --- Session storage ---

    def to_dict(self) -> dict:
        return {
            "weight": self.weight,
            "height": self.height,
            "height_unit": self.height_unit,
            "result": self.result.to_dict() if self.result else None,
            "errors": dict(self.errors),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BmiCalculator":
        calculator = cls(height_unit=data.get("height_unit", DEFAULT_HEIGHT_UNIT))
        calculator.weight = data.get("weight", "")
        calculator.height = data.get("height", "")
        result = data.get("result")
        calculator.result = BmiResult.from_dict(result) if result else None
        calculator.errors = dict(data.get("errors") or {})
        return calculator
