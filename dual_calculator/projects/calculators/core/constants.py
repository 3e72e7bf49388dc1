"""
Constants for the calculators: input ranges, messages, operators and BMI categories.
Single source of truth for the validators, the engines and the templates.
"""

# --- Basic calculator ---
OPERAND_MIN = -999999
OPERAND_MAX = 999999
OPERAND_RANGE_MESSAGE = "Number must be between -999,999 and 999,999"

DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero"

HISTORY_LIMIT = 5

# Operator -> display symbol
OPERATOR_SYMBOLS = {
    "+": "+",
    "-": "-",
    "*": "×",
    "/": "÷",
}

# --- BMI calculator ---
WEIGHT_MIN = 20
WEIGHT_MAX = 300
WEIGHT_RANGE_MESSAGE = "Weight must be between 20 and 300 kg"

HEIGHT_UNITS = ["cm", "m"]
DEFAULT_HEIGHT_UNIT = "cm"
HEIGHT_INVALID_MESSAGE = "Please enter a valid height"

# unit -> (min, max, message)
HEIGHT_RANGES = {
    "cm": (50, 250, "Height must be between 50 and 250 cm"),
    "m": (0.5, 2.5, "Height must be between 0.5 and 2.5 m"),
}

# Upper bounds are exclusive; the last category has no upper bound.
BMI_CATEGORIES = [
    ("underweight", 18.5),
    ("normal", 25),
    ("overweight", 30),
    ("obese", None),
]

BMI_DESCRIPTIONS = {
    "underweight": "Underweight - Consider gaining healthy weight",
    "normal": "Normal weight - Keep up the good work!",
    "overweight": "Overweight - Consider a healthier lifestyle",
    "obese": "Obese - Consult a healthcare professional",
}

# Reference table shown under the BMI form: (label, range text, category)
BMI_REFERENCE_TABLE = [
    ("Underweight", "< 18.5", "underweight"),
    ("Normal weight", "18.5 - 24.9", "normal"),
    ("Overweight", "25 - 29.9", "overweight"),
    ("Obese", "≥ 30", "obese"),
]
