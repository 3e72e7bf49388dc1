"""
Per-visitor calculator state, kept in the Flask session.
Each calculator lives under its own key; nothing is shared between them.
"""
import logging

from flask import session

from dual_calculator.projects.calculators.core.basic import BasicCalculator
from dual_calculator.projects.calculators.core.bmi import BmiCalculator
from dual_calculator.projects.registry import DEFAULT_CALCULATOR_ID, get_calculator_by_id

logger = logging.getLogger(__name__)

BASIC_KEY = 'calculators.basic'
BMI_KEY = 'calculators.bmi'
ACTIVE_TAB_KEY = 'calculators.active_tab'


def _load(key, engine_cls):
    data = session.get(key)
    if not data:
        return engine_cls()
    try:
        return engine_cls.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Discarding unreadable {key} state: {e}")
        session.pop(key, None)
        return engine_cls()


def load_basic():
    return _load(BASIC_KEY, BasicCalculator)


def save_basic(calculator):
    session[BASIC_KEY] = calculator.to_dict()


def load_bmi():
    return _load(BMI_KEY, BmiCalculator)


def save_bmi(calculator):
    session[BMI_KEY] = calculator.to_dict()


def get_active_tab():
    """The selected calculator ID, falling back to the default for unknown values."""
    tab = session.get(ACTIVE_TAB_KEY, DEFAULT_CALCULATOR_ID)
    if get_calculator_by_id(tab) is None:
        return DEFAULT_CALCULATOR_ID
    return tab


def set_active_tab(tab):
    session[ACTIVE_TAB_KEY] = tab
