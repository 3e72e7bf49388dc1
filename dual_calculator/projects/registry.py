"""
Calculator Registry - the tabs shown in the dual calculator shell.

To add a new calculator:
1. Create its engine under projects/calculators/core
2. Add a route and a template partial for it
3. Add an entry to CALCULATORS below

The first tab by 'order' is not necessarily the default one;
DEFAULT_CALCULATOR_ID decides which tab a new visitor sees.
"""

CALCULATORS = [
    {
        'id': 'bmi',
        'name': 'BMI Calculator',
        'description': 'Calculate your Body Mass Index',
        'template': 'calculators/_bmi.html',
        'icon': '🩺',
        'order': 1
    },
    {
        'id': 'calculator',
        'name': 'Basic Calculator',
        'description': 'Perform basic arithmetic operations',
        'template': 'calculators/_basic.html',
        'icon': '🧮',
        'order': 2
    },
]

DEFAULT_CALCULATOR_ID = 'bmi'


def get_all_calculators():
    """
    Get all calculators from the registry.

    Returns:
        list: List of all calculators sorted by order
    """
    return sorted(CALCULATORS, key=lambda x: x['order'])


def get_calculator_by_id(calculator_id):
    """
    Get a specific calculator by its ID.

    Args:
        calculator_id (str): The calculator ID to look up

    Returns:
        dict: Calculator data or None if not found
    """
    return next((c for c in CALCULATORS if c['id'] == calculator_id), None)


def get_tabs(active_id):
    """
    Get the tab bar for the shell.

    Args:
        active_id (str): The currently selected calculator ID

    Returns:
        list: Calculators with an 'active' flag set on the selected one
    """
    tabs = []
    for calculator in get_all_calculators():
        tab = calculator.copy()
        tab['active'] = calculator['id'] == active_id
        tabs.append(tab)
    return tabs
