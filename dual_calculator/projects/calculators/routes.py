from flask import Blueprint, render_template, redirect, url_for, flash, jsonify, abort
from flask_wtf.csrf import CSRFError

from dual_calculator.projects.calculators.core.constants import BMI_REFERENCE_TABLE
from dual_calculator.projects.calculators.core.formatting import format_number
from dual_calculator.projects.calculators.core.messages import InputChange
from dual_calculator.projects.calculators.forms import BasicCalculatorForm, BmiCalculatorForm
from dual_calculator.projects.calculators.state import (
    get_active_tab,
    load_basic,
    load_bmi,
    save_basic,
    save_bmi,
    set_active_tab,
)
from dual_calculator.projects.registry import get_calculator_by_id, get_tabs
from dual_calculator.utils.logging import log_project_visit

calculators_bp = Blueprint('calculators', __name__,
                           template_folder='templates')

EXPIRED_FORM_MESSAGE = 'Your form has expired. Please try again.'


@calculators_bp.route('/')
def index():
    """Display the shell with the selected calculator"""
    active = get_active_tab()
    calculator = get_calculator_by_id(active)
    log_project_visit(active, calculator['name'])

    context = {
        'tabs': get_tabs(active),
        'active': calculator,
        'format_number': format_number,
    }
    if active == 'bmi':
        bmi_calculator = load_bmi()
        form = BmiCalculatorForm(data={'weight': bmi_calculator.weight,
                                       'height': bmi_calculator.height})
        form.set_unit_display(bmi_calculator.height_unit)
        context.update(bmi=bmi_calculator, form=form, reference_table=BMI_REFERENCE_TABLE)
    else:
        basic_calculator = load_basic()
        form = BasicCalculatorForm(data={'first': basic_calculator.first,
                                         'second': basic_calculator.second})
        context.update(basic=basic_calculator, form=form)

    return render_template('calculators/index.html', **context)


@calculators_bp.route('/tab/<tab_id>')
def switch_tab(tab_id):
    """Select a calculator tab. Calculator state is left alone."""
    if get_calculator_by_id(tab_id) is None:
        abort(404)
    set_active_tab(tab_id)
    return redirect(url_for('calculators.index'))


@calculators_bp.route('/basic', methods=['POST'])
def basic():
    """Handle a basic calculator button press"""
    form = BasicCalculatorForm()
    if not form.validate_on_submit():
        flash(EXPIRED_FORM_MESSAGE, 'error')
        return redirect(url_for('calculators.index'))

    calculator = load_basic()
    calculator.apply(InputChange('first', form.first.data or ''))
    calculator.apply(InputChange('second', form.second.data or ''))

    operator = form.pressed_operator()
    if operator:
        calculator.calculate(operator)
    elif form.clear.data:
        calculator.clear()
    elif form.clear_history.data:
        calculator.clear_history()

    save_basic(calculator)
    return redirect(url_for('calculators.index'))


@calculators_bp.route('/bmi', methods=['POST'])
def bmi():
    """Handle a BMI calculator button press"""
    form = BmiCalculatorForm()
    if not form.validate_on_submit():
        flash(EXPIRED_FORM_MESSAGE, 'error')
        return redirect(url_for('calculators.index'))

    calculator = load_bmi()
    calculator.apply(InputChange('weight', form.weight.data or ''))
    calculator.apply(InputChange('height', form.height.data or ''))

    if form.toggle_unit.data:
        calculator.toggle_unit()
    elif form.reset.data:
        calculator.reset()
    elif form.calculate.data:
        calculator.calculate()

    save_bmi(calculator)
    return redirect(url_for('calculators.index'))


@calculators_bp.route('/api/state')
def api_state():
    """Current tab and both calculators' state as JSON"""
    basic_calculator = load_basic()
    state = basic_calculator.to_dict()
    state['expression_summary'] = basic_calculator.expression_summary
    return jsonify({
        'active_tab': get_active_tab(),
        'basic': state,
        'bmi': load_bmi().to_dict(),
    })


@calculators_bp.app_errorhandler(CSRFError)
def csrf_error(e):
    flash(EXPIRED_FORM_MESSAGE, 'error')
    return redirect(url_for('calculators.index'))
