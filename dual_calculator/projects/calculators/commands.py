"""Flask CLI commands for the calculators"""

import click

from dual_calculator.projects.calculators.core.basic import BasicCalculator, OPERATIONS
from dual_calculator.projects.calculators.core.bmi import BmiCalculator
from dual_calculator.projects.calculators.core.constants import HEIGHT_UNITS
from dual_calculator.projects.calculators.core.formatting import format_number
from dual_calculator.projects.calculators.core.messages import InputChange


@click.group(name='calc')
def calc_cli():
    """Run a calculation from the command line."""
    pass


def _fail(errors):
    for field, message in errors.items():
        click.echo(f"{field}: {message}", err=True)
    raise click.exceptions.Exit(1)


@calc_cli.command('basic', context_settings={'ignore_unknown_options': True})
@click.argument('first')
@click.argument('operator', type=click.Choice(sorted(OPERATIONS)))
@click.argument('second')
def basic_command(first, operator, second):
    """Compute FIRST OPERATOR SECOND, e.g. `flask calc basic 3 '*' 4`."""
    calculator = BasicCalculator()
    calculator.apply(InputChange('first', first))
    calculator.apply(InputChange('second', second))
    if calculator.calculate(operator) is None:
        _fail(calculator.errors)

    if calculator.is_error:
        click.echo(calculator.result, err=True)
        raise click.exceptions.Exit(1)
    click.echo(calculator.expression_summary)


@calc_cli.command('bmi', context_settings={'ignore_unknown_options': True})
@click.argument('weight')
@click.argument('height')
@click.option('--unit', type=click.Choice(HEIGHT_UNITS), default='cm', show_default=True,
              help='Unit of HEIGHT')
def bmi_command(weight, height, unit):
    """Compute BMI for WEIGHT (kg) and HEIGHT."""
    calculator = BmiCalculator(height_unit=unit)
    calculator.apply(InputChange('weight', weight))
    calculator.apply(InputChange('height', height))
    result = calculator.calculate()
    if result is None:
        _fail(calculator.errors)

    click.echo(f"BMI: {format_number(result.value)}")
    click.echo(f"Category: {result.category}")
    click.echo(result.description)


def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(calc_cli)
