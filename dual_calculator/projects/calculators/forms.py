from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField


class BasicCalculatorForm(FlaskForm):
    """Two operands and one button per action. Range checks live in core.validation."""

    first = StringField('First Number',
                        render_kw={"placeholder": "Enter first number (-999,999 to 999,999)",
                                   "inputmode": "decimal"})
    second = StringField('Second Number',
                         render_kw={"placeholder": "Enter second number (-999,999 to 999,999)",
                                    "inputmode": "decimal"})
    add = SubmitField('+')
    subtract = SubmitField('−')
    multiply = SubmitField('×')
    divide = SubmitField('÷')
    clear = SubmitField('Clear All')
    clear_history = SubmitField('Clear History')

    # Submit button name -> operator
    OPERATOR_BUTTONS = {
        'add': '+',
        'subtract': '-',
        'multiply': '*',
        'divide': '/',
    }

    def pressed_operator(self):
        """Operator for the button that submitted the form, if any."""
        for name, operator in self.OPERATOR_BUTTONS.items():
            if getattr(self, name).data:
                return operator
        return None


class BmiCalculatorForm(FlaskForm):
    weight = StringField('Weight (kg)',
                         render_kw={"placeholder": "Enter weight (20-300 kg)",
                                    "inputmode": "decimal"})
    height = StringField('Height', render_kw={"inputmode": "decimal"})
    toggle_unit = SubmitField('cm')
    calculate = SubmitField('Calculate BMI')
    reset = SubmitField('Reset')

    def set_unit_display(self, unit):
        """Label the toggle with the current unit and match the height placeholder to it."""
        self.toggle_unit.label.text = unit
        if unit == 'cm':
            self.height.render_kw = {**self.height.render_kw,
                                     "placeholder": "Enter height (50-250 cm)"}
        else:
            self.height.render_kw = {**self.height.render_kw,
                                     "placeholder": "Enter height (0.5-2.5 m)"}
