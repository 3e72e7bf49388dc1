"""
Unit tests for the dual calculator pages.
Uses Flask test client; state is carried in the session cookie between requests.
"""
import unittest

from flask import Flask

from dual_calculator.projects.calculators.routes import calculators_bp
from dual_calculator.projects.registry import get_tabs


def _create_test_app(csrf_enabled=False):
    """Minimal app with only the calculators blueprint."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["WTF_CSRF_ENABLED"] = csrf_enabled
    app.register_blueprint(calculators_bp)
    return app


class CalculatorRouteTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def state(self):
        r = self.client.get("/api/state")
        self.assertEqual(r.status_code, 200)
        return r.get_json()

    def page(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        return r.get_data(as_text=True)


class TestShell(CalculatorRouteTestCase):

    def test_default_tab_is_bmi(self):
        html = self.page()
        self.assertIn("Calculate your Body Mass Index", html)
        self.assertIn("BMI Categories:", html)
        self.assertIn("18.5 - 24.9", html)
        self.assertEqual(self.state()["active_tab"], "bmi")

    def test_switch_to_basic_calculator(self):
        r = self.client.get("/tab/calculator")
        self.assertEqual(r.status_code, 302)
        html = self.page()
        self.assertIn("First Number", html)
        self.assertIn("Second Number", html)
        self.assertNotIn("BMI Categories:", html)
        self.assertEqual(self.state()["active_tab"], "calculator")

    def test_tab_bar_lists_every_calculator_in_order(self):
        tabs = get_tabs("calculator")
        self.assertEqual([t["id"] for t in tabs], ["bmi", "calculator"])
        self.assertEqual([t["active"] for t in tabs], [False, True])

    def test_unknown_tab_returns_404(self):
        r = self.client.get("/tab/scientific")
        self.assertEqual(r.status_code, 404)

    def test_tab_switch_preserves_both_calculators(self):
        self.client.post("/bmi", data={"weight": "70", "height": "175", "calculate": "Calculate BMI"})
        self.client.get("/tab/calculator")
        self.client.post("/basic", data={"first": "2", "second": "3", "add": "+"})
        self.client.get("/tab/bmi")
        self.client.get("/tab/calculator")

        state = self.state()
        self.assertEqual(state["bmi"]["result"]["value"], 22.9)
        self.assertEqual(state["bmi"]["weight"], "70")
        self.assertEqual(state["basic"]["result"], "5")
        self.assertEqual(len(state["basic"]["history"]), 1)


class TestBasicCalculatorRoutes(CalculatorRouteTestCase):

    def setUp(self):
        super().setUp()
        self.client.get("/tab/calculator")

    def test_multiply(self):
        r = self.client.post("/basic", data={"first": "6", "second": "7", "multiply": "×"})
        self.assertEqual(r.status_code, 302)

        state = self.state()["basic"]
        self.assertEqual(state["result"], "42")
        self.assertEqual(state["selected_operation"], "*")
        self.assertEqual(state["expression_summary"], "6 × 7 = 42")
        self.assertEqual(state["history"][0]["expression"], "6 × 7")

        html = self.page()
        self.assertIn("6 × 7 = 42", html)
        self.assertIn("Recent Calculations", html)

    def test_division_by_zero_shown_without_history(self):
        self.client.post("/basic", data={"first": "5", "second": "0", "divide": "÷"})
        state = self.state()["basic"]
        self.assertEqual(state["result"], "Error: Division by zero")
        self.assertIsNone(state["expression_summary"])
        self.assertEqual(state["history"], [])
        self.assertIn("Error: Division by zero", self.page())

    def test_validation_errors_shown_inline(self):
        self.client.post("/basic", data={"first": "", "second": "1000000", "add": "+"})
        state = self.state()["basic"]
        self.assertEqual(set(state["errors"]), {"first", "second"})
        self.assertIsNone(state["result"])
        self.assertIn("Number must be between -999,999 and 999,999", self.page())

    def test_clear_keeps_history(self):
        self.client.post("/basic", data={"first": "1", "second": "2", "add": "+"})
        self.client.post("/basic", data={"first": "1", "second": "2", "clear": "Clear All"})
        state = self.state()["basic"]
        self.assertEqual(state["first"], "")
        self.assertIsNone(state["result"])
        self.assertIsNone(state["selected_operation"])
        self.assertEqual(len(state["history"]), 1)

    def test_clear_history(self):
        self.client.post("/basic", data={"first": "1", "second": "2", "add": "+"})
        self.client.post("/basic", data={"first": "1", "second": "2",
                                         "clear_history": "Clear History"})
        state = self.state()["basic"]
        self.assertEqual(state["history"], [])
        self.assertEqual(state["result"], "3")

    def test_history_capped_at_five(self):
        for i in range(7):
            self.client.post("/basic", data={"first": str(i), "second": "1", "subtract": "−"})
        history = self.state()["basic"]["history"]
        self.assertEqual(len(history), 5)
        self.assertEqual(history[0]["expression"], "6 - 1")
        self.assertEqual(history[-1]["expression"], "2 - 1")


class TestBmiRoutes(CalculatorRouteTestCase):

    def test_calculate(self):
        r = self.client.post("/bmi", data={"weight": "70", "height": "175",
                                           "calculate": "Calculate BMI"})
        self.assertEqual(r.status_code, 302)
        result = self.state()["bmi"]["result"]
        self.assertEqual(result["value"], 22.9)
        self.assertEqual(result["category"], "normal")

        html = self.page()
        self.assertIn("22.9", html)
        self.assertIn("Normal weight - Keep up the good work!", html)

    def test_validation_errors(self):
        self.client.post("/bmi", data={"weight": "300.1", "height": "", "calculate": "Calculate BMI"})
        errors = self.state()["bmi"]["errors"]
        self.assertEqual(errors["weight"], "Weight must be between 20 and 300 kg")
        self.assertEqual(errors["height"], "Please enter a valid height")
        self.assertIn("Weight must be between 20 and 300 kg", self.page())

    def test_toggle_unit_then_calculate_in_meters(self):
        self.client.post("/bmi", data={"weight": "50", "height": "", "toggle_unit": "cm"})
        state = self.state()["bmi"]
        self.assertEqual(state["height_unit"], "m")
        self.assertEqual(state["weight"], "50")
        self.assertIn("Enter height (0.5-2.5 m)", self.page())

        self.client.post("/bmi", data={"weight": "50", "height": "1.60", "calculate": "Calculate BMI"})
        self.assertEqual(self.state()["bmi"]["result"]["value"], 19.5)

    def test_reset_keeps_unit(self):
        self.client.post("/bmi", data={"weight": "50", "height": "1.6", "toggle_unit": "cm"})
        self.client.post("/bmi", data={"weight": "50", "height": "1.6", "calculate": "Calculate BMI"})
        self.client.post("/bmi", data={"weight": "50", "height": "1.6", "reset": "Reset"})
        state = self.state()["bmi"]
        self.assertEqual(state["weight"], "")
        self.assertEqual(state["height"], "")
        self.assertIsNone(state["result"])
        self.assertEqual(state["height_unit"], "m")


class TestCsrf(unittest.TestCase):
    """Form posts without a CSRF token are rejected and leave state alone."""

    def setUp(self):
        self.app = _create_test_app(csrf_enabled=True)
        self.client = self.app.test_client()

    def test_missing_token_flashes_and_redirects(self):
        r = self.client.post("/bmi", data={"weight": "70", "height": "175",
                                           "calculate": "Calculate BMI"})
        self.assertEqual(r.status_code, 302)
        self.assertIsNone(self.client.get("/api/state").get_json()["bmi"]["result"])
        html = self.client.get("/").get_data(as_text=True)
        self.assertIn("Your form has expired. Please try again.", html)


class TestCorruptSession(CalculatorRouteTestCase):

    def test_unreadable_state_is_discarded(self):
        with self.client.session_transaction() as sess:
            sess["calculators.basic"] = {"history": [{"expression": "1 + 1"}]}
            sess["calculators.active_tab"] = "gone"
        state = self.state()
        self.assertEqual(state["basic"]["history"], [])
        self.assertEqual(state["active_tab"], "bmi")


if __name__ == "__main__":
    unittest.main()
