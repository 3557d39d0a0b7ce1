from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_FILE = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def at():
    return AppTest.from_file(str(APP_FILE), default_timeout=30).run()


def net_value(at):
    return at.metric[0].value


def test_default_render(at):
    assert not at.exception
    assert at.title[0].value == "Calculator Salariu Net"
    assert at.number_input(key="gross").value == 5800.0
    assert at.radio(key="period").value == "monthly"
    assert net_value(at) == "3.393,00 RON"
    assert len(at.error) == 0


def test_yearly_period_multiplies_by_twelve(at):
    at.radio(key="period").set_value("yearly").run()
    assert net_value(at) == "40.716,00 RON"


def test_new_gross_recomputes(at):
    at.number_input(key="gross").set_value(10000.0).run()
    assert net_value(at) == "5.850,00 RON"


def test_invalid_amount_keeps_last_breakdown(at):
    at.number_input(key="gross").set_value(-100.0).run()
    assert len(at.error) == 1
    assert "1.000.000,00" in at.error[0].value
    assert net_value(at) == "3.393,00 RON"

    at.number_input(key="gross").set_value(1000.0).run()
    assert len(at.error) == 0
    assert net_value(at) == "585,00 RON"


def test_reset_restores_defaults(at):
    at.number_input(key="gross").set_value(20000.0).run()
    at.radio(key="period").set_value("yearly").run()
    at.button(key="reset").click().run()

    assert at.number_input(key="gross").value == 5800.0
    assert at.radio(key="period").value == "monthly"
    assert net_value(at) == "3.393,00 RON"


def test_language_toggle_changes_labels_only(at):
    at.button(key="language_toggle").click().run()
    assert at.title[0].value == "Net Salary Calculator"
    assert net_value(at) == "3,393.00 RON"
    assert at.number_input(key="gross").value == 5800.0


def test_copy_text_matches_breakdown(at):
    assert at.code[0].value.splitlines() == [
        "Salariu Brut (RON): 5.800,00 RON",
        "Contribuția la sănătate (10%): 580,00 RON",
        "Contribuția la asigurări sociale (25%): 1.450,00 RON",
        "Impozit pe venit (10% după contribuții): 377,00 RON",
        "Salariu Net: 3.393,00 RON",
    ]
    assert len(at.success) == 0

    at.radio(key="period").set_value("yearly").run()
    assert at.code[0].value.splitlines()[-1] == "Salariu Net: 40.716,00 RON"


def test_language_button_shows_current_language(at):
    assert at.button(key="language_toggle").label == "RO"
    at.button(key="language_toggle").click().run()
    assert at.button(key="language_toggle").label == "EN"
