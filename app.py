# -*- coding: utf-8 -*-
import logging

import streamlit as st
import streamlit.components.v1 as components

from charts import build_pie_chart
from copy_button import copy_button_html
from formatting import (
    breakdown_frame,
    copy_payload,
    format_amount,
    format_money,
    formula_lines,
    to_csv_bytes,
)
from salary_calculator import CalculatorState, Period
from settings import DEFAULT_LANGUAGE, MAX_GROSS_AMOUNT, configure_logging
from translations import get_text, toggle_language

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Calculator Salariu Net", layout="centered")

st.markdown("""
<style>
.stButton > button { width: 100%; }
div[data-testid="stMetricValue"] { color: #4F46E5; }
</style>
""", unsafe_allow_html=True)

# ==============================
# Session state
# ==============================
if "calculator" not in st.session_state:
    st.session_state.calculator = CalculatorState()
    st.session_state.language = DEFAULT_LANGUAGE
    logger.info("New session started")

calculator: CalculatorState = st.session_state.calculator

# widget values follow the calculator when missing (first run, reset)
if "gross" not in st.session_state:
    st.session_state.gross = float(calculator.gross_amount)
if "period" not in st.session_state:
    st.session_state.period = calculator.period.value


def t(key: str) -> str:
    return get_text(st.session_state.language, key)


# ==============================
# Callbacks
# ==============================
def on_input_change():
    calculator.update(st.session_state.gross, Period(st.session_state.period))


def on_reset():
    calculator.reset()
    st.session_state.gross = float(calculator.gross_amount)
    st.session_state.period = calculator.period.value


def on_toggle_language():
    st.session_state.language = toggle_language(st.session_state.language)


# ==============================
# Header
# ==============================
language = st.session_state.language
head_left, head_right = st.columns([5, 1])
with head_left:
    st.title(t("title"))
    st.caption(t("caption"))
with head_right:
    st.button(t("language"), key="language_toggle", on_click=on_toggle_language)

# ==============================
# Input / results
# ==============================
left, right = st.columns(2)

with left:
    st.number_input(t("grossSalary"), key="gross", step=100.0, format="%.2f", on_change=on_input_change)
    st.radio(
        t("period"),
        options=[p.value for p in Period],
        format_func=t,
        key="period",
        horizontal=True,
        on_change=on_input_change,
    )
    if calculator.error is not None:
        st.error(t("outOfRange").format(max=format_amount(MAX_GROSS_AMOUNT, language)))

    breakdown = calculator.breakdown
    st.subheader(t("calculationDetails"))
    for label, line in formula_lines(breakdown, language):
        with st.container(border=True):
            st.markdown(f"**{label}**")
            st.caption(line)

with right:
    st.plotly_chart(build_pie_chart(breakdown, language), use_container_width=True)
    st.metric(t("finalNetSalary"), format_money(breakdown.net_salary, language))

    payload = copy_payload(breakdown, language)
    b1, b2 = st.columns(2)
    with b1:
        st.button(t("reset"), key="reset", on_click=on_reset)
    with b2:
        components.html(copy_button_html(payload, t("copy"), t("copied")), height=45)

    st.download_button(
        label=t("download"),
        data=to_csv_bytes(breakdown_frame(breakdown, language)),
        file_name="salary_breakdown.csv",
        mime="text/csv",
    )

with st.expander(t("summary")):
    st.write(f"{t('taxableIncome')}: {format_money(breakdown.taxable_income, language)}")
    st.code(payload, language=None)
