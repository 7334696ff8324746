import logging

import pandas as pd
import streamlit as st

from scicalc import Calculator, StorageError
from scicalc.config import Settings, configure_logging
from scicalc.modes import AngleUnit, Theme
from scicalc.storage import JsonFileStorage
from scicalc.tokens import HYPERBOLIC_PAIRS, TRIG_PAIRS, function_label

logger = logging.getLogger(__name__)

# ---------- Page / Theme ----------
st.set_page_config(page_title="SciCalc • Streamlit", page_icon="🧮", layout="centered")
st.title("🧮 Scientific Calculator")
st.caption("Streamlit • SymPy-powered • History • Memory • Degree/Radian toggle")

THEME_CSS = {
    Theme.DARK: "<style>.stApp{background:#111827;color:#f9fafb;}</style>",
    Theme.LIGHT: "<style>.stApp{background:#f9fafb;color:#111827;}</style>",
}

# ---------- Session State Defaults ----------
if "calculator" not in st.session_state:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    st.session_state.calculator = Calculator(JsonFileStorage(settings.storage_path), settings)
if "button_clicked" not in st.session_state:
    st.session_state.button_clicked = None

calc: Calculator = st.session_state.calculator

# ---------- Process button clicks ----------
def run_action(action):
    kind, value = action
    if kind == "insert":
        calc.press(value)
    elif kind == "function":
        calc.press(value, is_function=True)
    elif kind == "pair":
        calc.press_function(value)
    elif kind == "move":
        calc.move_cursor(value)
    elif kind == "history":
        calc.recall_history(value)
    else:
        {
            "backspace": calc.backspace,
            "clear_all": calc.clear,
            "mem_save": calc.memory_save,
            "mem_recall": calc.memory_recall,
            "equals": calc.calculate,
            "angle": calc.toggle_angle_unit,
            "shift": calc.toggle_shift,
            "theme": calc.toggle_theme,
            "show_history": calc.toggle_history,
            "clear_history": calc.clear_history,
        }[kind]()


if st.session_state.button_clicked:
    try:
        run_action(st.session_state.button_clicked)
    except StorageError as e:
        logger.error(f"Persisting calculator state failed: {e}")
        st.session_state.storage_warning = f"Could not save calculator state: {e}"
    # Reset the button click
    st.session_state.button_clicked = None
    st.rerun()

state = calc.state
modes = state.modes

# ---------- Display ----------
st.markdown(THEME_CSS[modes.theme], unsafe_allow_html=True)
caret = state.buffer[: state.cursor] + "│" + state.buffer[state.cursor :]
# Read-only: only the keypad may edit the buffer
st.text_input("Expression", value=caret, disabled=True)
if st.session_state.get("storage_warning"):
    st.warning(st.session_state.pop("storage_warning"))

# Buttons grid
def create_button_callback(action):
    def callback():
        st.session_state.button_clicked = action
    return callback

# Row 1: modes + memory + utility
r1 = st.columns(8)
for idx, (label, action) in enumerate([
    ("DEG" if modes.angle_unit is AngleUnit.DEGREES else "RAD", ("angle", None)),
    ("SHIFT ●" if modes.shift else "SHIFT", ("shift", None)),
    ("MS", ("mem_save", None)), ("MR", ("mem_recall", None)),
    ("◀", ("move", -1)), ("▶", ("move", 1)),
    ("DEL", ("backspace", None)), ("AC", ("clear_all", None)),
]):
    r1[idx].button(label, key=f"r1_{idx}", on_click=create_button_callback(action))

# Rows 2-3: trig / hyperbolic (shift selects the inverse)
for row_name, pairs in (("trig", TRIG_PAIRS), ("hyp", HYPERBOLIC_PAIRS)):
    cols = st.columns(len(pairs))
    for idx, pair in enumerate(pairs):
        cols[idx].button(
            function_label(pair, modes.shift),
            key=f"{row_name}_{idx}",
            type="primary" if modes.shift else "secondary",
            on_click=create_button_callback(("pair", pair)),
        )

# Row 4: more funcs
r4 = st.columns(8)
for idx, (label, action) in enumerate([
    ("√", ("function", "sqrt")), ("log", ("function", "log")), ("ln", ("function", "ln")),
    ("x²", ("insert", "^2")), ("x³", ("insert", "^3")), ("xʸ", ("insert", "^")),
    ("n!", ("insert", "!")), ("π", ("insert", "π")),
]):
    r4[idx].button(label, key=f"r4_{idx}", on_click=create_button_callback(action))

# Rows 5-8: digits and ops
rows = [
    ["7", "8", "9", "/", "("],
    ["4", "5", "6", "*", ")"],
    ["1", "2", "3", "-", "e"],
    ["0", ".", "=", "+", None],
]
for r, row in enumerate(rows):
    cols = st.columns(5)
    for i, key in enumerate(row):
        if key is None:
            continue
        action = ("equals", None) if key == "=" else ("insert", key)
        cols[i].button(key, key=f"k{r}_{i}", on_click=create_button_callback(action))

# ---------- Settings ----------
s1, s2 = st.columns(2)
s1.button(
    "☀️ Light theme" if modes.theme is Theme.DARK else "🌙 Dark theme",
    on_click=create_button_callback(("theme", None)),
)
s2.button(
    "Hide history" if modes.show_history else "Show history",
    on_click=create_button_callback(("show_history", None)),
)

# ---------- History ----------
if modes.show_history:
    st.subheader("History")
    if state.history:
        for idx, expr in enumerate(state.history):
            st.button(expr, key=f"hist_{idx}", on_click=create_button_callback(("history", expr)))
        df_hist = pd.DataFrame({"expr": list(state.history)})
        csv = df_hist.to_csv(index=False).encode("utf-8")
        h1, h2 = st.columns(2)
        h1.download_button("Download history (CSV)", csv, "calc_history.csv", "text/csv")
        h2.button("Clear history", on_click=create_button_callback(("clear_history", None)))
    else:
        st.caption("No history yet. Calculate something!")

# ---------- Footer ----------
st.divider()
st.caption("Made with ❤️ using Streamlit + SymPy. Degree mode converts sin/cos/tan arguments to radians before evaluation.")
