from pathlib import Path
import streamlit as st

from yrboard.ui.tokens import css_variables


def apply_styles():
    css_path = Path(__file__).resolve().parent / "styles.css"
    try:
        css = css_path.read_text(encoding="utf-8")
    except OSError:
        css = ""
    st.markdown(f"<style>{css_variables()}\n{css}</style>", unsafe_allow_html=True)
