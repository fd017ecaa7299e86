import streamlit as st

from yrboard.cities import CITIES, city_label
from yrboard.errors import WeatherError
from yrboard.logs import log


def render(controller, selected: str | None = None):
    st.markdown("<div class='section-title'>Velg by</div>", unsafe_allow_html=True)
    options = list(CITIES)
    preselected = selected or controller.city_key
    choice = st.radio(
        "Velg by",
        options,
        index=options.index(preselected),
        format_func=city_label,
        label_visibility="collapsed",
    )

    confirm_col, cancel_col = st.columns(2)
    if confirm_col.button("Bekreft", type="primary", use_container_width=True):
        log(f"Confirming city selection: {choice}")
        try:
            controller.switch_city(choice)
        except WeatherError as exc:
            st.session_state.last_error = str(exc)
        st.query_params.clear()
        st.rerun()
    if cancel_col.button("Avbryt", use_container_width=True):
        log("City selection cancelled")
        st.query_params.clear()
        st.rerun()
