import html

import streamlit as st

from yrboard.cities import CITIES, city_label


def header_html(city: dict, clock: str, date_text: str) -> str:
    return (
        "<div>"
        f"<div class='city-name'>{html.escape(city['name'])}</div>"
        f"<div class='location-detail'>{html.escape(city['address'])}</div>"
        "</div>"
        "<div>"
        f"<div class='current-time' id='currentTime'>{html.escape(clock)}</div>"
        f"<div class='current-date' id='currentDate'>{html.escape(date_text)}</div>"
        "</div>"
    )


def render_header_strip(content_html: str):
    st.markdown(f"<div class='header-strip'>{content_html}</div>", unsafe_allow_html=True)


def render_left_rail(current_key: str) -> str:
    with st.sidebar:
        st.markdown("<div class='section-title'>By</div>", unsafe_allow_html=True)
        options = list(CITIES)
        return st.selectbox(
            "By",
            options,
            index=options.index(current_key),
            format_func=city_label,
            label_visibility="collapsed",
        )


def render_main_layout():
    main_col, right_col = st.columns([3, 1], gap="large")
    return main_col, right_col
