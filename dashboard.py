import os
from datetime import datetime
from zoneinfo import ZoneInfo

import streamlit as st
from streamlit_autorefresh import st_autorefresh

from yrboard.controller import DEFAULT_CITY, WeatherController
from yrboard.display import build_view, format_clock, format_long_date
from yrboard.errors import WeatherError
from yrboard.forecast import LOCAL_TZ
from yrboard.logs import log
from yrboard.mobile import parse_mobile_params
from yrboard.pages import city_picker as page_city_picker
from yrboard.pages import home as page_home
from yrboard.qr import build_deep_link, qr_markup
from yrboard.ui.apply_styles import apply_styles
from yrboard.ui.shell import render_left_rail

CLOCK_REFRESH_SECONDS = int(os.getenv("CLOCK_REFRESH_SECONDS", "60"))

st.set_page_config(
    page_title="Været i Norge",
    layout="wide",
)

apply_styles()

if "controller" not in st.session_state:
    st.session_state.controller = WeatherController(DEFAULT_CITY)
controller = st.session_state.controller

# ------------------------
# Mobile deep link (?mobile=true&city=<key>)
# ------------------------
mobile = parse_mobile_params(st.query_params)
if mobile is not None:
    page_city_picker.render(controller, mobile["selected"])
    st.stop()

# ------------------------
# Periodic rerun keeps the clock current; data refresh follows its own interval
# ------------------------
if CLOCK_REFRESH_SECONDS > 0:
    st_autorefresh(
        interval=CLOCK_REFRESH_SECONDS * 1000,
        key="clock_autorefresh",
    )

selected_city = render_left_rail(controller.city_key)
if selected_city != controller.city_key:
    try:
        controller.switch_city(selected_city)
        st.session_state.last_error = None
    except WeatherError as exc:
        st.session_state.last_error = str(exc)

now = datetime.now(ZoneInfo(LOCAL_TZ))
if controller.is_due(now):
    try:
        controller.refresh()
        st.session_state.last_error = None
    except WeatherError as exc:
        st.session_state.last_error = str(exc)

try:
    qr_html = qr_markup(build_deep_link(controller.city_key, st.context.url))
except Exception as e:
    log(f"QR code generation failed, but app continues: {repr(e)}")
    qr_html = None

updated = controller.updated_at
page_home.render(
    {
        "city": controller.city,
        "view": build_view(controller.selection),
        "clock": format_clock(now),
        "date_text": format_long_date(now),
        "qr_html": qr_html,
        "status": st.session_state.get("last_error") or controller.status,
        "updated_text": updated.strftime("%H:%M") if updated else None,
    }
)
