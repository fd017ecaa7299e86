import streamlit as st

from yrboard.ui.components.cards import current_card, forecast_card, status_card
from yrboard.ui.shell import header_html, render_header_strip, render_main_layout


def render(ctx):
    city = ctx["city"]
    view = ctx.get("view") or {}
    render_header_strip(header_html(city, ctx.get("clock", "--:--"), ctx.get("date_text", "")))

    main_col, right_col = render_main_layout()
    with main_col:
        st.markdown("<div class='section-title'>Nå</div>", unsafe_allow_html=True)
        current_card(view.get("current") or {})

        panels = view.get("forecast") or []
        if panels:
            st.markdown("<div class='section-title'>Neste dager</div>", unsafe_allow_html=True)
            cols = st.columns(len(panels))
            for position, (col, panel) in enumerate(zip(cols, panels), start=1):
                with col:
                    forecast_card(panel, position)

    with right_col:
        st.markdown("<div class='section-title'>Velg by på mobil</div>", unsafe_allow_html=True)
        if ctx.get("qr_html"):
            st.markdown(ctx["qr_html"], unsafe_allow_html=True)
        status_card(
            "Status",
            [
                ("Kilde", "MET Norge / yr.no"),
                ("Oppdatert", ctx.get("updated_text") or "--"),
                ("Varsel", ctx.get("status") or "--"),
            ],
        )
