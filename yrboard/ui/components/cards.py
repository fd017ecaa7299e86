import html

import streamlit as st

from yrboard.ui.components.icons import icon_html


def _esc(value) -> str:
    return html.escape("" if value is None else str(value))


def metric_html(label: str, value: str, region_id: str) -> str:
    return (
        f"<div class=\"metric\" id=\"{region_id}\">"
        f"<div class=\"metric-label\">{_esc(label)}</div>"
        f"<div class=\"metric-value\">{_esc(value)}</div>"
        f"</div>"
    )


def current_card_html(regions: dict) -> str:
    icon = icon_html(regions.get("current_symbol"), alt=regions.get("current_description") or "")
    temp = _esc(regions.get("current_temp"))
    description = _esc(regions.get("current_description"))
    rain = metric_html("Nedbør", regions.get("rain_amount"), "rainAmount")
    wind = metric_html("Vind", regions.get("wind_speed"), "windSpeed")
    return f"""
        <div class="card current-card">
          <div class="icon-slot" id="currentWeatherIcon">{icon}</div>
          <div>
            <div class="current-temp" id="currentTemp">{temp}</div>
            <div class="metric-value" id="currentDescription">{description}</div>
            {rain}
            {wind}
          </div>
        </div>
        """


def forecast_card_html(panel: dict, position: int) -> str:
    icon = icon_html(panel.get("symbol"), alt=panel.get("description") or "")
    day_name = _esc(panel.get("day_name"))
    high = _esc(panel.get("high"))
    low = _esc(panel.get("low"))
    description = _esc(panel.get("description"))
    rain = metric_html("Nedbør", panel.get("rain"), f"forecastRain{position}")
    wind = metric_html("Vind", panel.get("wind"), f"forecastWind{position}")
    return f"""
        <div class="card forecast-card" id="forecast{position}">
          <div class="forecast-day" id="day-name{position}">{day_name}</div>
          <div class="icon-slot" id="forecastIcon{position}">{icon}</div>
          <div class="forecast-temps">
            <span class="hi" id="forecastHigh{position}">{high}</span> /
            <span class="lo" id="forecastLow{position}">{low}</span>
          </div>
          <div class="metric-value" id="forecastDesc{position}">{description}</div>
          {rain}
          {wind}
        </div>
        """


def current_card(regions: dict):
    st.markdown(current_card_html(regions), unsafe_allow_html=True)


def forecast_card(panel: dict, position: int):
    st.markdown(forecast_card_html(panel, position), unsafe_allow_html=True)


def status_card(title: str, items: list[tuple[str, str]]):
    lines = "".join(
        f"<div class=\"status-line\"><span>{_esc(label)}</span><span>{_esc(value)}</span></div>"
        for label, value in items
    )
    st.markdown(
        f"""
        <div class="card status-card">
          <div class="section-title">{_esc(title)}</div>
          {lines}
        </div>
        """,
        unsafe_allow_html=True,
    )
