"""Streamlit dashboard for imported body measurements and weight trends."""

from __future__ import annotations

import asyncio
import logging
from typing import List

import streamlit as st

from bodytrend.application.dashboard import DashboardViewState, build_dashboard
from bodytrend.charts import build_preview_chart, build_trend_chart
from bodytrend.importer.application import CsvImportError, import_measurements
from bodytrend.importer.infrastructure import create_csv_source_adapter
from bodytrend.models.body import BodyMeasurement
from bodytrend.models.dashboard import DashboardView
from bodytrend.models.trend import TrendStatus
from bodytrend.settings import CsvSourceConfig, Settings, get_settings

logger = logging.getLogger(__name__)


def _state(settings: Settings) -> DashboardViewState:
    if "view_state" not in st.session_state:
        st.session_state.view_state = DashboardViewState(
            target_weight_kg=settings.target_weight_kg,
            point_count=settings.projection_point_count,
        )
    return st.session_state.view_state


def _load(settings: Settings, source: CsvSourceConfig) -> None:
    port = create_csv_source_adapter(settings=settings)
    try:
        measurements = asyncio.run(import_measurements(port, source))
    except CsvImportError as exc:
        logger.warning("Loading %s failed: %s", source.name, exc)
        st.session_state.error = str(exc)
        return
    st.session_state.error = None
    st.session_state.measurements = measurements
    st.session_state.loaded_source = source.name
    st.session_state.view_state = DashboardViewState(
        target_weight_kg=settings.target_weight_kg,
        point_count=settings.projection_point_count,
    )


def _clear() -> None:
    for key in ("measurements", "loaded_source", "view_state", "error"):
        st.session_state.pop(key, None)


def _render_importer(settings: Settings) -> None:
    with st.form("csv-url"):
        url = st.text_input(
            "Published CSV URL", placeholder="Enter Google Sheets Published CSV URL"
        )
        if st.form_submit_button("Load CSV") and url:
            _load(settings, CsvSourceConfig(name="Custom URL", url=url))
            st.rerun()

    columns = st.columns(max(1, len(settings.csv_sources)))
    for column, (key, source) in zip(columns, settings.csv_sources.items()):
        if column.button(source.name, key=f"source-{key}"):
            _load(settings, source)
            st.rerun()


def _render_controls(view: DashboardView, state: DashboardViewState) -> None:
    left, middle, right = st.columns(3)
    if left.button(f"Clear Data ({st.session_state.get('loaded_source', '')})"):
        _clear()
        st.rerun()

    with middle.popover("Data Sources"):
        for source in view.available_sources:
            checked = source in view.selected_sources
            if st.checkbox(source, value=checked, key=f"src-{source}") != checked:
                st.session_state.view_state = state.toggle_source(
                    source, view.available_sources
                )
                st.rerun()

    label = "Disable Normalization" if state.normalize else "Enable Normalization"
    if right.button(label):
        st.session_state.view_state = state.toggle_normalize()
        st.rerun()

    target = st.number_input(
        "Target weight (kg)", value=float(state.target_weight_kg), step=0.5
    )
    if target != state.target_weight_kg:
        st.session_state.view_state = state.with_target(target)
        st.rerun()


def _render_trend(view: DashboardView) -> None:
    st.subheader("Weight Trend Analysis")
    trend = view.trend
    if view.placeholder:
        st.info(view.placeholder)
        return

    if trend.status is TrendStatus.TARGET_REACHED:
        st.success(f"Target of {trend.target_weight_kg:g} kg reached")
    elif trend.status is TrendStatus.MOVING_AWAY:
        st.warning(f"Current trend is moving away from {trend.target_weight_kg:g} kg")
    elif trend.estimated_arrival is not None and trend.direction is not None:
        st.markdown(
            f"Estimated date to reach {trend.target_weight_kg:g} kg: "
            f"**{trend.estimated_arrival:%d/%m/%Y}** "
            f"({trend.direction.days_remaining:.0f} days, "
            f"{trend.weekly_rate_kg:+.2f} kg/week)"
        )
    if not trend.deviation_available:
        st.caption("Not enough samples for prediction bounds.")
    st.plotly_chart(build_trend_chart(trend), use_container_width=True)


def _render_table(view: DashboardView, state: DashboardViewState) -> None:
    header, toggle = st.columns([4, 1])
    header.subheader("Loaded Data Table Preview")
    if toggle.button("Show Less ▲" if state.table_expanded else "Show More ▼"):
        st.session_state.view_state = state.toggle_table()
        st.rerun()
    if view.is_truncated:
        st.caption(
            "Showing most recent entry only. Click 'Show More' to see all "
            f"{view.total_rows} entries."
        )
    st.dataframe([row.model_dump() for row in view.rows], use_container_width=True)


def main() -> None:
    """Render the dashboard page."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    st.set_page_config(page_title="Weight Data Tracker", layout="wide")
    st.title("Weight Data Tracker")

    measurements: List[BodyMeasurement] = st.session_state.get("measurements", [])
    if not measurements:
        _render_importer(settings)
        if st.session_state.get("error"):
            st.error(st.session_state.error)
        return

    state = _state(settings)
    view = build_dashboard(measurements, state, settings.target_epsilon_kg)
    _render_controls(view, state)

    st.subheader("Data Preview")
    st.plotly_chart(
        build_preview_chart(view.preview, view.normalized), use_container_width=True
    )
    _render_trend(view)
    _render_table(view, state)


if __name__ == "__main__":
    main()
