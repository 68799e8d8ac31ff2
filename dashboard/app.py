import streamlit as st

from analytics.chart_math import (
    average_by_weekday, average_daily_deltas_by_weekday, average_value, convert, parse_selected_data,
    select_weekday_by_cumulative_value,
)
from analytics.charts import step_bar_chart, weekday_delta_chart, weekday_pie_chart, weight_line_chart
from analytics.chart_types import ChartType
from health_store import HealthStore
from shared.constants import DATA_DIR
from shared.errors import AuthNotDeterminedError, NoDataError, StepCounterError
from shared.schemas import MetricKind

PRIMING_DESCRIPTION = (
    "This app displays your step and weight data in interactive charts.\n\n"
    "You can also add new step or weight data to the Health store from this app. "
    "Your data is private and secured."
)

st.set_page_config(page_title="Step Counter", layout="wide")
st.title("Dashboard")

store = HealthStore(DATA_DIR)


def show_error(error: StepCounterError):
    st.error(f"**{error.title}**\n\n{error.failure_reason}")


def show_permission_priming():
    st.subheader("Health Data Integration")
    st.write(PRIMING_DESCRIPTION)
    allow, deny = st.columns(2)
    with allow:
        if st.button("Connect Health Data", type="primary"):
            store.request_authorization(list(MetricKind), granted=True)
            st.rerun()
    with deny:
        if st.button("Don't Allow"):
            store.request_authorization(list(MetricKind), granted=False)
            st.rerun()


def chart_header(chart_type: ChartType, average=None):
    st.subheader(f"{chart_type.symbol} {chart_type.title}")
    st.caption(chart_type.subtitle(average))
    if chart_type.is_nav:
        st.page_link("pages/1_Health_Data.py", label="Show all data")


try:
    steps = store.fetch_step_count()
    weights = store.fetch_weights()
    weight_diffs = store.fetch_weights_for_differentials()
except AuthNotDeterminedError:
    show_permission_priming()
    st.stop()
except NoDataError as e:
    show_error(e)
    if st.button("Add Simulator Data"):
        store.add_simulator_data()
        st.rerun()
    st.stop()
except StepCounterError as e:
    show_error(e)
    st.stop()

selected = st.radio("Selected Stat", [kind.value.title() for kind in MetricKind], horizontal=True)

if selected == "Steps":
    points = convert(steps)
    chart_header(ChartType.STEP_BAR, average_value(points))
    st.altair_chart(step_bar_chart(points), use_container_width=True)

    day = st.date_input("Inspect day", value=points[-1].date.date() if points else None)
    selected_point = parse_selected_data(points, day)
    if selected_point is not None:
        st.metric(selected_point.date.strftime("%b %d"), f"{selected_point.value:,.0f} steps")

    chart_header(ChartType.STEP_WEEKDAY_PIE)
    weekday_averages = average_by_weekday(steps)
    total = sum(s.value for s in weekday_averages)
    if total > 0:
        angle = st.slider("Select slice", min_value=0.0, max_value=float(total), value=0.0, format="%.0f")
        slice_ = select_weekday_by_cumulative_value(weekday_averages, angle)
        st.altair_chart(weekday_pie_chart(weekday_averages, slice_), use_container_width=True)
        if slice_ is not None:
            st.metric(slice_.weekday_title, f"{slice_.value:,.0f} steps")
    else:
        st.info("There is no step count data from the Health store.")
else:
    points = convert(weights)
    chart_header(ChartType.WEIGHT_LINE, average_value(points))
    st.altair_chart(weight_line_chart(points), use_container_width=True)

    chart_header(ChartType.WEIGHT_DIFF_BAR)
    deltas = average_daily_deltas_by_weekday(weight_diffs)
    if deltas:
        st.altair_chart(weekday_delta_chart(deltas), use_container_width=True)
    else:
        st.info("There is no weight data from the Health store.")
