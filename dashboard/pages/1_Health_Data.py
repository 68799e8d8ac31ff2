from datetime import date

import pandas as pd
import streamlit as st

from health_store import HealthStore
from shared.constants import DATA_DIR, FETCH_CONFIG, METRIC_CONFIG
from shared.errors import StepCounterError, parse_metric_value
from shared.schemas import MetricKind
from shared.utils import start_of_day

store = HealthStore(DATA_DIR)

kind = MetricKind(st.radio("Metric", [k.value for k in MetricKind], horizontal=True,
                           format_func=lambda v: METRIC_CONFIG[v]["title"]))
config = METRIC_CONFIG[kind.value]

st.title(config["title"])

with st.expander("Add Data"):
    with st.form("add_data", clear_on_submit=True):
        entry_date = st.date_input("Date", value=date.today(), max_value=date.today())
        entry_value = st.text_input(config["title"], placeholder="Value")
        if st.form_submit_button("Add Data"):
            try:
                store.write_sample(kind, start_of_day(entry_date), parse_metric_value(entry_value))
                st.success(f"Added {entry_value} for {entry_date:%b %d, %Y}")
            except StepCounterError as e:
                st.error(f"**{e.title}**\n\n{e.failure_reason}")

try:
    samples = store.fetch_daily(kind, FETCH_CONFIG[f"{kind.value}_days_back"])
except StepCounterError as e:
    st.error(f"**{e.title}**\n\n{e.failure_reason}")
    st.stop()

rows = [
    {"Date": s.date.strftime("%b %d, %Y"), config["title"]: round(s.value, config["fraction_digits"])}
    for s in reversed(samples)
]
st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
