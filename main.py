"""
Break tracker - dashboard
"""
import sys
from io import BytesIO
from pathlib import Path

base_path = Path(__file__).parent
sys.path.insert(0, str(base_path / "src"))


def launch_streamlit():
    """Start this script under ``streamlit run``."""
    import streamlit.web.cli as stcli
    script_path = __file__

    sys.argv = [
        "streamlit",
        "run",
        script_path,
        "--server.headless=true",
        "--server.port=8501",
        "--server.address=localhost",
        "--browser.gatherUsageStats=false",
    ]
    sys.exit(stcli.main())


if __name__ == "__main__":
    # python main.py re-launches itself through streamlit
    if not ('streamlit' in sys.argv[0] or (len(sys.argv) > 1 and sys.argv[1] == 'run')):
        launch_streamlit()

import pandas as pd
import plotly.express as px
import streamlit as st

from break_tracker import (
    BreakTimeStore,
    analyze,
    concurrency_timeline,
    export_to_excel,
    format_interval,
    report_to_frame,
    resolve_times_path,
    setup_logger,
    validate_entry,
)

setup_logger("break_tracker")

st.set_page_config(
    page_title="Driver breaks",
    page_icon="☕",
    layout="wide",
)

st.title("☕ Driver breaks")
st.markdown("---")

# Times file
with st.sidebar:
    times_path = st.text_input("Times file", value=str(resolve_times_path()))
    st.caption("One break per line, e.g. `13:1514:00`")

store = BreakTimeStore(times_path)

# Add entry
with st.form("add_break", clear_on_submit=True):
    entry = st.text_input("New break (HH:MMHH:MM)", placeholder="13:1514:00")
    submitted = st.form_submit_button("Add")
    if submitted:
        ok, message = validate_entry(entry)
        if not ok:
            st.error(f"Invalid break time: {entry}\n\n{message}")
        else:
            try:
                store.append(entry)
                st.success(f"Entry added: {entry}")
            except OSError as exc:
                st.error(f"Error writing to file: {exc}")

try:
    intervals = store.load()
except OSError as exc:
    st.error(f"Error reading {store.path}: {exc}")
    st.stop()

if not intervals:
    st.warning("No break times found.")
    st.stop()

report = analyze(intervals)

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Total drivers", report.total_intervals)
with col2:
    st.metric("Max on break", report.max_concurrency)
with col3:
    st.metric("Free drivers", report.free_drivers)

tab1, tab2, tab3 = st.tabs(["📊 Busiest periods", "📋 Breaks", "📥 Export"])

with tab1:
    st.dataframe(report_to_frame(report), width="stretch", hide_index=True)

    timeline = concurrency_timeline(intervals)
    fig = px.line(
        timeline,
        x="time",
        y="concurrency",
        line_shape="hv",
        markers=True,
        labels={"time": "Time", "concurrency": "Drivers on break"},
    )
    st.plotly_chart(fig, width="stretch")

with tab2:
    df = pd.DataFrame([interval.to_dict() for interval in intervals])
    df["break"] = [format_interval(interval) for interval in intervals]
    st.dataframe(df, width="stretch", hide_index=True)

with tab3:
    buffer = BytesIO()
    if export_to_excel(report, buffer):
        st.download_button(
            "Download busiest periods (.xlsx)",
            data=buffer.getvalue(),
            file_name="busiest_periods.xlsx",
        )

st.markdown("---")
st.markdown(
    "<div style='text-align: center; color: gray;'>"
    f"Data is read from {store.path}"
    "</div>",
    unsafe_allow_html=True
)
