import base64

import numpy as np
import streamlit as st

from quota_builder.config import API_BASE_ENV, api_base_or_none
from quota_builder.dimensions import AGE_GROUPING_OPTIONS, DIMENSIONS, SEX_FILTERS, pretty_dimension
from quota_builder.export import dimension_table
from quota_builder.session import QuotaSession

st.set_page_config(
    page_title="Quota Builder",
    layout="wide"
)

# =====================================================
# CSS
# =====================================================
st.markdown("""
<style>

/* Buttons */
.stButton > button {
    padding: 8px 14px !important;
    font-size: 14px !important;
    font-weight: 600 !important;
    border-radius: 10px !important;
    border: 2px solid #344b77 !important;
    transition: 0.25s ease !important;
}

.stButton > button[kind="secondary"] {
    color: #344b77 !important;
    background: #fff !important;
}

.stButton > button[kind="primary"] {
    color: #fff !important;
    background: #344b77 !important;
}

.card {
    width: 100%;
    min-height: 120px;
    padding: 15px 20px;
    border-radius: 12px;
    background-color: #ffffff;
    border: 1px solid #e6e6e6;
    box-shadow: 0 1px 3px rgba(0,0,0,0.07);
    margin-bottom: 10px;
    }
.card-title {
    font-size: 18px;
    font-weight: 600;
    color: #344b77;
    margin-bottom: 8px;
    }
.card-value {
    font-size: 16px;
    color: #000000;
    margin-bottom: 4px;
    }

</style>
""", unsafe_allow_html=True)


# =========================
# HELPERS
# =========================

def create_download_link(file_bytes: bytes, filename: str, label: str):
    """Create full-width HTML download button (without rerun)."""
    b64 = base64.b64encode(file_bytes).decode()
    button_html = f"""<a href="data:application/vnd.openxmlformats-officedocument.spreadsheetml.sheet;base64,{b64}" download="{filename}" style="text-decoration:none;">
                <div style="
                    background-color:#344b77;
                    color:white;
                    text-align:center;
                    font-weight:500;
                    font-size:16px;
                    padding:10px;
                    border-radius:8px;
                    margin-top:8px;
                    width:100%;
                    box-sizing:border-box;
                    cursor:pointer;
                ">
                {label}
                </div>
            </a>
        """
    st.markdown(button_html, unsafe_allow_html=True)


def card(title: str, lines):
    values = "".join(f"<div class='card-value'>{line}</div>" for line in lines)
    st.markdown(f"""
    <div class='card'>
        <div class='card-title'>{title}</div>
        {values}
    </div>
    """, unsafe_allow_html=True)


def request_calculation():
    st.session_state.calculate_requested = True


def render_dimension(dim: str, res, sample_n: int):
    st.subheader(pretty_dimension(dim))

    if res.notes:
        st.caption("Notes / warnings")
        st.markdown("\n".join(f"- {n}" for n in res.notes))

    st.caption(f"Base: {res.base:,}")
    st.dataframe(dimension_table(res), width="stretch", hide_index=True)

    if not res.cells:
        return
    if res.quota_total != sample_n:
        st.warning(
            f"Quotas in this dimension add up to {res.quota_total}, not N = {sample_n}."
        )
    if not np.isclose(res.share_total, 1.0, atol=0.01):
        st.warning(f"Shares in this dimension add up to {res.share_total * 100:.2f}%.")


# =========================
# STATE
# =========================

if "quota_session" not in st.session_state:
    st.session_state.quota_session = QuotaSession()
if "calculate_requested" not in st.session_state:
    st.session_state.calculate_requested = False

session = st.session_state.quota_session
params = session.params

# =========================
# UI: SIDEBAR
# =========================

st.title("Quota Builder")

st.sidebar.header("Reference")

params.year = st.sidebar.number_input("Year", value=params.year, step=1, key="year")
params.age_from = st.sidebar.number_input("Age From", value=params.age_from, step=1, key="age_from")
params.age_to = st.sidebar.number_input("Age To", value=params.age_to, step=1, key="age_to")
params.sample_n = st.sidebar.number_input("Sample N", min_value=1, value=params.sample_n, step=100, key="sample_n")

grouping_labels = dict(AGE_GROUPING_OPTIONS)
grouping_values = [value for value, _ in AGE_GROUPING_OPTIONS]
params.age_grouping_years = st.sidebar.selectbox(
    "Age Grouping",
    options=grouping_values,
    index=grouping_values.index(params.age_grouping_years),
    format_func=lambda v: grouping_labels[v],
    key="age_grouping_years",
)

sex_labels = dict(SEX_FILTERS)
sex_values = [value for value, _ in SEX_FILTERS]
params.sex_filter = st.sidebar.selectbox(
    "Sex Filter",
    options=sex_values,
    index=sex_values.index(params.sex_filter),
    format_func=lambda v: sex_labels[v],
    key="sex_filter",
)

# =========================
# UI: DIMENSIONS
# =========================

st.markdown("**Dimensions**")
cols = st.columns(5)
for i, (key, label) in enumerate(DIMENSIONS):
    with cols[i % 5]:
        st.button(
            label,
            key=f"dim_{key}",
            type="primary" if key in session.dimensions else "secondary",
            on_click=session.toggle,
            args=(key,),
            width="stretch",
        )

busy = session.loading or st.session_state.calculate_requested
st.sidebar.markdown("---")
st.sidebar.button(
    "Calculating..." if busy else "Calculate",
    on_click=request_calculation,
    disabled=busy,
)
st.sidebar.caption(f"Backend: `{api_base_or_none() or f'(missing {API_BASE_ENV})'}`")

with st.expander("Request payload", expanded=False):
    st.json(session.payload())

# =========================
# MAIN LOGIC
# =========================

if st.session_state.calculate_requested:
    # Cleared before the call: a rerun that interrupts this one must not resend.
    st.session_state.calculate_requested = False
    with st.spinner("Calculating..."):
        session.calculate()
    st.rerun()

if session.error:
    st.error(session.error)

data = session.response

if data is None:
    if not session.error:
        st.info("Set the reference parameters, pick dimensions and click **'Calculate'**.")
    st.stop()

col1, col2 = st.columns(2)
with col1:
    card("Population", [f"Population total: <b>{data.population_total:,}</b>"])
with col2:
    card("Sample", [
        f"Sample N: <b>{data.sample_n:,}</b>",
        f"Dimensions: <b>{len(data.results)}</b>",
    ])

exported = session.export()
if exported is not None:
    filename, file_bytes = exported
    create_download_link(file_bytes=file_bytes, filename=filename, label="Download Excel")

for dim, res in data.results.items():
    st.markdown("---")
    render_dimension(dim, res, data.sample_n)

failure = data.partial_failure()
if failure is not None:
    st.markdown("---")
    st.subheader("Some dimensions failed")
    st.code(failure.details(), language="json")
