# ui/dashboard.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import logging
import streamlit as st
import config
from exceptions import ResumeTailorError
from parsers.extract import DocumentExtractor
from ui.client import submit_analysis
from ui.presenter import render_result

logger = logging.getLogger(__name__)

# -------------------- CONFIG --------------------
st.set_page_config(page_title="Resume Tailor", page_icon="📝", layout="centered")
st.title("Resume Analyzer: Tailor for a Role")

st.markdown(
    "Upload your resume (PDF or DOCX), enter the role & company, "
    "and get structured suggestions to tailor your resume."
)


@st.cache_resource
def get_extractor(engine: str) -> DocumentExtractor:
    return DocumentExtractor(pdf_engine=engine)


# -------------------- SESSION STATE --------------------
if "api_url" not in st.session_state:
    st.session_state.api_url = config.API_URL

# At most one analysis in flight: while "pending" holds a submission the
# submit button stays disabled.
for key in ("pending", "result", "error"):
    if key not in st.session_state:
        st.session_state[key] = None

busy = st.session_state.pending is not None

# -------------------- FORM --------------------
with st.form("analyze_form", clear_on_submit=False):
    resume_file = st.file_uploader("Upload Resume (PDF or DOCX)", type=["pdf", "docx"])
    role = st.text_input("Target Role")
    company = st.text_input("Company (optional)")
    submitted = st.form_submit_button(
        "Analyzing..." if busy else "Analyze Resume",
        disabled=busy,
    )

if submitted and not busy:
    st.session_state.pending = {
        "file_name": resume_file.name if resume_file else None,
        "data": resume_file.getvalue() if resume_file else None,
        "role": role,
        "company": company,
    }
    st.rerun()

if busy:
    job = st.session_state.pending
    # a new submission replaces whatever was shown before
    st.session_state.result = None
    st.session_state.error = None
    with st.spinner("⏳ Analyzing resume..."):
        try:
            st.session_state.result = submit_analysis(
                job["file_name"],
                job["data"],
                job["role"],
                job["company"],
                api_url=st.session_state.api_url,
                extractor=get_extractor(config.PDF_ENGINE),
            )
        except ResumeTailorError as e:
            logger.error(f"Analysis failed: {e.message}")
            st.session_state.error = e.message
        finally:
            st.session_state.pending = None
    st.rerun()

# -------------------- RESULT --------------------
if st.session_state.error:
    st.error(st.session_state.error)

if st.session_state.result is not None:
    st.subheader("Analysis Result:")
    render_result(st.session_state.result)
