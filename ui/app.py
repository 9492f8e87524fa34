"""
Mentor Matching UI

A Streamlit application for uploading mentor and mentee tables,
tuning match weights and reviewing the top mentors for each mentee.

Design:
- Soft neutral palette (off-white, charcoal, subtle teal accent)
- Upload cards, weight sliders, per-mentee match cards
- Match scores shown as percentages with colour bands

Run with: streamlit run ui/app.py
"""

import html
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from mentormatch.configs import load_config, validate_config, default_config, resolve_paths
from mentormatch.data_loading import (
    load_mentors,
    load_mentees,
    RecordValidationError,
    REQUIRED_MENTOR_FIELDS,
    REQUIRED_MENTEE_FIELDS,
)
from mentormatch.ranking import MentorRanker, MatchResult
from mentormatch.records import Mentor, Mentee
from mentormatch.scoring import MatchWeights, ScoringVariant
from mentormatch.storage import MemStorage

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

CONFIG_PATH = project_root / "configs" / "config.yaml"
WEIGHT_LABELS = {
    "skills": "Skills",
    "location": "Location",
    "interests": "Interests",
    "experience": "Experience",
    "industry_needs": "Industry Needs",
    "mbti": "MBTI",
}

# =============================================================================
# DESIGN SYSTEM - Colors & Styles
# =============================================================================

COLORS = {
    "background": "#FAFAFA",
    "card_bg": "#FFFFFF",
    "text_primary": "#2D3748",
    "text_secondary": "#718096",
    "text_muted": "#A0AEC0",
    "accent": "#319795",  # Subtle teal
    "accent_light": "#E6FFFA",
    "border": "#E2E8F0",
    "success": "#48BB78",
    "warning": "#ECC94B",
    "low": "#ED8936",
    "error": "#F56565",
}

# =============================================================================
# CUSTOM CSS
# =============================================================================

def inject_custom_css():
    """Inject custom CSS for the matching dashboard."""
    st.markdown(f"""
    <style>
        .stApp {{
            background-color: {COLORS['background']};
        }}

        h1, h2, h3 {{
            color: {COLORS['text_primary']} !important;
            font-weight: 600 !important;
        }}

        .card-header {{
            color: {COLORS['text_primary']};
            font-size: 1.1rem;
            font-weight: 600;
            margin-bottom: 1rem;
            padding-bottom: 0.75rem;
            border-bottom: 1px solid {COLORS['border']};
        }}

        .match-card {{
            background: {COLORS['card_bg']};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 1rem 1.25rem;
            margin-bottom: 0.75rem;
        }}

        .match-role {{
            color: {COLORS['text_primary']};
            font-weight: 600;
        }}

        .match-meta {{
            color: {COLORS['text_secondary']};
            font-size: 0.85rem;
        }}

        .score-label {{
            font-size: 0.9rem;
            font-weight: 500;
            color: {COLORS['text_primary']};
        }}

        .score-bar {{
            height: 6px;
            width: 120px;
            background: {COLORS['border']};
            border-radius: 3px;
            overflow: hidden;
            display: inline-block;
            vertical-align: middle;
            margin-left: 0.5rem;
        }}

        .score-fill {{
            height: 100%;
            border-radius: 3px;
            transition: width 0.5s ease;
        }}

        .skill-badge {{
            display: inline-block;
            padding: 0.1rem 0.5rem;
            margin: 0.1rem;
            border-radius: 10px;
            font-size: 0.75rem;
            background: {COLORS['accent_light']};
            color: {COLORS['text_primary']};
        }}

        .info-banner {{
            background: {COLORS['accent_light']};
            border-left: 3px solid {COLORS['accent']};
            padding: 1rem 1.25rem;
            border-radius: 0 8px 8px 0;
            margin: 1rem 0;
        }}

        .info-banner p {{
            color: {COLORS['text_primary']};
            margin: 0;
            font-size: 0.9rem;
        }}

        .error-banner {{
            background: #FED7D7;
            border-left: 3px solid {COLORS['error']};
            padding: 0.75rem 1rem;
            border-radius: 0 8px 8px 0;
            margin: 0.5rem 0;
        }}

        .error-banner p {{
            color: #C53030;
            margin: 0;
            font-size: 0.85rem;
        }}

        .section-divider {{
            height: 1px;
            background: {COLORS['border']};
            margin: 2rem 0;
        }}

        #MainMenu {{visibility: hidden;}}
        footer {{visibility: hidden;}}

        .block-container {{
            padding-top: 2rem !important;
            padding-bottom: 2rem !important;
        }}
    </style>
    """, unsafe_allow_html=True)


# =============================================================================
# COMPONENT FUNCTIONS
# =============================================================================

@st.cache_resource
def get_storage() -> MemStorage:
    """One store per server process, shared by every browser session."""
    return MemStorage()


@st.cache_resource
def load_app_config() -> dict:
    """Load configs/config.yaml, falling back to built-in defaults."""
    if not CONFIG_PATH.exists():
        return default_config()
    config = load_config(str(CONFIG_PATH))
    for issue in validate_config(config):
        st.warning(f"Config issue: {issue}")
    return config


@st.cache_resource
def get_ranker() -> MentorRanker:
    # The configured table path is relative to the project root
    return MentorRanker.from_config(resolve_paths(load_app_config(), project_root))


def error_banner_html(message: str) -> str:
    return f'<div class="error-banner"><p>{html.escape(message)}</p></div>'


def render_error(message: str):
    st.markdown(error_banner_html(message), unsafe_allow_html=True)


def render_header():
    """Render the page header with title and description."""
    st.markdown("""
    <div style="text-align: center; margin-bottom: 2rem;">
        <h1 style="font-size: 2.2rem; margin-bottom: 0.5rem;">Mentor Matching</h1>
        <p style="font-size: 1.1rem; color: #718096; max-width: 600px; margin: 0 auto;">
            Upload mentors and mentees, tune the weights, and review the best matches
        </p>
    </div>
    """, unsafe_allow_html=True)


def handle_upload(uploaded_file, kind: str, storage: MemStorage):
    """
    Validate an uploaded CSV and replace the matching collection.

    Each file is imported once per session; re-runs of the script reuse it.
    """
    upload_key = f"imported_{kind}"
    fingerprint = (uploaded_file.name, uploaded_file.size)
    if st.session_state.get(upload_key) == fingerprint:
        return

    if not uploaded_file.name.lower().endswith(".csv"):
        render_error("Please upload a CSV file")
        return

    try:
        if kind == "mentors":
            stored = storage.replace_mentors(load_mentors(uploaded_file))
        else:
            stored = storage.replace_mentees(load_mentees(uploaded_file))
    except RecordValidationError as e:
        logger.warning(f"Rejected {kind} upload {uploaded_file.name}: {len(e.issues)} issues")
        for issue in e.issues:
            render_error(f"Validation Error: {issue}")
        return
    except ValueError as e:
        logger.warning(f"Failed to parse {kind} upload {uploaded_file.name}: {e}")
        render_error(f"Failed to parse CSV file: {e}")
        return

    st.session_state[upload_key] = fingerprint
    st.success(f"{kind.title()} data uploaded successfully ({len(stored)} records)")


def render_upload_section(storage: MemStorage):
    """Render the two upload cards."""
    st.markdown('<div class="card-header">Upload Data</div>', unsafe_allow_html=True)

    col_mentors, col_mentees = st.columns(2)
    with col_mentors:
        mentors_file = st.file_uploader("Mentors CSV", type=["csv"], key="mentors_file")
        if mentors_file is not None:
            handle_upload(mentors_file, "mentors", storage)
    with col_mentees:
        mentees_file = st.file_uploader("Mentees CSV", type=["csv"], key="mentees_file")
        if mentees_file is not None:
            handle_upload(mentees_file, "mentees", storage)

    st.markdown(f"""
    <div class="info-banner">
        <p><strong>Required fields</strong></p>
        <p><strong>Mentors:</strong> {", ".join(REQUIRED_MENTOR_FIELDS)}</p>
        <p><strong>Mentees:</strong> {", ".join(REQUIRED_MENTEE_FIELDS)}</p>
    </div>
    """, unsafe_allow_html=True)


def render_weight_section(ranker: MentorRanker, base_weights: MatchWeights) -> MatchWeights:
    """Render one slider per active attribute and return the chosen weights."""
    st.markdown('<div class="card-header">Match Weights</div>', unsafe_allow_html=True)

    weights = MatchWeights()
    columns = st.columns(len(ranker.variant.attributes))
    for column, attribute in zip(columns, ranker.variant.attributes):
        with column:
            value = st.slider(
                WEIGHT_LABELS.get(attribute, attribute),
                min_value=0.0,
                max_value=1.0,
                value=min(1.0, max(0.0, base_weights.get(attribute))),
                step=0.05,
                key=f"weight_{attribute}",
            )
            weights.set(attribute, value)

    # Sliders bound the values, validation guards programmatic overrides
    weights.validate(max_value=1.0)
    return weights


def score_color(percentage: int) -> str:
    if percentage >= 80:
        return COLORS["success"]
    if percentage >= 60:
        return COLORS["warning"]
    return COLORS["low"]


def render_badges(labels) -> str:
    return "".join(f'<span class="skill-badge">{html.escape(label)}</span>' for label in labels)


def match_card_html(result: MatchResult, position: int) -> str:
    """
    Build the HTML for one mentor match card.

    Every uploaded value is escaped before it is placed in the markup.
    """
    mentor: Mentor = result.mentor
    percentage = result.percentage
    details = [html.escape(mentor.location or "Location n/a"), html.escape(mentor.mbti or "MBTI n/a")]
    if mentor.max_match is not None:
        details.append(f"Capacity {mentor.max_match}")

    return f"""
    <div class="match-card">
        <div style="display: flex; justify-content: space-between; align-items: center;">
            <span class="match-role">#{position} {html.escape(mentor.last_work_role)}</span>
            <span>
                <span class="score-label">{percentage}% Match</span>
                <span class="score-bar">
                    <span class="score-fill" style="display: block; width: {percentage}%;
                          background: {score_color(percentage)};"></span>
                </span>
            </span>
        </div>
        <div class="match-meta">{" · ".join(details)}</div>
        <div style="margin-top: 0.5rem;">{render_badges(mentor.skills)}</div>
    </div>
    """


def render_match(result: MatchResult, position: int):
    """Render one mentor match card."""
    st.markdown(match_card_html(result, position), unsafe_allow_html=True)


def mentee_details_html(mentee: Mentee) -> str:
    goals = html.escape(", ".join(mentee.career_goals))
    return (
        f'<div class="match-meta">Goals: {goals}</div>'
        f'<div style="margin: 0.25rem 0 0.75rem;">{render_badges(mentee.preferred_skills)}</div>'
    )


def render_mentee(mentee: Mentee, ranker: MentorRanker, mentors, weights: MatchWeights):
    """Render a selectable mentee with its top matches."""
    label = f"{mentee.last_work_role}  ·  {mentee.location or 'Location n/a'}  ·  {mentee.mbti or 'MBTI n/a'}"
    selected = st.checkbox(label, key=f"mentee_{mentee.id}")
    st.markdown(mentee_details_html(mentee), unsafe_allow_html=True)

    if not selected:
        return

    results = ranker.rank(mentee, mentors, weights, return_breakdown=True)
    if not results:
        st.caption("No mentors uploaded yet.")
        return

    for position, result in enumerate(results, start=1):
        render_match(result, position)
        if result.breakdown:
            with st.expander("View score details"):
                st.json(result.breakdown.to_dict())


# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Mentor Matching",
        page_icon="",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    inject_custom_css()

    storage = get_storage()
    config = load_app_config()
    ranker = get_ranker()

    render_header()
    render_upload_section(storage)

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)
    weights = render_weight_section(ranker, MatchWeights.from_config(config))
    if ranker.variant is ScoringVariant.EXPERIENCE:
        st.caption("Experience matches when the mentor's experience level exceeds the mentee's.")

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)

    mentors, mentees = storage.snapshot()
    st.markdown(
        f'<div class="card-header">Mentees ({len(mentees)}) · Mentors ({len(mentors)})</div>',
        unsafe_allow_html=True,
    )

    if not mentees:
        st.caption("Upload a mentee CSV to see matches.")
        return

    for mentee in mentees:
        render_mentee(mentee, ranker, mentors, weights)


if __name__ == "__main__":
    main()
