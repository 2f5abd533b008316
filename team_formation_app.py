"""TeamMate — fair team formation dashboard.

A Streamlit app that loads surveyed participants, splits them into
personality-balanced teams and reports on the result.
"""

import logging
import random

import plotly.graph_objects as go  # type: ignore[import-untyped]
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from teammate.engine.allocator import TeamAllocator
from teammate.engine.formation_analysis import FormationSummary, analyze_formation
from teammate.errors import FileProcessingError, ValidationError
from teammate.participant_repository import ParticipantRepository, exclude_known
from teammate.personality import PERSONALITY_DISPLAY_NAMES, PERSONALITY_TYPES, ROLE_DISPLAY_NAMES
from teammate.runtime_state import STATE
from teammate.settings import load_settings
from teammate.team_export import export_summary_to_json, export_teams_to_csv

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

_TYPE_COLORS = {"leader": "#E74C3C", "thinker": "#3498DB", "balanced": "#27AE60"}
_COMPOSITION_FIELDS = {"leader": "leaders", "thinker": "thinkers", "balanced": "balanced"}


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="TeamMate", page_icon="🎮", layout="wide")
st.title("🎮 TeamMate — Fair Team Formation")


# ---------------------------------------------------------------------------
# Sidebar: pool and parameters
# ---------------------------------------------------------------------------
with st.sidebar:
    st.header("Pool")
    csv_path = st.text_input("Participants CSV", value=settings.players_csv)
    if st.button("📂 Load participants", use_container_width=True):
        try:
            report = ParticipantRepository(csv_path, email_domain=settings.email_domain).load_participants(STATE.ids)
            existing = STATE.snapshot_participants()
            new = exclude_known(report.participants, (p.email for p in existing))
            STATE.set_participants([*existing, *new])
            st.success(f"Added {len(new)} participants ({len(existing) + len(new)} in pool)")
            duplicates = len(report.participants) - len(new)
            if duplicates:
                st.warning(f"{duplicates} duplicate participant(s) skipped (email already in pool)")
            for line_no, reason in report.skipped:
                st.warning(f"Line {line_no} skipped: {reason}")
        except FileProcessingError as e:
            st.error(str(e))
    if st.button("🗑️ Clear pool", use_container_width=True):
        STATE.reset()
        st.rerun()

    st.divider()
    team_size = st.number_input("Team size", min_value=1, max_value=20, value=settings.team_size)
    seed_text = st.text_input("Random seed (optional)", value="" if settings.seed is None else str(settings.seed))
    st.caption(f"Ids issued: {STATE.ids.issued_count} | next: {STATE.ids.peek_next_id()}")


participants = STATE.snapshot_participants()

# ---------------------------------------------------------------------------
# Participants
# ---------------------------------------------------------------------------
st.subheader(f"👥 Participants ({len(participants)})")
if not participants:
    st.info("No participants loaded yet. Load a CSV from the sidebar or collect surveys.")
else:
    st.dataframe(
        [
            {
                "ID": p.participant_id,
                "Name": p.name,
                "Email": p.email,
                "Game": p.game_interest,
                "Skill": p.skill_level,
                "Role": ROLE_DISPLAY_NAMES[p.preferred_role],
                "Personality": f"{PERSONALITY_DISPLAY_NAMES[p.personality_type]} ({p.personality_score})",
            }
            for p in participants
        ],
        use_container_width=True,
    )


# ---------------------------------------------------------------------------
# Formation
# ---------------------------------------------------------------------------
st.divider()
if st.button("🔧 Form teams", disabled=not participants):
    try:
        rng = random.Random(int(seed_text)) if seed_text.strip() else random.Random()
    except ValueError:
        st.error("Random seed must be an integer")
        st.stop()
    try:
        result = TeamAllocator(int(team_size), participants, rng=rng).form_teams()
    except ValidationError as e:
        st.error("; ".join(e.errors))
    else:
        if result.ok:
            STATE.set_teams(result.teams, int(team_size))
            placed = sum(t.size for t in result.teams)
            if placed < len(participants):
                st.warning(f"{len(participants) - placed} participant(s) could not be placed in a full team")
        else:
            st.error(f"Team formation failed: {result.failure}")

teams = STATE.snapshot_teams()
if teams:
    st.subheader(f"🏆 Teams ({len(teams)})")
    cols = st.columns(min(3, len(teams)))
    for idx, team in enumerate(teams):
        with cols[idx % len(cols)]:
            with st.expander(str(team), expanded=False):
                st.text(team.describe())

    summary = analyze_formation(teams)
    if isinstance(summary, FormationSummary):
        st.subheader("📊 Formation analysis")
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Ideal composition", f"{summary.ideal_composition_percentage:.1f}%")
        m2.metric("Natural leaders", f"{summary.teams_with_natural_leader}/{summary.total_teams}")
        m3.metric("Backup leaders", summary.teams_with_backup_leader)
        m4.metric("Average team skill", f"{summary.average_team_skill:.2f}")

        fig = go.Figure()
        for ptype in PERSONALITY_TYPES:
            fig.add_trace(go.Bar(
                name=PERSONALITY_DISPLAY_NAMES[ptype],
                x=[row.team_id for row in summary.compositions],
                y=[getattr(row, _COMPOSITION_FIELDS[ptype]) for row in summary.compositions],
                marker_color=_TYPE_COLORS[ptype],
            ))
        fig.update_layout(barmode="stack", title="Personality mix per team", height=350)
        st.plotly_chart(fig, use_container_width=True)

        st.table([{"Metric": label, "Value": value} for label, value in summary.as_display_rows()])

    if st.button("💾 Save teams"):
        try:
            path = export_teams_to_csv(teams, settings.teams_csv)
            st.success(f"Saved {len(teams)} teams to {path}")
            if isinstance(summary, FormationSummary):
                summary_path = export_summary_to_json(summary, settings.summary_json)
                st.success(f"Saved formation analysis to {summary_path}")
        except FileProcessingError as e:
            st.error(str(e))
