# frontend/app.py
import streamlit as st

# Page configuration MUST be the first Streamlit command
st.set_page_config(
    page_title="Wisdom Bridge",
    page_icon="🌉",
    layout="wide"
)

import asyncio
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from wisdom_bridge.config import DEBUG
from wisdom_bridge.models.conversation import ChatTurn, MessageRole
from wisdom_bridge.services.gatekeeper import GatekeeperService
from wisdom_bridge.services.matching import MatchingService
from wisdom_bridge.services.mentor_store import create_mentor_repository
from wisdom_bridge.utils.logger import configure_logging

# Initialize services - ONLY ONCE at the module level
@st.cache_resource
def get_services():
    configure_logging()
    mentor_repository = create_mentor_repository()
    return {
        "mentor_repository": mentor_repository,
        "matching_service": MatchingService(mentor_repository=mentor_repository),
        "gatekeeper_service": GatekeeperService(),
    }

services = get_services()
mentor_repository = services["mentor_repository"]
matching_service = services["matching_service"]
gatekeeper_service = services["gatekeeper_service"]

# Session state initialization
if "chat_turns" not in st.session_state:
    st.session_state.chat_turns = []


def show_mentor(mentor):
    with st.container(border=True):
        st.markdown(f"**{mentor.name}**")
        st.caption(", ".join(mentor.expertise_fields))
        st.write(mentor.experience_summary)
        st.write(f"*Availability:* {mentor.availability or 'Not specified'}")


st.title("🌉 Wisdom Bridge")
st.write("Connect with experienced mentors who have walked the path before you.")

search_tab, field_tab, recommend_tab, chat_tab = st.tabs(
    ["Search Mentors", "Browse by Field", "Get Recommendations", "Python Helper"]
)

with search_tab:
    query = st.text_input("Search by name or expertise", key="search_query")
    if query:
        results = asyncio.run(mentor_repository.search(query))
        st.write(f"{len(results)} mentor(s) found for \"{query}\"")
        for mentor in results:
            show_mentor(mentor)

    name = st.text_input("Look up a mentor by name", key="name_query")
    if name:
        mentor = asyncio.run(mentor_repository.find_by_name(name))
        if mentor:
            show_mentor(mentor)
        else:
            st.info(f"No mentor named \"{name}\"")

with field_tab:
    all_mentors = asyncio.run(mentor_repository.get_all())
    fields = sorted({label for mentor in all_mentors for label in mentor.expertise_fields})
    field = st.selectbox("Mentorship field", [""] + fields)
    if field:
        for mentor in asyncio.run(mentor_repository.find_by_field(field)):
            show_mentor(mentor)

with recommend_tab:
    with st.form("recommend_form"):
        need = st.text_area(
            "What are you looking for in a mentor?",
            placeholder="I want to get into data science with Python and need guidance on machine learning projects."
        )
        submitted = st.form_submit_button("Find My Mentors")

    if submitted and need.strip():
        with st.spinner("Finding your best matches..."):
            outcome = asyncio.run(matching_service.recommend_with_outcome(need))
        result = outcome.result

        if result.analysis:
            st.info(result.analysis)
        for rank, recommendation in enumerate(result.recommendations, start=1):
            with st.container(border=True):
                st.markdown(f"**{rank}. {recommendation.mentor_name}**")
                st.write(recommendation.justification)
                if recommendation.expertise_fields:
                    st.caption(", ".join(recommendation.expertise_fields))
                if recommendation.experience_summary_snippet:
                    st.write(f"*{recommendation.experience_summary_snippet}*")

        if DEBUG:
            with st.expander("Debug Info"):
                st.write(f"Outcome: {outcome.kind.value}")
                st.write(f"Dropped IDs: {outcome.dropped_ids}")
                st.write(f"Detail: {outcome.detail}")
    elif submitted:
        st.warning("Please describe what you are looking for.")

with chat_tab:
    st.caption("Ask me anything about the Python programming language.")

    for turn in st.session_state.chat_turns:
        with st.chat_message(turn.role.value):
            st.markdown(turn.text)

    prompt = st.chat_input("Ask a Python question")
    if prompt:
        st.session_state.chat_turns.append(ChatTurn(role=MessageRole.USER, text=prompt))
        with st.chat_message("user"):
            st.markdown(prompt)

        with st.chat_message("assistant"):
            with st.spinner("Thinking..."):
                reply = asyncio.run(gatekeeper_service.reply(prompt))
            st.markdown(reply.text)

        st.session_state.chat_turns.append(ChatTurn(role=MessageRole.ASSISTANT, text=reply.text))

    if st.session_state.chat_turns and st.button("Clear Conversation"):
        st.session_state.chat_turns = []
        st.rerun()
