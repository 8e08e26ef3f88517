"""
Unit tests for the pydantic models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from wisdom_bridge.models.conversation import ChatTurn, MessageRole
from wisdom_bridge.models.mentor import MentorProfile
from wisdom_bridge.models.recommendation import MentorRecommendationOutput


def test_mentor_requires_name_and_summary():
    with pytest.raises(ValidationError):
        MentorProfile(id="m", name="", expertise_fields=["Chess"], experience_summary="Grandmaster.")
    with pytest.raises(ValidationError):
        MentorProfile(id="m", name="Magnus", expertise_fields=["Chess"], experience_summary="")


def test_mentor_rejects_blank_field_labels():
    with pytest.raises(ValidationError, match="expertise field labels must be non-empty"):
        MentorProfile(id="m", name="Magnus", expertise_fields=["Chess", " "], experience_summary="Grandmaster.")


def test_mentor_allows_duplicate_labels():
    mentor = MentorProfile(id="m", name="Magnus", expertise_fields=["Chess", "Chess"], experience_summary="Grandmaster.")

    assert mentor.expertise_fields == ["Chess", "Chess"]


def test_mentor_is_immutable():
    mentor = MentorProfile(id="m", name="Magnus", expertise_fields=["Chess"], experience_summary="Grandmaster.")

    with pytest.raises(ValidationError):
        mentor.name = "Hikaru"


def test_recommendation_output_requires_recommendations():
    with pytest.raises(ValidationError):
        MentorRecommendationOutput()
    with pytest.raises(ValidationError):
        MentorRecommendationOutput(analysis="Nobody fits.")


def test_recommendation_output_accepts_empty_list():
    output = MentorRecommendationOutput(recommendations=[])

    assert output.recommendations == []
    assert output.analysis is None


def test_chat_turn_timestamp():
    turn = ChatTurn(role="user", text="hi")

    assert turn.role is MessageRole.USER
    assert isinstance(turn.timestamp, datetime)
