# wisdom_bridge/models/recommendation.py
from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

class MentorRecommendationInput(BaseModel):
    user_query: str = Field(description="What the user is looking for in a mentor or the skills they want to learn")

class RecommendedMentor(BaseModel):
    mentor_id: str = Field(description="The ID of the recommended mentor, copied exactly from the list")
    mentor_name: str = Field(description="The name of the recommended mentor")
    justification: str = Field(description="1-2 sentences on why this mentor is a good match")
    expertise_fields: Optional[List[str]] = Field(
        default=None,
        description="Key expertise fields of the mentor for quick reference"
    )
    experience_summary_snippet: Optional[str] = Field(
        default=None,
        description="A relevant short part of the mentor's experience summary, max 20 words"
    )

class MentorRecommendationOutput(BaseModel):
    recommendations: List[RecommendedMentor] = Field(
        description="Up to 3 recommended mentors, best match first; an empty list when nobody fits"
    )
    analysis: Optional[str] = Field(
        default=None,
        description="Brief overall analysis of the recommendations or why no mentor fits"
    )

class MatchOutcomeKind(str, Enum):
    OK = "ok"
    EMPTY_CATALOGUE = "empty_catalogue"
    INVALID_OUTPUT = "invalid_output"
    UPSTREAM_FAILURE = "upstream_failure"

class MatchOutcome(BaseModel):
    """Result of one recommendation request, tagged with how it was produced"""
    kind: MatchOutcomeKind
    result: MentorRecommendationOutput
    dropped_ids: List[str] = []
    detail: Optional[str] = None
