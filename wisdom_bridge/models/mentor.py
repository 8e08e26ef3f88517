# wisdom_bridge/models/mentor.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

class MentorProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique identifier for the mentor")
    name: str = Field(min_length=1, description="Full name of the mentor")
    expertise_fields: List[str] = Field(
        default_factory=list,
        description="Primary fields of expertise, e.g. ['Software Engineering', 'Product Management']"
    )
    experience_summary: str = Field(min_length=1, description="Brief summary of professional experience")
    availability: Optional[str] = Field(default=None, description="General availability, e.g. 'Weekends'")

    @field_validator("expertise_fields")
    @classmethod
    def _labels_not_blank(cls, fields: List[str]) -> List[str]:
        if any(not label.strip() for label in fields):
            raise ValueError("expertise field labels must be non-empty")
        return fields
