from enum import Enum
from pydantic import BaseModel, Field, constr

NonEmptyStr = constr(strip_whitespace=True, min_length=1)


class GenerationKind(str, Enum):
    CAREER_SUGGESTIONS = "career_suggestions"
    COVER_LETTER = "cover_letter"
    INTERVIEW_PREP = "interview_prep"
    ROADMAP = "roadmap"


class CareerProfile(BaseModel):
    """Student profile submitted for analysis. All fields are required."""
    education: NonEmptyStr
    major: NonEmptyStr
    skills: NonEmptyStr
    interests: NonEmptyStr
    goals: NonEmptyStr


class FeatureRequest(CareerProfile):
    """Profile plus the job title picked from a previous analysis."""
    job_title: NonEmptyStr = Field(..., alias="jobTitle")

    class Config:
        populate_by_name = True


class GenerationResponse(BaseModel):
    result: str


class AnalysisResponse(GenerationResponse):
    job_title: str = Field(..., alias="jobTitle")

    class Config:
        populate_by_name = True
