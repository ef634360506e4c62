from pydantic import BaseModel, Field

from models.schemas.profile import Profile

MIN_YEARS_EXPERIENCE = 0
MAX_YEARS_EXPERIENCE = 50


class PredictRequest(BaseModel):
    years_experience: float = Field(
        ..., ge=MIN_YEARS_EXPERIENCE, le=MAX_YEARS_EXPERIENCE, description="Years of professional experience"
    )
    education: str = Field(..., min_length=1, max_length=64, description="Education level tag, e.g. 'master'")
    job_role: str = Field(..., min_length=1, max_length=64, description="Job role tag, e.g. 'data-scientist'")
    location: str = Field(..., min_length=1, max_length=64, description="Location tag, e.g. 'seattle'")
    company_size: str = Field(..., min_length=1, max_length=64, description="Company size tag, e.g. 'startup'")

    def to_profile(self) -> Profile:
        return Profile(**self.model_dump())
