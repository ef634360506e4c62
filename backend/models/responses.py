from pydantic import BaseModel

from models.schemas.prediction import FactorBreakdown


class ProfileSummary(BaseModel):
    experience: str = ""  # "5 Years Experience"
    background: str = ""  # "Master's Degree • Data Scientist"
    location: str = ""
    company: str = ""


class PredictionResponse(BaseModel):
    min_salary: int = 0
    max_salary: int = 0
    avg_salary: int = 0
    confidence: int = 0
    factors: FactorBreakdown | None = None
    # Presentation fields
    confidence_label: str = ""
    formatted_range: str = ""
    formatted_average: str = ""
    profile_summary: ProfileSummary = ProfileSummary()
    message: str = ""


class CategoryOption(BaseModel):
    value: str
    label: str


class OptionsResponse(BaseModel):
    education: list[CategoryOption] = []
    job_role: list[CategoryOption] = []
    location: list[CategoryOption] = []
    company_size: list[CategoryOption] = []
    min_years_experience: int = 0
    max_years_experience: int = 50
