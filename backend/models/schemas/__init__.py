"""Estimator input/output contracts."""

from models.schemas.categories import CompanySize, Education, JobRole, Location
from models.schemas.prediction import FactorBreakdown, Prediction
from models.schemas.profile import Profile

__all__ = [
    "CompanySize",
    "Education",
    "JobRole",
    "Location",
    "FactorBreakdown",
    "Prediction",
    "Profile",
]
