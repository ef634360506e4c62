"""Estimator output: salary range, confidence and factor breakdown."""

from pydantic import BaseModel, ConfigDict


class FactorBreakdown(BaseModel):
    """Per-attribute contribution weights, read as percentages.

    Hand-tuned display readout, not an attribution: the five values are
    not normalized and usually do not sum to 100.
    """
    model_config = ConfigDict(frozen=True)

    experience: float  # 20-40, not rounded
    education: int  # 10-25
    role: int  # always 25
    location: int  # 10-25
    company: int  # 8-18


class Prediction(BaseModel):
    """Structured output of the Estimator. Every field is always supplied."""
    model_config = ConfigDict(frozen=True)

    min_salary: int  # 0.85 x avg_salary
    max_salary: int  # 1.15 x avg_salary
    avg_salary: int  # point estimate
    confidence: int  # 75-95
    factors: FactorBreakdown
