"""Rule-based salary estimator.

Pipeline:
1. Experience multiplier (linear in years, capped)
2. Education / location / company-size multipliers from fixed tables
3. Base salary by job role
4. Point estimate = base x all multipliers, range = +/-15%
5. Confidence heuristic (75 base + bonuses, capped at 95)
6. Hand-tuned factor breakdown for display

Deterministic and total: unrecognized tags were already resolved to their
fallback variants by Profile, and every variant has a table entry.
"""

import math

from models.schemas.categories import CompanySize, Education, JobRole, Location
from models.schemas.prediction import FactorBreakdown, Prediction
from models.schemas.profile import Profile

BASE_SALARIES: dict[JobRole, int] = {
    JobRole.SOFTWARE_ENGINEER: 95000,
    JobRole.DATA_SCIENTIST: 110000,
    JobRole.PRODUCT_MANAGER: 120000,
    JobRole.DESIGNER: 80000,
    JobRole.MARKETING: 75000,
    JobRole.SALES: 70000,
    JobRole.HR: 68000,
    JobRole.FINANCE: 78000,
    JobRole.OPERATIONS: 82000,
    JobRole.OTHER: 70000,
}

EDUCATION_MULTIPLIERS: dict[Education, float] = {
    Education.HIGH_SCHOOL: 0.85,
    Education.BACHELOR: 1.0,
    Education.MASTER: 1.15,
    Education.PHD: 1.25,
    Education.OTHER: 0.95,
    Education.UNKNOWN: 1.0,
}

# Cost of living adjustments
LOCATION_MULTIPLIERS: dict[Location, float] = {
    Location.SAN_FRANCISCO: 1.4,
    Location.NEW_YORK: 1.3,
    Location.SEATTLE: 1.25,
    Location.BOSTON: 1.2,
    Location.LOS_ANGELES: 1.15,
    Location.AUSTIN: 1.1,
    Location.CHICAGO: 1.05,
    Location.DENVER: 1.0,
    Location.REMOTE: 0.95,
    Location.OTHER: 1.0,
}

COMPANY_SIZE_MULTIPLIERS: dict[CompanySize, float] = {
    CompanySize.STARTUP: 0.9,
    CompanySize.SMALL: 0.95,
    CompanySize.MEDIUM: 1.0,
    CompanySize.LARGE: 1.1,
    CompanySize.ENTERPRISE: 1.2,
    CompanySize.UNKNOWN: 1.0,
}

EXPERIENCE_RATE = 0.06  # +6% per year
MAX_EXPERIENCE_MULTIPLIER = 2.5
RANGE_LOW = 0.85
RANGE_HIGH = 1.15

BASE_CONFIDENCE = 75
MAX_CONFIDENCE = 95
HIGH_DEMAND_LOCATIONS = {Location.SAN_FRANCISCO, Location.NEW_YORK, Location.SEATTLE, Location.BOSTON}
TECH_ROLES = {JobRole.SOFTWARE_ENGINEER, JobRole.DATA_SCIENTIST, JobRole.PRODUCT_MANAGER}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (never banker's rounding)."""
    return math.floor(value + 0.5)


def experience_multiplier(years_experience: float) -> float:
    return min(1 + years_experience * EXPERIENCE_RATE, MAX_EXPERIENCE_MULTIPLIER)


def compute_confidence(profile: Profile) -> int:
    """Heuristic reliability score. Returns 75-95."""
    confidence = BASE_CONFIDENCE

    # Moderate experience is the sweet spot for predictions
    if 2 <= profile.years_experience <= 15:
        confidence += 10

    if profile.location in HIGH_DEMAND_LOCATIONS:
        confidence += 5

    # Tech roles have more reliable data
    if profile.job_role in TECH_ROLES:
        confidence += 5

    return min(confidence, MAX_CONFIDENCE)


def compute_factors(
    years_experience: float,
    education_multiplier: float,
    location_multiplier: float,
    company_multiplier: float,
) -> FactorBreakdown:
    """Map each multiplier onto a fixed display band.

    Bands: experience 20-40, education 10-25, location 10-25,
    company 8-18, role constant 25.
    """
    return FactorBreakdown(
        experience=max(20.0, min(40.0, 20 + years_experience * 0.8)),
        education=round_half_up(((education_multiplier - 0.85) / 0.4) * 15) + 10,
        role=25,
        location=round_half_up(((location_multiplier - 0.95) / 0.45) * 15) + 10,
        company=round_half_up(((company_multiplier - 0.9) / 0.3) * 10) + 8,
    )


def estimate(profile: Profile) -> Prediction:
    """Estimate the annual salary range for a profile."""
    base_salary = BASE_SALARIES[profile.job_role]
    exp_mult = experience_multiplier(profile.years_experience)
    edu_mult = EDUCATION_MULTIPLIERS[profile.education]
    loc_mult = LOCATION_MULTIPLIERS[profile.location]
    company_mult = COMPANY_SIZE_MULTIPLIERS[profile.company_size]

    avg_salary = round_half_up(base_salary * exp_mult * edu_mult * loc_mult * company_mult)

    return Prediction(
        min_salary=round_half_up(avg_salary * RANGE_LOW),
        max_salary=round_half_up(avg_salary * RANGE_HIGH),
        avg_salary=avg_salary,
        confidence=compute_confidence(profile),
        factors=compute_factors(profile.years_experience, edu_mult, loc_mult, company_mult),
    )
