"""Display helpers for presenting a prediction."""

from models.responses import ProfileSummary
from models.schemas.profile import Profile


def format_currency(amount: float) -> str:
    """Format as whole US dollars, e.g. 95000 -> "$95,000"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def confidence_label(confidence: int) -> str:
    if confidence >= 80:
        return "High"
    if confidence >= 60:
        return "Medium"
    return "Low"


def _format_years(years: float) -> str:
    return f"{years:g}"


def summarize_profile(profile: Profile) -> ProfileSummary:
    """Build the human-readable profile card shown next to the estimate."""
    unit = "Year" if profile.years_experience == 1 else "Years"
    return ProfileSummary(
        experience=f"{_format_years(profile.years_experience)} {unit} Experience",
        background=f"{profile.education.label} • {profile.job_role.label}",
        location=profile.location.label,
        company=f"{profile.company_size.label} Company",
    )


def success_message(avg_salary: int) -> str:
    return f"Estimated salary: {format_currency(avg_salary)}"
