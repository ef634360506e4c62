from models.schemas.profile import Profile
from services.formatting import (
    confidence_label,
    format_currency,
    success_message,
    summarize_profile,
)


def test_format_currency():
    assert format_currency(95000) == "$95,000"
    assert format_currency(1234567) == "$1,234,567"
    assert format_currency(0) == "$0"


def test_format_currency_drops_cents():
    assert format_currency(80749.6) == "$80,750"


def test_format_currency_negative():
    assert format_currency(-5000) == "-$5,000"


def test_confidence_label_thresholds():
    assert confidence_label(95) == "High"
    assert confidence_label(80) == "High"
    assert confidence_label(79) == "Medium"
    assert confidence_label(60) == "Medium"
    assert confidence_label(59) == "Low"


def test_summarize_profile():
    profile = Profile(
        years_experience=5,
        education="master",
        job_role="data-scientist",
        location="seattle",
        company_size="startup",
    )
    summary = summarize_profile(profile)
    assert summary.experience == "5 Years Experience"
    assert summary.background == "Master's Degree • Data Scientist"
    assert summary.location == "Seattle, WA"
    assert summary.company == "Startup (1-50 employees) Company"


def test_summarize_profile_singular_year():
    summary = summarize_profile(Profile(years_experience=1))
    assert summary.experience == "1 Year Experience"


def test_summarize_profile_fractional_years():
    summary = summarize_profile(Profile(years_experience=2.5))
    assert summary.experience == "2.5 Years Experience"


def test_summarize_profile_fallbacks():
    summary = summarize_profile(Profile(education="", location="atlantis"))
    assert summary.background == "Unspecified • Other"
    assert summary.location == "Other"


def test_success_message():
    assert success_message(95000) == "Estimated salary: $95,000"
