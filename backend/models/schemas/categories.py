"""Closed category sets for the salary profile.

Every enum resolves unrecognized tags (including the empty string) to an
explicit fallback variant instead of raising, so a profile built from raw
form input is always estimable.
"""

from enum import Enum

# Value of the hidden fallback variant on enums without a selectable "other"
_UNSPECIFIED = "unknown"


class _Category(str, Enum):
    """Base for category enums: fallback lookup plus display labels."""

    @classmethod
    def fallback(cls) -> "_Category":
        raise NotImplementedError

    @classmethod
    def _missing_(cls, value: object) -> "_Category":
        return cls.fallback()

    @classmethod
    def parse(cls, value: object) -> "_Category":
        """Coerce a raw tag into a member, falling back on unknown input.

        Matching is exact: "Seattle" is not "seattle".
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def is_fallback(self) -> bool:
        return self is type(self).fallback()

    @property
    def label(self) -> str:
        return _LABELS[type(self)][self]

    @classmethod
    def choices(cls) -> list["_Category"]:
        """Members a user can pick. Hidden fallback variants are left out."""
        return [m for m in cls if m.value != _UNSPECIFIED]


class Education(_Category):
    HIGH_SCHOOL = "high-school"
    BACHELOR = "bachelor"
    MASTER = "master"
    PHD = "phd"
    OTHER = "other"
    UNKNOWN = _UNSPECIFIED  # neutral multiplier, unlike OTHER

    @classmethod
    def fallback(cls) -> "Education":
        return cls.UNKNOWN


class JobRole(_Category):
    SOFTWARE_ENGINEER = "software-engineer"
    DATA_SCIENTIST = "data-scientist"
    PRODUCT_MANAGER = "product-manager"
    DESIGNER = "designer"
    MARKETING = "marketing"
    SALES = "sales"
    HR = "hr"
    FINANCE = "finance"
    OPERATIONS = "operations"
    OTHER = "other"

    @classmethod
    def fallback(cls) -> "JobRole":
        return cls.OTHER


class Location(_Category):
    SAN_FRANCISCO = "san-francisco"
    NEW_YORK = "new-york"
    SEATTLE = "seattle"
    BOSTON = "boston"
    LOS_ANGELES = "los-angeles"
    AUSTIN = "austin"
    CHICAGO = "chicago"
    DENVER = "denver"
    REMOTE = "remote"
    OTHER = "other"

    @classmethod
    def fallback(cls) -> "Location":
        return cls.OTHER


class CompanySize(_Category):
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"
    UNKNOWN = _UNSPECIFIED

    @classmethod
    def fallback(cls) -> "CompanySize":
        return cls.UNKNOWN


# Keyed per enum class: str-valued members of different enums compare equal
_LABELS: dict[type, dict[_Category, str]] = {
    Education: {
        Education.HIGH_SCHOOL: "High School",
        Education.BACHELOR: "Bachelor's Degree",
        Education.MASTER: "Master's Degree",
        Education.PHD: "PhD",
        Education.OTHER: "Other",
        Education.UNKNOWN: "Unspecified",
    },
    JobRole: {
        JobRole.SOFTWARE_ENGINEER: "Software Engineer",
        JobRole.DATA_SCIENTIST: "Data Scientist",
        JobRole.PRODUCT_MANAGER: "Product Manager",
        JobRole.DESIGNER: "UX/UI Designer",
        JobRole.MARKETING: "Marketing Manager",
        JobRole.SALES: "Sales Representative",
        JobRole.HR: "HR Manager",
        JobRole.FINANCE: "Financial Analyst",
        JobRole.OPERATIONS: "Operations Manager",
        JobRole.OTHER: "Other",
    },
    Location: {
        Location.SAN_FRANCISCO: "San Francisco, CA",
        Location.NEW_YORK: "New York, NY",
        Location.SEATTLE: "Seattle, WA",
        Location.BOSTON: "Boston, MA",
        Location.LOS_ANGELES: "Los Angeles, CA",
        Location.AUSTIN: "Austin, TX",
        Location.CHICAGO: "Chicago, IL",
        Location.DENVER: "Denver, CO",
        Location.REMOTE: "Remote",
        Location.OTHER: "Other",
    },
    CompanySize: {
        CompanySize.STARTUP: "Startup (1-50 employees)",
        CompanySize.SMALL: "Small (51-200 employees)",
        CompanySize.MEDIUM: "Medium (201-1000 employees)",
        CompanySize.LARGE: "Large (1001-5000 employees)",
        CompanySize.ENTERPRISE: "Enterprise (5000+ employees)",
        CompanySize.UNKNOWN: "Unspecified",
    },
}
