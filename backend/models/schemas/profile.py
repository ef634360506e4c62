"""Estimator input: the professional attributes of one candidate."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.schemas.categories import CompanySize, Education, JobRole, Location

logger = logging.getLogger(__name__)

# Finite bound on years so the salary product stays a finite float
MAX_ABS_YEARS = 1_000_000

_CATEGORY_FIELDS = {
    "education": Education,
    "job_role": JobRole,
    "location": Location,
    "company_size": CompanySize,
}


class Profile(BaseModel):
    """Structured input of the Estimator.

    Category fields accept any raw tag and resolve unrecognized ones to the
    enum's fallback variant. Years of experience are taken as-is, negative
    or beyond 50 included; range checks belong to the request layer. The
    only limit is a finite magnitude of MAX_ABS_YEARS (NaN and infinity are
    rejected), which keeps every accepted profile estimable.
    """
    model_config = ConfigDict(frozen=True)

    years_experience: float = Field(0.0, allow_inf_nan=False, ge=-MAX_ABS_YEARS, le=MAX_ABS_YEARS)
    education: Education = Education.UNKNOWN
    job_role: JobRole = JobRole.OTHER
    location: Location = Location.OTHER
    company_size: CompanySize = CompanySize.UNKNOWN

    @field_validator("education", "job_role", "location", "company_size", mode="before")
    @classmethod
    def resolve_category(cls, value, info):
        enum_cls = _CATEGORY_FIELDS[info.field_name]
        resolved = enum_cls.parse(value)
        if resolved.is_fallback and value != resolved.value:
            logger.debug("Unrecognized %s tag %r, using %s", info.field_name, value, resolved.value)
        return resolved
