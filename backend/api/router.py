from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import MAX_YEARS_EXPERIENCE, MIN_YEARS_EXPERIENCE, PredictRequest
from models.responses import CategoryOption, OptionsResponse, PredictionResponse
from models.schemas.categories import CompanySize, Education, JobRole, Location
from services import formatting, prediction_service
from services.prediction_service import PredictionError

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _options(enum_cls) -> list[CategoryOption]:
    return [CategoryOption(value=m.value, label=m.label) for m in enum_cls.choices()]


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "prediction_delay_seconds": settings.prediction_delay_seconds,
    }


@router.get("/options", response_model=OptionsResponse)
async def options():
    return OptionsResponse(
        education=_options(Education),
        job_role=_options(JobRole),
        location=_options(Location),
        company_size=_options(CompanySize),
        min_years_experience=MIN_YEARS_EXPERIENCE,
        max_years_experience=MAX_YEARS_EXPERIENCE,
    )


@router.post("/predict", response_model=PredictionResponse)
@limiter.limit(lambda: settings.predict_rate_limit)
async def predict(request: Request, body: PredictRequest):
    profile = body.to_profile()

    try:
        prediction = await prediction_service.predict(profile)
    except PredictionError as e:
        raise HTTPException(status_code=503, detail=e.message)

    return PredictionResponse(
        min_salary=prediction.min_salary,
        max_salary=prediction.max_salary,
        avg_salary=prediction.avg_salary,
        confidence=prediction.confidence,
        factors=prediction.factors,
        confidence_label=formatting.confidence_label(prediction.confidence),
        formatted_range=(
            f"{formatting.format_currency(prediction.min_salary)} - "
            f"{formatting.format_currency(prediction.max_salary)}"
        ),
        formatted_average=formatting.format_currency(prediction.avg_salary),
        profile_summary=formatting.summarize_profile(profile),
        message=formatting.success_message(prediction.avg_salary),
    )
