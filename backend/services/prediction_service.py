"""Async boundary around the estimator.

The estimator itself is synchronous and never fails. This wrapper adds the
latency a real pricing backend would have and an explicit error channel:
callers either get a Prediction or a PredictionError, never a partial
result.
"""

import asyncio
import logging
import random

from config import settings
from models.schemas.prediction import Prediction
from models.schemas.profile import Profile
from services import estimator

logger = logging.getLogger(__name__)

FAILURE_NOTICE = "Prediction failed. Please try again later."


class PredictionError(Exception):
    """The prediction backend did not produce a result."""

    def __init__(self, message: str = FAILURE_NOTICE) -> None:
        super().__init__(message)
        self.message = message


def _should_fail(failure_rate: float) -> bool:
    if failure_rate <= 0:
        return False
    if failure_rate >= 1:
        return True
    return random.random() < failure_rate


async def predict(
    profile: Profile,
    delay_seconds: float | None = None,
    failure_rate: float | None = None,
) -> Prediction:
    """Estimate after a simulated delay. Overrides default to settings."""
    delay = settings.prediction_delay_seconds if delay_seconds is None else delay_seconds
    rate = settings.prediction_failure_rate if failure_rate is None else failure_rate

    if delay > 0:
        await asyncio.sleep(delay)

    if _should_fail(rate):
        logger.warning("Simulated prediction failure (failure_rate=%s)", rate)
        raise PredictionError()

    prediction = estimator.estimate(profile)
    logger.info(
        "Estimated %s for role=%s location=%s (confidence %s)",
        prediction.avg_salary,
        profile.job_role.value,
        profile.location.value,
        prediction.confidence,
    )
    return prediction
