"""Calculation endpoint."""

import logging

from fastapi import APIRouter, Response, status

from award_engine.api.dependencies import CORRELATION_ID_HEADER, CorrelationId, Engine
from award_engine.api.schemas import CalculationRequest, CalculationResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculate"])


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def calculate(
    payload: CalculationRequest,
    engine: Engine,
    correlation_id: CorrelationId,
    response: Response,
) -> CalculationResponse:
    """Calculate pay for one employee's shifts with a full audit trace.

    Runs synchronously in the threadpool; the engine is shared and stateless.
    """
    logger.info(
        "[%s] Calculating %d shifts for employee %s",
        correlation_id,
        len(payload.shifts),
        payload.employee.id,
    )
    result = engine.calculate(
        employee=payload.employee.to_domain(),
        pay_period=payload.pay_period.to_domain(),
        shifts=[shift.to_domain() for shift in payload.shifts],
    )
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return CalculationResponse.model_validate(result)
