"""Projection and savings-plan calculators"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from bdinvest_advisor.api.dependencies import get_request_id, get_settings
from bdinvest_advisor.api.v1.schemas import (
    CompoundInterestRequest,
    InterestResponse,
    ProjectionRequest,
    ProjectionResponse,
    SimpleInterestRequest,
    SipRequest,
    SipResponse,
)
from bdinvest_advisor.config import Settings
from bdinvest_advisor.domain.exceptions import InvalidInputError, UnknownInstrumentError
from bdinvest_advisor.domain.projection import (
    calculate_projection,
    compound_interest,
    project_instrument,
    simple_interest,
    sip_amount,
    sip_future_value,
)
from bdinvest_advisor.infrastructure.observability.metrics import projection_counter

router = APIRouter()


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Year-by-year future value of a lump sum plus monthly contributions.

    With investment_type the instrument's expected return is used and the
    amount must meet its minimum investment.
    """
    request_id = get_request_id(request)
    years = request_body.years if request_body.years is not None else settings.default_projection_years

    if years > settings.max_projection_years:
        raise HTTPException(
            status_code=422,
            detail=f"years must not exceed {settings.max_projection_years}",
        )

    try:
        if request_body.investment_type is not None:
            result = project_instrument(
                request_body.investment_type,
                request_body.initial_amount,
                years,
                request_body.monthly_contribution,
            )
        else:
            result = calculate_projection(
                request_body.initial_amount,
                request_body.annual_return_pct,
                years,
                request_body.monthly_contribution,
            )

    except UnknownInstrumentError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidInputError as e:
        logging.warning(f"Invalid projection request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    projection_counter.inc()
    return ProjectionResponse.model_validate(result)


@router.post("/calculators/sip", response_model=SipResponse)
def calculate_sip(request_body: SipRequest):
    """Monthly instalment needed to reach a target amount"""
    try:
        monthly = sip_amount(request_body.target_amount, request_body.annual_return, request_body.years)
        future_value = sip_future_value(monthly, request_body.annual_return, request_body.years)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return SipResponse(monthly_amount=round(monthly, 2), future_value=round(future_value, 2))


@router.post("/calculators/compound-interest", response_model=InterestResponse)
def calculate_compound_interest(request_body: CompoundInterestRequest):
    try:
        value = compound_interest(
            request_body.principal,
            request_body.rate,
            request_body.years,
            request_body.frequency,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return InterestResponse(
        future_value=round(value, 2),
        interest=round(value - request_body.principal, 2),
    )


@router.post("/calculators/simple-interest", response_model=InterestResponse)
def calculate_simple_interest(request_body: SimpleInterestRequest):
    value = simple_interest(request_body.principal, request_body.rate, request_body.years)
    return InterestResponse(
        future_value=round(value, 2),
        interest=round(value - request_body.principal, 2),
    )
