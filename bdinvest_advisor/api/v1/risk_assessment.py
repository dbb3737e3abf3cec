"""Risk questionnaire endpoints"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request

from bdinvest_advisor.api.dependencies import get_request_id
from bdinvest_advisor.api.v1.schemas import QuestionSchema, RiskAssessmentRequest, RiskAssessmentResponse
from bdinvest_advisor.domain.exceptions import IncompleteAssessmentError, InvalidAnswerError
from bdinvest_advisor.domain.questionnaire import QUESTIONS, score_questionnaire
from bdinvest_advisor.infrastructure.observability.metrics import risk_assessment_counter

router = APIRouter()


@router.get("/risk-assessment/questions", response_model=List[QuestionSchema])
def list_questions():
    """The eight questions with their scored options"""
    return [QuestionSchema.model_validate(q) for q in QUESTIONS]


@router.post("/risk-assessment", response_model=RiskAssessmentResponse)
def submit_risk_assessment(request_body: RiskAssessmentRequest, request: Request):
    """
    Score a completed questionnaire.

    Every question must be answered; partial submissions are rejected with 422
    and the list of missing question ids.
    """
    request_id = get_request_id(request)

    try:
        result = score_questionnaire(request_body.answers)
    except IncompleteAssessmentError as e:
        logging.warning(f"Incomplete assessment: {e}", extra={"request_id": request_id})
        raise HTTPException(
            status_code=422,
            detail={"message": "All questions must be answered", "missing": e.missing_question_ids},
        )
    except InvalidAnswerError as e:
        logging.warning(f"Invalid answer: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    risk_assessment_counter.labels(tolerance=result.tolerance.value).inc()
    return RiskAssessmentResponse.model_validate(result)
