"""Unit tests for risk questionnaire scoring"""

import pytest
from bdinvest_advisor.domain.exceptions import IncompleteAssessmentError, InvalidAnswerError
from bdinvest_advisor.domain.models import RiskTolerance
from bdinvest_advisor.domain.questionnaire import MAX_SCORE, QUESTIONS, classify_tolerance, score_questionnaire

_ORDER = {RiskTolerance.CONSERVATIVE: 0, RiskTolerance.MODERATE: 1, RiskTolerance.AGGRESSIVE: 2}


def _answers_with_score(option_score: int) -> dict[str, str]:
    return {
        q.id: next(opt.value for opt in q.options if opt.score == option_score)
        for q in QUESTIONS
    }


def test_questionnaire_shape():
    """Eight questions, four options each, scored 1-4"""
    assert len(QUESTIONS) == 8
    assert MAX_SCORE == 32
    for question in QUESTIONS:
        assert sorted(opt.score for opt in question.options) == [1, 2, 3, 4]


def test_score_questionnaire_mixed(complete_answers):
    result = score_questionnaire(complete_answers)

    assert result.raw_score == 20
    assert result.max_score == 32
    assert result.score_percentage == 62.5
    assert result.tolerance == RiskTolerance.MODERATE
    assert len(result.answers) == 8
    assert result.answers[0].question_id == "q1"
    assert result.answers[0].score == 3


def test_score_questionnaire_extremes():
    lowest = score_questionnaire(_answers_with_score(1))
    assert lowest.raw_score == 8
    assert lowest.tolerance == RiskTolerance.CONSERVATIVE

    highest = score_questionnaire(_answers_with_score(4))
    assert highest.raw_score == 32
    assert highest.score_percentage == 100
    assert highest.tolerance == RiskTolerance.AGGRESSIVE


def test_classify_tolerance_band_edges():
    """40% and 70% belong to the lower band"""
    assert classify_tolerance(40, max_score=100)[1] == RiskTolerance.CONSERVATIVE
    assert classify_tolerance(41, max_score=100)[1] == RiskTolerance.MODERATE
    assert classify_tolerance(70, max_score=100)[1] == RiskTolerance.MODERATE
    assert classify_tolerance(71, max_score=100)[1] == RiskTolerance.AGGRESSIVE


def test_classify_tolerance_raw_score_edges():
    assert classify_tolerance(12)[1] == RiskTolerance.CONSERVATIVE  # 37.5%
    assert classify_tolerance(13)[1] == RiskTolerance.MODERATE  # 40.6%
    assert classify_tolerance(22)[1] == RiskTolerance.MODERATE  # 68.75%
    assert classify_tolerance(23)[1] == RiskTolerance.AGGRESSIVE  # 71.9%


def test_classify_tolerance_monotonic():
    """A higher raw score never yields a lower tier"""
    tiers = [_ORDER[classify_tolerance(score)[1]] for score in range(8, 33)]
    assert tiers == sorted(tiers)


def test_score_questionnaire_incomplete_raises(complete_answers):
    del complete_answers["q5"]
    del complete_answers["q8"]

    with pytest.raises(IncompleteAssessmentError) as exc_info:
        score_questionnaire(complete_answers)

    assert exc_info.value.missing_question_ids == ["q5", "q8"]


def test_score_questionnaire_partial_when_lenient():
    """Partial answers are summed as-is against the full maximum"""
    answers = {"q1": "under25", "q2": "extensive", "q3": "aggressive_growth"}

    result = score_questionnaire(answers, require_complete=False)

    assert result.raw_score == 12
    assert result.max_score == 32
    assert result.tolerance == RiskTolerance.CONSERVATIVE


def test_score_questionnaire_unknown_option(complete_answers):
    complete_answers["q4"] = "forever"
    with pytest.raises(InvalidAnswerError):
        score_questionnaire(complete_answers)


def test_score_questionnaire_unknown_question(complete_answers):
    complete_answers["q9"] = "yes"
    with pytest.raises(InvalidAnswerError):
        score_questionnaire(complete_answers)
