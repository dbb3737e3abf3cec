"""Risk tolerance questionnaire and its scoring rules"""

import logging
from typing import Dict, List, Mapping, Tuple

from bdinvest_advisor.domain.exceptions import IncompleteAssessmentError, InvalidAnswerError
from bdinvest_advisor.domain.models import (
    Question,
    QuestionOption,
    RiskAssessmentAnswer,
    RiskAssessmentResult,
    RiskTolerance,
)

logger = logging.getLogger(__name__)

# Option scores ascend with risk appetite (1 = most cautious, 4 = most aggressive)
QUESTIONS: Tuple[Question, ...] = (
    Question(
        id="q1",
        text="আপনার বয়স কত?",
        options=(
            QuestionOption("under25", "২৫ বছরের নিচে", 4),
            QuestionOption("25to35", "২৫-৩৫ বছর", 3),
            QuestionOption("35to50", "৩৫-৫০ বছর", 2),
            QuestionOption("over50", "৫০ বছরের উপরে", 1),
        ),
    ),
    Question(
        id="q2",
        text="আপনার বিনিয়োগের অভিজ্ঞতা কেমন?",
        options=(
            QuestionOption("none", "কোনো অভিজ্ঞতা নেই", 1),
            QuestionOption("limited", "সীমিত অভিজ্ঞতা (১-২ বছর)", 2),
            QuestionOption("moderate", "মাঝারি অভিজ্ঞতা (৩-৫ বছর)", 3),
            QuestionOption("extensive", "ব্যাপক অভিজ্ঞতা (৫+ বছর)", 4),
        ),
    ),
    Question(
        id="q3",
        text="আপনার বিনিয়োগের মূল লক্ষ্য কী?",
        options=(
            QuestionOption("capital_preservation", "মূলধন সংরক্ষণ", 1),
            QuestionOption("income_generation", "নিয়মিত আয় সৃষ্টি", 2),
            QuestionOption("balanced_growth", "সুষম বৃদ্ধি", 3),
            QuestionOption("aggressive_growth", "দ্রুত বৃদ্ধি", 4),
        ),
    ),
    Question(
        id="q4",
        text="আপনার বিনিয়োগের সময়সীমা কত?",
        options=(
            QuestionOption("short", "১ বছরের কম", 1),
            QuestionOption("medium_short", "১-৩ বছর", 2),
            QuestionOption("medium_long", "৩-৭ বছর", 3),
            QuestionOption("long", "৭ বছরের বেশি", 4),
        ),
    ),
    Question(
        id="q5",
        text="যদি আপনার বিনিয়োগ ২০% কমে যায়, আপনি কী করবেন?",
        options=(
            QuestionOption("sell_immediately", "তৎক্ষণাৎ বিক্রি করব", 1),
            QuestionOption("sell_some", "কিছু অংশ বিক্রি করব", 2),
            QuestionOption("hold", "ধরে রাখব", 3),
            QuestionOption("buy_more", "আরও কিনব", 4),
        ),
    ),
    Question(
        id="q6",
        text="আপনার মাসিক আয়ের কত অংশ বিনিয়োগ করতে চান?",
        options=(
            QuestionOption("very_low", "৫% এর কম", 1),
            QuestionOption("low", "৫-১০%", 2),
            QuestionOption("moderate", "১০-২০%", 3),
            QuestionOption("high", "২০% এর বেশি", 4),
        ),
    ),
    Question(
        id="q7",
        text="আপনার জরুরি তহবিল কেমন?",
        options=(
            QuestionOption("none", "কোনো জরুরি তহবিল নেই", 1),
            QuestionOption("partial", "৩ মাসের খরচের সমান", 2),
            QuestionOption("adequate", "৬ মাসের খরচের সমান", 3),
            QuestionOption("excellent", "১ বছরের খরচের সমান", 4),
        ),
    ),
    Question(
        id="q8",
        text="বিনিয়োগে ক্ষতির ব্যাপারে আপনার মনোভাব কী?",
        options=(
            QuestionOption("very_conservative", "কোনো ক্ষতি সহ্য করতে পারি না", 1),
            QuestionOption("conservative", "সামান্য ক্ষতি সহ্য করতে পারি", 2),
            QuestionOption("moderate", "মাঝারি ক্ষতি সহ্য করতে পারি", 3),
            QuestionOption("aggressive", "বেশি ক্ষতি সহ্য করতে পারি", 4),
        ),
    ),
)

MAX_OPTION_SCORE = 4
MAX_SCORE = len(QUESTIONS) * MAX_OPTION_SCORE  # 32


def classify_tolerance(raw_score: int, max_score: int = MAX_SCORE) -> tuple[float, RiskTolerance]:
    """
    Map a raw questionnaire score to a tolerance tier.

    Bands by percentage of the maximum score:
    - <= 40%:  conservative
    - <= 70%:  moderate
    - > 70%:   aggressive

    Returns: (score_percentage, tolerance)
    """
    score_percentage = raw_score / max_score * 100

    if score_percentage <= 40:
        tolerance = RiskTolerance.CONSERVATIVE
    elif score_percentage <= 70:
        tolerance = RiskTolerance.MODERATE
    else:
        tolerance = RiskTolerance.AGGRESSIVE

    return score_percentage, tolerance


def score_questionnaire(
    selections: Mapping[str, str],
    require_complete: bool = True,
) -> RiskAssessmentResult:
    """
    Score a set of selected options keyed by question id.

    With require_complete=False, unanswered questions contribute nothing while
    the maximum stays at 32, so partial answer sets lean conservative.

    Raises:
        InvalidAnswerError: Unknown question id or option value
        IncompleteAssessmentError: A question is unanswered and require_complete is set
    """
    known_ids = {q.id for q in QUESTIONS}
    unknown = sorted(set(selections) - known_ids)
    if unknown:
        raise InvalidAnswerError(f"Unknown question ids: {', '.join(unknown)}")

    missing = [q.id for q in QUESTIONS if q.id not in selections]
    if missing and require_complete:
        raise IncompleteAssessmentError(missing)

    answers: List[RiskAssessmentAnswer] = []
    for question in QUESTIONS:
        selected = selections.get(question.id)
        if selected is None:
            continue

        options: Dict[str, QuestionOption] = {opt.value: opt for opt in question.options}
        option = options.get(selected)
        if option is None:
            raise InvalidAnswerError(f"Invalid option '{selected}' for question {question.id}")

        answers.append(
            RiskAssessmentAnswer(
                question_id=question.id,
                selected_option_value=option.value,
                score=option.score,
            )
        )

    raw_score = sum(a.score for a in answers)
    score_percentage, tolerance = classify_tolerance(raw_score)

    logger.debug(
        "Questionnaire scored",
        extra={"raw_score": raw_score, "answered": len(answers), "tolerance": tolerance.value},
    )

    return RiskAssessmentResult(
        raw_score=raw_score,
        max_score=MAX_SCORE,
        score_percentage=score_percentage,
        tolerance=tolerance,
        answers=answers,
    )
