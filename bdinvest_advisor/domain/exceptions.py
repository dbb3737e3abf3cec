"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Input value is outside the range the engine accepts"""

    pass


class IncompleteAssessmentError(DomainException):
    """Risk questionnaire submitted with unanswered questions"""

    def __init__(self, missing_question_ids: list[str]):
        self.missing_question_ids = missing_question_ids
        super().__init__(f"Unanswered questions: {', '.join(missing_question_ids)}")


class InvalidAnswerError(DomainException):
    """Answer references an unknown question or option"""

    pass


class UnknownInstrumentError(DomainException):
    """Requested investment type is not in the catalog"""

    pass
