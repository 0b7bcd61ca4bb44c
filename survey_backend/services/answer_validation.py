"""Validation of submitted answers against a survey's questions."""
from typing import Any, Dict, Iterable, List, Optional

from survey_backend.core.exceptions import ValidationError
from survey_backend.models.survey import Question, QuestionType

RATING_MIN = 1
RATING_MAX = 5


def is_unanswered(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def as_rating(value: Any) -> Optional[int]:
    """Return the value as an in-range rating, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and RATING_MIN <= value <= RATING_MAX:
        return value
    return None


def validate_answers(questions: Iterable[Question], answers: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check an answer map against the survey's questions.

    Every question must be answered, every key must name a question of the
    survey, and each value must fit its question type.

    Returns:
        Normalized answers (integral float ratings become ints)

    Raises:
        ValidationError: With one entry per offending answer
    """
    questions = list(questions)
    known_ids = {question.id for question in questions}
    errors: List[Dict[str, str]] = []

    for key in answers:
        if key not in known_ids:
            errors.append({"field": f"answers.{key}", "message": "Unknown question for this survey"})

    normalized: Dict[str, Any] = {}
    for question in questions:
        field = f"answers.{question.id}"
        value = answers.get(question.id)

        if is_unanswered(value):
            errors.append({"field": field, "message": f"'{question.label}' must be answered"})
            continue

        question_type = QuestionType(question.type)
        if question_type == QuestionType.TEXT:
            if not isinstance(value, str):
                errors.append({"field": field, "message": "Text answer must be a string"})
                continue
            normalized[question.id] = value
        elif question_type == QuestionType.RATING:
            rating = as_rating(value)
            if rating is None:
                errors.append({
                    "field": field,
                    "message": f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}",
                })
                continue
            normalized[question.id] = rating
        elif question_type == QuestionType.MULTIPLE_CHOICE:
            if not isinstance(value, str) or value not in (question.options or []):
                errors.append({"field": field, "message": "Answer must be one of the question's options"})
                continue
            normalized[question.id] = value

    if errors:
        raise ValidationError("Invalid answers", errors)

    return normalized
