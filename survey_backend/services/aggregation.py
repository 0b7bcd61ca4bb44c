"""
Result aggregation.

Derives per-question tallies and chart series from raw responses. Nothing
here touches the database or mutates responses; summaries are recomputed on
every request.
"""
import json
from collections import Counter
from typing import Any, Dict, Iterable, List

from survey_backend.models.survey import QuestionType
from survey_backend.schemas.results import ChartPoint, QuestionSummary, SurveySummary

RATING_SCALE = ("1", "2", "3", "4", "5")


def answer_key(value: Any) -> str:
    """String form of an answer used as a tally key (``4`` and ``4.0`` both give ``"4"``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(answer_key(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    return str(value)


def _answers_for(question, responses: Iterable) -> List[Any]:
    values = []
    for response in responses:
        value = (response.answers or {}).get(question.id)
        if value is None or value == "":
            continue
        values.append(value)
    return values


def tally_answers(question, responses: Iterable) -> Dict[str, int]:
    """Count answers to ``question`` by string form, in first-seen order."""
    return dict(Counter(answer_key(value) for value in _answers_for(question, responses)))


def text_answers(question, responses: Iterable) -> List[str]:
    """Non-blank textual answers in response order."""
    answers = []
    for value in _answers_for(question, responses):
        if isinstance(value, str):
            if value.strip():
                answers.append(value)
        else:
            answers.append(answer_key(value))
    return answers


def chart_series(question, tally: Dict[str, int]) -> List[ChartPoint]:
    """
    Chart-ready categories.

    Multiple choice: declared options in order, then undeclared answers.
    Rating: exactly 1-5, zero-filled. Text: no series.
    """
    question_type = QuestionType(question.type)

    if question_type == QuestionType.MULTIPLE_CHOICE:
        declared = list(dict.fromkeys(question.options or []))
        labels = declared + [key for key in tally if key not in declared]
        return [ChartPoint(label=label, count=tally.get(label, 0)) for label in labels]

    if question_type == QuestionType.RATING:
        return [ChartPoint(label=label, count=tally.get(label, 0)) for label in RATING_SCALE]

    return []


def out_of_range_ratings(tally: Dict[str, int]) -> Dict[str, int]:
    return {key: count for key, count in tally.items() if key not in RATING_SCALE}


def summarize_question(question, responses: Iterable) -> QuestionSummary:
    responses = list(responses)
    question_type = QuestionType(question.type)

    if question_type == QuestionType.TEXT:
        answers = text_answers(question, responses)
        return QuestionSummary(
            question_id=question.id,
            type=question_type,
            label=question.label,
            answered=len(answers),
            text_answers=answers,
        )

    tally = tally_answers(question, responses)
    return QuestionSummary(
        question_id=question.id,
        type=question_type,
        label=question.label,
        answered=sum(tally.values()),
        tally=tally,
        series=chart_series(question, tally),
        out_of_range=out_of_range_ratings(tally) if question_type == QuestionType.RATING else {},
    )


def summarize_survey(survey, responses: Iterable) -> SurveySummary:
    responses = list(responses)
    return SurveySummary(
        survey_id=survey.id,
        title=survey.title,
        total_responses=len(responses),
        questions=[summarize_question(question, responses) for question in survey.questions],
    )
