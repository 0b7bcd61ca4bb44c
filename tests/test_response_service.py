import pytest

from survey_backend.core.exceptions import (
    ConflictError, NotFoundError, PermissionDeniedError, ValidationError
)
from survey_backend.core.permissions import UserRole
from survey_backend.schemas.auth import TokenData
from survey_backend.schemas.response import SurveyResponseCreate
from survey_backend.services.response_service import ResponseService


def answers_for(survey, **overrides):
    rating_q, choice_q, text_q = survey.questions
    answers = {rating_q.id: 4, choice_q.id: "Maybe", text_q.id: "Looks good"}
    answers.update(overrides)
    return answers


def test_submit_then_list_returns_answers_unchanged(db, survey):
    service = ResponseService(db)
    answers = answers_for(survey)

    created = service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers))
    listed = service.list_responses(survey.id)

    assert [r.id for r in listed] == [created.id]
    assert listed[0].answers == answers
    assert listed[0].user_ref == "u1"
    assert listed[0].submitted_at is not None


def test_missing_survey_raises_not_found(db):
    service = ResponseService(db)

    with pytest.raises(NotFoundError):
        service.submit_response("missing", SurveyResponseCreate(user_ref="u1", answers={}))
    with pytest.raises(NotFoundError):
        service.list_responses("missing")


def test_blank_user_ref_is_rejected(db, survey):
    with pytest.raises(ValidationError):
        ResponseService(db).submit_response(
            survey.id, SurveyResponseCreate(user_ref="  ", answers=answers_for(survey))
        )


def test_strict_validation_rejects_out_of_domain_rating(db, survey):
    rating_id = survey.questions[0].id

    with pytest.raises(ValidationError) as exc_info:
        ResponseService(db).submit_response(
            survey.id, SurveyResponseCreate(user_ref="u1", answers=answers_for(survey, **{rating_id: 9}))
        )

    assert exc_info.value.errors[0]["field"] == f"answers.{rating_id}"
    assert ResponseService(db).list_responses(survey.id) == []


def test_tolerant_mode_stores_answers_as_given(db, survey):
    service = ResponseService(db, strict=False)
    answers = {"not-a-question": "x", survey.questions[0].id: 9}

    service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers))

    assert service.list_responses(survey.id)[0].answers == answers


def test_single_response_per_user(db, survey):
    service = ResponseService(db, single_response_per_user=True)
    service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers_for(survey)))
    service.submit_response(survey.id, SurveyResponseCreate(user_ref="u2", answers=answers_for(survey)))

    with pytest.raises(ConflictError):
        service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers_for(survey)))

    assert len(service.list_responses(survey.id)) == 2


def test_multiple_responses_allowed_by_default(db, survey):
    service = ResponseService(db, single_response_per_user=False)
    service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers_for(survey)))
    service.submit_response(survey.id, SurveyResponseCreate(user_ref="u1", answers=answers_for(survey)))

    assert len(service.list_responses(survey.id)) == 2


def test_user_ref_must_match_caller(db, survey):
    service = ResponseService(db)
    caller = TokenData(sub="user:default/mallory", role=UserRole.RESPONDENT)

    with pytest.raises(PermissionDeniedError):
        service.submit_response(
            survey.id,
            SurveyResponseCreate(user_ref="user:default/alice", answers=answers_for(survey)),
            caller=caller,
        )

    assert service.list_responses(survey.id) == []


def test_caller_may_submit_as_self_and_admin_on_behalf(db, survey):
    service = ResponseService(db)
    respondent = TokenData(sub="user:default/alice", role=UserRole.RESPONDENT)
    admin = TokenData(sub="user:default/admin", role=UserRole.ADMIN)

    service.submit_response(
        survey.id, SurveyResponseCreate(user_ref=" user:default/alice ", answers=answers_for(survey)), caller=respondent
    )
    service.submit_response(
        survey.id, SurveyResponseCreate(user_ref="user:default/bob", answers=answers_for(survey)), caller=admin
    )

    assert sorted(r.user_ref for r in service.list_responses(survey.id)) == ["user:default/alice", "user:default/bob"]
