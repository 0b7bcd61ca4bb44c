from conftest import API, auth_headers
from survey_backend.core.permissions import UserRole


SURVEY_PAYLOAD = {
    "title": "Platform Survey",
    "description": "Tell us how the portal works for you",
    "ownerGroup": "group:default/platform",
    "templates": ["template:default/react-app"],
    "questions": [
        {"type": "rating", "label": "Rate the portal"},
        {"type": "multiple-choice", "label": "Favourite plugin?", "options": ["Catalog", "TechDocs", "Scaffolder"]},
        {"type": "text", "label": "Comments"},
    ],
}


def create_survey(client, headers, payload=SURVEY_PAYLOAD):
    response = client.post(f"{API}/surveys", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


def test_ci_survey_scenario(client, author_headers):
    respondent_headers = auth_headers("u1", UserRole.RESPONDENT)
    response = client.post(
        f"{API}/surveys",
        json={"title": "CI Survey", "questions": [{"type": "rating", "label": "Rate the build"}]},
        headers=author_headers,
    )
    assert response.status_code == 201
    survey_id = response.json()["id"]

    response = client.get(f"{API}/surveys/{survey_id}", headers=respondent_headers)
    assert response.status_code == 200
    survey = response.json()
    assert survey["questions"][0]["type"] == "rating"
    question_id = survey["questions"][0]["id"]

    response = client.post(
        f"{API}/surveys/{survey_id}/response",
        json={"userRef": "u1", "answers": {question_id: 4}},
        headers=respondent_headers,
    )
    assert response.status_code == 201
    assert "id" in response.json()

    response = client.get(f"{API}/surveys/{survey_id}/results", headers=author_headers)
    assert response.status_code == 200
    results = response.json()
    assert results["totalResponses"] == 1
    assert results["responses"][0]["answers"][question_id] == 4
    assert results["survey"]["id"] == survey_id


def test_get_survey_round_trips_questions(client, author_headers):
    survey_id = create_survey(client, author_headers)

    survey = client.get(f"{API}/surveys/{survey_id}", headers=author_headers).json()

    assert survey["title"] == "Platform Survey"
    assert survey["ownerGroup"] == "group:default/platform"
    assert survey["templates"] == ["template:default/react-app"]
    assert "createdAt" in survey
    assert [(q["type"], q["label"]) for q in survey["questions"]] == [
        ("rating", "Rate the portal"),
        ("multiple-choice", "Favourite plugin?"),
        ("text", "Comments"),
    ]
    assert survey["questions"][1]["options"] == ["Catalog", "TechDocs", "Scaffolder"]
    assert survey["questions"][0]["options"] is None
    assert all(q["surveyId"] == survey_id for q in survey["questions"])


def test_list_surveys_newest_first_with_questions(client, author_headers, respondent_headers):
    first = create_survey(client, author_headers)
    second = create_survey(client, author_headers, {"title": "Second", "questions": []})

    response = client.get(f"{API}/surveys", headers=respondent_headers)

    assert response.status_code == 200
    surveys = response.json()
    assert [s["id"] for s in surveys] == [second, first]
    assert len(surveys[1]["questions"]) == 3
    assert surveys[0]["templates"] == []
    assert surveys[0]["description"] == ""


def test_create_survey_validation_errors_are_400(client, author_headers):
    response = client.post(f"{API}/surveys", json={"title": " ", "questions": []}, headers=author_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "title"

    response = client.post(
        f"{API}/surveys",
        json={"title": "T", "questions": [{"type": "multiple-choice", "label": "Pick"}]},
        headers=author_headers,
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "questions.0.options"


def test_unknown_question_type_is_400(client, author_headers):
    response = client.post(
        f"{API}/surveys",
        json={"title": "T", "questions": [{"type": "slider", "label": "Slide"}]},
        headers=author_headers,
    )

    assert response.status_code == 400
    assert "questions.0.type" in {error["field"] for error in response.json()["errors"]}


def test_missing_required_fields_is_400(client, author_headers):
    response = client.post(f"{API}/surveys", json={"title": "No questions key"}, headers=author_headers)

    assert response.status_code == 400
    assert "questions" in {error["field"] for error in response.json()["errors"]}


def test_submit_and_list_responses(client, author_headers, respondent_headers):
    survey_id = create_survey(client, author_headers)
    questions = client.get(f"{API}/surveys/{survey_id}", headers=author_headers).json()["questions"]
    answers = {questions[0]["id"]: 5, questions[1]["id"]: "TechDocs", questions[2]["id"]: "Great docs"}

    response = client.post(
        f"{API}/surveys/{survey_id}/response",
        json={"userRef": "user:default/respondent", "answers": answers},
        headers=respondent_headers,
    )
    assert response.status_code == 201

    response = client.get(f"{API}/surveys/{survey_id}/responses", headers=author_headers)
    assert response.status_code == 200
    listed = response.json()
    assert len(listed) == 1
    assert listed[0]["answers"] == answers
    assert listed[0]["userRef"] == "user:default/respondent"
    assert listed[0]["surveyId"] == survey_id
    assert "submittedAt" in listed[0]


def test_submit_response_with_invalid_answers_is_400(client, author_headers, respondent_headers):
    survey_id = create_survey(client, author_headers)
    questions = client.get(f"{API}/surveys/{survey_id}", headers=author_headers).json()["questions"]
    answers = {questions[0]["id"]: 9, questions[1]["id"]: "Jenkins", questions[2]["id"]: "ok"}

    response = client.post(
        f"{API}/surveys/{survey_id}/response",
        json={"userRef": "user:default/respondent", "answers": answers},
        headers=respondent_headers,
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {f"answers.{questions[0]['id']}", f"answers.{questions[1]['id']}"}


def test_submit_response_without_user_ref_is_400(client, author_headers, respondent_headers):
    survey_id = create_survey(client, author_headers)

    response = client.post(
        f"{API}/surveys/{survey_id}/response", json={"answers": {}}, headers=respondent_headers
    )

    assert response.status_code == 400


def test_summary_endpoint(client, author_headers, respondent_headers):
    survey_id = create_survey(client, author_headers)
    questions = client.get(f"{API}/surveys/{survey_id}", headers=author_headers).json()["questions"]
    for rating, choice in [(5, "Catalog"), (5, "TechDocs"), (2, "Catalog")]:
        client.post(
            f"{API}/surveys/{survey_id}/response",
            json={"userRef": "user:default/respondent", "answers": {
                questions[0]["id"]: rating, questions[1]["id"]: choice, questions[2]["id"]: "note",
            }},
            headers=respondent_headers,
        )

    response = client.get(f"{API}/surveys/{survey_id}/summary", headers=author_headers)

    assert response.status_code == 200
    summary = response.json()
    assert summary["surveyId"] == survey_id
    assert summary["totalResponses"] == 3
    rating, choice, text = summary["questions"]
    assert rating["tally"] == {"5": 2, "2": 1}
    assert [point["count"] for point in rating["series"]] == [0, 1, 0, 0, 2]
    assert [(p["label"], p["count"]) for p in choice["series"]] == [
        ("Catalog", 2), ("TechDocs", 1), ("Scaffolder", 0),
    ]
    assert text["textAnswers"] == ["note", "note", "note"]


def test_delete_survey(client, author_headers, respondent_headers):
    survey_id = create_survey(client, author_headers)

    response = client.delete(f"{API}/surveys/{survey_id}", headers=author_headers)

    assert response.status_code == 200
    assert response.json() == {"message": f"Survey {survey_id} deleted successfully"}
    assert client.get(f"{API}/surveys/{survey_id}", headers=author_headers).status_code == 404


def test_missing_survey_is_404_everywhere(client, author_headers, respondent_headers, admin_headers):
    missing = f"{API}/surveys/does-not-exist"

    assert client.get(missing, headers=author_headers).status_code == 404
    assert client.delete(missing, headers=author_headers).status_code == 404
    assert client.get(f"{missing}/responses", headers=author_headers).status_code == 404
    assert client.get(f"{missing}/results", headers=author_headers).status_code == 404
    assert client.get(f"{missing}/summary", headers=author_headers).status_code == 404

    response = client.post(
        f"{missing}/response", json={"userRef": "u1", "answers": {}}, headers=respondent_headers
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Survey with id does-not-exist not found"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_respondent_cannot_submit_as_someone_else(client, author_headers):
    survey_id = create_survey(client, author_headers, {"title": "T", "questions": []})
    mallory = auth_headers("user:default/mallory", UserRole.RESPONDENT)

    response = client.post(
        f"{API}/surveys/{survey_id}/response",
        json={"userRef": "user:default/alice", "answers": {}},
        headers=mallory,
    )

    assert response.status_code == 403
    assert client.get(f"{API}/surveys/{survey_id}/responses", headers=author_headers).json() == []


def test_admin_can_submit_on_behalf_of_a_user(client, author_headers, admin_headers):
    survey_id = create_survey(client, author_headers, {"title": "T", "questions": []})

    response = client.post(
        f"{API}/surveys/{survey_id}/response",
        json={"userRef": "user:default/alice", "answers": {}},
        headers=admin_headers,
    )

    assert response.status_code == 201
    listed = client.get(f"{API}/surveys/{survey_id}/responses", headers=author_headers).json()
    assert [r["userRef"] for r in listed] == ["user:default/alice"]
