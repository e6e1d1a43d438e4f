"""Tests for the Flask-RESTful student API."""

import pytest

from students_service.app import create_app


@pytest.fixture
def client(service):
    app = create_app(service)
    app.config["TESTING"] = True
    return app.test_client()


def test_health_check(client):
    assert client.get("/").status_code == 200


class TestLifecycle:
    def test_add_student(self, client):
        resp = client.post("/api/v1/students", json={"id": 50, "name": "Ben", "phone": "050"})
        assert resp.status_code == 201
        assert resp.get_json()["data"] == {"id": 50, "name": "Ben", "phone": "050"}

    def test_add_existing_student_conflicts(self, client):
        resp = client.post("/api/v1/students", json={"id": 1, "name": "Ben", "phone": "050"})
        assert resp.status_code == 409
        assert resp.get_json()["success"] is False

    def test_add_student_missing_fields(self, client):
        assert client.post("/api/v1/students", json={"id": 50}).status_code == 400

    @pytest.mark.parametrize("body", [[1], "text", 5])
    def test_non_object_body_is_bad_request(self, client, body):
        resp = client.post("/api/v1/students", json=body)
        assert resp.status_code == 400
        assert resp.get_json()["success"] is False

    def test_update_phone(self, client):
        resp = client.put("/api/v1/students/3/phone", json={"phone": "055-5555555"})
        assert resp.get_json()["data"]["phone"] == "055-5555555"

    def test_update_phone_unknown(self, client):
        assert client.put("/api/v1/students/0/phone", json={"phone": "1"}).status_code == 404

    def test_remove_twice(self, client):
        assert client.delete("/api/v1/students/1").status_code == 200
        assert client.delete("/api/v1/students/1").status_code == 404

    def test_negative_id(self, client):
        client.post("/api/v1/students", json={"id": -1, "name": "Vasya", "phone": "111"})
        assert client.delete("/api/v1/students/-1").get_json()["data"]["name"] == "Vasya"


class TestMarks:
    def test_add_and_get_marks(self, client):
        resp = client.post("/api/v1/students/2/marks", json={"subject": "Java", "date": "2024-06-01", "score": 100})
        assert resp.status_code == 201
        assert resp.get_json()["data"] == [{"subject": "Java", "date": "2024-06-01", "score": 100}]
        assert client.get("/api/v1/students/2/marks").get_json()["data"][-1]["score"] == 100

    def test_add_mark_non_object_body(self, client):
        assert client.post("/api/v1/students/2/marks", json=[1]).status_code == 400

    def test_add_mark_bad_date(self, client):
        resp = client.post("/api/v1/students/2/marks", json={"subject": "Java", "date": "yesterday", "score": 1})
        assert resp.status_code == 400

    def test_subject_marks(self, client):
        data = client.get("/api/v1/students/1/marks?subject=Java").get_json()["data"]
        assert [m["date"] for m in data] == ["2023-01-10", "2023-02-10"]

    def test_subject_marks_empty_vs_missing(self, client):
        assert client.get("/api/v1/students/1/marks?subject=SubjectB").get_json()["data"] == []
        assert client.get("/api/v1/students/999/marks?subject=Java").status_code == 404

    def test_marks_at_dates(self, client):
        data = client.get("/api/v1/students/1/marks?from=2023-02-01&to=2023-12-31").get_json()["data"]
        assert [m["score"] for m in data] == [90, 60]

    def test_marks_at_dates_needs_both_bounds(self, client):
        assert client.get("/api/v1/students/1/marks?from=2023-02-01").status_code == 400


class TestQueries:
    def test_by_phone(self, client):
        assert client.get("/api/v1/students/phone/052-1234567").get_json()["data"]["id"] == 2

    def test_by_phone_absent_is_null(self, client):
        resp = client.get("/api/v1/students/phone/000")
        assert resp.status_code == 200
        assert resp.get_json()["data"] is None

    def test_by_prefix(self, client):
        assert len(client.get("/api/v1/students/phone-prefix?prefix=05").get_json()["data"]) == 7

    def test_good_marks(self, client):
        data = client.get("/api/v1/students/good-marks?threshold=70").get_json()["data"]
        assert [s["id"] for s in data] == [4, 6]

    def test_good_marks_subject(self, client):
        data = client.get("/api/v1/students/good-marks?threshold=90&subject=Java").get_json()["data"]
        assert [s["id"] for s in data] == [6]

    def test_few_marks(self, client):
        data = client.get("/api/v1/students/few-marks?threshold=2").get_json()["data"]
        assert [s["id"] for s in data] == [2, 7]

    def test_marks_amount(self, client):
        data = client.get("/api/v1/students/marks-amount?min=2&max=2").get_json()["data"]
        assert [s["id"] for s in data] == [3, 5]

    def test_threshold_must_be_integer(self, client):
        assert client.get("/api/v1/students/few-marks?threshold=abc").status_code == 400

    def test_avg_score(self, client):
        data = client.get("/api/v1/students/avg-score?threshold=85").get_json()["data"]
        assert data == [{"name": "Rivka", "avgScore": 90}]

    def test_best_and_worst(self, client):
        assert client.get("/api/v1/students/best?n=1").get_json()["data"] == ["Rivka"]
        assert client.get("/api/v1/students/worst?n=1").get_json()["data"] == ["Vasya"]
