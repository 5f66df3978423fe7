"""Integration tests for Jobs API.

Test cases for:
- Create (admin only)
- List with title / minSalary / hasEquity filters (anyone)
- Get / update / delete
"""

import pytest

API = "/api/v1/jobs"


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class TestCreateJob:
    def test_ok_for_admin(self, client, admin_token):
        response = client.post(
            API,
            json={"title": "new", "salary": 10, "equity": 0.2, "companyHandle": "c1"},
            headers=bearer(admin_token),
        )

        assert response.status_code == 201
        job = response.json()["job"]
        assert isinstance(job["id"], int)
        assert job["title"] == "new"
        assert job["salary"] == 10
        assert job["equity"] == pytest.approx(0.2)
        assert job["companyHandle"] == "c1"

    def test_unauthorized_for_non_admin(self, client, u1_token):
        response = client.post(API, json={"title": "new", "companyHandle": "c1"}, headers=bearer(u1_token))

        assert response.status_code == 401

    def test_unauthorized_for_anon(self, client):
        response = client.post(API, json={"title": "new", "companyHandle": "c1"})

        assert response.status_code == 401

    def test_missing_data(self, client, admin_token):
        response = client.post(API, json={"salary": 10}, headers=bearer(admin_token))

        assert response.status_code == 400

    def test_invalid_equity(self, client, admin_token):
        response = client.post(
            API,
            json={"title": "new", "equity": 1.5, "companyHandle": "c1"},
            headers=bearer(admin_token),
        )

        assert response.status_code == 400

    def test_unknown_company(self, client, admin_token):
        response = client.post(API, json={"title": "new", "companyHandle": "nope"}, headers=bearer(admin_token))

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid company handle: nope"


class TestListJobs:
    def test_ok_for_anon(self, client):
        response = client.get(API)

        assert response.status_code == 200
        assert [job["title"] for job in response.json()["jobs"]] == ["j1", "j2", "j3"]

    def test_filter_title(self, client):
        response = client.get(API, params={"title": "J3"})

        assert [job["title"] for job in response.json()["jobs"]] == ["j3"]

    def test_filter_min_salary(self, client):
        response = client.get(API, params={"minSalary": 2500})

        assert [job["title"] for job in response.json()["jobs"]] == ["j3"]

    def test_has_equity_true(self, client):
        response = client.get(API, params={"hasEquity": "true"})

        assert [job["title"] for job in response.json()["jobs"]] == ["j1"]

    def test_has_equity_false_does_not_filter(self, client):
        response = client.get(API, params={"hasEquity": "false"})

        assert len(response.json()["jobs"]) == 3

    def test_has_equity_with_min_salary(self, client):
        response = client.get(API, params={"minSalary": 500, "hasEquity": "true"})

        assert [job["title"] for job in response.json()["jobs"]] == ["j1"]

    def test_has_equity_not_boolean(self, client):
        response = client.get(API, params={"hasEquity": "maybe"})

        assert response.status_code == 400

    def test_has_equity_unset_rejected(self, client):
        response = client.get(API, params={"hasEquity": "unset"})

        assert response.status_code == 400

    def test_invalid_min_salary(self, client):
        response = client.get(API, params={"minSalary": "lots"})

        assert response.status_code == 400

    def test_extra_param_rejected(self, client):
        response = client.get(API, params={"companyHandle": "c1"})

        assert response.status_code == 400


class TestGetJob:
    def test_ok_for_anon(self, client, job_ids):
        response = client.get(f"{API}/{job_ids['j1']}")

        assert response.status_code == 200
        assert response.json()["job"]["title"] == "j1"
        assert response.json()["job"]["companyHandle"] == "c1"

    def test_not_found(self, client, job_ids):
        response = client.get(f"{API}/0")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "No job id: 0", "status": 404}}

    def test_non_numeric_id(self, client):
        response = client.get(f"{API}/abc")

        assert response.status_code == 400


class TestUpdateJob:
    def test_ok_for_admin(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={"title": "j1-new"}, headers=bearer(admin_token))

        assert response.status_code == 200
        job = response.json()["job"]
        assert job["id"] == job_ids["j1"]
        assert job["title"] == "j1-new"
        assert job["salary"] == 1000

    def test_unauthorized_for_non_admin(self, client, u1_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={"title": "j1-new"}, headers=bearer(u1_token))

        assert response.status_code == 401

    def test_not_found(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/0", json={"title": "x"}, headers=bearer(admin_token))

        assert response.status_code == 404

    def test_company_change_rejected(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={"companyHandle": "c2"}, headers=bearer(admin_token))

        assert response.status_code == 400

    def test_empty_body(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={}, headers=bearer(admin_token))

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No data"

    def test_null_title_rejected(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={"title": None}, headers=bearer(admin_token))

        assert response.status_code == 400
        assert any("title cannot be null" in m for m in response.json()["error"]["message"])

    def test_null_salary_clears_it(self, client, admin_token, job_ids):
        response = client.patch(f"{API}/{job_ids['j1']}", json={"salary": None}, headers=bearer(admin_token))

        assert response.status_code == 200
        assert response.json()["job"]["salary"] is None


class TestDeleteJob:
    def test_ok_for_admin(self, client, admin_token, job_ids):
        response = client.delete(f"{API}/{job_ids['j1']}", headers=bearer(admin_token))

        assert response.json() == {"deleted": job_ids["j1"]}

    def test_unauthorized_for_anon(self, client, job_ids):
        response = client.delete(f"{API}/{job_ids['j1']}")

        assert response.status_code == 401

    def test_not_found(self, client, admin_token, job_ids):
        response = client.delete(f"{API}/0", headers=bearer(admin_token))

        assert response.status_code == 404
