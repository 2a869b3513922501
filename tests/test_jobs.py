"""
Test suite for job endpoints.

Tests cover:
- Job creation and defaults
- Category job counts
- Job retrieval
- Job search through query parameters
- Employer job listing
"""

from datetime import datetime, timedelta

from app.crud import category as category_crud


def category_count(db, name):
    return category_crud.get_by_name(db, name).job_count


class TestJobCreation:
    """Tests for POST /api/jobs"""

    def test_create_job_success(self, client, sample_job_data):
        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["title"] == sample_job_data["title"]
        assert data["skills"] == ["Python", "FastAPI", "Docker"]
        assert data["employerId"] == 1

    def test_posted_date_defaults_to_now(self, client, sample_job_data):
        del sample_job_data["postedDate"]
        before = datetime.now().astimezone()

        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 201
        posted = datetime.fromisoformat(response.json()["postedDate"].replace("Z", "+00:00"))
        assert posted >= before - timedelta(seconds=1)

    def test_salary_is_optional(self, client, sample_job_data):
        del sample_job_data["salary"]

        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 201
        assert response.json()["salary"] is None

    def test_missing_fields(self, client):
        response = client.post("/api/jobs", json={"title": "Test Job"})

        assert response.status_code == 400
        message = response.json()["message"]
        assert '"company"' in message
        assert '"employerId"' in message

    def test_wrong_field_type(self, client, sample_job_data):
        sample_job_data["skills"] = "Python"

        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 400
        assert '"skills"' in response.json()["message"]


class TestCategoryJobCount:
    """Creating a job bumps the matching category's jobCount"""

    def test_matching_category_incremented_once(self, client, db, sample_job_data):
        before = category_count(db, "Technology")

        client.post("/api/jobs", json=sample_job_data)

        assert category_count(db, "Technology") == before + 1

    def test_unknown_category_changes_nothing(self, client, db, sample_job_data):
        before = [c.job_count for c in category_crud.get_multi(db)]

        response = client.post("/api/jobs", json={**sample_job_data, "category": "Astronautics"})

        assert response.status_code == 201
        assert [c.job_count for c in category_crud.get_multi(db)] == before

    def test_category_match_is_exact(self, client, db, sample_job_data):
        before = category_count(db, "Technology")

        client.post("/api/jobs", json={**sample_job_data, "category": "technology"})

        assert category_count(db, "Technology") == before


class TestJobRetrieval:
    """Tests for GET /api/jobs/{id}"""

    def test_get_job_round_trip(self, client, sample_job_data):
        created = client.post("/api/jobs", json=sample_job_data).json()

        response = client.get(f"/api/jobs/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_nonexistent_job(self, client):
        response = client.get("/api/jobs/99999")

        assert response.status_code == 404
        assert response.json() == {"message": "Job not found"}

    def test_malformed_id(self, client):
        response = client.get("/api/jobs/not-a-number")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to retrieve job"}


class TestJobSearch:
    """Tests for GET /api/jobs"""

    def post_jobs(self, client, sample_job_data, now):
        jobs = [
            {"title": "Backend Engineer", "company": "Acme Corp", "location": "Remote",
             "jobType": "full-time", "experienceLevel": "senior", "category": "Technology",
             "salary": "$130,000 - $160,000", "postedDate": (now - timedelta(days=10)).isoformat()},
            {"title": "Product Designer", "company": "Pixel Ltd", "location": "Berlin, Germany",
             "jobType": "contract", "experienceLevel": "mid", "category": "Design",
             "salary": "$60,000 - $80,000", "postedDate": (now - timedelta(hours=5)).isoformat()},
            {"title": "Junior Backend Developer", "company": "Beta Inc", "location": "Remote (EU)",
             "jobType": "part-time", "experienceLevel": "entry", "category": "Technology",
             "salary": "Competitive", "postedDate": (now - timedelta(days=2)).isoformat()},
        ]
        return [client.post("/api/jobs", json={**sample_job_data, **job}).json() for job in jobs]

    def test_list_all_sorted_most_recent_first(self, client, sample_job_data, now):
        created = self.post_jobs(client, sample_job_data, now)

        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert [job["id"] for job in response.json()] == [created[1]["id"], created[2]["id"], created[0]["id"]]

    def test_empty_store(self, client):
        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert response.json() == []

    def test_search_and_location_combined(self, client, sample_job_data, now):
        self.post_jobs(client, sample_job_data, now)

        response = client.get("/api/jobs", params={"search": "backend", "location": "eu"})

        titles = [job["title"] for job in response.json()]
        assert titles == ["Junior Backend Developer"]

    def test_comma_separated_job_types(self, client, sample_job_data, now):
        self.post_jobs(client, sample_job_data, now)

        response = client.get("/api/jobs", params={"jobType": "contract,part-time"})

        assert sorted(job["jobType"] for job in response.json()) == ["contract", "part-time"]

    def test_experience_level_and_category(self, client, sample_job_data, now):
        self.post_jobs(client, sample_job_data, now)

        response = client.get("/api/jobs", params={"experienceLevel": "senior,entry", "category": "Technology"})

        assert len(response.json()) == 2

    def test_date_posted(self, client, sample_job_data, now):
        self.post_jobs(client, sample_job_data, now)

        assert len(client.get("/api/jobs", params={"datePosted": "last24h"}).json()) == 1
        assert len(client.get("/api/jobs", params={"datePosted": "last3d"}).json()) == 2
        assert len(client.get("/api/jobs", params={"datePosted": "last14d"}).json()) == 3
        assert len(client.get("/api/jobs", params={"datePosted": "all"}).json()) == 3

    def test_salary_range_scenario(self, client, sample_job_data, now):
        """A $60,000 - $80,000 Design job matches $55,000 but not $90,000"""
        job = client.post("/api/jobs", json={
            **sample_job_data,
            "category": "Design",
            "salary": "$60,000 - $80,000",
            "postedDate": now.isoformat(),
        }).json()

        included = client.get("/api/jobs", params={"salaryRange": "$55,000"}).json()
        excluded = client.get("/api/jobs", params={"salaryRange": "$90,000"}).json()

        assert [j["id"] for j in included] == [job["id"]]
        assert excluded == []

    def test_salary_range_excludes_unparseable_salaries(self, client, sample_job_data, now):
        self.post_jobs(client, sample_job_data, now)

        response = client.get("/api/jobs", params={"salaryRange": "$1"})

        assert "Junior Backend Developer" not in [job["title"] for job in response.json()]
        assert len(response.json()) == 2


class TestEmployerJobs:
    """Tests for GET /api/employers/{id}/jobs"""

    def test_lists_only_that_employer(self, client, sample_job_data):
        client.post("/api/jobs", json={**sample_job_data, "employerId": 1})
        client.post("/api/jobs", json={**sample_job_data, "employerId": 2})
        client.post("/api/jobs", json={**sample_job_data, "employerId": 1})

        response = client.get("/api/employers/1/jobs")

        assert response.status_code == 200
        assert [job["id"] for job in response.json()] == [1, 3]

    def test_unknown_employer_returns_empty_list(self, client):
        response = client.get("/api/employers/42/jobs")

        assert response.status_code == 200
        assert response.json() == []

    def test_malformed_id(self, client):
        response = client.get("/api/employers/x/jobs")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to retrieve employer jobs"}
