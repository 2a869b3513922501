"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- A fresh, seeded in-memory database per test
- FastAPI test client wired to that database
- Sample request payloads
"""

import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient

from app.core.database import get_db, init_db
from main import app


@pytest.fixture
def db():
    """
    Fresh database seeded with the demo categories.
    Each test gets its own instance, so no state leaks between tests.
    """
    return init_db()


@pytest.fixture
def client(db):
    """
    FastAPI test client with the database dependency overridden.
    """
    app.dependency_overrides[get_db] = lambda: db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return datetime.now(timezone.utc)


@pytest.fixture
def sample_user_data():
    """Sample employer registration payload"""
    return {
        "username": "acme_hr",
        "password": "hunter2",
        "email": "hr@acme.example",
        "userType": "employer",
        "companyName": "Acme Corp",
        "location": "Austin, TX",
    }


@pytest.fixture
def sample_job_data(now):
    """Sample job posting payload"""
    return {
        "title": "Senior Python Developer",
        "company": "Acme Corp",
        "location": "San Francisco, CA (Remote)",
        "description": "Build and operate our FastAPI services.",
        "requirements": "5+ years of Python, PostgreSQL, Docker",
        "salary": "$120,000 - $150,000",
        "jobType": "full-time",
        "category": "Technology",
        "experienceLevel": "senior",
        "skills": ["Python", "FastAPI", "Docker"],
        "postedDate": (now - timedelta(hours=2)).isoformat(),
        "employerId": 1,
    }


@pytest.fixture
def sample_application_data():
    """Sample application payload without status or appliedDate"""
    return {
        "jobId": 1,
        "userId": 2,
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "resume": "https://example.com/jane.pdf",
        "coverLetter": "I would love to join.",
    }
