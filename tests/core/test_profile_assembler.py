from __future__ import annotations

from jobmatch.core import assemble_profile
from jobmatch.schemas import UserRecord


def test_assemble_profile_defaults_every_missing_field():
    profile = assemble_profile(UserRecord(email="empty@example.com"))

    assert profile.name == "N/A"
    assert profile.headline == ""
    assert profile.skills == []
    assert profile.experience == []
    assert profile.education == []
    assert profile.job_preferences.job_types == []
    assert profile.job_preferences.locations == []
    assert profile.job_preferences.salary.min is None
    assert profile.job_preferences.salary.max is None
    assert profile.job_preferences.remote is None


def test_assemble_profile_handles_null_nested_values():
    user = UserRecord.model_validate(
        {
            "email": "nulls@example.com",
            "name": "Ana",
            "profile": {
                "headline": None,
                "skills": None,
                "experience": [{"title": "Analyst", "company": None}],
                "education": [{"degree": "BSc", "institution": "MIT", "year": 2019}],
                "jobPreferences": {"jobTypes": None, "salary": None, "remote": True},
            },
        }
    )

    profile = assemble_profile(user)

    assert profile.headline == ""
    assert profile.skills == []
    assert profile.experience[0].company == ""
    assert profile.experience[0].duration is None
    assert profile.education[0].year == "2019"
    assert profile.job_preferences.job_types == []
    assert profile.job_preferences.salary.min is None
    assert profile.job_preferences.remote is True


def test_assemble_profile_deduplicates_skills_in_order():
    user = UserRecord.model_validate(
        {
            "email": "dup@example.com",
            "profile": {"skills": ["Go", "SQL", "Go", " ", "Python", "SQL"]},
        }
    )

    assert assemble_profile(user).skills == ["Go", "SQL", "Python"]
