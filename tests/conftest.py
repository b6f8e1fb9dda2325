"""Shared fixtures for submission stats tests."""

import json

import pytest

from domain.models import SubmissionCount


@pytest.fixture
def stats_payload():
    """Successful LeetCode response with three difficulty buckets."""
    return {
        "data": {
            "matchedUser": {
                "submitStats": {
                    "acSubmissionNum": [
                        {"difficulty": "Easy", "count": 120, "submissions": 150},
                        {"difficulty": "Medium", "count": 80, "submissions": 200},
                        {"difficulty": "Hard", "count": 10, "submissions": 40},
                    ]
                }
            }
        }
    }


@pytest.fixture
def stats_body(stats_payload):
    return json.dumps(stats_payload)


@pytest.fixture
def expected_counts():
    return (
        SubmissionCount(difficulty="Easy", count=120),
        SubmissionCount(difficulty="Medium", count=80),
        SubmissionCount(difficulty="Hard", count=10),
    )
