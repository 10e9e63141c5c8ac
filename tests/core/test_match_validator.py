from __future__ import annotations

from jobmatch.core import validate_matches
from jobmatch.schemas import MatchCandidate

JOB_A = "65a1f0c2e4b0a1b2c3d4e5f1"
JOB_B = "65a1f0c2e4b0a1b2c3d4e5f2"
JOB_C = "65a1f0c2e4b0a1b2c3d4e5f3"


def test_validator_drops_invalid_ids_and_preserves_order():
    candidates = [
        MatchCandidate(job_id=JOB_A, match_score=80),
        MatchCandidate(job_id="example_id_1", match_score=70),
        MatchCandidate(job_id=JOB_B, match_score=60.5),
        MatchCandidate(job_id=12345, match_score=50),
        MatchCandidate(job_id=JOB_C + "0", match_score=40),
        MatchCandidate(job_id=JOB_C, match_score=30),
    ]

    report = validate_matches(candidates)

    assert report.accepted == [
        MatchCandidate(job_id=JOB_A, match_score=80),
        MatchCandidate(job_id=JOB_B, match_score=60.5),
        MatchCandidate(job_id=JOB_C, match_score=30),
    ]
    assert report.dropped_count == 3


def test_validator_requires_finite_numeric_score():
    candidates = [
        MatchCandidate(job_id=JOB_A, match_score=float("nan")),
        MatchCandidate(job_id=JOB_A, match_score=float("inf")),
        MatchCandidate(job_id=JOB_A, match_score=True),
        MatchCandidate(job_id=JOB_A, match_score="90"),
        MatchCandidate(job_id=JOB_A, match_score=None),
        MatchCandidate(job_id=JOB_B, match_score=150),
    ]

    report = validate_matches(candidates)

    assert report.accepted == [MatchCandidate(job_id=JOB_B, match_score=150)]
    assert report.dropped_count == 5


def test_validator_keeps_accepted_candidates_unchanged():
    candidate = MatchCandidate(job_id=JOB_A.upper(), match_score=10)

    report = validate_matches([candidate])

    assert report.accepted == [candidate]


def test_validator_empty_input():
    report = validate_matches([])

    assert report.accepted == []
    assert report.dropped == []


def test_validator_rejects_ids_with_surrounding_whitespace():
    report = validate_matches(
        [
            MatchCandidate(job_id=JOB_A + "\n", match_score=10),
            MatchCandidate(job_id=" " + JOB_B, match_score=20),
        ]
    )

    assert report.accepted == []
    assert report.dropped_count == 2


def test_validator_drops_scores_too_large_for_a_float():
    report = validate_matches(
        [
            MatchCandidate(job_id=JOB_A, match_score=10**400),
            MatchCandidate(job_id=JOB_B, match_score=10**20),
        ]
    )

    assert report.accepted == [MatchCandidate(job_id=JOB_B, match_score=10**20)]
    assert report.dropped_count == 1
