#!/usr/bin/env python3
"""
Tests for SqlMatchingDataSource against an in-memory SQLite database.

Covers:
- attribute conversion (Numeric -> float, skills, company name)
- eligibility filtering for ranking passes
- active job enumeration (status, deadline, recency, limit)
- application lookups and score persistence
- end-to-end scoring through MatchingService
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from core.exceptions import (
    ApplicationNotFoundError, JobNotFoundError, CandidateNotFoundError
)
from core.matching import MatchingService
from database.data_source import SqlMatchingDataSource
from database.models import (
    Skill, User, JobSeekerProfile, JobSeekerSkill,
    Company, JobPosting, JobSkill, Application
)

pytestmark = pytest.mark.db

NOW = datetime.now(timezone.utc)


def _user(user_id, status='active', verified=True):
    return User(id=user_id, email=f"{user_id}@example.com", status=status, email_verified=verified)


def _profile(user_id, availability='immediately', **kwargs):
    fields = dict(
        id=f"profile-{user_id}",
        user_id=user_id,
        years_of_experience=4,
        desired_salary_min=100000,
        desired_salary_max=150000,
        location_city="Austin",
        location_state="TX",
        willing_to_relocate=False,
        availability=availability,
    )
    fields.update(kwargs)
    return JobSeekerProfile(**fields)


@pytest.fixture
def seeded_session(db_session):
    db_session.add_all([
        Skill(id="python", name="Python"),
        Skill(id="react", name="React"),
        Skill(id="go", name="Go"),
        Company(id="acme", name="Acme Corp", is_verified=True),
    ])
    db_session.add_all([
        _user("u-ready"),
        _user("u-not-looking"),
        _user("u-suspended", status='suspended'),
        _user("u-unverified", verified=False),
        _user("u-no-availability"),
    ])
    db_session.flush()
    db_session.add_all([
        _profile("u-ready"),
        _profile("u-not-looking", availability='not_looking'),
        _profile("u-suspended"),
        _profile("u-unverified"),
        _profile("u-no-availability", availability=None, years_of_experience=None,
                 desired_salary_min=None, desired_salary_max=None),
    ])
    db_session.flush()
    db_session.add_all([
        JobSeekerSkill(job_seeker_id="profile-u-ready", skill_id="python", years_of_experience=5),
        JobSeekerSkill(job_seeker_id="profile-u-ready", skill_id="react", years_of_experience=2),
        JobSeekerSkill(job_seeker_id="profile-u-no-availability", skill_id="go", years_of_experience=1),
    ])
    db_session.add_all([
        JobPosting(id="job-open", company_id="acme", title="Backend Engineer", status='active',
                   experience_level='mid', salary_min=100000, salary_max=150000,
                   location_city="Austin", location_state="TX", is_remote=False,
                   posted_date=NOW - timedelta(days=3), application_deadline=NOW + timedelta(days=30)),
        JobPosting(id="job-newest", title="Frontend Engineer", status='active',
                   experience_level='senior', is_remote=True,
                   posted_date=NOW - timedelta(days=1), application_deadline=None),
        JobPosting(id="job-closed", title="Old Role", status='closed',
                   posted_date=NOW - timedelta(days=2)),
        JobPosting(id="job-expired", title="Expired Role", status='active',
                   posted_date=NOW - timedelta(hours=1), application_deadline=NOW - timedelta(days=1)),
    ])
    db_session.flush()
    db_session.add_all([
        JobSkill(job_id="job-open", skill_id="python", is_required=True, min_years_required=3),
        JobSkill(job_id="job-open", skill_id="go", is_required=False, min_years_required=1),
        JobSkill(job_id="job-newest", skill_id="react", is_required=True, min_years_required=2),
        Application(id="app-1", job_id="job-open", job_seeker_id="u-ready"),
    ])
    db_session.commit()
    return db_session


@pytest.fixture
def data_source(seeded_session):
    return SqlMatchingDataSource(seeded_session)


class TestLoaders:

    def test_load_application(self, data_source):
        ref = data_source.load_application("app-1")
        assert ref.job_id == "job-open"
        assert ref.candidate_id == "u-ready"

    def test_load_application_missing(self, data_source):
        with pytest.raises(ApplicationNotFoundError):
            data_source.load_application("app-missing")

    def test_load_job(self, data_source):
        job = data_source.load_job_for_matching("job-open")
        assert job.title == "Backend Engineer"
        assert job.company_name == "Acme Corp"
        assert job.salary_min == 100000.0
        assert isinstance(job.salary_min, float)
        assert job.is_active is True
        assert {(s.skill_id, s.is_required, s.min_years_required) for s in job.skills} == {
            ("python", True, 3), ("go", False, 1)
        }

    def test_load_closed_job_marks_inactive(self, data_source):
        job = data_source.load_job_for_matching("job-closed")
        assert job.is_active is False
        assert job.skills == []

    def test_load_job_missing(self, data_source):
        with pytest.raises(JobNotFoundError):
            data_source.load_job_for_matching("job-missing")

    def test_load_candidate_by_user_id(self, data_source):
        candidate = data_source.load_candidate_for_matching("u-ready")
        assert candidate.candidate_id == "u-ready"
        assert candidate.profile_id == "profile-u-ready"
        assert candidate.desired_salary_max == 150000.0
        assert {(s.skill_id, s.years_of_experience) for s in candidate.skills} == {
            ("python", 5), ("react", 2)
        }

    def test_load_candidate_keeps_missing_fields_as_none(self, data_source):
        candidate = data_source.load_candidate_for_matching("u-no-availability")
        assert candidate.years_of_experience is None
        assert candidate.desired_salary_min is None
        assert candidate.availability is None

    def test_load_candidate_missing(self, data_source):
        with pytest.raises(CandidateNotFoundError):
            data_source.load_candidate_for_matching("u-missing")


class TestEnumerations:

    def test_eligible_candidates(self, data_source):
        candidates = data_source.enumerate_eligible_candidates()
        assert {c.candidate_id for c in candidates} == {"u-ready", "u-no-availability"}

        ready = next(c for c in candidates if c.candidate_id == "u-ready")
        assert len(ready.skills) == 2

    def test_active_jobs_newest_first(self, data_source):
        jobs = data_source.enumerate_active_jobs(100)
        assert [j.job_id for j in jobs] == ["job-newest", "job-open"]
        assert [s.skill_id for s in jobs[0].skills] == ["react"]
        assert jobs[1].company_name == "Acme Corp"

    def test_active_jobs_limit(self, data_source):
        jobs = data_source.enumerate_active_jobs(1)
        assert [j.job_id for j in jobs] == ["job-newest"]


class TestApplications:

    def test_has_applied(self, data_source):
        assert data_source.has_applied("job-open", "u-ready") is True
        assert data_source.has_applied("job-newest", "u-ready") is False

    def test_persist_application_score(self, data_source, seeded_session):
        data_source.persist_application_score("app-1", 77)
        data_source.persist_application_score("app-1", 81)
        seeded_session.commit()

        stored = seeded_session.execute(
            select(Application.match_score).where(Application.id == "app-1")
        ).scalar_one()
        assert stored == 81

    def test_persist_missing_application(self, data_source):
        with pytest.raises(ApplicationNotFoundError):
            data_source.persist_application_score("app-missing", 50)


class TestEndToEnd:

    def test_compute_application_match(self, data_source, seeded_session):
        score = MatchingService(data_source).compute_application_match("app-1")
        seeded_session.commit()

        # skills: python met, go preferred missing -> 0.8; everything else ideal
        assert score == 92
        stored = seeded_session.execute(
            select(Application.match_score).where(Application.id == "app-1")
        ).scalar_one()
        assert stored == 92

    def test_rank_candidates(self, data_source):
        ranked = MatchingService(data_source).rank_candidates_for_job("job-open")
        # u-no-availability: only the preferred skill, no years, no salary -> 53
        assert [(c.candidate_id, c.score) for c in ranked] == [("u-ready", 92), ("u-no-availability", 53)]

    def test_similar_candidates_carry_profile_summary(self, data_source, seeded_session):
        profile = seeded_session.get(JobSeekerProfile, "profile-u-ready")
        profile.first_name = "Ada"
        profile.last_name = "Lovelace"
        profile.headline = "Backend developer"
        seeded_session.commit()

        top = MatchingService(data_source).similar_candidates("job-open", limit=1)

        assert len(top) == 1
        summary = top[0].to_dict()['candidate']
        assert summary == {
            'id': "u-ready",
            'first_name': "Ada",
            'last_name': "Lovelace",
            'headline': "Backend developer",
            'location': "Austin, TX",
            'years_of_experience': 4,
            'availability': "immediately",
        }

    def test_recommendations_skip_applied(self, data_source):
        recommendations = MatchingService(data_source).recommend_jobs_for_candidate("u-ready")
        assert [r.job_id for r in recommendations] == ["job-newest"]
        assert recommendations[0].score == 89


class TestUnitOfWork:

    def test_commits_on_success(self, seeded_session, session_factory):
        from database.uow import matching_uow

        with matching_uow(session_factory) as data_source:
            data_source.persist_application_score("app-1", 64)

        check = session_factory()
        try:
            stored = check.execute(
                select(Application.match_score).where(Application.id == "app-1")
            ).scalar_one()
        finally:
            check.close()
        assert stored == 64

    def test_rolls_back_on_error(self, seeded_session, session_factory):
        from database.uow import matching_uow

        with pytest.raises(RuntimeError):
            with matching_uow(session_factory) as data_source:
                data_source.persist_application_score("app-1", 12)
                raise RuntimeError("boom")

        check = session_factory()
        try:
            stored = check.execute(
                select(Application.match_score).where(Application.id == "app-1")
            ).scalar_one()
        finally:
            check.close()
        assert stored is None
