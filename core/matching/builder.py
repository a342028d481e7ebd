#!/usr/bin/env python3
"""
MatchInput construction from job and candidate attribute snapshots.
"""

from typing import Dict, Iterable

from core.matching.models import (
    CandidateSkill, JobMatchAttributes, CandidateMatchAttributes, MatchInput
)


def candidate_skill_years(skills: Iterable[CandidateSkill]) -> Dict[str, int]:
    """Map skill_id -> years. Duplicate entries keep the largest value."""
    years: Dict[str, int] = {}
    for skill in skills:
        value = max(0, skill.years_of_experience or 0)
        if value >= years.get(skill.skill_id, 0):
            years[skill.skill_id] = value
    return years


def build_match_input(job: JobMatchAttributes, candidate: CandidateMatchAttributes) -> MatchInput:
    return MatchInput(
        job_skills=list(job.skills),
        job_experience_level=job.experience_level,
        job_salary_min=job.salary_min,
        job_salary_max=job.salary_max,
        job_location_city=job.location_city,
        job_location_state=job.location_state,
        job_is_remote=bool(job.is_remote),
        job_education_requirements=job.education_requirements,
        job_employment_type=job.employment_type,
        candidate_skills=candidate_skill_years(candidate.skills),
        candidate_years=candidate.years_of_experience,
        candidate_salary_min=candidate.desired_salary_min,
        candidate_salary_max=candidate.desired_salary_max,
        candidate_location_city=candidate.location_city,
        candidate_location_state=candidate.location_state,
        candidate_willing_to_relocate=bool(candidate.willing_to_relocate),
        candidate_remote_preference=candidate.remote_preference,
        candidate_availability=candidate.availability,
    )
