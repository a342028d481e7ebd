#!/usr/bin/env python3
"""
Matching Models - Data structures for job/candidate matching.

Attribute records are read-only snapshots handed to the engine by the data
collaborator. Nothing here is persisted except the final integer score.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Dict, Any, Optional


@dataclass(frozen=True)
class SkillRequirement:
    """A skill attached to a job posting."""
    skill_id: str
    is_required: bool
    min_years_required: int = 0


@dataclass(frozen=True)
class CandidateSkill:
    """A skill held by a candidate."""
    skill_id: str
    years_of_experience: int = 0


@dataclass
class JobMatchAttributes:
    """Job posting fields used for matching."""
    job_id: str
    title: str = ""
    experience_level: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    is_remote: bool = False
    is_active: bool = True
    employment_type: Optional[str] = None
    education_requirements: Optional[str] = None
    skills: List[SkillRequirement] = field(default_factory=list)

    # Display metadata, not scored
    company_name: Optional[str] = None
    posted_date: Optional[datetime] = None

    def to_summary(self) -> Dict[str, Any]:
        location = ", ".join(p for p in (self.location_city, self.location_state) if p)
        return {
            'id': self.job_id,
            'title': self.title,
            'company_name': self.company_name,
            'location': location,
            'is_remote': self.is_remote,
            'salary_min': self.salary_min,
            'salary_max': self.salary_max,
            'employment_type': self.employment_type,
            'experience_level': self.experience_level,
            'posted_date': self.posted_date.isoformat() if self.posted_date else None,
        }


@dataclass
class CandidateMatchAttributes:
    """Candidate profile fields used for matching."""
    candidate_id: str
    profile_id: Optional[str] = None
    years_of_experience: Optional[int] = None
    desired_salary_min: Optional[float] = None
    desired_salary_max: Optional[float] = None
    location_city: Optional[str] = None
    location_state: Optional[str] = None
    willing_to_relocate: bool = False
    remote_preference: Optional[str] = None
    availability: Optional[str] = None
    skills: List[CandidateSkill] = field(default_factory=list)

    # Display metadata, not scored
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    headline: Optional[str] = None

    def to_summary(self) -> Dict[str, Any]:
        location = ", ".join(p for p in (self.location_city, self.location_state) if p)
        return {
            'id': self.candidate_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'headline': self.headline,
            'location': location,
            'years_of_experience': self.years_of_experience,
            'availability': self.availability,
        }


@dataclass(frozen=True)
class ApplicationRef:
    """Identifies the job/candidate pair behind an application."""
    application_id: str
    job_id: str
    candidate_id: str


@dataclass
class MatchInput:
    """Everything the factor scorers need for one job/candidate pair."""
    job_skills: List[SkillRequirement]
    job_experience_level: Optional[str]
    job_salary_min: Optional[float]
    job_salary_max: Optional[float]
    job_location_city: Optional[str]
    job_location_state: Optional[str]
    job_is_remote: bool
    job_education_requirements: Optional[str]
    job_employment_type: Optional[str]

    candidate_skills: Dict[str, int]
    candidate_years: Optional[int]
    candidate_salary_min: Optional[float]
    candidate_salary_max: Optional[float]
    candidate_location_city: Optional[str]
    candidate_location_state: Optional[str]
    candidate_willing_to_relocate: bool
    candidate_remote_preference: Optional[str]
    candidate_availability: Optional[str]


@dataclass(frozen=True)
class FactorScores:
    """Per-dimension scores, each in [0, 1]."""
    skills: float
    experience: float
    location: float
    salary: float
    availability: float
    education: float
    employment_type: float

    def as_dict(self) -> Dict[str, float]:
        return {
            'skills': self.skills,
            'experience': self.experience,
            'location': self.location,
            'salary': self.salary,
            'availability': self.availability,
            'education': self.education,
            'employment_type': self.employment_type,
        }


@dataclass(frozen=True)
class MatchResult:
    """Aggregate score with the factor breakdown that produced it."""
    score: int
    factors: FactorScores


@dataclass(frozen=True)
class CandidateScore:
    """One entry of a ranked candidate list for a job."""
    candidate_id: str
    score: int
    factors: FactorScores
    candidate: Optional[CandidateMatchAttributes] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'candidate': self.candidate.to_summary() if self.candidate else {'id': self.candidate_id},
            'match_score': self.score,
            'match_factors': self.factors.as_dict(),
        }


@dataclass(frozen=True)
class JobScore:
    """One entry of a recommended job list for a candidate."""
    job_id: str
    score: int
    factors: FactorScores
    job: Optional[JobMatchAttributes] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job': self.job.to_summary() if self.job else {'id': self.job_id},
            'match_score': self.score,
            'match_factors': self.factors.as_dict(),
        }
