#!/usr/bin/env python3
"""
Factor Scorers - One pure function per matching dimension.

Every scorer maps job/candidate attributes to a score in [0, 1]. Missing
data gets a neutral score rather than a penalty wherever a dimension
defines one.

- skills: required/preferred coverage with minimum-years thresholds
- experience: distance from the level's ideal years, asymmetric penalties
- location: remote / same city / same state / relocation ladder
- salary: overlap of desired and offered salary ranges
- availability: fixed lookup on the candidate's availability status
- education, employment_type: placeholders (not modelled yet)
"""

from typing import Dict, List, Optional
import logging

from core.config_loader import MatchingConfig, ExperienceRange
from core.matching.models import SkillRequirement, MatchInput, FactorScores

logger = logging.getLogger(__name__)

REMOTE_ONLY = 'remote_only'


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _years(value: Optional[float]) -> float:
    """Missing or negative years count as zero."""
    if value is None:
        return 0.0
    return max(0.0, float(value))


def score_skills(
    requirements: List[SkillRequirement],
    candidate_skills: Dict[str, int],
    config: MatchingConfig
) -> float:
    """
    Score how many of a job's skill requirements the candidate meets.

    A requirement is met when the candidate's years for that skill reach
    min_years_required (a missing skill counts as zero years). Required
    skills carry skills_required_weight, preferred ones the rest; an empty
    group contributes its full share.

    Args:
        requirements: Skill requirements attached to the job
        candidate_skills: skill_id -> years of experience
        config: MatchingConfig with the required/preferred split

    Returns:
        Skills score (0.0-1.0)
    """
    if not requirements:
        return 1.0

    required_total = required_met = 0
    preferred_total = preferred_met = 0

    for req in requirements:
        meets = _years(candidate_skills.get(req.skill_id)) >= _years(req.min_years_required)
        if req.is_required:
            required_total += 1
            required_met += int(meets)
        else:
            preferred_total += 1
            preferred_met += int(meets)

    required_ratio = required_met / required_total if required_total > 0 else 1.0
    preferred_ratio = preferred_met / preferred_total if preferred_total > 0 else 1.0

    score = (
        config.skills_required_weight * required_ratio +
        config.skills_preferred_weight * preferred_ratio
    )
    return _clamp01(score)


def resolve_experience_range(level: Optional[str], config: MatchingConfig) -> ExperienceRange:
    """Look up the year band for an experience level, falling back to the default level."""
    ranges = config.experience_ranges
    if level and level in ranges:
        return ranges[level]
    if level:
        logger.debug(f"Unknown experience level '{level}', using '{config.default_experience_level}'")
    return ranges[config.default_experience_level]


def score_experience(
    experience_level: Optional[str],
    candidate_years: Optional[float],
    config: MatchingConfig
) -> float:
    """
    Score candidate years against the job level's {min, max, ideal} band.

    Under-qualification loses experience_under_penalty_per_year per missing
    year down to 0. Over-qualification loses experience_over_penalty_per_year
    per extra year but never drops below experience_over_floor. Inside the
    band the score falls linearly with distance from the ideal, by at most
    experience_max_deviation_penalty.
    """
    band = resolve_experience_range(experience_level, config)
    years = _years(candidate_years)

    if years < band.min:
        gap = band.min - years
        return max(0.0, 1.0 - config.experience_under_penalty_per_year * gap)

    if years > band.max:
        gap = years - band.max
        return max(config.experience_over_floor, 1.0 - config.experience_over_penalty_per_year * gap)

    max_deviation = max(band.ideal - band.min, band.max - band.ideal)
    if max_deviation == 0:
        return 1.0
    deviation = abs(years - band.ideal)
    return _clamp01(1.0 - config.experience_max_deviation_penalty * (deviation / max_deviation))


def score_location(
    job_is_remote: bool,
    job_city: Optional[str],
    job_state: Optional[str],
    candidate_city: Optional[str],
    candidate_state: Optional[str],
    willing_to_relocate: bool,
    remote_preference: Optional[str],
    config: MatchingConfig
) -> float:
    """
    Score location fit. First matching rule wins:

    1. remote job, or candidate wants remote only
    2. same city and state
    3. same state
    4. candidate willing to relocate
    5. anything else

    Fields are compared as given, so a field missing on both sides counts
    as equal and absent location data is not penalised.
    """
    if job_is_remote or remote_preference == REMOTE_ONLY:
        return config.location_remote_score

    same_state = job_state == candidate_state
    if same_state and job_city == candidate_city:
        return config.location_same_city_score

    if same_state:
        return config.location_same_state_score

    if willing_to_relocate:
        return config.location_relocate_score

    return config.location_mismatch_score


def _has_salary(value: Optional[float]) -> bool:
    return value is not None and value > 0


def score_salary(
    job_min: Optional[float],
    job_max: Optional[float],
    candidate_min: Optional[float],
    candidate_max: Optional[float],
    config: MatchingConfig
) -> float:
    """
    Score the overlap between the offered and desired salary ranges.

    Returns salary_missing_score when either side has no minimum. Absent
    maxima default to a multiple of the minimum (job x1.3, candidate x1.2).

    - Overlapping ranges: 0.5 + 0.5 * overlap / shorter range, capped at 1.0
    - Candidate asks more than the job's max: 0.5 minus the relative gap, floor 0
    - Candidate asks less than the job's min: salary_below_offer_score

    Args:
        job_min: Job's salary minimum
        job_max: Job's salary maximum (optional)
        candidate_min: Candidate's desired minimum
        candidate_max: Candidate's desired maximum (optional)
        config: MatchingConfig with salary constants

    Returns:
        Salary score (0.0-1.0)
    """
    if not _has_salary(job_min) or not _has_salary(candidate_min):
        return config.salary_missing_score

    j_min = float(job_min)
    j_max = float(job_max) if _has_salary(job_max) else j_min * config.salary_job_max_multiplier
    c_min = float(candidate_min)
    c_max = float(candidate_max) if _has_salary(candidate_max) else c_min * config.salary_candidate_max_multiplier

    # Inverted ranges collapse to a single point
    j_max = max(j_max, j_min)
    c_max = max(c_max, c_min)

    overlap_start = max(j_min, c_min)
    overlap_end = min(j_max, c_max)

    if overlap_start <= overlap_end:
        shorter_range = min(j_max - j_min, c_max - c_min)
        if shorter_range <= 0:
            return 1.0
        overlap = overlap_end - overlap_start
        return min(1.0, 0.5 + 0.5 * overlap / shorter_range)

    if c_min > j_max:
        gap_ratio = (c_min - j_max) / j_max
        return max(0.0, 0.5 - gap_ratio)

    return config.salary_below_offer_score


def score_availability(availability: Optional[str], config: MatchingConfig) -> float:
    """Fixed lookup; unknown or missing statuses get unknown_availability_score."""
    if availability in config.availability_scores:
        return config.availability_scores[availability]
    return config.unknown_availability_score


def score_education(education_requirements: Optional[str], config: MatchingConfig) -> float:
    # Not implemented: education requirements are not modelled yet.
    return config.education_placeholder_score


def score_employment_type(employment_type: Optional[str], config: MatchingConfig) -> float:
    # Not implemented: candidate employment-type preferences are not modelled yet.
    return config.employment_type_placeholder_score


def calculate_factor_scores(match_input: MatchInput, config: MatchingConfig) -> FactorScores:
    """Run all seven scorers for one job/candidate pair."""
    return FactorScores(
        skills=score_skills(match_input.job_skills, match_input.candidate_skills, config),
        experience=score_experience(
            match_input.job_experience_level,
            match_input.candidate_years,
            config
        ),
        location=score_location(
            job_is_remote=match_input.job_is_remote,
            job_city=match_input.job_location_city,
            job_state=match_input.job_location_state,
            candidate_city=match_input.candidate_location_city,
            candidate_state=match_input.candidate_location_state,
            willing_to_relocate=match_input.candidate_willing_to_relocate,
            remote_preference=match_input.candidate_remote_preference,
            config=config
        ),
        salary=score_salary(
            match_input.job_salary_min,
            match_input.job_salary_max,
            match_input.candidate_salary_min,
            match_input.candidate_salary_max,
            config
        ),
        availability=score_availability(match_input.candidate_availability, config),
        education=score_education(match_input.job_education_requirements, config),
        employment_type=score_employment_type(match_input.job_employment_type, config),
    )
