#!/usr/bin/env python3
"""
Matching Module - Deterministic job/candidate compatibility scoring.

Public API:
- MatchingService: Facade over the three matching operations
- MatchingDataSource: Interface the storage layer implements

Modules:

- models.py: Attribute snapshots and score results
- factors.py: The seven factor scorers
- aggregator.py: Weighted sum into the 0-100 MatchScore
- builder.py: MatchInput construction
- scoring.py: Pair scoring shared by the components below
- application.py: ApplicationMatcher (score + persist one application)
- ranking.py: JobMatchRanker (candidates for a job)
- recommendations.py: RecommendationEngine (jobs for a candidate)
- service.py: MatchingService orchestrator
"""

from core.matching.models import (
    SkillRequirement, CandidateSkill, JobMatchAttributes, CandidateMatchAttributes,
    ApplicationRef, MatchInput, FactorScores, MatchResult, CandidateScore, JobScore
)
from core.matching.interfaces import MatchingDataSource
from core.matching.service import MatchingService

__all__ = [
    'MatchingService', 'MatchingDataSource',
    'SkillRequirement', 'CandidateSkill', 'JobMatchAttributes', 'CandidateMatchAttributes',
    'ApplicationRef', 'MatchInput', 'FactorScores', 'MatchResult', 'CandidateScore', 'JobScore',
]
