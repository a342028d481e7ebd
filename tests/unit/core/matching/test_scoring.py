"""
Tests for MatchInput construction and the pair-scoring helpers.
"""
import unittest

from core.config_loader import MatchingConfig
from core.matching.builder import build_match_input, candidate_skill_years
from core.matching.models import CandidateSkill
from core.matching.scoring import MatchScorer, map_in_order
from tests.mocks.matching_mocks import make_job, make_candidate


class TestCandidateSkillYears(unittest.TestCase):

    def test_duplicates_keep_largest(self):
        skills = [CandidateSkill('python', 2), CandidateSkill('python', 6), CandidateSkill('python', 1)]
        self.assertEqual(candidate_skill_years(skills), {'python': 6})

    def test_negative_years_clamped(self):
        self.assertEqual(candidate_skill_years([CandidateSkill('go', -3)]), {'go': 0})


class TestBuildMatchInput(unittest.TestCase):

    def test_copies_job_and_candidate_fields(self):
        job = make_job("job-1", skills=[('python', True, 3)], is_remote=True)
        candidate = make_candidate("cand-1", skills={'python': 5}, remote_preference='remote_only')

        match_input = build_match_input(job, candidate)

        self.assertEqual(match_input.job_skills, job.skills)
        self.assertTrue(match_input.job_is_remote)
        self.assertEqual(match_input.candidate_skills, {'python': 5})
        self.assertEqual(match_input.candidate_remote_preference, 'remote_only')
        self.assertEqual(match_input.candidate_years, 4)


class TestMatchScorer(unittest.TestCase):

    def setUp(self):
        self.scorer = MatchScorer(MatchingConfig())

    def test_ideal_pair(self):
        result = self.scorer.score(make_job(), make_candidate())
        # education placeholder 0.8 is the only imperfect factor
        self.assertEqual(result.score, 99)

    def test_simplified_uses_stand_in_factors(self):
        job = make_job(skills=[('python', True, 3)])
        candidate = make_candidate(skills={'python': 1}, location_city="Boston", location_state="MA")

        result = self.scorer.score_simplified(job, candidate)

        self.assertEqual(result.factors.skills, 0.2)
        self.assertEqual(result.factors.location, 0.8)
        self.assertEqual(result.factors.availability, 1.0)
        # 0.35*0.2 + 0.2*0.8 + 0.15*0.8 + 0.15*0.8 + 0.1 + 0.05*0.8 = 0.61
        self.assertEqual(result.score, 61)


class TestMapInOrder(unittest.TestCase):

    def test_sequential(self):
        self.assertEqual(map_in_order(lambda x: x * 2, [3, 1, 2]), [6, 2, 4])

    def test_thread_pool_keeps_input_order(self):
        def work(x):
            return x * x

        items = list(range(50))
        self.assertEqual(map_in_order(work, items, max_workers=4), [x * x for x in items])

    def test_exceptions_propagate(self):
        def fail(x):
            raise ValueError(x)

        with self.assertRaises(ValueError):
            map_in_order(fail, [1, 2, 3], max_workers=2)

    def test_empty(self):
        self.assertEqual(map_in_order(str, [], max_workers=4), [])
