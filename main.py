import sys
import json
import logging
import argparse

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import load_config
from core.exceptions import NotFoundError, InvalidInputError
from core.matching import MatchingService
from database.database import init_db
from database.uow import matching_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TalentMatch matching driver")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest='command', required=True)

    score = subparsers.add_parser('score-application', help='Compute and store the match score of an application')
    score.add_argument('application_id')
    score.add_argument('--explain', action='store_true',
                       help='Print the factor breakdown without storing the score')

    rank = subparsers.add_parser('rank-candidates', help='Rank eligible candidates for a job')
    rank.add_argument('job_id')
    rank.add_argument('--limit', type=int, default=100,
                      help='Maximum candidates to print (default: 100)')

    recommend = subparsers.add_parser('recommend-jobs', help='Recommend open jobs for a candidate')
    recommend.add_argument('candidate_id')
    recommend.add_argument('--limit', type=int, default=None,
                           help='Maximum jobs to return (default: from config)')

    subparsers.add_parser('init-db', help='Create the matching tables')
    return parser


def run_command(args, service: MatchingService) -> dict:
    if args.command == 'score-application':
        if args.explain:
            result = service.explain_application_match(args.application_id)
            return {
                'application_id': args.application_id,
                'match_score': result.score,
                'match_factors': result.factors.as_dict(),
            }
        score = service.compute_application_match(args.application_id)
        return {'application_id': args.application_id, 'match_score': score}

    if args.command == 'rank-candidates':
        if args.limit < 1:
            raise InvalidInputError(f"limit must be >= 1, got {args.limit}")
        matches = service.rank_candidates_for_job(args.job_id)
        return {
            'job_id': args.job_id,
            'matches': [m.to_dict() for m in matches[:args.limit]],
            'total': len(matches),
        }

    if args.command == 'recommend-jobs':
        recommendations = service.recommend_jobs_for_candidate(args.candidate_id, args.limit)
        return {
            'recommendations': [r.to_dict() for r in recommendations],
            'total': len(recommendations),
        }

    raise InvalidInputError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    engine = create_engine(config.database.url, pool_pre_ping=True)

    if args.command == 'init-db':
        init_db(bind=engine)
        logger.info("Matching tables created")
        return EXIT_OK

    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        with matching_uow(session_factory) as data_source:
            service = MatchingService(data_source, config.matching)
            output = run_command(args, service)
    except NotFoundError as e:
        logger.error(str(e))
        return EXIT_NOT_FOUND
    except InvalidInputError as e:
        logger.error(str(e))
        return EXIT_INVALID

    print(json.dumps(output, indent=2, default=str))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
