import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from intakepro.config import load_settings, setup_logging
from intakepro.engine.completion import (
    completion,
    completion_for_all_viewpoints,
    completion_status,
)
from intakepro.engine.visibility import visible_questions
from intakepro.models.question import Domain, Viewpoint
from intakepro.registries.catalog import get_registry
from intakepro.rules.recommendations import evaluate_recommendations
from intakepro.storage.intake_store import JsonFileIntakeStore, submit_intake

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="""
IntakePro - Case intake questionnaire engine

Resolves visible intake questions, evaluates rights recommendations and
scores intake completion for case-progress dashboards.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    visible = commands.add_parser('visible', help='List visible questions for an answer set')
    visible.add_argument(
        '--domain',
        choices=[d.value for d in Domain],
        required=True,
        help='Questionnaire to resolve'
    )
    visible.add_argument(
        '--answers',
        type=str,
        help='JSON file with the current answers (default: no answers)'
    )

    recommend = commands.add_parser('recommend', help='Evaluate rights recommendations')
    recommend.add_argument(
        '--answers',
        type=str,
        required=True,
        help='JSON file with rights answers'
    )

    score = commands.add_parser('completion', help='Score intake completion for a case record')
    score.add_argument(
        '--record',
        type=str,
        required=True,
        help='JSON file with the merged case record'
    )
    view_group = score.add_mutually_exclusive_group()
    view_group.add_argument(
        '--viewpoint',
        choices=[v.value for v in Viewpoint],
        default=Viewpoint.GENERAL.value,
        help='Viewpoint to score (default: general)'
    )
    view_group.add_argument(
        '--all',
        action='store_true',
        help='Score every viewpoint'
    )

    submit = commands.add_parser('submit', help='Store a completed intake')
    submit.add_argument('--case-id', type=str, required=True, help='Case identifier')
    submit.add_argument(
        '--domain',
        choices=[d.value for d in Domain],
        required=True,
        help='Questionnaire being submitted'
    )
    submit.add_argument('--answers', type=str, required=True, help='JSON file with the answers')
    submit.add_argument(
        '--data-dir',
        type=str,
        default=None,
        help='Directory for stored intakes (default: INTAKEPRO_DATA_DIR or data/intakes)'
    )

    return parser


def load_json_file(path: Optional[str]) -> Dict[str, Any]:
    """Read a JSON object from disk; a missing path means an empty object"""
    if not path:
        return {}
    with open(Path(path), 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_visible(args) -> List[str]:
    registry = get_registry(args.domain)
    answers = load_json_file(args.answers)
    fields = [q.field_name for q in visible_questions(registry, answers)]
    logger.info(f"{len(fields)} of {len(registry)} {args.domain} questions visible")
    print_json(fields)
    return fields


def run_recommend(args) -> None:
    recommendations = evaluate_recommendations(load_json_file(args.answers))
    logger.info(f"{len(recommendations)} recommendations")
    print_json([r.model_dump() for r in recommendations])


def run_completion(args, language: str) -> None:
    record = load_json_file(args.record)
    if args.all:
        results = completion_for_all_viewpoints(record)
    else:
        viewpoint = Viewpoint(args.viewpoint)
        results = {viewpoint: completion(record, viewpoint)}

    output = {}
    for viewpoint, result in results.items():
        data = result.model_dump()
        data["status"] = completion_status(result.overall_percentage, language)
        output[viewpoint.value] = data
    print_json(output)


def run_submit(args, data_dir: str) -> None:
    store = JsonFileIntakeStore(args.data_dir or data_dir)
    document = submit_intake(store, args.case_id, args.domain, load_json_file(args.answers))
    print_json(document.model_dump(mode="json"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = setup_argument_parser()
    args = parser.parse_args(argv)
    settings = load_settings()

    setup_logging(debug=args.debug, level=settings.log_level)

    try:
        if args.command == 'visible':
            run_visible(args)
        elif args.command == 'recommend':
            run_recommend(args)
        elif args.command == 'completion':
            run_completion(args, settings.language)
        elif args.command == 'submit':
            run_submit(args, settings.data_dir)
    except Exception as e:
        logger.error(f"Error running {args.command}: {str(e)}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
