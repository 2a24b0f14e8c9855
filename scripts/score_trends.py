"""Offline trend scoring script.

Scores every trend in a YAML input file for every organization in it and
prints a per-organization summary. Records can be written out as JSON.
"""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from org_relevance.adapters.yaml_input_loader import load_scoring_input
from org_relevance.config.logging_config import setup_logging
from org_relevance.config.settings import get_settings
from org_relevance.domain.exceptions import OrgRelevanceError
from org_relevance.domain.models import TrendScoringResult
from org_relevance.services.topic_catalog import with_default_topics
from org_relevance.use_cases.score_trends import score_trends_use_case


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score trends for organizations from a YAML input file"
    )
    parser.add_argument("input", type=Path, help="YAML file with organizations and trends")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write kept score records to this JSON file",
    )
    parser.add_argument(
        "--seed-defaults",
        action="store_true",
        help="Give organizations without topics the defaults for their org type",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines instead of console output",
    )
    return parser.parse_args(argv)


def print_summary(result: TrendScoringResult) -> None:
    print(
        f"Scored {result.trends_scored} trends for "
        f"{result.organizations_processed} organizations "
        f"({result.skipped_duplicates} duplicate titles skipped)"
    )
    print(f"Records kept: {len(result.scores)}")
    print(f"High priority: {result.high_priority_count}")
    print(f"Alert eligible: {result.alert_eligible_count}")
    print("=" * 60)

    for record in sorted(
        result.scores,
        key=lambda r: (r.organization_id, -r.relevance_score, r.trend_key),
    ):
        flag = "BLOCKED" if record.is_blocked else record.priority_bucket.value
        print(
            f"[{record.organization_id}] {record.relevance_score:>3} {flag:<7} "
            f"{record.trend_key}"
        )
        for reason in record.reasons:
            print(f"      - {reason}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run trend scoring from the command line."""
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level, json_logs=args.json_logs or settings.json_logs
    )

    try:
        organizations, trends = load_scoring_input(args.input)
        if args.seed_defaults:
            organizations = [with_default_topics(org) for org in organizations]
        result = score_trends_use_case(organizations, trends, settings)
    except OrgRelevanceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(result)

    if args.output:
        payload = [record.model_dump(mode="json") for record in result.scores]
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"\nWrote {len(payload)} records to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
