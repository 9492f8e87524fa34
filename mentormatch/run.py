"""
Batch runner for mentor matching.

Usage:
    python -m mentormatch.run --config configs/config.yaml

Steps:
1. Load and validate configuration
2. Load mentor and mentee CSVs into the in-memory store
3. Rank mentors for every mentee
4. Write the match table and (optionally) a match report
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Any, List, Optional

import pandas as pd

from .configs import load_config, validate_config, default_config, get_config_value
from .data_loading import load_mentors, load_mentees, RecordValidationError
from .evaluation import create_match_report
from .ranking import MentorRanker, MatchResult
from .scoring import MatchWeights
from .storage import MemStorage

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def rankings_to_frame(rankings: Dict[int, List[MatchResult]]) -> pd.DataFrame:
    """
    Flatten rankings into one row per (mentee, rank).

    Columns: mentee_id, rank (1-based), mentor_id, last_work_role, score, percentage
    """
    rows = []
    for mentee_id, results in rankings.items():
        for position, result in enumerate(results, start=1):
            rows.append({
                "mentee_id": mentee_id,
                "rank": position,
                "mentor_id": result.mentor.id,
                "last_work_role": result.mentor.last_work_role,
                "score": round(result.score, 6),
                "percentage": result.percentage,
            })
    columns = ["mentee_id", "rank", "mentor_id", "last_work_role", "score", "percentage"]
    return pd.DataFrame(rows, columns=columns)


def write_matches(df: pd.DataFrame, output_path: str) -> None:
    """Write the match table as CSV, or JSON records for a .json path."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".json":
        df.to_json(path, orient="records", indent=2)
    else:
        df.to_csv(path, index=False)
    logger.info(f"Wrote {len(df)} matches to {path}")


def run_matching(
    config: Dict[str, Any],
    mentors_path: Optional[str] = None,
    mentees_path: Optional[str] = None,
    output_path: Optional[str] = None,
    report_path: Optional[str] = None,
    storage: Optional[MemStorage] = None
) -> Dict[str, Any]:
    """
    Run the full matching flow.

    Args:
        config: Configuration dictionary
        mentors_path: Mentor CSV (overrides data.mentors_path)
        mentees_path: Mentee CSV (overrides data.mentees_path)
        output_path: Match table destination (overrides output.path), None to skip
        report_path: Match report JSON destination (overrides output.report_path)
        storage: Store to load records into; a new one is created if omitted

    Returns:
        Dictionary with rankings, the match table, the report and a success flag
    """
    issues = validate_config(config)
    for issue in issues:
        logger.warning(f"Config issue: {issue}")

    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    mentors_path = mentors_path or get_config_value(config, "data.mentors_path")
    mentees_path = mentees_path or get_config_value(config, "data.mentees_path")
    output_path = output_path or get_config_value(config, "output.path")
    report_path = report_path or get_config_value(config, "output.report_path")

    storage = storage or MemStorage()

    logger.info("=" * 60)
    logger.info("STEP 1: Loading Records")
    logger.info("=" * 60)
    storage.replace_mentors(load_mentors(mentors_path))
    storage.replace_mentees(load_mentees(mentees_path))
    mentors, mentees = storage.snapshot()

    logger.info("=" * 60)
    logger.info("STEP 2: Ranking Mentors")
    logger.info("=" * 60)
    weights = MatchWeights.from_config(config)
    ranker = MentorRanker.from_config(config)
    logger.info(f"Weights: {weights.to_dict()}")
    rankings = ranker.match_all(mentees, mentors, weights)

    logger.info("=" * 60)
    logger.info("STEP 3: Writing Results")
    logger.info("=" * 60)
    matches = rankings_to_frame(rankings)
    if output_path:
        write_matches(matches, output_path)

    report = create_match_report(rankings, mentors)
    logger.info("\n" + report.summary())
    if report_path:
        Path(report_path).parent.mkdir(parents=True, exist_ok=True)
        report.save(report_path)

    return {
        "success": True,
        "rankings": rankings,
        "matches": matches,
        "report": report,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the matching run."""
    parser = argparse.ArgumentParser(
        description="Rank mentors for every mentee from CSV uploads"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (built-in defaults if omitted)"
    )
    parser.add_argument("--mentors", type=str, default=None, help="Mentor CSV path")
    parser.add_argument("--mentees", type=str, default=None, help="Mentee CSV path")
    parser.add_argument("--output", type=str, default=None, help="Match table path (.csv or .json)")
    parser.add_argument("--report", type=str, default=None, help="Match report JSON path")
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of mentors kept per mentee (overrides config)"
    )
    parser.add_argument(
        "--variant",
        choices=["interests", "experience"],
        default=None,
        help="Attribute set to score (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else default_config()
        if args.top_n is not None:
            config.setdefault("ranking", {})["top_n"] = args.top_n
        if args.variant is not None:
            config.setdefault("scoring", {})["variant"] = args.variant

        result = run_matching(
            config,
            mentors_path=args.mentors,
            mentees_path=args.mentees,
            output_path=args.output,
            report_path=args.report,
        )
        if result["success"]:
            logger.info("Matching completed successfully!")
            return 0
        logger.error("Matching failed!")
        return 1
    except RecordValidationError as e:
        for issue in e.issues:
            logger.error(f"Validation error: {issue}")
        return 1
    except Exception as e:
        logger.exception(f"Matching failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
