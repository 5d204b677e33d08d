"""Command line entry point for corpus-wide resemblance comparison."""

import argparse
import logging
import sys
from typing import List, Optional

from resemblance.config.loader import configure_from_cli
from resemblance.config.settings import EvaluationMethod
from resemblance.domain.exceptions import ConfigurationError, CorpusLoadError
from resemblance.runners.profiles import run_profile_comparison
from resemblance.utils.logging import setup_logging
from resemblance.utils.timing import section_timer


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resemblance CLI."""
    parser = argparse.ArgumentParser(
        prog="resemblance",
        description=(
            "Compare every text in a YAML corpus against the others using "
            "shingle resemblance, and report the clusters of close matches."
        ),
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Run a leave-one-out comparison over a corpus")
    run_p.add_argument(
        "corpus",
        help="YAML file mapping profile names to texts.",
    )

    scoring_group = run_p.add_argument_group("Scoring Options")
    scoring_group.add_argument(
        "--n",
        type=int,
        metavar="N",
        help="Shingle length (default: 3).",
    )
    scoring_group.add_argument(
        "--method",
        choices=[m.value for m in EvaluationMethod],
        help="Shingle by character (ngraph, default) or by word (ngram).",
    )
    scoring_group.add_argument(
        "--no-variable-n",
        action="store_true",
        help="Do not lengthen character shingles for long texts.",
    )
    scoring_group.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two texts are both empty after cleaning.",
    )

    cluster_group = run_p.add_argument_group("Clustering Options")
    cluster_group.add_argument(
        "-t",
        "--threshold",
        type=float,
        metavar="R",
        help="Report entries whose cluster centroid exceeds R (default: 0.2).",
    )
    cluster_group.add_argument(
        "-k",
        "--clusters",
        type=int,
        metavar="K",
        help="Number of clusters per profile (default: 5).",
    )

    debug_group = run_p.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    debug_group.add_argument(
        "--log-dir",
        type=str,
        metavar="PATH",
        help="Also write logs to a file in this directory.",
    )
    debug_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the resemblance CLI."""
    args = build_parser().parse_args(argv)
    debug = False

    try:
        settings = configure_from_cli(args)
        debug = settings.debug_mode

        logger, summary_logger = setup_logging(
            log_dir=str(settings.logging.log_dir) if settings.logging.log_dir else None,
            console=settings.logging.console_output,
            level=settings.logging.level.value,
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        with section_timer("profile comparison", logger):
            run = run_profile_comparison(settings)
        for line in run.lines():
            print(line)

        summary_logger.info(
            "Compared %d profiles, %d matches over R=%.3f",
            run.metrics['profiles'], run.metrics['matches'], settings.clustering.r_threshold,
        )
        sys.exit(0)

    except (ConfigurationError, CorpusLoadError) as e:
        logging.error("%s", e.message)
        if getattr(e, "suggestions", None):
            logging.error("Suggestions:")
            for suggestion in e.suggestions:
                logging.error("  - %s", suggestion)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logging.error("Comparison failed: %s", e)
        if debug:
            logging.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
