"""
Generate movie recommendations for a user from catalog and rating files.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.services import CatalogDataLoader, RecommendationEngine

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

STRATEGIES = ["user", "item", "content", "hybrid", "all"]


def build_engine(movies_path: Path, ratings_path: Path) -> RecommendationEngine:
    """
    Load input files and build the engine.

    Args:
        movies_path: Movie catalog file (CSV or JSON)
        ratings_path: Ratings file (CSV or JSON)

    Returns:
        Engine over the loaded snapshot
    """
    loader = CatalogDataLoader()
    movies = loader.load_movies(movies_path)
    ratings = loader.load_ratings(ratings_path)
    return RecommendationEngine(movies, ratings)


def run_strategy(
    engine: RecommendationEngine, strategy: str, user_id: int, limit: int
) -> Dict[str, List[RecommendationResult]]:
    """
    Run one strategy, or all of them.

    Returns:
        Dict keyed by strategy name
    """
    if strategy == "all":
        return engine.get_all_recommendations(user_id, limit)

    methods = {
        "user": ("user_based", engine.get_user_based_recommendations),
        "item": ("item_based", engine.get_item_based_recommendations),
        "content": ("content_based", engine.get_content_based_recommendations),
        "hybrid": ("hybrid", engine.get_hybrid_recommendations),
    }
    name, method = methods[strategy]
    return {name: method(user_id, limit)}


def log_recommendations(results: Dict[str, List[RecommendationResult]]) -> None:
    """Log each list as a small table."""
    for name, recommendations in results.items():
        logger.info("=" * 70)
        logger.info(f"{name.upper()} ({len(recommendations)})")
        logger.info("=" * 70)

        if not recommendations:
            logger.info("  (no recommendations)")
            continue

        max_score = recommendations[0].score
        for rank, rec in enumerate(recommendations, start=1):
            logger.info(
                f"  {rank:2d}. {rec.movie.title:<40s} {rec.score:8.3f} "
                f"({rec.display_score(max_score):4.0%})  {rec.reason}"
            )


def save_recommendations(results: Dict[str, List[RecommendationResult]], output_path: Path) -> None:
    """Write recommendations to a JSON file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {name: [rec.to_dict() for rec in recs] for name, recs in results.items()}
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)
    logger.info(f"✓ Saved recommendations to {output_path}")


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Generate movie recommendations for a user")
    parser.add_argument("--movies", type=str, required=True, help="Movie catalog file (CSV or JSON)")
    parser.add_argument("--ratings", type=str, required=True, help="Ratings file (CSV or JSON)")
    parser.add_argument("--user-id", type=int, required=True, help="User to recommend for")
    parser.add_argument(
        "--limit", type=int, default=10, help="Recommendations per strategy (default: 10)"
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default="hybrid",
        help="Strategy to run (default: hybrid)",
    )
    parser.add_argument("--output", type=str, default=None, help="Optional JSON output file")

    args = parser.parse_args()

    if args.limit < 1:
        logger.error("Error: --limit must be at least 1")
        sys.exit(1)

    try:
        engine = build_engine(Path(args.movies), Path(args.ratings))
        results = run_strategy(engine, args.strategy, args.user_id, args.limit)
        log_recommendations(results)

        if args.output:
            save_recommendations(results, Path(args.output))

        return results

    except Exception as e:
        logger.error(f"Recommendation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
