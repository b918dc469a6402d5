"""Unit tests for HybridRecommendationService."""
from unittest.mock import Mock

import pytest

from movie_recommendation_engine.models.movie import Movie
from movie_recommendation_engine.models.recommendation import RecommendationResult
from movie_recommendation_engine.repos.catalog_repository import MovieCatalog
from movie_recommendation_engine.repos.rating_repository import RatingSnapshot
from movie_recommendation_engine.services.hybrid_service import HYBRID_REASON, HybridRecommendationService


@pytest.fixture
def movies():
    return [Movie(id=i, title=f'Movie {i}', genres=('Drama',)) for i in range(1, 5)]


def _strategy(results):
    strategy = Mock()
    strategy.recommend.return_value = results
    return strategy


def _hybrid(movies, user_results, item_results, content_results, **kwargs):
    return HybridRecommendationService(
        MovieCatalog(movies),
        RatingSnapshot(),
        user_based=_strategy(user_results),
        item_based=_strategy(item_results),
        content_based=_strategy(content_results),
        **kwargs
    )


class TestHybridServiceInit:
    """Tests for HybridRecommendationService initialization."""

    def test_init_with_default_values(self, movies):
        """Test default weights and candidate limit."""
        service = HybridRecommendationService(MovieCatalog(movies), RatingSnapshot())

        assert service.user_weight == 0.4
        assert service.item_weight == 0.4
        assert service.content_weight == 0.2
        assert service.candidate_limit == 5

    def test_init_from_config(self, movies, monkeypatch):
        """Test weights read from the environment."""
        monkeypatch.setenv('HYBRID_USER_WEIGHT', '0.5')
        monkeypatch.setenv('HYBRID_CANDIDATE_LIMIT', '3')

        service = HybridRecommendationService(MovieCatalog(movies), RatingSnapshot())

        assert service.user_weight == pytest.approx(0.5)
        assert service.candidate_limit == 3

    def test_negative_candidate_limit_in_config(self, movies, monkeypatch):
        """Test that a negative configured limit does not trim the merged list."""
        monkeypatch.setenv('HYBRID_CANDIDATE_LIMIT', '-1')

        service = HybridRecommendationService(MovieCatalog(movies), RatingSnapshot())

        assert service.candidate_limit == 5

    def test_invalid_candidate_limit_argument(self, movies):
        with pytest.raises(ValueError):
            HybridRecommendationService(MovieCatalog(movies), RatingSnapshot(), candidate_limit=0)

    def test_strategies_share_similarity_computer(self, movies):
        service = HybridRecommendationService(MovieCatalog(movies), RatingSnapshot())

        assert service.item_based.similarity_computer is service.user_based.similarity_computer


class TestHybridRecommend:
    """Tests for recommend method."""

    def test_weighted_sum_for_movie_in_all_lists(self, movies):
        """Test 0.4 * user + 0.4 * item + 0.2 * content."""
        # Arrange
        movie = movies[0]
        service = _hybrid(
            movies,
            [RecommendationResult(movie, 3.0, 'user')],
            [RecommendationResult(movie, 4.0, 'item')],
            [RecommendationResult(movie, 5.0, 'content')],
        )

        # Act
        results = service.recommend(1)

        # Assert
        assert len(results) == 1
        assert results[0].movie is movie
        assert results[0].score == pytest.approx(0.4 * 3.0 + 0.4 * 4.0 + 0.2 * 5.0)
        assert results[0].reason == HYBRID_REASON

    def test_partial_overlap_and_ordering(self, movies):
        """Test merging of movies found by only some strategies."""
        # Arrange
        m1, m2, m3, _ = movies
        service = _hybrid(
            movies,
            [RecommendationResult(m1, 5.0, 'user')],
            [RecommendationResult(m2, 4.0, 'item'), RecommendationResult(m1, 1.0, 'item')],
            [RecommendationResult(m3, 10.0, 'content')],
        )

        # Act
        results = service.recommend(1)

        # Assert
        assert [r.movie.id for r in results] == [1, 3, 2]
        assert [r.score for r in results] == pytest.approx([2.4, 2.0, 1.6])
        assert {r.reason for r in results} == {HYBRID_REASON}

    def test_sub_limit_independent_of_limit(self, movies):
        """Test that each strategy is asked for the candidate limit, not the caller's limit."""
        # Arrange
        service = _hybrid(movies, [], [], [])

        # Act
        service.recommend(7, limit=2)

        # Assert
        service.user_based.recommend.assert_called_once_with(7, 5)
        service.item_based.recommend.assert_called_once_with(7, 5)
        service.content_based.recommend.assert_called_once_with(7, 5)

    def test_limit(self, movies):
        results_in = [RecommendationResult(m, float(m.id), 'user') for m in movies]
        service = _hybrid(movies, results_in, [], [])

        results = service.recommend(1, limit=2)

        assert [r.movie.id for r in results] == [4, 3]

    def test_source_results_not_modified(self, movies):
        """Test that strategy results keep their own score and reason."""
        movie = movies[0]
        user_result = RecommendationResult(movie, 3.0, 'user')
        item_result = RecommendationResult(movie, 4.0, 'item')
        service = _hybrid(movies, [user_result], [item_result], [])

        service.recommend(1)

        assert (user_result.score, user_result.reason) == (3.0, 'user')
        assert (item_result.score, item_result.reason) == (4.0, 'item')

    def test_no_candidates(self, movies):
        assert _hybrid(movies, [], [], []).recommend(1) == []

    def test_with_real_strategies(self, sample_catalog, sample_snapshot):
        """Test the merge against the three real strategies on sample data."""
        # Arrange
        service = HybridRecommendationService(sample_catalog, sample_snapshot)
        weights = {}
        for strategy, weight in (
                (service.user_based, 0.4),
                (service.item_based, 0.4),
                (service.content_based, 0.2)
        ):
            for result in strategy.recommend(1, 5):
                weights[result.movie.id] = weights.get(result.movie.id, 0.0) + result.score * weight

        # Act
        results = service.recommend(1)

        # Assert
        assert [r.movie.id for r in results] == [5, 3, 6]
        for result in results:
            assert result.score == pytest.approx(weights[result.movie.id])
