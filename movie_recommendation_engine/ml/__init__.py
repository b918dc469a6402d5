"""Similarity computation"""

from movie_recommendation_engine.ml.similarity_computer import SimilarityComputer, cosine_similarity

__all__ = ["SimilarityComputer", "cosine_similarity"]
