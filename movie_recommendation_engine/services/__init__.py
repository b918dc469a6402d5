"""Service classes"""

from .collaborative_service import ItemBasedRecommendationService, UserBasedRecommendationService
from .content_based_service import ContentBasedRecommendationService
from .data_loader_service import CatalogDataLoader
from .hybrid_service import HybridRecommendationService
from .recommendation_engine import RecommendationEngine

__all__ = [
    "CatalogDataLoader",
    "ContentBasedRecommendationService",
    "HybridRecommendationService",
    "ItemBasedRecommendationService",
    "RecommendationEngine",
    "UserBasedRecommendationService",
]
