from app.repositories.base import CrudRepository
from app.repositories.recommendation import RecommendationRepository, get_recommendation_repository
from app.repositories.menu_item_review import MenuItemReviewRepository, get_menu_item_review_repository
from app.repositories.ucsb_dining_commons_menu_item import (
    UCSBDiningCommonsMenuItemRepository,
    get_ucsb_dining_commons_menu_item_repository,
)

__all__ = [
    "CrudRepository",
    "RecommendationRepository",
    "get_recommendation_repository",
    "MenuItemReviewRepository",
    "get_menu_item_review_repository",
    "UCSBDiningCommonsMenuItemRepository",
    "get_ucsb_dining_commons_menu_item_repository",
]
