from app.schemas.common import GenericMessage
from app.schemas.user import MeRead
from app.schemas.recommendation import RecommendationRead, RecommendationUpdate
from app.schemas.menu_item_review import MenuItemReviewRead, MenuItemReviewUpdate
from app.schemas.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItemRead

__all__ = [
    "GenericMessage",
    "MeRead",
    "RecommendationRead",
    "RecommendationUpdate",
    "MenuItemReviewRead",
    "MenuItemReviewUpdate",
    "UCSBDiningCommonsMenuItemRead",
]
