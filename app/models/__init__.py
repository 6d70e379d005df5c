from app.models.user import User
from app.models.recommendation import Recommendation
from app.models.menu_item_review import MenuItemReview
from app.models.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItem

__all__ = [
    "User",
    "Recommendation",
    "MenuItemReview",
    "UCSBDiningCommonsMenuItem",
]
