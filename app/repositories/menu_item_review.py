from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.menu_item_review import MenuItemReview
from app.repositories.base import CrudRepository


class MenuItemReviewRepository(CrudRepository[MenuItemReview]):
    model = MenuItemReview


def get_menu_item_review_repository(db: Session = Depends(get_db)) -> MenuItemReviewRepository:
    return MenuItemReviewRepository(db)
