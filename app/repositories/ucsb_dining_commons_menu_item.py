from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItem
from app.repositories.base import CrudRepository


class UCSBDiningCommonsMenuItemRepository(CrudRepository[UCSBDiningCommonsMenuItem]):
    model = UCSBDiningCommonsMenuItem


def get_ucsb_dining_commons_menu_item_repository(
    db: Session = Depends(get_db),
) -> UCSBDiningCommonsMenuItemRepository:
    return UCSBDiningCommonsMenuItemRepository(db)
