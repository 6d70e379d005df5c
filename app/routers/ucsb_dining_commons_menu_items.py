from fastapi import APIRouter, Depends, Query

from app.core.auth import require_admin, require_user
from app.core.errors import EntityNotFoundException
from app.models.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItem
from app.repositories.ucsb_dining_commons_menu_item import (
    UCSBDiningCommonsMenuItemRepository,
    get_ucsb_dining_commons_menu_item_repository,
)
from app.schemas.common import BIGINT_MAX, BIGINT_MIN
from app.schemas.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItemRead

router = APIRouter(prefix="/UCSBDiningCommonsMenuItem", tags=["UCSBDiningCommonsMenuItem"])

# Update and delete are not offered for dining commons menu items.


@router.get("/all", response_model=list[UCSBDiningCommonsMenuItemRead], dependencies=[Depends(require_user)])
def list_menu_items(
    repo: UCSBDiningCommonsMenuItemRepository = Depends(get_ucsb_dining_commons_menu_item_repository),
):
    """List all the ~very tasty~ ucsb dining commons menu items."""
    return repo.find_all()


@router.get("", response_model=UCSBDiningCommonsMenuItemRead, dependencies=[Depends(require_user)])
def get_menu_item(
    menu_item_id: int = Query(..., alias="id", ge=BIGINT_MIN, le=BIGINT_MAX),
    repo: UCSBDiningCommonsMenuItemRepository = Depends(get_ucsb_dining_commons_menu_item_repository),
):
    menu_item = repo.find_by_id(menu_item_id)
    if menu_item is None:
        raise EntityNotFoundException(UCSBDiningCommonsMenuItem, menu_item_id)
    return menu_item


@router.post("/post", response_model=UCSBDiningCommonsMenuItemRead, dependencies=[Depends(require_admin)])
def create_menu_item(
    dining_commons_code: str = Query(..., alias="diningCommonsCode"),
    name: str = Query(...),
    station: str = Query(...),
    repo: UCSBDiningCommonsMenuItemRepository = Depends(get_ucsb_dining_commons_menu_item_repository),
):
    """Create a new ucsb dining commons menu item."""
    menu_item = UCSBDiningCommonsMenuItem(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    return repo.save(menu_item)
