from typing import Optional

from pydantic import BaseModel, ConfigDict, NaiveDatetime
from pydantic.alias_generators import to_camel

from app.schemas.common import BigInt, Int32


class MenuItemReviewBase(BaseModel):
    item_id: Optional[BigInt] = None
    reviewer_email: Optional[str] = None
    stars: Optional[Int32] = None
    comments: Optional[str] = None
    date_reviewed: Optional[NaiveDatetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MenuItemReviewUpdate(MenuItemReviewBase):
    id: Optional[int] = None


class MenuItemReviewRead(MenuItemReviewBase):
    id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
