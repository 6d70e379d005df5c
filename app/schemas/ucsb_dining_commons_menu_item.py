from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UCSBDiningCommonsMenuItemBase(BaseModel):
    dining_commons_code: Optional[str] = None
    name: Optional[str] = None
    station: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UCSBDiningCommonsMenuItemRead(UCSBDiningCommonsMenuItemBase):
    id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
