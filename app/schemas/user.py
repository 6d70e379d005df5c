from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MeRead(BaseModel):
    """Authenticated caller as seen by GET /me."""
    id: int
    email: str | None = None
    external_auth_provider: str | None = None
    admin: bool
    roles: list[str]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
