from typing import Optional

from pydantic import BaseModel, ConfigDict, NaiveDatetime
from pydantic.alias_generators import to_camel


class RecommendationBase(BaseModel):
    requester_email: Optional[str] = None
    professor_email: Optional[str] = None
    explanation: Optional[str] = None
    date_requested: Optional[NaiveDatetime] = None
    date_needed: Optional[NaiveDatetime] = None
    done: Optional[bool] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class RecommendationUpdate(RecommendationBase):
    """Full replacement record for PUT. Any id in the payload is ignored."""
    id: Optional[int] = None

class RecommendationRead(RecommendationBase):
    id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
