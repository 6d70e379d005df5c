from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.recommendation import Recommendation
from app.repositories.base import CrudRepository


class RecommendationRepository(CrudRepository[Recommendation]):
    model = Recommendation


def get_recommendation_repository(db: Session = Depends(get_db)) -> RecommendationRepository:
    return RecommendationRepository(db)
