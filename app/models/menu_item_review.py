from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text

from app.db.base import Base


class MenuItemReview(Base):
    __tablename__ = "menu_item_review"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    # Opaque reference to a dining commons menu item; not a foreign key
    item_id = Column(BigInteger, nullable=True, index=True)
    reviewer_email = Column(String, nullable=True)
    stars = Column(Integer, nullable=True)
    comments = Column(Text, nullable=True)
    date_reviewed = Column(DateTime, nullable=True)
