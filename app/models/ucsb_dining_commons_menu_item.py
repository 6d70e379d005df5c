from sqlalchemy import BigInteger, Column, Integer, String

from app.db.base import Base


class UCSBDiningCommonsMenuItem(Base):
    __tablename__ = "ucsb_dining_commons_menu_item"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    dining_commons_code = Column(String, nullable=True)  # e.g. "ortega", "de-la-guerra"
    name = Column(String, nullable=True)
    station = Column(String, nullable=True)
