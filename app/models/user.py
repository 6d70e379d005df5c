from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String, func

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    # External auth: 1:1 with Supabase auth.users (JWT sub)
    external_auth_uid = Column(String(36), unique=True, nullable=False, index=True)
    external_auth_provider = Column(String, nullable=True)  # e.g. "google", "email"
    email = Column(String, nullable=True, index=True)
    admin = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
