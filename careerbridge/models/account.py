from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from careerbridge.database import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(24), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String(16), nullable=False, default=ROLE_USER)  # admin | user
    created_at = Column(DateTime(timezone=True), server_default=func.now())
