from sqlalchemy import Column, String

from resumepdf.db.base import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(255), primary_key=True)
    # Salted hash, see resumepdf.core.security
    hashed_password = Column("password", String(255), nullable=False)
