import uuid
from datetime import datetime

from sqlalchemy import Column, String, DateTime
from database import Base


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """
    Registered user account.
    Email uniqueness is enforced by the table itself, not only by the service.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    email = Column(String(320), unique=True, nullable=False, index=True)
    # Stored as submitted, no hashing is applied
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"
