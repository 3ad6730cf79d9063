"""
UserRepository for database operations on User model
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, exists
from database_models import User


class UserRepository:
    """
    Repository class for User database operations.
    Encapsulates all database logic for the User model.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db: AsyncSession instance for database operations
        """
        self.db = db

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User object if found, None otherwise
        """
        result = await self.db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """
        Check whether a user with exactly this email is already stored.

        Args:
            email: Email address, compared as-is

        Returns:
            True if a matching user exists, False otherwise
        """
        result = await self.db.execute(
            select(exists().where(User.email == email))
        )
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """
        Insert a new user or write pending changes of an existing one.

        The session is flushed so the generated ID and timestamps are
        available on return; the commit is left to the request scope.

        Args:
            user: User object, either transient or already attached

        Returns:
            The persisted User object

        Raises:
            IntegrityError: If a storage constraint (e.g. unique email) is violated.
                The session is rolled back before the error propagates.
        """
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise
        await self.db.refresh(user)
        return user
