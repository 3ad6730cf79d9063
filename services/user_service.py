"""
User Service - registration and profile lookup
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from crud.user import UserRepository
from database_models import User
from models.user import RegisterRequest, UserResponse

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base class for failures reported to API clients."""

    code = "USER_SERVICE_ERROR"
    message = "User service error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class UserNotFoundError(UserServiceError):
    code = "USER_NOT_FOUND"
    message = "User not found"


class UserAlreadyExistsError(UserServiceError):
    code = "EMAIL_ALREADY_EXISTS"
    message = "Email already exists"


class UserService:
    """
    Service for user accounts.
    Enforces email uniqueness and maps stored users to their public view.
    """

    def __init__(self, user_repo: UserRepository):
        """
        Initialize the user service with a user repository.

        Args:
            user_repo: UserRepository instance for user operations
        """
        self.user_repo = user_repo

    async def get_user(self, user_id: str) -> UserResponse:
        """
        Fetch the public profile of a user.

        Args:
            user_id: ID of the user to look up

        Returns:
            UserResponse for the stored user

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = await self.user_repo.find_by_id(user_id)
        if user is None:
            logger.info("User %s not found", user_id)
            raise UserNotFoundError()
        return UserResponse.model_validate(user)

    async def register(self, request: RegisterRequest) -> UserResponse:
        """
        Create a new user from a validated registration request.

        The existence check is only a fast path: two concurrent registrations
        can both pass it, in which case the unique constraint on email rejects
        the second insert and it is reported the same way.

        Args:
            request: Validated registration payload

        Returns:
            UserResponse for the newly stored user

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        if await self.user_repo.exists_by_email(request.email):
            logger.info("Registration rejected, email already registered: %s", request.email)
            raise UserAlreadyExistsError()

        user = User(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        try:
            saved_user = await self.user_repo.save(user)
        except IntegrityError as e:
            logger.warning("Registration for %s hit a storage constraint: %s", request.email, e.orig)
            raise UserAlreadyExistsError() from e

        logger.info("Registered user %s (%s)", saved_user.id, saved_user.email)
        return UserResponse.model_validate(saved_user)
