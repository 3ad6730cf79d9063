"""
User Router - registration and profile endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from crud.user import UserRepository
from models.user import RegisterRequest, UserResponse
from services.user_service import UserService

# Create router
user_router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_user_service(user_repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(user_repo)


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user_profile(user_id: str, user_service: UserService = Depends(get_user_service)):
    """Fetch a user's public profile by ID"""
    return await user_service.get_user(user_id)


@user_router.post("/register", response_model=UserResponse)
async def register_user(request: RegisterRequest, user_service: UserService = Depends(get_user_service)):
    """Create a new user account"""
    return await user_service.register(request)
