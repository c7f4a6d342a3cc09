"""Repository for user data access operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User entity operations."""

    def __init__(self, db_session: AsyncSession):
        """Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self.db_session = db_session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance or None if not found
        """
        stmt = select(User).where(User.id == user_id)
        result = await self.db_session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, user_data: UserCreate) -> User:
        """Create a new user.

        Args:
            user_data: User creation data

        Returns:
            Created User instance
        """
        user = User(
            full_name=user_data.full_name,
            email=user_data.email,
            company=user_data.company,
            position=user_data.position,
            phone=user_data.phone,
            employee_count=user_data.employee_count.value,
        )

        self.db_session.add(user)
        await self.db_session.flush()  # Get the ID without committing

        logger.info(f"Created user: {user.id} ({user.email})")
        return user
