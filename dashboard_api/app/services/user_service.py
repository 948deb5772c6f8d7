"""
Service for dashboard users.

The API has no authentication, so users are only ever looked up;
``create_user`` exists for bootstrap code and tests.
"""

import logging
from typing import Optional

from dashboard_api.app.core.store import KeyedCollection
from dashboard_api.app.schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, collection: KeyedCollection[UserRead]) -> None:
        self.collection = collection

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return self.collection.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRead]:
        wanted = email.strip().lower()
        return self.collection.find(lambda user: user.email.lower() == wanted)

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create a user.

        Raises
        ------
        ValueError
            If another user already has the same email address.
        """
        if await self.get_user_by_email(data.email):
            raise ValueError(f"User with email {data.email} already exists")
        user = self.collection.create(data.model_dump())
        logger.info("Created user %s", user.id)
        return user
