"""Current user use case"""

from dataclasses import dataclass
from typing import Optional

from ...core.errors import UserNotFoundError
from ...domain.entities.profile import Profile
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork


@dataclass
class CurrentUserProfile:
    user: User
    profile: Optional[Profile]


class GetCurrentUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> CurrentUserProfile:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise UserNotFoundError("User not found")
            profile = await self.unit_of_work.profiles.get_by_user_id(user_id)
        return CurrentUserProfile(user=user, profile=profile)
