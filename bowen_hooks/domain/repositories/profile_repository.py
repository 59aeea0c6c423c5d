"""Profile repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.profile import Profile
from ..value_objects.entity_ids import UserId


class IProfileRepository(ABC):

    @abstractmethod
    async def get_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        pass

    @abstractmethod
    async def add(self, profile: Profile) -> Profile:
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        pass
