"""Profile repository implementation"""

from typing import Optional

from sqlalchemy.orm import Session

from ...domain.repositories.profile_repository import IProfileRepository
from ...domain.entities.profile import Profile, prepare_profile_for_save
from ...domain.value_objects.entity_ids import ProfileId, UserId
from ..orm.profile_model import ProfileModel

_PLAIN_FIELDS = (
    'first_name',
    'last_name',
    'display_name',
    'code_name',
    'bio',
    'date_of_birth',
    'gender',
    'looking_for',
    'department',
    'year_of_study',
    'height',
    'relationship_status',
    'show_age',
    'show_distance',
    'is_anonymous',
    'anonymous_until',
    'profile_completion',
    'created_at',
    'updated_at',
)

_LIST_FIELDS = ('interests', 'hobbies', 'languages')


class ProfileRepositoryImpl(IProfileRepository):
    """Repository implementation for Profile; recomputes derived fields on every write"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        model = self.session.query(ProfileModel).filter(ProfileModel.user_id == user_id.value).first()
        return self._map_to_entity(model) if model else None

    async def add(self, profile: Profile) -> Profile:
        prepare_profile_for_save(profile)
        model = ProfileModel(id=profile.id.value, user_id=profile.user_id.value)
        self._update_model_from_entity(model, profile)
        self.session.add(model)
        self.session.flush()
        return profile

    async def update(self, profile: Profile) -> Profile:
        existing = self.session.query(ProfileModel).filter(ProfileModel.id == profile.id.value).first()
        if existing:
            prepare_profile_for_save(profile)
            self._update_model_from_entity(existing, profile)
            self.session.flush()
        return profile

    def _update_model_from_entity(self, model: ProfileModel, profile: Profile) -> None:
        for name in _PLAIN_FIELDS:
            setattr(model, name, getattr(profile, name))
        for name in _LIST_FIELDS:
            setattr(model, name, list(getattr(profile, name)))

    def _map_to_entity(self, model: ProfileModel) -> Profile:
        values = {name: getattr(model, name) for name in _PLAIN_FIELDS}
        for name in _LIST_FIELDS:
            values[name] = list(getattr(model, name) or [])
        return Profile(
            id=ProfileId(model.id),
            user_id=UserId(model.user_id),
            **values
        )
