"""Profile entity and profile photos"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, List
from uuid import UUID, uuid4
import random

from ..value_objects.entity_ids import ProfileId, UserId
from ..enums import Gender, LookingFor, RelationshipStatus


CODE_NAME_ADJECTIVES = ["Mysterious", "Silent", "Hidden", "Secret", "Shadow", "Night", "Wandering"]
CODE_NAME_NOUNS = ["Scholar", "Dreamer", "Explorer", "Thinker", "Wanderer", "Ghost", "Owl"]
CODE_NAME_LOCATIONS = ["Library", "Cafeteria", "Campus", "Garden", "Hall", "Lab"]

# Each field counts equally towards profile_completion
COMPLETION_FIELDS = (
    "first_name",
    "bio",
    "date_of_birth",
    "gender",
    "looking_for",
    "department",
    "year_of_study",
    "interests",
    "hobbies",
)


def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years elapsed since ``date_of_birth``"""
    today = today or datetime.utcnow().date()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def generate_code_name(rng: Optional[random.Random] = None) -> str:
    """Random alias shown while a profile is anonymous"""
    rng = rng or random
    adjective = rng.choice(CODE_NAME_ADJECTIVES)
    location = rng.choice(CODE_NAME_LOCATIONS)
    noun = rng.choice(CODE_NAME_NOUNS)
    return f"{adjective} {location} {noun}"


def _is_filled(value) -> bool:
    # An empty list is still a present value; only None and "" are blanks
    return value is not None and value != ""


@dataclass
class Profile:
    id: ProfileId
    user_id: UserId
    first_name: str
    date_of_birth: date
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    code_name: Optional[str] = None
    bio: Optional[str] = None
    gender: Optional[Gender] = None
    looking_for: Optional[LookingFor] = None
    department: Optional[str] = None
    year_of_study: Optional[int] = None
    interests: List[str] = field(default_factory=list)
    hobbies: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    height: Optional[int] = None
    relationship_status: Optional[RelationshipStatus] = None
    show_age: bool = True
    show_distance: bool = True
    is_anonymous: bool = False
    anonymous_until: Optional[datetime] = None
    profile_completion: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        first_name: str,
        date_of_birth: date,
        last_name: Optional[str] = None,
        gender: Optional[Gender] = None,
        department: Optional[str] = None,
        year_of_study: Optional[int] = None,
    ) -> 'Profile':
        return cls(
            id=ProfileId.generate(),
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            gender=gender,
            department=department,
            year_of_study=year_of_study,
        )

    @property
    def age(self) -> Optional[int]:
        if not self.date_of_birth:
            return None
        return calculate_age(self.date_of_birth)

    @property
    def full_name(self) -> str:
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name or ""

    def calculate_profile_completion(self) -> int:
        filled = sum(1 for name in COMPLETION_FIELDS if _is_filled(getattr(self, name)))
        return round(filled / len(COMPLETION_FIELDS) * 100)

    def is_anonymous_active(self, now: Optional[datetime] = None) -> bool:
        """Anonymous mode only holds while ``anonymous_until`` is in the future"""
        if not self.is_anonymous:
            return False
        now = now or datetime.utcnow()
        return self.anonymous_until is not None and self.anonymous_until > now

    def display_info(self, now: Optional[datetime] = None) -> dict:
        if self.is_anonymous_active(now):
            return {
                "display_name": self.code_name or "Anonymous User",
                "bio": "This user prefers to stay anonymous",
                "photos_blurred": True,
            }

        return {
            "display_name": self.display_name or self.first_name,
            "first_name": self.first_name,
            "last_name": self.last_name if self.show_age else None,
            "age": self.age if self.show_age else None,
            "bio": self.bio,
            "photos_blurred": False,
        }


def prepare_profile_for_save(profile: Profile, now: Optional[datetime] = None) -> Profile:
    """Pre-persistence step run by the repository on every create/update"""
    if not profile.code_name:
        profile.code_name = generate_code_name()
    profile.profile_completion = profile.calculate_profile_completion()
    profile.updated_at = now or datetime.utcnow()
    return profile


@dataclass
class Photo:
    user_id: UserId
    url: str
    thumbnail_url: Optional[str] = None
    caption: Optional[str] = None
    is_primary: bool = False
    is_verified: bool = False
    order_index: int = 0
    # 0-100, lowered as a match progresses
    blur_level: int = 0
    id: UUID = field(default_factory=uuid4)

    def blurred_url(self) -> str:
        if self.blur_level > 0:
            return f"{self.url}?blur={self.blur_level}"
        return self.url

    def set_primary(self, user_photos: List['Photo']) -> None:
        """Make this the only primary photo among ``user_photos``"""
        for photo in user_photos:
            photo.is_primary = False
        self.is_primary = True
