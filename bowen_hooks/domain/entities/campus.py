"""Campus hot zones and the last known location of each user"""

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId
from ..enums import LocationType

LOCATION_RECENT_WINDOW = timedelta(minutes=10)
HOT_ZONE_MEDIUM_MAX_USERS = 5


@dataclass
class HotZone:
    name: str
    latitude: float
    longitude: float
    location_type: LocationType = LocationType.OTHER
    radius_meters: int = 50
    current_user_count: int = 0
    peak_time_start: Optional[time] = None
    peak_time_end: Optional[time] = None
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)

    def is_peak_time(self, now: Optional[datetime] = None) -> bool:
        if not self.peak_time_start or not self.peak_time_end:
            return False
        current = (now or datetime.now()).time().replace(microsecond=0)
        return self.peak_time_start <= current <= self.peak_time_end

    def update_user_count(self, count: int) -> None:
        self.current_user_count = count

    def popularity_level(self) -> str:
        if self.current_user_count == 0:
            return "low"
        if self.current_user_count <= HOT_ZONE_MEDIUM_MAX_USERS:
            return "medium"
        return "high"


@dataclass
class Location:
    user_id: UserId
    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    is_ghost_mode: bool = False
    last_updated: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def update(self, latitude: float, longitude: float, accuracy: Optional[float] = None,
               now: Optional[datetime] = None) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.accuracy = accuracy
        self.last_updated = now or datetime.utcnow()

    def enable_ghost_mode(self) -> None:
        self.is_ghost_mode = True

    def disable_ghost_mode(self) -> None:
        self.is_ghost_mode = False

    def is_recent(self, max_age: timedelta = LOCATION_RECENT_WINDOW, now: Optional[datetime] = None) -> bool:
        if not self.last_updated:
            return False
        now = now or datetime.utcnow()
        return now - self.last_updated <= max_age
