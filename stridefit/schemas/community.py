import enum
from pydantic import BaseModel, ConfigDict


class EventType(str, enum.Enum):
    CLUB_RUN = "Club Run"
    TRAIL_RUN = "Trail Run"
    LONG_RUN = "Long Run"
    SPEED_WORK = "Speed Work"
    SOCIAL_RUN = "Social Run"


class TrailStatus(str, enum.Enum):
    OPEN = "Open"
    MUDDY = "Muddy"
    CLOSED = "Closed"


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    day: str
    time: str
    location: str
    type: EventType


class Trail(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str  # 'Paved', 'Trails', 'Mixed'
    distance: str
    status: TrailStatus = TrailStatus.OPEN
