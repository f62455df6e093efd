from typing import Optional

from stridefit.schemas.community import Event, EventType, Trail, TrailStatus


EVENTS: tuple[Event, ...] = (
    Event(
        id="evt-tuesday-club",
        title="Tuesday Club Run",
        day="Tuesday",
        time="6:00 PM",
        location="Second Sole Medina",
        type=EventType.CLUB_RUN,
    ),
    Event(
        id="evt-thursday-track",
        title="Thursday Track Night",
        day="Thursday",
        time="6:30 PM",
        location="Medina High School Track",
        type=EventType.SPEED_WORK,
    ),
    Event(
        id="evt-saturday-long",
        title="Saturday Long Run",
        day="Saturday",
        time="7:00 AM",
        location="Medina Public Square",
        type=EventType.LONG_RUN,
    ),
    Event(
        id="evt-sunday-trail",
        title="Sunday Trail Social",
        day="Sunday",
        time="8:00 AM",
        location="Letha House Park",
        type=EventType.TRAIL_RUN,
    ),
)

TRAILS: tuple[Trail, ...] = (
    Trail(id="trail-chippewa", name="Chippewa Inlet Trail", type="Trails", distance="3.1 mi"),
    Trail(id="trail-letha-house", name="Letha House Park", type="Trails", distance="4.5 mi", status=TrailStatus.MUDDY),
    Trail(id="trail-lester-rail", name="Lester Rail Trail", type="Paved", distance="3.6 mi"),
    Trail(id="trail-hubbard-valley", name="Hubbard Valley Park", type="Mixed", distance="2.8 mi"),
)


def get_event(event_id: str) -> Optional[Event]:
    return next((e for e in EVENTS if e.id == event_id), None)


def get_trail(trail_id: str) -> Optional[Trail]:
    return next((t for t in TRAILS if t.id == trail_id), None)
