"""
Gait profile built from the Finder quiz.

Every field is optional: None means the runner has not answered that
question yet and must contribute nothing to a match score. Explicit
"No Preference" answers are real values, distinct from None.
"""

import enum
import logging
from typing import Any, Optional, FrozenSet
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from stridefit.schemas.shoe import Category, Gender

logger = logging.getLogger(__name__)


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ELITE = "Elite"


class Strike(str, enum.Enum):
    HEEL = "Heel"
    MIDFOOT = "Midfoot"
    FOREFOOT = "Forefoot"


class ArchType(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Pronation(str, enum.Enum):
    NEUTRAL = "Neutral"
    OVER = "Over"
    UNDER = "Under"


class WeeklyMiles(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class DistanceGoal(str, enum.Enum):
    SPEED = "Speed"
    DAILY = "Daily"
    LONG = "Long"
    ULTRA = "Ultra"


class CushionPreference(str, enum.Enum):
    FIRM = "Firm"
    BALANCED = "Balanced"
    PLUSH = "Plush"
    NO_PREFERENCE = "No Preference"


class DropPreference(str, enum.Enum):
    ZERO = "Zero"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    NO_PREFERENCE = "No Preference"


class FootShape(str, enum.Enum):
    STANDARD = "Standard"
    WIDE = "Wide"


class InjuryTag(str, enum.Enum):
    NONE = "None"
    SHIN = "Shin"
    PLANTAR = "Plantar"
    KNEE = "Knee"
    ACHILLES = "Achilles"
    HIP = "Hip"
    IT_BAND = "ITBand"
    BACK = "Back"


# Validation context key for reading stored records written by other versions
LENIENT = "lenient"

ANSWER_ENUMS: dict[str, type[enum.Enum]] = {
    "terrain": Category,
    "gender": Gender,
    "experience_level": ExperienceLevel,
    "strike": Strike,
    "arch": ArchType,
    "pronation": Pronation,
    "weekly_miles": WeeklyMiles,
    "distance_goals": DistanceGoal,
    "cushion_pref": CushionPreference,
    "drop_pref": DropPreference,
    "foot_shape": FootShape,
}


def _known_values(enum_cls: type[enum.Enum]) -> set[str]:
    return {member.value for member in enum_cls}


class GaitProfile(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    terrain: Optional[Category] = None
    gender: Optional[Gender] = None
    experience_level: Optional[ExperienceLevel] = None
    strike: Optional[Strike] = None
    arch: Optional[ArchType] = None
    pronation: Optional[Pronation] = None
    weekly_miles: Optional[WeeklyMiles] = None
    distance_goals: Optional[DistanceGoal] = None
    cushion_pref: Optional[CushionPreference] = None
    drop_pref: Optional[DropPreference] = None
    foot_shape: Optional[FootShape] = None
    injury_history: Optional[FrozenSet[InjuryTag]] = None

    @field_validator("injury_history")
    @classmethod
    def validate_injury_history(cls, v: Optional[FrozenSet[InjuryTag]]) -> Optional[FrozenSet[InjuryTag]]:
        """'None' is mutually exclusive with every other injury tag."""
        if v and InjuryTag.NONE in v and len(v) > 1:
            raise ValueError("injury history 'None' cannot be combined with other tags")
        return v

    @model_validator(mode="before")
    @classmethod
    def drop_unknown_answers(cls, data: Any, info: ValidationInfo) -> Any:
        """Keep the recognizable answers of a stored profile.

        Only active under the lenient context. An unknown single-choice
        answer becomes unanswered and unknown injury tags are filtered out,
        instead of the whole profile failing validation.
        """
        if not (info.context or {}).get(LENIENT) or not isinstance(data, dict):
            return data

        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            for key in {field.alias or name, name}:
                value = cleaned.get(key)
                if value is None:
                    continue

                if name in ANSWER_ENUMS:
                    if not isinstance(value, str) or value not in _known_values(ANSWER_ENUMS[name]):
                        logger.warning(f"Dropping unknown stored {name} answer {value!r}")
                        cleaned.pop(key)
                    continue

                # injury_history
                if not isinstance(value, (list, tuple, set, frozenset)):
                    logger.warning(f"Dropping malformed stored injury history {value!r}")
                    cleaned.pop(key)
                    continue

                known = _known_values(InjuryTag)
                tags = [tag for tag in value if isinstance(tag, str) and tag in known]
                if InjuryTag.NONE.value in tags and len(tags) > 1:
                    tags.remove(InjuryTag.NONE.value)
                if len(tags) != len(value):
                    logger.warning(f"Dropping unknown stored injury tags from {list(value)!r}")
                if value and not tags:
                    cleaned.pop(key)
                else:
                    cleaned[key] = tags
        return cleaned

    @field_serializer("injury_history")
    def serialize_injury_history(self, v: Optional[FrozenSet[InjuryTag]]):
        if v is None:
            return None
        order = list(InjuryTag)
        return [tag.value for tag in sorted(v, key=order.index)]

    def has_injury(self, tag: InjuryTag) -> bool:
        return bool(self.injury_history) and tag in self.injury_history

    @property
    def answered_fields(self) -> list[str]:
        return [name for name in type(self).model_fields if getattr(self, name) is not None]
