"""
Gait-profile match scoring for the store inventory.

Soft scoring, hard threshold: every signal adds (or, for Achilles-sensitive
runners, subtracts) a few integer points, and a shoe is admitted once the
total reaches MATCH_THRESHOLD. No single signal is required. Gender is the
one hard filter and is applied before scoring is consulted.

Signals only fire for answered quiz fields. An unanswered field contributes
nothing, never a neutral default.

The weights and the threshold are fixed values; do not rebalance them.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from stridefit.schemas.gait import (
    DistanceGoal, DropPreference, ExperienceLevel, FootShape, GaitProfile,
    InjuryTag, Pronation, ArchType, WeeklyMiles,
)
from stridefit.schemas.shoe import Category, CushionLevel, Gender, Shoe, SupportType

logger = logging.getLogger(__name__)


MATCH_THRESHOLD = 3

# Algorithm weights
SIGNAL_WEIGHTS = {
    "terrain_exact": 3,
    "terrain_hybrid": 1,
    "support_stability": 2,
    "support_neutral": 1,
    "cushion_exact": 2,
    "cushion_high_mileage": 1,
    "drop": 2,
    "wide_fit": 1,
    "speed_firm": 1,
    "distance_plush": 1,
    "daily_balanced": 1,
    "beginner_value": 1,
    "staff_pick": 1,
    "injury_relief": 1,
    "achilles_low_drop": -1,
}

BEGINNER_MAX_PRICE = 130
WIDE_ID_MARKERS = ("wide", "4e")
WIDE_FIT_BRANDS = ("Altra",)


def drop_bucket(drop: float) -> DropPreference:
    """Bucket a heel-to-toe drop: Zero 0, Low 1-6, Medium 7-10, High 11+."""
    if drop <= 0:
        return DropPreference.ZERO
    if drop <= 6:
        return DropPreference.LOW
    if drop <= 10:
        return DropPreference.MEDIUM
    return DropPreference.HIGH


def passes_gender(shoe: Shoe, gender: Optional[Gender]) -> bool:
    """Unisex shoes pass any gender; no gender passes everything."""
    if gender is None:
        return True
    return shoe.gender == gender or shoe.gender == Gender.UNISEX


@dataclass
class MatchResult:
    shoe: Shoe
    score: int
    breakdown: dict[str, int] = field(default_factory=dict)
    gender_excluded: bool = False
    threshold: int = MATCH_THRESHOLD

    @property
    def admitted(self) -> bool:
        return not self.gender_excluded and self.score >= self.threshold


class MatchScorer:
    """Scores catalog shoes against a gait profile."""

    def __init__(self, threshold: int = MATCH_THRESHOLD):
        self.threshold = threshold
        self.weights = SIGNAL_WEIGHTS.copy()

    def _calculate_terrain_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        """Exact category match, or a partial credit for hybrid runners."""
        if gait.terrain is None:
            return 0
        if shoe.category == gait.terrain:
            return self.weights["terrain_exact"]
        if gait.terrain == Category.HYBRID and shoe.category in (Category.ROAD, Category.TRAIL):
            return self.weights["terrain_hybrid"]
        return 0

    def _calculate_support_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        """Overpronators and low arches need stability; everyone else gets neutral credit."""
        if gait.pronation is None and gait.arch is None:
            return 0

        needs_stability = gait.pronation == Pronation.OVER or gait.arch == ArchType.LOW
        if needs_stability and shoe.support == SupportType.STABILITY:
            return self.weights["support_stability"]
        if not needs_stability and shoe.support == SupportType.NEUTRAL:
            return self.weights["support_neutral"]
        return 0

    def _calculate_cushion_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        score = 0
        if gait.cushion_pref is not None and gait.cushion_pref.value == shoe.cushion.value:
            score += self.weights["cushion_exact"]
        if gait.weekly_miles == WeeklyMiles.HIGH and shoe.cushion == CushionLevel.PLUSH:
            score += self.weights["cushion_high_mileage"]
        return score

    def _calculate_drop_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        if gait.drop_pref is None:
            return 0
        return self.weights["drop"] if drop_bucket(shoe.drop) == gait.drop_pref else 0

    def _calculate_width_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        """Wide feet favour foot-shaped brands and wide (4E) variants."""
        if gait.foot_shape != FootShape.WIDE:
            return 0
        shoe_id = shoe.id.lower()
        if shoe.brand in WIDE_FIT_BRANDS or any(marker in shoe_id for marker in WIDE_ID_MARKERS):
            return self.weights["wide_fit"]
        return 0

    def _calculate_goal_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        """Distance goals and experience level."""
        score = 0
        goal = gait.distance_goals
        level = gait.experience_level

        if goal == DistanceGoal.SPEED or level == ExperienceLevel.ELITE:
            if shoe.cushion == CushionLevel.FIRM or shoe.category == Category.TRACK:
                score += self.weights["speed_firm"]

        if goal in (DistanceGoal.LONG, DistanceGoal.ULTRA) and shoe.cushion == CushionLevel.PLUSH:
            score += self.weights["distance_plush"]

        if goal == DistanceGoal.DAILY and shoe.cushion == CushionLevel.BALANCED:
            score += self.weights["daily_balanced"]

        if level == ExperienceLevel.BEGINNER and shoe.price <= BEGINNER_MAX_PRICE:
            score += self.weights["beginner_value"]

        if level in (ExperienceLevel.ELITE, ExperienceLevel.ADVANCED) and shoe.is_staff_pick:
            score += self.weights["staff_pick"]

        return score

    def _calculate_injury_match(self, shoe: Shoe, gait: GaitProfile) -> int:
        """Each reported injury applies on its own; tags are not exclusive."""
        if not gait.injury_history:
            return 0

        relief = self.weights["injury_relief"]
        plush = shoe.cushion == CushionLevel.PLUSH
        score = 0

        if gait.has_injury(InjuryTag.SHIN) and plush:
            score += relief
        if gait.has_injury(InjuryTag.PLANTAR) and shoe.drop >= 8:
            score += relief
        if gait.has_injury(InjuryTag.KNEE) and shoe.cushion != CushionLevel.FIRM:
            score += relief
        if gait.has_injury(InjuryTag.ACHILLES) and shoe.drop <= 6:
            # Penalty, not a missed bonus
            score += self.weights["achilles_low_drop"]
        if gait.has_injury(InjuryTag.HIP) and shoe.support == SupportType.STABILITY:
            score += relief
        if gait.has_injury(InjuryTag.IT_BAND) and plush:
            score += relief
        if gait.has_injury(InjuryTag.BACK) and plush:
            score += relief

        return score

    def calculate_match_score(self, shoe: Shoe, gait: GaitProfile) -> tuple[int, dict[str, int]]:
        """Calculate the total score for a shoe and its per-signal breakdown."""
        scores = {
            "terrain": self._calculate_terrain_match(shoe, gait),
            "support": self._calculate_support_match(shoe, gait),
            "cushion": self._calculate_cushion_match(shoe, gait),
            "drop": self._calculate_drop_match(shoe, gait),
            "width": self._calculate_width_match(shoe, gait),
            "goals": self._calculate_goal_match(shoe, gait),
            "injuries": self._calculate_injury_match(shoe, gait),
        }
        return sum(scores.values()), scores

    def evaluate(self, shoe: Shoe, gait: GaitProfile) -> MatchResult:
        score, breakdown = self.calculate_match_score(shoe, gait)
        return MatchResult(
            shoe=shoe,
            score=score,
            breakdown=breakdown,
            gender_excluded=not passes_gender(shoe, gait.gender),
            threshold=self.threshold,
        )

    def score(self, shoe: Shoe, gait: GaitProfile) -> int:
        return self.calculate_match_score(shoe, gait)[0]

    def admits(self, shoe: Shoe, gait: GaitProfile) -> bool:
        """Gender hard filter first, then the score threshold."""
        if not passes_gender(shoe, gait.gender):
            return False
        return self.score(shoe, gait) >= self.threshold

    def rank(self, catalog: Iterable[Shoe], gait: GaitProfile) -> list[MatchResult]:
        """Admitted shoes, best score first; equal scores keep catalog order."""
        results = [self.evaluate(shoe, gait) for shoe in catalog]
        admitted = [r for r in results if r.admitted]

        # sorted() is stable, so ties stay in catalog order
        ranked = sorted(admitted, key=lambda r: r.score, reverse=True)
        logger.debug(f"Match mode admitted {len(ranked)} of {len(results)} shoes")
        return ranked
