"""
Composable facet filters over the store inventory.

Match mode and the manual facets are independent: turning one on never
resets or overrides another, and the result is always the intersection of
every active stage. None on a facet means "All".
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from stridefit.data.inventory import INVENTORY, list_brands
from stridefit.schemas.gait import GaitProfile
from stridefit.schemas.shoe import Category, CushionLevel, Gender, Shoe, SupportType
from stridefit.services.matching import MatchScorer, passes_gender
from stridefit.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

ALL = "All"


@dataclass(frozen=True)
class FilterState:
    match_mode: bool = False
    category: Optional[Category] = None
    gender: Optional[Gender] = None
    brands: frozenset[str] = field(default_factory=frozenset)
    support: Optional[SupportType] = None
    cushion: Optional[CushionLevel] = None

    @property
    def is_default(self) -> bool:
        return self == FilterState()


def parse_facet(enum_cls, value):
    """Accept an enum member, its value, or 'All'/None for no filter."""
    if value is None or value == ALL:
        return None
    return enum_cls(value)


def filter_inventory(
    catalog: Iterable[Shoe],
    state: FilterState,
    gait: Optional[GaitProfile] = None,
    is_guest: bool = True,
    scorer: Optional[MatchScorer] = None,
) -> list[Shoe]:
    """Run every active stage and return the surviving shoes.

    In match mode (members only) the result is ordered by match score with
    ties kept in catalog order; otherwise catalog order is preserved.
    """
    shoes = list(catalog)

    # 1. Gait match (skipped for guests)
    if state.match_mode and not is_guest:
        scorer = scorer or MatchScorer()
        shoes = [result.shoe for result in scorer.rank(shoes, gait or GaitProfile())]

    # 2. Category
    if state.category is not None:
        shoes = [s for s in shoes if s.category == state.category]

    # 3. Gender (Unisex passes any gender)
    if state.gender is not None:
        shoes = [s for s in shoes if passes_gender(s, state.gender)]

    # 4. Brand
    if state.brands:
        shoes = [s for s in shoes if s.brand in state.brands]

    # 5. Support
    if state.support is not None:
        shoes = [s for s in shoes if s.support == state.support]

    # 6. Cushion
    if state.cushion is not None:
        shoes = [s for s in shoes if s.cushion == state.cushion]

    return shoes


class InventoryFilterEngine:
    """Holds the shop's current filter selection and renders the catalog."""

    def __init__(
        self,
        repository: ProfileRepository,
        catalog: Optional[Iterable[Shoe]] = None,
        scorer: Optional[MatchScorer] = None,
    ):
        self.repository = repository
        self.catalog = tuple(INVENTORY if catalog is None else catalog)
        self.scorer = scorer or MatchScorer()
        self.state = FilterState()

    def apply(self, state: Optional[FilterState] = None) -> list[Shoe]:
        """Filter the catalog with the given state, or the engine's own."""
        state = state or self.state
        profile = self.repository.get_profile()
        gait = self.repository.get_gait_profile() if state.match_mode else None

        if state.match_mode and profile.is_guest:
            logger.info("Match mode requested by a guest, showing unmatched inventory")

        return filter_inventory(self.catalog, state, gait, profile.is_guest, self.scorer)

    # ------------------------------------------------------------------
    # Facet setters; each one leaves the other facets untouched
    # ------------------------------------------------------------------

    def set_match_mode(self, enabled: bool) -> FilterState:
        self.state = replace(self.state, match_mode=enabled)
        return self.state

    def toggle_match_mode(self) -> FilterState:
        return self.set_match_mode(not self.state.match_mode)

    def set_category(self, category) -> FilterState:
        self.state = replace(self.state, category=parse_facet(Category, category))
        return self.state

    def set_gender(self, gender) -> FilterState:
        self.state = replace(self.state, gender=parse_facet(Gender, gender))
        return self.state

    def set_support(self, support) -> FilterState:
        self.state = replace(self.state, support=parse_facet(SupportType, support))
        return self.state

    def set_cushion(self, cushion) -> FilterState:
        self.state = replace(self.state, cushion=parse_facet(CushionLevel, cushion))
        return self.state

    def toggle_brand(self, brand: str) -> FilterState:
        brands = set(self.state.brands)
        if brand in brands:
            brands.remove(brand)
        else:
            brands.add(brand)
        self.state = replace(self.state, brands=frozenset(brands))
        return self.state

    def set_brands(self, brands: Iterable[str]) -> FilterState:
        self.state = replace(self.state, brands=frozenset(brands))
        return self.state

    def reset(self) -> FilterState:
        self.state = FilterState()
        return self.state

    def available_brands(self) -> list[str]:
        return list_brands(self.catalog)
