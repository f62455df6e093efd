"""
Unit Tests - Match Scorer
"""
import pytest

from stridefit.schemas.gait import DropPreference, GaitProfile
from stridefit.schemas.shoe import Category, CushionLevel, Gender, SupportType
from stridefit.services.matching import MATCH_THRESHOLD, MatchScorer, drop_bucket, passes_gender


@pytest.fixture
def scorer() -> MatchScorer:
    return MatchScorer()


@pytest.fixture
def road_runner() -> GaitProfile:
    return GaitProfile(terrain="Road", pronation="Neutral", cushion_pref="Balanced", drop_pref="Medium")


class TestEndToEnd:
    def test_road_runner_scenario(self, scorer, shoe_a, shoe_b, road_runner):
        score_a, breakdown_a = scorer.calculate_match_score(shoe_a, road_runner)
        score_b, _ = scorer.calculate_match_score(shoe_b, road_runner)

        assert score_a == 8
        assert breakdown_a == {
            "terrain": 3, "support": 1, "cushion": 2, "drop": 2,
            "width": 0, "goals": 0, "injuries": 0,
        }
        assert score_b == 0
        assert [r.shoe.id for r in scorer.rank([shoe_a, shoe_b], road_runner)] == ["shoe-a"]

    def test_score_is_deterministic(self, scorer, shoe_a, road_runner):
        scores = {scorer.score(shoe_a, road_runner) for _ in range(20)}
        assert scores == {8}

    def test_separate_scorers_agree(self, shoe_a, shoe_b, road_runner):
        for shoe in (shoe_a, shoe_b):
            assert MatchScorer().score(shoe, road_runner) == MatchScorer().score(shoe, road_runner)


class TestGenderFilter:
    def test_men_excluded_for_women_regardless_of_score(self, scorer, shoe_factory, road_runner):
        men = shoe_factory("men-perfect", gender=Gender.MEN)
        gait = road_runner.model_copy(update={"gender": Gender.WOMEN})

        result = scorer.evaluate(men, gait)

        assert result.score >= MATCH_THRESHOLD
        assert result.gender_excluded is True
        assert result.admitted is False
        assert scorer.admits(men, gait) is False

    def test_unisex_passes_any_gender(self, shoe_a):
        assert passes_gender(shoe_a, Gender.WOMEN)
        assert passes_gender(shoe_a, Gender.MEN)
        assert passes_gender(shoe_a, None)

    def test_rank_with_gender(self, scorer, small_catalog):
        gait = GaitProfile(gender="Women", terrain="Road")

        ids = [r.shoe.id for r in scorer.rank(small_catalog, gait)]

        assert ids == ["shoe-a", "road-women"]

    def test_unisex_still_needs_the_threshold(self, scorer, shoe_b):
        gait = GaitProfile(gender="Women", terrain="Road")
        assert scorer.admits(shoe_b, gait) is False


class TestSignals:
    def test_unanswered_profile_scores_zero(self, scorer, small_catalog):
        gait = GaitProfile()
        assert all(scorer.score(shoe, gait) == 0 for shoe in small_catalog)

    def test_support_skipped_without_pronation_or_arch(self, scorer, shoe_a):
        _, breakdown = scorer.calculate_match_score(shoe_a, GaitProfile(terrain="Trail"))
        assert breakdown["support"] == 0

    @pytest.mark.parametrize("gait_fields", [{"pronation": "Over"}, {"arch": "Low"}])
    def test_stability_for_overpronation_or_low_arch(self, scorer, shoe_factory, gait_fields):
        stable = shoe_factory("stable", support=SupportType.STABILITY)
        neutral = shoe_factory("neutral", support=SupportType.NEUTRAL)
        gait = GaitProfile(**gait_fields)

        assert scorer.calculate_match_score(stable, gait)[1]["support"] == 2
        assert scorer.calculate_match_score(neutral, gait)[1]["support"] == 0

    def test_hybrid_terrain_partial_credit(self, scorer, shoe_factory):
        gait = GaitProfile(terrain="Hybrid")

        assert scorer.score(shoe_factory("road", category=Category.ROAD), gait) == 1
        assert scorer.score(shoe_factory("trail", category=Category.TRAIL), gait) == 1
        assert scorer.score(shoe_factory("hybrid", category=Category.HYBRID), gait) == 3
        assert scorer.score(shoe_factory("track", category=Category.TRACK), gait) == 0

    def test_no_preference_cushion_scores_nothing(self, scorer, shoe_a):
        assert scorer.score(shoe_a, GaitProfile(cushion_pref="No Preference")) == 0

    def test_high_mileage_favours_plush(self, scorer, shoe_factory):
        plush = shoe_factory("plush", cushion=CushionLevel.PLUSH)
        gait = GaitProfile(weekly_miles="High", cushion_pref="Plush")
        assert scorer.calculate_match_score(plush, gait)[1]["cushion"] == 3

    @pytest.mark.parametrize("shoe_id,brand,expected", [
        ("lone-peak", "Altra", 1),
        ("ghost-16-4e", "Brooks", 1),
        ("clifton-wide", "Hoka", 1),
        ("ghost-16", "Brooks", 0),
    ])
    def test_wide_fit(self, scorer, shoe_factory, shoe_id, brand, expected):
        shoe = shoe_factory(shoe_id, brand=brand)
        assert scorer.score(shoe, GaitProfile(foot_shape="Wide")) == expected

    def test_speed_goal(self, scorer, shoe_factory):
        gait = GaitProfile(distance_goals="Speed")

        assert scorer.score(shoe_factory("firm", cushion=CushionLevel.FIRM), gait) == 1
        assert scorer.score(shoe_factory("spike", category=Category.TRACK), gait) == 1
        assert scorer.score(shoe_factory("daily"), gait) == 0

    def test_beginner_value(self, scorer, shoe_factory):
        gait = GaitProfile(experience_level="Beginner")

        assert scorer.score(shoe_factory("cheap", price=110.0), gait) == 1
        assert scorer.score(shoe_factory("pricey", price=170.0), gait) == 0

    def test_staff_pick_for_advanced(self, scorer, shoe_factory):
        pick = shoe_factory("pick", is_staff_pick=True)
        assert scorer.score(pick, GaitProfile(experience_level="Advanced")) == 1
        assert scorer.score(pick, GaitProfile(experience_level="Intermediate")) == 0

    @pytest.mark.parametrize("goal,cushion,expected", [
        ("Long", CushionLevel.PLUSH, 1),
        ("Ultra", CushionLevel.PLUSH, 1),
        ("Long", CushionLevel.BALANCED, 0),
        ("Ultra", CushionLevel.FIRM, 0),
        ("Daily", CushionLevel.BALANCED, 1),
        ("Daily", CushionLevel.PLUSH, 0),
    ])
    def test_distance_goal_cushion(self, scorer, shoe_factory, goal, cushion, expected):
        shoe = shoe_factory("shoe", cushion=cushion)
        assert scorer.score(shoe, GaitProfile(distance_goals=goal)) == expected

    @pytest.mark.parametrize("cushion,staff_pick,expected", [
        (CushionLevel.FIRM, False, 1),
        (CushionLevel.BALANCED, True, 1),
        (CushionLevel.FIRM, True, 2),
        (CushionLevel.BALANCED, False, 0),
    ])
    def test_elite_speed_and_staff_pick(self, scorer, shoe_factory, cushion, staff_pick, expected):
        shoe = shoe_factory("shoe", cushion=cushion, is_staff_pick=staff_pick)
        assert scorer.score(shoe, GaitProfile(experience_level="Elite")) == expected


class TestInjuries:
    def test_achilles_penalises_low_drop(self, scorer, shoe_factory):
        gait = GaitProfile(injury_history=["Achilles"])

        assert scorer.score(shoe_factory("low", drop=4), gait) == -1
        assert scorer.score(shoe_factory("high", drop=10), gait) == 0

    def test_tags_apply_independently(self, scorer, shoe_factory):
        plush = shoe_factory("plush", cushion=CushionLevel.PLUSH, drop=8)
        gait = GaitProfile(injury_history=["Shin", "Plantar", "Knee"])

        assert scorer.calculate_match_score(plush, gait)[1]["injuries"] == 3

    def test_none_tag_scores_nothing(self, scorer, shoe_factory):
        plush = shoe_factory("plush", cushion=CushionLevel.PLUSH)
        assert scorer.score(plush, GaitProfile(injury_history=["None"])) == 0

    @pytest.mark.parametrize("tag,overrides,expected", [
        ("Hip", {"support": SupportType.STABILITY}, 1),
        ("Hip", {"support": SupportType.NEUTRAL}, 0),
        ("ITBand", {"cushion": CushionLevel.PLUSH}, 1),
        ("ITBand", {"cushion": CushionLevel.BALANCED}, 0),
        ("Back", {"cushion": CushionLevel.PLUSH}, 1),
        ("Back", {"cushion": CushionLevel.BALANCED}, 0),
    ])
    def test_single_injury_relief(self, scorer, shoe_factory, tag, overrides, expected):
        shoe = shoe_factory("shoe", **overrides)
        assert scorer.score(shoe, GaitProfile(injury_history=[tag])) == expected


class TestDropBucket:
    @pytest.mark.parametrize("drop,bucket", [
        (0, DropPreference.ZERO),
        (1, DropPreference.LOW),
        (6, DropPreference.LOW),
        (6.5, DropPreference.MEDIUM),
        (7, DropPreference.MEDIUM),
        (10, DropPreference.MEDIUM),
        (11, DropPreference.HIGH),
        (12, DropPreference.HIGH),
    ])
    def test_buckets(self, drop, bucket):
        assert drop_bucket(drop) == bucket


class TestRank:
    def test_ties_keep_catalog_order(self, scorer, shoe_factory):
        catalog = [shoe_factory(f"road-{i}") for i in range(4)]
        gait = GaitProfile(terrain="Road")

        assert [r.shoe.id for r in scorer.rank(catalog, gait)] == ["road-0", "road-1", "road-2", "road-3"]

    def test_best_score_first(self, scorer, shoe_a, shoe_factory, road_runner):
        weaker = shoe_factory("weaker", cushion=CushionLevel.PLUSH)

        ranked = scorer.rank([weaker, shoe_a], road_runner)

        assert [r.shoe.id for r in ranked] == ["shoe-a", "weaker"]
        assert [r.score for r in ranked] == [8, 6]
