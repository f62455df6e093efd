import logging
from typing import Optional

from pydantic import ValidationError

from stridefit.schemas.gait import GaitProfile, InjuryTag
from stridefit.schemas.quiz import Question, QuestionOption, QuizAnswers, QuizProgress
from stridefit.services.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


# Deep gait analysis questions; ids are GaitProfile field names
GAIT_QUESTIONS = [
    Question(
        id="terrain",
        type="single_select",
        question="Where do you run most?",
        options=[
            QuestionOption(value="Road", label="Road / Pavement", description="Consistent, hard surfaces."),
            QuestionOption(value="Trail", label="Trail / Technical", description="Roots, rocks, and mud."),
            QuestionOption(value="Track", label="Track", description="Intervals and spikes."),
            QuestionOption(value="Hybrid", label="Hybrid / Gravel", description="A mix of everything."),
        ],
    ),
    Question(
        id="gender",
        type="single_select",
        question="Which fit are you shopping for?",
        options=[
            QuestionOption(value="Men", label="Men's"),
            QuestionOption(value="Women", label="Women's"),
        ],
    ),
    Question(
        id="experience_level",
        type="single_select",
        question="How would you describe your running experience?",
        options=[
            QuestionOption(value="Beginner", label="Beginner", description="New to running."),
            QuestionOption(value="Intermediate", label="Intermediate", description="Running regularly."),
            QuestionOption(value="Advanced", label="Advanced", description="Structured training."),
            QuestionOption(value="Elite", label="Elite", description="Racing competitively."),
        ],
    ),
    Question(
        id="strike",
        type="single_select",
        question="How do you land?",
        options=[
            QuestionOption(value="Heel", label="Heel Strike", description="Most common, impact on heel."),
            QuestionOption(value="Midfoot", label="Midfoot", description="Landing flat footed."),
            QuestionOption(value="Forefoot", label="Forefoot", description="On your toes (sprinting)."),
        ],
    ),
    Question(
        id="arch",
        type="single_select",
        question="What is your arch profile?",
        options=[
            QuestionOption(value="Medium", label="Medium / Normal", description="Standard arch height."),
            QuestionOption(value="Low", label="Flat / Low", description="Collapsed arch, wide footprint."),
            QuestionOption(value="High", label="High Arch", description="Rigid foot, less surface area."),
        ],
    ),
    Question(
        id="pronation",
        type="single_select",
        question="Pronation check",
        options=[
            QuestionOption(value="Neutral", label="Neutral", description="Even landing."),
            QuestionOption(value="Over", label="Overpronation", description="Ankles roll inward."),
            QuestionOption(value="Under", label="Supination", description="Ankles roll outward."),
        ],
    ),
    Question(
        id="weekly_miles",
        type="single_select",
        question="What is your weekly volume?",
        options=[
            QuestionOption(value="Low", label="0-15 miles"),
            QuestionOption(value="Medium", label="15-30 miles"),
            QuestionOption(value="High", label="30+ miles"),
        ],
    ),
    Question(
        id="distance_goals",
        type="single_select",
        question="What are you training for?",
        options=[
            QuestionOption(value="Speed", label="Speed", description="5K, 10K and track work."),
            QuestionOption(value="Daily", label="Daily Fitness", description="Consistent everyday miles."),
            QuestionOption(value="Long", label="Half / Marathon", description="Long road efforts."),
            QuestionOption(value="Ultra", label="Ultra", description="Beyond the marathon."),
        ],
    ),
    Question(
        id="cushion_pref",
        type="single_select",
        question="Preferred Feel",
        options=[
            QuestionOption(value="Firm", label="Firm & Responsive", description="Feel the ground, go fast."),
            QuestionOption(value="Balanced", label="Balanced", description="Good for daily training."),
            QuestionOption(value="Plush", label="Max Cushion", description="Soft, protective, cloud-like."),
            QuestionOption(value="No Preference", label="No Preference"),
        ],
    ),
    Question(
        id="drop_pref",
        type="single_select",
        question="Heel-to-toe drop preference",
        options=[
            QuestionOption(value="Zero", label="Zero Drop", description="0mm, natural foot position."),
            QuestionOption(value="Low", label="Low", description="1-6mm."),
            QuestionOption(value="Medium", label="Medium", description="7-10mm."),
            QuestionOption(value="High", label="High", description="11mm and up."),
            QuestionOption(value="No Preference", label="No Preference"),
        ],
    ),
    Question(
        id="foot_shape",
        type="single_select",
        question="Foot Shape Preference",
        options=[
            QuestionOption(value="Standard", label="Standard", description="Snug, performance fit."),
            QuestionOption(value="Wide", label="Wide Toe Box", description="Splay toes naturally (Altra style)."),
        ],
    ),
    Question(
        id="injury_history",
        type="multi_select",
        question="Any recurring issues?",
        hint="Select all that apply",
        exclusive_value=InjuryTag.NONE.value,
        options=[
            QuestionOption(value="None", label="None", description="Healthy runner."),
            QuestionOption(value="Plantar", label="Plantar Fasciitis", description="Heel pain."),
            QuestionOption(value="Shin", label="Shin Splints", description="Lower leg pain."),
            QuestionOption(value="Knee", label="Knee Pain", description="Runner's knee."),
            QuestionOption(value="Achilles", label="Achilles Tendinitis", description="Pain above the heel."),
            QuestionOption(value="Hip", label="Hip Pain"),
            QuestionOption(value="ITBand", label="IT Band Syndrome", description="Outer knee pain."),
            QuestionOption(value="Back", label="Lower Back Pain"),
        ],
    ),
]

QUESTIONS_BY_ID = {q.id: q for q in GAIT_QUESTIONS}


def _is_answered(value) -> bool:
    if isinstance(value, list):
        return len(value) > 0
    return value is not None


class GaitQuiz:
    """Collects Finder answers and saves them as the runner's gait profile."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    def questions(self) -> list[Question]:
        return list(GAIT_QUESTIONS)

    def select(self, answers: QuizAnswers, question_id: str, value: str) -> QuizAnswers:
        """Apply one option tap and return the updated answers.

        Single choice overwrites. Multi choice toggles, except that the
        exclusive option replaces every other tag and any other tag drops it.
        """
        updated = dict(answers)
        question = QUESTIONS_BY_ID.get(question_id)
        if question is None or not question.has_option(value):
            logger.info(f"Ignoring unknown answer {question_id}={value}")
            return updated

        if not question.is_multi:
            updated[question_id] = value
            return updated

        current = updated.get(question_id) or []
        if isinstance(current, str):
            current = [current]

        if value == question.exclusive_value:
            updated[question_id] = [value]
            return updated

        values = [v for v in current if v != question.exclusive_value]
        if value in values:
            values.remove(value)
        else:
            values.append(value)
        updated[question_id] = values
        return updated

    def progress(self, answers: QuizAnswers) -> QuizProgress:
        answered = [q for q in GAIT_QUESTIONS if _is_answered(answers.get(q.id))]
        remaining = [q for q in GAIT_QUESTIONS if not _is_answered(answers.get(q.id))]
        total = len(GAIT_QUESTIONS)
        return QuizProgress(
            answered=len(answered),
            total=total,
            progress=len(answered) / total,
            is_complete=not remaining,
            next_question=remaining[0] if remaining else None,
        )

    def to_gait_profile(self, answers: QuizAnswers) -> GaitProfile:
        """Convert answers to a sparse GaitProfile; unanswered stays absent."""
        fields = {
            question_id: value
            for question_id, value in answers.items()
            if question_id in QUESTIONS_BY_ID and _is_answered(value)
        }
        return GaitProfile.model_validate(fields)

    def submit(self, answers: QuizAnswers) -> Optional[GaitProfile]:
        """Persist the answers. Guests cannot save a gait analysis."""
        if not self.repository.is_member():
            logger.info("Gait analysis requires a local profile, answers not saved")
            return None

        try:
            profile = self.to_gait_profile(answers)
        except ValidationError as e:
            logger.warning(f"Rejected gait answers: {e}")
            return None

        changes = {name: getattr(profile, name) for name in profile.answered_fields}
        return self.repository.update_gait_profile(**changes)
