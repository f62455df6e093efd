from stridefit.schemas.shoe import Shoe, Gender, Category, SupportType, CushionLevel
from stridefit.schemas.gait import (
    GaitProfile, ExperienceLevel, Strike, ArchType, Pronation, WeeklyMiles,
    DistanceGoal, CushionPreference, DropPreference, FootShape, InjuryTag
)
from stridefit.schemas.storage import (
    UserProfile, ShoeRotationItem, CartItem, PrivacyAudit, LocalStorageSchema,
    default_record, CUSTOM_SHOE_ID
)
from stridefit.schemas.community import Event, Trail
from stridefit.schemas.quiz import Question, QuestionOption, QuizAnswers, QuizProgress

__all__ = [
    # Catalog
    "Shoe", "Gender", "Category", "SupportType", "CushionLevel",
    # Gait
    "GaitProfile", "ExperienceLevel", "Strike", "ArchType", "Pronation",
    "WeeklyMiles", "DistanceGoal", "CushionPreference", "DropPreference",
    "FootShape", "InjuryTag",
    # Persisted record
    "UserProfile", "ShoeRotationItem", "CartItem", "PrivacyAudit",
    "LocalStorageSchema", "default_record", "CUSTOM_SHOE_ID",
    # Community
    "Event", "Trail",
    # Quiz
    "Question", "QuestionOption", "QuizAnswers", "QuizProgress",
]
