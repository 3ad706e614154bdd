"""
Stakeholder Intake Service
Static question catalog.

``get_questions_for_type`` is pure and deterministic: shared questions plus
learner-profile questions that apply to the type, plus the type-specific set,
ordered by ``display_order``. Python's sort is stable, so equal orders keep
catalog order.
"""

from app.questions.compliance import COMPLIANCE_QUESTIONS
from app.questions.learner_profiles import LEARNER_PROFILE_QUESTIONS
from app.questions.new_system import NEW_SYSTEM_QUESTIONS
from app.questions.performance_problem import PERFORMANCE_PROBLEM_QUESTIONS
from app.questions.role_change import ROLE_CHANGE_QUESTIONS
from app.questions.shared import SHARED_QUESTIONS
from app.questions.types import (
    FIELD_TYPES,
    TRAINING_TYPE_LABELS,
    TRAINING_TYPES,
    ConditionalRule,
    QuestionDefinition,
    TableColumn,
)

_TYPE_QUESTIONS = {
    "PERFORMANCE_PROBLEM": PERFORMANCE_PROBLEM_QUESTIONS,
    "NEW_SYSTEM": NEW_SYSTEM_QUESTIONS,
    "COMPLIANCE": COMPLIANCE_QUESTIONS,
    "ROLE_CHANGE": ROLE_CHANGE_QUESTIONS,
}

ALL_QUESTIONS = (
    SHARED_QUESTIONS
    + PERFORMANCE_PROBLEM_QUESTIONS
    + NEW_SYSTEM_QUESTIONS
    + COMPLIANCE_QUESTIONS
    + ROLE_CHANGE_QUESTIONS
    + LEARNER_PROFILE_QUESTIONS
)

QUESTION_MAP = {q.id: q for q in ALL_QUESTIONS}


def is_training_type(value) -> bool:
    return value in _TYPE_QUESTIONS


def get_questions_for_type(training_type: str) -> list[QuestionDefinition]:
    """Ordered question list for *training_type*.

    An unknown type yields only the shared questions that apply to it.
    """
    shared = [q for q in SHARED_QUESTIONS if q.applies(training_type)]
    learner_profile = [q for q in LEARNER_PROFILE_QUESTIONS if q.applies(training_type)]
    type_specific = list(_TYPE_QUESTIONS.get(training_type, ()))

    return sorted(
        shared + learner_profile + type_specific, key=lambda q: q.display_order,
    )


__all__ = [
    "ALL_QUESTIONS",
    "FIELD_TYPES",
    "QUESTION_MAP",
    "TRAINING_TYPES",
    "TRAINING_TYPE_LABELS",
    "ConditionalRule",
    "QuestionDefinition",
    "TableColumn",
    "get_questions_for_type",
    "is_training_type",
]
