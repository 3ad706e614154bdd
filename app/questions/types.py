"""Question catalog value types.

Definitions are frozen dataclasses built once at import time. Two projections
exist: the respondent view (no instructional-designer notes) and the internal
view (notes plus the current response), used by the reviewer detail screen.
"""

from __future__ import annotations

from dataclasses import dataclass, field

TRAINING_TYPES = ("PERFORMANCE_PROBLEM", "NEW_SYSTEM", "COMPLIANCE", "ROLE_CHANGE")

TRAINING_TYPE_LABELS = {
    "PERFORMANCE_PROBLEM": "Performance Problem",
    "NEW_SYSTEM": "New System",
    "COMPLIANCE": "Compliance",
    "ROLE_CHANGE": "Role Change",
}

FIELD_TYPES = (
    "SHORT_TEXT",
    "LONG_TEXT",
    "SINGLE_SELECT",
    "MULTI_SELECT",
    "DATE",
    "DATE_WITH_TEXT",
    "NUMBER",
    "SCALE",
    "REPEATING_TABLE",
)

CONDITIONAL_OPERATORS = ("equals", "not_equals", "includes")

APPLIES_TO_ALL = "ALL"


@dataclass(frozen=True)
class ConditionalRule:
    """Makes a question's requirement depend on another question's answer."""

    question_id: str
    operator: str
    value: str

    def __post_init__(self):
        if self.operator not in CONDITIONAL_OPERATORS:
            raise ValueError(f"Unknown conditional operator: {self.operator}")

    def to_dict(self) -> dict:
        return {
            "question_id": self.question_id,
            "operator": self.operator,
            "value": self.value,
        }


@dataclass(frozen=True)
class TableColumn:
    key: str
    label: str

    def to_dict(self) -> dict:
        return {"key": self.key, "label": self.label}


@dataclass(frozen=True)
class QuestionDefinition:
    """One catalog entry.

    ``applies_to`` is either ``"ALL"`` or a tuple of training types.
    ``id_notes`` / ``id_notes_extended`` are for instructional designers and
    must never reach a respondent.
    """

    id: str
    section: str
    question_text: str
    id_notes: str
    stakeholder_guidance: str
    field_type: str
    required: bool
    display_order: int
    applies_to: str | tuple[str, ...] = APPLIES_TO_ALL
    options: tuple[str, ...] | None = None
    table_columns: tuple[TableColumn, ...] | None = None
    conditional: ConditionalRule | None = None
    id_notes_extended: str | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.field_type not in FIELD_TYPES:
            raise ValueError(f"Unknown field type for {self.id}: {self.field_type}")

    def applies(self, training_type: str) -> bool:
        return self.applies_to == APPLIES_TO_ALL or training_type in self.applies_to

    def _base_dict(self) -> dict:
        return {
            "id": self.id,
            "section": self.section,
            "question_text": self.question_text,
            "stakeholder_guidance": self.stakeholder_guidance,
            "field_type": self.field_type,
            "required": self.required,
            "options": list(self.options) if self.options else None,
            "table_columns": (
                [c.to_dict() for c in self.table_columns] if self.table_columns else None
            ),
            "display_order": self.display_order,
            "conditional": self.conditional.to_dict() if self.conditional else None,
        }

    def respondent_view(self) -> dict:
        """Serialisable form shown to the external stakeholder."""
        return self._base_dict()

    def internal_view(self, response: dict | None = None) -> dict:
        """Serialisable form for reviewers, merged with the current response.

        ``response`` is a ``StakeholderResponse.to_dict()`` or None when the
        question has not been answered yet.
        """
        data = self._base_dict()
        data["id_notes"] = self.id_notes
        data["id_notes_extended"] = self.id_notes_extended
        data["response"] = response
        return data
