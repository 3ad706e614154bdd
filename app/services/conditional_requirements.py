"""
Conditional requirement evaluation.

A question is required when its ``required`` flag is set and, if it carries a
conditional rule, the rule holds against the current answers. Answers are a
plain ``question_id -> value`` snapshot; a missing answer counts as "".

Conditionals are single-level: a conditional question may only reference a
non-conditional question in the same list. ``check_conditional_chains``
enforces this for a resolved question list; ``check_catalog`` runs it for every
training type and is called once at app start-up.
"""

from __future__ import annotations

from app.questions import (
    TRAINING_TYPES,
    ConditionalRule,
    QuestionDefinition,
    get_questions_for_type,
)


def _rule_holds(rule: ConditionalRule, answers: dict[str, str]) -> bool:
    current = answers.get(rule.question_id, "")
    if rule.operator == "equals":
        return current == rule.value
    if rule.operator == "not_equals":
        return current != rule.value
    if rule.operator == "includes":
        return rule.value in current
    raise ValueError(f"Unknown conditional operator: {rule.operator}")


def is_required(question: QuestionDefinition, answers: dict[str, str]) -> bool:
    """True if *question* must be answered given the current *answers*."""
    if not question.required:
        return False
    if question.conditional is None:
        return True
    return _rule_holds(question.conditional, answers)


def find_missing_required(
    questions: list[QuestionDefinition], answers: dict[str, str],
) -> list[dict]:
    """Required questions whose answer is absent or whitespace-only.

    Evaluated once per question, in list order, against the same snapshot.
    """
    missing = []
    for question in questions:
        if not is_required(question, answers):
            continue
        if answers.get(question.id, "").strip():
            continue
        missing.append({
            "question_id": question.id,
            "question_text": question.question_text,
            "section": question.section,
        })
    return missing


def check_conditional_chains(questions: list[QuestionDefinition]) -> None:
    """Raise ValueError if any conditional is chained or dangling."""
    by_id = {q.id: q for q in questions}
    for question in questions:
        rule = question.conditional
        if rule is None:
            continue
        target = by_id.get(rule.question_id)
        if target is None:
            raise ValueError(
                f"{question.id} is conditional on {rule.question_id}, "
                "which is not in the same question list"
            )
        if target.conditional is not None:
            raise ValueError(
                f"{question.id} is conditional on {rule.question_id}, "
                "which is itself conditional"
            )


def check_catalog() -> None:
    """Run ``check_conditional_chains`` over every training type's question list."""
    for training_type in TRAINING_TYPES:
        check_conditional_chains(get_questions_for_type(training_type))
