"""
Tests for the static question catalog (app/questions).

Covers:
  - get_questions_for_type: shared + learner-profile + type-specific, ordered
  - per-type question counts and ordering by display_order
  - respondent view never carries designer notes; internal view does
  - every resolved list passes the single-level conditional check
  - ids are unique across the catalog
"""

import pytest

from app.questions import (
    ALL_QUESTIONS,
    QUESTION_MAP,
    TRAINING_TYPES,
    ConditionalRule,
    QuestionDefinition,
    get_questions_for_type,
    is_training_type,
)
from app.services.conditional_requirements import check_conditional_chains


EXPECTED_COUNTS = {
    "PERFORMANCE_PROBLEM": 27,
    "NEW_SYSTEM": 23,
    "COMPLIANCE": 22,
    "ROLE_CHANGE": 21,
}


class TestQuestionsForType:

    @pytest.mark.parametrize("training_type", TRAINING_TYPES)
    def test_count(self, training_type):
        assert len(get_questions_for_type(training_type)) == EXPECTED_COUNTS[training_type]

    @pytest.mark.parametrize("training_type", TRAINING_TYPES)
    def test_sorted_by_display_order(self, training_type):
        orders = [q.display_order for q in get_questions_for_type(training_type)]
        assert orders == sorted(orders)

    @pytest.mark.parametrize("training_type", TRAINING_TYPES)
    def test_shared_questions_first(self, training_type):
        ids = [q.id for q in get_questions_for_type(training_type)]
        assert ids[:11] == [f"SHARED_{n:02d}" for n in range(1, 12)]

    def test_performance_problem_learner_profile_after_type_questions(self):
        ids = [q.id for q in get_questions_for_type("PERFORMANCE_PROBLEM")]
        assert ids.index("PERF_08") < ids.index("LP_PERF_01")
        assert ids[-2:] == ["LP_PERF_06", "LP_PERF_06B"]

    def test_new_system_has_no_learner_profile(self):
        ids = [q.id for q in get_questions_for_type("NEW_SYSTEM")]
        assert not [i for i in ids if i.startswith("LP_")]

    def test_learner_profiles_do_not_leak_across_types(self):
        ids = {q.id for q in get_questions_for_type("COMPLIANCE")}
        assert "LP_COMP_01" in ids
        assert "LP_PERF_01" not in ids
        assert "LP_ROLE_01" not in ids

    def test_deterministic(self):
        first = [q.id for q in get_questions_for_type("ROLE_CHANGE")]
        second = [q.id for q in get_questions_for_type("ROLE_CHANGE")]
        assert first == second

    def test_unknown_type_yields_shared_only(self):
        ids = [q.id for q in get_questions_for_type("UNKNOWN")]
        assert ids == [f"SHARED_{n:02d}" for n in range(1, 12)]

    def test_is_training_type(self):
        assert is_training_type("COMPLIANCE")
        assert not is_training_type("compliance")
        assert not is_training_type(None)


class TestCatalogIntegrity:

    def test_ids_unique(self):
        ids = [q.id for q in ALL_QUESTIONS]
        assert len(ids) == len(set(ids))
        assert set(QUESTION_MAP) == set(ids)

    @pytest.mark.parametrize("training_type", TRAINING_TYPES)
    def test_conditionals_are_single_level(self, training_type):
        check_conditional_chains(get_questions_for_type(training_type))

    def test_select_questions_have_options(self):
        for q in ALL_QUESTIONS:
            if q.field_type in ("SINGLE_SELECT", "MULTI_SELECT"):
                assert q.options, q.id

    def test_tables_have_columns(self):
        for q in ALL_QUESTIONS:
            if q.field_type == "REPEATING_TABLE":
                assert q.table_columns, q.id

    def test_conditional_targets_are_options(self):
        for q in ALL_QUESTIONS:
            rule = q.conditional
            if rule is None or rule.operator != "equals":
                continue
            assert rule.value in QUESTION_MAP[rule.question_id].options, q.id

    def test_role_change_table_columns(self):
        cols = [c.key for c in QUESTION_MAP["LP_ROLE_01"].table_columns]
        assert cols == ["currentRole", "newRole", "headcount"]


class TestViews:

    def test_respondent_view_hides_notes(self):
        for q in get_questions_for_type("PERFORMANCE_PROBLEM"):
            view = q.respondent_view()
            assert "id_notes" not in view
            assert "id_notes_extended" not in view
            assert view["question_text"] == q.question_text

    def test_internal_view_includes_notes_and_response(self):
        q = QUESTION_MAP["SHARED_01"]
        response = {"question_id": "SHARED_01", "value": "Ada"}
        view = q.internal_view(response)
        assert view["id_notes"] == q.id_notes
        assert view["response"] == response

    def test_internal_view_unanswered(self):
        assert QUESTION_MAP["SHARED_01"].internal_view()["response"] is None

    def test_conditional_serialised(self):
        view = QUESTION_MAP["LP_PERF_02B"].respondent_view()
        assert view["conditional"] == {
            "question_id": "LP_PERF_02",
            "operator": "equals",
            "value": "Yes (please describe below)",
        }


class TestValueTypes:

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValueError):
            ConditionalRule("SHARED_03", "matches", "Other")

    def test_unknown_field_type_rejected(self):
        with pytest.raises(ValueError):
            QuestionDefinition(
                id="X_01", section="S", question_text="?", id_notes="",
                stakeholder_guidance="", field_type="RICH_TEXT", required=True,
                display_order=1,
            )

    def test_applies(self):
        assert QUESTION_MAP["SHARED_01"].applies("NEW_SYSTEM")
        assert QUESTION_MAP["LP_PERF_01"].applies("PERFORMANCE_PROBLEM")
        assert not QUESTION_MAP["LP_PERF_01"].applies("NEW_SYSTEM")
