"""
Tests for the conditional requirement evaluator.

Pure functions over catalog definitions and an answers dict; no database.
The last class checks that a chained catalog stops the app factory.
"""

import pytest

from app import create_app
from app.questions import QUESTION_MAP, ConditionalRule, QuestionDefinition
from app.services import conditional_requirements
from app.services.conditional_requirements import (
    check_catalog,
    check_conditional_chains,
    find_missing_required,
    is_required,
)


def _q(qid, required=True, conditional=None):
    return QuestionDefinition(
        id=qid, section="Test", question_text=f"Question {qid}", id_notes="",
        stakeholder_guidance="", field_type="SHORT_TEXT", required=required,
        display_order=1, conditional=conditional,
    )


class TestIsRequired:

    def test_plain_required(self):
        assert is_required(_q("A"), {})

    def test_optional(self):
        assert not is_required(_q("A", required=False), {})

    def test_equals_false_trigger_not_required(self):
        q = QUESTION_MAP["LP_PERF_02B"]
        assert not is_required(q, {"LP_PERF_02": "No"})
        assert not is_required(q, {})

    def test_equals_true_trigger_required(self):
        q = QUESTION_MAP["LP_PERF_02B"]
        assert is_required(q, {"LP_PERF_02": "Yes (please describe below)"})

    def test_includes_is_substring(self):
        q = QUESTION_MAP["SHARED_04"]
        assert is_required(q, {"SHARED_03": "Other (please describe in the next field)"})
        assert not is_required(q, {"SHARED_03": "Project Manager (I'm coordinating the initiative this training supports)"})

    def test_not_equals(self):
        q = _q("B", conditional=ConditionalRule("A", "not_equals", "No"))
        assert is_required(q, {"A": "Yes"})
        assert is_required(q, {})
        assert not is_required(q, {"A": "No"})

    def test_optional_flag_wins_over_true_trigger(self):
        q = _q("B", required=False, conditional=ConditionalRule("A", "equals", "Yes"))
        assert not is_required(q, {"A": "Yes"})


class TestFindMissingRequired:

    def test_lists_blank_and_whitespace(self):
        questions = [_q("A"), _q("B"), _q("C", required=False)]
        missing = find_missing_required(questions, {"A": "   "})
        assert [m["question_id"] for m in missing] == ["A", "B"]
        assert missing[0] == {"question_id": "A", "question_text": "Question A", "section": "Test"}

    def test_nothing_missing(self):
        assert find_missing_required([_q("A")], {"A": "done"}) == []

    def test_conditional_follow_up_only_when_triggered(self):
        questions = [
            _q("A", required=False),
            _q("B", conditional=ConditionalRule("A", "equals", "Yes")),
        ]
        assert find_missing_required(questions, {"A": "No"}) == []
        missing = find_missing_required(questions, {"A": "Yes"})
        assert [m["question_id"] for m in missing] == ["B"]

    def test_preserves_list_order(self):
        questions = [_q("Z"), _q("A"), _q("M")]
        assert [m["question_id"] for m in find_missing_required(questions, {})] == ["Z", "A", "M"]


class TestCheckConditionalChains:

    def test_single_level_ok(self):
        check_conditional_chains([
            _q("A"), _q("B", conditional=ConditionalRule("A", "equals", "x")),
        ])

    def test_chain_rejected(self):
        with pytest.raises(ValueError, match="itself conditional"):
            check_conditional_chains([
                _q("A"),
                _q("B", conditional=ConditionalRule("A", "equals", "x")),
                _q("C", conditional=ConditionalRule("B", "equals", "y")),
            ])

    def test_dangling_reference_rejected(self):
        with pytest.raises(ValueError, match="not in the same question list"):
            check_conditional_chains([_q("B", conditional=ConditionalRule("A", "equals", "x"))])


class TestCatalogCheckAtStartup:

    def test_shipped_catalog_passes(self):
        check_catalog()

    def test_chained_catalog_blocks_app_start(self, monkeypatch):
        chained = [
            _q("A"),
            _q("B", conditional=ConditionalRule("A", "equals", "x")),
            _q("C", conditional=ConditionalRule("B", "equals", "y")),
        ]
        monkeypatch.setattr(
            conditional_requirements, "get_questions_for_type", lambda training_type: chained,
        )
        with pytest.raises(ValueError, match="itself conditional"):
            create_app("testing")
