"""ROLE_CHANGE questions: New Role & Responsibilities (200-206)."""

from app.questions.types import QuestionDefinition

_APPLIES = ("ROLE_CHANGE",)
SECTION = "New Role & Responsibilities"


def _q(id, display_order, question_text, id_notes, guidance, required=True):
    return QuestionDefinition(
        id=id,
        section=SECTION,
        question_text=question_text,
        id_notes=id_notes,
        stakeholder_guidance=guidance,
        field_type="LONG_TEXT",
        required=required,
        display_order=display_order,
        applies_to=_APPLIES,
    )


ROLE_CHANGE_QUESTIONS = (
    _q(
        "ROLE_01", 200,
        "Describe the role change. Is this a promotion, lateral move, new "
        "responsibilities being added, or a restructuring?",
        "Promotions need leadership skills, lateral moves need technical "
        "reskilling, restructurings may also need change management.",
        "Tell us what's changing about the role and why.",
    ),
    _q(
        "ROLE_02", 201,
        "What specific new tasks, responsibilities, or decisions will these "
        "employees need to handle?",
        "Task analysis seed focused on role competencies. \"Manage people\" is too "
        "vague; push for concrete tasks.",
        "List the new or expanded responsibilities as specifically as possible.",
    ),
    _q(
        "ROLE_03", 202,
        "What relevant skills, knowledge, or experience do these employees already "
        "have?",
        "Defines the starting point so you design for the actual gap.",
        "Describe what these employees already know or can do that's relevant to "
        "their new role.",
    ),
    _q(
        "ROLE_04", 203,
        "How will you evaluate whether someone is ready to perform in the expanded "
        "role?",
        "Shapes assessment strategy. \"No formal evaluation\" is a recommendation "
        "opportunity.",
        "How will managers know that someone is ready to take on the new "
        "responsibilities?",
    ),
    _q(
        "ROLE_05", 204,
        "When does this role change take effect, and what does the transition "
        "period look like?",
        "A gradual handoff allows blended learning; an abrupt switch needs "
        "survival-level training now and development later.",
        "Describe the timeline for the transition.",
    ),
    _q(
        "ROLE_06", 205,
        "What support will be available to help people succeed in the new role "
        "beyond training?",
        "Surfaces the support ecosystem: mentoring, coaching, peer groups. Gaps are "
        "findings.",
        "Beyond training, what will help these employees succeed?",
        required=False,
    ),
    _q(
        "ROLE_07", 206,
        "How will you measure success? What would tell you this role transition "
        "worked?",
        "Success metrics for the transition over time. Connect to ROLE_04: that "
        "measures readiness, this measures whether the transition worked.",
        "How will you know this role transition was truly successful over time?",
    ),
)
