"""COMPLIANCE questions: Regulation or Policy (200-206)."""

from app.questions.types import QuestionDefinition

_APPLIES = ("COMPLIANCE",)
SECTION = "Regulation or Policy"

COMPLIANCE_QUESTIONS = (
    QuestionDefinition(
        id="COMP_01",
        section=SECTION,
        question_text=(
            "What regulation, law, or policy is driving this training requirement?"
        ),
        id_notes=(
            "Get the specific citation, not a general description. \"OSHA "
            "requirements\" is too vague; \"OSHA 29 CFR 1910.147\" lets you verify "
            "what actually needs to be trained."
        ),
        stakeholder_guidance=(
            "Provide the specific regulation, law, standard, or internal policy that "
            "requires this training. Include reference numbers or document names if "
            "available."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=200,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_02",
        section=SECTION,
        question_text="What specifically changed, and why does it require training?",
        id_notes=(
            "The scope of change determines training scope. An annual refresher with "
            "no changes shifts the design toward reinforcement and assessment."
        ),
        stakeholder_guidance=(
            "Describe what's new or different. If this is an annual refresher with "
            "no changes, say so."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=201,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_03",
        section=SECTION,
        question_text=(
            "By what date must all affected employees complete this training?"
        ),
        id_notes=(
            "Compliance deadlines are hard stops. Confirm whether the date is a "
            "regulatory deadline, an internal target or an audit date."
        ),
        stakeholder_guidance=(
            "Provide the hard deadline for training completion. Is this date set by "
            "the regulation itself, by an upcoming audit, or by internal policy?"
        ),
        field_type="DATE_WITH_TEXT",
        required=True,
        display_order=202,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_04",
        section=SECTION,
        question_text=(
            "What happens if employees don't complete this training or don't comply "
            "with the policy?"
        ),
        id_notes=(
            "Calibrates urgency and rigor: casual awareness versus assessed "
            "certification with documented proof of competency."
        ),
        stakeholder_guidance=(
            "Describe what's at stake for the individual, the team, and the "
            "organization."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=203,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_05",
        section=SECTION,
        question_text=(
            "Is there a formal attestation, certification, or assessment requirement?"
        ),
        id_notes=(
            "Graded assessment versus completion stamp. Clarify whether the "
            "attestation is a regulatory requirement or organizational policy."
        ),
        id_notes_extended=(
            "**Assessment Strategy by Requirement**\n\n"
            "Scored assessment: scenario-based items with a documented passing "
            "threshold. Signed attestation: acknowledgment captured after content, "
            "stored with the completion record. Both: assessment first, attestation "
            "on pass. Completion only: lightweight knowledge checks, no gate."
        ),
        stakeholder_guidance=(
            "Does the regulation or policy require proof that employees understood "
            "the content, like a test, a signed acknowledgment, or a certification?"
        ),
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "Yes — scored assessment with minimum passing score",
            "Yes — signed attestation / acknowledgment form",
            "Yes — both assessment and attestation",
            "No — completion tracking is sufficient",
            "Unsure — I need to verify the requirement",
        ),
        display_order=204,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_06",
        section=SECTION,
        question_text=(
            "What specific behaviors or actions does this policy require of "
            "employees?"
        ),
        id_notes=(
            "Move beyond \"understand the policy\". These behaviors become learning "
            "objectives and drive scenario design."
        ),
        stakeholder_guidance=(
            "List the specific actions employees must take (or stop doing) to comply "
            "with this policy."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=205,
        applies_to=_APPLIES,
    ),
    QuestionDefinition(
        id="COMP_07",
        section=SECTION,
        question_text=(
            "Is this training a one-time requirement, or does it need to be repeated "
            "on a schedule?"
        ),
        id_notes=(
            "Recurring training should be lighter and assessment-focused on repeat "
            "cycles. Flag for the content maintenance plan."
        ),
        stakeholder_guidance="Will this training need to be taken again periodically?",
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "One-time only",
            "Annual refresher",
            "Every 2-3 years",
            "Triggered by policy updates (as-needed)",
            "Unsure — I need to check the regulation",
        ),
        display_order=206,
        applies_to=_APPLIES,
    ),
)
