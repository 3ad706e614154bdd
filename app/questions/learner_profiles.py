"""Learner profile questions (display order 500+).

Type-specific audience sections:
    "Who's Affected"       PERFORMANCE_PROBLEM   LP_PERF_01..06B
    "Who Must Comply"      COMPLIANCE            LP_COMP_01..03
    "Who's Transitioning"  ROLE_CHANGE           LP_ROLE_01..03

LP_PERF_06 is asked unconditionally so that LP_PERF_06B's condition points at
a plain question; conditionals never chain.
"""

from app.questions.types import ConditionalRule, QuestionDefinition, TableColumn

DESCRIBE_BELOW = "Yes (please describe below)"
CHAMPIONS_YES = "Yes — Who? (describe below)"

_ROLE_HEADCOUNT_COLUMNS = (
    TableColumn("role", "Role / Title"),
    TableColumn("headcount", "Approx. Headcount"),
    TableColumn("frequency", "Frequency (Daily / Weekly / Occasionally)"),
)

_PERF = ("PERFORMANCE_PROBLEM",)
_COMP = ("COMPLIANCE",)
_ROLE = ("ROLE_CHANGE",)

PERF_SECTION = "Who's Affected"
COMP_SECTION = "Who Must Comply"
ROLE_SECTION = "Who's Transitioning"

LEARNER_PROFILE_QUESTIONS = (
    # ── Performance problem ─────────────────────────────────────────────────
    QuestionDefinition(
        id="LP_PERF_01",
        section=PERF_SECTION,
        question_text=(
            "What job roles or groups are experiencing this performance issue? For "
            "each, provide approximate headcount and how often they perform the "
            "affected tasks."
        ),
        id_notes=(
            "Not everyone in a role may have the same problem. Is this the entire "
            "team or a subset? If a subset, what distinguishes low performers from "
            "high performers? That distinction becomes your training content."
        ),
        stakeholder_guidance=(
            "Tell us which roles are affected and how many people. Include how often "
            "they perform the tasks in question.\n\n"
            "*Examples: \"45 customer service reps, handle these calls daily\" / \"All "
            "12 warehouse leads, comes up during monthly inventory counts\"*"
        ),
        field_type="REPEATING_TABLE",
        table_columns=_ROLE_HEADCOUNT_COLUMNS,
        required=True,
        display_order=500,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_02",
        section=PERF_SECTION,
        question_text=(
            "Do different roles or groups experience this problem differently? Does "
            "one group struggle more than another?"
        ),
        id_notes=(
            "Differential performance across groups is a massive clue. The difference "
            "is rarely knowledge; it is usually environment, tools, management, "
            "workload or training history. Informs one training versus "
            "differentiated paths."
        ),
        stakeholder_guidance=(
            "If some teams or roles have a bigger problem than others, tell us. This "
            "helps us focus where the need is greatest."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=("No, the issue is consistent across roles", DESCRIBE_BELOW),
        display_order=501,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_02B",
        section=PERF_SECTION,
        question_text="Describe how the problem differs across roles or groups.",
        id_notes=(
            "Look for patterns: tenure, shift, location, manager, tools, prior "
            "training. Each pattern is a potential root cause."
        ),
        stakeholder_guidance=(
            "Describe which groups struggle more and any patterns you've noticed."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=502,
        applies_to=_PERF,
        conditional=ConditionalRule("LP_PERF_02", "equals", DESCRIBE_BELOW),
    ),
    QuestionDefinition(
        id="LP_PERF_03",
        section=PERF_SECTION,
        question_text=(
            "How would you describe the current skill or knowledge level of the "
            "affected group related to this topic?"
        ),
        id_notes=(
            "'Never trained' is a knowledge gap and training fits. 'Trained but "
            "didn't stick' means bad training or no reinforcement. 'Know it but "
            "aren't doing it' is motivation or environment; training alone won't fix "
            "it. 'Mixed' suggests a pre-assessment."
        ),
        stakeholder_guidance=(
            "This helps us understand whether people need to learn something new or "
            "whether the issue is applying what they already know."
        ),
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "They've never been trained on this",
            "They were trained but it didn't stick or was a long time ago",
            "They know the correct way but aren't doing it consistently",
            "Mixed — some know it, some don't",
        ),
        display_order=503,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_04",
        section=PERF_SECTION,
        question_text=(
            "How would you describe the affected group's attitude toward this change "
            "or improvement effort?"
        ),
        id_notes=(
            "Resistance is a change management problem, not a training problem. Flag "
            "it as a non-training factor needing a complementary intervention."
        ),
        stakeholder_guidance=(
            "Be honest. Knowing whether people are open to this change helps us "
            "design training that meets them where they are."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=(
            "Supportive — they want to improve and will engage with training",
            "Neutral — they'll participate if asked but aren't pushing for it",
            "Resistant — they don't see the need or disagree with the approach",
            "Mixed — varies across the group",
        ),
        display_order=504,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_05",
        section=PERF_SECTION,
        question_text=(
            "Does the solution involve a new or revised procedure or process that "
            "people will need to follow?"
        ),
        id_notes=(
            "Determines whether you need a train-the-trainer component. A new "
            "procedure means someone learns it first and coaches others."
        ),
        stakeholder_guidance=(
            "Tell us whether this involves learning a new way of doing things or "
            "getting better at the current way."
        ),
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "Yes — new or revised procedure/process",
            "No — it's about doing existing work better or more consistently",
        ),
        display_order=505,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_06",
        section=PERF_SECTION,
        question_text=(
            "Will there be designated team leads, coaches, or Change Champions who "
            "will need to learn the new procedure first and help others adopt it? If "
            "so, have they been identified?"
        ),
        id_notes=(
            "If yes, this creates a separate training track: deeper procedure "
            "training plus coaching skills, typically 2-4 weeks ahead of the general "
            "population. Scope it as a separate deliverable."
        ),
        stakeholder_guidance=(
            "If you plan to have certain people learn the new procedure first so they "
            "can help their teams, let us know who they are."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=(CHAMPIONS_YES, "No", "Not yet determined"),
        display_order=506,
        applies_to=_PERF,
    ),
    QuestionDefinition(
        id="LP_PERF_06B",
        section=PERF_SECTION,
        question_text=(
            "Who are the designated Change Champions or team leads, and when will "
            "they be available for training?"
        ),
        id_notes=(
            "Get names and timeline. Vague plans usually mean no one is prepared "
            "when rollout hits."
        ),
        stakeholder_guidance=(
            "List the people who will be trained first and when they're available."
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=507,
        applies_to=_PERF,
        conditional=ConditionalRule("LP_PERF_06", "equals", CHAMPIONS_YES),
    ),
    # ── Compliance ──────────────────────────────────────────────────────────
    QuestionDefinition(
        id="LP_COMP_01",
        section=COMP_SECTION,
        question_text=(
            "What job roles or groups must complete this compliance training? For "
            "each, provide approximate headcount and how often they encounter the "
            "regulated activity."
        ),
        id_notes=(
            "Compliance training often defaults to 'everyone' when only specific "
            "roles encounter the regulated activity. Separate who performs the "
            "regulated tasks from who only needs awareness."
        ),
        stakeholder_guidance=(
            "List the roles that must complete this training and approximately how "
            "many people. Include how often they encounter the situations this "
            "regulation covers."
        ),
        field_type="REPEATING_TABLE",
        table_columns=_ROLE_HEADCOUNT_COLUMNS,
        required=True,
        display_order=500,
        applies_to=_COMP,
    ),
    QuestionDefinition(
        id="LP_COMP_02",
        section=COMP_SECTION,
        question_text=(
            "Do different roles have different compliance requirements or need "
            "different depth of training?"
        ),
        id_notes=(
            "Almost always yes for real compliance programs. Determines one course "
            "versus tiered tracks. Cross-reference with COMP_06."
        ),
        stakeholder_guidance=(
            "If some roles need deeper or different training than others, describe "
            "that here."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=("No, everyone needs the same training", DESCRIBE_BELOW),
        display_order=501,
        applies_to=_COMP,
    ),
    QuestionDefinition(
        id="LP_COMP_02B",
        section=COMP_SECTION,
        question_text="Describe how training requirements differ by role.",
        id_notes=(
            "Each tier becomes a separate track with its own objectives, content "
            "depth and assessment rigor."
        ),
        stakeholder_guidance="Describe which roles need what level of training.",
        field_type="LONG_TEXT",
        required=True,
        display_order=502,
        applies_to=_COMP,
        conditional=ConditionalRule("LP_COMP_02", "equals", DESCRIBE_BELOW),
    ),
    QuestionDefinition(
        id="LP_COMP_03",
        section=COMP_SECTION,
        question_text=(
            "How would you describe the organization's current attitude toward this "
            "compliance topic?"
        ),
        id_notes=(
            "The biggest predictor of whether compliance training changes behavior "
            "or just generates completion records. Disengaged audiences need "
            "scenario-based, short formats."
        ),
        stakeholder_guidance=(
            "Be candid. If people treat compliance training as a checkbox exercise, "
            "we'd rather know now."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=(
            "Take it seriously — leadership reinforces it and people understand why it matters",
            "Checkbox mentality — people complete it because they have to",
            "Fatigued — too many compliance trainings, people tune out",
            "Unaware — this is a new requirement and people don't know about it yet",
        ),
        display_order=503,
        applies_to=_COMP,
    ),
    # ── Role change ─────────────────────────────────────────────────────────
    QuestionDefinition(
        id="LP_ROLE_01",
        section=ROLE_SECTION,
        question_text=(
            "How many people are transitioning, and what are their current and new "
            "roles?"
        ),
        id_notes=(
            "Small cohorts (3-5) often benefit from coaching over formal training. "
            "Large cohorts (20+) justify structured programs. Note whether this is a "
            "one-time transition or ongoing."
        ),
        stakeholder_guidance=(
            "Tell us how many people are affected, what their current roles are, and "
            "what they're transitioning to."
        ),
        field_type="REPEATING_TABLE",
        table_columns=(
            TableColumn("currentRole", "Current Role"),
            TableColumn("newRole", "New / Expanded Role"),
            TableColumn("headcount", "Headcount"),
        ),
        required=True,
        display_order=500,
        applies_to=_ROLE,
    ),
    QuestionDefinition(
        id="LP_ROLE_02",
        section=ROLE_SECTION,
        question_text=(
            "Is this transition voluntary (e.g., promotion they applied for) or "
            "organizational (e.g., restructuring, added duties)?"
        ),
        id_notes=(
            "Voluntary transitions have built-in motivation. Imposed changes may "
            "carry anxiety; include 'why this matters for you' framing and space for "
            "questions."
        ),
        stakeholder_guidance=(
            "This helps us understand the emotional context of the change."
        ),
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "Voluntary — they chose or applied for this change",
            "Organizational — the change was decided for them",
            "Mixed — some volunteered, some were assigned",
        ),
        display_order=501,
        applies_to=_ROLE,
    ),
    QuestionDefinition(
        id="LP_ROLE_03",
        section=ROLE_SECTION,
        question_text=(
            "How would you describe the group's readiness and confidence level for "
            "this transition?"
        ),
        id_notes=(
            "'Ready but nervous' is the ideal audience. 'Underprepared' signals the "
            "change may be premature or pre-work is needed. 'Mixed' means "
            "pre-assessment or differentiated tracks."
        ),
        stakeholder_guidance=(
            "Be realistic about where these people are starting from."
        ),
        field_type="SINGLE_SELECT",
        required=False,
        options=(
            "Ready and confident — strong foundations, eager to start",
            "Ready but nervous — have the skills but uncertain about the new context",
            "Underprepared — significant skill gaps that training must address",
            "Mixed — varies across the group",
        ),
        display_order=502,
        applies_to=_ROLE,
    ),
)
