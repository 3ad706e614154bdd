"""NEW_SYSTEM questions.

Sections:
    About the System        200-203
    Business Justification  300-303
    What Users Need to Do   400-403
"""

from app.questions.types import QuestionDefinition

_APPLIES = ("NEW_SYSTEM",)

ABOUT = "About the System"
JUSTIFICATION = "Business Justification"
TASKS = "What Users Need to Do"


def _q(id, section, display_order, question_text, id_notes, guidance,
       field_type="LONG_TEXT", required=True, id_notes_extended=None):
    return QuestionDefinition(
        id=id,
        section=section,
        question_text=question_text,
        id_notes=id_notes,
        id_notes_extended=id_notes_extended,
        stakeholder_guidance=guidance,
        field_type=field_type,
        required=required,
        display_order=display_order,
        applies_to=_APPLIES,
    )


NEW_SYSTEM_QUESTIONS = (
    _q(
        "SYS_01", ABOUT, 200,
        "What system, software, or tool is being introduced? In one or two "
        "sentences, what is its main purpose?",
        "Get the exact product name and version. Determines whether vendor training "
        "exists and whether you can get sandbox access.",
        "Provide the name of the system being deployed, including version if known. "
        "If it's custom-built, describe what it does.",
        field_type="SHORT_TEXT",
    ),
    _q(
        "SYS_02", ABOUT, 201,
        "What are the system's main functions or capabilities? List the key things "
        "people can do in it.",
        "Capabilities are what the system can do; tasks (SYS_09) are what people "
        "must do. This list is the universe the task questions narrow down.",
        "Think about what the system lets users accomplish, not feature names but "
        "actions. List as many as you can.",
    ),
    _q(
        "SYS_03", ABOUT, 202,
        "What existing tools, systems, or processes does this replace? If it's "
        "entirely new functionality, describe what people do today without it.",
        "The \"from, to\" narrative that anchors the training. Also flags potential "
        "resistance when a beloved tool is replaced.",
        "Help us understand what changes for the learners. Are they switching from "
        "one system to another, or learning something entirely new?",
    ),
    _q(
        "SYS_04", ABOUT, 203,
        "What other systems does this connect to or interact with?",
        "Integration points are scope boundaries and error zones. Handoffs often "
        "need to be taught explicitly.",
        "List any systems that send data to or receive data from the new system.",
        required=False,
    ),
    _q(
        "SYS_05", JUSTIFICATION, 300,
        "What business problem does this system solve? What inefficiency, cost, or "
        "limitation does it address?",
        "Tells you why the organization is spending money on this system, which "
        "determines what the training needs to emphasize.",
        "Help us understand why this system matters. What's broken, slow, "
        "expensive, or missing today that this system fixes?",
    ),
    _q(
        "SYS_06", JUSTIFICATION, 301,
        "What are the consequences if employees struggle to use this system "
        "effectively?",
        "High-consequence scenarios need more training depth, more practice and "
        "more rigorous assessment.",
        "Think about what happens to the business if your internal team can't use "
        "the system well after launch.",
    ),
    _q(
        "SYS_07", JUSTIFICATION, 302,
        "If this system has external users (customers, partners, vendors), what are "
        "the consequences if they struggle to use it?",
        "Optional because not all systems have external users. External failures "
        "often reveal a need for customer-facing help material.",
        "Skip this if your system is internal only. If there are external users, "
        "think about what happens when they get stuck.",
        required=False,
    ),
    _q(
        "SYS_08", JUSTIFICATION, 303,
        "How will you measure success after launch? What specific metrics or "
        "observable changes would tell you this worked?",
        "The most important question for new system deployments. Push for "
        "quantifiable metrics, e.g. \"self-service usage reaches 60% within 90 days.\"",
        "Think beyond \"people completed the training.\" What business metric would "
        "improve? What would you see people doing differently?",
        id_notes_extended=(
            "**Adoption Metrics**\n\n"
            "Separate usage (logins, feature adoption), proficiency (error rates, "
            "help-desk tickets) and business results (cycle time, satisfaction). "
            "Map each metric to a training outcome you can influence."
        ),
    ),
    _q(
        "SYS_09", TASKS, 400,
        "What are the main tasks or workflows people will need to perform in the "
        "new system?",
        "Your task analysis seed. Translate feature lists into action-oriented "
        "tasks during review.",
        "Think about a typical day or week. What does someone actually do in this "
        "system? If different roles do different things, list them separately.",
    ),
    _q(
        "SYS_10", TASKS, 401,
        "What are the most complex or high-stakes situations? Where would mistakes "
        "be costly or visible?",
        "Where training needs to be strongest. Prime candidates for job aids and "
        "realistic simulations.",
        "Help us identify where we need to focus extra training attention. What "
        "tasks, if done wrong, would cause the most damage?",
    ),
    _q(
        "SYS_11", TASKS, 402,
        "What does \"proficient use\" look like by the go-live date? What should "
        "people be able to do independently?",
        "Defines minimum viable competency and therefore training scope. Everything "
        "below this line is Phase 2.",
        "Be realistic, we can always build advanced training later. Focus on the "
        "must-haves for Day 1.",
    ),
    _q(
        "SYS_12", TASKS, 403,
        "What does proficient performance look like 30 days after launch? What "
        "additional capabilities should people have by then?",
        "If 30-day expectations go well beyond Day 1, plan phased delivery rather "
        "than one pre-launch session.",
        "After a month of use, what should people be able to do beyond the Day 1 "
        "basics?",
        required=False,
    ),
)
