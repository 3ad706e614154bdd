"""Project Context questions asked for every training type (display order 1-11)."""

from app.questions.types import ConditionalRule, QuestionDefinition

SECTION = "Project Context"

SHARED_03_OTHER = "Other (please describe in the next field)"

SHARED_QUESTIONS = (
    QuestionDefinition(
        id="SHARED_01",
        section=SECTION,
        question_text="What is the name of this project or initiative?",
        id_notes=(
            "Use this as the display name in the project list. If the stakeholder "
            "gives a vague name like \"training\" or \"new system,\" refine it during "
            "review. This is a working label, not a formal title."
        ),
        stakeholder_guidance=(
            "Give this project a short, descriptive name so everyone can reference it "
            "easily. It doesn't need to be the final course title.\n"
            "*Examples: \"2026 Salesforce Migration Training,\" \"Q3 Safety Policy "
            "Update,\" \"New Hire Onboarding Redesign\"*"
        ),
        field_type="SHORT_TEXT",
        required=True,
        display_order=1,
    ),
    QuestionDefinition(
        id="SHARED_02",
        section=SECTION,
        question_text="Who is the executive sponsor or leader requesting this training?",
        id_notes=(
            "This is the person with budget authority and decision-making power, not "
            "necessarily the SME or the person filling out this form. Knowing the "
            "sponsor tells you the organizational priority and who signs off on the "
            "final product. If the stakeholder *is* the sponsor, note it during review."
        ),
        stakeholder_guidance=(
            "This is the leader who initiated or approved this training request. "
            "They're typically the person accountable for the business outcome the "
            "training supports.\n"
            "*Examples: \"Maria Chen, VP of Operations,\" \"Tom Parker, Director of "
            "Compliance\"*"
        ),
        field_type="SHORT_TEXT",
        required=True,
        display_order=2,
    ),
    QuestionDefinition(
        id="SHARED_03",
        section=SECTION,
        question_text="What is your role in relation to this training project?",
        id_notes=(
            "This tells you who you're actually talking to. A sponsor gives strategic "
            "answers, a manager operational ones, an SME technical ones. Calibrate how "
            "you read every other response based on this answer. If they select "
            "\"Other,\" dig into it during review: they might be filling this out on "
            "behalf of someone else."
        ),
        stakeholder_guidance=(
            "Select the role that best describes your relationship to this project. "
            "This helps us tailor follow-up questions and know who to contact for "
            "specific types of information."
        ),
        field_type="SINGLE_SELECT",
        required=True,
        options=(
            "Executive Sponsor (I approved or initiated this request)",
            "Department Manager (I manage the team that needs training)",
            "Subject Matter Expert (I have deep knowledge of the content area)",
            "Project Manager (I'm coordinating the initiative this training supports)",
            SHARED_03_OTHER,
        ),
        display_order=3,
    ),
    QuestionDefinition(
        id="SHARED_04",
        section=SECTION,
        question_text="Please describe your role in this project.",
        id_notes=(
            "Only appears if they select \"Other\" in SHARED_03. Catches HR business "
            "partners, external consultants and assistants acting as proxies."
        ),
        stakeholder_guidance=(
            "Briefly describe how you're involved in this project and what "
            "perspective you bring."
        ),
        field_type="SHORT_TEXT",
        required=True,
        display_order=4,
        conditional=ConditionalRule("SHARED_03", "includes", "Other"),
    ),
    QuestionDefinition(
        id="SHARED_05",
        section=SECTION,
        question_text=(
            "Who needs this training? Describe the audience as specifically as you can."
        ),
        id_notes=(
            "You need enough detail to build a learner persona. Push for specifics if "
            "the answer is \"everyone\" or \"the team.\" Extract job titles, experience "
            "level, team size, geographic spread and whether the audience is mixed. "
            "Multiple distinct audiences often signal differentiated training paths."
        ),
        stakeholder_guidance=(
            "Tell us about the people who will take this training. Include details "
            "like job titles, departments, experience levels, and approximate number "
            "of learners.\n"
            "*Example: \"45 field service technicians across 3 regions. Most have 2-5 "
            "years experience with our legacy system. About 10 are new hires with no "
            "prior exposure.\"*"
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=5,
    ),
    QuestionDefinition(
        id="SHARED_06",
        section=SECTION,
        question_text=(
            "What is the target date or deadline for this training to be available?"
        ),
        id_notes=(
            "A hard deadline (compliance date, system go-live) and a soft goal "
            "(\"sometime in Q2\") constrain the project very differently. Flag hard "
            "deadlines prominently: they dictate scope, format and whether phased "
            "delivery makes sense. An unrealistic timeline is a critical finding."
        ),
        stakeholder_guidance=(
            "If there's a specific date this training needs to be ready (like a system "
            "go-live or regulatory deadline), enter it here. If it's more of a general "
            "timeframe, describe that instead.\n"
            "*Examples: \"March 15, 2026 (system go-live),\" \"By end of Q2, flexible "
            "on exact date,\" \"ASAP, incidents are happening now\"*"
        ),
        field_type="SHORT_TEXT",
        required=True,
        display_order=6,
    ),
    QuestionDefinition(
        id="SHARED_07",
        section=SECTION,
        question_text=(
            "How will you know this training was successful? What would be different "
            "afterward?"
        ),
        id_notes=(
            "The single most important question on the form. Vague answers like "
            "\"people will understand the new system\" need to be translated into "
            "observable behaviors during review. Feeds KPI definitions, the "
            "evaluation plan and objective writing."
        ),
        id_notes_extended=(
            "**Measuring Training Impact: The Four Levels**\n\n"
            "**Level 1, Reaction:** did learners like it? Tells you almost nothing "
            "about whether the training worked.\n\n"
            "**Level 2, Learning:** did they acquire the skill? Still measures the "
            "classroom, not the job.\n\n"
            "**Level 3, Behavior:** are they doing things differently on the job? The "
            "first level that measures real impact.\n\n"
            "**Level 4, Results:** did business metrics improve? What the sponsor "
            "cares about.\n\n"
            "If the answer is \"good feedback scores,\" push for Level 3. If it is "
            "\"I don't know, I just need them trained,\" define success with the "
            "sponsor before design begins."
        ),
        stakeholder_guidance=(
            "Think beyond \"people completed the training.\" What would you see people "
            "doing differently on the job? What business metric would improve?\n"
            "*Examples: \"Call resolution time drops from 12 minutes to 8 minutes,\" "
            "\"Zero compliance findings in the next audit\"*"
        ),
        field_type="LONG_TEXT",
        required=True,
        display_order=7,
    ),
    QuestionDefinition(
        id="SHARED_08",
        section=SECTION,
        question_text=(
            "Does any training, documentation, or reference material already exist "
            "for this topic?"
        ),
        id_notes=(
            "Tells you whether you're building from scratch or redesigning. Ask for "
            "access to anything they mention. If someone else built the old training, "
            "tread carefully on criticism."
        ),
        stakeholder_guidance=(
            "List any existing training courses, job aids, procedure documents, SOPs, "
            "or reference materials related to this topic, even if they're outdated.\n"
            "*Examples: \"There's a 2023 onboarding deck in SharePoint,\" \"Nothing "
            "formal, just tribal knowledge\"*"
        ),
        field_type="LONG_TEXT",
        required=False,
        display_order=8,
    ),
    QuestionDefinition(
        id="SHARED_09",
        section=SECTION,
        question_text=(
            "Are there any constraints, limitations, or special considerations we "
            "should know about?"
        ),
        id_notes=(
            "Catch-all for things that affect design decisions: budget limits, "
            "technology restrictions, union rules, language needs, accessibility "
            "requirements and shift schedules that limit seat time."
        ),
        stakeholder_guidance=(
            "Tell us about anything that might affect how we design or deliver this "
            "training. Think about budget, technology, scheduling, language, "
            "accessibility, or organizational factors.\n"
            "*Examples: \"Learners only have 30-minute windows between shifts,\" "
            "\"Must be available in English and Spanish\"*"
        ),
        field_type="LONG_TEXT",
        required=False,
        display_order=9,
    ),
    QuestionDefinition(
        id="SHARED_10",
        section=SECTION,
        question_text="Do you have a preference for how this training is delivered?",
        id_notes=(
            "Preferences aren't design decisions. Knowing their expectations helps "
            "you manage the conversation when the analysis points elsewhere. Flag "
            "significant mismatches between preference and recommendation."
        ),
        id_notes_extended=(
            "**Delivery Format Selection Guide**\n\n"
            "| Format | Best For | Watch Out For |\n"
            "|---|---|---|\n"
            "| Self-paced eLearning | Consistent procedural content, large audiences | "
            "Content that needs discussion or feedback |\n"
            "| Virtual instructor-led | Complex topics, live scenario practice | "
            "Scheduling across shifts and time zones |\n"
            "| In-person classroom | Hands-on skills, equipment operation | "
            "Expensive at scale |\n"
            "| Blended | Complex skills needing practice | More design effort |\n"
            "| Job aid | Infrequent tasks, long procedures | Not training, performance "
            "support |\n"
            "| Video | Software demos, process overviews | Expensive to update |\n"
            "| On-the-job coaching | Role transitions, judgment skills | Depends on "
            "coach quality |"
        ),
        stakeholder_guidance=(
            "Select any delivery formats you think would work well for this audience. "
            "The instructional design team will make a final recommendation based on "
            "the full analysis."
        ),
        field_type="MULTI_SELECT",
        required=False,
        options=(
            "Self-paced eLearning",
            "Virtual instructor-led (live online session)",
            "In-person classroom",
            "Blended (combination of formats)",
            "Job aid / quick reference guide",
            "Video / recorded walkthrough",
            "On-the-job coaching or mentoring",
            "No preference — recommend what works best",
        ),
        display_order=10,
    ),
    QuestionDefinition(
        id="SHARED_11",
        section=SECTION,
        question_text=(
            "Who else should we involve in the analysis or design of this training? "
            "Please distinguish between people who have expertise to contribute and "
            "people who need approval authority."
        ),
        id_notes=(
            "Builds your stakeholder map. Watch for the voices they don't mention, "
            "such as the frontline supervisor or the IT admin. Watch for the \"too "
            "many approvers\" trap too: with three or more names, set up a RACI "
            "agreement before the first review cycle."
        ),
        id_notes_extended=(
            "**RACI Framework for Training Projects**\n\n"
            "**R, Responsible:** does the work (the instructional designer).\n\n"
            "**A, Accountable:** makes the final decision. Only one per deliverable.\n\n"
            "**C, Consulted:** provides expert input, no veto.\n\n"
            "**I, Informed:** gets updates, not part of the decision."
        ),
        stakeholder_guidance=(
            "List anyone who has relevant expertise, will need to review or approve "
            "the training, or represents the learner perspective. Include their name, "
            "role, and the best way to contact them.\n"
            "*Examples: \"Jake Torres, Senior Analyst, input/expertise,\" \"Maria "
            "Lopez, VP Operations, final approver\"*"
        ),
        field_type="LONG_TEXT",
        required=False,
        display_order=11,
    ),
)
