"""PERFORMANCE_PROBLEM questions: Performance & Impact, Success Criteria (200-207)."""

from app.questions.types import QuestionDefinition

_APPLIES = ("PERFORMANCE_PROBLEM",)


def _q(id, section, display_order, question_text, id_notes, guidance,
       required=True, id_notes_extended=None):
    return QuestionDefinition(
        id=id,
        section=section,
        question_text=question_text,
        id_notes=id_notes,
        id_notes_extended=id_notes_extended,
        stakeholder_guidance=guidance,
        field_type="LONG_TEXT",
        required=required,
        display_order=display_order,
        applies_to=_APPLIES,
    )


IMPACT = "Performance & Impact"
SUCCESS = "Success Criteria"

PERFORMANCE_PROBLEM_QUESTIONS = (
    _q(
        "PERF_01", IMPACT, 200,
        "What specific problem are you trying to solve, or what opportunity are you "
        "trying to capture?",
        "The \"why are we doing this?\" question. You want a business problem, not a "
        "training request. \"We need a course on X\" is a solution posing as a "
        "problem; dig into the business impact during review.",
        "Describe the business situation driving this request. Focus on what's going "
        "wrong (or what opportunity exists), not on the training itself.",
    ),
    _q(
        "PERF_02", IMPACT, 201,
        "What are people doing now, and what should they be doing instead?",
        "The performance gap in behavioral terms. \"They don't understand X\" is a "
        "guess at the cause, not a gap. Push for observable behaviors.",
        "Describe the gap between current and desired performance in terms of what "
        "people actually *do* on the job.",
        id_notes_extended=(
            "**Observable Behaviors vs. Knowledge Statements**\n\n"
            "Translate \"they don't understand the pricing model\" into \"reps quote "
            "incorrect prices.\" The acid test: could a manager walk past someone's "
            "desk and see whether they're doing this correctly? When stakeholders "
            "can't describe the gap, ask for a recent critical incident."
        ),
    ),
    _q(
        "PERF_03", IMPACT, 202,
        "What is the measurable impact of this problem on the business?",
        "You need numbers or quantifiable consequences. This defines the ROI story "
        "and the business-level metrics for evaluation. An unquantifiable impact is "
        "a legitimate finding; document it.",
        "Help us understand the scale of this problem using numbers where possible. "
        "Think about costs, time, quality, customer impact, risk, or lost revenue.",
    ),
    _q(
        "PERF_04", IMPACT, 203,
        "Why do you think people aren't performing as expected? What's getting in "
        "the way?",
        "The classic \"is it a training problem?\" filter. If the root cause isn't a "
        "skill or knowledge gap, training alone won't fix it.",
        "In your opinion, what's causing the performance gap? Consider whether "
        "people have the right tools, clear expectations, enough time, proper "
        "feedback, or organizational support.",
        id_notes_extended=(
            "**Is This a Training Problem?**\n\n"
            "Ask: could they do it if their life depended on it? If yes, the cause is "
            "environmental or motivational (no feedback, no consequences, obstacles). "
            "If no, training or performance support is part of the solution. Most "
            "real problems are a mix; document both components."
        ),
    ),
    _q(
        "PERF_05", IMPACT, 204,
        "What has already been done to address this problem?",
        "Prevents recommending something that already failed. If training was "
        "already tried, either the training was bad or training isn't the solution.",
        "List any steps already taken to fix this problem: training, coaching, new "
        "tools, process changes, communications.",
        required=False,
    ),
    _q(
        "PERF_06", IMPACT, 205,
        "Are there factors outside of training that contribute to this problem?",
        "Almost no performance problem is fully solvable by training. Document "
        "environmental factors as complementary interventions.",
        "Training is often just one part of the solution. Are there other factors "
        "that need to be addressed alongside the training for it to be effective?",
        required=False,
        id_notes_extended=(
            "**Training as % of Solution**\n\n"
            "Categorize each contributing cause from PERF_04 and PERF_06 as "
            "addressable by training or not, then estimate the share of the gap "
            "training can close. Present the split during design review."
        ),
    ),
    _q(
        "PERF_07", SUCCESS, 206,
        "What are the most complex or high-stakes situations where this performance "
        "gap shows up?",
        "High-stakes situations get the most practice time, the most realistic "
        "simulations and the most rigorous assessments. They become anchor "
        "scenarios.",
        "Where does this problem cause the most damage? Describe the situations, "
        "tasks, or moments where getting it wrong is most costly or visible.",
    ),
    _q(
        "PERF_08", SUCCESS, 207,
        "How will you measure success? What specific metrics or observable changes "
        "would tell you this problem is fixed?",
        "Feeds the evaluation plan and KPI definitions. Each metric should connect "
        "back to the impact described in PERF_03.",
        "Think about the numbers you cited when describing the problem. What would "
        "those numbers look like when the problem is fixed?",
    ),
)
