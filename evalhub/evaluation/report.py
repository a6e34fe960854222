"""
Plain-text evaluation reports.
"""


def _format_number(value):
    """8.0 -> '8', 6.75 -> '6.75'"""
    return f"{value:g}"


def report_filename(evaluation):
    return f"evaluation-{evaluation.id}.txt"


def render_evaluation_report(evaluation):
    """
    Render an evaluation as a text document.

    Expects ``submission.student``, ``evaluator`` and each criteria
    evaluation's ``criteria`` to be loaded, or loadable.
    """
    submission = evaluation.submission
    total = "N/A" if evaluation.total_score is None else f"{evaluation.total_score:.2f}/10"
    lines = [
        "EVALUATION REPORT",
        "=================",
        "",
        f"Submission: {submission.title}",
        f"Student: {submission.student.name} ({submission.student.email or 'no email'})",
        f"Evaluator: {evaluation.evaluator.name}",
        f"Date: {evaluation.created:%Y-%m-%d}",
        f"Total Score: {total}",
        "",
        "CRITERIA SCORES",
        "---------------",
    ]
    for criteria_evaluation in evaluation.criteria_evaluations.all():
        criteria = criteria_evaluation.criteria
        lines.append("")
        lines.append(
            f"{criteria.name}: {_format_number(criteria_evaluation.score)}/{criteria.max_score} "
            f"(weight {_format_number(criteria.weight)})"
        )
        if criteria_evaluation.feedback:
            lines.append(f"  Feedback: {criteria_evaluation.feedback}")

    lines.extend(["", "OVERALL FEEDBACK", "----------------", evaluation.feedback or "No overall feedback."])
    return "\n".join(lines) + "\n"
