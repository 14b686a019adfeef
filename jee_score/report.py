"""Telegram-HTML rendering of a score report."""
from html import escape

from .models import GeneralInfo, ScoreReport, Subject, SubjectStats

BAR_CELLS = 20
SCORED_SUBJECTS = (Subject.PHYSICS, Subject.CHEMISTRY, Subject.MATHS)


def _field(value: str, default: str = "") -> str:
    return escape(value or default)


def progress_bar(percentage: int) -> str:
    filled = max(0, min(BAR_CELLS, round(percentage / 5)))
    return "▓" * filled + "░" * (BAR_CELLS - filled)


def subject_block(name: str, stats: SubjectStats, per_subject: int) -> str:
    percentage = round(stats.correct / per_subject * 100) if per_subject else 0
    return (
        f"<b>{name.capitalize()} ({stats.correct}/{per_subject})</b>\n"
        f"{progress_bar(percentage)} {percentage}%\n"
        f"✅ {stats.correct} | ❌ {stats.incorrect} | ➖ {stats.unattempted} | ✖️ {stats.dropped}"
    )


def format_report(info: GeneralInfo, report: ScoreReport) -> str:
    marking = report.marking
    per_subject = report.total_questions // len(SCORED_SUBJECTS)

    subjects = []
    for subject in SCORED_SUBJECTS:
        stats = report.subject_stats.get(subject.value, SubjectStats())
        subjects.append(subject_block(subject.value, stats, per_subject))
    unknown = report.subject_stats.get(Subject.UNKNOWN.value)
    if unknown is not None:
        subjects.append(
            f"<i>Unmatched: ✅ {unknown.correct} | ❌ {unknown.incorrect} | "
            f"➖ {unknown.unattempted} | ✖️ {unknown.dropped}</i>"
        )

    lines = [
        "<b>📝 JEE Mains Response Analysis</b>",
        "",
        f"<b>📋 Application No:</b> <code>{_field(info.application_number, 'N/A')}</code>",
        f"<b>👤 Candidate:</b> <code>{_field(info.candidate_name)}</code>",
        f"<b>🔢 Roll No:</b> <code>{_field(info.roll_number)}</code>",
        f"<b>📅 Exam Date:</b> <code>{_field(info.test_date)}</code>",
        f"<b>⏰ Shift:</b> <code>{_field(info.test_time)}</code>",
        "",
        "<b>📊 Overall Performance</b>",
        f"✅ <b>Correct:</b> {report.correct_count} (➕{report.correct_count * marking.correct} marks)",
        f"❌ <b>Incorrect:</b> {report.incorrect_count} (➖{report.incorrect_count * -marking.incorrect} marks)",
        f"➖ <b>Unattempted:</b> {report.unattempted_count} (0 marks)",
        f"✖️ <b>Dropped:</b> {report.dropped_count} (➕{report.dropped_count * marking.dropped} marks)",
        f"📝 <b>Attempted:</b> {report.attempted_count}/{report.total_questions}",
        "",
        f"🎖️ <b>Estimated Score:</b> <code>{report.total_score}/{report.max_score}</code>",
        "",
        "<b>📚 Subject-wise Analysis</b>",
        "\n\n".join(subjects),
        "",
        f"<i>🔹 Marking Scheme: +{marking.correct} (correct), {marking.incorrect} (wrong), "
        f"0 (unattempted), +{marking.dropped} (dropped)</i>",
    ]
    return "\n".join(lines)
