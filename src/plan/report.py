"""Self-contained HTML report for a finished intervention plan."""

from datetime import date
from html import escape
from typing import Iterable, Optional

from src.data.models import AnalysisResult

from .models import FinalIssue, InterventionPlan, SupportPlan

_STYLE = """
body { font-family: Arial, sans-serif; margin: 2rem; color: #222; }
h1 { color: #0f766e; }
h2 { border-bottom: 2px solid #0f766e; padding-bottom: 4px; margin-top: 2rem; }
.cards { display: flex; gap: 1rem; }
.card { background: #f0fdfa; padding: 1rem; border-radius: 8px; flex: 1; text-align: center; }
.card .value { font-size: 2rem; font-weight: bold; }
table { border-collapse: collapse; width: 100%; }
th, td { border: 1px solid #ccc; padding: 6px 8px; text-align: left; }
th { background: #f3f4f6; }
.muted { color: #6b7280; }
"""


def _list(items: Iterable[str]) -> str:
    entries = [f"<li>{escape(i)}</li>" for i in items if i and i.strip()]
    if not entries:
        return '<p class="muted">None specified.</p>'
    return "<ul>" + "".join(entries) + "</ul>"


def _table(headers: list[str], rows: list[list[str]]) -> str:
    if not rows:
        return '<p class="muted">None specified.</p>'
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = "".join(
        "<tr>" + "".join(f"<td>{escape(str(cell))}</td>" for cell in row) + "</tr>"
        for row in rows
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def render_report(
    analysis: AnalysisResult,
    issue: FinalIssue,
    plan: InterventionPlan,
    support: SupportPlan,
    inspector: str = "",
    today: Optional[date] = None,
) -> str:
    """Render the mapping summary, central issue, intervention plan and support plan as HTML."""
    today = today or date.today()
    summary = analysis.summary
    parts = []

    parts.append("<h1>Intervention Plan Report</h1>")
    parts.append(
        f'<p class="muted">Inspector: {escape(inspector or "-")} &middot; '
        f"Generated {today.strftime('%d/%m/%Y')}</p>"
    )

    parts.append("<h2>Mapping summary</h2>")
    parts.append('<div class="cards">')
    for label, value in [
        ("Schools", summary.total_schools),
        ("Students", f"{summary.total_students:,}"),
        ("High-risk schools", summary.risky_schools),
        ("Stable schools", summary.excellent_schools),
    ]:
        parts.append(f'<div class="card"><div>{escape(label)}</div><div class="value">{escape(str(value))}</div></div>')
    parts.append("</div>")
    parts.append(
        _table(
            ["Tier", "Schools"],
            [
                ["Tier 1 - universal", ", ".join(c.name for c in summary.tier1) or "-"],
                ["Tier 2 - targeted", ", ".join(c.name for c in summary.tier2) or "-"],
                ["Tier 3 - intensive", ", ".join(c.name for c in summary.tier3) or "-"],
            ],
        )
    )

    parts.append("<h2>Central issue</h2>")
    parts.append(
        _table(
            ["Field", "Value"],
            [
                [label, value]
                for label, value in [
                    ("Title", issue.title),
                    ("Original challenge", issue.original_challenge),
                    ("Action", issue.action),
                    ("Subject", issue.subject),
                    ("Context", issue.context),
                    ("Desired result", issue.result),
                    ("Vision", issue.vision),
                    ("Rationale", issue.rationale),
                    ("Level", issue.level),
                ]
                if value
            ],
        )
    )
    parts.append("<h3>Root causes</h3>")
    parts.append(_list(issue.root_causes))

    parts.append("<h2>Goals and objectives</h2>")
    parts.append(f"<p><strong>Main goal:</strong> {escape(plan.main_goal) or '-'}</p>")
    parts.append(_list(plan.smart_objectives))

    parts.append("<h2>MTSS intervention</h2>")
    parts.append("<h3>Tier 1 - universal</h3>")
    parts.append(_list(plan.tier1_outcomes))
    parts.append("<h3>Tier 2 - targeted groups</h3>")
    if plan.tier2_groups:
        for group in plan.tier2_groups:
            parts.append(f"<h4>{escape(group.name)}</h4>")
            if group.schools:
                parts.append(f"<p class=\"muted\">Schools: {escape(', '.join(group.schools))}</p>")
            parts.append(_list(group.outcomes))
    else:
        parts.append('<p class="muted">None specified.</p>')
    parts.append("<h3>Tier 3 - intensive</h3>")
    parts.append(_list(plan.tier3_outcomes))

    parts.append("<h2>Core support actions</h2>")
    parts.append(
        _table(
            ["Action", "Description", "Category", "Tier", "Audience", "Frequency"],
            [[a.name, a.description, a.category, a.tier, a.target_audience, a.frequency] for a in support.core_actions],
        )
    )

    parts.append("<h2>Partners</h2>")
    parts.append(_table(["Partner", "Category", "Role"], [[p.name, p.category, p.role] for p in support.partners]))

    parts.append("<h2>Resources</h2>")
    parts.append(_table(["Resource", "Category", "Details"], [[r.name, r.category, r.details] for r in support.resources]))

    action_names = {a.id: a.name for a in support.core_actions}
    parts.append("<h2>Operational work plan</h2>")
    parts.append(
        _table(
            ["Task", "Responsible", "Start", "End", "Status", "Action"],
            [
                [t.task, t.responsible, t.start_date, t.end_date, t.status, action_names.get(t.action_id, "")]
                for t in support.operational_plan
            ],
        )
    )

    if analysis.insights:
        parts.append("<h2>Key insights</h2>")
        for insight in analysis.insights:
            parts.append(f"<h4>{escape(insight.title)}</h4><p>{escape(insight.text)}</p>")

    body = "\n".join(parts)
    return (
        "<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>Intervention Plan Report</title>\n<style>{_STYLE}</style>\n</head>\n"
        f"<body>\n{body}\n</body>\n</html>\n"
    )
