import json
from typing import Any, Dict, List

from ..models.candidate import availability_of

EMAIL_HEADER = [
    "Subject: Hiring Shortlist — 5 Candidates",
    "",
    "Hi team,",
    "",
    "I recommend we hire the following 5 candidates:",
]
EMAIL_CLOSING = "— End of shortlist"


def shortlist_json(entries: List[Dict[str, Any]]) -> str:
    return json.dumps(list(entries), indent=2, ensure_ascii=False)


def shortlist_email_text(entries: List[Dict[str, Any]]) -> str:
    """Plain-text email body listing each shortlisted candidate and reason.

    Layout: five header lines, three lines per entry (summary, indented
    reason, blank) and one closing line.
    """
    lines = list(EMAIL_HEADER)
    for i, c in enumerate(entries, start=1):
        availability = ", ".join(availability_of(c)) or "N/A"
        lines.append(f"{i}. {c.get('name', '')} — {availability}")
        lines.append(f"   Reason: {c.get('reason') or ''}")
        lines.append("")
    lines.append(EMAIL_CLOSING)
    return "\n".join(lines)
