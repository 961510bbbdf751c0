from typing import Any, Dict, Iterable, List

from ..models.candidate import availability_of, experience_count, experiences_of

SORT_EXPERIENCE = "experience"
TOP_N = 5


def _matches_query(c: Dict[str, Any], q: str) -> bool:
    if q in (c.get("name") or "").lower():
        return True
    for e in experiences_of(c):
        if q in f"{e.get('role') or ''} {e.get('company') or ''}".lower():
            return True
    return False


def derive_view(records: Iterable[Dict[str, Any]], query: str = "", availability: str = "", sort: str = "") -> List[Dict[str, Any]]:
    """Filter and sort a snapshot of candidate records for display.

    Availability filter runs first, then the case-insensitive query against
    the name and each "role company" pair. Sorting by experience is stable,
    so ties keep their filtered order. The input is never modified.
    """
    q = (query or "").lower()
    out = []
    for c in records or []:
        if not isinstance(c, dict) or not c:
            continue
        if availability and availability not in availability_of(c):
            continue
        if q and not _matches_query(c, q):
            continue
        out.append(c)

    if sort == SORT_EXPERIENCE:
        out = sorted(out, key=experience_count, reverse=True)
    return out


def top_candidates(view: List[Dict[str, Any]], n: int = TOP_N) -> List[Dict[str, Any]]:
    return list(view[:n])
