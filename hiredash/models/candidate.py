import copy
from datetime import datetime, timezone

# Candidate records are plain dicts so that any extra fields sent by the
# client survive the round-trip through the JSON document.
AVAILABILITY_TAGS = ("full-time", "part-time")


def _field_list(candidate, key) -> list:
    if not isinstance(candidate, dict):
        return []
    val = candidate.get(key)
    return list(val) if isinstance(val, list) else []


def availability_of(candidate) -> list:
    return _field_list(candidate, "work_availability")


def experiences_of(candidate) -> list:
    # entries that are not objects still count as an experience, with no role or company
    return [e if isinstance(e, dict) else {} for e in _field_list(candidate, "work_experiences")]


def experience_count(candidate) -> int:
    return len(experiences_of(candidate))


def has_valid_name(payload) -> bool:
    if not isinstance(payload, dict):
        return False
    name = payload.get("name")
    return isinstance(name, str) and name.strip() != ""


def make_id(now: datetime, taken=()) -> str:
    """Millisecond epoch id; advanced past ids already present in the store."""
    value = int(now.timestamp() * 1000)
    taken_ints = set()
    for t in taken:
        try:
            taken_ints.add(int(t))
        except (TypeError, ValueError):
            continue
    while value in taken_ints:
        value += 1
    return str(value)


def iso_timestamp(now: datetime) -> str:
    # 2025-01-31T09:15:02.123Z
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_candidate(payload: dict, now: datetime = None, taken=()) -> dict:
    now = now or datetime.now(timezone.utc)
    c = copy.deepcopy(payload)
    c.setdefault("work_availability", [])
    c.setdefault("work_experiences", [])
    c["id"] = make_id(now, taken)
    c["created_at"] = iso_timestamp(now)
    c["reason"] = ""
    return c
