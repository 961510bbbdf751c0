import copy
import json
import logging
import os
import re
from typing import Any, Dict, List

from ..errors import ParseFailure, ShortlistFull, StorageFailure
from ..models.candidate import availability_of, experience_count, experiences_of

SHORTLIST_LIMIT = 5
SENIOR_ROLE_RE = re.compile(r"senior|lead|principal|manager|architect", re.IGNORECASE)


def suggest_reason(candidate: Dict[str, Any]) -> str:
    if any(SENIOR_ROLE_RE.search(str(e.get("role") or "")) for e in experiences_of(candidate)):
        return "Senior experience and leadership potential"
    n = experience_count(candidate)
    if n >= 5:
        return "Highly experienced across multiple roles"
    if n >= 3:
        return "Experienced candidate with relevant roles"
    if "full-time" in availability_of(candidate):
        return "Available full-time and promising"
    return "Promising candidate"


class ShortlistStore:
    """Client-local persistence for the shortlist: one JSON array in a file."""

    def __init__(self, path=None, logger=None):
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def init_app(self, app):
        self.path = app.config["SHORTLIST_FILE"]
        self.logger = app.logger

    def _read(self) -> List[Dict[str, Any]]:
        with open(self.path, "r", encoding="utf-8") as f:
            raw = f.read().strip()
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseFailure(str(e)) from e
        if not isinstance(data, list):
            raise ParseFailure("shortlist file does not hold a JSON array")
        return data

    def load(self) -> List[Dict[str, Any]]:
        if not self.path or not os.path.exists(self.path):
            return []
        try:
            data = self._read()
        except (OSError, ParseFailure) as e:
            self.logger.warning("Could not load shortlist from %s, starting empty: %s", self.path, e)
            return []

        entries, seen = [], set()
        for e in data:
            if not isinstance(e, dict) or e.get("id") in seen:
                continue
            seen.add(e.get("id"))
            entries.append(e)
        return entries[:SHORTLIST_LIMIT]

    def save(self, entries: List[Dict[str, Any]]) -> None:
        d = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(d, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise StorageFailure(f"could not write {self.path}: {e}") from e


class Shortlist:
    """Capped selection of candidates, each with a free-text reason.

    Entries are deep copies of candidate records; their ``reason`` is local
    to the shortlist and never synced with the record store. Every mutation
    is written through to the store, and ``entries`` only changes once that
    write succeeded.
    """

    def __init__(self, store: ShortlistStore, limit: int = SHORTLIST_LIMIT):
        self.store = store
        self.limit = limit
        self.entries: List[Dict[str, Any]] = store.load()

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def _index(self, candidate_id):
        for i, e in enumerate(self.entries):
            if e.get("id") == candidate_id:
                return i
        return None

    def contains(self, candidate_id) -> bool:
        return self._index(candidate_id) is not None

    def is_full(self) -> bool:
        return len(self.entries) >= self.limit

    def _commit(self, entries: List[Dict[str, Any]]) -> None:
        self.store.save(entries)
        self.entries = entries

    def _with_entry(self, candidate, reason) -> List[Dict[str, Any]]:
        if self.is_full():
            raise ShortlistFull(self.limit)
        entry = copy.deepcopy(candidate)
        entry["reason"] = reason
        return self.entries + [entry]

    def _with_reason(self, idx, text) -> List[Dict[str, Any]]:
        entries = list(self.entries)
        entries[idx] = dict(entries[idx], reason=text)
        return entries

    def _without(self, idx) -> List[Dict[str, Any]]:
        return self.entries[:idx] + self.entries[idx + 1:]

    def toggle(self, candidate: Dict[str, Any]) -> bool:
        """Add or remove a candidate. Returns True when it was added."""
        idx = self._index(candidate.get("id"))
        if idx is not None:
            self._commit(self._without(idx))
            return False
        self._commit(self._with_entry(candidate, suggest_reason(candidate)))
        return True

    def add_note(self, candidate: Dict[str, Any], text: str) -> None:
        idx = self._index(candidate.get("id"))
        if idx is not None:
            self._commit(self._with_reason(idx, text))
        else:
            self._commit(self._with_entry(candidate, text))

    def set_reason(self, candidate_id, text: str) -> None:
        idx = self._index(candidate_id)
        if idx is None:
            return
        self._commit(self._with_reason(idx, text))

    def remove(self, candidate_id) -> None:
        idx = self._index(candidate_id)
        if idx is None:
            return
        self._commit(self._without(idx))
