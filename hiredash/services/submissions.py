import json
import logging
import os
from typing import Any, Dict, List

from ..errors import InvalidInput, NotFound, ParseFailure, StorageFailure
from ..models.candidate import build_candidate, has_valid_name


class SubmissionStore:
    """Candidate records kept in a single JSON document.

    Every operation loads the whole document, mutates it in memory and writes
    it back in full. There is no locking, so two writers racing on the same
    file can lose updates (last write wins).
    """

    def __init__(self, path=None, logger=None):
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def init_app(self, app):
        self.path = app.config["DATA_FILE"]
        self.logger = app.logger
        app.extensions["submission_store"] = self

    def ensure_file(self):
        if os.path.exists(self.path):
            return
        d = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(d, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write("[]")
        except OSError as e:
            raise StorageFailure(f"could not create {self.path}: {e}") from e
        self.logger.info("Created data file: %s", self.path)

    def _parse(self, raw: str) -> List[Dict[str, Any]]:
        try:
            data = json.loads(raw or "[]")
        except json.JSONDecodeError as e:
            raise ParseFailure(str(e)) from e
        if not isinstance(data, list):
            raise ParseFailure(f"expected a JSON array, got {type(data).__name__}")
        return data

    def _load(self) -> List[Dict[str, Any]]:
        self.ensure_file()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read().strip()
        except OSError as e:
            raise StorageFailure(f"could not read {self.path}: {e}") from e
        try:
            return self._parse(raw)
        except ParseFailure as e:
            self.logger.warning("Malformed data file %s, treating as empty: %s", self.path, e)
            return []

    def _save(self, submissions: List[Dict[str, Any]]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(submissions, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            raise StorageFailure(f"could not write {self.path}: {e}") from e

    def list(self) -> List[Dict[str, Any]]:
        return self._load()

    def get(self, candidate_id: str) -> Dict[str, Any]:
        for c in self._load():
            if isinstance(c, dict) and c.get("id") == candidate_id:
                return c
        raise NotFound("Candidate not found")

    def create(self, candidate: Dict[str, Any]) -> Dict[str, Any]:
        if not has_valid_name(candidate):
            raise InvalidInput("Candidate object with `name` is required")
        submissions = self._load()
        taken = [c.get("id") for c in submissions if isinstance(c, dict)]
        record = build_candidate(candidate, taken=taken)
        submissions.append(record)
        self._save(submissions)
        self.logger.info("Added candidate: %s id: %s", record["name"], record["id"])
        return record

    def update_reason(self, candidate_id: str, reason) -> Dict[str, Any]:
        submissions = self._load()
        for c in submissions:
            if isinstance(c, dict) and c.get("id") == candidate_id:
                c["reason"] = "" if reason is None else reason
                self._save(submissions)
                self.logger.info("Updated reason for candidate id: %s", candidate_id)
                return c
        raise NotFound("Candidate not found")
