import json

import pytest

from hiredash.errors import ShortlistFull, StorageFailure
from hiredash.services.shortlist import SHORTLIST_LIMIT, Shortlist, ShortlistStore, suggest_reason


@pytest.fixture
def sl_store(tmp_path):
    return ShortlistStore(str(tmp_path / "client" / "shortlist.json"))


@pytest.fixture
def shortlist(sl_store):
    return Shortlist(sl_store)


def test_suggest_reason_senior_keyword(make_candidate):
    assert suggest_reason(make_candidate(1, roles=["Senior Engineer"])) == "Senior experience and leadership potential"
    assert suggest_reason(make_candidate(2, roles=["Intern", "team LEAD"])) == "Senior experience and leadership potential"


def test_suggest_reason_by_experience_count(make_candidate):
    assert suggest_reason(make_candidate(1, roles=["Dev"] * 5)) == "Highly experienced across multiple roles"
    assert suggest_reason(make_candidate(2, roles=["Dev"] * 4)) == "Experienced candidate with relevant roles"
    assert suggest_reason(make_candidate(3, roles=["Dev"] * 3)) == "Experienced candidate with relevant roles"


def test_suggest_reason_keyword_beats_count(make_candidate):
    c = make_candidate(1, availability=["full-time"], roles=["Dev"] * 6 + ["Architect"])
    assert suggest_reason(c) == "Senior experience and leadership potential"


def test_suggest_reason_availability_and_default(make_candidate):
    assert suggest_reason(make_candidate(1, availability=["full-time"], roles=["Dev"])) == "Available full-time and promising"
    assert suggest_reason(make_candidate(2, availability=["part-time"])) == "Promising candidate"
    assert suggest_reason({"id": "3", "name": "Bare"}) == "Promising candidate"


def test_toggle_adds_with_suggested_reason_then_removes(shortlist, sl_store, make_candidate):
    c = make_candidate(1, roles=["Senior Engineer"])
    assert shortlist.toggle(c) is True
    assert shortlist.contains("1")
    assert shortlist.entries[0]["reason"] == "Senior experience and leadership potential"
    assert sl_store.load() == shortlist.entries

    assert shortlist.toggle(c) is False
    assert len(shortlist) == 0
    assert sl_store.load() == []


def test_entries_are_independent_copies(shortlist, make_candidate):
    c = make_candidate(1, roles=["Dev"])
    shortlist.toggle(c)
    c["work_experiences"].append({"role": "Changed", "company": "Elsewhere"})
    c["reason"] = "server side"
    assert len(shortlist.entries[0]["work_experiences"]) == 1
    assert shortlist.entries[0]["reason"] == "Promising candidate"


def test_sixth_candidate_is_rejected(shortlist, make_candidate):
    for i in range(SHORTLIST_LIMIT):
        shortlist.toggle(make_candidate(i))
    before = [dict(e) for e in shortlist.entries]

    with pytest.raises(ShortlistFull) as exc:
        shortlist.toggle(make_candidate(99))
    assert str(exc.value) == "Shortlist limit: 5 candidates"
    assert shortlist.entries == before
    assert len(shortlist) == 5


def test_toggle_sequences_never_exceed_limit(shortlist, make_candidate):
    for step in range(40):
        try:
            shortlist.toggle(make_candidate(step % 9))
        except ShortlistFull:
            pass
        assert len(shortlist) <= SHORTLIST_LIMIT
        ids = [e["id"] for e in shortlist]
        assert len(ids) == len(set(ids))


def test_removing_frees_a_slot(shortlist, make_candidate):
    for i in range(5):
        shortlist.toggle(make_candidate(i))
    shortlist.remove("2")
    shortlist.toggle(make_candidate(7))
    assert [e["id"] for e in shortlist] == ["0", "1", "3", "4", "7"]


def test_set_reason_and_noops(shortlist, make_candidate):
    shortlist.toggle(make_candidate(1))
    shortlist.set_reason("1", "Hand-picked")
    assert shortlist.entries[0]["reason"] == "Hand-picked"

    shortlist.set_reason("missing", "x")
    shortlist.remove("missing")
    assert [e["id"] for e in shortlist] == ["1"]


def test_add_note_upserts(shortlist, make_candidate):
    shortlist.add_note(make_candidate(1), "Met at meetup")
    assert shortlist.entries[0]["reason"] == "Met at meetup"
    shortlist.add_note(make_candidate(1), "Updated note")
    assert len(shortlist) == 1
    assert shortlist.entries[0]["reason"] == "Updated note"


def test_add_note_respects_limit(shortlist, make_candidate):
    for i in range(5):
        shortlist.toggle(make_candidate(i))
    with pytest.raises(ShortlistFull):
        shortlist.add_note(make_candidate(6), "one more")
    shortlist.add_note(make_candidate(0), "still editable")
    assert shortlist.entries[0]["reason"] == "still editable"


def test_shortlist_persists_across_sessions(sl_store, make_candidate):
    first = Shortlist(sl_store)
    first.toggle(make_candidate(1))
    first.set_reason("1", "Keep")

    second = Shortlist(sl_store)
    assert [e["id"] for e in second] == ["1"]
    assert second.entries[0]["reason"] == "Keep"


@pytest.mark.parametrize("content", ["", "not json", '{"id": "1"}'])
def test_load_bad_file_starts_empty(sl_store, content):
    sl_store.save([])
    with open(sl_store.path, "w", encoding="utf-8") as f:
        f.write(content)
    assert sl_store.load() == []


def test_load_drops_duplicates_and_caps(sl_store, make_candidate):
    entries = [make_candidate(1), make_candidate(1)] + [make_candidate(i) for i in range(2, 9)] + ["junk"]
    sl_store.save([])
    with open(sl_store.path, "w", encoding="utf-8") as f:
        json.dump(entries, f)
    loaded = sl_store.load()
    assert [e["id"] for e in loaded] == ["1", "2", "3", "4", "5"]


def test_missing_file_loads_empty(sl_store):
    assert sl_store.load() == []


def test_suggest_reason_ignores_non_object_experiences():
    c = {"id": "1", "name": "Ada", "work_experiences": ["Senior Engineer", None, 3]}
    assert suggest_reason(c) == "Experienced candidate with relevant roles"
    assert suggest_reason({"id": "2", "name": "Bo", "work_experiences": ["Senior Engineer"]}) == "Promising candidate"


def test_toggle_record_with_string_experiences(shortlist):
    c = {"id": "1", "name": "Ada", "work_experiences": ["Engineer"]}
    assert shortlist.toggle(c) is True
    assert shortlist.entries[0]["reason"] == "Promising candidate"


def _failing_save(entries):
    raise StorageFailure("disk full")


def test_failed_save_leaves_entries_untouched(shortlist, sl_store, make_candidate, monkeypatch):
    shortlist.toggle(make_candidate(1))
    shortlist.set_reason("1", "kept")
    before = [dict(e) for e in shortlist.entries]
    monkeypatch.setattr(sl_store, "save", _failing_save)

    with pytest.raises(StorageFailure):
        shortlist.toggle(make_candidate(2))
    with pytest.raises(StorageFailure):
        shortlist.toggle(make_candidate(1))
    with pytest.raises(StorageFailure):
        shortlist.set_reason("1", "lost")
    with pytest.raises(StorageFailure):
        shortlist.add_note(make_candidate(1), "lost")
    with pytest.raises(StorageFailure):
        shortlist.add_note(make_candidate(3), "lost")
    with pytest.raises(StorageFailure):
        shortlist.remove("1")

    assert shortlist.entries == before
    monkeypatch.undo()
    assert Shortlist(sl_store).entries == before
