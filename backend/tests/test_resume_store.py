import time

import pytest

from resumepdf.core.exceptions import NotFound
from resumepdf.models.resume import Resume, dump_sections, load_sections
from resumepdf.schemas.resume import Resume as ResumeSchema, ResumeCreate, ResumeUpdate
from resumepdf.services import resume_store

SECTIONS = [
    {"heading": "Experience", "items": ["Engineer"]},
    {"heading": "Skills", "items": [{"name": "Python", "level": 5, "tags": ["web", None]}], "visible": True},
]


def make_resume(db, username="alice", name="Alice", **fields):
    return resume_store.create_resume(db, ResumeCreate(username=username, name=name, **fields))


def test_create_then_get_returns_submitted_fields(db):
    created = make_resume(
        db,
        title="Engineer",
        email="alice@example.com",
        phone="555-0100",
        location="Berlin",
        linkedin="linkedin.com/in/alice",
        sections=SECTIONS,
    )

    fetched = ResumeSchema.model_validate(resume_store.get_resume(db, created.id))

    assert fetched.id == created.id
    assert fetched.username == "alice"
    assert fetched.name == "Alice"
    assert fetched.title == "Engineer"
    assert fetched.email == "alice@example.com"
    assert fetched.phone == "555-0100"
    assert fetched.location == "Berlin"
    assert fetched.linkedin == "linkedin.com/in/alice"
    assert fetched.sections == SECTIONS
    assert fetched.created_at == fetched.updated_at


def test_ids_increase(db):
    first = make_resume(db)
    second = make_resume(db)

    assert second.id > first.id


def test_get_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        resume_store.get_resume(db, 999)


def test_list_orders_by_most_recent_update(db):
    ids = []
    for name in ("One", "Two", "Three"):
        ids.append(make_resume(db, name=name).id)
        time.sleep(0.01)

    resume_store.update_resume(db, ids[0], ResumeUpdate(name="One again"))

    listed = [r.id for r in resume_store.list_resumes(db, "alice")]
    assert listed == [ids[0], ids[2], ids[1]]


def test_list_only_returns_owner_resumes(db):
    make_resume(db, username="alice")
    make_resume(db, username="bob", name="Bob")

    assert [r.username for r in resume_store.list_resumes(db, "bob")] == ["bob"]
    assert resume_store.list_resumes(db, "carol") == []


def test_update_replaces_fields_and_refreshes_timestamp(db):
    created = make_resume(db, title="Engineer", sections=SECTIONS)
    created_at = created.created_at
    time.sleep(0.01)

    updated_at = resume_store.update_resume(
        db, created.id, ResumeUpdate(name="Alice B.", sections=[{"heading": "Education"}])
    )

    db.expire_all()
    row = resume_store.get_resume(db, created.id)
    assert row.id == created.id
    assert row.username == "alice"
    assert row.name == "Alice B."
    # Full replace: fields left out of the update are cleared
    assert row.title is None
    assert load_sections(row.sections) == [{"heading": "Education"}]
    assert row.created_at == created_at
    assert row.updated_at == updated_at
    assert updated_at > created_at


def test_update_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        resume_store.update_resume(db, 12345, ResumeUpdate(name="Nobody"))


def test_delete(db):
    resume_id = make_resume(db).id

    resume_store.delete_resume(db, resume_id)

    assert resume_store.list_resumes(db, "alice") == []
    with pytest.raises(NotFound):
        resume_store.get_resume(db, resume_id)


def test_delete_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        resume_store.delete_resume(db, 42)


def test_delete_all_by_owner(db):
    make_resume(db)
    make_resume(db)
    make_resume(db, username="bob", name="Bob")

    assert resume_store.delete_all_resumes(db, "alice") == 2
    assert resume_store.list_resumes(db, "alice") == []
    assert len(resume_store.list_resumes(db, "bob")) == 1


def test_delete_all_without_resumes_succeeds(db):
    assert resume_store.delete_all_resumes(db, "nobody") == 0


@pytest.mark.parametrize("raw", [None, "", "not json", "{\"heading\": 1}", "42"])
def test_malformed_sections_read_as_empty(db, raw):
    row = Resume(username="alice", name="Alice", sections=raw)
    db.add(row)
    db.commit()

    assert ResumeSchema.model_validate(resume_store.get_resume(db, row.id)).sections == []


def test_sections_serialization_keeps_structure():
    nested = [{"a": [1, 2.5, {"b": None}], "ü": "ç"}, [], "text", True]

    assert load_sections(dump_sections(nested)) == nested
    assert load_sections(dump_sections(None)) == []
