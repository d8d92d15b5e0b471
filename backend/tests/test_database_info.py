from database_info import describe
from resumepdf.db.session import create_db_engine
from resumepdf.schemas.resume import ResumeCreate
from resumepdf.services import resume_store


def test_describe_reports_missing_table(tmp_path, capsys):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        assert describe(engine) is False
    finally:
        engine.dispose()

    assert 'table "resumes" does not exist' in capsys.readouterr().out


def test_describe_reports_count_and_recent(db, settings, capsys):
    for name in ("Alice", "Alice Again"):
        resume_store.create_resume(db, ResumeCreate(username="alice", name=name))

    engine = create_db_engine(settings.DATABASE_URL)
    try:
        assert describe(engine) is True
    finally:
        engine.dispose()

    out = capsys.readouterr().out
    assert "Total resumes stored: 2" in out
    assert "Name: Alice Again" in out
    assert "sections" in out
