import argparse

from sqlalchemy import func, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from resumepdf.core.config import settings
from resumepdf.db.session import create_db_engine
from resumepdf.models.resume import Resume

RECENT_LIMIT = 5


def describe(engine: Engine, recent: int = RECENT_LIMIT) -> bool:
    """Print table layout, row count and latest resumes. False if the table is missing."""
    print("📊 Resume Database Information")
    print("=============================")
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")
    print("")

    inspector = inspect(engine)
    if not inspector.has_table(Resume.__tablename__):
        print('❌ Database table "resumes" does not exist')
        print("💡 Run the server to initialize the database")
        return False

    print('✅ Database table "resumes" exists')
    print("\n📋 Table Structure:")
    print("Column Name | Type         | Not Null | Primary Key")
    print("------------|--------------|----------|-------------")
    pk_columns = set(inspector.get_pk_constraint(Resume.__tablename__).get("constrained_columns") or [])
    for col in inspector.get_columns(Resume.__tablename__):
        not_null = "No" if col["nullable"] else "Yes"
        is_pk = "Yes" if col["name"] in pk_columns else "No"
        print(f"{col['name']:<11} | {str(col['type']):<12} | {not_null:<8} | {is_pk}")

    with Session(engine) as db:
        count = db.query(func.count(Resume.id)).scalar()
        print(f"\n📈 Total resumes stored: {count}")

        rows = (
            db.query(Resume.id, Resume.username, Resume.name, Resume.updated_at)
            .order_by(Resume.updated_at.desc())
            .limit(recent)
            .all()
        )
    if rows:
        print("\n📝 Recent Resumes:")
        for row in rows:
            print(f"ID: {row.id} | Owner: {row.username} | Name: {row.name} | Updated: {row.updated_at:%Y-%m-%d %H:%M:%S}")
    else:
        print("\n📝 No resumes found in database")
    return True


def main():
    parser = argparse.ArgumentParser(description="Show what is stored in the resume database.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    parser.add_argument("--recent", type=int, default=RECENT_LIMIT)
    args = parser.parse_args()

    engine = create_db_engine(args.database_url)
    try:
        describe(engine, recent=args.recent)
    finally:
        engine.dispose()

    print("\n💡 Database Management Tips:")
    print("• The database is created automatically when you start the server")
    print("• Back up a SQLite database by copying the resumes.db file")
    print("• Point DATABASE_URL at another database to inspect it")


if __name__ == "__main__":
    main()
