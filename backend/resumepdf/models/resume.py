import json
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import Column, DateTime, Integer, String, Text

from resumepdf.db.base import Base


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite keeps the microseconds but not the offset."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def dump_sections(sections: Optional[List[Any]]) -> str:
    return json.dumps(sections if sections is not None else [], ensure_ascii=False)


def load_sections(raw: Optional[str]) -> List[Any]:
    """Absent, malformed or non-list content reads back as an empty list."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    username = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    linkedin = Column(String(255), nullable=True)
    sections = Column(Text, nullable=True)  # JSON list
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)
