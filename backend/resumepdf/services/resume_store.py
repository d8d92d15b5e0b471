import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resumepdf.core.exceptions import InternalError, NotFound
from resumepdf.models.resume import Resume, dump_sections, utcnow
from resumepdf.schemas.resume import ResumeCreate, ResumeUpdate

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "title", "email", "phone", "location", "linkedin")


def create_resume(db: Session, resume_in: ResumeCreate) -> Resume:
    now = utcnow()
    resume = Resume(
        username=resume_in.username,
        sections=dump_sections(resume_in.sections),
        created_at=now,
        updated_at=now,
        **{field: getattr(resume_in, field) for field in MUTABLE_FIELDS},
    )
    try:
        db.add(resume)
        db.commit()
        db.refresh(resume)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Failed to save resume") from e

    logger.info("Resume %s created for %s", resume.id, resume.username)
    return resume


def list_resumes(db: Session, username: str) -> List[Resume]:
    """All resumes owned by ``username``, most recently updated first."""
    try:
        return (
            db.query(Resume)
            .filter(Resume.username == username)
            .order_by(Resume.updated_at.desc(), Resume.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise InternalError("Failed to fetch resumes") from e


def get_resume(db: Session, resume_id: int) -> Resume:
    try:
        resume = db.get(Resume, resume_id)
    except SQLAlchemyError as e:
        raise InternalError("Failed to fetch resume") from e
    if resume is None:
        raise NotFound("Resume not found")
    return resume


def update_resume(db: Session, resume_id: int, resume_in: ResumeUpdate):
    """
    Replace every mutable field of the resume in a single UPDATE and return
    the new ``updated_at``. Owner, id and created_at are left untouched.
    """
    updated_at = utcnow()
    values = {field: getattr(resume_in, field) for field in MUTABLE_FIELDS}
    values["sections"] = dump_sections(resume_in.sections)
    values["updated_at"] = updated_at
    try:
        changed = (
            db.query(Resume)
            .filter(Resume.id == resume_id)
            .update(values, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Failed to update resume") from e

    if changed == 0:
        raise NotFound("Resume not found")
    logger.info("Resume %s updated", resume_id)
    return updated_at


def delete_resume(db: Session, resume_id: int) -> None:
    try:
        deleted = (
            db.query(Resume)
            .filter(Resume.id == resume_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Failed to delete resume") from e

    if deleted == 0:
        raise NotFound("Resume not found")
    logger.info("Resume %s deleted", resume_id)


def delete_all_resumes(db: Session, username: str) -> int:
    """Remove every resume of ``username``. Zero matches is not an error."""
    try:
        deleted = (
            db.query(Resume)
            .filter(Resume.username == username)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Failed to delete resumes") from e

    logger.info("Deleted %d resumes for %s", deleted, username)
    return deleted
