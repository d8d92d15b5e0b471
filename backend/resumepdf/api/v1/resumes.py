from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resumepdf.api import deps
from resumepdf.schemas.resume import (
    DeleteAllRequest,
    DeletedAll,
    Message,
    Resume as ResumeSchema,
    ResumeCreate,
    ResumeCreated,
    ResumeUpdate,
    ResumeUpdated,
)
from resumepdf.services import resume_store

router = APIRouter()

# Resumes are addressed by id alone: knowing the id is enough to read,
# overwrite or delete it.


@router.post("", response_model=ResumeCreated)
def create_resume(
    *,
    db: Session = Depends(deps.get_db),
    resume_in: ResumeCreate,
) -> Any:
    """
    Create new resume.
    """
    resume = resume_store.create_resume(db, resume_in)
    return {
        "id": resume.id,
        "message": "Resume saved successfully",
        "created_at": resume.created_at,
    }


@router.get("", response_model=List[ResumeSchema])
def read_resumes(
    username: str,
    db: Session = Depends(deps.get_db),
) -> Any:
    """
    Retrieve resumes of one owner, most recently updated first.
    """
    return resume_store.list_resumes(db, username)


# Registered before "/{id}" so "deleteAll" is never parsed as an id
@router.post("/deleteAll", response_model=DeletedAll)
def delete_all_resumes(
    *,
    db: Session = Depends(deps.get_db),
    request_in: DeleteAllRequest,
) -> Any:
    """
    Delete every resume of one owner. Succeeds when there is nothing to delete.
    """
    deleted = resume_store.delete_all_resumes(db, request_in.username)
    return {"message": "All resumes deleted successfully", "deleted": deleted}


@router.get("/{id}", response_model=ResumeSchema)
def read_resume(
    *,
    db: Session = Depends(deps.get_db),
    id: int,
) -> Any:
    """
    Get a resume by id.
    """
    return resume_store.get_resume(db, id)


@router.put("/{id}", response_model=ResumeUpdated)
def update_resume(
    *,
    db: Session = Depends(deps.get_db),
    id: int,
    resume_in: ResumeUpdate,
) -> Any:
    """
    Update a resume.
    """
    updated_at = resume_store.update_resume(db, id, resume_in)
    return {"message": "Resume updated successfully", "updated_at": updated_at}


@router.delete("/{id}", response_model=Message)
def delete_resume(
    *,
    db: Session = Depends(deps.get_db),
    id: int,
) -> Any:
    """
    Delete a resume.
    """
    resume_store.delete_resume(db, id)
    return {"message": "Resume deleted successfully"}
