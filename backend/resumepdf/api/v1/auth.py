from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resumepdf.api import deps
from resumepdf.schemas.user import AuthResult, UserCredentials
from resumepdf.services import account_store

router = APIRouter()


@router.post("/register", response_model=AuthResult)
def register_user(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCredentials,
) -> Any:
    """
    Create new user. 409 if the username is already taken.
    """
    account_store.register(db, user_in.username, user_in.password)
    return {"success": True}


@router.post("/login", response_model=AuthResult)
def login(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCredentials,
) -> Any:
    """
    Check credentials. No token is issued, the client only learns success.
    """
    account_store.login(db, user_in.username, user_in.password)
    return {"success": True}
