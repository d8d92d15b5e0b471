import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from resumepdf.core import security
from resumepdf.core.exceptions import Conflict, InternalError, Unauthorized
from resumepdf.models.user import User

logger = logging.getLogger(__name__)


def register(db: Session, username: str, password: str) -> User:
    """
    Create a new account. Raises Conflict if the username is taken.
    """
    try:
        if db.get(User, username) is not None:
            logger.info("Registration rejected, username exists: %s", username)
            raise Conflict("Username already exists")

        user = User(username=username, hashed_password=security.get_password_hash(password))
        db.add(user)
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent registration
        db.rollback()
        raise Conflict("Username already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError("Failed to register user") from e

    logger.info("User registered: %s", username)
    return user


def login(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair against the stored hash. Read-only.
    """
    try:
        user = db.get(User, username)
    except SQLAlchemyError as e:
        raise InternalError("Failed to log in") from e

    if not user or not security.verify_password(password, user.hashed_password):
        logger.info("Login failed for %s", username)
        raise Unauthorized("Invalid username or password")
    return user
