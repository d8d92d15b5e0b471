import pytest

from resumepdf.core.exceptions import Conflict, Unauthorized
from resumepdf.models.user import User
from resumepdf.services import account_store


def test_register_twice_conflicts(db):
    account_store.register(db, "alice", "pw")

    with pytest.raises(Conflict):
        account_store.register(db, "alice", "other")


def test_password_is_not_stored_verbatim(db):
    account_store.register(db, "alice", "pw")

    stored = db.get(User, "alice")
    assert stored.hashed_password != "pw"


def test_login(db):
    account_store.register(db, "alice", "pw")

    assert account_store.login(db, "alice", "pw").username == "alice"


@pytest.mark.parametrize(
    "username,password",
    [("alice", "wrong"), ("bob", "pw"), ("Alice", "pw"), ("alice", "")],
)
def test_login_mismatch_is_unauthorized(db, username, password):
    account_store.register(db, "alice", "pw")

    with pytest.raises(Unauthorized):
        account_store.login(db, username, password)
