# File: tests/test_user_service.py

import logging

import pytest

from app.schemas.user import Authority, UserCreateRequest, UserRole, UserUpdateRequest
from app.services.user_service import (
    InvalidUserId,
    build_user_change_set,
    describe_user_create,
)


def _payload(**extra):
    return UserUpdateRequest.model_validate(
        {"name": "Alice", "loginId": "alice1", "role": "ADMIN", "authorities": ["USER_VIEW"], **extra}
    )


def test_change_set_without_password():
    changes = build_user_change_set(3, _payload())
    assert changes.user_id == 3
    assert changes.login_id == "alice1"
    assert changes.name == "Alice"
    assert changes.role is UserRole.ADMIN
    assert changes.use_flag is None
    assert changes.authorities == (Authority.USER_VIEW,)
    assert changes.password_changed is False


def test_change_set_with_password():
    changes = build_user_change_set(3, _payload(password="s3cret"))
    assert changes.password_changed is True
    assert "s3cret" not in changes.model_dump_json()


def test_password_never_logged(caplog):
    caplog.set_level(logging.INFO, logger="app.services.user_service")
    build_user_change_set(3, _payload(password="s3cret"))
    assert "User 3 update accepted" in caplog.text
    assert "s3cret" not in caplog.text


@pytest.mark.parametrize("user_id", [0, -5])
def test_non_positive_user_id(user_id):
    with pytest.raises(InvalidUserId):
        build_user_change_set(user_id, _payload())


def test_describe_user_create():
    payload = UserCreateRequest.model_validate(
        {"name": "Bob", "loginId": "bob", "role": "USER", "useFlag": False}
    )
    summary = describe_user_create(payload)
    assert summary.login_id == "bob"
    assert summary.role is UserRole.USER
    assert summary.use_flag is False
    assert summary.authorities == ()


def test_describe_user_create_applies_new_account_defaults():
    payload = UserCreateRequest.model_validate({"name": "Bob", "loginId": "bob", "role": "USER"})
    summary = describe_user_create(payload)
    assert summary.use_flag is True
    assert summary.authorities == ()


def test_change_set_keeps_disabled_flag():
    changes = build_user_change_set(3, _payload(useFlag=False, authorities=[]))
    assert changes.use_flag is False
    assert changes.authorities == ()
