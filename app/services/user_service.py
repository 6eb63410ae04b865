# File: app/services/user_service.py

"""
User update handling.

Turns validated request shapes into the set of changes an update would
apply. Storing the user and hashing the password happen elsewhere; this
module only decides what changes.
"""

import logging

from app.schemas.user import (
    UserChangeSet,
    UserCreateRequest,
    UserCreateSummary,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)


NEW_USER_ENABLED = True


class InvalidUserId(ValueError):
    pass


def build_user_change_set(user_id: int, payload: UserUpdateRequest) -> UserChangeSet:
    """
    Read ``payload`` once and describe the resulting update of ``user_id``.

    Every base field is copied as-is, so an omitted ``useFlag`` or
    ``authorities`` stays ``None`` and leaves the stored value alone. The
    password only shows up as the ``password_changed`` flag, set when the
    payload carries one.
    """
    if user_id < 1:
        raise InvalidUserId(f"user id must be positive, got {user_id}")

    changes = UserChangeSet(
        user_id=user_id,
        password_changed=payload.password is not None,
        **payload.base_fields(),
    )
    logger.info(
        "User %s update accepted (login_id=%s, role=%s, password_changed=%s)",
        user_id,
        changes.login_id,
        changes.role.value,
        changes.password_changed,
    )
    return changes


def describe_user_create(payload: UserCreateRequest) -> UserCreateSummary:
    """New accounts are enabled and hold no authorities unless told otherwise."""
    fields = payload.base_fields()
    if fields["use_flag"] is None:
        fields["use_flag"] = NEW_USER_ENABLED
    if fields["authorities"] is None:
        fields["authorities"] = ()
    summary = UserCreateSummary(**fields)
    logger.info("User create accepted (login_id=%s, role=%s)", summary.login_id, summary.role.value)
    return summary
