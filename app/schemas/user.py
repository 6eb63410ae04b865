# File: app/schemas/user.py

"""
Request and response shapes for the user endpoints.

The create and update requests are both flat models. Neither subclasses the
other: both are built by ``build_request_model`` from the field tables below,
so the types, constraints and docs of the shared fields cannot drift apart.
The same tables feed the OpenAPI descriptions and ``GET /users/fields/{shape}``.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, create_model, field_validator
from pydantic.alias_generators import to_camel


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class Authority(str, Enum):
    USER_VIEW = "USER_VIEW"
    USER_EDIT = "USER_EDIT"
    ADMIN_VIEW = "ADMIN_VIEW"
    ADMIN_EDIT = "ADMIN_EDIT"
    NOTICE_VIEW = "NOTICE_VIEW"
    NOTICE_EDIT = "NOTICE_EDIT"


class FieldDoc(NamedTuple):
    description: str
    required: bool


class FieldDef(NamedTuple):
    attr: str
    annotation: Any
    doc: FieldDoc
    constraints: Dict[str, Any] = {}


# -----------------------------
# Field tables (keyed by wire name)
# -----------------------------

# Optional fields default to None, meaning "not supplied".
USER_CREATE_FIELD_DEFS: Dict[str, FieldDef] = {
    "loginId": FieldDef("login_id", str, FieldDoc("Login ID", True), {"min_length": 1, "max_length": 50}),
    "name": FieldDef("name", str, FieldDoc("User name", True), {"min_length": 1, "max_length": 100}),
    "role": FieldDef("role", UserRole, FieldDoc("Account type", True)),
    "useFlag": FieldDef("use_flag", Optional[bool], FieldDoc("Whether the account is enabled", False)),
    "authorities": FieldDef(
        "authorities",
        Optional[Tuple[Authority, ...]],
        FieldDoc("Granted authorities", False),
    ),
}

USER_UPDATE_FIELD_DEFS: Dict[str, FieldDef] = {
    **USER_CREATE_FIELD_DEFS,
    "password": FieldDef(
        "password",
        Optional[str],
        FieldDoc("Password", False),
        {"min_length": 1, "max_length": 100},
    ),
}

USER_CREATE_FIELDS: Dict[str, FieldDoc] = {name: field_def.doc for name, field_def in USER_CREATE_FIELD_DEFS.items()}
USER_UPDATE_FIELDS: Dict[str, FieldDoc] = {name: field_def.doc for name, field_def in USER_UPDATE_FIELD_DEFS.items()}

BASE_ATTRS = frozenset(field_def.attr for field_def in USER_CREATE_FIELD_DEFS.values())


def payload_key(model: BaseModel) -> tuple:
    """Field values of ``model`` in declaration order."""
    return tuple(getattr(model, name) for name in type(model).model_fields)


class UserRequest(BaseModel):
    """
    Behaviour shared by the user request models. Declares no fields of its
    own; those come from the field tables.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    @field_validator("authorities", check_fields=False)
    @classmethod
    def check_authorities(cls, value):
        if value is not None and len(set(value)) != len(value):
            raise ValueError("authorities must not contain duplicates")
        return value

    def base_fields(self) -> Dict[str, Any]:
        """The part of the payload shared with the create request."""
        return self.model_dump(include=BASE_ATTRS)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return payload_key(self) == payload_key(other)

    def __hash__(self):
        return hash(payload_key(self))


def build_request_model(name: str, field_defs: Dict[str, FieldDef], doc: Optional[str] = None) -> Type[UserRequest]:
    fields = {}
    for wire_name, field_def in field_defs.items():
        default = ... if field_def.doc.required else None
        fields[field_def.attr] = (
            field_def.annotation,
            Field(default, alias=wire_name, description=field_def.doc.description, **field_def.constraints),
        )
    return create_model(name, __base__=UserRequest, __module__=__name__, __doc__=doc, **fields)


# -----------------------------
# Requests
# -----------------------------

UserCreateRequest = build_request_model("UserCreateRequest", USER_CREATE_FIELD_DEFS, "Body of ``POST /users/``.")

UserUpdateRequest = build_request_model(
    "UserUpdateRequest",
    USER_UPDATE_FIELD_DEFS,
    """
    Body of ``PUT /users/{user_id}``.

    Carries every field of :class:`UserCreateRequest` plus ``password``.
    ``password`` is plaintext here. Any optional field left as ``None`` is
    left unchanged on the stored user.
    """,
)

_FIELD_TABLES = {
    UserCreateRequest: USER_CREATE_FIELDS,
    UserUpdateRequest: USER_UPDATE_FIELDS,
}


def field_docs(model) -> Dict[str, FieldDoc]:
    """Documentation table of a request model (class or instance)."""
    cls = model if isinstance(model, type) else type(model)
    return dict(_FIELD_TABLES[cls])


# -----------------------------
# Responses
# -----------------------------

_RESPONSE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateSummary(BaseModel):
    model_config = _RESPONSE_CONFIG

    login_id: str
    name: str
    role: UserRole
    use_flag: bool
    authorities: Tuple[Authority, ...]


class UserChangeSet(BaseModel):
    """
    What an update would write; never includes the password itself.
    ``None`` in ``use_flag`` or ``authorities`` means the stored value stays.
    """

    model_config = _RESPONSE_CONFIG

    user_id: int
    login_id: str
    name: str
    role: UserRole
    use_flag: Optional[bool] = None
    authorities: Optional[Tuple[Authority, ...]] = None
    password_changed: bool
