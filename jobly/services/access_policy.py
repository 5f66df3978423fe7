"""Access policies and the decision function shared by every route.

``decide`` is a closed-form function of the caller identity, the policy,
the username addressed by the route and whether the request carries a
sensitive field. It never mutates the identity and never reads storage.

Decision table for SELF_OR_ADMIN (identity present):

    sensitive field | self | admin | decision
    ----------------+------+-------+---------
    no              | yes  |  any  | ALLOW
    no              | no   |  yes  | ALLOW
    no              | no   |  no   | DENY
    yes             | yes  |  any  | ALLOW
    yes             | no   |  any  | DENY
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jobly.errors import UnauthorizedError

# Fields that only the account owner may change
SENSITIVE_FIELDS: frozenset[str] = frozenset({"password"})


class Policy(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"
    SELF_OR_ADMIN = "self_or_admin"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class Identity:
    """Authenticated principal for one request.

    ``is_admin`` is kept exactly as the token claimed it; only the literal
    ``True`` grants admin rights.
    """

    username: str
    is_admin: Any = False

    @property
    def has_admin_rights(self) -> bool:
        return self.is_admin is True


def has_sensitive_field(body: Mapping[str, Any] | None) -> bool:
    """Return True if the request body sets any sensitive field."""
    if not body:
        return False
    return any(body.get(field) is not None for field in SENSITIVE_FIELDS)


def decide(
    identity: Identity | None,
    policy: Policy,
    target_username: str | None = None,
    sensitive_field: bool = False,
) -> Decision:
    """Decide whether the caller may proceed under ``policy``."""
    if policy is Policy.PUBLIC:
        return Decision.ALLOW

    if identity is None:
        return Decision.DENY

    if policy is Policy.AUTHENTICATED:
        return Decision.ALLOW

    if policy is Policy.ADMIN:
        return Decision.ALLOW if identity.has_admin_rights else Decision.DENY

    if policy is Policy.SELF_OR_ADMIN:
        is_self = target_username is not None and identity.username == target_username
        if sensitive_field:
            return Decision.ALLOW if is_self else Decision.DENY
        return Decision.ALLOW if is_self or identity.has_admin_rights else Decision.DENY

    return Decision.DENY


def authorize(
    identity: Identity | None,
    policy: Policy,
    target_username: str | None = None,
    sensitive_field: bool = False,
) -> None:
    """Raise UnauthorizedError unless ``decide`` allows the caller.

    Raises:
        UnauthorizedError: If the policy denies the caller
    """
    if decide(identity, policy, target_username, sensitive_field) is Decision.DENY:
        raise UnauthorizedError()
