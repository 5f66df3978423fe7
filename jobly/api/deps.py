"""Request dependencies that establish identity and enforce access policies."""

import json
from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.services.access_policy import Identity, Policy, authorize, has_sensitive_field
from jobly.services.auth_service import decode_token
from jobly.utils import get_logger

logger = get_logger(__name__)

# Missing credentials are not an error; Public routes must stay reachable
optional_security = HTTPBearer(auto_error=False)

_BODY_METHODS = {"POST", "PUT", "PATCH"}


async def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(optional_security)],
) -> Identity | None:
    """Identity behind the bearer token, or None for anonymous callers.

    An invalid token is treated exactly like no token.
    """
    if not credentials:
        return None
    return decode_token(credentials.credentials)


async def _read_json_body(request: Request) -> Any:
    if request.method not in _BODY_METHODS:
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        # body validation reports the malformed payload later
        logger.debug(f"{request.method} {request.url.path}: body is not JSON")
        return None


def require(policy: Policy) -> Callable[..., Awaitable[Identity | None]]:
    """Build a dependency that enforces ``policy`` for the route.

    For SELF_OR_ADMIN the target is the ``username`` path parameter, and a
    sensitive field in the JSON body narrows the policy to self-only.

    Usage:
        @router.patch("/{username}")
        async def update_user(identity: Identity = Depends(require(Policy.SELF_OR_ADMIN))): ...
    """

    async def dependency(
        request: Request,
        identity: Annotated[Identity | None, Depends(get_identity)],
    ) -> Identity | None:
        target_username = request.path_params.get("username")
        sensitive_field = False
        if policy is Policy.SELF_OR_ADMIN:
            body = await _read_json_body(request)
            sensitive_field = isinstance(body, dict) and has_sensitive_field(body)

        authorize(identity, policy, target_username, sensitive_field)
        return identity

    dependency.__name__ = f"require_{policy.value}"
    return dependency


require_admin = require(Policy.ADMIN)
require_login = require(Policy.AUTHENTICATED)
require_self_or_admin = require(Policy.SELF_OR_ADMIN)
