"""Security: JWT verification."""

from cardfile.infrastructure.security.jwt import (
    create_access_token,
    roles_from_claims,
    verify_token,
)

__all__ = ["create_access_token", "roles_from_claims", "verify_token"]
