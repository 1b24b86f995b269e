"""Session token helpers — signature extraction and bearer header parsing."""

BEARER_PREFIX = "bearer "


def token_signature(credential: str | None) -> str:
    """Third dot-delimited segment of a credential, or '' when it has fewer than three."""
    if not credential:
        return ""
    parts = credential.split(".")
    if len(parts) > 2:
        return parts[2]
    return ""


def read_bearer(authorization: str | None) -> str | None:
    """Extract the credential from an 'Authorization: Bearer <token>' header value."""
    if not authorization:
        return None
    if authorization[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None
