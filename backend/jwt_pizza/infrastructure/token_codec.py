"""Token Codec — signs Claims into a JWT credential and decodes them back.

Invariants:
    - The payload is the Claims wire shape (roles with objectId) plus iat and a
      random jti, so every issued credential has its own signature
    - Any signature, format, or claims-shape failure surfaces as UnauthorizedError
"""

import logging
import uuid
from datetime import datetime, timezone

from jose import jwt, JWTError
from pydantic import ValidationError

from jwt_pizza.core.claims import Claims
from jwt_pizza.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class TokenCodec:
    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, claims: Claims) -> str:
        payload = claims.model_dump(mode="json", by_alias=True)
        payload["iat"] = int(datetime.now(timezone.utc).timestamp())
        payload["jti"] = uuid.uuid4().hex
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, credential: str) -> Claims:
        try:
            payload = jwt.decode(credential, self._secret, algorithms=[self._algorithm])
            return Claims.model_validate(payload)
        except (JWTError, ValidationError) as e:
            logger.warning(f"Credential rejected: {type(e).__name__}")
            raise UnauthorizedError() from e
