import logging
from fastapi import Request
from jose import jwt, JWTError

from .exceptions import AuthError

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies signed session tokens carrying a user id.

    Tokens have no expiry; they stay valid until the secret key changes.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def issue(self, user_id: str) -> str:
        payload = {"id": user_id}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        if not token:
            raise AuthError("Invalid token")
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Token verification failed: {e}")
            raise AuthError("Invalid token")

        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            logger.warning("Token verification failed: no user id in payload")
            raise AuthError("Invalid token")
        return user_id


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service
