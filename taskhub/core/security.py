from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
import bcrypt

from taskhub.core.config import Settings

ALGORITHM = "HS256"


def _encode_password(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode()[:72]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_encode_password(password), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time compare of a plaintext against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode_password(password), password_hash.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(settings: Settings, user_id: str, session_id: Optional[str] = None) -> str:
    payload = {
        "sub": user_id,
        "sid": session_id,
        "exp": datetime.now(tz=timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MIN),
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_token(settings: Settings, token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if payload.get("type") != "access":
        return None
    return payload
