from datetime import datetime, timedelta

from jose import jwt, JWTError
from passlib.context import CryptContext

from clubhub.constant_file import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRES_DAYS

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def encrypt_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password, hashed_password) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # unknown or corrupt hash
        return False


def create_token(user_id: int, email: str, expires_in: timedelta = None) -> str:
    if expires_in is None:
        expires_in = timedelta(days=JWT_EXPIRES_DAYS)
    now = datetime.utcnow()
    payload = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Return the token claims; raises JWTError when invalid or expired."""
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])


__all__ = ["encrypt_password", "verify_password", "create_token", "decode_token", "JWTError"]
