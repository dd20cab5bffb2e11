import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from clubhub.cryptography import encrypt_password, verify_password, create_token, decode_token, JWTError
from clubhub.exceptions import AuthenticationError, AuthorizationError, DuplicateError, ValidationError
from clubhub.models.user_model import User
from clubhub.schema.base import dump
from clubhub.schema.user_schema import UserOut

logger = logging.getLogger(__name__)


def user_summary(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "isAdmin": user.admin,
    }


# ------------------ Resolve bearer token ------------------
async def get_user_from_header(db: Session, authorization: str = None) -> User:
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Authentication required")

    token = authorization.split(" ", 1)[1].strip()
    try:
        claims = decode_token(token)
        user_id = int(claims.get("userId") or claims.get("id"))
    except (JWTError, TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise AuthenticationError("User not found")
    return user


async def require_admin(db: Session, authorization: str = None) -> User:
    user = await get_user_from_header(db, authorization)
    if not user.admin:
        raise AuthorizationError("Admin access required")
    return user


# ------------------ Login ------------------
async def login_controller(db: Session, email: str, password: str) -> dict:
    if not email or not password:
        raise ValidationError("Email and password required")

    user = db.query(User).filter(User.email == str(email).strip().lower()).first()
    if not user or not verify_password(password, user.password):
        raise AuthenticationError("Invalid credentials")

    logger.info("User %s logged in", user.id)
    return {"token": create_token(user.id, user.email), "user": user_summary(user)}


# ------------------ Signup ------------------
async def signup_controller(db: Session, user_data: dict) -> dict:
    email = user_data["email"].strip().lower()
    if db.query(User).filter(User.email == email).first():
        raise DuplicateError("Email already registered", error="DUPLICATE_EMAIL")

    new_user = User(**{**user_data, "email": email, "role": "user", "is_admin": False})
    new_user.password = encrypt_password(user_data["password"])
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError("Email already registered", error="DUPLICATE_EMAIL")
    db.refresh(new_user)

    logger.info("User %s signed up", new_user.id)
    return {"token": create_token(new_user.id, new_user.email), "user": user_summary(new_user)}


# ------------------ Profile ------------------
async def profile_controller(user: User) -> dict:
    profile = dump(UserOut, user)
    profile["isAdmin"] = user.admin
    return profile


async def update_profile_controller(db: Session, user: User, update_data: dict) -> dict:
    if not update_data:
        raise ValidationError("No data provided")
    for key, val in update_data.items():
        setattr(user, key, val)
    db.commit()
    db.refresh(user)
    return await profile_controller(user)


# ------------------ Admin provisioning (out-of-band) ------------------
def create_admin_user(db: Session, name: str, email: str, password: str) -> User:
    email = email.strip().lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        existing.role = "admin"
        existing.is_admin = True
        db.commit()
        return existing

    admin = User(
        name=name,
        email=email,
        password=encrypt_password(password),
        role="admin",
        is_admin=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin
