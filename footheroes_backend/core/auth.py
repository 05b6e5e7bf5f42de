import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from passlib.context import CryptContext

from footheroes_backend.core.config import Settings
from footheroes_backend.core.dependencies import get_app_settings, get_store
from footheroes_backend.core.responses import envelope
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.leaderboard_schemas import AuthPayload
from footheroes_backend.models.user_model import User, UserLogin, UserRegister
from footheroes_backend.services.assembler import user_view

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
logger = logging.getLogger(__name__)


def generate_token() -> str:
    """Opaque bearer token for a new session."""
    return secrets.token_urlsafe(32)


# === TOKEN DEPENDENCIES ===

def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    """Extracts the token from an 'Authorization: Bearer <token>' header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def require_auth(
    token: Optional[str] = Depends(get_bearer_token),
    store: FootHeroesStore = Depends(get_store),
) -> User:
    """Rejects the request with 401 unless the token maps to a user."""
    if not token:
        raise HTTPException(status_code=401, detail="No token provided")

    user = store.get_user_by_token(token)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user


def optional_auth(
    token: Optional[str] = Depends(get_bearer_token),
    store: FootHeroesStore = Depends(get_store),
) -> Optional[User]:
    """Attaches the user when a valid token is sent, never rejects."""
    if not token:
        return None
    return store.get_user_by_token(token)


def start_session(store: FootHeroesStore, user: User) -> AuthPayload:
    token = generate_token()
    store.create_session(token, user.id)
    return AuthPayload(user=user_view(user), token=token)


# === REGISTER ===

@router.post("/register", status_code=201)
def register_user(data: UserRegister, store: FootHeroesStore = Depends(get_store)):
    if store.get_user_by_email(data.email):
        raise HTTPException(status_code=400, detail="User with this email already exists")

    if store.get_user_by_username(data.username):
        raise HTTPException(status_code=400, detail="Username already taken")

    user_data = data.model_dump(exclude={"password"})
    user_data["password_hash"] = pwd_context.hash(data.password)
    user = store.create_user(user_data)

    logger.info("Registered user %s (%s)", user.id, user.username)
    return envelope(start_session(store, user), message="User registered successfully")


# === LOGIN ===

@router.post("/login")
def login_user(
    data: UserLogin,
    store: FootHeroesStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    user = store.get_user_by_email(data.email)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    # Demo mode accepts any password for a known email
    if settings.verify_passwords:
        if not user.password_hash or not pwd_context.verify(data.password, user.password_hash):
            raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info("User %s logged in", user.id)
    return envelope(start_session(store, user), message="Login successful")


# === LOGOUT ===

@router.post("/logout")
def logout_user(
    user: User = Depends(require_auth),
    token: Optional[str] = Depends(get_bearer_token),
    store: FootHeroesStore = Depends(get_store),
):
    store.delete_session(token)
    logger.info("User %s logged out", user.id)
    return envelope(message="Logged out successfully")


# === CURRENT USER ===

@router.get("/me")
def get_current_user(user: User = Depends(require_auth)):
    return envelope(user_view(user))
