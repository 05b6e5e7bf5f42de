# user_routes.py
# Public profiles, self-service profile edits, career stats and match history.

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from footheroes_backend.core.auth import optional_auth, require_auth
from footheroes_backend.core.dependencies import get_store
from footheroes_backend.core.responses import envelope
from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.user_model import User, UserUpdate
from footheroes_backend.services.assembler import match_views, stats_view, user_profile, user_view

router = APIRouter()


def get_user_or_404(store: FootHeroesStore, user_id: int) -> User:
    user = store.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}")
def get_user(
    user_id: int,
    viewer: Optional[User] = Depends(optional_auth),
    store: FootHeroesStore = Depends(get_store),
):
    return envelope(user_view(get_user_or_404(store, user_id)))


@router.get("/{user_id}/profile")
def get_user_profile(
    user_id: int,
    viewer: Optional[User] = Depends(optional_auth),
    store: FootHeroesStore = Depends(get_store),
):
    """User with career stats, teams and match history."""
    user = get_user_or_404(store, user_id)
    return envelope(user_profile(store, user))


@router.put("/{user_id}")
def update_user(
    user_id: int,
    data: UserUpdate,
    user: User = Depends(require_auth),
    store: FootHeroesStore = Depends(get_store),
):
    # Users can only edit their own profile
    if user.id != user_id:
        raise HTTPException(status_code=403, detail="Not authorized to update this user")

    updated = store.update_user(user_id, data.model_dump(exclude_unset=True, exclude_none=True))
    if not updated:
        raise HTTPException(status_code=400, detail="Failed to update user")

    return envelope(user_view(updated), message="User updated successfully")


@router.get("/{user_id}/stats")
def get_user_stats(user_id: int, store: FootHeroesStore = Depends(get_store)):
    stats = store.get_player_stats(user_id)
    if not stats:
        raise HTTPException(status_code=404, detail="Player stats not found")
    return envelope(stats_view(stats))


@router.get("/{user_id}/matches")
def get_user_matches(user_id: int, store: FootHeroesStore = Depends(get_store)):
    return envelope(match_views(store, store.get_matches_by_user_id(user_id)))
