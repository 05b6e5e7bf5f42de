# store.py
# The entity store: single owner of all FootHeroes state.
#
# Every operation opens a short session on the store's engine and returns
# detached rows. "Not found" is never an exception: lookups return None and
# membership operations return False, and the routes turn that into HTTP errors.

import logging
import threading
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from footheroes_backend.core.clock import utc_now
from footheroes_backend.models.match_model import Match, MatchEvent, MatchParticipant
from footheroes_backend.models.player_stat_model import PlayerStat
from footheroes_backend.models.session_model import AuthSession
from footheroes_backend.models.team_model import Team, TeamMember
from footheroes_backend.models.user_model import User

logger = logging.getLogger(__name__)

# Fields a partial update may never overwrite
PROTECTED_FIELDS = {"id", "created_at"}

# Event type -> counter bumped on PlayerStat and MatchParticipant
EVENT_STAT_FIELDS = {
    "goal": "goals",
    "assist": "assists",
    "yellow_card": "yellow_cards",
    "red_card": "red_cards",
}


def _apply_updates(row, updates: Dict[str, Any]) -> None:
    for key, value in updates.items():
        if key in PROTECTED_FIELDS or key not in type(row).model_fields:
            continue
        setattr(row, key, value)


class FootHeroesStore:
    """
    In-memory relational store for users, teams, matches, stats and sessions.

    The store is constructed explicitly and handed to the app, so every test
    can build its own. A re-entrant lock serializes operations because FastAPI
    runs sync routes in a threadpool.
    """

    def __init__(self, engine: Engine, session_ttl_seconds: Optional[int] = None):
        self.engine = engine
        self.session_ttl_seconds = session_ttl_seconds
        self._lock = threading.RLock()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self._lock:
            with Session(self.engine, expire_on_commit=False) as session:
                yield session

    def close(self) -> None:
        self.engine.dispose()

    # =========================================
    # USERS
    # =========================================
    def create_user(self, data: Dict[str, Any]) -> User:
        """Creates a user together with a zeroed PlayerStat row."""
        with self._session() as session:
            user = User(**data)
            session.add(user)
            session.flush()  # assigns user.id

            session.add(PlayerStat(user_id=user.id))
            session.commit()
            session.refresh(user)

        logger.debug("Created user %s (%s)", user.id, user.username)
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._session() as session:
            return session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._session() as session:
            return session.exec(select(User).where(User.email == email)).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._session() as session:
            return session.exec(select(User).where(User.username == username)).first()

    def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        with self._session() as session:
            user = session.get(User, user_id)
            if not user:
                return None

            _apply_updates(user, updates)
            user.updated_at = utc_now()
            session.add(user)
            session.commit()
            session.refresh(user)
            return user

    def get_all_users(self) -> List[User]:
        with self._session() as session:
            return list(session.exec(select(User).order_by(User.id)).all())

    # =========================================
    # TEAMS & MEMBERSHIP
    # =========================================
    def create_team(self, data: Dict[str, Any]) -> Optional[Team]:
        """
        Creates a team and registers its captain as the first member.
        Returns None if the captain does not exist.
        """
        with self._session() as session:
            captain = session.get(User, data.get("captain_id"))
            if not captain:
                return None

            team = Team(**data)
            session.add(team)
            session.flush()

            session.add(TeamMember(
                team_id=team.id,
                user_id=captain.id,
                role="captain",
                position=captain.position,
            ))
            session.commit()
            session.refresh(team)

        logger.debug("Created team %s (%s) captained by user %s", team.id, team.name, team.captain_id)
        return team

    def get_team_by_id(self, team_id: int) -> Optional[Team]:
        with self._session() as session:
            return session.get(Team, team_id)

    def get_all_teams(self) -> List[Team]:
        with self._session() as session:
            return list(session.exec(select(Team).order_by(Team.id)).all())

    def update_team(self, team_id: int, updates: Dict[str, Any]) -> Optional[Team]:
        with self._session() as session:
            team = session.get(Team, team_id)
            if not team:
                return None

            _apply_updates(team, updates)
            team.updated_at = utc_now()
            session.add(team)
            session.commit()
            session.refresh(team)
            return team

    def get_team_members(self, team_id: int) -> List[TeamMember]:
        """Members in join order (the captain first)."""
        with self._session() as session:
            return list(session.exec(
                select(TeamMember)
                .where(TeamMember.team_id == team_id)
                .order_by(TeamMember.id)
            ).all())

    def get_teams_by_user_id(self, user_id: int) -> List[Team]:
        with self._session() as session:
            return list(session.exec(
                select(Team)
                .join(TeamMember, TeamMember.team_id == Team.id)
                .where(TeamMember.user_id == user_id)
                .order_by(Team.id)
            ).all())

    def add_team_member(self, team_id: int, user_id: int, position: str) -> bool:
        """
        Adds a user to a team with role 'member'.
        Fails (False) if the team or user is missing or the team is at capacity.
        """
        with self._session() as session:
            team = session.get(Team, team_id)
            user = session.get(User, user_id)
            if not team or not user:
                return False

            members = session.exec(select(TeamMember).where(TeamMember.team_id == team_id)).all()
            if len(members) >= team.max_members:
                return False

            session.add(TeamMember(team_id=team_id, user_id=user_id, role="member", position=position))
            session.commit()

        logger.debug("User %s joined team %s", user_id, team_id)
        return True

    def remove_team_member(self, team_id: int, user_id: int) -> bool:
        """Returns True only if a membership was actually removed."""
        with self._session() as session:
            rows = session.exec(
                select(TeamMember).where(TeamMember.team_id == team_id, TeamMember.user_id == user_id)
            ).all()
            for row in rows:
                session.delete(row)
            session.commit()

        if rows:
            logger.debug("User %s left team %s", user_id, team_id)
        return len(rows) > 0

    def transfer_captaincy(self, team_id: int, new_captain_id: int) -> bool:
        """
        Hands the captain role to an existing member.
        The previous captain stays on the team as a regular member.
        """
        with self._session() as session:
            team = session.get(Team, team_id)
            if not team:
                return False

            members = session.exec(select(TeamMember).where(TeamMember.team_id == team_id)).all()
            incoming = next((m for m in members if m.user_id == new_captain_id), None)
            if not incoming:
                return False

            for member in members:
                member.role = "captain" if member.user_id == new_captain_id else "member"
                session.add(member)

            team.captain_id = new_captain_id
            team.updated_at = utc_now()
            session.add(team)
            session.commit()

        logger.debug("Team %s captaincy transferred to user %s", team_id, new_captain_id)
        return True

    # =========================================
    # MATCHES
    # =========================================
    def create_match(self, data: Dict[str, Any]) -> Optional[Match]:
        """Returns None if either team or the creator does not exist."""
        with self._session() as session:
            home = session.get(Team, data.get("home_team_id"))
            away = session.get(Team, data.get("away_team_id"))
            creator = session.get(User, data.get("created_by_id"))
            if not home or not away or not creator:
                return None

            match = Match(**data)
            session.add(match)
            session.commit()
            session.refresh(match)

        logger.debug("Created match %s (%s)", match.id, match.title)
        return match

    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        with self._session() as session:
            return session.get(Match, match_id)

    def get_all_matches(self) -> List[Match]:
        with self._session() as session:
            return list(session.exec(select(Match).order_by(Match.id)).all())

    def update_match(self, match_id: int, updates: Dict[str, Any]) -> Optional[Match]:
        with self._session() as session:
            match = session.get(Match, match_id)
            if not match:
                return None

            _apply_updates(match, updates)
            match.updated_at = utc_now()
            session.add(match)
            session.commit()
            session.refresh(match)
            return match

    def get_matches_by_team_id(self, team_id: int) -> List[Match]:
        with self._session() as session:
            return list(session.exec(
                select(Match)
                .where((Match.home_team_id == team_id) | (Match.away_team_id == team_id))
                .order_by(Match.id)
            ).all())

    def get_matches_by_user_id(self, user_id: int) -> List[Match]:
        """Matches the user is lined up for as a participant."""
        with self._session() as session:
            return list(session.exec(
                select(Match)
                .where(Match.id.in_(
                    select(MatchParticipant.match_id).where(MatchParticipant.user_id == user_id)
                ))
                .order_by(Match.id)
            ).all())

    # =========================================
    # PARTICIPANTS & EVENTS
    # =========================================
    def add_match_participant(
        self,
        match_id: int,
        user_id: int,
        team_id: int,
        position: str,
        is_starter: bool = True,
    ) -> Optional[MatchParticipant]:
        """
        Lines a user up for one side of a match.
        Returns None if the match or user is missing, the team is not playing
        in this match, or the user is already lined up.
        """
        with self._session() as session:
            match = session.get(Match, match_id)
            user = session.get(User, user_id)
            if not match or not user:
                return None
            if team_id not in (match.home_team_id, match.away_team_id):
                return None

            existing = session.exec(
                select(MatchParticipant).where(
                    MatchParticipant.match_id == match_id,
                    MatchParticipant.user_id == user_id,
                )
            ).first()
            if existing:
                return None

            participant = MatchParticipant(
                match_id=match_id,
                user_id=user_id,
                team_id=team_id,
                position=position,
                is_starter=is_starter,
            )
            session.add(participant)
            session.commit()
            session.refresh(participant)
            return participant

    def get_match_participants(self, match_id: int) -> List[MatchParticipant]:
        with self._session() as session:
            return list(session.exec(
                select(MatchParticipant)
                .where(MatchParticipant.match_id == match_id)
                .order_by(MatchParticipant.id)
            ).all())

    def get_match_events(self, match_id: int) -> List[MatchEvent]:
        """Match timeline ordered by minute (then by recording order)."""
        with self._session() as session:
            return list(session.exec(
                select(MatchEvent)
                .where(MatchEvent.match_id == match_id)
                .order_by(MatchEvent.minute, MatchEvent.id)
            ).all())

    def add_match_event(
        self,
        match_id: int,
        player_id: int,
        event_type: str,
        minute: int,
        description: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> Optional[MatchEvent]:
        """
        Records an event on the match timeline.
        Goals, assists and cards also bump the player's career stats and,
        if the player is lined up, their per-match stats.
        """
        with self._session() as session:
            match = session.get(Match, match_id)
            player = session.get(User, player_id)
            if not match or not player:
                return None

            participant = session.exec(
                select(MatchParticipant).where(
                    MatchParticipant.match_id == match_id,
                    MatchParticipant.user_id == player_id,
                )
            ).first()
            if team_id is None and participant:
                team_id = participant.team_id

            event = MatchEvent(
                match_id=match_id,
                player_id=player_id,
                team_id=team_id,
                type=event_type,
                minute=minute,
                description=description,
            )
            session.add(event)

            stat_field = EVENT_STAT_FIELDS.get(event_type)
            if stat_field:
                stats = session.get(PlayerStat, player_id)
                if stats:
                    setattr(stats, stat_field, getattr(stats, stat_field) + 1)
                    stats.updated_at = utc_now()
                    session.add(stats)
                if participant:
                    setattr(participant, stat_field, getattr(participant, stat_field) + 1)
                    session.add(participant)

            session.commit()
            session.refresh(event)

        logger.debug("Match %s: %s by user %s at %s'", match_id, event_type, player_id, minute)
        return event

    def record_match_result(self, match_id: int) -> bool:
        """
        Credits every participant of a completed match: one match played,
        the match duration in minutes, a win/loss/draw and, for goalkeepers
        whose opponent did not score, a clean sheet.

        Runs at most once per match. Returns False until the match is
        completed with both scores set, and on every call after the first credit.
        """
        with self._session() as session:
            match = session.get(Match, match_id)
            if not match or match.status != "completed":
                return False
            if match.home_score is None or match.away_score is None:
                return False
            if match.results_recorded:
                return False

            participants = session.exec(
                select(MatchParticipant).where(MatchParticipant.match_id == match_id)
            ).all()

            for participant in participants:
                if participant.team_id == match.home_team_id:
                    scored, conceded = match.home_score, match.away_score
                else:
                    scored, conceded = match.away_score, match.home_score

                participant.minutes_played = match.duration
                session.add(participant)

                stats = session.get(PlayerStat, participant.user_id)
                if not stats:
                    continue

                stats.matches_played += 1
                stats.minutes_played += match.duration
                if scored > conceded:
                    stats.wins += 1
                elif scored < conceded:
                    stats.losses += 1
                else:
                    stats.draws += 1
                if participant.position == "goalkeeper" and conceded == 0:
                    stats.clean_sheets += 1
                stats.updated_at = utc_now()
                session.add(stats)

            match.results_recorded = True
            session.add(match)
            session.commit()

        logger.info("Recorded result for match %s (%s participants)", match_id, len(participants))
        return True

    # =========================================
    # PLAYER STATS
    # =========================================
    def get_player_stats(self, user_id: int) -> Optional[PlayerStat]:
        with self._session() as session:
            return session.get(PlayerStat, user_id)

    def update_player_stats(self, user_id: int, updates: Dict[str, Any]) -> Optional[PlayerStat]:
        """
        Merges the given counters into the player's stats.
        'rating' is replaced as given, not averaged.
        """
        with self._session() as session:
            stats = session.get(PlayerStat, user_id)
            if not stats:
                return None

            for key, value in updates.items():
                if key == "user_id" or key not in PlayerStat.model_fields:
                    continue
                setattr(stats, key, value)
            stats.updated_at = utc_now()
            session.add(stats)
            session.commit()
            session.refresh(stats)
            return stats

    def get_all_player_stats(self) -> List[PlayerStat]:
        with self._session() as session:
            return list(session.exec(select(PlayerStat).order_by(PlayerStat.user_id)).all())

    # =========================================
    # SESSIONS
    # =========================================
    def create_session(self, token: str, user_id: int) -> AuthSession:
        with self._session() as session:
            auth_session = AuthSession(token=token, user_id=user_id)
            session.add(auth_session)
            session.commit()
            session.refresh(auth_session)
            return auth_session

    def get_user_by_token(self, token: str) -> Optional[User]:
        """Resolves a bearer token. Expired sessions are dropped on lookup."""
        with self._session() as session:
            auth_session = session.get(AuthSession, token)
            if not auth_session:
                return None

            if self.session_ttl_seconds is not None:
                expires_at = auth_session.created_at + timedelta(seconds=self.session_ttl_seconds)
                if utc_now() >= expires_at:
                    session.delete(auth_session)
                    session.commit()
                    logger.info("Session for user %s expired", auth_session.user_id)
                    return None

            return session.get(User, auth_session.user_id)

    def delete_session(self, token: str) -> bool:
        with self._session() as session:
            auth_session = session.get(AuthSession, token)
            if not auth_session:
                return False
            session.delete(auth_session)
            session.commit()
            return True
