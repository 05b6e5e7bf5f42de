# assembler.py
# Builds the nested API views (team with captain and members, match with both
# teams, creator, lineup and timeline) from the store's normalized rows.
#
# Views are assembled on every read, so a renamed user shows up renamed in
# every team and match straight away. Nothing here writes to the store.

from typing import List, Optional

from footheroes_backend.core.store import FootHeroesStore
from footheroes_backend.models.leaderboard_schemas import UserProfile
from footheroes_backend.models.match_model import (
    Match, MatchEvent, MatchEventRead, MatchParticipant, MatchParticipantRead,
    MatchRead, ParticipantStatsRead,
)
from footheroes_backend.models.player_stat_model import PlayerStat, PlayerStatsRead
from footheroes_backend.models.team_model import Team, TeamMember, TeamMemberRead, TeamRead
from footheroes_backend.models.user_model import User, UserRead


def user_view(user: User) -> UserRead:
    return UserRead(**user.model_dump(exclude={"password_hash"}))


def stats_view(stats: PlayerStat) -> PlayerStatsRead:
    return PlayerStatsRead(**stats.model_dump())


def member_view(store: FootHeroesStore, member: TeamMember) -> Optional[TeamMemberRead]:
    user = store.get_user_by_id(member.user_id)
    if not user:
        return None
    return TeamMemberRead(
        user_id=member.user_id,
        user=user_view(user),
        team_id=member.team_id,
        role=member.role,
        position=member.position,
        joined_at=member.joined_at,
    )


def team_view(store: FootHeroesStore, team: Team) -> TeamRead:
    """Team with its live captain and current members (join order)."""
    captain = store.get_user_by_id(team.captain_id)
    members = [member_view(store, m) for m in store.get_team_members(team.id)]

    return TeamRead(
        **team.model_dump(),
        captain=user_view(captain),
        members=[m for m in members if m is not None],
    )


def participant_view(store: FootHeroesStore, participant: MatchParticipant) -> Optional[MatchParticipantRead]:
    user = store.get_user_by_id(participant.user_id)
    if not user:
        return None
    return MatchParticipantRead(
        id=participant.id,
        match_id=participant.match_id,
        user_id=participant.user_id,
        user=user_view(user),
        team_id=participant.team_id,
        position=participant.position,
        is_starter=participant.is_starter,
        minutes_played=participant.minutes_played,
        stats=ParticipantStatsRead(
            goals=participant.goals,
            assists=participant.assists,
            yellow_cards=participant.yellow_cards,
            red_cards=participant.red_cards,
            rating=participant.rating,
        ),
    )


def event_view(store: FootHeroesStore, event: MatchEvent) -> Optional[MatchEventRead]:
    player = store.get_user_by_id(event.player_id)
    if not player:
        return None
    return MatchEventRead(**event.model_dump(), player=user_view(player))


def match_view(store: FootHeroesStore, match: Match) -> MatchRead:
    """Match with both teams, its creator, the lineup and the timeline (by minute)."""
    participants = [participant_view(store, p) for p in store.get_match_participants(match.id)]
    events = [event_view(store, e) for e in store.get_match_events(match.id)]

    return MatchRead(
        **match.model_dump(),
        home_team=team_view(store, store.get_team_by_id(match.home_team_id)),
        away_team=team_view(store, store.get_team_by_id(match.away_team_id)),
        created_by=user_view(store.get_user_by_id(match.created_by_id)),
        participants=[p for p in participants if p is not None],
        events=[e for e in events if e is not None],
    )


def match_views(store: FootHeroesStore, matches: List[Match]) -> List[MatchRead]:
    return [match_view(store, m) for m in matches]


def user_profile(store: FootHeroesStore, user: User) -> UserProfile:
    """User plus career stats, teams and match history."""
    stats = store.get_player_stats(user.id)
    if stats is None:
        stats = PlayerStat(user_id=user.id)

    return UserProfile(
        **user_view(user).model_dump(),
        stats=stats_view(stats),
        teams=[team_view(store, t) for t in store.get_teams_by_user_id(user.id)],
        match_history=match_views(store, store.get_matches_by_user_id(user.id)),
    )
