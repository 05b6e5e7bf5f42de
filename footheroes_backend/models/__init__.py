# footheroes_backend/models/__init__.py
# Centralized imports for all database models and schemas

# Users
from .user_model import User, UserRegister, UserLogin, UserUpdate, UserRead

# Player stats
from .player_stat_model import PlayerStat, PlayerStatsRead

# Teams
from .team_model import (
    Team, TeamMember, TeamCreate, TeamJoin, CaptainTransfer, TeamRead, TeamMemberRead
)

# Matches, participants and events
from .match_model import (
    Match, MatchParticipant, MatchEvent, MatchCreate, MatchUpdate,
    ParticipantCreate, MatchEventCreate, MatchRead, MatchParticipantRead,
    MatchEventRead, ParticipantStatsRead
)

# Sessions
from .session_model import AuthSession

# Derived views
from .leaderboard_schemas import (
    LeaderboardEntry, TeamLeaderboardEntry, UserProfile, AuthPayload, DashboardData
)
