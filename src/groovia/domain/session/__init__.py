# 🧭 groovia/domain/session/__init__.py
from .state import AwaitingQuery, Browsing, HISTORY_LIMIT, Idle, SessionMode, SessionState, UserSession
from .stats import GlobalStats, StatsSnapshot
from .store import SessionStore

__all__ = [
    "AwaitingQuery",
    "Browsing",
    "HISTORY_LIMIT",
    "Idle",
    "SessionMode",
    "SessionState",
    "UserSession",
    "GlobalStats",
    "StatsSnapshot",
    "SessionStore",
]
