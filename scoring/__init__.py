"""
골프 대회 스코어링 엔진

그로스/네트 스트로크 플레이, 스테이블포드, 스킨 리더보드 계산 모듈
"""
from .models import (
    Player,
    Score,
    Tournament,
    StablefordPoints,
    SkinsSettings,
    ScoringFormat,
    SkinsType,
    LeaderboardEntry,
    RankedEntry,
    SkinWinner,
    SkinsResult,
    SkinsLeaderboard,
    SkinsLeaderboardRow,
    DEFAULT_COURSE_PAR,
    HOLES_PER_ROUND,
)
from .calculator import (
    LeaderboardCalculator,
    build_leaderboard,
    total_par,
    prorated_par,
    prorated_quota,
    stableford_points_for_hole,
)
from .ranks import assign_ranks, rank_gross, rank_net, rank_stableford
from .skins import calculate_skins, build_skins_leaderboard
from .formatting import format_vs_par, format_holes_played, format_vs_quota, format_money

__all__ = [
    # Models
    "Player",
    "Score",
    "Tournament",
    "StablefordPoints",
    "SkinsSettings",
    "ScoringFormat",
    "SkinsType",
    "LeaderboardEntry",
    "RankedEntry",
    "SkinWinner",
    "SkinsResult",
    "SkinsLeaderboard",
    "SkinsLeaderboardRow",
    "DEFAULT_COURSE_PAR",
    "HOLES_PER_ROUND",
    # Calculator
    "LeaderboardCalculator",
    "build_leaderboard",
    "total_par",
    "prorated_par",
    "prorated_quota",
    "stableford_points_for_hole",
    # Ranks
    "assign_ranks",
    "rank_gross",
    "rank_net",
    "rank_stableford",
    # Skins
    "calculate_skins",
    "build_skins_leaderboard",
    # Formatting
    "format_vs_par",
    "format_holes_played",
    "format_vs_quota",
    "format_money",
]
