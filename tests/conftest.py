"""
Pytest configuration and fixtures for golf leaderboard tests
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from scoring.models import (
    Player,
    Score,
    ScoringFormat,
    SkinsSettings,
    SkinsType,
    StablefordPoints,
    Tournament,
)


# 전반 36 + 후반 36 = 72
COURSE_PAR = (4, 4, 3, 5, 4, 4, 3, 4, 5, 4, 4, 3, 5, 4, 4, 3, 4, 5)


def make_scores(player_id, strokes_list, start_hole=1):
    """타수 리스트 → 연속된 홀의 Score 목록 (None은 미플레이)"""
    return [
        Score(player_id=player_id, hole=start_hole + i, strokes=strokes)
        for i, strokes in enumerate(strokes_list)
    ]


def make_player(player_id, handicap=0, flight="A", in_skins=False, quota=None, name=None):
    return Player(
        id=player_id,
        name=name or f"Player {player_id}",
        handicap=handicap,
        quota=36 - handicap if quota is None else quota,
        flight=flight,
        in_skins=in_skins
    )


@pytest.fixture
def course_par():
    return COURSE_PAR


@pytest.fixture
def tournament():
    """그로스 스킨, 캐리오버 사용, 바이인 $10"""
    return Tournament(
        course_par=COURSE_PAR,
        format=ScoringFormat.BOTH,
        stableford_points=StablefordPoints(),
        skins=SkinsSettings(enabled=True, buy_in=10.0, skins_type=SkinsType.GROSS, carryover=True),
        name="Club Championship",
        flights=("A", "B")
    )


@pytest.fixture
def roster():
    """플라이트 A 2명, B 2명, 스킨 참가 3명"""
    return [
        make_player("p1", handicap=4, flight="A", in_skins=True, name="Kim"),
        make_player("p2", handicap=10, flight="A", in_skins=True, name="Lee"),
        make_player("p3", handicap=18, flight="B", in_skins=True, name="Park"),
        make_player("p4", handicap=-2, flight="B", in_skins=False, name="Choi"),
    ]


@pytest.fixture
def round_scores():
    """
    p1: 18홀 완료, 모든 홀 파 (72)
    p2: 9홀 진행, 모든 홀 보기 (+9)
    p3: 18홀 완료, 1번 홀 버디 외 파 (71)
    p4: 플레이 전
    """
    p1 = make_scores("p1", list(COURSE_PAR))
    p2 = make_scores("p2", [par + 1 for par in COURSE_PAR[:9]] + [None] * 9)
    p3 = make_scores("p3", [COURSE_PAR[0] - 1] + list(COURSE_PAR[1:]))
    return p1 + p2 + p3


@pytest.fixture
def snapshot_data():
    """JSON 스냅샷 형식 샘플"""
    return {
        "tournament": {
            "name": "Member-Guest",
            "format": "both",
            "course_par": list(COURSE_PAR),
            "flights": ["A", "B"],
            "stableford_points": {
                "albatross": 10, "eagle": 7, "birdie": 4,
                "par": 2, "bogey": 1, "doublePlus": 0
            },
            "skins_enabled": True,
            "skins_buy_in": 20,
            "skins_type": "net",
            "skins_carryover": True,
        },
        "players": [
            {"id": "p1", "name": "Kim", "handicap": 4, "quota": 32, "flight": "A", "in_skins": True},
            {"id": "p2", "name": "Lee", "handicap": 10, "flight": "B", "in_skins": True},
        ],
        "scores": [
            {"player_id": "p1", "hole": 1, "strokes": 4},
            {"player_id": "p1", "hole": 2, "strokes": 5},
            {"player_id": "p2", "hole": 1, "strokes": 6},
            {"player_id": "p2", "hole": 2, "strokes": None},
        ],
    }
