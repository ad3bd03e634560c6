"""
골프 스코어링 엔진 데이터 모델

입력 레코드(선수, 스코어, 대회 설정)는 모두 불변 스냅샷이며,
출력 레코드(리더보드 행, 스킨 결과)는 호출마다 새로 생성된다.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

HOLES_PER_ROUND = 18

DEFAULT_COURSE_PAR: Tuple[int, ...] = (4, 4, 4, 3, 5, 4, 4, 3, 4, 4, 4, 4, 3, 5, 4, 4, 3, 4)


# =====================================================
# 설정 Enum
# =====================================================

class ScoringFormat(str, Enum):
    """대회 표시 형식 (엔진은 형식과 무관하게 모든 지표를 계산)"""
    GROSS = "gross"
    NET = "net"
    BOTH = "both"
    STABLEFORD = "stableford"

    @classmethod
    def from_string(cls, value: str) -> "ScoringFormat":
        """문자열에서 형식 추출"""
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"알 수 없는 대회 형식: {value!r}")

    @property
    def shows_gross(self) -> bool:
        return self in (ScoringFormat.GROSS, ScoringFormat.BOTH)

    @property
    def shows_net(self) -> bool:
        return self in (ScoringFormat.NET, ScoringFormat.BOTH)

    @property
    def shows_stableford(self) -> bool:
        return self is ScoringFormat.STABLEFORD


class SkinsType(str, Enum):
    """스킨 비교 기준"""
    GROSS = "gross"
    NET = "net"

    @classmethod
    def from_string(cls, value: str) -> "SkinsType":
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"알 수 없는 스킨 타입: {value!r}")


# =====================================================
# 입력 데이터 클래스
# =====================================================

@dataclass(frozen=True)
class Player:
    """대회 참가 선수"""
    id: str
    name: str
    handicap: int
    quota: int               # 관례상 36 - handicap, 엔진은 그대로 신뢰
    flight: str = ""
    in_skins: bool = False
    paid: bool = False       # 스코어링과 무관


@dataclass(frozen=True)
class Score:
    """
    홀별 타수

    strokes가 None 또는 0이면 아직 플레이 전으로 본다 (홀 수, 타수, 포인트, 스킨 모두).
    스냅샷 입력은 1타 이상만 허용하므로 0은 엔진을 직접 호출할 때만 들어온다.
    """
    player_id: str
    hole: int
    strokes: Optional[int] = None

    @property
    def is_played(self) -> bool:
        # 0타는 입력 UI의 빈 칸과 같으므로 미플레이로 본다
        return bool(self.strokes)


@dataclass(frozen=True)
class StablefordPoints:
    """스테이블포드 포인트 테이블 (파 대비 타수 구간별)"""
    albatross: int = 10
    eagle: int = 7
    birdie: int = 4
    par: int = 2
    bogey: int = 1
    double_plus: int = 0


@dataclass(frozen=True)
class SkinsSettings:
    """스킨 게임 설정"""
    enabled: bool = False
    buy_in: float = 0.0
    skins_type: SkinsType = SkinsType.GROSS
    carryover: bool = True


@dataclass(frozen=True)
class Tournament:
    """대회 설정 스냅샷"""
    course_par: Tuple[int, ...] = DEFAULT_COURSE_PAR
    format: ScoringFormat = ScoringFormat.BOTH
    stableford_points: StablefordPoints = field(default_factory=StablefordPoints)
    skins: SkinsSettings = field(default_factory=SkinsSettings)
    name: str = ""
    flights: Tuple[str, ...] = ()
    show_handicaps: bool = True
    show_quotas: bool = True

    def par_for_hole(self, hole: int) -> Optional[int]:
        """홀 번호(1-18)의 파, 범위 밖이면 None"""
        if 1 <= hole <= len(self.course_par):
            return self.course_par[hole - 1]
        return None


# =====================================================
# 출력 데이터 클래스
# =====================================================

@dataclass
class LeaderboardEntry:
    """선수별 리더보드 행"""
    player: Player
    gross_score: int
    net_score: Optional[int]
    vs_par_gross: int
    vs_par_net: Optional[int]
    stableford_points: int
    vs_quota: float
    holes_played: int
    is_complete: bool

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player.id,
            "name": self.player.name,
            "flight": self.player.flight,
            "handicap": self.player.handicap,
            "quota": self.player.quota,
            "gross_score": self.gross_score,
            "net_score": self.net_score,
            "vs_par_gross": self.vs_par_gross,
            "vs_par_net": self.vs_par_net,
            "stableford_points": self.stableford_points,
            "vs_quota": self.vs_quota,
            "holes_played": self.holes_played,
            "is_complete": self.is_complete,
        }


@dataclass
class RankedEntry:
    """순위 라벨이 붙은 리더보드 행 ("1", "T2", "-")"""
    entry: LeaderboardEntry
    rank: str

    @property
    def is_tied(self) -> bool:
        return self.rank.startswith("T")

    def to_dict(self) -> Dict:
        data = {"rank": self.rank}
        data.update(self.entry.to_dict())
        return data


@dataclass
class SkinWinner:
    """홀별 스킨 획득자"""
    hole: int
    player_id: str
    player_name: str
    score: int
    skins_won: int


@dataclass
class SkinsResult:
    """스킨 계산 결과"""
    winners: List[SkinWinner] = field(default_factory=list)
    total_pot: float = 0.0
    skins_won: int = 0
    value_per_skin: float = 0.0


@dataclass
class SkinsLeaderboardRow:
    """선수별 스킨 합계"""
    player: Player
    skins: int
    winnings: float
    holes: List[int]

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player.id,
            "name": self.player.name,
            "skins": self.skins,
            "winnings": round(self.winnings, 2),
            "holes": self.holes,
        }


@dataclass
class SkinsLeaderboard:
    """스킨 리더보드 (선수별 합계 + 원본 결과)"""
    rows: List[SkinsLeaderboardRow]
    total_pot: float
    skins_won: int
    value_per_skin: float
    winners: List[SkinWinner]
