"""
골프 리더보드 계산 모듈

스트로크 플레이(그로스/네트), 스테이블포드, 스킨을 한 번에 계산
- 파/쿼터 유틸리티 (진행 홀 기준 비례 계산)
- 홀별 스테이블포드 포인트 조회
- 선수별 집계 및 리더보드 정렬
- 플라이트별 순위표 생성 / JSON 내보내기
"""
import json
from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from .formatting import format_holes_played, format_money, format_vs_par, format_vs_quota
from .models import (
    HOLES_PER_ROUND,
    LeaderboardEntry,
    Player,
    RankedEntry,
    Score,
    SkinsLeaderboard,
    StablefordPoints,
    Tournament,
)
from .ranks import rank_gross, rank_net, rank_stableford
from .skins import build_skins_leaderboard


OVERALL_KEY = "overall"


# =====================================================
# 파 / 쿼터 유틸리티
# =====================================================

def total_par(course_par: Sequence[int]) -> int:
    """코스 전체 파"""
    return sum(course_par)


def prorated_par(scores: Iterable[Score], course_par: Sequence[int]) -> int:
    """스코어가 기록된 홀의 파 합계 (진행 중 라운드 비교용)"""
    total = 0
    for score in scores:
        if score.is_played and 1 <= score.hole <= len(course_par):
            total += course_par[score.hole - 1]
    return total


def prorated_quota(holes_played: int, quota: int) -> float:
    """
    진행 홀 수에 비례한 쿼터

    반올림하지 않는다. 18홀에서는 쿼터와 정확히 같다.
    """
    return (quota * holes_played) / HOLES_PER_ROUND


# =====================================================
# 스테이블포드 포인트
# =====================================================

def stableford_points_for_hole(
    strokes: Optional[int],
    par: int,
    points: StablefordPoints
) -> int:
    """
    홀별 스테이블포드 포인트

    파 대비 -3 이하는 알바트로스, +2 이상은 더블보기 이상 구간으로 묶인다.
    타수가 없으면 0점.
    """
    if not strokes:
        return 0

    differential = strokes - par

    if differential <= -3:
        return points.albatross
    if differential == -2:
        return points.eagle
    if differential == -1:
        return points.birdie
    if differential == 0:
        return points.par
    if differential == 1:
        return points.bogey
    return points.double_plus


def stableford_total(
    scores: Iterable[Score],
    course_par: Sequence[int],
    points: StablefordPoints
) -> int:
    """기록된 홀의 스테이블포드 포인트 합계"""
    total = 0
    for score in scores:
        if not score.is_played or not 1 <= score.hole <= len(course_par):
            continue
        total += stableford_points_for_hole(score.strokes, course_par[score.hole - 1], points)
    return total


# =====================================================
# 선수별 집계
# =====================================================

def calculate_gross_score(scores: Iterable[Score]) -> int:
    return sum(score.strokes for score in scores if score.is_played)


def calculate_vs_par(scores: Iterable[Score], course_par: Sequence[int]) -> int:
    """파 대비 타수 (플레이한 홀의 파 기준)"""
    vs_par = 0
    for score in scores:
        if score.is_played and 1 <= score.hole <= len(course_par):
            vs_par += score.strokes - course_par[score.hole - 1]
    return vs_par


def build_entry(player: Player, player_scores: Sequence[Score], tournament: Tournament) -> LeaderboardEntry:
    """
    선수 한 명의 리더보드 행 계산

    네트 스코어는 18홀 완료 후에만 산출한다 (진행 중에는 None).
    """
    played = [s for s in player_scores if s.is_played]
    holes_played = len(played)
    is_complete = holes_played == HOLES_PER_ROUND

    gross_score = calculate_gross_score(played)
    vs_par_gross = calculate_vs_par(played, tournament.course_par)

    net_score = gross_score - player.handicap if is_complete else None
    vs_par_net = net_score - total_par(tournament.course_par) if net_score is not None else None

    points = stableford_total(played, tournament.course_par, tournament.stableford_points)
    vs_quota = points - prorated_quota(holes_played, player.quota)

    return LeaderboardEntry(
        player=player,
        gross_score=gross_score,
        net_score=net_score,
        vs_par_gross=vs_par_gross,
        vs_par_net=vs_par_net,
        stableford_points=points,
        vs_quota=vs_quota,
        holes_played=holes_played,
        is_complete=is_complete
    )


def group_scores_by_player(scores: Iterable[Score]) -> Dict[str, List[Score]]:
    grouped: Dict[str, List[Score]] = defaultdict(list)
    for score in scores:
        grouped[score.player_id].append(score)
    return grouped


def filter_by_flight(players: Iterable[Player], flight: Optional[str]) -> List[Player]:
    """플라이트 필터 (None이면 전체)"""
    if flight is None:
        return list(players)
    return [p for p in players if p.flight == flight]


def build_leaderboard(
    players: Iterable[Player],
    scores: Iterable[Score],
    tournament: Tournament,
    flight: Optional[str] = None
) -> List[LeaderboardEntry]:
    """
    리더보드 생성

    정렬 규칙:
    - 플레이 전(0홀) 선수는 항상 맨 뒤
    - 파 대비 타수 오름차순, 같으면 그로스 스코어 오름차순
    - 완전히 같은 값은 입력 순서 유지 (안정 정렬)
    """
    by_player = group_scores_by_player(scores)

    entries = [
        build_entry(player, by_player.get(player.id, []), tournament)
        for player in filter_by_flight(players, flight)
    ]

    entries.sort(key=lambda e: (
        e.holes_played == 0,
        e.vs_par_gross,
        e.gross_score
    ))

    logger.debug(f"리더보드 계산: {len(entries)}명 (flight={flight})")
    return entries


def available_flights(players: Iterable[Player], tournament: Tournament) -> List[str]:
    """대회 설정 플라이트, 없으면 로스터에서 추출"""
    if tournament.flights:
        return list(tournament.flights)
    return sorted({p.flight for p in players if p.flight})


# =====================================================
# 리더보드 계산기 클래스
# =====================================================

class LeaderboardCalculator:
    """골프 대회 리더보드 계산기

    스냅샷 하나를 보관하고, 모든 메서드는 호출마다 처음부터 다시 계산한다.
    """

    def __init__(
        self,
        players: Iterable[Player],
        scores: Iterable[Score],
        tournament: Tournament
    ):
        self.players = tuple(players)
        self.scores = tuple(scores)
        self.tournament = tournament
        logger.debug(f"스냅샷 로드 완료: 선수 {len(self.players)}명, 스코어 {len(self.scores)}개")

    def build_leaderboard(self, flight: Optional[str] = None) -> List[LeaderboardEntry]:
        return build_leaderboard(self.players, self.scores, self.tournament, flight)

    def gross_standings(self, flight: Optional[str] = None) -> List[RankedEntry]:
        return rank_gross(self.build_leaderboard(flight))

    def net_standings(self, flight: Optional[str] = None) -> List[RankedEntry]:
        return rank_net(self.build_leaderboard(flight))

    def stableford_standings(self, flight: Optional[str] = None) -> List[RankedEntry]:
        return rank_stableford(self.build_leaderboard(flight))

    def skins(self) -> SkinsLeaderboard:
        return build_skins_leaderboard(self.players, self.scores, self.tournament)

    def get_all_standings(self) -> Dict[str, Dict[str, List[RankedEntry]]]:
        """
        전체 + 플라이트별 순위표

        Returns:
            {"overall": {...}, "<flight>": {...}} 형태,
            각 값은 {"gross": [...], "net": [...], "stableford": [...]}
        """
        all_standings = {}

        for key in [OVERALL_KEY] + available_flights(self.players, self.tournament):
            flight = None if key == OVERALL_KEY else key
            leaderboard = self.build_leaderboard(flight)

            all_standings[key] = {
                "gross": rank_gross(leaderboard),
                "net": rank_net(leaderboard),
                "stableford": rank_stableford(leaderboard),
            }
            logger.debug(f"{key}: {len(leaderboard)}명")

        return all_standings

    def export_standings(self, output_file: str):
        """순위표를 JSON으로 내보내기"""
        all_standings = self.get_all_standings()

        export_data = {
            "meta": {
                "generated_at": datetime.now().isoformat(),
                "tournament": self.tournament.name,
                "format": self.tournament.format.value,
                "total_par": total_par(self.tournament.course_par),
                "flights": [k for k in all_standings if k != OVERALL_KEY],
            },
            "standings": {
                key: {
                    view: [r.to_dict() for r in rows]
                    for view, rows in tables.items()
                }
                for key, tables in all_standings.items()
            }
        }

        if self.tournament.skins.enabled:
            skins = self.skins()
            export_data["skins"] = {
                "total_pot": skins.total_pot,
                "skins_won": skins.skins_won,
                "value_per_skin": round(skins.value_per_skin, 2),
                "leaderboard": [row.to_dict() for row in skins.rows],
            }

        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(export_data, f, ensure_ascii=False, indent=2)

        logger.debug(f"순위표 내보내기 완료: {output_file}")

    def print_standings_summary(
        self,
        standings: List[RankedEntry],
        title: str = "",
        view: str = "gross",
        top_n: int = 20
    ):
        """순위표 요약 출력"""
        print(f"\n{'='*60}")
        print(f" {title}")
        print(f"{'='*60}")

        if view == "stableford":
            print(f"{'순위':>4} {'이름':<20} {'쿼터':>4} {'홀':>3} {'포인트':>6} {'쿼터대비':>8}")
        else:
            print(f"{'순위':>4} {'이름':<20} {'HC':>4} {'홀':>3} {'그로스':>6} {'±':>4} {'네트':>5} {'±':>4}")
        print(f"{'-'*60}")

        for ranked in standings[:top_n]:
            e = ranked.entry
            thru = format_holes_played(e.holes_played)

            if view == "stableford":
                points = e.stableford_points if e.holes_played else "-"
                vs_quota = format_vs_quota(e.vs_quota, e.is_complete) if e.holes_played else "-"
                print(f"{ranked.rank:>4} {e.player.name:<20} {e.player.quota:>4} {thru:>3} {points:>6} {vs_quota:>8}")
            else:
                gross = e.gross_score if e.holes_played else "-"
                vs_par = format_vs_par(e.vs_par_gross) if e.holes_played else "-"
                net = e.net_score if e.net_score is not None else "-"
                print(f"{ranked.rank:>4} {e.player.name:<20} {e.player.handicap:>4} {thru:>3} {gross:>6} {vs_par:>4} {net:>5} {format_vs_par(e.vs_par_net):>4}")

    def print_skins_summary(self, skins: SkinsLeaderboard, top_n: int = 20):
        """스킨 요약 출력"""
        print(f"\n{'='*60}")
        print(f" 스킨 ({self.tournament.skins.skins_type.value.upper()})")
        print(f" 총 상금 {format_money(skins.total_pot)} | 스킨 {skins.skins_won}개 | 스킨당 {format_money(skins.value_per_skin)}")
        print(f"{'='*60}")
        print(f"{'#':>3} {'이름':<20} {'스킨':>4} {'상금':>10}  홀")
        print(f"{'-'*60}")

        for i, row in enumerate(skins.rows[:top_n], 1):
            holes = ", ".join(str(h) for h in row.holes)
            print(f"{i:>3} {row.player.name:<20} {row.skins:>4} {format_money(row.winnings):>10}  {holes}")
