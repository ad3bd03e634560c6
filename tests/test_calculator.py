"""
리더보드 계산 단위 테스트
- 파/쿼터 유틸리티
- 스테이블포드 포인트 조회
- 선수별 집계 및 리더보드 정렬
"""
import pytest

from scoring.calculator import (
    build_entry,
    build_leaderboard,
    prorated_par,
    prorated_quota,
    stableford_points_for_hole,
    stableford_total,
    total_par,
)
from scoring.models import Score, StablefordPoints

from conftest import COURSE_PAR, make_player, make_scores


# =============================================================================
# 파 / 쿼터 유틸리티 테스트
# =============================================================================

class TestParUtilities:
    """파/쿼터 계산"""

    def test_total_par(self, course_par):
        assert total_par(course_par) == 72

    def test_prorated_par_counts_only_scored_holes(self, course_par):
        """기록된 홀의 파만 합산"""
        scores = [
            Score("p1", 1, 5),
            Score("p1", 3, 3),
            Score("p1", 4, None),
        ]
        assert prorated_par(scores, course_par) == 4 + 3

    def test_prorated_par_zero_strokes_not_played(self, course_par):
        assert prorated_par([Score("p1", 1, 0)], course_par) == 0

    def test_prorated_quota_full_round_is_exact(self):
        """18홀에서는 쿼터와 정확히 같음"""
        for quota in (36, 30, 17, 0, -3):
            assert prorated_quota(18, quota) == quota

    def test_prorated_quota_partial_round(self):
        assert prorated_quota(9, 30) == 15.0
        assert prorated_quota(0, 30) == 0
        assert prorated_quota(4, 30) == pytest.approx(6.6667, rel=1e-4)

    def test_prorated_quota_negative_quota(self):
        """음수 쿼터도 오류 없이 계산"""
        assert prorated_quota(9, -2) == -1.0


# =============================================================================
# 스테이블포드 포인트 테스트
# =============================================================================

class TestStablefordLookup:
    """홀별 스테이블포드 포인트"""

    points = StablefordPoints()

    def test_each_bucket(self):
        assert stableford_points_for_hole(2, 5, self.points) == 10   # 알바트로스
        assert stableford_points_for_hole(3, 5, self.points) == 7    # 이글
        assert stableford_points_for_hole(3, 4, self.points) == 4    # 버디
        assert stableford_points_for_hole(4, 4, self.points) == 2    # 파
        assert stableford_points_for_hole(5, 4, self.points) == 1    # 보기
        assert stableford_points_for_hole(6, 4, self.points) == 0    # 더블보기

    def test_saturation_at_both_ends(self):
        """-3 이하는 알바트로스, +2 이상은 더블보기 이상"""
        assert stableford_points_for_hole(2, 5, self.points) == stableford_points_for_hole(1, 6, self.points)
        assert stableford_points_for_hole(1, 6, self.points) == self.points.albatross
        assert stableford_points_for_hole(6, 4, self.points) == self.points.double_plus
        assert stableford_points_for_hole(14, 4, self.points) == self.points.double_plus

    def test_missing_strokes_is_zero(self):
        assert stableford_points_for_hole(None, 4, self.points) == 0
        assert stableford_points_for_hole(0, 4, self.points) == 0

    def test_custom_table(self):
        """설정된 포인트 테이블 사용"""
        custom = StablefordPoints(albatross=8, eagle=5, birdie=3, par=2, bogey=1, double_plus=-1)
        assert stableford_points_for_hole(3, 4, custom) == 3
        assert stableford_points_for_hole(7, 4, custom) == -1

    def test_stableford_total(self, course_par):
        scores = make_scores("p1", [3, 4, 3, 6])   # 버디, 파, 파, 보기
        assert stableford_total(scores, course_par, self.points) == 4 + 2 + 2 + 1


# =============================================================================
# 선수별 집계 테스트
# =============================================================================

class TestBuildEntry:
    """선수 한 명의 리더보드 행"""

    def test_player_not_started(self, tournament):
        """플레이 전 선수: 모든 값 0, 네트 없음"""
        entry = build_entry(make_player("p1", handicap=8), [], tournament)

        assert entry.holes_played == 0
        assert entry.gross_score == 0
        assert entry.vs_par_gross == 0
        assert entry.stableford_points == 0
        assert entry.vs_quota == 0
        assert entry.net_score is None
        assert entry.vs_par_net is None
        assert entry.is_complete is False

    def test_partial_round_uses_prorated_par(self, tournament):
        """9홀 진행: 플레이한 홀 기준으로만 파 비교"""
        player = make_player("p1", handicap=6, quota=30)
        scores = make_scores("p1", list(COURSE_PAR[:9]) + [None] * 9)

        entry = build_entry(player, scores, tournament)

        assert entry.holes_played == 9
        assert entry.gross_score == 36
        assert entry.vs_par_gross == 0
        assert entry.net_score is None
        assert entry.vs_par_net is None
        assert entry.stableford_points == 18
        assert entry.vs_quota == pytest.approx(18 - 15.0)

    def test_complete_round_net_and_quota(self, tournament):
        """18홀 완료: 네트 = 그로스 - 핸디캡, 쿼터 대비는 전체 쿼터 기준"""
        player = make_player("p1", handicap=10)
        entry = build_entry(player, make_scores("p1", list(COURSE_PAR)), tournament)

        assert entry.is_complete is True
        assert entry.gross_score == 72
        assert entry.net_score == 62
        assert entry.vs_par_net == entry.net_score - total_par(COURSE_PAR)
        assert entry.vs_quota == 36 - 26

    def test_negative_handicap(self, tournament):
        """플러스 핸디캡 선수는 네트가 그로스보다 높음"""
        player = make_player("p1", handicap=-2)
        entry = build_entry(player, make_scores("p1", list(COURSE_PAR)), tournament)

        assert entry.net_score == 74
        assert entry.vs_par_net == 2

    def test_out_of_range_hole_does_not_crash(self, tournament):
        """범위 밖 홀은 파 비교에서 제외되지만 오류는 없음"""
        scores = [Score("p1", 1, 4), Score("p1", 19, 5)]
        entry = build_entry(make_player("p1"), scores, tournament)

        assert entry.holes_played == 2
        assert entry.gross_score == 9
        assert entry.vs_par_gross == 0

    def test_zero_strokes_hole_not_counted(self, tournament):
        """0타 홀은 미플레이: 17홀 + 0타는 완료가 아님"""
        scores = make_scores("p1", list(COURSE_PAR[:17]) + [0])
        entry = build_entry(make_player("p1"), scores, tournament)

        assert entry.holes_played == 17
        assert not entry.is_complete
        assert entry.net_score is None
        assert entry.gross_score == sum(COURSE_PAR[:17])


# =============================================================================
# 리더보드 정렬 테스트
# =============================================================================

class TestBuildLeaderboard:
    """리더보드 생성"""

    def test_sort_order(self, roster, round_scores, tournament):
        leaderboard = build_leaderboard(roster, round_scores, tournament)
        assert [e.player.id for e in leaderboard] == ["p3", "p1", "p2", "p4"]

    def test_not_started_sorts_last(self, tournament):
        """플레이 전 선수는 성적이 나쁜 선수보다도 뒤"""
        players = [make_player("idle"), make_player("bad")]
        scores = make_scores("bad", [10, 10, 10])

        leaderboard = build_leaderboard(players, scores, tournament)

        assert [e.player.id for e in leaderboard] == ["bad", "idle"]

    def test_equal_vs_par_breaks_on_gross(self, tournament):
        """파 대비가 같으면 그로스가 낮은(적게 친) 선수가 앞"""
        players = [make_player("long"), make_player("short")]
        scores = (
            make_scores("long", list(COURSE_PAR))
            + make_scores("short", list(COURSE_PAR[:9]))
        )

        leaderboard = build_leaderboard(players, scores, tournament)

        assert [e.player.id for e in leaderboard] == ["short", "long"]
        assert leaderboard[0].vs_par_gross == leaderboard[1].vs_par_gross == 0

    def test_flight_filter(self, roster, round_scores, tournament):
        leaderboard = build_leaderboard(roster, round_scores, tournament, flight="B")
        assert [e.player.id for e in leaderboard] == ["p3", "p4"]

    def test_unknown_flight_is_empty(self, roster, round_scores, tournament):
        assert build_leaderboard(roster, round_scores, tournament, flight="Z") == []

    def test_empty_roster(self, tournament):
        assert build_leaderboard([], [], tournament) == []

    def test_idempotent(self, roster, round_scores, tournament):
        """같은 입력이면 같은 결과"""
        first = build_leaderboard(roster, round_scores, tournament)
        second = build_leaderboard(roster, round_scores, tournament)

        assert first == second
        assert [e.to_dict() for e in first] == [e.to_dict() for e in second]

    def test_scores_of_unknown_players_ignored(self, roster, round_scores, tournament):
        extra = make_scores("ghost", [3, 3, 3])
        leaderboard = build_leaderboard(roster, round_scores + extra, tournament)
        assert len(leaderboard) == len(roster)
