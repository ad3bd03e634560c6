"""
순위 및 공동 순위 부여

표준 경쟁 순위 방식: 공동 2위가 두 명이면 다음 선수는 4위.
순위 라벨은 입력 순서와 무관하게 값만으로 결정된다.
"""
from typing import Callable, List, Optional, Sequence, TypeVar

from .models import LeaderboardEntry, RankedEntry

T = TypeVar("T")

UNRANKED = "-"
TIE_PREFIX = "T"


def assign_ranks(
    entries: Sequence[T],
    key: Callable[[T], Optional[float]],
    eligible: Callable[[T], bool],
    higher_is_better: bool = False
) -> List[str]:
    """
    순위 라벨 계산 (입력과 같은 길이의 리스트)

    Args:
        entries: 정렬된 행 목록
        key: 비교 값 추출 함수
        eligible: 순위 대상 여부 (대상이 아니면 "-")
        higher_is_better: True면 값이 클수록 상위

    Returns:
        ["1", "T2", "T2", "4", "-"] 형태의 라벨
    """
    values = [key(e) if eligible(e) else None for e in entries]
    ranked_values = [v for v in values if v is not None]

    labels = []
    for value in values:
        if value is None:
            labels.append(UNRANKED)
            continue

        if higher_is_better:
            better = sum(1 for other in ranked_values if other > value)
        else:
            better = sum(1 for other in ranked_values if other < value)
        tied = sum(1 for other in ranked_values if other == value) > 1

        position = better + 1
        labels.append(f"{TIE_PREFIX}{position}" if tied else str(position))

    return labels


def _has_played(entry: LeaderboardEntry) -> bool:
    return entry.holes_played > 0


def rank_gross(entries: Sequence[LeaderboardEntry]) -> List[RankedEntry]:
    """그로스 순위 (파 대비 타수, 낮을수록 상위). 리더보드 순서 유지"""
    labels = assign_ranks(entries, lambda e: e.vs_par_gross, _has_played)
    return [RankedEntry(entry=e, rank=label) for e, label in zip(entries, labels)]


def rank_net(entries: Sequence[LeaderboardEntry]) -> List[RankedEntry]:
    """네트 순위 (18홀 완료 선수만)"""
    ordered = sorted(entries, key=lambda e: (
        not e.is_complete,
        e.vs_par_net if e.vs_par_net is not None else 0
    ))
    labels = assign_ranks(ordered, lambda e: e.vs_par_net, lambda e: e.is_complete)
    return [RankedEntry(entry=e, rank=label) for e, label in zip(ordered, labels)]


def rank_stableford(entries: Sequence[LeaderboardEntry]) -> List[RankedEntry]:
    """
    스테이블포드 순위 (포인트, 높을수록 상위)

    쿼터 대비 값은 표시용이다. 포인트가 같으면 쿼터 대비 값과 상관없이 공동 순위.
    """
    ordered = sorted(entries, key=lambda e: (
        not _has_played(e),
        -e.stableford_points
    ))
    labels = assign_ranks(ordered, lambda e: e.stableford_points, _has_played, higher_is_better=True)
    return [RankedEntry(entry=e, rank=label) for e, label in zip(ordered, labels)]
