"""
스킨 게임 계산

홀마다 단독 최저 타수 선수가 스킨을 가져간다.
동타면 캐리오버 설정에 따라 다음 홀로 넘기거나 소멸시킨다.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from loguru import logger

from .models import (
    HOLES_PER_ROUND,
    Player,
    Score,
    SkinsLeaderboard,
    SkinsLeaderboardRow,
    SkinsResult,
    SkinsType,
    SkinWinner,
    Tournament,
)


def _index_hole_scores(scores: Iterable[Score]) -> Dict[Tuple[str, int], int]:
    """(player_id, hole) -> 타수, 중복이면 처음 기록 사용"""
    index = {}
    for score in scores:
        key = (score.player_id, score.hole)
        if key not in index and score.is_played:
            index[key] = score.strokes
    return index


def compare_score(strokes: int, player: Player, skins_type: SkinsType) -> int:
    """
    스킨 비교 타수

    네트 스킨은 홀마다 핸디캡 전체를 뺀다 (홀별 배분 없음).
    """
    if skins_type is SkinsType.NET:
        return strokes - player.handicap
    return strokes


def calculate_skins(
    players: Iterable[Player],
    scores: Iterable[Score],
    tournament: Tournament
) -> SkinsResult:
    """
    스킨 계산

    - 참가 선수: in_skins 선수만, 총 상금 = 인원 × 바이인
    - 스코어가 하나도 없는 홀은 건너뜀 (캐리오버 유지)
    - 18홀 이후 남은 캐리오버는 지급되지 않음
    """
    settings = tournament.skins
    skins_players = [p for p in players if p.in_skins]

    if not skins_players:
        return SkinsResult()

    total_pot = len(skins_players) * settings.buy_in
    hole_scores = _index_hole_scores(scores)

    winners: List[SkinWinner] = []
    carryover = 1

    for hole in range(1, HOLES_PER_ROUND + 1):
        compared = []
        for player in skins_players:
            strokes = hole_scores.get((player.id, hole))
            if strokes is None:
                continue
            compared.append((player, compare_score(strokes, player, settings.skins_type)))

        if not compared:
            continue

        lowest = min(value for _, value in compared)
        leaders = [player for player, value in compared if value == lowest]

        if len(leaders) == 1:
            winner = leaders[0]
            winners.append(SkinWinner(
                hole=hole,
                player_id=winner.id,
                player_name=winner.name,
                score=lowest,
                skins_won=carryover
            ))
            carryover = 1
        elif settings.carryover:
            carryover += 1
        else:
            carryover = 1

    skins_won = sum(w.skins_won for w in winners)
    value_per_skin = total_pot / skins_won if skins_won > 0 else 0.0

    logger.debug(f"스킨 계산: 참가 {len(skins_players)}명, 획득 {skins_won}개, 미지급 캐리오버 {carryover - 1}")

    return SkinsResult(
        winners=winners,
        total_pot=total_pot,
        skins_won=skins_won,
        value_per_skin=value_per_skin
    )


def build_skins_leaderboard(
    players: Iterable[Player],
    scores: Iterable[Score],
    tournament: Tournament
) -> SkinsLeaderboard:
    """선수별 스킨 합계 (스킨 수 내림차순, 같으면 먼저 획득한 순)"""
    players = list(players)
    result = calculate_skins(players, scores, tournament)
    by_id: Dict[str, Player] = {p.id: p for p in players}

    totals: Dict[str, SkinsLeaderboardRow] = {}
    for winner in result.winners:
        row: Optional[SkinsLeaderboardRow] = totals.get(winner.player_id)
        if row is None:
            row = SkinsLeaderboardRow(
                player=by_id[winner.player_id],
                skins=0,
                winnings=0.0,
                holes=[]
            )
            totals[winner.player_id] = row

        row.skins += winner.skins_won
        row.winnings += winner.skins_won * result.value_per_skin
        row.holes.append(winner.hole)

    rows = sorted(totals.values(), key=lambda r: -r.skins)
    for row in rows:
        row.holes.sort()

    return SkinsLeaderboard(
        rows=rows,
        total_pot=result.total_pot,
        skins_won=result.skins_won,
        value_per_skin=result.value_per_skin,
        winners=result.winners
    )
