"""
스냅샷 로더

JSON 파일 또는 딕셔너리에서 검증된 엔진 입력을 만든다.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from loguru import logger

from scoring.calculator import LeaderboardCalculator
from scoring.models import Player, Score, Tournament

from .schemas import ValidationResult
from .validators import SnapshotValidator


class SnapshotValidationError(Exception):
    """계산할 수 없는 스냅샷"""

    def __init__(self, result: ValidationResult):
        self.result = result
        details = "; ".join(
            f"[{e.severity.value}] {e.field or '-'}: {e.message}" for e in result.errors
        )
        super().__init__(f"스냅샷 검증 실패 ({len(result.errors)}개 오류): {details}")


@dataclass(frozen=True)
class Snapshot:
    """검증된 엔진 입력"""
    players: Tuple[Player, ...]
    scores: Tuple[Score, ...]
    tournament: Tournament
    validation: ValidationResult

    def calculator(self) -> LeaderboardCalculator:
        return LeaderboardCalculator(self.players, self.scores, self.tournament)


def snapshot_from_dict(
    data: Dict[str, Any],
    validator: Optional[SnapshotValidator] = None
) -> Snapshot:
    """딕셔너리에서 스냅샷 생성 (치명적 오류가 있으면 SnapshotValidationError)"""
    validator = validator or SnapshotValidator()
    schema, result = validator.parse_snapshot(data)

    if schema is None:
        for error in result.errors:
            logger.error(f"[{error.error_type}] {error.field}: {error.message}")
        raise SnapshotValidationError(result)

    for warning in result.warnings:
        logger.warning(f"[{warning.error_type}] {warning.message}")

    return Snapshot(
        players=tuple(p.to_model() for p in schema.players),
        scores=tuple(s.to_model() for s in schema.scores),
        tournament=schema.tournament.to_model(),
        validation=result
    )


def load_snapshot(
    path: Union[str, Path],
    validator: Optional[SnapshotValidator] = None
) -> Snapshot:
    """JSON 스냅샷 파일 로드"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    snapshot = snapshot_from_dict(data, validator)
    logger.info(f"스냅샷 로드 완료: {path} (선수 {len(snapshot.players)}명, 스코어 {len(snapshot.scores)}개)")
    return snapshot
