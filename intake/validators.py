"""
스냅샷 검증

1단계: 기술적 검증 (스키마, 타입, 범위)
2단계: 비즈니스 검증 (중복 스코어, 미등록 선수, 쿼터 관례 등)
"""
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from .config import ScoringSettings, get_settings
from .schemas import (
    SnapshotSchema,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)


class SnapshotValidator:
    """
    대회 스냅샷 검증기

    엔진은 입력을 그대로 신뢰하므로, 계산 전에 호출자가 한 번 검증한다.
    """

    def __init__(self, settings: Optional[ScoringSettings] = None):
        self.settings = settings or get_settings()

    def parse_snapshot(self, data: Dict[str, Any]) -> Tuple[Optional[SnapshotSchema], ValidationResult]:
        """스냅샷 파싱 + 검증"""
        errors: List[ValidationIssue] = []
        warnings: List[ValidationIssue] = []
        snapshot = None

        try:
            snapshot = SnapshotSchema(**data)
        except PydanticValidationError as e:
            for error in e.errors():
                errors.append(ValidationIssue(
                    error_type="SCHEMA_VALIDATION_FAILED",
                    severity=ValidationSeverity.CRITICAL,
                    message=error["msg"],
                    field=".".join(str(loc) for loc in error["loc"]),
                    value=error.get("input"),
                    suggestion="데이터 형식을 확인하세요"
                ))
        except TypeError as e:
            errors.append(ValidationIssue(
                error_type="UNEXPECTED_ERROR",
                severity=ValidationSeverity.CRITICAL,
                message=str(e),
                suggestion="스냅샷은 tournament/players/scores 키를 가진 객체여야 합니다"
            ))

        if snapshot is not None:
            self._check_players(snapshot, errors, warnings)
            self._check_scores(snapshot, errors, warnings)

        result = ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            validated_at=datetime.now()
        )

        logger.debug(f"스냅샷 검증: 오류 {len(errors)}개, 경고 {len(warnings)}개")
        return (snapshot if result.can_compute else None), result

    def validate_snapshot(self, data: Dict[str, Any]) -> ValidationResult:
        _, result = self.parse_snapshot(data)
        return result

    def _check_players(
        self,
        snapshot: SnapshotSchema,
        errors: List[ValidationIssue],
        warnings: List[ValidationIssue]
    ):
        """선수 로스터 검증"""
        id_counts = Counter(p.id for p in snapshot.players)
        for player_id, count in id_counts.items():
            if count > 1:
                errors.append(ValidationIssue(
                    error_type="DUPLICATE_PLAYER",
                    severity=ValidationSeverity.HIGH,
                    message=f"선수 ID가 중복되었습니다: {player_id} ({count}회)",
                    field="players.id",
                    value=player_id,
                    suggestion="선수 ID는 대회 내에서 고유해야 합니다"
                ))

        flights = set(snapshot.tournament.flights)
        for player in snapshot.players:
            expected_quota = self.settings.quota_base - player.handicap
            if player.quota != expected_quota:
                warnings.append(ValidationIssue(
                    error_type="QUOTA_MISMATCH",
                    severity=ValidationSeverity.LOW,
                    message=f"{player.name}: 쿼터 {player.quota}가 관례값 {expected_quota}와 다릅니다",
                    field="players.quota",
                    value=player.quota,
                    suggestion="입력된 쿼터를 그대로 사용합니다"
                ))

            if flights and player.flight and player.flight not in flights:
                warnings.append(ValidationIssue(
                    error_type="UNKNOWN_FLIGHT",
                    severity=ValidationSeverity.LOW,
                    message=f"{player.name}: 대회에 없는 플라이트입니다: {player.flight}",
                    field="players.flight",
                    value=player.flight,
                    suggestion=f"유효한 플라이트: {', '.join(snapshot.tournament.flights)}"
                ))

    def _check_scores(
        self,
        snapshot: SnapshotSchema,
        errors: List[ValidationIssue],
        warnings: List[ValidationIssue]
    ):
        """스코어 검증"""
        player_ids = {p.id for p in snapshot.players}
        max_strokes = self.settings.max_strokes_per_hole

        hole_counts = Counter((s.player_id, s.hole) for s in snapshot.scores)
        for (player_id, hole), count in hole_counts.items():
            if count > 1:
                errors.append(ValidationIssue(
                    error_type="DUPLICATE_SCORE",
                    severity=ValidationSeverity.HIGH,
                    message=f"같은 홀 스코어가 {count}개입니다: 선수 {player_id}, {hole}번 홀",
                    field="scores",
                    value={"player_id": player_id, "hole": hole},
                    suggestion="선수/홀당 스코어는 하나만 허용됩니다"
                ))

        unknown = sorted({s.player_id for s in snapshot.scores} - player_ids)
        for player_id in unknown:
            warnings.append(ValidationIssue(
                error_type="UNKNOWN_PLAYER",
                severity=ValidationSeverity.MEDIUM,
                message=f"로스터에 없는 선수의 스코어입니다: {player_id}",
                field="scores.player_id",
                value=player_id,
                suggestion="해당 스코어는 계산에서 무시됩니다"
            ))

        for score in snapshot.scores:
            if score.strokes is not None and score.strokes > max_strokes:
                warnings.append(ValidationIssue(
                    error_type="UNUSUAL_STROKES",
                    severity=ValidationSeverity.MEDIUM,
                    message=f"타수가 일반적인 범위를 벗어났습니다: {score.strokes} (선수 {score.player_id}, {score.hole}번 홀)",
                    field="scores.strokes",
                    value=score.strokes,
                    suggestion=f"홀당 최대 타수는 {max_strokes}타입니다"
                ))
