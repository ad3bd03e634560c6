"""
대회 스냅샷 입력 패키지

외부 데이터 계층이 넘겨준 스냅샷을 검증하고 엔진 입력으로 변환:
- 1단계: 기술적 검증 (Pydantic 스키마)
- 2단계: 비즈니스 검증 (중복/미등록/관례 위반)
"""

from .config import ScoringSettings, get_settings, scoring_settings
from .schemas import (
    PlayerSchema,
    ScoreSchema,
    StablefordPointsSchema,
    TournamentSchema,
    SnapshotSchema,
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
)
from .validators import SnapshotValidator
from .loader import Snapshot, SnapshotValidationError, load_snapshot, snapshot_from_dict

__all__ = [
    # Config
    "ScoringSettings",
    "get_settings",
    "scoring_settings",
    # Schemas
    "PlayerSchema",
    "ScoreSchema",
    "StablefordPointsSchema",
    "TournamentSchema",
    "SnapshotSchema",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    # Validators
    "SnapshotValidator",
    # Loader
    "Snapshot",
    "SnapshotValidationError",
    "load_snapshot",
    "snapshot_from_dict",
]
