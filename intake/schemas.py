"""
대회 스냅샷 입력 스키마

Pydantic 모델로 외부 데이터(JSON, DB 행)를 검증하고
엔진용 불변 데이터 클래스로 변환한다.
"""
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from scoring.models import (
    HOLES_PER_ROUND,
    Player,
    Score,
    ScoringFormat,
    SkinsSettings,
    SkinsType,
    StablefordPoints,
    Tournament,
)

from .config import get_settings


class ValidationSeverity(str, Enum):
    """검증 오류 심각도"""
    CRITICAL = "critical"   # 계산 불가
    HIGH = "high"           # 계산 불가, 수동 검토 필요
    MEDIUM = "medium"       # 계산 가능, 경고 표시
    LOW = "low"             # 계산 가능, 로그만
    INFO = "info"           # 정보성


class ValidationIssue(BaseModel):
    """검증 오류"""
    error_type: str = Field(..., description="오류 유형")
    severity: ValidationSeverity = Field(..., description="심각도")
    message: str = Field(..., description="오류 메시지")
    field: Optional[str] = Field(None, description="관련 필드")
    value: Optional[Any] = Field(None, description="문제가 된 값")
    suggestion: Optional[str] = Field(None, description="해결 제안")


class ValidationResult(BaseModel):
    """검증 결과"""
    is_valid: bool = Field(default=True, description="최종 유효성")
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    validated_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_critical_errors(self) -> bool:
        return any(e.severity in [ValidationSeverity.CRITICAL, ValidationSeverity.HIGH] for e in self.errors)

    @property
    def can_compute(self) -> bool:
        """리더보드 계산 가능 여부"""
        return not self.has_critical_errors


# ==================== 핵심 스키마 ====================

class PlayerSchema(BaseModel):
    """선수 스키마"""

    id: str = Field(..., min_length=1, description="선수 ID")
    name: str = Field(..., min_length=1, max_length=100, description="선수명")
    handicap: int = Field(default=0, description="핸디캡 (음수 가능)")
    quota: Optional[int] = Field(None, description="쿼터 (없으면 기준값 - 핸디캡)")
    flight: str = Field(default="", description="플라이트")
    in_skins: bool = Field(default=False, description="스킨 참가 여부")
    paid: bool = Field(default=False, description="참가비 납부 여부")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # DB 정수 ID도 허용
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = " ".join(v.split())
        if not v:
            raise ValueError("선수명이 비어 있습니다")
        return v

    @field_validator("flight", mode="before")
    @classmethod
    def normalize_flight(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return str(v)

    @model_validator(mode="after")
    def fill_quota(self) -> "PlayerSchema":
        if self.quota is None:
            self.quota = get_settings().quota_base - self.handicap
        return self

    def to_model(self) -> Player:
        return Player(
            id=self.id,
            name=self.name,
            handicap=self.handicap,
            quota=self.quota,
            flight=self.flight,
            in_skins=self.in_skins,
            paid=self.paid
        )


class ScoreSchema(BaseModel):
    """홀별 스코어 스키마"""

    player_id: str = Field(..., min_length=1, description="선수 ID")
    hole: int = Field(..., ge=1, le=HOLES_PER_ROUND, description="홀 번호")
    strokes: Optional[int] = Field(None, ge=1, description="타수 (없으면 미플레이)")

    @field_validator("player_id", mode="before")
    @classmethod
    def coerce_player_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_model(self) -> Score:
        return Score(player_id=self.player_id, hole=self.hole, strokes=self.strokes)


class StablefordPointsSchema(BaseModel):
    """스테이블포드 포인트 테이블"""

    albatross: int = 10
    eagle: int = 7
    birdie: int = 4
    par: int = 2
    bogey: int = 1
    double_plus: int = Field(default=0, alias="doublePlus")

    class Config:
        populate_by_name = True

    def to_model(self) -> StablefordPoints:
        return StablefordPoints(
            albatross=self.albatross,
            eagle=self.eagle,
            birdie=self.birdie,
            par=self.par,
            bogey=self.bogey,
            double_plus=self.double_plus
        )


def _default_stableford_points() -> StablefordPointsSchema:
    return StablefordPointsSchema(**get_settings().default_stableford_points)


def _default_course_par() -> List[int]:
    return list(get_settings().default_course_par)


class TournamentSchema(BaseModel):
    """대회 설정 스키마"""

    name: str = Field(default="", description="대회명")
    format: ScoringFormat = Field(default=ScoringFormat.BOTH, description="표시 형식")
    course_par: List[int] = Field(default_factory=_default_course_par, description="홀별 파 (18개)")
    flights: List[str] = Field(default_factory=list, description="플라이트 목록")

    stableford_points: StablefordPointsSchema = Field(default_factory=_default_stableford_points)

    skins_enabled: bool = Field(default=False, description="스킨 활성화")
    skins_buy_in: float = Field(default=0.0, ge=0, description="스킨 바이인")
    skins_type: SkinsType = Field(default=SkinsType.GROSS, description="스킨 타입")
    skins_carryover: bool = Field(default=True, description="동타 시 캐리오버")

    show_handicaps: bool = True
    show_quotas: bool = True

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ScoringFormat.from_string(v)
        return v

    @field_validator("skins_type", mode="before")
    @classmethod
    def parse_skins_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return SkinsType.from_string(v)
        return v

    @field_validator("course_par")
    @classmethod
    def validate_course_par(cls, v: List[int]) -> List[int]:
        """홀별 파 검증"""
        holes = HOLES_PER_ROUND
        if len(v) != holes:
            raise ValueError(f"코스 파는 {holes}개여야 합니다 (입력: {len(v)}개)")
        if any(par < 1 for par in v):
            raise ValueError(f"파는 1 이상이어야 합니다: {v}")
        return v

    @field_validator("flights")
    @classmethod
    def normalize_flights(cls, v: List[str]) -> List[str]:
        # 공백 제거, 중복 제거 (순서 유지)
        seen = []
        for flight in (f.strip() for f in v):
            if flight and flight not in seen:
                seen.append(flight)
        return seen

    def to_model(self) -> Tournament:
        return Tournament(
            course_par=tuple(self.course_par),
            format=self.format,
            stableford_points=self.stableford_points.to_model(),
            skins=SkinsSettings(
                enabled=self.skins_enabled,
                buy_in=self.skins_buy_in,
                skins_type=self.skins_type,
                carryover=self.skins_carryover
            ),
            name=self.name,
            flights=tuple(self.flights),
            show_handicaps=self.show_handicaps,
            show_quotas=self.show_quotas
        )


class SnapshotSchema(BaseModel):
    """리더보드 계산용 스냅샷 (대회 + 선수 + 스코어)"""

    tournament: TournamentSchema = Field(default_factory=TournamentSchema)
    players: List[PlayerSchema] = Field(default_factory=list)
    scores: List[ScoreSchema] = Field(default_factory=list)
