"""
스코어링 설정
"""
from functools import lru_cache
from typing import Dict, List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from scoring.models import DEFAULT_COURSE_PAR

load_dotenv()


class ScoringSettings(BaseSettings):
    """스코어링 설정"""

    # 쿼터 관례: quota = quota_base - handicap
    quota_base: int = Field(default=36, description="쿼터 기준값")
    max_strokes_per_hole: int = Field(default=10, description="홀당 최대 타수 (입력 UI 제한)")

    # 대회 설정이 없을 때 기본값
    default_course_par: List[int] = Field(default_factory=lambda: list(DEFAULT_COURSE_PAR))
    default_stableford_points: Dict[str, int] = Field(
        default_factory=lambda: {
            "albatross": 10,
            "eagle": 7,
            "birdie": 4,
            "par": 2,
            "bogey": 1,
            "double_plus": 0,
        }
    )

    # 로깅
    log_level: str = Field(default="INFO", description="콘솔 로그 레벨")
    log_dir: str = Field(default="logs", description="로그 파일 디렉터리")

    class Config:
        env_prefix = "GOLF_"
        case_sensitive = False


@lru_cache()
def get_settings() -> ScoringSettings:
    return ScoringSettings()


# 전역 설정 인스턴스
scoring_settings = get_settings()
