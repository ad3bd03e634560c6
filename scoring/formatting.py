"""
리더보드 표시용 포맷 함수

계산 엔진은 원시 값만 반환하고, 표시 형식은 여기서 처리한다.
"""
from typing import Optional

from .models import HOLES_PER_ROUND


def format_vs_par(vs_par: Optional[int]) -> str:
    """파 대비 표시: 0 → "E", 양수 → "+3", 음수 → "-2", 없음 → "-" """
    if vs_par is None:
        return "-"
    if vs_par == 0:
        return "E"
    if vs_par > 0:
        return f"+{vs_par}"
    return str(vs_par)


def format_holes_played(holes_played: int) -> str:
    """진행 홀 표시: 0 → "-", 18 → "F" """
    if holes_played == 0:
        return "-"
    if holes_played == HOLES_PER_ROUND:
        return "F"
    return str(holes_played)


def format_vs_quota(vs_quota: float, is_complete: bool) -> str:
    """쿼터 대비 표시 (진행 중 소수점 1자리, 완료 후 정수)"""
    text = f"{vs_quota:.0f}" if is_complete else f"{vs_quota:.1f}"
    if vs_quota > 0:
        return f"+{text}"
    return text


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"
