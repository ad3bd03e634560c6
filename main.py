"""
골프 대회 리더보드 CLI
"""
import argparse
import sys

from loguru import logger

from intake import SnapshotValidationError, get_settings, load_snapshot


VIEWS = ["gross", "net", "stableford", "skins", "all"]


def setup_logging():
    """로깅 설정"""
    settings = get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.log_level
    )
    logger.add(
        f"{settings.log_dir}/leaderboard_{{time:YYYY-MM-DD}}.log",
        rotation="1 day",
        retention="30 days",
        level="DEBUG"
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="골프 대회 리더보드 계산기")
    parser.add_argument("--data", type=str, required=True, help="대회 스냅샷 JSON 파일")
    parser.add_argument("--flight", type=str, help="플라이트 필터 (생략시 전체)")
    parser.add_argument("--view", type=str, choices=VIEWS, default="all", help="출력할 순위표")
    parser.add_argument("--output", type=str, help="전체 순위표 JSON 내보내기 파일")
    parser.add_argument("--top", type=int, default=20, help="출력할 상위 N명")

    args = parser.parse_args(argv)

    setup_logging()

    try:
        snapshot = load_snapshot(args.data)
    except FileNotFoundError:
        logger.error(f"스냅샷 파일 없음: {args.data}")
        return 1
    except SnapshotValidationError as e:
        logger.error(str(e))
        return 2

    calculator = snapshot.calculator()
    tournament = snapshot.tournament

    if args.output:
        calculator.export_standings(args.output)

    title_suffix = f" (플라이트 {args.flight})" if args.flight else ""
    name = tournament.name or "대회"

    if args.view in ("gross", "all"):
        calculator.print_standings_summary(
            calculator.gross_standings(args.flight),
            title=f"{name} 그로스 순위{title_suffix}",
            view="gross",
            top_n=args.top
        )

    if args.view == "net" or (args.view == "all" and tournament.format.shows_net):
        calculator.print_standings_summary(
            calculator.net_standings(args.flight),
            title=f"{name} 네트 순위{title_suffix} (18홀 완료 기준)",
            view="net",
            top_n=args.top
        )

    if args.view in ("stableford", "all"):
        calculator.print_standings_summary(
            calculator.stableford_standings(args.flight),
            title=f"{name} 스테이블포드 순위{title_suffix}",
            view="stableford",
            top_n=args.top
        )

    if args.view == "skins" or (args.view == "all" and tournament.skins.enabled):
        calculator.print_skins_summary(calculator.skins(), top_n=args.top)

    return 0


if __name__ == "__main__":
    sys.exit(main())
