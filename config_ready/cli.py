# config_ready/cli.py
import argparse
import logging
import sys
from pathlib import Path

from config_ready.core.common.enums import LayoutConvention
from config_ready.core.config.settings import settings
from config_ready.features.specimen_aggregator.service.api import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="config-ready",
        description="Copy package config specimens from vendor/ into the central config dir.",
    )
    ap.add_argument("--root", type=Path, default=settings.ROOT_DIR, help="Project root (holds vendor/).")
    ap.add_argument(
        "--layout",
        choices=[c.value for c in LayoutConvention],
        default=settings.LAYOUT,
        help="Where packages keep their specimen and whether a manifest is written.",
    )
    ap.add_argument("--caller", type=Path, default=None, help="Trigger script to delete after success.")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _printable(name: str) -> str:
    # Undecodable dir names carry surrogates that stdout can't encode
    return name.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="backslashreplace")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse doesn't check choices against the env-provided default
    try:
        layout = LayoutConvention(args.layout)
    except ValueError:
        parser.error(f"invalid layout {args.layout!r} (check CONFIG_READY_LAYOUT)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = run(args.root, layout, args.caller)
    except OSError as e:
        logger.error(f"config-ready failed: {e}")
        return 1

    for name in summary.copied:
        print(f"[copied] {_printable(name)}")
    if summary.manifest_path:
        print(f"[manifest] {_printable(str(summary.manifest_path))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
