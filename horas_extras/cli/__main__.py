from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..logging.init import log_summary, setup_logging
from ..services.orchestrator import ProcessingError, process_all
from ..services.summary import render_status, render_summary_line

"""CLI entrypoint.

Flow:
- load .env (may define HORAS_EXTRAS_CONFIG)
- load config (--config > HORAS_EXTRAS_CONFIG > config/horas_extras.yml)
- validate every workbook of source_directory and write the results back
- print status + SUMMARY line, return exit code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_ERRORS_FOUND = 2

CONFIG_ENV_VAR = "HORAS_EXTRAS_CONFIG"


def _load_env_file(path: Path) -> None:
    """Load .env using python-dotenv (existing environment variables win)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="horas-extras",
        description="Validate overtime entries kept in Excel workbooks",
    )
    p.add_argument("--config", type=Path, default=None, help="Path to the YAML config")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--check-only",
        action="store_true",
        help="Validate and report without writing results back to the workbooks",
    )
    return p.parse_args(argv)


def _resolve_config_path(arg: Path | None) -> Path:
    if arg is not None:
        return arg
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    return DEFAULT_CONFIG_PATH


def main(argv: list[str] | None = None) -> int:
    # NOTE: [] を渡された場合に sys.argv を読まないよう None のときのみ参照する
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))

    config_path = _resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    logger.info(f"Processing workbooks from: {directory}")
    if args.check_only:
        logger.info("check-only mode: workbooks will not be modified")

    try:
        result = process_all(cfg, write_back=not args.check_only)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    status = render_status(result)
    if result.had_errors:
        logger.warning(status)
    else:
        logger.info(status)

    # log_summary が "SUMMARY " を付けるので先頭ラベルを除去
    log_summary(render_summary_line(result)[len("SUMMARY "):])

    if result.had_errors:
        return EXIT_ERRORS_FOUND
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
