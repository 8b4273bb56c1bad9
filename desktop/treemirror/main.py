"""Application entry point"""
import sys
import argparse
import asyncio
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from treemirror.config import Settings
from treemirror.services.api_client import APIClient
from treemirror.services.file_tree import FileTreeController
from treemirror.ui.tree_rows import render_row_text


def setup_logging(settings: Settings):
    """Configure stdout and rotating file logging"""
    logs_dir = settings.log_dir
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "treemirror.log"

    handlers = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ]

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Suppress verbose httpx logs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logs are written to: {log_file}")


async def run(root_path: str, refresh_paths: list[str], settings: Settings) -> list[str]:
    """Mount the tree, optionally refresh statuses, return rendered rows"""
    api = APIClient(
        settings.api_base_url,
        api_token=settings.api_token,
        timeout=settings.request_timeout,
    )
    try:
        controller = FileTreeController(api, root_path, settings=settings)
        await controller.mount()
        if refresh_paths:
            await controller.update_file_statuses(refresh_paths)
        return [render_row_text(row) for row in controller.rows()]
    finally:
        await api.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treemirror",
        description="Show a remote directory tree with git/DVC status and selection.",
    )
    parser.add_argument("root", help="root path of the remote tree")
    parser.add_argument(
        "paths",
        nargs="*",
        help="paths (absolute or relative to root) whose status should be refreshed",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings()
    setup_logging(settings)

    lines = asyncio.run(run(args.root, args.paths, settings))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
