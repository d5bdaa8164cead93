"""Main entry point for the xkcd reader application."""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from xkcd_reader.coordinators import Navigator, ReaderController
from xkcd_reader.io import FileComicStore
from xkcd_reader.services import ComicClient, SettingsManager
from xkcd_reader.ui import ComicWindow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xkcd-reader", description="Browse xkcd comics with a local cache."
    )
    parser.add_argument(
        "target",
        nargs="?",
        default="last",
        help="comic number, comic URL, 'latest', 'random' or 'last' (default)",
    )
    parser.add_argument("--cache-dir", type=Path, help="override XKCD_CACHE_DIR")
    parser.add_argument("--log-level", help="override XKCD_LOG_LEVEL")
    return parser


def resolve_log_level(args: argparse.Namespace, settings: SettingsManager) -> str:
    """Command-line level wins over configuration; both are validated."""
    if args.log_level:
        return settings.normalize_log_level(args.log_level)
    return settings.get_log_level()


def show_initial(controller: ReaderController, target: str):
    """Dispatch the command-line target to the matching controller slot."""
    if target == "latest":
        controller.show_latest()
    elif target == "random":
        controller.show_random()
    elif target == "last":
        controller.show_last_viewed()
    else:
        controller.show_from_input(target)


def main(argv: list[str] | None = None):
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)

    # 1. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=resolve_log_level(args, settings),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("xkcd reader")

    # 3. Initialize Infrastructure
    store = FileComicStore(args.cache_dir or settings.get_cache_dir())
    client = ComicClient(base_url=settings.get_endpoint(), timeout=settings.get_timeout())
    navigator = Navigator(store=store, fetcher=client)

    # 4. Construct UI and controller, then wire signals
    window = ComicWindow()
    controller = ReaderController(window=window, navigator=navigator)
    window.set_controller(controller)

    # 5. Show UI and start event loop
    window.show()
    show_initial(controller, args.target)

    try:
        return app.exec()
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
