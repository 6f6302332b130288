"""
Main entry point for Boss Overlay.
Usage: python -m boss_overlay [save.sav] [--catalog FILE] [--converter FILE]

Runs headless: watches the save and logs zone progress and defeated bosses.
"""

import logging
import signal
import sys
from pathlib import Path
from typing import List

from PySide6.QtCore import QCommandLineOption, QCommandLineParser, QCoreApplication

from . import __version__
from .save.models import Boss
from .settings import AppSettings, ConfigError
from .settings.core import APPLICATION_NAME, ORGANIZATION_NAME
from .tracking import TrackerSession, format_kill_notification, group_by_zone, progress
from .utils.logging_config import setup_logging


def log_boss_list(bosses: List[Boss]) -> None:
    """Log per-zone progress of a boss list."""
    logger = logging.getLogger(f"{__name__}.progress")
    killed, total = progress(bosses)
    logger.info(f"Bosses killed: {killed}/{total}")
    for group in group_by_zone(bosses):
        logger.info(f"  {group.zone_name}: {group.killed}/{group.total} killed")


def log_kills(bosses: List[Boss]) -> None:
    """Log one line per newly defeated boss."""
    logger = logging.getLogger(f"{__name__}.kills")
    for boss in bosses:
        logger.info(f"Boss defeated! {format_kill_notification(boss)}")


def log_unknown_kills(bosses: List[Boss]) -> None:
    """Ask for catalog details of defeated bosses that lack them."""
    logger = logging.getLogger(f"{__name__}.kills")
    for boss in bosses:
        logger.warning(f"Defeated boss needs catalog info: {boss.raw_identifier}")


def check_settings(settings: AppSettings) -> bool:
    """Log validation findings; False when the tracker cannot start."""
    logger = logging.getLogger(f"{__name__}.settings")
    result = settings.validate()
    for warning in result.warnings:
        logger.warning(warning)
    for error in result.errors:
        logger.error(f"Cannot start: {error}")
    return result.is_valid


def main() -> int:
    """Run the headless tracker until interrupted."""
    logger = logging.getLogger(f"{__name__}.main")

    app = QCoreApplication(sys.argv)
    app.setApplicationName(APPLICATION_NAME)
    app.setApplicationVersion(__version__)
    app.setOrganizationName(ORGANIZATION_NAME)

    parser = QCommandLineParser()
    parser.setApplicationDescription("Track boss kills recorded in a game save")
    parser.addHelpOption()
    parser.addVersionOption()
    parser.addPositionalArgument("save", "Save file to watch (defaults to the last one)")
    catalog_option = QCommandLineOption("catalog", "Boss catalog JSON file.", "file")
    converter_option = QCommandLineOption("converter", "Path to the uesave binary.", "file")
    parser.addOption(catalog_option)
    parser.addOption(converter_option)
    parser.process(app)

    try:
        settings = AppSettings()
        if parser.isSet(catalog_option):
            settings.catalog_path = Path(parser.value(catalog_option))
        if parser.isSet(converter_option):
            settings.converter_path = Path(parser.value(converter_option))

        setup_logging(settings)
        logger.info("Starting Boss Overlay")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        if not check_settings(settings):
            return 1

        session = TrackerSession(settings)
        session.watcher.bosses_updated.connect(log_boss_list)
        session.watcher.bosses_killed.connect(log_kills)
        session.watcher.unknown_bosses_killed.connect(log_unknown_kills)

        positional = parser.positionalArguments()
        if positional:
            session.start_watch(positional[0])
        elif not session.restore_last_watch():
            logger.error(
                f"No save file given. Saves are usually under {settings.paths.default_saves_dir}"
            )
            return 1

        settings.set_first_run_complete()

        # Let Ctrl+C stop the Qt event loop
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        return app.exec()

    except ConfigError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
