# cli/main.py

"""
Start-up for the GPA Tracker CLI.

Reads settings, configures logging, loads the saved assignments, and hands the session to the assignments menu.
"""

import logging
from typing import Mapping

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menus import assignments_menu
from cli.path_utils import expand_path, resolve_data_dir
from core.config import Settings, configure_logging
from core.storage import JsonFileStorage
from models.persistence import PersistenceAdapter
from models.session import GpaSession

logger = logging.getLogger(__name__)


def run_cli(environ: Mapping[str, str] | None = None) -> None:
    """
    Top-level entry point for the GPA Tracker.

    Args:
        environ (Mapping[str, str] | None): Environment to read settings from. Defaults to `os.environ`.

    Raises:
        SystemExit: Always raised on exit via `exit_program()`.
    """
    settings = Settings.from_env(environ)
    configure_logging(settings.log_level)

    session = open_session(settings)
    session.subscribe(helpers.display_gpa_summary)

    print(f"\n{formatters.format_banner_text('GPA TRACKER')}")
    helpers.display_assignments(session.assignments)
    helpers.display_gpa_summary(session)

    assignments_menu.run(session, expand_path(settings.data_dir))

    exit_program()


def open_session(settings: Settings) -> GpaSession:
    """
    Builds the storage backend and persistence adapter described by `settings` and loads the saved session.

    Notes:
        - If the data directory cannot be created, the session still opens; saves will fail and be logged.
    """
    try:
        resolve_data_dir(settings.data_dir)

    except OSError as e:
        logger.error("Could not create data directory %s: %s", settings.data_dir, e)

    storage = JsonFileStorage(settings.storage_path)
    persistence = PersistenceAdapter(storage, settings.storage_key)

    session = GpaSession.open(persistence)
    logger.info("GPA Tracker initialized with %d assignments.", len(session.assignments))

    return session


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Every change has already been saved by the session, so nothing is flushed here.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit
