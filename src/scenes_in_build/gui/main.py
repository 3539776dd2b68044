"""GUI entry point for the Scenes In Build editor."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from ..appctx import AppContext
from ..utils.console_logger import ensure_console_logger
from .ui.main_window import MainWindow


def main(argv: list[str] | None = None, *, verbose: bool = False) -> int:
    """Launch the Qt application and return the exit code.

    ``argv[1]``, when given, is the project directory to open; otherwise the
    project remembered in the settings (or the working directory) is used.
    """

    arguments = list(sys.argv if argv is None else argv)
    ensure_console_logger(
        logging.getLogger("scenes_in_build"),
        "scenes_in_build.console",
        level=logging.DEBUG if verbose else logging.INFO,
    )
    app = QApplication.instance() or QApplication(arguments)

    project = Path(arguments[1]) if len(arguments) > 1 else None
    context = AppContext(project_root=project)
    context.remember_project()
    context.viewmodel.refresh()

    window = MainWindow(context)
    window.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
