"""Allow running DeepFocus as a module: python -m deepfocus."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import DeepFocusApp, make_icon


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="deepfocus")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log timer transitions",
    )
    args, qt_args = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    init_db()

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("DeepFocus")
    app.setOrganizationName("DeepFocus")
    app.setWindowIcon(make_icon())

    window = DeepFocusApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
