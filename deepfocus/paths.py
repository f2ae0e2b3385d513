"""Per-user data locations."""

from pathlib import Path

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "DeepFocus"
