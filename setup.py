"""Packaging for DeepFocus.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import find_packages, setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "DeepFocus",
        "CFBundleDisplayName": "DeepFocus",
        "CFBundleIdentifier": "com.deepfocus.app",
        "CFBundleVersion": "1.0.0",
        "CFBundleShortVersionString": "1.0.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app options only when actually building the bundle
bundle_kwargs = {}
if "py2app" in sys.argv:
    bundle_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
    }

setup(
    name="DeepFocus",
    version="1.0.0",
    description="Pomodoro interval timer with an auto-advancing session cycle",
    packages=find_packages(include=["deepfocus", "deepfocus.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.5",
        "numpy>=1.24",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "gui_scripts": ["deepfocus=deepfocus.__main__:main"],
    },
    **bundle_kwargs,
)
