#!/usr/bin/env python3
"""DeepFocus entry point.

Run with:
    python main.py
    python -m deepfocus
"""

from deepfocus.__main__ import main


if __name__ == "__main__":
    main()
