"""DeepFocus: a Pomodoro interval timer."""

__version__ = "1.0.0"
