"""Pomodoro CLI - a terminal Pomodoro timer with daily stats."""

__version__ = "0.1.0"
