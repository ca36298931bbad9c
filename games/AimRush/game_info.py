"""
AimRush - Game Info

This file defines the game's metadata, its command-line arguments and the
factory function for creating the engine.
"""

# Game metadata
NAME = "AimRush"
DESCRIPTION = "Click as many randomly placed targets as you can before the timer runs out."
VERSION = "1.0.0"
AUTHOR = "AimRush Team"

# CLI argument definitions, consumed by main.py
ARGUMENTS = [
    {
        'name': '--resolution',
        'type': str,
        'default': None,
        'help': 'Window size as WIDTHxHEIGHT (e.g. 1280x720)'
    },
    {
        'name': '--difficulty',
        'type': str,
        'default': None,
        'choices': ['easy', 'medium', 'hard'],
        'help': 'Initial difficulty'
    },
    {
        'name': '--theme',
        'type': str,
        'default': None,
        'choices': ['dark', 'light'],
        'help': 'Initial color theme (T toggles it in game)'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for a reproducible target sequence'
    },
    {
        'name': '--no-audio',
        'action': 'store_true',
        'help': 'Disable sound effects'
    },
    {
        'name': '--no-haptics',
        'action': 'store_true',
        'help': 'Disable controller rumble'
    },
    {
        'name': '--log-level',
        'type': str,
        'default': None,
        'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        'help': 'Global log level (overrides AIMRUSH_LOG_LEVEL)'
    },
]


def get_engine(**kwargs):
    """
    Factory function to create a GameEngine instance.

    Args:
        **kwargs: Engine options (width, height, difficulty, theme, seed,
            audio_enabled, haptics_enabled)

    Returns:
        GameEngine instance
    """
    from games.AimRush.engine import GameEngine

    return GameEngine(**{key: value for key, value in kwargs.items() if value is not None})
