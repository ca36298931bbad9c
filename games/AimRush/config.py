"""
AimRush - Configuration loader.

Loads settings from .env file with sensible defaults. Colors for the two
themes live here too; the engine switches between them at runtime.
"""
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, None when unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)
HUD_HEIGHT = _get_int('HUD_HEIGHT', 64)  # strip above the board

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
MASTER_VOLUME = _get_float('MASTER_VOLUME', 0.8)
SFX_VOLUME = _get_float('SFX_VOLUME', 0.7)
SAMPLE_RATE = 22050

# Haptics (controller rumble)
HAPTICS_ENABLED = _get_bool('HAPTICS_ENABLED', True)
HIT_VIBRATION_MS = 30
MISS_VIBRATION_PATTERN_MS = [0, 40, 30, 40]  # pause, vibrate, pause, vibrate

# Game defaults
DEFAULT_THEME = os.getenv('DEFAULT_THEME', 'dark').lower()
DEFAULT_DIFFICULTY = os.getenv('DEFAULT_DIFFICULTY', 'medium').lower()
RNG_SEED = _get_optional_int('RNG_SEED')

# Texts
TITLE = 'AimRush'
RESULT_HINT = 'Nice job! Try a different duration or difficulty to challenge yourself.'

# Fonts
FONT_SIZE_SMALL = 24
FONT_SIZE_MEDIUM = 36
FONT_SIZE_LARGE = 56
FONT_SIZE_HUGE = 88

# Type alias for RGB color
Color = Tuple[int, int, int]

THEMES: Dict[str, Dict[str, Color]] = {
    'dark': {
        'background': (18, 18, 28),
        'board': (28, 28, 42),
        'hud': (12, 12, 20),
        'text': (235, 235, 245),
        'muted': (150, 150, 170),
        'button': (52, 52, 76),
        'button_hover': (72, 72, 104),
        'button_active': (107, 91, 255),
        'button_text': (235, 235, 245),
    },
    'light': {
        'background': (236, 238, 245),
        'board': (250, 250, 255),
        'hud': (222, 224, 235),
        'text': (30, 30, 45),
        'muted': (105, 105, 125),
        'button': (205, 208, 225),
        'button_hover': (185, 188, 210),
        'button_active': (107, 91, 255),
        'button_text': (30, 30, 45),
    },
}


def other_theme(theme: str) -> str:
    """The theme the toggle switches to."""
    return 'light' if theme == 'dark' else 'dark'
