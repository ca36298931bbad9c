"""
Difficulty table for target sizing.

Maps a difficulty identifier to the range target diameters are drawn from,
then enlarges that range on narrow surfaces so targets stay tappable on
phones and tablets.

Examples:
    >>> table = DifficultyTable()
    >>> table.size_range_for('easy', 1280)
    DifficultySetting(min_size=35, max_size=80)
    >>> table.size_range_for('hard', 400)
    DifficultySetting(min_size=30, max_size=75)
    >>> table.size_range_for('nightmare', 1280)  # unknown ids fall back to medium
    DifficultySetting(min_size=25, max_size=65)
"""

from typing import Dict, Mapping, Optional, Tuple, Union

from models import Difficulty, DifficultySetting, ViewportClass

DEFAULT_DIFFICULTY = Difficulty.MEDIUM

# Base diameter ranges in pixels
DIFFICULTY_SETTINGS: Dict[Difficulty, DifficultySetting] = {
    Difficulty.EASY: DifficultySetting(min_size=35, max_size=80),
    Difficulty.MEDIUM: DifficultySetting(min_size=25, max_size=65),
    Difficulty.HARD: DifficultySetting(min_size=15, max_size=55),
}

# Upper width bound (inclusive) of each viewport class
NARROW_MAX_WIDTH = 480
MEDIUM_MAX_WIDTH = 768

# (min_size bonus, max_size bonus) added per viewport class
VIEWPORT_BONUS: Dict[ViewportClass, Tuple[int, int]] = {
    ViewportClass.NARROW: (15, 20),
    ViewportClass.MEDIUM: (5, 10),
    ViewportClass.WIDE: (0, 0),
}


def parse_difficulty(value: Union[str, Difficulty, None]) -> Optional[Difficulty]:
    """Resolve a difficulty identifier, None if it is not recognized.

    Accepts enum members and their string values, case-insensitively.
    """
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Difficulty(value.strip().lower())
    except ValueError:
        return None


def viewport_class_for(width_px: int) -> ViewportClass:
    """Bucket a surface width into a viewport class."""
    if width_px <= NARROW_MAX_WIDTH:
        return ViewportClass.NARROW
    if width_px <= MEDIUM_MAX_WIDTH:
        return ViewportClass.MEDIUM
    return ViewportClass.WIDE


class DifficultyTable:
    """Lookup of target-size ranges by difficulty and viewport width.

    Pure: holds only the immutable tables it was built with.
    """

    def __init__(
        self,
        settings: Optional[Mapping[Difficulty, DifficultySetting]] = None,
        bonuses: Optional[Mapping[ViewportClass, Tuple[int, int]]] = None,
    ):
        self._settings = dict(settings or DIFFICULTY_SETTINGS)
        self._bonuses = dict(bonuses or VIEWPORT_BONUS)
        if DEFAULT_DIFFICULTY not in self._settings:
            raise ValueError(f"Difficulty table must define '{DEFAULT_DIFFICULTY.value}'")

    def setting_for(self, difficulty: Union[str, Difficulty, None]) -> DifficultySetting:
        """Base setting for a difficulty; unrecognized ids use medium."""
        resolved = parse_difficulty(difficulty)
        if resolved is None or resolved not in self._settings:
            return self._settings[DEFAULT_DIFFICULTY]
        return self._settings[resolved]

    def size_range_for(
        self,
        difficulty: Union[str, Difficulty, None],
        viewport_width_px: int,
    ) -> DifficultySetting:
        """Effective diameter range for a difficulty on a surface of this width."""
        base = self.setting_for(difficulty)
        min_bonus, max_bonus = self._bonuses.get(viewport_class_for(viewport_width_px), (0, 0))
        return base.widened(min_bonus, max_bonus)
