"""
Audio and haptic feedback for AimRush.

This module plays the four game sounds (start, click, end, wrong place) and
drives controller rumble for hits and misses.

Classes:
    FeedbackManager: Owns the generated sounds and the rumble device
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pygame

from aimrush.logging import get_logger
from aimrush.scheduler import FrameScheduler
from games.AimRush import config

log = get_logger('feedback')


def sweep_wave(
    frequency_start: float,
    frequency_end: float,
    duration: float,
    amplitude: float = 0.3,
    sample_rate: int = config.SAMPLE_RATE,
    fade: float = 0.1,
) -> np.ndarray:
    """Generate a stereo 16-bit sine sweep.

    Args:
        frequency_start: Frequency at the start (Hz)
        frequency_end: Frequency at the end (Hz)
        duration: Length in seconds
        amplitude: Peak level (0.0 to 1.0)
        sample_rate: Samples per second
        fade: Fraction of the samples faded in and out

    Returns:
        Array of shape (samples, 2), dtype int16
    """
    num_samples = int(sample_rate * duration)

    # Frequency sweep
    frequencies = np.linspace(frequency_start, frequency_end, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / sample_rate)
    wave = np.sin(phase)

    # Envelope for smoother sound
    fade_samples = int(num_samples * fade)
    if fade_samples > 0:
        envelope = np.ones(num_samples)
        envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
        envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
        wave *= envelope

    wave = (wave * 32767 * amplitude).astype(np.int16)
    return np.column_stack((wave, wave))


def arpeggio_wave(
    frequencies: Sequence[float],
    duration: float,
    amplitude: float = 0.25,
    sample_rate: int = config.SAMPLE_RATE,
) -> np.ndarray:
    """Generate a stereo note sequence, one equal slice per frequency."""
    notes = [
        sweep_wave(freq, freq, duration / len(frequencies), amplitude, sample_rate, fade=0.15)
        for freq in frequencies
    ]
    return np.concatenate(notes)


def vibration_pulses(pattern: Sequence[int]) -> List[Tuple[float, int]]:
    """Turn an alternating pause/vibrate pattern into rumble pulses.

    Args:
        pattern: Milliseconds, starting with a pause: [pause, vibrate, pause, ...]

    Returns:
        List of (start offset in seconds, duration in ms) for each vibration

    Examples:
        >>> vibration_pulses([0, 40, 30, 40])
        [(0.0, 40), (0.07, 40)]
    """
    pulses = []
    elapsed_ms = 0
    for index, length in enumerate(pattern):
        if index % 2 == 1 and length > 0:
            pulses.append((round(elapsed_ms / 1000.0, 3), length))
        elapsed_ms += length
    return pulses


class FeedbackManager:
    """Plays sounds and rumbles the controller.

    Audio and haptics are optional: when the mixer cannot be opened or no
    controller with rumble is attached, the feature is switched off with a
    warning and every call becomes a no-op.

    Attributes:
        audio_enabled: Whether sounds are played
        haptics_enabled: Whether rumble pulses are sent
        sounds: Generated sounds by name (start, click, end, wrong_place)

    Examples:
        >>> feedback = FeedbackManager(scheduler, audio_enabled=False, haptics_enabled=False)
        >>> feedback.hit()  # no-op
    """

    SOUND_NAMES = ('start', 'click', 'end', 'wrong_place')

    def __init__(
        self,
        scheduler: FrameScheduler,
        audio_enabled: bool = True,
        haptics_enabled: bool = True,
    ):
        """Initialize feedback and open the devices that are enabled.

        Args:
            scheduler: Scheduler used to time the rumble pattern
            audio_enabled: Whether to enable audio (also gated by config)
            haptics_enabled: Whether to enable rumble (also gated by config)
        """
        self.scheduler = scheduler
        self.audio_enabled = audio_enabled and config.AUDIO_ENABLED
        self.haptics_enabled = haptics_enabled and config.HAPTICS_ENABLED
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self._joystick = None

        if self.audio_enabled:
            self._init_audio()
        if self.haptics_enabled:
            self._init_haptics()

    def _init_audio(self) -> None:
        """Open the mixer and generate the sounds."""
        try:
            pygame.mixer.init(frequency=config.SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed, audio disabled: %s", e)
            self.audio_enabled = False
            return

        self.sounds['start'] = self._make_sound(arpeggio_wave, [392.00, 523.25, 659.25], 0.3)
        self.sounds['click'] = self._make_sound(sweep_wave, 523.25, 659.25, 0.08)
        self.sounds['end'] = self._make_sound(arpeggio_wave, [659.25, 523.25, 392.00, 261.63], 0.6)
        self.sounds['wrong_place'] = self._make_sound(sweep_wave, 220.0, 146.83, 0.15, 0.2)

        volume = config.SFX_VOLUME * config.MASTER_VOLUME
        for sound in self.sounds.values():
            if sound is not None:
                sound.set_volume(volume)

    def _make_sound(self, generator, *args) -> Optional[pygame.mixer.Sound]:
        try:
            return pygame.sndarray.make_sound(generator(*args))
        except (pygame.error, ValueError) as e:
            log.warning("Could not generate sound with %s: %s", generator.__name__, e)
            return None

    def _init_haptics(self) -> None:
        """Pick the first attached controller for rumble."""
        try:
            pygame.joystick.init()
            if pygame.joystick.get_count() == 0:
                log.info("No controller attached, haptics disabled")
                self.haptics_enabled = False
                return
            self._joystick = pygame.joystick.Joystick(0)
        except pygame.error as e:
            log.warning("Haptics initialization failed, haptics disabled: %s", e)
            self.haptics_enabled = False

    # =========================================================================
    # Audio
    # =========================================================================

    def play(self, name: str) -> None:
        """Play a sound by name, restarting it if it is already playing."""
        if not self.audio_enabled:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        sound.stop()
        sound.play()

    # =========================================================================
    # Haptics
    # =========================================================================

    def vibrate(self, pattern: Sequence[int]) -> None:
        """Run a pause/vibrate pattern (milliseconds) on the controller."""
        if not self.haptics_enabled or self._joystick is None:
            return
        for offset, duration_ms in vibration_pulses(pattern):
            if offset <= 0:
                self._rumble(duration_ms)
            else:
                self.scheduler.call_later(offset, lambda d=duration_ms: self._rumble(d))

    def _rumble(self, duration_ms: int) -> None:
        if self._joystick is None:
            return
        try:
            if not self._joystick.rumble(1.0, 1.0, duration_ms):
                log.warning("Controller does not support rumble, haptics disabled")
                self.haptics_enabled = False
                self._joystick = None
        except pygame.error as e:
            log.warning("Rumble failed, haptics disabled: %s", e)
            self.haptics_enabled = False
            self._joystick = None

    # =========================================================================
    # Game events
    # =========================================================================

    def start(self) -> None:
        self.play('start')

    def hit(self) -> None:
        self.play('click')
        self.vibrate([0, config.HIT_VIBRATION_MS])

    def miss(self) -> None:
        self.play('wrong_place')
        self.vibrate(config.MISS_VIBRATION_PATTERN_MS)

    def end(self) -> None:
        self.play('end')

    def shutdown(self) -> None:
        """Release the mixer and controller."""
        if self.audio_enabled:
            pygame.mixer.quit()
        if self._joystick is not None:
            self._joystick.quit()
            self._joystick = None
