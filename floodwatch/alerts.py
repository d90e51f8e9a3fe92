"""Flood-alert logic driven by a two-axis joystick standing in for sensors.

The Y axis plays the part of a rain gauge and the X axis that of a water
level sensor. Every output of the station (LED matrix, buzzers and the
three PWM LEDs) is decided here from a single joystick sample.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

ADC_MAX = 4095
CENTER = 2040
DISPLAY_CENTER = 2020
MATRIX_SIZE = 25

RAIN_LIMIT = CENTER * 0.8
WATER_LIMIT = CENTER * 0.7

BUZZER_ALARM_LEVEL = 50
BUZZER_IDLE_LEVEL = 10
BUZZER_ALARM_MS = 100
BUZZER_NEAR_MS = 200
BUZZER_FAR_MS = 500

YELLOW_LEVEL = 1000


@dataclass(frozen=True)
class JoystickSample:
    """One pair of 12-bit ADC readings."""

    x_pos: int
    y_pos: int

    def __post_init__(self) -> None:
        for name in ("x_pos", "y_pos"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= ADC_MAX:
                raise ValueError(f"{name} must be an ADC reading in 0..{ADC_MAX}, got {value!r}")


@dataclass(frozen=True)
class Rgb:
    """A colour with each channel between 0.0 and 1.0."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value!r}")


@dataclass(frozen=True)
class Sketch:
    """A 5x5 picture: cells equal to 1 take the main colour, others the background."""

    figure: tuple[int, ...]
    main_color: Rgb
    background_color: Rgb

    def __post_init__(self) -> None:
        if len(self.figure) != MATRIX_SIZE:
            raise ValueError(f"figure must have {MATRIX_SIZE} cells, got {len(self.figure)}")


class Alert(Enum):
    """State of the station for one sample."""

    RAIN = "rain"
    OVERFLOW = "overflow"
    ATTENTION = "attention"
    NORMAL = "normal"

    @property
    def is_danger(self) -> bool:
        return self in (Alert.RAIN, Alert.OVERFLOW)


EXCLAMATION = Sketch(
    figure=(
        0, 0, 1, 0, 0,
        0, 0, 0, 0, 0,
        0, 0, 1, 0, 0,
        0, 1, 1, 1, 0,
        1, 1, 1, 1, 1,
    ),
    main_color=Rgb(red=0.05),
    background_color=Rgb(red=0.01, green=0.01),
)

FRAME = Sketch(
    figure=(
        1, 1, 1, 1, 1,
        1, 0, 0, 0, 1,
        1, 0, 1, 0, 1,
        1, 0, 0, 0, 1,
        1, 1, 1, 1, 1,
    ),
    main_color=Rgb(),
    background_color=Rgb(),
)

CALM_BACKGROUND = Rgb(green=0.01)
ATTENTION_BACKGROUND = Rgb(red=0.01, green=0.01)


def rgb_matrix_word(color: Rgb) -> int:
    """Pack a colour into the 32-bit GRB word shifted out to the LED matrix."""
    r = int(color.red * 255)
    g = int(color.green * 255)
    b = int(color.blue * 255)
    return (g << 24) | (r << 16) | (b << 8)


def matrix_words(sketch: Sketch) -> list[int]:
    """The words for every LED of the matrix, in the order they are sent."""
    main = rgb_matrix_word(sketch.main_color)
    background = rgb_matrix_word(sketch.background_color)
    return [main if cell == 1 else background for cell in sketch.figure]


def deviation(raw: int, center: int = CENTER) -> int:
    """Distance of a reading from the resting centre."""
    return abs(raw - center)


def _deviations(sample: JoystickSample, center: int = CENTER) -> tuple[int, int]:
    return deviation(sample.x_pos, center), deviation(sample.y_pos, center)


def _near_limit(x: int, y: int) -> bool:
    # (x + y) / 2040 > 0.45 evaluated in single precision: holds once x + y > 918.
    return 20 * (x + y) > 9 * CENTER


def classify(sample: JoystickSample) -> Alert:
    """Decide the alert state; heavy rain takes precedence over overflow."""
    x, y = _deviations(sample)
    if y > RAIN_LIMIT:
        return Alert.RAIN
    if x > WATER_LIMIT:
        return Alert.OVERFLOW
    if _near_limit(x, y):
        return Alert.ATTENTION
    return Alert.NORMAL


def matrix_sketch(sample: JoystickSample) -> Sketch:
    """The picture the LED matrix shows for a sample."""
    alert = classify(sample)
    if alert.is_danger:
        return EXCLAMATION
    background = ATTENTION_BACKGROUND if alert is Alert.ATTENTION else CALM_BACKGROUND
    return replace(FRAME, background_color=background)


def buzzer_steps(sample: JoystickSample) -> tuple[tuple[int, int, int], ...]:
    """One beep cycle as (level A, level B, hold in ms) steps."""
    alert = classify(sample)
    if alert is Alert.RAIN:
        return (
            (BUZZER_ALARM_LEVEL, 0, BUZZER_ALARM_MS),
            (0, 0, BUZZER_ALARM_MS),
        )
    if alert is Alert.OVERFLOW:
        return (
            (0, BUZZER_ALARM_LEVEL, BUZZER_ALARM_MS),
            (0, 0, BUZZER_ALARM_MS),
        )
    hold = BUZZER_NEAR_MS if alert is Alert.ATTENTION else BUZZER_FAR_MS
    return (
        (BUZZER_IDLE_LEVEL, BUZZER_IDLE_LEVEL, hold),
        (0, 0, hold),
    )


def _percent(value: int) -> int:
    return (value * 100) // 2048


def green_level(sample: JoystickSample) -> int:
    """Green LED duty (0-100): grows with the water level while safe."""
    x, y = _deviations(sample)
    if x < WATER_LIMIT and y < RAIN_LIMIT:
        return _percent(x)
    return 0


def blue_level(sample: JoystickSample) -> int:
    """Blue LED duty (0-100): grows with the rain while safe."""
    x, y = _deviations(sample)
    if y < RAIN_LIMIT and x < WATER_LIMIT:
        return _percent(y)
    return 0


def red_level(sample: JoystickSample) -> int:
    """Red LED duty (0-100): lit only past the danger limits."""
    x, y = _deviations(sample)
    if y > CENTER * 0.81:
        return _percent(y)
    if x > CENTER * 0.71:
        return _percent(x)
    return 0


def yellow_level(sample: JoystickSample) -> int:
    """Level for the red and green pair that together show yellow."""
    x, y = _deviations(sample)
    if CENTER * 0.51 < y < CENTER * 0.69 or CENTER * 0.51 < x < CENTER * 0.79:
        return YELLOW_LEVEL
    return 0