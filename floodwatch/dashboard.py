"""The flood station as a whole: display rendering and per-sample outputs."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import TextIO

from floodwatch.alerts import (
    DISPLAY_CENTER,
    RAIN_LIMIT,
    WATER_LIMIT,
    Alert,
    JoystickSample,
    blue_level,
    buzzer_steps,
    classify,
    deviation,
    green_level,
    matrix_sketch,
    matrix_words,
    red_level,
)
from floodwatch.ssd1306 import SSD1306, RecordingBus

_SEPARATOR = (3, 25, 123, 25)
_LOWER_AREA = (4, 128 - 4, 26, 64 - 3)
_UPPER_AREA = (0, 128, 0, 25)

_RAIN_HEADER = (("PERIGO!!!", 20, 6), ("MUITA CHUVA!", 8, 16))
_OVERFLOW_HEADER = (("PERIGO!!!", 20, 6), ("TRANSBORDO!", 8, 16))
_CALM_HEADER = (("CEPEDI   TIC37", 8, 6), ("EMBARCATECH", 20, 16))

_RAIN_LINE_AT = (2, 33)
_WATER_LINE_AT = (2, 48)

_SAMPLE_PATTERN = re.compile(r"^\s*(\d+)\s*[,\s]\s*(\d+)\s*$")


@dataclass(frozen=True)
class StationOutputs:
    """Everything the station drives for one sample."""

    alert: Alert
    matrix: tuple[int, ...]
    buzzer: tuple[tuple[int, int, int], ...]
    green: int
    blue: int
    red: int

    def summary(self) -> str:
        return f"{self.alert.value} green={self.green} blue={self.blue} red={self.red}"


def _display_deviations(sample: JoystickSample) -> tuple[int, int]:
    return (
        deviation(sample.x_pos, DISPLAY_CENTER),
        deviation(sample.y_pos, DISPLAY_CENTER),
    )


def readings_text(sample: JoystickSample) -> tuple[str, str]:
    """The rain and water lines shown on the lower half of the display."""
    x, y = _display_deviations(sample)
    rain = (y * 100) // 2048
    water = (x * 100) // 2048
    return f"CHUVA: {rain}\b\b%", f"AGUA: {water}\b\b%"


def _header(sample: JoystickSample) -> tuple[tuple[str, int, int], ...]:
    x, y = _display_deviations(sample)
    if y > RAIN_LIMIT:
        return _RAIN_HEADER
    if x > WATER_LIMIT:
        return _OVERFLOW_HEADER
    return _CALM_HEADER


def render(display: SSD1306, sample: JoystickSample) -> None:
    """Redraw the header and readings for a sample into the frame buffer."""
    display.fill_rect(False, *_LOWER_AREA)
    display.fill_rect(False, *_UPPER_AREA)
    for text, x, y in _header(sample):
        display.draw_string(text, x, y)
    rain_line, water_line = readings_text(sample)
    display.draw_string(rain_line, *_RAIN_LINE_AT)
    display.draw_string(water_line, *_WATER_LINE_AT)


def parse_sample(line: str) -> JoystickSample:
    """Parse "x y" or "x,y" into a sample."""
    match = _SAMPLE_PATTERN.match(line)
    if match is None:
        raise ValueError(f"expected two ADC readings, got {line!r}")
    return JoystickSample(x_pos=int(match.group(1)), y_pos=int(match.group(2)))


class Station:
    """Drives the display and computes every other output from samples."""

    def __init__(self, display: SSD1306) -> None:
        self.display = display
        display.config()
        display.send_data()
        display.line(*_SEPARATOR, True)

    def feed(self, sample: JoystickSample) -> StationOutputs:
        """Process one sample: refresh the display and return the outputs."""
        render(self.display, sample)
        self.display.send_data()
        return StationOutputs(
            alert=classify(sample),
            matrix=tuple(matrix_words(matrix_sketch(sample))),
            buzzer=buzzer_steps(sample),
            green=green_level(sample),
            blue=blue_level(sample),
            red=red_level(sample),
        )


def _frame_text(display: SSD1306) -> str:
    return "\n".join(
        "".join("#" if display.get_pixel(x, y) else "." for x in range(display.width))
        for y in range(display.height)
    )


def _run(stream: TextIO, show: bool) -> int:
    station = Station(SSD1306(RecordingBus()))
    status = 0
    for number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            sample = parse_sample(line)
        except ValueError as error:
            print(f"line {number}: {error}", file=sys.stderr)
            status = 1
            continue
        outputs = station.feed(sample)
        print(outputs.summary())
        if show:
            print(_frame_text(station.display))
    return status


def main(argv: list[str] | None = None) -> int:
    """Read joystick samples, one per line, and report the station's outputs."""
    parser = argparse.ArgumentParser(
        prog="floodwatch",
        description="Simulate the flood station for a series of joystick samples.",
    )
    parser.add_argument("input", nargs="?", default="-", help="file of samples, '-' for stdin")
    parser.add_argument("--show", action="store_true", help="print the display after each sample")
    args = parser.parse_args(argv)
    if args.input == "-":
        return _run(sys.stdin, args.show)
    with open(args.input, encoding="utf-8") as stream:
        return _run(stream, args.show)


if __name__ == "__main__":
    sys.exit(main())