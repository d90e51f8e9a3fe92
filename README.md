# floodwatch

A model of a small flood-alert station. Each input is a pair of 12-bit
joystick readings (0 to 4095): the Y axis stands for rainfall and the X
axis for the water level. From each sample the package works out:

- the alert state (`Alert.RAIN`, `Alert.OVERFLOW`, `Alert.ATTENTION`,
  `Alert.NORMAL`); heavy rain takes precedence over overflow,
- the banner and percentage lines drawn on a 128x64 SSD1306 framebuffer,
- the 25 colour words for a 5x5 RGB LED matrix (an exclamation mark on
  danger, a frame otherwise),
- duty levels for the green, blue and red LEDs and the yellow pair,
- one beep cycle for the two buzzers as `(level A, level B, hold ms)` steps.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
floodwatch [INPUT] [--show]
```

Reads samples one per line, as `x y` or `x,y`, from `INPUT` or from
standard input when it is omitted or `-`. Blank lines are skipped. For each
sample it prints one line:

```
rain green=0 blue=0 red=95
```

giving the alert state and the green, blue and red LED levels. With
`--show` it also prints the display after each sample as 64 rows of `#`
(lit) and `.` (dark). A line that cannot be parsed, or whose readings lie
outside 0..4095, is reported on standard error as `line N: ...`; the
remaining lines are still processed and the exit status is 1.

## Library use

```python
from floodwatch.alerts import JoystickSample, classify, red_level
from floodwatch.dashboard import Station, readings_text
from floodwatch.ssd1306 import SSD1306, RecordingBus

sample = JoystickSample(x_pos=2040, y_pos=4000)
print(classify(sample))            # Alert.RAIN
print(red_level(sample))           # red LED duty, 0-100
print(readings_text(sample))       # rain and water lines for the display

bus = RecordingBus()
station = Station(SSD1306(bus, 128, 64, False, 0x3C))
outputs = station.feed(sample)     # StationOutputs
print(outputs.summary())
print(station.display.get_pixel(20, 6))
print(len(bus.writes))             # every write sent to the display
```

### Modules

- `floodwatch.alerts` – `JoystickSample`, `Rgb`, `Sketch`, `Alert`, and the
  pure functions `classify`, `deviation`, `matrix_sketch`, `matrix_words`,
  `rgb_matrix_word`, `buzzer_steps`, `green_level`, `blue_level`,
  `red_level` and `yellow_level`.
- `floodwatch.ssd1306` – `SSD1306`, an in-memory page-organised frame
  buffer with `pixel`, `get_pixel`, `fill`, `fill_rect`, `rect`, `line`,
  `hline`, `vline`, `draw_char` and `draw_string`, plus `config`,
  `command` and `send_data`, which write command and data bytes to a bus.
  `Command` lists the opcodes. `RecordingBus` keeps every
  `(address, data)` write in `writes`; any object with a
  `write(address, data)` method can take its place.
- `floodwatch.dashboard` – `render` draws a sample onto a display,
  `parse_sample` reads a text line, `Station` ties the display and the
  outputs together, and `main` is the command above.
- `floodwatch.font` – `glyph(char)` returns the eight column bytes of the
  8x8 font; characters outside printable ASCII render as a space.

## What it does not do

The package computes what the station shows; it does not talk to any
device. There is no I²C, ADC, PWM or LED-matrix driver: the display only
writes to the bus object it is given, and the LED, matrix and buzzer
values are returned, not driven. Samples come from the caller or from the
command's input, not from sensors, and there is no timed polling loop or
buzzer timing. `yellow_level` is available but is not part of
`StationOutputs`.