import pytest

from floodwatch.alerts import (
    ADC_MAX,
    ATTENTION_BACKGROUND,
    BUZZER_ALARM_LEVEL,
    CALM_BACKGROUND,
    CENTER,
    EXCLAMATION,
    FRAME,
    MATRIX_SIZE,
    YELLOW_LEVEL,
    Alert,
    JoystickSample,
    Rgb,
    Sketch,
    blue_level,
    buzzer_steps,
    classify,
    deviation,
    green_level,
    matrix_sketch,
    matrix_words,
    red_level,
    rgb_matrix_word,
    yellow_level,
)

REST = JoystickSample(CENTER, CENTER)
RAIN = JoystickSample(CENTER, ADC_MAX)
FLOOD = JoystickSample(ADC_MAX, CENTER)
ALL_SAMPLES = [
    JoystickSample(x, y)
    for x in range(0, ADC_MAX + 1, 273)
    for y in range(0, ADC_MAX + 1, 273)
]


def test_rgb_matrix_word_black_is_zero():
    assert rgb_matrix_word(Rgb()) == 0


def test_rgb_matrix_word_channel_layout():
    assert rgb_matrix_word(Rgb(green=1.0)) == 0xFF000000
    assert rgb_matrix_word(Rgb(red=1.0)) == 0x00FF0000
    assert rgb_matrix_word(Rgb(blue=1.0)) == 0x0000FF00


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        Rgb(red=1.5)


def test_sketch_requires_25_cells():
    with pytest.raises(ValueError):
        Sketch(figure=(1, 0), main_color=Rgb(), background_color=Rgb())


def test_sample_rejects_out_of_range():
    with pytest.raises(ValueError):
        JoystickSample(ADC_MAX + 1, 0)


def test_matrix_words_follow_figure():
    words = matrix_words(EXCLAMATION)
    main = rgb_matrix_word(EXCLAMATION.main_color)
    background = rgb_matrix_word(EXCLAMATION.background_color)
    assert len(words) == MATRIX_SIZE
    assert words.count(main) == sum(EXCLAMATION.figure)
    for cell, word in zip(EXCLAMATION.figure, words):
        assert word == (main if cell == 1 else background)


def test_deviation_is_symmetric():
    assert deviation(CENTER + 100) == deviation(CENTER - 100)
    assert deviation(CENTER) == 0
    assert deviation(2020, 2020) == 0


def test_classify_rest_is_normal():
    assert classify(REST) is Alert.NORMAL


def test_classify_rain_boundary():
    assert classify(JoystickSample(CENTER, CENTER + 1632)) is not Alert.RAIN
    assert classify(JoystickSample(CENTER, CENTER + 1633)) is Alert.RAIN
    assert classify(JoystickSample(CENTER, CENTER - 1633)) is Alert.RAIN


def test_classify_overflow_boundary():
    assert classify(JoystickSample(CENTER + 1428, CENTER)) is not Alert.OVERFLOW
    assert classify(JoystickSample(CENTER + 1429, CENTER)) is Alert.OVERFLOW


def test_rain_takes_precedence():
    assert classify(JoystickSample(ADC_MAX, ADC_MAX)) is Alert.RAIN


def test_attention_boundary():
    assert classify(JoystickSample(CENTER + 918, CENTER)) is Alert.NORMAL
    assert classify(JoystickSample(CENTER + 919, CENTER)) is Alert.ATTENTION


def test_matrix_sketch_danger_shows_exclamation():
    assert matrix_sketch(RAIN) == EXCLAMATION
    assert matrix_sketch(FLOOD) == EXCLAMATION


def test_matrix_sketch_calm_and_attention():
    calm = matrix_sketch(REST)
    assert calm.figure == FRAME.figure
    assert calm.background_color == CALM_BACKGROUND
    near = matrix_sketch(JoystickSample(CENTER + 1000, CENTER))
    assert near.background_color == ATTENTION_BACKGROUND


def test_buzzer_rain_uses_buzzer_a():
    steps = buzzer_steps(RAIN)
    assert steps[0][0] == BUZZER_ALARM_LEVEL
    assert steps[0][1] == 0


def test_buzzer_overflow_uses_buzzer_b():
    steps = buzzer_steps(FLOOD)
    assert steps[0][1] == BUZZER_ALARM_LEVEL
    assert steps[0][0] == 0


def test_buzzer_beeps_faster_near_limit():
    far = buzzer_steps(REST)
    near = buzzer_steps(JoystickSample(CENTER + 1000, CENTER))
    assert near[0][2] < far[0][2]
    assert sum(step[2] for step in far) > sum(step[2] for step in near)


@pytest.mark.parametrize("sample", ALL_SAMPLES)
def test_buzzer_cycle_ends_silent(sample):
    assert buzzer_steps(sample)[-1][:2] == (0, 0)


@pytest.mark.parametrize("sample", ALL_SAMPLES)
def test_levels_stay_in_range(sample):
    for level in (green_level(sample), blue_level(sample), red_level(sample)):
        assert 0 <= level <= 100
    assert yellow_level(sample) in (0, YELLOW_LEVEL)


@pytest.mark.parametrize("sample", ALL_SAMPLES)
def test_green_and_blue_off_in_danger(sample):
    if classify(sample).is_danger:
        assert green_level(sample) == 0
        assert blue_level(sample) == 0
    else:
        assert red_level(sample) == 0


def test_levels_at_rest():
    assert green_level(REST) == 0
    assert blue_level(REST) == 0
    assert red_level(REST) == 0
    assert yellow_level(REST) == 0


def test_green_tracks_water_blue_tracks_rain():
    water = JoystickSample(CENTER + 1024, CENTER)
    rain = JoystickSample(CENTER, CENTER + 1024)
    assert green_level(water) == 50
    assert blue_level(water) == 0
    assert blue_level(rain) == green_level(water)
    assert green_level(rain) == 0


def test_red_lit_in_danger():
    assert red_level(RAIN) > 0
    assert red_level(FLOOD) > 0


def test_yellow_band():
    assert yellow_level(JoystickSample(CENTER, CENTER + 1200)) == YELLOW_LEVEL
    assert yellow_level(JoystickSample(CENTER + 1500, CENTER)) == YELLOW_LEVEL
    assert yellow_level(JoystickSample(CENTER, CENTER + 500)) == 0