"""Tests for the status-bar output record."""

import json

import pytest

from kanaweather.errors import SerializationError
from kanaweather.weather.output import (
    OutputRecord,
    build_output,
    encode,
    error_output,
    render,
)
from kanaweather.weather.reading import WeatherReading
from kanaweather.weather.translations import TOOLTIP_SEPARATOR, translate


def _reading(temp_c=5.0, text="Sunny", code=1000):
    return WeatherReading(temperature_c=temp_c, condition_text=text, condition_code=code)


def test_build_output_text_alt_and_class():
    """Test the label, code and class of a formatted record."""
    record = build_output(_reading(), translate(1000, "Sunny"))
    assert record.text == "5.0°C (Sunny)"
    assert record.alt == 1000
    assert record.class_name == "class-1000"


@pytest.mark.parametrize(
    "temp_c, expected",
    [(-3.25, "-3.2°C (曇り)"), (0.0, "0.0°C (曇り)"), (21.96, "22.0°C (曇り)"), (35.0, "35.0°C (曇り)")],
)
def test_build_output_one_decimal(temp_c, expected):
    """Test that temperatures are shown with one decimal place."""
    record = build_output(_reading(temp_c, "曇り", 1006), translate(1006, "曇り"))
    assert record.text == expected


def test_build_output_tooltip_from_table():
    """Test that the tooltip joins reading and gloss."""
    record = build_output(_reading(text="本曇り", code=1009), translate(1009, "本曇り"))
    assert record.tooltip == "ほんくもり" + TOOLTIP_SEPARATOR + "(Overcast)"
    assert record.class_name == "class-1009"


def test_build_output_tooltip_on_miss():
    """Test that an unknown condition yields a fallback tooltip, not an error."""
    record = build_output(_reading(text="砂嵐", code=4242), translate(4242, "砂嵐"))
    assert record.tooltip == "Not found for value 砂嵐"
    assert record.alt == 4242


def test_to_dict_uses_class_key():
    """Test the wire field names."""
    record = OutputRecord(text="t", alt=1, class_name="class-1", tooltip="tip")
    assert record.to_dict() == {"text": "t", "alt": 1, "class": "class-1", "tooltip": "tip"}


def test_to_dict_omits_missing_tooltip():
    """Test that a None tooltip is left out of the JSON."""
    assert "tooltip" not in error_output().to_dict()


def test_render_round_trips():
    """Test that decoding the emitted line yields the same fields."""
    record = build_output(_reading(8.4, "晴れ", 1000), translate(1000, "晴れ"))
    line = render(record)
    assert "\n" not in line
    assert json.loads(line) == record.to_dict()
    # Japanese text is written as-is
    assert "晴れ" in line


def test_error_output_fields():
    """Test the fixed error record."""
    record = error_output("Error making request: timeout")
    assert record.to_dict() == {
        "text": "Error",
        "alt": 0,
        "class": "error",
        "tooltip": "Error making request: timeout",
    }


def test_encode_rejects_unserializable():
    """Test that values JSON cannot represent raise SerializationError."""
    with pytest.raises(SerializationError):
        encode(OutputRecord(text="x", alt=float("nan"), class_name="c"))
    with pytest.raises(SerializationError):
        encode(OutputRecord(text="x", alt=object(), class_name="c"))


def test_render_substitutes_error_record():
    """Test that an encoding failure emits the fixed error record instead."""
    line = render(OutputRecord(text="x", alt=float("nan"), class_name="c", tooltip="t"))
    assert json.loads(line) == {"text": "Error", "alt": 0, "class": "error"}
