"""
Tests for channel label validation and frequency parsing.
"""

import math
from datetime import datetime

import pytest

from services.channel_format import (
    is_empty_cell, is_valid_channel_label, is_valid_frequency,
    parse_channel, parse_float_text, parse_frequency
)

ALEF = 'א'


class TestLegacyChannelValidation:
    """The legacy scan rejects everything after the marker, digits too."""

    @pytest.mark.parametrize('label', [
        f'{ALEF}7',
        f'{ALEF}123',
        f'{ALEF} 7',
        f'{ALEF}7a',
        f'{ALEF}',
        'bad',
        '7',
        '',
    ])
    def test_rejects_every_label(self, label):
        assert is_valid_channel_label(label) is False

    @pytest.mark.parametrize('value', [None, 7, 7.5, True])
    def test_rejects_non_strings(self, value):
        assert is_valid_channel_label(value) is False


class TestStrictChannelValidation:
    """Strict mode accepts the marker followed by digits only."""

    @pytest.mark.parametrize('label', [f'{ALEF}7', f'{ALEF}0', f'{ALEF}00123'])
    def test_accepts_marker_and_digits(self, label):
        assert is_valid_channel_label(label, mode='strict') is True

    @pytest.mark.parametrize('label', [
        f'{ALEF}',
        f'{ALEF} 7',
        f'{ALEF}7 ',
        f'{ALEF}7a',
        f'{ALEF}-7',
        f'{ALEF}7.5',
        f'x{ALEF}7',
        f'{ALEF}{ALEF}7',
        'bad',
        '7',
    ])
    def test_rejects_malformed_labels(self, label):
        assert is_valid_channel_label(label, mode='strict') is False

    def test_rejects_non_strings(self):
        assert is_valid_channel_label(7, mode='strict') is False
        assert is_valid_channel_label(None, mode='strict') is False

    def test_custom_marker(self):
        assert is_valid_channel_label('X7', marker='X', mode='strict') is True
        assert is_valid_channel_label(f'{ALEF}7', marker='X', mode='strict') is False

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            is_valid_channel_label(f'{ALEF}7', mode='lenient')


class TestParseChannel:

    def test_digits_after_marker(self):
        assert parse_channel(f'{ALEF}7') == 7
        assert parse_channel(f'{ALEF}0042') == 42
        assert parse_channel('X15', marker='X') == 15


class TestParseFloatText:
    """Leading-prefix number parsing."""

    @pytest.mark.parametrize('text,expected', [
        ('101.5', 101.5),
        ('  101.5', 101.5),
        ('101.5 MHz', 101.5),
        ('-3', -3.0),
        ('+.5', 0.5),
        ('5.', 5.0),
        ('1e3', 1000.0),
        ('1e', 1.0),
        ('2.5E-1x', 0.25),
    ])
    def test_numeric_prefix(self, text, expected):
        assert parse_float_text(text) == expected

    def test_infinity(self):
        assert parse_float_text('Infinity') == math.inf
        assert parse_float_text('-Infinity') == -math.inf

    @pytest.mark.parametrize('text', ['', '   ', 'abc', 'MHz 101', 'inf', 'nan', '.', '-'])
    def test_not_a_number(self, text):
        assert math.isnan(parse_float_text(text))


class TestParseFrequency:

    def test_numbers_pass_through(self):
        assert parse_frequency(101) == 101.0
        assert parse_frequency(101.5) == 101.5
        assert parse_frequency(math.inf) == math.inf

    def test_text_is_parsed(self):
        assert parse_frequency('88.1') == 88.1

    @pytest.mark.parametrize('value', [True, False, datetime(2024, 1, 1), 'abc'])
    def test_non_numbers_are_nan(self, value):
        assert math.isnan(parse_frequency(value))

    def test_is_valid_frequency(self):
        assert is_valid_frequency(0.0)
        assert is_valid_frequency(-math.inf)
        assert not is_valid_frequency(math.nan)
        assert not is_valid_frequency(None)

    def test_is_empty_cell(self):
        assert is_empty_cell(None)
        assert is_empty_cell('')
        assert not is_empty_cell(' ')
        assert not is_empty_cell(0)
