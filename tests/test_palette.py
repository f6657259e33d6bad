import pytest

from rcdesign.errors import CircuitValidationError
from rcdesign.palette import ComponentPalette, parse_magnitude, parse_number


def test_parse_number_digits_only():
    assert parse_number("250") == 250
    assert parse_number(" 42 ") == 42
    for text in ("", "-5", "1e3", "12a", "1.5", "²"):
        with pytest.raises(CircuitValidationError):
            parse_number(text)


def test_parse_number_with_fraction():
    assert parse_number("0.01", allow_fraction=True) == pytest.approx(0.01)
    assert parse_number(".5", allow_fraction=True) == pytest.approx(0.5)
    assert parse_number("3", allow_fraction=True) == 3
    for text in (".", "1.2.3", "1,5"):
        with pytest.raises(CircuitValidationError):
            parse_number(text, allow_fraction=True)


def test_parse_magnitude_rejects_non_positive_and_non_integers():
    assert parse_magnitude("100") == 100
    assert parse_magnitude(7) == 7
    for value in (0, -3, 2.5, True, "0"):
        with pytest.raises(CircuitValidationError):
            parse_magnitude(value)


def test_add_rejects_duplicates():
    palette = ComponentPalette()
    assert palette.add("100")
    assert palette.add(250)
    assert not palette.add(100)
    assert palette.magnitudes() == [100, 250]


def test_add_rejects_non_numeric_text():
    palette = ComponentPalette([5])
    with pytest.raises(CircuitValidationError):
        palette.add("ten")
    assert palette.magnitudes() == [5]


def test_remove_selected_values():
    palette = ComponentPalette([25, 50, 100])
    assert palette.remove([50, 999]) == 1
    assert list(palette) == [25, 100]
    assert 50 not in palette
    assert len(palette) == 2


def test_default_palettes():
    assert ComponentPalette.default_resistors().magnitudes() == [25, 50, 100, 200, 250]
    assert ComponentPalette.default_capacitors().magnitudes() == [100, 250, 450]
