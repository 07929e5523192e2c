import pytest

from hacktivist.keypad import (
    CANCEL,
    VALIDATE,
    Keypad,
    KeypadResult,
    terminal_in_range,
)


def _enter(keypad, keys):
    results = [keypad.press(key) for key in keys]
    return results[-1]


def test_correct_code_opens_factory():
    keypad = Keypad()
    assert _enter(keypad, [3, 6, 3, 0, VALIDATE]) == KeypadResult.CORRECT
    assert keypad.factory_open is True
    assert keypad.code == 0
    assert keypad.multiplier == 1000


def test_wrong_code():
    keypad = Keypad()
    assert _enter(keypad, [1, 2, 3, 4, VALIDATE]) == KeypadResult.WRONG
    assert keypad.factory_open is False
    assert keypad.result == KeypadResult.WRONG


def test_validating_after_three_digits_adds_ten():
    keypad = Keypad()
    assert _enter(keypad, [3, 6, 2, VALIDATE]) == KeypadResult.CORRECT


def test_cancel_resets_entry():
    keypad = Keypad()
    _enter(keypad, [3, 6])
    assert keypad.press(CANCEL) == KeypadResult.NONE
    assert keypad.code == 0
    assert keypad.filled() == 0
    assert _enter(keypad, [3, 6, 3, 0, VALIDATE]) == KeypadResult.CORRECT


def test_filled_counts_digits():
    keypad = Keypad()
    counts = [keypad.filled()]
    for digit in (3, 6, 3, 0):
        keypad.press(digit)
        counts.append(keypad.filled())
    assert counts == [0, 1, 2, 3, 4]


def test_fifth_digit_changes_nothing():
    keypad = Keypad()
    _enter(keypad, [3, 6, 3, 0])
    keypad.press(9)
    assert keypad.filled() == 4
    assert keypad.press(VALIDATE) == KeypadResult.CORRECT


def test_filled_hidden_while_result_shown():
    keypad = Keypad()
    _enter(keypad, [1, VALIDATE])
    keypad.press(2)
    assert keypad.filled() == 0


@pytest.mark.parametrize("key", [-1, 12])
def test_invalid_key(key):
    with pytest.raises(ValueError):
        Keypad().press(key)


def test_terminal_range_bounds():
    assert terminal_in_range(3900, 2100)
    assert not terminal_in_range(3850, 2100)
    assert not terminal_in_range(3900, 2200)


def test_toggle_display():
    keypad = Keypad()
    assert keypad.toggle_display(0, 0) is False
    assert keypad.toggle_display(3900, 2100) is True
    assert keypad.toggle_display(0, 0) is False