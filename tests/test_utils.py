import pytest

from changers import MissingValueError
from changers.utils import UNDEFINED, throw_if_null, throw_if_undefined


def test_throw_if_null_passes_values_through() -> None:
    check = throw_if_null()
    assert check(0) == 0
    assert check("") == ""
    assert check(False) is False


@pytest.mark.parametrize("value", [None, UNDEFINED])
def test_throw_if_null_rejects_missing(value) -> None:
    with pytest.raises(MissingValueError, match="defined and non null"):
        throw_if_null()(value)


def test_throw_if_null_uses_message_supplier() -> None:
    with pytest.raises(MissingValueError, match="todo 3 not found"):
        throw_if_null(lambda: "todo 3 not found")(None)


def test_throw_if_undefined_accepts_none() -> None:
    assert throw_if_undefined()(None) is None


def test_throw_if_undefined_rejects_undefined() -> None:
    with pytest.raises(MissingValueError, match="Expected value to be defined"):
        throw_if_undefined()(UNDEFINED)
    with pytest.raises(MissingValueError, match="custom"):
        throw_if_undefined(lambda: "custom")(UNDEFINED)


def test_undefined_is_a_singleton() -> None:
    assert type(UNDEFINED)() is UNDEFINED
    assert not UNDEFINED
