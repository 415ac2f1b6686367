import pytest

from solong.errors import ErrorKind, MapError, error_message


def test_codes_match_header_values():
    assert ErrorKind.MAP_ERROR == -1
    assert ErrorKind.WRONG_CHARACTER == -8
    assert ErrorKind(-6) is ErrorKind.CLOSED_MAP


@pytest.mark.parametrize(
    "kind, message",
    [
        (ErrorKind.MAP_ERROR, "Map error"),
        (ErrorKind.MAP_FAILED_OPEN, "Please, insert a valid map."),
        (ErrorKind.FILE_EXTENSION_ERROR, "The map must have a .ber extension!"),
        (ErrorKind.WRONG_PEC, "The map must have 1 P, 1 E and at least 1 C!"),
        (ErrorKind.SQUARE_MAP, "The map must be a rectangle!"),
        (ErrorKind.CLOSED_MAP, "The map must be closed by walls (1)!"),
        (ErrorKind.PLAYABLE_MAP, "The map must be playable!"),
    ],
)
def test_error_message(kind, message):
    assert error_message(kind) == message


def test_wrong_character_message_lists_allowed_characters():
    message = error_message(ErrorKind.WRONG_CHARACTER)
    for char in "10EPC":
        assert f"'{char}'" in message


def test_error_message_accepts_integer_code():
    assert error_message(-5) == error_message(ErrorKind.SQUARE_MAP)


def test_error_message_rejects_unknown_code():
    with pytest.raises(ValueError):
        error_message(1)


def test_map_error_carries_kind_and_message():
    err = MapError(ErrorKind.CLOSED_MAP)
    assert err.kind is ErrorKind.CLOSED_MAP
    assert str(err) == error_message(ErrorKind.CLOSED_MAP)


def test_map_error_from_integer():
    err = MapError(-7)
    assert err.kind is ErrorKind.PLAYABLE_MAP
    with pytest.raises(MapError) as info:
        raise err
    assert info.value.kind == -7