import pytest

from cipherlab.playfair import DEFAULT_ROWS, PlayfairMatrix, count_keys


@pytest.fixture
def square():
    return PlayfairMatrix()


def test_default_square_rows(square):
    assert square.rows == ("MFHIK", "UNOPQ", "ZVWXY", "ELARG", "DSTBC")


def test_position_corners(square):
    assert square.position("M") == (0, 0)
    assert square.position("c") == (4, 4)


def test_position_missing_letter(square):
    with pytest.raises(ValueError):
        square.position("J")


def test_same_row_moves_right(square):
    assert square.encrypt("MF") == "FH"


def test_same_column_moves_down(square):
    assert square.encrypt("MU") == "UZ"


def test_rectangle_swaps_columns(square):
    assert square.encrypt("ML") == "FE"


def test_row_wraps_around(square):
    result = square.encrypt("IK")
    assert result[1] == square.rows[0][0]
    assert square.decrypt(result) == "IK"


def test_round_trip_even(square):
    text = "MUSTSEEYOUOVERCADOGANWESTX"
    assert square.decrypt(square.encrypt(text)) == text


def test_odd_length_padded(square):
    text = "MUSTSEEYOUOVERCADOGANWEST"
    cipher = square.encrypt(text)
    assert len(cipher) == len(text) + 1
    assert square.decrypt(cipher) == text + "X"


def test_decrypt_ignores_spaces(square):
    cipher = square.encrypt("MUSTSEEYOU")
    spaced = " ".join(cipher[i:i + 2] for i in range(0, len(cipher), 2))
    assert square.decrypt(spaced) == "MUSTSEEYOU"


def test_decrypt_odd_length_rejected(square):
    with pytest.raises(ValueError):
        square.decrypt("ABC")


def test_from_key_layout():
    square = PlayfairMatrix.from_key("KEYWORD")
    letters = "".join(square.rows)
    assert letters.startswith("KEYWORD")
    assert len(set(letters)) == 25
    assert "J" not in letters


def test_from_key_folds_j_and_dedupes():
    square = PlayfairMatrix.from_key("jiggle")
    assert "".join(square.rows).startswith("IGLE")


def test_from_key_round_trip():
    square = PlayfairMatrix.from_key("KEYWORD")
    assert square.decrypt(square.encrypt("HELLOWORLD")) == "HELLOWORLD"


def test_invalid_square_rejected():
    with pytest.raises(ValueError):
        PlayfairMatrix(("AAAAA",) * 5)
    with pytest.raises(ValueError):
        PlayfairMatrix(DEFAULT_ROWS[:4])


def test_count_keys():
    total, unique = count_keys()
    assert total == 15511210043330985984000000
    assert unique * 2 == total