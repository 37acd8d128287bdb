import pytest

from cipherlab.affine import (
    VALID_MULTIPLIERS,
    affine_decrypt,
    affine_encrypt,
    brute_force,
    mod_inverse,
)


def test_encrypt_hello_example():
    assert affine_encrypt("HELLO", 5, 8) == "RCLLA"


@pytest.mark.parametrize("a", VALID_MULTIPLIERS)
@pytest.mark.parametrize("b", [0, 8, 25])
def test_round_trip(a, b):
    text = "THEQUICKBROWNFOX"
    assert affine_decrypt(affine_encrypt(text, a, b), a, b) == text


def test_encrypt_uppercases_letters():
    assert affine_encrypt("hello", 5, 8) == affine_encrypt("HELLO", 5, 8)


def test_non_letters_pass_through():
    result = affine_encrypt("B...U", 5, 8)
    assert result[1:4] == "..."
    assert affine_decrypt(result, 5, 8) == "B...U"


@pytest.mark.parametrize("a", [2, 13, 26])
def test_encrypt_rejects_non_coprime_multiplier(a):
    with pytest.raises(ValueError):
        affine_encrypt("HELLO", a, 8)


def test_decrypt_rejects_non_invertible_multiplier():
    with pytest.raises(ValueError):
        affine_decrypt("RCLLA", 4, 8)


def test_mod_inverse_known_value():
    assert mod_inverse(5, 26) == 21


@pytest.mark.parametrize("a", VALID_MULTIPLIERS)
def test_mod_inverse_property(a):
    assert (a * mod_inverse(a, 26)) % 26 == 1


def test_mod_inverse_missing_raises():
    with pytest.raises(ValueError):
        mod_inverse(13, 26)


def test_mod_inverse_reduces_argument():
    assert mod_inverse(31, 26) == mod_inverse(5, 26)


def test_brute_force_tries_every_key():
    results = list(brute_force("B...U"))
    assert len(results) == 12 * 26
    assert {a for a, _, _ in results} == set(VALID_MULTIPLIERS)
    assert {b for _, b, _ in results} == set(range(26))


def test_brute_force_finds_plaintext():
    ciphertext = affine_encrypt("HELLO", 5, 8)
    assert (5, 8, "HELLO") in list(brute_force(ciphertext))


def test_brute_force_entries_match_decrypt():
    for a, b, text in brute_force("XYZ"):
        assert text == affine_decrypt("XYZ", a, b)