import pytest
from Crypto.Cipher import AES

from cipherlab.signatures import (
    cbc_mac,
    generate_dsa_key,
    sign_dsa,
    verify_dsa,
)

MAC_KEY = bytes(range(32))
MESSAGE = b"Hello, this is a message block.\x00"


@pytest.fixture(scope="module")
def dsa_key():
    return generate_dsa_key(1024)


def test_cbc_mac_single_block_is_block_encryption():
    block = b"sixteen byte msg"
    expected = AES.new(MAC_KEY, AES.MODE_ECB).encrypt(block)
    assert cbc_mac(MAC_KEY, block) == expected


def test_cbc_mac_empty_message_is_zero():
    assert cbc_mac(MAC_KEY, b"") == bytes(16)


def test_cbc_mac_is_deterministic():
    first = cbc_mac(MAC_KEY, MESSAGE)
    assert len(first) == 16
    assert cbc_mac(MAC_KEY, MESSAGE) == first


def test_cbc_mac_depends_on_every_block():
    changed = MESSAGE[:20] + b"X" + MESSAGE[21:]
    assert len(changed) == len(MESSAGE)
    assert cbc_mac(MAC_KEY, changed) != cbc_mac(MAC_KEY, MESSAGE)


def test_cbc_mac_rejects_partial_block():
    with pytest.raises(ValueError):
        cbc_mac(MAC_KEY, b"not aligned")


def test_cbc_mac_rejects_short_key():
    with pytest.raises(ValueError):
        cbc_mac(bytes(16), MESSAGE)


def test_dsa_key_size(dsa_key):
    assert int(dsa_key.p).bit_length() == 1024
    assert dsa_key.has_private()


def test_dsa_sign_verify_round_trip(dsa_key):
    signature = sign_dsa(dsa_key, b"Hello, world!")
    assert verify_dsa(dsa_key, b"Hello, world!", signature) is True


def test_dsa_rejects_other_message(dsa_key):
    signature = sign_dsa(dsa_key, b"Hello, world!")
    assert verify_dsa(dsa_key, b"Hello, world?", signature) is False


def test_dsa_rejects_garbage_signature(dsa_key):
    assert verify_dsa(dsa_key, b"Hello, world!", b"\x00" * 7) is False


def test_dsa_signatures_of_same_message_differ(dsa_key):
    first = sign_dsa(dsa_key, b"Hello, world!")
    second = sign_dsa(dsa_key, b"Hello, world!")
    assert first != second
    assert verify_dsa(dsa_key, b"Hello, world!", first)
    assert verify_dsa(dsa_key, b"Hello, world!", second)


def test_dsa_rejects_unsupported_size():
    with pytest.raises(ValueError):
        generate_dsa_key(512)