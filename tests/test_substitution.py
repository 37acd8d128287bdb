import string

import pytest

from cipherlab.substitution import (
    DEFAULT_MAPPING,
    ENGLISH_ORDER,
    frequency_substitute,
    letter_counts,
    rank_letters,
    substitute,
    top_plaintexts,
)

SAMPLE = "Wkh txlfn eurzq ira mxpsv ryhu wkh odcb grj, wkh grj vohhsv."


def test_substitute_uses_mapping_by_position():
    assert substitute("abc") == DEFAULT_MAPPING[:3]


def test_substitute_ignores_case_of_input():
    assert substitute("ABC") == substitute("abc")


def test_substitute_leaves_symbols():
    assert substitute("53†‡;48*") == "53†‡;48*"


def test_substitute_with_identity_mapping():
    assert substitute("Hello", string.ascii_lowercase) == "hello"


def test_substitute_rejects_short_mapping():
    with pytest.raises(ValueError):
        substitute("abc", "xyz")


def test_letter_counts():
    counts = letter_counts("Hello, World")
    assert len(counts) == 26
    assert sum(counts) == 10
    assert counts[ord("L") - ord("A")] == 3


def test_rank_letters_is_a_permutation():
    ranked = rank_letters(letter_counts(SAMPLE))
    assert sorted(ranked) == list(string.ascii_uppercase)


def test_rank_letters_puts_most_frequent_first():
    counts = letter_counts("zzzzyyyx")
    assert rank_letters(counts)[:3] == "ZYX"


def test_rank_letters_ties_alphabetical():
    assert rank_letters([0] * 26) == string.ascii_uppercase


def test_rank_letters_rejects_wrong_length():
    with pytest.raises(ValueError):
        rank_letters([1, 2, 3])


def test_frequency_substitute_identity():
    assert frequency_substitute(SAMPLE, ENGLISH_ORDER, ENGLISH_ORDER) == SAMPLE


def test_frequency_substitute_keeps_case_and_symbols():
    ranked = rank_letters(letter_counts(SAMPLE))
    result = frequency_substitute(SAMPLE, ranked, ENGLISH_ORDER)
    assert len(result) == len(SAMPLE)
    for original, replaced in zip(SAMPLE, result):
        if original.isalpha():
            assert original.isupper() == replaced.isupper()
        else:
            assert original == replaced


def test_frequency_substitute_missing_letter_raises():
    with pytest.raises(ValueError):
        frequency_substitute("abc", "AB", ENGLISH_ORDER)


def test_top_plaintexts_default_count():
    assert len(top_plaintexts(SAMPLE)) == 10


def test_top_plaintexts_capped_at_alphabet_size():
    assert len(top_plaintexts(SAMPLE, 40)) == 26


def test_top_plaintexts_first_uses_english_order():
    ranked = rank_letters(letter_counts(SAMPLE))
    assert top_plaintexts(SAMPLE)[0] == frequency_substitute(SAMPLE, ranked, ENGLISH_ORDER)


def test_top_plaintexts_rotate_english_order():
    ranked = rank_letters(letter_counts(SAMPLE))
    most_common = ranked[0]
    position = SAMPLE.upper().index(most_common)
    results = top_plaintexts(SAMPLE, 5)
    for i, plaintext in enumerate(results):
        assert plaintext[position].upper() == ENGLISH_ORDER[i]