import pytest

from caesar_encode import encrypt
from frequency import (
    EN_ALPHA,
    distribution,
    index_of_coincidence,
    letter_counts,
    reference,
)


def test_letter_counts_fold_case_and_skip_non_letters():
    counts = letter_counts("Hello, HELLO! 42 é\u212a")
    assert counts == {"h": 2, "e": 2, "l": 4, "o": 2}


def test_distribution_of_hello():
    freqs = distribution("hello")
    assert freqs["h"] == pytest.approx(0.2)
    assert freqs["e"] == pytest.approx(0.2)
    assert freqs["l"] == pytest.approx(0.4)
    assert freqs["o"] == pytest.approx(0.2)
    assert freqs["z"] == 0.0


def test_distribution_covers_whole_alphabet_and_sums_to_one():
    freqs = distribution("The quick brown fox jumps over the lazy dog")
    assert list(freqs) == list(EN_ALPHA)
    assert sum(freqs.values()) == pytest.approx(1.0)


def test_distribution_ignores_case():
    assert distribution("AbC aBc") == distribution("abcabc")


@pytest.mark.parametrize("text", ["", "!!! 123 !!!", "ёжик é", "ёжик ÉÀ 42"])
def test_distribution_without_letters_is_all_zero(text):
    freqs = distribution(text)
    assert len(freqs) == 26
    assert all(v == 0.0 for v in freqs.values())


def test_reference_table():
    ref = reference()
    assert list(ref) == list(EN_ALPHA)
    assert ref["e"] == 0.12702
    assert ref["t"] == 0.09056
    assert ref["z"] == 0.00074
    assert all(v > 0 for v in ref.values())
    assert sum(ref.values()) == pytest.approx(1.0, abs=1e-3)


def test_reference_is_read_only():
    with pytest.raises(TypeError):
        reference()["e"] = 0.5


def test_index_of_coincidence():
    assert index_of_coincidence("aabb") == pytest.approx(1 / 3)
    assert index_of_coincidence("abcd") == 0.0
    assert index_of_coincidence("a") == 0.0
    assert index_of_coincidence("") == 0.0


def test_index_of_coincidence_survives_shift():
    text = "Who said, two vast and trunkless legs of stone"
    assert index_of_coincidence(encrypt(text, 11)) == pytest.approx(
        index_of_coincidence(text)
    )
