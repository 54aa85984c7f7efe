import pytest

from pipex.search import strchr, strncmp, strnstr, strrchr

TEXT = "lorem ipsum dolor sit amet"


def test_strnstr_empty_needle():
    assert strnstr(TEXT, "", 10) == 0


def test_strnstr_found_within_bound():
    index = strnstr(TEXT, "dolor", len(TEXT))
    assert index is not None
    assert TEXT[index:index + len("dolor")] == "dolor"


def test_strnstr_match_crossing_bound_is_rejected():
    start = TEXT.index("dolor")
    assert strnstr(TEXT, "dolor", start + len("dolor") - 1) is None
    assert strnstr(TEXT, "dolor", start + len("dolor")) == start


def test_strnstr_missing():
    assert strnstr(TEXT, "absent", len(TEXT)) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr(TEXT, "a", -1)


def test_strncmp_source_example_sign():
    assert strncmp("1233", "1235", 4) < 0
    assert strncmp("1235", "1233", 4) > 0


def test_strncmp_difference_of_codes():
    assert strncmp("1233", "1235", 4) == ord("3") - ord("5")


def test_strncmp_equal_within_n():
    assert strncmp("1233", "1235", 3) == 0


def test_strncmp_zero_n():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_path_prefix():
    assert strncmp("PATH=/usr/bin", "PATH=", 5) == 0
    assert strncmp("HOME=/root", "PATH=", 5) != 0


def test_strncmp_shorter_string_ends_with_zero():
    assert strncmp("ab", "abc", 10) == -ord("c")


def test_strncmp_negative_n_unbounded():
    assert strncmp("same", "same", -1) == 0


@pytest.mark.parametrize("pair", [("abc", "abd"), ("x", "xy"), ("hello", "help")])
def test_strncmp_antisymmetric(pair):
    a, b = pair
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strchr_first_occurrence():
    assert strchr("teste", "e") == 1


def test_strrchr_last_occurrence():
    assert strrchr("teste", "e") == len("teste") - 1


def test_strchr_missing():
    assert strchr("Salut tout le monde!", "h") is None
    assert strrchr("Salut tout le monde!", "h") is None


def test_nul_finds_end():
    assert strchr("teste", "\0") == len("teste")
    assert strrchr("teste", "\0") == len("teste")


def test_chr_rejects_long_argument():
    with pytest.raises(ValueError):
        strchr("teste", "es")
    with pytest.raises(ValueError):
        strrchr("teste", "")


@pytest.mark.parametrize("char", list("Salut tout"))
def test_strchr_not_after_strrchr(char):
    first = strchr("Salut tout le monde!", char)
    last = strrchr("Salut tout le monde!", char)
    assert first <= last