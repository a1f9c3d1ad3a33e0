import pytest

from pipex.libft.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("") == 0
    assert strlen("pipex") == 5


def test_strlen_rejects_none():
    with pytest.raises(TypeError):
        strlen(None)


def test_strchr_finds_first_occurrence():
    text = "PATH=/usr/bin"
    index = strchr(text, "=")
    assert text[index] == "="
    assert "=" not in text[:index]


def test_strchr_accepts_int_code():
    assert strchr("abcabc", ord("b")) == strchr("abcabc", "b")


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", 0) == len("abc")


def test_strrchr_finds_last_occurrence():
    text = "a/b/c"
    index = strrchr(text, "/")
    assert text[index] == "/"
    assert "/" not in text[index + 1 :]
    assert strrchr(text, "x") is None
    assert strrchr(text, "\0") == len(text)


def test_strncmp_equal_prefix():
    assert strncmp("PATH=/bin", "PATH", 4) == 0
    assert strncmp("abc", "abd", 0) == 0
    assert strncmp("same", "same", 100) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_empty_against_nonempty():
    assert strncmp("", "x", 1) < 0
    assert strncmp("", "", 1) == 0


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_within_limit():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index : index + len("world")] == "world"


def test_strnstr_match_crossing_limit_is_not_found():
    assert strnstr("hello world", "world", 8) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "x", 3) is None


def test_strlcpy_truncates_and_reports_source_length():
    copied, total = strlcpy("pipex", 3)
    assert copied == "pi"
    assert total == len("pipex")


def test_strlcpy_large_buffer_copies_everything():
    assert strlcpy("abc", 10) == ("abc", 3)


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strlcpy("abc", 0)
    assert copied == ""
    assert total == 3


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foobar"
    assert total == len("foobar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foobar")


def test_strlcat_size_smaller_than_dest():
    result, total = strlcat("foo", "bar", 2)
    assert result == "foo"
    assert total == len("bar") + 2


def test_strdup_equal_copy():
    assert strdup("hello") == "hello"
    assert strdup("") == ""


def test_substr_slices():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_negative_arguments():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_strjoin_stops_at_space():
    assert strjoin("/usr/bin/", "ls -l") == "/usr/bin/ls"


def test_strjoin_without_space_concatenates():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_all_trimmed():
    assert strtrim("aaa", "a") == ""


def test_split_drops_empty_pieces():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_path_list():
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split(":::", ":") == []


def test_split_joins_back_without_empties():
    words = split("a,b,,c", ",")
    assert ",".join(words) == "a,b,c"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_passes_indices():
    result = strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbC"


def test_strmapi_identity_keeps_string():
    assert strmapi("pipex", lambda i, ch: ch) == "pipex"


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert chars == ["a", "B", "c"]


def test_striteri_sees_every_index():
    seen = []
    striteri(list("xyz"), lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_striteri_none_is_ignored():
    calls = []
    assert striteri(None, lambda i, ch: calls.append(i)) is None
    assert calls == []