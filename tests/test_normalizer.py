"""
Unit tests for token normalization
"""
from autotranslate.placeholders import DelimiterConfig, normalize


class TestNormalize:
    """Test replacement of tokens with neutral markers"""

    def test_no_tokens_leaves_text_unchanged(self):
        result = normalize("hello world")
        assert result.markers == []
        assert result.normalized_text == "hello world"

    def test_tokens_numbered_in_order_of_appearance(self):
        markers, text = normalize("{a} and {b}")
        assert markers == ["{a}", "{b}"]
        assert text == "{0} and {1}"

    def test_duplicate_tokens_get_distinct_markers(self):
        """Each occurrence is recorded at its own index"""
        markers, text = normalize("{x} plus {x}")
        assert markers == ["{x}", "{x}"]
        assert text == "{0} plus {1}"

    def test_adjacent_tokens_are_split(self):
        markers, text = normalize("{a}{b}")
        assert markers == ["{a}", "{b}"]
        assert text == "{0}{1}"

    def test_nested_delimiters_close_at_first_end(self):
        """Matching is non-greedy"""
        markers, text = normalize("{a{b}c}")
        assert markers == ["{a{b}"]
        assert text == "{0}c}"

    def test_unbalanced_delimiters_are_not_tokens(self):
        markers, text = normalize("{unclosed and closed} later {")
        assert markers == ["{unclosed and closed}"]
        assert text == "{0} later {"

        markers, text = normalize("only an opening { here")
        assert markers == []
        assert text == "only an opening { here"

    def test_tokens_do_not_span_lines(self):
        markers, text = normalize("{first\nsecond}")
        assert markers == []
        assert text == "{first\nsecond}"

    def test_empty_token(self):
        markers, text = normalize("empty {} token")
        assert markers == ["{}"]
        assert text == "empty {0} token"

    def test_tokens_that_look_like_markers(self):
        """Source tokens equal to marker text are still replaced exactly once"""
        markers, text = normalize("{1} before {0}")
        assert markers == ["{1}", "{0}"]
        assert text == "{0} before {1}"

    def test_custom_delimiters(self):
        delimiters = DelimiterConfig("[[", "]]")
        markers, text = normalize("Hello [[name]], {not a token}", delimiters)
        assert markers == ["[[name]]"]
        assert text == "Hello [[0]], {not a token}"

    def test_delimiters_with_regex_meaning(self):
        delimiters = DelimiterConfig("$(", ")")
        markers, text = normalize("Total: $(amount) (incl. tax)", delimiters)
        assert markers == ["$(amount)"]
        assert text == "Total: $(0) (incl. tax)"

    def test_empty_delimiters_match_nothing(self):
        """A pair with an empty delimiter leaves the text as literal characters"""
        assert normalize("ab 7", DelimiterConfig("", "")) == ([], "ab 7")
        assert normalize("{a} b}", DelimiterConfig("", "}")) == ([], "{a} b}")
        assert normalize("{a} b", DelimiterConfig("{", "")) == ([], "{a} b")

    def test_multi_character_delimiters_same_character(self):
        delimiters = DelimiterConfig("%%", "%%")
        markers, text = normalize("%%user%% paid %%sum%%", delimiters)
        assert markers == ["%%user%%", "%%sum%%"]
        assert text == "%%0%% paid %%1%%"
