"""Tests for text normalization into keyword tokens."""

from ux_eval.matching.domain.normalizer import DEFAULT_STOP_WORDS, normalize


class TestNormalize:
    """normalize lowercases, strips punctuation and filters short and stop words."""

    def test_empty_text_yields_empty_set(self) -> None:
        assert normalize("") == frozenset()

    def test_lowercases_and_strips_punctuation(self) -> None:
        assert normalize("Login-Button: BROKEN!") == frozenset({"loginbutton", "broken"})

    def test_drops_tokens_shorter_than_three_characters(self) -> None:
        assert normalize("an ok UI bug") == frozenset({"bug"})

    def test_drops_german_stop_words(self) -> None:
        assert normalize("Der Button ist zu klein") == frozenset({"button", "klein"})

    def test_drops_english_stop_words(self) -> None:
        assert normalize("The menu and the footer") == frozenset({"menu", "footer"})

    def test_keeps_non_ascii_word_characters(self) -> None:
        assert "schließen" in normalize("Schließen fehlt")

    def test_custom_stop_words_replace_defaults(self) -> None:
        tokens = normalize("the menu button", stop_words=frozenset({"menu"}))
        assert tokens == frozenset({"the", "button"})

    def test_only_stop_words_yield_empty_set(self) -> None:
        assert normalize("und oder aber") == frozenset()

    def test_default_stop_words_are_lowercase(self) -> None:
        assert all(word == word.lower() for word in DEFAULT_STOP_WORDS)
