"""
Unit Tests for src.utils.segmentation.heuristics

Tests text normalization and the automatic poison/disregard signatures.
"""

import pytest

from src.utils.segmentation.heuristics import (
    just_letters,
    is_introduction,
    is_practice_link,
    is_vocab_header,
    is_closer,
    classify_element,
    auto_tag,
)
from src.utils.segmentation.tags import Tag, has_tag
from tests.test_helpers import content_from, element_from


class TestJustLetters:
    """Tests for just_letters()"""

    def test_lowercases(self):
        """Upper-case letters are lowered"""
        assert just_letters("Introduction") == "introduction"

    def test_strips_punctuation_and_digits(self):
        """Digits and punctuation are removed, spaces kept"""
        assert just_letters("That's it for Lesson 12!") == "thats it for lesson "

    def test_strips_parentheses(self):
        """Parentheses are not letters"""
        assert just_letters("(Okay) I got it") == "okay i got it"

    def test_empty(self):
        """Empty text stays empty"""
        assert just_letters("") == ""


class TestIsIntroduction:
    """Tests for is_introduction()"""

    @pytest.mark.parametrize("html", [
        "<p>Introduction</p>",
        "<p>INTRODUCTION: Lesson 3</p>",
        "<p>This lesson is also available as a PDF.</p>",
        "<p>Practice with the Memrise tool here</p>",
    ])
    def test_introduction_signatures(self, html):
        """Introduction prefixes and the Memrise marker match"""
        assert is_introduction(element_from(html)) is True

    def test_introduction_must_be_prefix(self):
        """'introduction' in the middle of text does not match"""
        assert is_introduction(element_from("<p>A short introduction</p>")) is False


class TestIsPracticeLink:
    """Tests for is_practice_link()"""

    def test_link_with_image(self):
        """Direct link child wrapping an image matches"""
        html = '<p>Practice <a href="#"><img src="quiz.png"/></a></p>'
        assert is_practice_link(element_from(html)) is True

    def test_blank_text_never_matches(self):
        """Image-only links without text are not practice links"""
        html = '<p><a href="#"><img src="quiz.png"/></a></p>'
        assert is_practice_link(element_from(html)) is False

    def test_link_without_image(self):
        """Plain text links do not match"""
        html = '<p>See <a href="#">the workbook</a></p>'
        assert is_practice_link(element_from(html)) is False

    def test_nested_link_ignored(self):
        """Only direct link children are inspected"""
        html = '<p>Practice <span><a href="#"><img src="quiz.png"/></a></span></p>'
        assert is_practice_link(element_from(html)) is False


class TestIsVocabHeader:
    """Tests for is_vocab_header()"""

    @pytest.mark.parametrize("html", [
        "<p><u>Nouns</u><br/>cat</p>",
        "<p><u>Vocabulary</u></p>",
        '<p><span style="text-decoration: underline">Verbs:</span> to go</p>',
        "<p><u>Adjectives &amp; Adverbs</u></p>",
    ])
    def test_underlined_vocab_headers(self, html):
        """Underlined first child with a vocabulary word matches"""
        assert is_vocab_header(element_from(html)) is True

    def test_not_underlined(self):
        """Bold headers are not vocabulary headers"""
        assert is_vocab_header(element_from("<p><strong>Nouns</strong></p>")) is False

    def test_other_underlined_header(self):
        """Underlined headers with other words do not match"""
        assert is_vocab_header(element_from("<p><u>Greetings</u></p>")) is False

    def test_no_children(self):
        """Plain text elements do not match"""
        assert is_vocab_header(element_from("<p>Nouns</p>")) is False


class TestIsCloser:
    """Tests for is_closer()"""

    @pytest.mark.parametrize("html", [
        "<p>That's it for this lesson!</p>",
        "<p>That's it for Lesson 12.</p>",
        "<p>Okay, I got it!</p>",
        "<p>Click here for a workbook.</p>",
        "<p>All entries are linked to an audio file.</p>",
        "<p>There are 25 example sentences in Unit 3.</p>",
    ])
    def test_closer_signatures(self, html):
        """Closer phrases match after normalization"""
        assert is_closer(element_from(html)) is True

    def test_there_are_without_marker(self):
        """'There are' alone is ordinary content"""
        assert is_closer(element_from("<p>There are many ways to say hello.</p>")) is False


class TestClassifyElement:
    """Tests for classify_element() and auto_tag()"""

    def test_poison_applied(self):
        """Poison signatures add the poison tag"""
        element = element_from("<p>Introduction</p>")

        assert classify_element(element) is Tag.POISON
        assert has_tag(element, Tag.POISON)

    def test_disregard_applied(self):
        """Closers get the disregard tag"""
        element = element_from("<p>Okay, I got it!</p>")

        assert classify_element(element) is Tag.DISREGARD
        assert has_tag(element, Tag.DISREGARD)

    def test_poison_takes_precedence(self):
        """An element matching both signatures is poisoned only"""
        element = element_from("<p>Introduction. That's it for this lesson.</p>")

        assert classify_element(element) is Tag.POISON
        assert not has_tag(element, Tag.DISREGARD)

    def test_plain_content_untouched(self):
        """Ordinary content gets no tag"""
        element = element_from("<p>Hello, friend</p>")

        assert classify_element(element) is None
        assert not element.has_attr("class")

    def test_classification_idempotent(self):
        """Classifying twice leaves a single tag"""
        element = element_from("<p>Introduction</p>")
        classify_element(element)
        classify_element(element)

        assert element["class"] == ["section-poison"]

    def test_auto_tag_counts(self):
        """auto_tag tags every direct child and reports counts"""
        content = content_from(
            "<p>Introduction</p>"
            "<p><u>Nouns</u></p>"
            "<p>cat</p>"
            "<p>Okay, I got it!</p>"
        )

        counts = auto_tag(content)

        assert counts == {"poison": 2, "disregard": 1}

    def test_auto_tag_only_direct_children(self):
        """Nested elements are not classified on their own"""
        content = content_from("<div><p>Introduction</p><p>cat</p></div>")

        auto_tag(content)

        # the wrapper is judged by its full text; its children stay untagged
        assert has_tag(content.find("div"), Tag.POISON)
        assert not content.find("p").has_attr("class")
