"""Tests for primitives.text: text-mode recognizers over str buffers."""

from __future__ import annotations

import pytest

from parsenom import Cursor, ErrorKind, Matched, Parser, Recoverable, run
from parsenom.combinators import alt, value
from parsenom.primitives import character, text

# ============================================================================
# LITERALS
# ============================================================================


class TestTag:
    """Test tag and tag_no_case."""

    def test_tag_matches_prefix(self) -> None:
        """tag consumes exactly the literal."""
        outcome = run(text.tag("Hello"), "Hello, World!")

        assert outcome == Matched(Cursor("Hello, World!", 5), "Hello")

    def test_tag_failure_keeps_buffer(self) -> None:
        """A mismatch fails with TAG at the original buffer."""
        assert run(text.tag("Hello"), "Help") == Recoverable(ErrorKind.TAG, Cursor("Help"))

    def test_tag_short_input(self) -> None:
        """Input shorter than the literal is a TAG failure."""
        assert run(text.tag("abc"), "ab") == Recoverable(ErrorKind.TAG, Cursor("ab"))

    def test_empty_tag_matches_without_consuming(self) -> None:
        """The empty literal always matches."""
        outcome = run(text.tag(""), "abc")

        assert outcome == Matched(Cursor("abc"), "")

    def test_tag_rejects_bytes(self) -> None:
        """Text tag needs a str literal."""
        with pytest.raises(TypeError, match="text mode"):
            text.tag(b"abc")  # type: ignore[arg-type]

    def test_tag_no_case_returns_input_slice(self) -> None:
        """The value keeps the input's case."""
        outcome = run(text.tag_no_case("hello"), "HeLLo!")

        assert isinstance(outcome, Matched)
        assert outcome.value == "HeLLo"
        assert outcome.remaining.rest == "!"

    def test_tag_no_case_failure(self) -> None:
        """Different letters fail with TAG."""
        assert run(text.tag_no_case("hello"), "help!").kind == ErrorKind.TAG  # type: ignore[union-attr]


# ============================================================================
# SLICING
# ============================================================================


class TestTake:
    """Test take and the predicate-driven slicers."""

    def test_take_exact(self) -> None:
        """take consumes exactly count characters."""
        outcome = run(text.take(2), "héllo")

        assert outcome == Matched(Cursor("héllo", 2), "hé")

    def test_take_short_input(self) -> None:
        """Too little input fails with EOF."""
        assert run(text.take(4), "abc") == Recoverable(ErrorKind.EOF, Cursor("abc"))

    def test_take_negative(self) -> None:
        """Negative counts are a programming error."""
        with pytest.raises(ValueError, match="count"):
            text.take(-1)

    def test_take_while_may_be_empty(self) -> None:
        """take_while accepts empty runs."""
        outcome = run(text.take_while(character.is_digit), "abc")

        assert outcome == Matched(Cursor("abc"), "")

    def test_take_while1_requires_one(self) -> None:
        """take_while1 fails with TAKE_WHILE1 on an empty run."""
        assert run(text.take_while1(character.is_digit), "abc").kind == ErrorKind.TAKE_WHILE1  # type: ignore[union-attr]

    def test_take_while1_consumes_whole_input(self) -> None:
        """A run to the end of input is a complete match."""
        outcome = run(text.take_while1(character.is_alphabetic), "abc")

        assert outcome == Matched(Cursor("abc", 3), "abc")

    def test_take_while_m_n_caps_at_n(self) -> None:
        """The longest run is capped at n."""
        outcome = run(text.take_while_m_n(3, 6, character.is_alphabetic), "lengthy")

        assert isinstance(outcome, Matched)
        assert outcome.value == "length"
        assert outcome.remaining.rest == "y"

    def test_take_while_m_n_short_run(self) -> None:
        """Runs shorter than m fail with TAKE_WHILE_M_N."""
        outcome = run(text.take_while_m_n(3, 6, character.is_alphabetic), "ab1")

        assert outcome == Recoverable(ErrorKind.TAKE_WHILE_M_N, Cursor("ab1"))

    def test_take_while_m_n_invalid_bounds(self) -> None:
        """m greater than n is rejected at construction."""
        with pytest.raises(ValueError, match="m <= n"):
            text.take_while_m_n(4, 2, character.is_digit)

    def test_take_till(self) -> None:
        """take_till stops before the first matching character."""
        outcome = run(text.take_till(lambda ch: ch == ":"), "key:value")

        assert isinstance(outcome, Matched)
        assert outcome.value == "key"
        assert outcome.remaining.rest == ":value"

    def test_take_till1_needs_progress(self) -> None:
        """take_till1 fails when the terminator comes first."""
        outcome = run(text.take_till1(lambda ch: ch == ":"), ":value")

        assert outcome == Recoverable(ErrorKind.TAKE_TILL1, Cursor(":value"))

    def test_take_until(self) -> None:
        """take_until leaves the pattern in the input."""
        outcome = run(text.take_until("eof"), "hello, worldeof")

        assert isinstance(outcome, Matched)
        assert outcome.value == "hello, world"
        assert outcome.remaining.rest == "eof"

    def test_take_until_missing_pattern(self) -> None:
        """A missing pattern fails with TAKE_UNTIL."""
        assert run(text.take_until("eof"), "hello").kind == ErrorKind.TAKE_UNTIL  # type: ignore[union-attr]

    def test_take_until_may_be_empty(self) -> None:
        """take_until matches an empty prefix; take_until1 does not."""
        assert run(text.take_until("eof"), "eof") == Matched(Cursor("eof"), "")
        assert run(text.take_until1("eof"), "eof").kind == ErrorKind.TAKE_UNTIL  # type: ignore[union-attr]

    def test_is_a(self) -> None:
        """is_a consumes characters from the set."""
        outcome = run(text.is_a("1234567890ABCDEF"), "123 and voila")

        assert isinstance(outcome, Matched)
        assert outcome.value == "123"
        assert run(text.is_a("abc"), "xyz").kind == ErrorKind.IS_A  # type: ignore[union-attr]

    def test_is_not(self) -> None:
        """is_not consumes characters outside the set."""
        outcome = run(text.is_not(" \t\r\n"), "Hello World")

        assert isinstance(outcome, Matched)
        assert outcome.value == "Hello"
        assert run(text.is_not(" "), " x").kind == ErrorKind.IS_NOT  # type: ignore[union-attr]


# ============================================================================
# ESCAPES
# ============================================================================


class TestEscaped:
    """Test escaped and escaped_transform."""

    def test_escaped_keeps_raw_slice(self) -> None:
        """The value includes the control characters."""
        parser = text.escaped(text.digit1(), "\\", text.one_of('"n\\'))
        outcome = run(parser, '12\\"34;')

        assert isinstance(outcome, Matched)
        assert outcome.value == '12\\"34'
        assert outcome.remaining.rest == ";"

    def test_escaped_bad_escape(self) -> None:
        """A control not followed by a valid escape fails with ESCAPED after it."""
        parser = text.escaped(text.digit1(), "\\", text.one_of('"n\\'))

        assert run(parser, "12\\x") == Recoverable(ErrorKind.ESCAPED, Cursor("12\\x", 3))

    def test_escaped_no_progress(self) -> None:
        """Nothing recognizable returns the normal parser's error."""
        parser = text.escaped(text.digit1(), "\\", text.one_of('"n\\'))

        assert run(parser, "ab").kind == ErrorKind.DIGIT  # type: ignore[union-attr]

    def test_escaped_transform_replaces_escapes(self) -> None:
        """Escapes are replaced with the transform's value."""
        transform = alt([
            value("\\", text.char("\\")),
            value('"', text.char('"')),
            value("\n", text.char("n")),
        ])
        parser = text.escaped_transform(text.alpha1(), "\\", transform)
        outcome = run(parser, 'ab\\"cd\\n;')

        assert isinstance(outcome, Matched)
        assert outcome.value == 'ab"cd\n'
        assert outcome.remaining.rest == ";"

    def test_escaped_requires_single_control(self) -> None:
        """The control must be exactly one character."""
        with pytest.raises(ValueError, match="single character"):
            text.escaped(text.digit1(), "\\\\", text.anychar())


# ============================================================================
# SINGLE CHARACTERS
# ============================================================================


class TestSingleCharacters:
    """Test char, anychar, satisfy, one_of, none_of and line endings."""

    def test_char(self) -> None:
        """char matches one specific character."""
        assert run(text.char("a"), "abc") == Matched(Cursor("abc", 1), "a")
        assert run(text.char("a"), "bc") == Recoverable(ErrorKind.CHAR, Cursor("bc"))

    def test_char_at_eof(self) -> None:
        """Empty input fails with the parser's own kind."""
        assert run(text.char("a"), "") == Recoverable(ErrorKind.CHAR, Cursor(""))

    def test_anychar(self) -> None:
        """anychar takes one code point, even non-ASCII."""
        assert run(text.anychar(), "ßx") == Matched(Cursor("ßx", 1), "ß")
        assert run(text.anychar(), "").kind == ErrorKind.ANYCHAR  # type: ignore[union-attr]

    def test_satisfy(self) -> None:
        """satisfy applies the predicate."""
        parser = text.satisfy(lambda ch: ch in "ab")

        assert run(parser, "b!") == Matched(Cursor("b!", 1), "b")
        assert run(parser, "c").kind == ErrorKind.SATISFY  # type: ignore[union-attr]

    def test_one_of_and_none_of(self) -> None:
        """Set membership in both directions."""
        assert run(text.one_of("abc"), "b") == Matched(Cursor("b", 1), "b")
        assert run(text.one_of("abc"), "d").kind == ErrorKind.ONE_OF  # type: ignore[union-attr]
        assert run(text.none_of("abc"), "z") == Matched(Cursor("z", 1), "z")
        assert run(text.none_of("abc"), "a").kind == ErrorKind.NONE_OF  # type: ignore[union-attr]

    def test_newline_and_tab(self) -> None:
        """newline matches LF; tab matches HT."""
        assert run(text.newline(), "\nx") == Matched(Cursor("\nx", 1), "\n")
        assert run(text.newline(), "\r\n").kind == ErrorKind.NEWLINE  # type: ignore[union-attr]
        assert run(text.tab(), "\tx") == Matched(Cursor("\tx", 1), "\t")

    def test_crlf(self) -> None:
        """crlf requires both characters."""
        assert run(text.crlf(), "\r\nx") == Matched(Cursor("\r\nx", 2), "\r\n")
        assert run(text.crlf(), "\n").kind == ErrorKind.CRLF  # type: ignore[union-attr]

    def test_line_ending(self) -> None:
        """line_ending accepts LF or CRLF."""
        assert run(text.line_ending(), "\nx") == Matched(Cursor("\nx", 1), "\n")
        assert run(text.line_ending(), "\r\nx") == Matched(Cursor("\r\nx", 2), "\r\n")
        assert run(text.line_ending(), "\rx").kind == ErrorKind.CR_LF  # type: ignore[union-attr]

    def test_not_line_ending(self) -> None:
        """not_line_ending stops before LF or CRLF."""
        outcome = run(text.not_line_ending(), "ab\r\nc")

        assert isinstance(outcome, Matched)
        assert outcome.value == "ab"
        assert outcome.remaining.rest == "\r\nc"

    def test_not_line_ending_consumes_all_without_ending(self) -> None:
        """Input without a line ending is consumed entirely."""
        assert run(text.not_line_ending(), "abc") == Matched(Cursor("abc", 3), "abc")

    def test_not_line_ending_bare_cr(self) -> None:
        """A carriage return without line feed fails with TAG."""
        assert run(text.not_line_ending(), "ab\rc") == Recoverable(ErrorKind.TAG, Cursor("ab\rc"))


# ============================================================================
# CHARACTER CLASSES
# ============================================================================


class TestCharacterClasses:
    """Test the zero-or-more and one-or-more class recognizers."""

    @pytest.mark.parametrize(
        ("parser", "source", "expected", "rest"),
        [
            (text.alpha1(), "abc123", "abc", "123"),
            (text.digit1(), "123abc", "123", "abc"),
            (text.alphanumeric1(), "ab12;", "ab12", ";"),
            (text.hex_digit1(), "0fFz", "0fF", "z"),
            (text.oct_digit1(), "0178", "017", "8"),
            (text.space1(), " \t\nx", " \t", "\nx"),
            (text.multispace1(), " \t\r\nx", " \t\r\n", "x"),
        ],
    )
    def test_one_or_more(
        self, parser: Parser[str], source: str, expected: str, rest: str
    ) -> None:
        """Each class consumes its maximal run."""
        outcome = run(parser, source)

        assert isinstance(outcome, Matched)
        assert outcome.value == expected
        assert outcome.remaining.rest == rest

    @pytest.mark.parametrize(
        ("parser", "kind"),
        [
            (text.alpha1(), ErrorKind.ALPHA),
            (text.digit1(), ErrorKind.DIGIT),
            (text.alphanumeric1(), ErrorKind.ALPHANUMERIC),
            (text.hex_digit1(), ErrorKind.HEX_DIGIT),
            (text.oct_digit1(), ErrorKind.OCT_DIGIT),
            (text.space1(), ErrorKind.SPACE),
            (text.multispace1(), ErrorKind.MULTISPACE),
        ],
    )
    def test_one_or_more_fails_on_empty_run(self, parser: Parser[str], kind: ErrorKind) -> None:
        """An empty run fails with the class kind."""
        assert run(parser, ";") == Recoverable(kind, Cursor(";"))

    def test_zero_or_more_accepts_empty(self) -> None:
        """The 0 variants match an empty run."""
        for parser in (text.alpha0(), text.digit0(), text.space0(), text.multispace0()):
            assert run(parser, ";") == Matched(Cursor(";"), "")

    def test_ascii_only(self) -> None:
        """Non-ASCII letters are not alphabetic."""
        assert run(text.alpha1(), "é").kind == ErrorKind.ALPHA  # type: ignore[union-attr]
        assert run(text.digit1(), "٣").kind == ErrorKind.DIGIT  # type: ignore[union-attr]
