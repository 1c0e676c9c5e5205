"""Tests for presentation/api: check(), assert_that() and failure blocks."""

import logging

import pytest

from suitecheck import (
    CheckFailure,
    Contains,
    Equals,
    ErrorMatches,
    IsNil,
    Not,
    NotNil,
    assert_that,
    check,
    commentf,
)
from suitecheck.domain.exceptions import CheckerArityError
from suitecheck.presentation.api import indent


class Version:
    def __repr__(self) -> str:
        return "Version(1)"

    def __str__(self) -> str:
        return "1.0"


class TestCheck:
    """Tests for check()."""

    def test_passing(self) -> None:
        """Truthy outcome without diagnostic."""
        outcome = check(1, Equals, 1)
        assert outcome
        assert outcome.diagnostic == ""

    def test_failure_block(self) -> None:
        """One line per param, with type names."""
        outcome = check(1, Equals, 2)
        assert not outcome
        assert outcome.diagnostic == "... obtained int = 1\n... expected int = 2"

    def test_comment_appended(self) -> None:
        """Comment follows the values."""
        outcome = check(1, Equals, 2, comment=commentf("run %d of %d", 3, 5))
        assert outcome.diagnostic == "... obtained int = 1\n... expected int = 2\n... run 3 of 5"

    def test_multiline_comment(self) -> None:
        """Every comment line is prefixed."""
        outcome = check(None, NotNil, comment=commentf("first\nsecond"))
        assert outcome.diagnostic == "... value = None\n... first\n... second"

    def test_usage_fault_appended(self) -> None:
        """Usage fault text closes the block."""
        outcome = check([1], Equals, [1])
        assert outcome.diagnostic == (
            "... obtained list = [1]\n... expected list = [1]\n... runtime error: comparing uncomparable type list"
        )

    def test_usage_fault_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Faults are visible in debug logs."""
        with caplog.at_level(logging.DEBUG, logger="suitecheck.presentation.api.assertions"):
            check("hello", Contains, 1)
        assert "Contains usage fault: element is a int but expected a str" in caplog.text

    def test_rewritten_view(self) -> None:
        """ErrorMatches shows the message as "error"."""
        outcome = check(ValueError("some error"), ErrorMatches, "other")
        assert outcome.diagnostic == "... error str = 'some error'\n... regex str = 'other'"

    def test_none_value(self) -> None:
        """None has no type name."""
        assert check(None, NotNil).diagnostic == "... value = None"

    def test_multiline_string(self) -> None:
        """Multi-line strings are shown line by line."""
        outcome = check("a\nb", Equals, "c")
        assert outcome.diagnostic == (
            "... obtained str = (\n...     'a\\n'\n...     'b'\n... )\n... expected str = 'c'"
        )

    def test_value_with_own_str(self) -> None:
        """Objects with their own __str__ show both forms."""
        outcome = check(Version(), IsNil)
        assert outcome.diagnostic == f"... value {__name__}.Version = Version(1) ('1.0')"

    def test_negated_checker(self) -> None:
        """Not() uses the wrapped checker's params."""
        outcome = check(None, Not(IsNil))
        assert outcome.diagnostic == "... value = None"

    def test_arity_error(self) -> None:
        """Wrong param count raises before checking."""
        with pytest.raises(CheckerArityError, match="Wrong number of parameters for Equals: want 2, got 1"):
            check(1, Equals)
        with pytest.raises(CheckerArityError, match="want 1, got 2"):
            check(1, IsNil, 2)

    def test_comment_formatted_lazily(self) -> None:
        """A passing check never formats its comment."""
        bad = commentf("%d", "not a number")
        assert check(1, Equals, 1, comment=bad)
        with pytest.raises(TypeError):
            str(bad)


class TestAssertThat:
    """Tests for assert_that()."""

    def test_passing_returns_none(self) -> None:
        """Nothing raised."""
        assert_that([1, 2], Contains, 2)

    def test_failure_raises(self) -> None:
        """CheckFailure carries the diagnostic."""
        with pytest.raises(CheckFailure) as exc_info:
            assert_that(1, Equals, 2)
        assert exc_info.value.checker_name == "Equals"
        assert str(exc_info.value) == "Equals check failed:\n... obtained int = 1\n... expected int = 2"

    def test_failure_is_assertion_error(self) -> None:
        """pytest treats it as a plain failure."""
        with pytest.raises(AssertionError):
            assert_that(None, NotNil)


class TestComment:
    """Tests for commentf()."""

    def test_without_args(self) -> None:
        """Template kept verbatim."""
        assert commentf("100%").comment_string() == "100%"

    def test_with_args(self) -> None:
        """%-formatting."""
        assert str(commentf("%s=%d", "x", 1)) == "x=1"


class TestIndent:
    """Tests for indent()."""

    def test_every_line(self) -> None:
        """Blank lines too."""
        assert indent("a\n\nb", "> ") == "> a\n> \n> b"
