"""Tests for the top-level tokenize() API."""

from __future__ import annotations

import logging

import pytest

from catlexer import (
    CatlexerError,
    IllegalInputError,
    ScanConfig,
    State,
    Token,
    scan_config_context,
    tokenize,
)


class TestTokenize:
    """tokenize() drains a fresh session."""

    def test_basic(self) -> None:
        """Span tokens are yielded in order."""
        tokens = list(tokenize("<head><title>x</title></head>"))
        assert [t.value for t in tokens] == ["<head>", "<title>x", "</title>", "</head>"]
        assert [t.state for t in tokens] == [
            State.COMPONENT,
            State.CONTENT,
            State.CONTENT,
            State.CONTENT,
        ]
        assert "".join(t.value for t in tokens) == "<head><title>x</title></head>"

    def test_empty(self) -> None:
        """Empty input yields nothing."""
        assert list(tokenize("")) == []

    def test_include_terminal(self) -> None:
        """include_terminal appends the END token."""
        tokens = list(tokenize("a", include_terminal=True))
        assert tokens == [Token(State.CONTENT, "a"), Token(State.END)]

    def test_include_terminal_illegal(self) -> None:
        """include_terminal appends the ILLEGAL token."""
        tokens = list(tokenize("a<cat-x", include_terminal=True))
        assert tokens == [Token(State.CONTENT, "a"), Token(State.ILLEGAL)]

    def test_lazy(self) -> None:
        """Nothing is scanned until iteration starts."""
        iterator = tokenize("<!-- never closed", strict=True)
        with pytest.raises(IllegalInputError):
            next(iterator)

    def test_component_names(self) -> None:
        """Component names can be collected from the stream."""
        source = "<document><head></head><body><cat-nav></cat-nav></body></document>"
        names = [t.component_name for t in tokenize(source) if t.state is State.COMPONENT]
        assert names == ["document", "head", "body", "cat-nav"]


class TestIllegalInput:
    """Handling of sessions that end in ILLEGAL."""

    def test_non_strict_stops_quietly(self) -> None:
        """Default mode yields the tokens before the bad span."""
        tokens = list(tokenize("ok<!-- open"))
        assert tokens == [Token(State.CONTENT, "ok")]

    def test_non_strict_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Default mode logs a warning through the catlexer logger."""
        with caplog.at_level(logging.WARNING, logger="catlexer"):
            list(tokenize("<cat-x", source_file="page.html"))

        records = [r for r in caplog.records if r.name == "catlexer"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "page.html:0: unterminated component tag" in records[0].getMessage()

    def test_strict_raises_for_component(self) -> None:
        """Strict mode raises with the offset of the unterminated tag."""
        with pytest.raises(IllegalInputError) as exc_info:
            list(tokenize("text<cat-x", strict=True))

        error = exc_info.value
        assert error.state is State.COMPONENT
        assert error.offset == 4
        assert error.source_file is None
        assert str(error) == "offset 4: unterminated component tag"

    def test_strict_raises_for_comment(self) -> None:
        """Strict mode reports comments separately."""
        with pytest.raises(IllegalInputError) as exc_info:
            list(tokenize("<head><!-- x -", strict=True, source_file="a.html"))

        error = exc_info.value
        assert error.state is State.COMMENT
        assert error.offset == 6
        assert str(error) == "a.html:6: unterminated comment"

    def test_strict_yields_tokens_before_error(self) -> None:
        """Tokens before the failure are still produced."""
        seen = []
        with pytest.raises(IllegalInputError):
            for token in tokenize("a<!--", strict=True):
                seen.append(token)
        assert seen == [Token(State.CONTENT, "a")]

    def test_error_hierarchy(self) -> None:
        """IllegalInputError is a CatlexerError."""
        assert issubclass(IllegalInputError, CatlexerError)

    def test_strict_well_formed_does_not_raise(self) -> None:
        """Strict mode is silent when the session reaches END."""
        assert len(list(tokenize("<body>x<!--y-->", strict=True))) == 3


class TestConfigIntegration:
    """tokenize() reads defaults from the active ScanConfig."""

    def test_strict_from_context(self) -> None:
        """Context config enables strict mode."""
        with scan_config_context(ScanConfig(strict=True)):
            with pytest.raises(IllegalInputError):
                list(tokenize("<!--"))

    def test_config_resolved_at_call_time(self) -> None:
        """Options are fixed when tokenize() is called, not when iterated."""
        with scan_config_context(ScanConfig(strict=True)):
            iterator = tokenize("<!--")
        with pytest.raises(IllegalInputError):
            list(iterator)

    def test_keyword_overrides_context(self) -> None:
        """Explicit keywords win over the context config."""
        with scan_config_context(ScanConfig(strict=True, include_terminal=True)):
            tokens = list(tokenize("<!--", strict=False))
        assert tokens == [Token(State.ILLEGAL)]
