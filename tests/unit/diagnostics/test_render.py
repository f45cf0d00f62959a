"""Unit tests for message rendering, default lines and locators."""

from __future__ import annotations

from structlog.testing import capture_logs

from kblog.diagnostics import Facility, Level, Locator, build_event, format_default_line, render_message


class TestRenderMessage:
    def test_positional_arguments(self) -> None:
        assert render_message("bad token %s at %d", ("foo", 4)) == "bad token foo at 4"

    def test_no_arguments_returns_format_verbatim(self) -> None:
        assert render_message("100%", ()) == "100%"

    def test_mapping_argument(self) -> None:
        assert render_message("%(name)s missing", ({"name": "ex:p"},)) == "ex:p missing"

    def test_empty_mapping_is_positional(self) -> None:
        assert render_message("got %s", ({},)) == "got {}"

    def test_mismatch_falls_back_and_logs(self) -> None:
        with capture_logs() as logs:
            text = render_message("%s and %s", ("one",))
        assert text == "%s and %s ('one',)"
        assert logs == [
            {
                "event": "diagnostic.render_failed",
                "format": "%s and %s",
                "error": "TypeError: not enough arguments for format string",
                "log_level": "warning",
            }
        ]

    def test_overflow_falls_back(self) -> None:
        with capture_logs() as logs:
            text = render_message("size %d", (float("inf"),))
        assert text == "size %d (inf,)"
        assert logs[0]["error"].startswith("OverflowError")

    def test_failing_str_falls_back(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("no text")

            def __repr__(self) -> str:
                return "<Broken>"

        with capture_logs() as logs:
            text = render_message("item %s", (Broken(),))
        assert text == "item %s (<Broken>,)"
        assert logs[0]["error"] == "RuntimeError: no text"

    def test_unprintable_arguments(self) -> None:
        class Opaque:
            def __str__(self) -> str:
                raise RuntimeError("no text")

            def __repr__(self) -> str:
                raise RuntimeError("no repr")

        with capture_logs():
            text = render_message("item %s", (Opaque(),))
        assert text == "item %s (<unprintable arguments>)"


class TestFormatDefaultLine:
    def test_minimal(self) -> None:
        event = build_event(0, Level.INFO, Facility.STORAGE, None, "opened")
        assert format_default_line(event) == "[storage] info: opened"

    def test_with_code(self) -> None:
        event = build_event(42, Level.ERROR, Facility.PARSER, None, "bad token foo")
        assert format_default_line(event) == "[parser] error 42: bad token foo"

    def test_negative_code_is_printed(self) -> None:
        event = build_event(-1, Level.WARN, Facility.QUERY, None, "slow")
        assert format_default_line(event) == "[query] warning -1: slow"

    def test_with_locator_and_prefix(self) -> None:
        event = build_event(
            3, Level.WARN, Facility.PARSER, Locator(uri="http://ex.org/a.rdf", line=12), "odd"
        )
        assert format_default_line(event, "librdf") == "librdf [parser] warning 3 (http://ex.org/a.rdf:12): odd"

    def test_opaque_locator_uses_str(self) -> None:
        class Position:
            def __str__(self) -> str:
                return "byte 88"

        event = build_event(0, Level.ERROR, Facility.RAPTOR, Position(), "eof")
        assert format_default_line(event) == "[raptor] error (byte 88): eof"

    def test_empty_locator_is_omitted(self) -> None:
        event = build_event(0, Level.ERROR, Facility.PARSER, Locator(), "eof")
        assert format_default_line(event) == "[parser] error: eof"

    def test_unknown_facility(self) -> None:
        event = build_event(0, Level.FATAL, 512, None, "x")
        assert format_default_line(event) == "[unclassified] fatal: x"


class TestLocator:
    def test_full(self) -> None:
        assert str(Locator(file="a.ttl", line=4, column=7)) == "a.ttl:4 column 7"

    def test_file_preferred_over_uri(self) -> None:
        loc = Locator(uri="http://ex.org/a.ttl", file="a.ttl", line=1)
        assert loc.source == "a.ttl"
        assert str(loc) == "a.ttl:1"

    def test_line_only(self) -> None:
        assert str(Locator(line=9)) == "9"

    def test_column_only(self) -> None:
        assert str(Locator(column=2)) == "column 2"

    def test_unknown(self) -> None:
        assert str(Locator()) == ""
        assert Locator().byte == -1
