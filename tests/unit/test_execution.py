"""Tests for the assertion chain, message formatting and scopes."""

import logging

import pytest

from fluent_dom import AssertionFailedError, assertion_scope, should
from fluent_dom.assertions.execution import execute, format_message, format_reason, format_value
from fluent_dom.config import FluentDomConfig, set_config
from fluent_dom.context import current_scope
from fluent_dom.markup import parse_element


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "<null>"),
            ("x", '"x"'),
            (3, "3"),
            (True, "True"),
            ([1, "a"], '{1, "a"}'),
            ((), "{empty}"),
            ({"b", "a"}, '{"a", "b"}'),
            ({"k": None}, '{"k": <null>}'),
            (int, "int"),
        ],
    )
    def test_formats(self, value, expected):
        assert format_value(value) == expected

    def test_formats_elements_as_markup(self):
        assert format_value(parse_element("<b>x</b>")) == '"<b>x</b>"'


class TestFormatReason:
    def test_empty(self):
        assert format_reason("") == ""
        assert format_reason("   ") == ""

    def test_prefixes_because(self):
        assert format_reason("it matters") == " because it matters"

    def test_does_not_double_because(self):
        assert format_reason("because it matters") == " because it matters"

    def test_formats_arguments(self):
        assert format_reason("{0} needs {1}", ("nav", "links")) == " because nav needs links"

    def test_braces_without_arguments_are_literal(self):
        assert format_reason("{weird}") == " because {weird}"

    def test_does_not_double_capitalised_because(self):
        assert format_reason("Because nav needs it") == " Because nav needs it"

    @pytest.mark.parametrize(
        ("reason", "reason_args"),
        [
            ("{1}", ("a",)),
            ("css {color} rule", ("red",)),
            ("unbalanced { brace", ("x",)),
        ],
    )
    def test_malformed_reason_falls_back_to_raw_text(self, reason, reason_args):
        assert format_reason(reason, reason_args) == f" because {reason}"

    def test_malformed_reason_still_reports_failure(self):
        link = parse_element('<a href="/">x</a>')

        with pytest.raises(AssertionFailedError) as exc_info:
            should(link).have_href("/y", "{1}", "a")

        assert str(exc_info.value) == 'Expected element "href" attribute to have value "/y" because {1}, but found "/".'


class TestFormatMessage:
    def test_positional_and_reason(self):
        message = format_message("Expected {context} {0} to be {1}{reason}.", ("a", 1), reason=" because x")

        assert message == 'Expected object "a" to be 1 because x.'

    def test_context_default(self):
        assert format_message("Expected {context:thing}.", ()) == "Expected thing."

    def test_scope_name_wins(self):
        message = format_message("Expected {context:thing} and {context}.", (), scope_name="the card")

        assert message == "Expected the card and the card."

    def test_missing_argument_is_left_alone(self):
        assert format_message("{0} {1}", ("a",)) == '"a" {1}'

    def test_values_are_not_reinterpreted(self):
        assert format_message("{0}", ("{reason}",), reason=" because x") == '"{reason}"'


class TestAssertionChain:
    def test_passing_condition_returns_true(self):
        assert execute().for_condition(True).fail_with("never shown") is True

    def test_failing_condition_raises_outside_scope(self):
        with pytest.raises(AssertionFailedError, match="Expected widget to be shiny because it is new."):
            execute("widget").because("it is {0}", "new").for_condition(False).fail_with(
                "Expected {context} to be shiny{reason}."
            )

    def test_error_carries_result(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            execute().because("why not").for_condition(False).fail_with("boom")

        result = exc_info.value.result
        assert not result
        assert result.message == "boom"
        assert result.reason == "because why not"
        assert result.identifier == "object"

    def test_logs_failures(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fluent_dom.assertions.execution"):
            with pytest.raises(AssertionFailedError):
                execute().for_condition(False).fail_with("logged failure")

        assert "logged failure" in caplog.text

    def test_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            execute().for_condition(False).fail_with("boom")


class TestAssertionScope:
    def test_collects_failures_until_exit(self):
        link = parse_element('<a href="/">x</a>')

        with pytest.raises(AssertionFailedError) as exc_info:
            with assertion_scope() as scope:
                should(link).have_id("home")
                should(link).have_href("/about")
                should(link).have_tag("a")
                assert len(scope.results) == 4

        assert [r.message for r in exc_info.value.results] == [
            'Expected element to have attribute "id", but found <null>.',
            'Expected element "href" attribute to have value "/about", but found "/".',
        ]
        assert str(exc_info.value).count("\n") == 1

    def test_passing_scope_does_not_raise(self):
        link = parse_element('<a href="/">x</a>')

        with assertion_scope() as scope:
            should(link).have_href("/").and_.have_tag("a")

        assert scope.failures == []
        assert all(scope.results)

    def test_condition_result_is_returned_inside_scope(self):
        with pytest.raises(AssertionFailedError):
            with assertion_scope():
                assert execute().for_condition(False).fail_with("x") is False

    def test_scope_name_used_as_context(self):
        button = parse_element("<button>Save</button>")

        with pytest.raises(AssertionFailedError) as exc_info:
            with assertion_scope("the save button"):
                should(button).have_type("submit")

        assert str(exc_info.value) == 'Expected the save button to have attribute "type", but found <null>.'

    def test_nested_scopes_raise_from_outermost(self):
        with pytest.raises(AssertionFailedError) as exc_info:
            with assertion_scope() as outer:
                with assertion_scope("inner"):
                    execute().for_condition(False).fail_with("first from {context}")
                assert len(outer.failures) == 1
                execute().for_condition(False).fail_with("second")

        assert [r.message for r in exc_info.value.results] == ["first from inner", "second"]

    def test_inner_scope_inherits_outer_name(self):
        with pytest.raises(AssertionFailedError, match="^card failed$"):
            with assertion_scope("card"):
                with assertion_scope():
                    execute().for_condition(False).fail_with("{context} failed")

    def test_scope_is_reset_after_exit(self):
        with assertion_scope():
            assert current_scope() is not None
        assert current_scope() is None

    def test_fail_fast_raises_inside_scope(self):
        set_config(FluentDomConfig(fail_fast=True))

        with pytest.raises(AssertionFailedError) as exc_info:
            with assertion_scope():
                execute().for_condition(False).fail_with("first")
                execute().for_condition(False).fail_with("second")

        assert [r.message for r in exc_info.value.results] == ["first"]

    def test_other_exceptions_propagate(self):
        with pytest.raises(ValueError):
            with assertion_scope():
                execute().for_condition(False).fail_with("ignored")
                raise ValueError("boom")
