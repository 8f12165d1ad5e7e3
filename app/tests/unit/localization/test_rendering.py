"""Tests for localization.rendering module."""

import pytest

from localization import RenderError, render_template


class TestRenderTemplate:
    """Tests for render_template()."""

    def test_single_placeholder(self):
        assert render_template("Hello, %s!", ["World"]) == "Hello, World!"

    def test_placeholders_consumed_in_order(self):
        assert render_template("%s then %s", ("first", "second")) == "first then second"

    def test_numeric_placeholders(self):
        assert render_template("Hi %s, you are %d", ["Ann", 30]) == "Hi Ann, you are 30"
        assert render_template("%.2f%%", [12.5]) == "12.50%"

    def test_no_params_returns_template_untouched(self):
        assert render_template("100% sure") == "100% sure"
        assert render_template("Hello, %s!", []) == "Hello, %s!"

    def test_too_few_params_raises(self):
        """Arity mismatch raises RenderError instead of partial output."""
        with pytest.raises(RenderError) as exc_info:
            render_template("Hi %s, you are %d", ["Ann"])

        error = exc_info.value
        assert error.template == "Hi %s, you are %d"
        assert error.params == ("Ann",)
        assert isinstance(error.cause, TypeError)

    def test_too_many_params_raises(self):
        with pytest.raises(RenderError):
            render_template("Hello, %s!", ["World", "extra"])

    def test_params_without_placeholders_raises(self):
        with pytest.raises(RenderError):
            render_template("Welcome", ["unused"])

    def test_wrong_type_raises(self):
        with pytest.raises(RenderError):
            render_template("You are %d", ["thirty"])

    def test_single_string_param_is_one_value(self):
        """A bare string is one argument, not one per character."""
        assert render_template("Hello, %s!", "World") == "Hello, World!"

    def test_single_string_param_arity_checked(self):
        with pytest.raises(RenderError) as exc_info:
            render_template("Hi %s, you are %d", "Ann")
        assert exc_info.value.params == ("Ann",)
