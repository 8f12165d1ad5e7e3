"""Tests for localization.service module."""

import pytest

from localization import (
    CatalogLoadError,
    MalformedKeyError,
    RenderError,
    TranslationService,
)


class TestTranslationService:
    """Tests for TranslationService."""

    def test_get_locale(self, service):
        assert service.get_locale() == "en_EN"

    def test_trans_round_trip(self, service):
        """A loaded template renders its positional parameter."""
        assert service.trans("greeting.hello", ["World"]) == "Hello, World!"

    def test_trans_without_params(self, service):
        assert service.trans("greeting.welcome") == "Welcome"

    def test_trans_missing_message_key_returns_key(self, service):
        assert service.trans("greeting.nope") == "greeting.nope"

    def test_trans_missing_namespace_returns_key(self, service):
        assert service.trans("nope.hello") == "nope.hello"

    def test_trans_before_set_locale_returns_key(self, locale_state):
        service = TranslationService(locale_state)
        assert service.trans("greeting.hello", ["World"]) == "greeting.hello"

    def test_trans_malformed_key_is_deterministic(self, service):
        for _ in range(2):
            with pytest.raises(MalformedKeyError):
                service.trans("greeting")

    def test_trans_arity_mismatch(self, service):
        with pytest.raises(RenderError):
            service.trans("errors.arity", ["Ann"])

    def test_trans_full_arity(self, service):
        assert service.trans("errors.arity", ["Ann", 30]) == "Hi Ann, you are 30"

    def test_locale_switch_isolation(self, service, locale_provider):
        """Keys without a namespace in the new locale fall back to the raw key."""
        assert service.trans("errors.required", ["Name"]) == "Name is required"

        locale_provider.locale = "fr_FR"
        service.set_locale()

        assert service.get_locale() == "fr_FR"
        assert service.trans("errors.required", ["Name"]) == "errors.required"
        assert service.trans("greeting.hello", ["Monde"]) == "Bonjour, Monde !"

    def test_failed_switch_clears_previous_translations(self, service):
        with pytest.raises(CatalogLoadError):
            service.set_locale("de_DE")

        assert service.get_locale() == "de_DE"
        assert service.trans("greeting.welcome") == "greeting.welcome"

    def test_has_message(self, service):
        assert service.has_message("greeting.hello") is True
        assert service.has_message("greeting.nope") is False

    def test_reload_active_locale(self, service, lang_dir):
        (lang_dir / "en_EN" / "extra.yml").write_text("k: v", encoding="utf-8")
        assert service.trans("extra.k") == "extra.k"

        report = service.reload()

        assert report.locale == "en_EN"
        assert "extra" in report.namespaces
        assert service.trans("extra.k") == "v"

    def test_available_locales(self, service):
        assert service.available_locales() == ["en_EN", "es_ES", "fr_FR"]

    def test_exposes_state_and_catalog(self, service, locale_state):
        assert service.state is locale_state
        assert service.catalog is locale_state.catalog

    def test_trans_single_string_param(self, service):
        assert service.trans("greeting.hello", "World") == "Hello, World!"

    def test_trans_uses_locale_of_loaded_catalog(self, service):
        """trans reads the locale and the messages from the same load."""
        service.catalog.load("fr_FR")
        assert service.trans("greeting.hello", ["Ann"]) == "Bonjour, Ann !"
