"""Tests for kit_context and error payloads."""

from datetime import timezone, tzinfo

import pytest

from railkit import ErrorKind, KitError, UnwrapError, err, kit_context
from railkit.context import default_zone, serialize_indent


class TestKitContext:
    def test_defaults(self):
        assert serialize_indent() == 2
        assert isinstance(default_zone(), tzinfo)

    def test_overrides_are_scoped(self):
        with kit_context(zone=timezone.utc, indent=4):
            assert default_zone() is timezone.utc
            assert serialize_indent() == 4
        assert serialize_indent() == 2

    def test_unpassed_settings_are_kept(self):
        with kit_context(indent=None):
            with kit_context(zone=timezone.utc):
                assert serialize_indent() is None
                assert default_zone() is timezone.utc
            assert serialize_indent() is None
        assert serialize_indent() == 2

    def test_none_zone_restores_local(self):
        with kit_context(zone=timezone.utc):
            with kit_context(zone=None):
                assert isinstance(default_zone(), tzinfo)

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with kit_context(indent=8):
                raise RuntimeError("boom")
        assert serialize_indent() == 2


class TestKitError:
    def test_str(self):
        assert str(KitError.navigation("bad path")) == "navigation: bad path"

    def test_factories(self):
        assert KitError.validation("x").kind is ErrorKind.VALIDATION
        assert KitError.conversion("x").kind is ErrorKind.CONVERSION
        assert KitError.navigation("x").kind is ErrorKind.NAVIGATION
        assert KitError.unsupported("x").kind is ErrorKind.UNSUPPORTED_INPUT

    def test_unwrap_error_message(self):
        with pytest.raises(UnwrapError, match="conversion: bad text"):
            err(KitError.conversion("bad text")).unwrap()
