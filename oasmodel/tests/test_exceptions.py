"""Test suite for the oasmodel exception hierarchy."""

import pytest

from oasmodel.exceptions import (
    ConfigurationError,
    InvalidExtensionError,
    OASModelError,
    ReservedKeyError,
    UnsupportedModelError,
)
from oasmodel.openapi import PathItem


class TestOASModelError:
    """Tests for the base OASModelError exception."""

    def test_basic_message(self):
        """Test that the error stores the message."""
        error = OASModelError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    def test_can_be_caught_as_exception(self):
        """Test that the error can be caught as a generic Exception."""
        with pytest.raises(Exception):
            raise OASModelError('Test error')


class TestInvalidExtensionError:
    """Tests for InvalidExtensionError."""

    def test_attributes(self):
        """Test the stored name and message."""
        error = InvalidExtensionError('vendor')
        assert error.name == 'vendor'
        assert "'vendor'" in str(error)
        assert "'x-'" in str(error)

    def test_is_value_error(self):
        """Test that it is both an oasmodel error and a ValueError."""
        error = InvalidExtensionError('vendor')
        assert isinstance(error, OASModelError)
        assert isinstance(error, ValueError)

    def test_raised_by_model(self):
        """Test that models raise it for bad extension names."""
        with pytest.raises(OASModelError):
            PathItem().add_extension('vendor', 1)


class TestUnsupportedModelError:
    """Tests for UnsupportedModelError."""

    def test_type_name_in_message(self):
        """Test that classes are reported by name."""
        error = UnsupportedModelError(dict)
        assert error.model is dict
        assert str(error) == 'Unsupported model type: dict'

    def test_non_type_in_message(self):
        """Test that other objects are reported by repr."""
        error = UnsupportedModelError('PathItem')
        assert str(error) == "Unsupported model type: 'PathItem'"
        assert isinstance(error, TypeError)


class TestReservedKeyError:
    """Tests for ReservedKeyError."""

    def test_attributes(self):
        """Test the stored key and message."""
        error = ReservedKeyError('x-expr')
        assert error.key == 'x-expr'
        assert "'x-expr'" in str(error)
        assert isinstance(error, OASModelError)
        assert isinstance(error, ValueError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_basic(self):
        """Test the plain message."""
        error = ConfigurationError('Invalid settings')
        assert str(error) == 'Invalid settings'
        assert error.config_path is None
        assert error.field is None

    def test_with_path_and_field(self):
        """Test the message with path and field."""
        error = ConfigurationError(
            'Invalid settings', config_path='oasmodel.yaml', field='servers'
        )
        assert error.config_path == 'oasmodel.yaml'
        assert error.field == 'servers'
        assert str(error) == "Invalid settings in 'oasmodel.yaml' (field: servers)"
