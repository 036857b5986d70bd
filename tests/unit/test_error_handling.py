"""
Unit tests for the exception hierarchy.
"""

import pytest

from r4gen.utils.exceptions import (
    ConfigurationError,
    DuplicateClassError,
    DuplicateMemberError,
    InvalidMetadataError,
    R4GenError,
    TemplateRenderError,
)


class TestR4GenExceptions:
    """Test cases for custom exception classes."""

    def test_base_error(self):
        error = R4GenError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_base_error_with_details(self):
        error = R4GenError("Test error", {"key1": "value1", "key2": 42})
        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_invalid_metadata_is_value_error(self):
        error = InvalidMetadataError("No name", field="name", area="Admin")
        assert isinstance(error, ValueError)
        assert isinstance(error, R4GenError)
        assert error.details == {"field": "name", "area": "Admin"}

    def test_invalid_metadata_omits_empty_details(self):
        assert str(InvalidMetadataError("No name")) == "No name"

    def test_configuration_error(self):
        error = ConfigurationError("Bad value", setting="indent_size", source="r4mvc.json")
        assert error.setting == "indent_size"
        assert str(error) == "Bad value (setting=indent_size, source=r4mvc.json)"

    def test_duplicate_class_error_global_namespace(self):
        error = DuplicateClassError("MVC", "")
        assert "'MVC'" in str(error)
        assert "namespace=<global>" in str(error)

    def test_duplicate_member_error(self):
        error = DuplicateMemberError("Admin", "MVC", "")
        assert error.member == "Admin"
        assert error.identifier == "MVC"
        assert str(error) == "Duplicate member 'Admin' in generated class 'MVC' (namespace=<global>)"

    def test_invalid_metadata_source(self):
        error = InvalidMetadataError("Unreadable", source="controllers.json")
        assert error.source == "controllers.json"
        assert str(error) == "Unreadable (source=controllers.json)"

    def test_template_render_error(self):
        error = TemplateRenderError("Boom", "class.j2")
        assert error.template_name == "class.j2"
        assert "template=class.j2" in str(error)

    @pytest.mark.parametrize("error_class", [
        InvalidMetadataError, ConfigurationError, TemplateRenderError,
    ])
    def test_catchable_as_base(self, error_class):
        with pytest.raises(R4GenError):
            raise error_class("failure")
