"""
Unit tests for the helpers class.
"""

import pytest

from r4gen.codegen import GeneratorService
from r4gen.codegen.naming import group_by_area
from r4gen.codegen.types import ControllerDefinition
from r4gen.utils.constants import Modifier
from r4gen.utils.exceptions import DuplicateMemberError


class TestHelperClass:
    """Test the static helpers entry-point class."""

    def test_identifier_and_namespace(self, service):
        helper = service.create_helper_class({})

        assert helper.identifier == "MVC"
        assert helper.namespace == ""
        assert helper.has_modifiers(Modifier.PUBLIC, Modifier.STATIC, Modifier.PARTIAL)
        assert helper.members == ()

    def test_custom_prefix(self, custom_settings):
        helper = GeneratorService(custom_settings).create_helper_class({})
        assert helper.identifier == "Links"

    def test_members(self, service):
        controllers = [
            ControllerDefinition(name="Home", namespace="Shop.Controllers"),
            ControllerDefinition(name="Users", area="Admin", namespace="Shop.Admin"),
            ControllerDefinition(name="Account", namespace="Shop.Controllers"),
            ControllerDefinition(name="Reports", area="Billing"),
        ]
        helper = service.create_helper_class(group_by_area(controllers))

        assert [(f.name, str(f.type)) for f in helper.fields] == [
            ("Admin", "R4Mvc.AdminAreaClass"),
            ("Billing", "R4Mvc.BillingAreaClass"),
            ("Account", "Shop.Controllers.AccountController"),
            ("Home", "Shop.Controllers.HomeController"),
        ]
        assert all(Modifier.STATIC in f.modifiers for f in helper.fields)

    def test_root_controller_named_like_area(self, service):
        controllers = [
            ControllerDefinition(name="Admin"),
            ControllerDefinition(name="Users", area="Admin"),
        ]
        with pytest.raises(DuplicateMemberError) as exc_info:
            service.create_helper_class(group_by_area(controllers))

        assert exc_info.value.member == "Admin"
        assert exc_info.value.identifier == "MVC"
        assert "namespace=<global>" in str(exc_info.value)

    def test_generate_rejects_clashing_helper_fields(self, service):
        controllers = [
            ControllerDefinition(name="Admin", namespace="Shop.Controllers"),
            ControllerDefinition(name="Users", area="Admin"),
        ]
        with pytest.raises(DuplicateMemberError):
            service.generate(controllers)

    def test_field_names_are_unique(self, service, application_controllers):
        helper = service.create_helper_class(group_by_area(application_controllers))
        names = [f.name for f in helper.fields]
        assert len(names) == len(set(names))
