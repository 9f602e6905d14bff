"""Unit tests for BAM response models."""

import pytest
from pydantic import ValidationError

from src.bluecat.bam.response_models import (
    APIAccessRight,
    APIData,
    APIDeploymentOption,
    APIDeploymentRole,
    APIEntity,
    APIUserDefinedField,
    ResponsePolicySearchResult,
)


class TestZeroValues:
    """Test defaults for absent fields."""

    @pytest.mark.parametrize(
        "model",
        [
            APIEntity,
            APIAccessRight,
            APIData,
            APIDeploymentOption,
            APIDeploymentRole,
            APIUserDefinedField,
            ResponsePolicySearchResult,
        ],
    )
    def test_empty_object(self, model):
        """Test that an empty JSON object decodes."""
        record = model.model_validate({})

        assert record == model()

    def test_entity_defaults(self):
        """Test entity zero values."""
        entity = APIEntity()

        assert entity.id == 0
        assert entity.name == ""
        assert entity.type == ""
        assert entity.properties == ""

    def test_nulls_become_defaults(self):
        """Test JSON null handling."""
        field = APIUserDefinedField.model_validate(
            {"name": "owner", "required": None, "defaultValue": None}
        )

        assert field.required is False
        assert field.default_value == ""


class TestAliases:
    """Test camelCase JSON names."""

    def test_deployment_role(self):
        """Test deployment role aliases."""
        role = APIDeploymentRole.model_validate(
            {"id": 1, "entityId": 2, "serverInterfaceId": 3, "service": "DHCP"}
        )

        assert role.entity_id == 2
        assert role.server_interface_id == 3

    def test_populate_by_field_name(self):
        """Test construction by Python names."""
        right = APIAccessRight(entity_id=1, user_id=2)

        assert right.model_dump(by_alias=True)["entityId"] == 1

    def test_user_defined_field(self):
        """Test all UDF aliases."""
        field = APIUserDefinedField.model_validate(
            {
                "name": "owner",
                "displayName": "Owner",
                "type": "TEXT",
                "defaultValue": "ops",
                "validatorProperties": "maxLength=20",
                "predefinedValues": "ops|dev",
                "required": True,
                "hideFromSearch": True,
            }
        )

        assert field.display_name == "Owner"
        assert field.default_value == "ops"
        assert field.validator_properties == "maxLength=20"
        assert field.predefined_values == "ops|dev"
        assert field.hide_from_search is True


class TestModelBehaviour:
    """Test extra fields, immutability and type errors."""

    def test_extra_fields_ignored(self):
        """Test unknown fields are dropped."""
        entity = APIEntity.model_validate({"id": 1, "unknown": "x"})

        assert not hasattr(entity, "unknown")

    def test_frozen(self):
        """Test records are immutable."""
        entity = APIEntity(id=1)

        with pytest.raises(ValidationError):
            entity.id = 2

    def test_wrong_type(self):
        """Test type mismatch raises."""
        with pytest.raises(ValidationError):
            APIEntity.model_validate({"id": "abc"})

    @pytest.mark.parametrize(
        "model, data",
        [
            (APIEntity, {"id": "5", "name": "n"}),
            (APIEntity, {"id": 5, "name": 7}),
            (APIUserDefinedField, {"required": "true"}),
            (APIDeploymentRole, {"entityId": "2"}),
        ],
    )
    def test_no_coercion(self, model, data):
        """Test numeric strings and other near-miss types are rejected."""
        with pytest.raises(ValidationError):
            model.model_validate(data)
