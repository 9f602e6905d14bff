"""Pydantic models for BAM REST API v1 responses.

Every model is a flat decode target for one response body. Fields are copied
verbatim from the JSON; a field that is absent or ``null`` takes the zero value
of its type (``0``, ``""`` or ``False``), and unknown fields are ignored.
Values are not coerced: ``"5"`` where an integer is expected is an error.

Properties strings (``"CIDR=10.0.0.0/24|allowDuplicateHost=disable|"``) are
kept as opaque text. Their grammar is defined by the server and differs per
object type.

Usage:
    entity = APIEntity.model_validate(response.json())
    entity.id, entity.name, entity.type, entity.properties
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class BAMModel(BaseModel):
    """Common configuration for BAM API v1 value objects."""

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "frozen": True,
        "strict": True,
    }

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat JSON ``null`` like an absent field so the default applies."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class APIEntity(BAMModel):
    """Generic object (network, address, zone, record, configuration, ...).

    Attributes:
        id: BAM object ID
        name: Object name
        type: Object type tag (e.g., "IP4Network", "HostRecord")
        properties: Delimited name=value properties string
    """

    id: int = 0
    name: str = ""
    type: str = ""
    properties: str = ""


class APIAccessRight(BAMModel):
    """Access right granted to a user on an entity."""

    entity_id: int = Field(0, alias="entityId")
    user_id: int = Field(0, alias="userId")
    value: str = ""
    overrides: str = ""
    properties: str = ""


class APIData(BAMModel):
    """Named payload returned by probe endpoints."""

    name: str = ""
    properties: str = ""


class APIDeploymentOption(BAMModel):
    """DHCP client/service or DNS option attached to an entity."""

    id: int = 0
    type: str = ""
    name: str = ""
    value: str = ""
    properties: str = ""


class APIDeploymentRole(BAMModel):
    """DNS or DHCP role binding an entity to a server interface."""

    id: int = 0
    type: str = ""
    service: str = ""
    entity_id: int = Field(0, alias="entityId")
    server_interface_id: int = Field(0, alias="serverInterfaceId")
    properties: str = ""


class APIUserDefinedField(BAMModel):
    """Definition of a user-defined field for one object type."""

    name: str = ""
    display_name: str = Field("", alias="displayName")
    type: str = ""
    default_value: str = Field("", alias="defaultValue")
    validator_properties: str = Field("", alias="validatorProperties")
    properties: str = ""
    predefined_values: str = Field("", alias="predefinedValues")
    required: bool = False
    hide_from_search: bool = Field(False, alias="hideFromSearch")


class ResponsePolicySearchResult(BAMModel):
    """Response policy item found in a local policy or the security feed."""

    name: str = ""
    policy_type: str = Field("", alias="policyType")
    parent_ids: str = Field("", alias="parentIds")
    category: str = ""
    config_id: int = Field(0, alias="configId")
