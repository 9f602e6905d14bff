"""BlueCat Address Manager (BAM) REST API v1 Client.

Handles authentication, request execution, response decoding and the typed
API methods.

Architecture Overview:
---------------------
This client wraps the legacy BlueCat Address Manager REST API v1, providing:
- Synchronous HTTP communication via httpx
- One request per call: no retries, pagination loops or caching
- Typed results decoded with pydantic
- Errors tagged with the API method that failed

Authentication:
--------------
BAM API v1 uses a token embedded in a plain-text login response:
1. GET /Services/REST/v1/login?username=...&password=...
2. Extract "BAMAuthToken: <token>" from the response text
3. Send it verbatim as the Authorization header for subsequent requests

Request Format:
--------------
Every API method is its own endpoint and takes all arguments in the query
string, whatever the HTTP verb. No request body is ever sent:
- GET  /Services/REST/v1/getEntityById?id=5
- POST /Services/REST/v1/addGenericRecord?absoluteName=...&rdata=...
- POST /Services/REST/v1/linkEntities?entity1Id=...&entity2Id=...

Response Format:
---------------
- JSON objects or arrays, decoded into the models in response_models
- Bare scalars (object IDs, addresses, status strings), sometimes wrapped in
  double quotes, sometimes not. decode_scalar() strips one pair of quotes
- Mutation methods may answer HTTP 200 with an error sentence containing
  "Invalid"; these become BAMRemoteError
"""

from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import BAMConfig
from ..observability.logger import LogContext
from ..utils.exceptions import (
    BAMAPIError,
    BAMAuthenticationError,
    BAMDecodeError,
    BAMRemoteError,
    BAMTransportError,
)
from .endpoints import BAMEndpoints
from .options import OptionsArg, encode_options, join_values
from .response_models import (
    APIAccessRight,
    APIData,
    APIDeploymentOption,
    APIDeploymentRole,
    APIEntity,
    APIUserDefinedField,
    ResponsePolicySearchResult,
)
from .session import BAMSession, extract_token

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Server-side default page size for count parameters
DEFAULT_COUNT = 10

# Marker BAM places in the body of a failed mutation answered with HTTP 200
REMOTE_ERROR_MARKER = "Invalid"

# Longest response excerpt copied into an exception message
MAX_ERROR_TEXT = 200


def decode_scalar(text: str) -> str:
    """
    Decode a scalar response body.

    Strips exactly one leading and one trailing double quote when present.
    Bodies without quotes pass through unchanged.

    Args:
        text: Raw response text

    Returns:
        The scalar value as a string
    """
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def _truncate(text: str) -> str:
    if len(text) > MAX_ERROR_TEXT:
        return text[: MAX_ERROR_TEXT - 3] + "..."
    return text


class BAMClient:
    """
    BlueCat Address Manager REST API v1 Client.

    Features:
    - Token login and session handle
    - Query-string request builder with URL encoding
    - Structured and scalar response decoding
    - Per-instance TLS verification setting

    The session token is read-only after login, so one client may be shared
    between threads.
    """

    def __init__(
        self,
        config: BAMConfig,
        session: BAMSession | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize BAM client.

        Args:
            config: BAM configuration with connection details
            session: Existing session to reuse instead of logging in
            http_client: Preconfigured httpx.Client (tests, proxies)
        """
        self.config = config
        self.base_url = config.base_url
        self.session = session

        # HTTP client management
        self._client: httpx.Client | None = http_client  # Lazy-loaded

    def __enter__(self) -> "BAMClient":
        """Context manager entry."""
        if self.session is None:
            self.login()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    @property
    def client(self) -> httpx.Client:
        """
        Get HTTP client with lazy initialization.

        Certificate verification is decided here, per client instance. No
        global TLS state is touched.
        """
        if self._client is None:
            kwargs: dict[str, Any] = {"verify": self.config.verify_ssl}
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            if not self.config.verify_ssl:
                logger.warning(
                    "TLS certificate verification disabled", server=self.config.server
                )
            self._client = httpx.Client(**kwargs)
        return self._client

    @property
    def is_authenticated(self) -> bool:
        """True once a session token is held."""
        return self.session is not None and bool(self.session.token)

    # -------------------------------------------------------------------------
    # Session establishment
    # -------------------------------------------------------------------------

    def login(self) -> BAMSession:
        """
        Authenticate with BAM and store a new session.

        Returns:
            The new BAMSession

        Raises:
            BAMAuthenticationError: If the request fails or no token is found.
        """
        url = f"{self.base_url}/{BAMEndpoints.LOGIN}"
        logger.info("Authenticating with BAM", url=url, username=self.config.username)

        try:
            response = self.client.get(
                url,
                params={"username": self.config.username, "password": self.config.password},
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error("Authentication connection error", error=str(e))
            raise BAMAuthenticationError(
                f"Connection error during authentication: {e}", original_error=e
            ) from e

        if response.is_error:
            logger.error("Authentication failed", status=response.status_code)
            raise BAMAuthenticationError(
                f"Login rejected with HTTP {response.status_code}: {_truncate(response.text)}",
                status_code=response.status_code,
            )

        token = extract_token(response.text)
        if token is None:
            logger.error("Authentication token not found in login response")
            raise BAMAuthenticationError(
                f"No session token in login response: {_truncate(response.text)}"
            )

        self.session = BAMSession(
            server=self.config.server, token=token, uri=self.config.api_path
        )
        logger.info("Authentication successful", server=self.config.server)
        return self.session

    def _require_session(self, operation: str) -> BAMSession:
        """Return the current session, logging in first if there is none.

        A failed lazy login is reported against ``operation``.
        """
        if self.session is not None:
            return self.session
        try:
            return self.login()
        except BAMAuthenticationError as e:
            raise BAMAuthenticationError(
                e.message,
                operation=operation,
                status_code=e.status_code,
                original_error=e,
            ) from e

    # -------------------------------------------------------------------------
    # Request execution
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Make an authenticated request to BAM API.

        Args:
            method: HTTP method (GET or POST)
            endpoint: API method name, also used as the operation name in errors
            params: Query parameters in wire order. None values are dropped

        Returns:
            The successful httpx.Response

        Raises:
            BAMTransportError: For network, TLS and timeout failures
            BAMAuthenticationError: For 401 Unauthorized
            BAMAPIError: For any other error status
        """
        session = self._require_session(endpoint)

        url = f"{session.base_url}/{endpoint}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        headers = {
            "Content-Type": "application/json",
            "Authorization": session.token,
        }

        with LogContext(operation=endpoint):
            logger.debug("Sending BAM request", method=method, endpoint=endpoint)
            try:
                response = self.client.request(method, url, params=query, headers=headers)
            except httpx.HTTPError as e:
                logger.error("BAM request failed", error=str(e))
                raise BAMTransportError(
                    f"HTTP request failed: {e}", operation=endpoint, original_error=e
                ) from e

            if response.status_code == 401:
                logger.error("BAM rejected session token", status=response.status_code)
                raise BAMAuthenticationError(
                    f"Unauthorized: {_truncate(response.text)}",
                    operation=endpoint,
                    status_code=401,
                )
            if response.is_error:
                logger.error("BAM returned error status", status=response.status_code)
                raise BAMAPIError(
                    f"API Error {response.status_code}: {_truncate(response.text)}",
                    operation=endpoint,
                    status_code=response.status_code,
                )

            logger.debug("BAM request complete", status=response.status_code)
            return response

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Helper for GET requests."""
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Helper for POST requests."""
        return self.request("POST", endpoint, params=params)

    # -------------------------------------------------------------------------
    # Response decoding
    # -------------------------------------------------------------------------

    def _load_json(self, operation: str, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise BAMDecodeError(
                f"Response is not valid JSON: {e}", operation=operation, original_error=e
            ) from e

    def _decode_model(
        self, operation: str, response: httpx.Response, model: type[ModelT]
    ) -> ModelT:
        """Decode a JSON object into ``model``. JSON null gives an empty record."""
        data = self._load_json(operation, response)
        if data is None:
            return model()
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise BAMDecodeError(
                f"Unexpected {model.__name__} response: {e}",
                operation=operation,
                original_error=e,
            ) from e

    def _decode_list(
        self, operation: str, response: httpx.Response, model: type[ModelT]
    ) -> list[ModelT]:
        """Decode a JSON array into a list of ``model``. JSON null gives []."""
        data = self._load_json(operation, response)
        if data is None:
            return []
        try:
            return TypeAdapter(list[model]).validate_python(data)
        except ValidationError as e:
            raise BAMDecodeError(
                f"Unexpected {model.__name__} list response: {e}",
                operation=operation,
                original_error=e,
            ) from e

    def _check_remote_error(self, operation: str, response: httpx.Response) -> str:
        """Return the body text, raising if BAM reported a failure inside it."""
        text = response.text
        if REMOTE_ERROR_MARKER in text:
            logger.error("BAM reported an error in the response body", operation=operation)
            raise BAMRemoteError(decode_scalar(text.strip()), operation=operation)
        return text

    def _fetch(
        self, endpoint: str, params: dict[str, Any], model: type[ModelT]
    ) -> ModelT:
        return self._decode_model(endpoint, self.get(endpoint, params), model)

    def _fetch_list(
        self, endpoint: str, params: dict[str, Any], model: type[ModelT]
    ) -> list[ModelT]:
        return self._decode_list(endpoint, self.get(endpoint, params), model)

    def _fetch_scalar(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        return decode_scalar(self.get(endpoint, params).text)

    def _mutate(self, endpoint: str, params: dict[str, Any]) -> str:
        response = self.post(endpoint, params)
        return decode_scalar(self._check_remote_error(endpoint, response))

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    def get_entity_by_id(self, entity_id: int) -> APIEntity:
        """
        Get an object by its database ID, with its properties populated.

        Args:
            entity_id: Object ID of the target object

        Returns:
            The entity. An unknown ID yields an entity with id 0.
        """
        return self._fetch(BAMEndpoints.GET_ENTITY_BY_ID, {"id": entity_id}, APIEntity)

    def get_entity_by_name(self, name: str, parent_id: int, object_type: str) -> APIEntity:
        """Get a child of ``parent_id`` by exact name and object type."""
        return self._fetch(
            BAMEndpoints.GET_ENTITY_BY_NAME,
            {"name": name, "parentId": parent_id, "type": object_type},
            APIEntity,
        )

    def get_entity_by_cidr(self, cidr: str, parent_id: int, object_type: str) -> APIEntity:
        """Get an IPv4 block or network by CIDR notation (e.g. ``10.0.0.0/24``)."""
        return self._fetch(
            BAMEndpoints.GET_ENTITY_BY_CIDR,
            {"cidr": cidr, "parentId": parent_id, "type": object_type},
            APIEntity,
        )

    def get_entity_by_prefix(self, container_id: int, prefix: str, object_type: str) -> APIEntity:
        """Get an IPv6 block or network by prefix. Empty entity when absent."""
        return self._fetch(
            BAMEndpoints.GET_ENTITY_BY_PREFIX,
            {"containerId": container_id, "prefix": prefix, "type": object_type},
            APIEntity,
        )

    def get_entity_by_range(
        self, address1: str, address2: str, parent_id: int, object_type: str
    ) -> APIEntity:
        """
        Get a DHCP range by its first and last address.

        Args:
            address1: Lowest address of the range
            address2: Highest address of the range
            parent_id: Object ID of the range's parent network
            object_type: Range type, e.g. "DHCP4Range"
        """
        return self._fetch(
            BAMEndpoints.GET_ENTITY_BY_RANGE,
            {
                "address1": address1,
                "address2": address2,
                "parentId": parent_id,
                "type": object_type,
            },
            APIEntity,
        )

    def get_entities(
        self,
        parent_id: int,
        object_type: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Get one page of children of ``parent_id``.

        Args:
            parent_id: Object ID of the parent
            object_type: Child object type (e.g. "IP4Network")
            count: Maximum number of children to return
            start: Index of the first child to return (0-based)

        Returns:
            List of entities, empty if there are none
        """
        return self._fetch_list(
            BAMEndpoints.GET_ENTITIES,
            {"parentId": parent_id, "type": object_type, "count": count, "start": start},
            APIEntity,
        )

    def get_entities_by_name(
        self,
        name: str,
        parent_id: int,
        object_type: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """Get entities matching a name, parent and object type."""
        return self._fetch_list(
            BAMEndpoints.GET_ENTITIES_BY_NAME,
            {
                "name": name,
                "parentId": parent_id,
                "type": object_type,
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def get_entities_by_name_using_options(
        self,
        name: str,
        options: OptionsArg,
        parent_id: int,
        object_type: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Get entities by name with search options.

        The only server option is ``ignoreCase``::

            client.get_entities_by_name_using_options(
                "Web01", {"ignoreCase": True}, parent_id=10, object_type="HostRecord"
            )
        """
        return self._fetch_list(
            BAMEndpoints.GET_ENTITIES_BY_NAME_USING_OPTIONS,
            {
                "name": name,
                "options": encode_options(options),
                "parentId": parent_id,
                "type": object_type,
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def get_parent(self, entity_id: int) -> APIEntity:
        """Get the parent of an entity."""
        return self._fetch(BAMEndpoints.GET_PARENT, {"entityId": entity_id}, APIEntity)

    def get_linked_entities(
        self,
        entity_id: int,
        linked_type: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Get entities linked to ``entity_id``.

        Use ``RecordWithLink`` as ``linked_type`` to find CNAME, MX and SRV
        records pointing at a resource record. For a MAC address the linked
        IPv4 addresses are returned, with lease times in their properties.
        """
        return self._fetch_list(
            BAMEndpoints.GET_LINKED_ENTITIES,
            {"entityId": entity_id, "type": linked_type, "count": count, "start": start},
            APIEntity,
        )

    def link_entities(
        self, entity1_id: int, entity2_id: int, properties: OptionsArg = None
    ) -> None:
        """
        Link two entities.

        Raises:
            BAMRemoteError: If BAM rejects the link in the response body
        """
        self._mutate(
            BAMEndpoints.LINK_ENTITIES,
            {
                "entity1Id": entity1_id,
                "entity2Id": entity2_id,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def custom_search(
        self,
        filters: OptionsArg,
        object_type: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Search one object type by field values.

        Args:
            filters: Field filters, e.g. ``{"state": "DHCP_RESERVED"}``
            object_type: Object type to search
            count: Maximum number of results
            start: Index of the first result
        """
        return self._fetch_list(
            BAMEndpoints.CUSTOM_SEARCH,
            {
                "filters": encode_options(filters),
                "type": object_type,
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def search_by_category(
        self,
        keyword: str,
        category: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """Search a category of objects (e.g. "ADDRESSES", "ALL") by keyword."""
        return self._fetch_list(
            BAMEndpoints.SEARCH_BY_CATEGORY,
            {"keyword": keyword, "category": category, "count": count, "start": start},
            APIEntity,
        )

    def search_by_object_types(
        self,
        keyword: str,
        object_types: Iterable[str] | str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Search objects of the given types by keyword.

        Args:
            keyword: Search string; ``^``, ``$`` and ``*`` wildcards are supported
            object_types: One type or several, sent as ``type1,type2``
            count: Maximum number of results
            start: Index of the first result
        """
        return self._fetch_list(
            BAMEndpoints.SEARCH_BY_OBJECT_TYPES,
            {
                "keyword": keyword,
                "types": join_values(object_types, ","),
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def search_response_policy_item(
        self,
        keyword: str,
        scope: str,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[ResponsePolicySearchResult]:
        """
        Search response policy items in local policies and/or the security feed.

        Args:
            keyword: Search string with ``^``, ``$`` and ``*`` wildcards
            scope: "LOCAL", "FEED" or "ALL"
            count: Number of results (1 to 1000)
            start: Index of the first result (0 to 999)
        """
        return self._fetch_list(
            BAMEndpoints.SEARCH_RESPONSE_POLICY_ITEM,
            {"keyword": keyword, "scope": scope, "count": count, "start": start},
            ResponsePolicySearchResult,
        )

    def find_response_policies_with_item(
        self, configuration_id: int, item_name: str
    ) -> list[APIEntity]:
        """Find the response policies in a configuration that contain an item."""
        return self._fetch_list(
            BAMEndpoints.FIND_RESPONSE_POLICIES_WITH_ITEM,
            {"configurationId": configuration_id, "itemName": item_name},
            APIEntity,
        )

    # -------------------------------------------------------------------------
    # Access rights
    # -------------------------------------------------------------------------

    def get_access_right(self, entity_id: int, user_id: int) -> APIAccessRight:
        """Get the access right a user holds on an entity."""
        return self._fetch(
            BAMEndpoints.GET_ACCESS_RIGHT,
            {"entityId": entity_id, "userId": user_id},
            APIAccessRight,
        )

    def get_access_rights_for_entity(
        self, entity_id: int, count: int = DEFAULT_COUNT, start: int = 0
    ) -> list[APIAccessRight]:
        """Get the access rights granted on an entity."""
        return self._fetch_list(
            BAMEndpoints.GET_ACCESS_RIGHTS_FOR_ENTITY,
            {"entityId": entity_id, "count": count, "start": start},
            APIAccessRight,
        )

    def get_access_rights_for_user(
        self, user_id: int, count: int = DEFAULT_COUNT, start: int = 0
    ) -> list[APIAccessRight]:
        """Get the access rights granted to a user."""
        return self._fetch_list(
            BAMEndpoints.GET_ACCESS_RIGHTS_FOR_USER,
            {"userId": user_id, "count": count, "start": start},
            APIAccessRight,
        )

    def add_access_right(
        self,
        entity_id: int,
        user_id: int,
        value: str,
        overrides: OptionsArg = None,
        properties: OptionsArg = None,
    ) -> str:
        """
        Grant a user an access right on an entity.

        Args:
            entity_id: Object ID of the entity (0 for the system level)
            user_id: Object ID of the user
            value: HIDE, VIEW, ADD, CHANGE or FULL
            overrides: Per-type overrides, e.g. ``{"HostRecord": "FULL"}``
            properties: Extra properties such as ``workflowLevel``

        Returns:
            Object ID of the new access right
        """
        return self._mutate(
            BAMEndpoints.ADD_ACCESS_RIGHT,
            {
                "entityId": entity_id,
                "userId": user_id,
                "value": value,
                "overrides": encode_options(overrides),
                "properties": encode_options(properties),
            },
        )

    def add_acl(self, configuration_id: int, name: str, properties: OptionsArg = None) -> str:
        """Add a DNS ACL to a configuration. Returns its object ID."""
        return self._mutate(
            BAMEndpoints.ADD_ACL,
            {
                "configurationId": configuration_id,
                "name": name,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # Configurations
    # -------------------------------------------------------------------------

    def get_configuration_groups(self) -> str:
        """Get the configuration group names as a delimited string."""
        return self._fetch_scalar(BAMEndpoints.GET_CONFIGURATION_GROUPS)

    def get_configuration_setting(self, configuration_id: int, setting_name: str) -> str:
        """Get one configuration-level setting."""
        return self._fetch_scalar(
            BAMEndpoints.GET_CONFIGURATION_SETTING,
            {"configurationId": configuration_id, "settingName": setting_name},
        )

    def get_configurations_by_group(self, group_name: str) -> list[APIEntity]:
        """Get the configurations in a configuration group."""
        return self._fetch_list(
            BAMEndpoints.GET_CONFIGURATIONS_BY_GROUP, {"groupName": group_name}, APIEntity
        )

    # -------------------------------------------------------------------------
    # IPv4 / IPv6 address space
    # -------------------------------------------------------------------------

    def get_ip4_address(self, address: str, container_id: int) -> APIEntity:
        """Get an IPv4 address object inside a configuration, block or network."""
        return self._fetch(
            BAMEndpoints.GET_IP4_ADDRESS,
            {"address": address, "containerId": container_id},
            APIEntity,
        )

    def get_ip6_address(self, address: str, container_id: int) -> APIEntity:
        """Get an IPv6 address object inside a configuration, block or network."""
        return self._fetch(
            BAMEndpoints.GET_IP6_ADDRESS,
            {"address": address, "containerId": container_id},
            APIEntity,
        )

    def get_ip4_networks_by_hint(
        self,
        container_id: int,
        options: OptionsArg = None,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """
        Get IPv4 networks under a container, filtered by hint.

        Args:
            container_id: Any object in the parent hierarchy, up to the configuration
            options: ``hint``, ``accessRight`` and ``overrideType``, e.g.
                ``{"hint": "192.168", "accessRight": "ADD"}``
            count: Maximum number of networks (server cap is 10)
            start: Index of the first network

        Returns:
            Networks without their properties populated
        """
        return self._fetch_list(
            BAMEndpoints.GET_IP4_NETWORKS_BY_HINT,
            {
                "containerId": container_id,
                "options": encode_options(options),
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def get_ip6_objects_by_hint(
        self,
        container_id: int,
        object_type: str,
        options: OptionsArg = None,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """Get IPv6 blocks or networks under a container, filtered by hint."""
        return self._fetch_list(
            BAMEndpoints.GET_IP6_OBJECTS_BY_HINT,
            {
                "containerId": container_id,
                "objectType": object_type,
                "options": encode_options(options),
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def get_ip_range_by_ip(self, address: str, container_id: int, object_type: str) -> APIEntity:
        """Get the block, network or DHCP range of ``object_type`` holding ``address``."""
        return self._fetch(
            BAMEndpoints.GET_IP_RANGE_BY_IP,
            {"address": address, "containerId": container_id, "type": object_type},
            APIEntity,
        )

    def get_mac_address(self, configuration_id: int, mac_address: str) -> APIEntity:
        """Get a MAC address object (nnnnnnnnnnnn, nn-nn-.. or nn:nn:.. notation)."""
        return self._fetch(
            BAMEndpoints.GET_MAC_ADDRESS,
            {"configurationId": configuration_id, "macAddress": mac_address},
            APIEntity,
        )

    def get_max_allowed_range(self, range_id: int) -> str:
        """Get the largest start/end addresses a DHCP range may be resized to."""
        return self._fetch_scalar(BAMEndpoints.GET_MAX_ALLOWED_RANGE, {"rangeId": range_id})

    def get_network_linked_properties(self, network_id: int) -> list[APIEntity]:
        """Get the IP addresses linked to a network, with their properties."""
        return self._fetch_list(
            BAMEndpoints.GET_NETWORK_LINKED_PROPERTIES, {"networkId": network_id}, APIEntity
        )

    def get_next_available_ip4_address(self, parent_id: int) -> str:
        """Get the next unused IPv4 address in a network."""
        return self._fetch_scalar(
            BAMEndpoints.GET_NEXT_AVAILABLE_IP4_ADDRESS, {"parentId": parent_id}
        )

    def get_next_available_ip4_network(
        self, auto_create: bool, is_larger_allowed: bool, parent_id: int, size: int
    ) -> str:
        """
        Get the object ID of the next unused network in a block or configuration.

        Args:
            auto_create: Create the network if it does not exist yet
            is_larger_allowed: Accept a network larger than ``size``
            parent_id: Object ID of the parent block or configuration
            size: Number of addresses, a power of 2 (256 for a /24)

        Returns:
            Object ID of the existing or newly created network
        """
        return self._fetch_scalar(
            BAMEndpoints.GET_NEXT_AVAILABLE_IP4_NETWORK,
            {
                "autoCreate": auto_create,
                "isLargerAllowed": is_larger_allowed,
                "parentId": parent_id,
                "size": size,
            },
        )

    def get_next_available_ip_range(
        self, parent_id: int, properties: OptionsArg, size: int, object_type: str
    ) -> APIEntity:
        """
        Find (or create) the next free block or network of ``size`` addresses.

        Args:
            parent_id: Object ID of the parent configuration or block
            properties: ``reuseExisting``, ``isLargerAllowed``, ``autoCreate`` and
                ``traversalMethod`` (NO_TRAVERSAL, DEPTH_FIRST, BREADTH_FIRST)
            size: Size of the range, a power of 2
            object_type: "IP4Block" or "IP4Network"
        """
        return self._fetch(
            BAMEndpoints.GET_NEXT_AVAILABLE_IP_RANGE,
            {
                "parentId": parent_id,
                "properties": encode_options(properties),
                "size": size,
                "type": object_type,
            },
            APIEntity,
        )

    def get_next_available_ip_ranges(
        self,
        parent_id: int,
        properties: OptionsArg,
        size: int,
        object_type: str,
        count: int,
    ) -> list[APIEntity]:
        """Find (or create) ``count`` consecutive free ranges of ``size`` addresses."""
        return self._fetch_list(
            BAMEndpoints.GET_NEXT_AVAILABLE_IP_RANGES,
            {
                "parentId": parent_id,
                "properties": encode_options(properties),
                "size": size,
                "type": object_type,
                "count": count,
            },
            APIEntity,
        )

    def get_next_ip4_address(self, parent_id: int, properties: OptionsArg = None) -> str:
        """
        Get the next available IPv4 address in dotted notation.

        ``properties`` accepts ``skip`` (ranges/addresses to skip), ``offset``
        and ``excludeDHCPRange``::

            {"skip": "10.10.10.128-10.10.11.200,10.10.11.210", "excludeDHCPRange": True}
        """
        return self._fetch_scalar(
            BAMEndpoints.GET_NEXT_IP4_ADDRESS,
            {"parentId": parent_id, "properties": encode_options(properties)},
        )

    def get_shared_networks(self, tag_id: int) -> list[APIEntity]:
        """Get the IPv4 networks sharing a shared-network tag."""
        return self._fetch_list(BAMEndpoints.GET_SHARED_NETWORKS, {"tagId": tag_id}, APIEntity)

    def is_address_allocated(
        self, configuration_id: int, ip_address: str, mac_address: str
    ) -> str:
        """Check whether a DHCP address is allocated to a MAC. Returns "true"/"false"."""
        return self._fetch_scalar(
            BAMEndpoints.IS_ADDRESS_ALLOCATED,
            {
                "configurationId": configuration_id,
                "ipAddress": ip_address,
                "macAddress": mac_address,
            },
        )

    # -------------------------------------------------------------------------
    # DHCP ranges and classes
    # -------------------------------------------------------------------------

    def add_dhcp4_range(
        self, network_id: int, start: str, end: str, properties: OptionsArg = None
    ) -> str:
        """Add an IPv4 DHCP range by first and last address. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP4_RANGE,
            {
                "networkId": network_id,
                "start": start,
                "end": end,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp4_range_by_size(
        self, network_id: int, offset: int, size: int, properties: OptionsArg = None
    ) -> str:
        """Add an IPv4 DHCP range of ``size`` addresses starting at ``offset``."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP4_RANGE_BY_SIZE,
            {
                "networkId": network_id,
                "offset": offset,
                "size": size,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp6_range(
        self, network_id: int, start: str, end: str, properties: OptionsArg = None
    ) -> str:
        """Add an IPv6 DHCP range by first and last address. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP6_RANGE,
            {
                "networkId": network_id,
                "start": start,
                "end": end,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp6_range_by_size(
        self, network_id: int, start: str, size: int, properties: OptionsArg = None
    ) -> str:
        """Add an IPv6 DHCP range of ``size`` addresses from ``start``."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP6_RANGE_BY_SIZE,
            {
                "networkId": network_id,
                "start": start,
                "size": size,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp_sub_class(
        self, match_class_id: int, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCP sub-class to a match class."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP_SUB_CLASS,
            {
                "matchClassId": match_class_id,
                "value": value,
                "properties": encode_options(properties),
            },
        )

    def add_custom_option_definition(
        self,
        configuration_id: int,
        name: str,
        option_id: int,
        option_type: str,
        allow_multiple: bool = False,
        properties: OptionsArg = None,
    ) -> str:
        """Define a custom DHCPv4 option in a configuration."""
        return self._mutate(
            BAMEndpoints.ADD_CUSTOM_OPTION_DEFINITION,
            {
                "configurationId": configuration_id,
                "name": name,
                "optionId": option_id,
                "optionType": option_type,
                "allowMultiple": allow_multiple,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # DNS
    # -------------------------------------------------------------------------

    def get_aliases_by_hint(
        self, options: OptionsArg = None, count: int = DEFAULT_COUNT, start: int = 0
    ) -> list[APIEntity]:
        """
        Get alias (CNAME) records with their linked record name.

        Args:
            options: ``hint`` and ``retrieveFields``, e.g.
                ``{"hint": "^abc", "retrieveFields": False}``
            count: Maximum number of records (server cap is 10)
            start: Index of the first record
        """
        return self._fetch_list(
            BAMEndpoints.GET_ALIASES_BY_HINT,
            {"options": encode_options(options), "count": count, "start": start},
            APIEntity,
        )

    def get_host_records_by_hint(
        self, options: OptionsArg = None, count: int = DEFAULT_COUNT, start: int = 0
    ) -> list[APIEntity]:
        """Get host records matching a hint. Same options as get_aliases_by_hint."""
        return self._fetch_list(
            BAMEndpoints.GET_HOST_RECORDS_BY_HINT,
            {"options": encode_options(options), "count": count, "start": start},
            APIEntity,
        )

    def get_zones_by_hint(
        self,
        container_id: int,
        options: OptionsArg = None,
        count: int = DEFAULT_COUNT,
        start: int = 0,
    ) -> list[APIEntity]:
        """Get accessible zones under a container, filtered by name prefix hint."""
        return self._fetch_list(
            BAMEndpoints.GET_ZONES_BY_HINT,
            {
                "containerId": container_id,
                "options": encode_options(options),
                "count": count,
                "start": start,
            },
            APIEntity,
        )

    def get_ksk(self, entity_id: int, key_format: str) -> str:
        """
        Get up to two active key-signing keys of a zone.

        Args:
            entity_id: Object ID of the signed zone
            key_format: "TRUST_ANCHOR" or "DS_RECORD"
        """
        return self._fetch_scalar(
            BAMEndpoints.GET_KSK, {"entityId": entity_id, "format": key_format}
        )

    def add_generic_record(
        self,
        absolute_name: str,
        properties: OptionsArg,
        rdata: str,
        ttl: int,
        object_type: str,
        view_id: int,
    ) -> str:
        """
        Add a generic resource record (A6, AAAA, CAA, NS, SSHFP, TLSA, ...).

        Args:
            absolute_name: FQDN of the record. Zones with an incremental naming
                policy need a ``#`` where the number goes
            properties: Object properties, comments and user-defined fields
            rdata: Record data in BIND format (e.g. ``10.0.0.4``)
            ttl: Time-to-live; -1 to inherit
            object_type: Generic record type
            view_id: Object ID of the parent view

        Returns:
            Object ID of the new record

        Raises:
            BAMRemoteError: If BAM answers with an "Invalid ..." message
        """
        return self._mutate(
            BAMEndpoints.ADD_GENERIC_RECORD,
            {
                "absoluteName": absolute_name,
                "rdata": rdata,
                "ttl": ttl,
                "type": object_type,
                "viewId": view_id,
                "properties": encode_options(properties),
            },
        )

    def add_alias_record(
        self,
        view_id: int,
        absolute_name: str,
        linked_record_name: str,
        ttl: int = -1,
        properties: OptionsArg = None,
    ) -> str:
        """Add a CNAME record pointing at ``linked_record_name``. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_ALIAS_RECORD,
            {
                "viewId": view_id,
                "absoluteName": absolute_name,
                "linkedRecordName": linked_record_name,
                "ttl": ttl,
                "properties": encode_options(properties),
            },
        )

    def add_bulk_host_record(
        self,
        view_id: int,
        absolute_name: str,
        ttl: int,
        network_id: int,
        start_address: str,
        num_of_addresses: int,
        properties: OptionsArg = None,
    ) -> list[APIEntity]:
        """
        Add host records for consecutive free addresses in a network.

        Returns:
            The created host records
        """
        endpoint = BAMEndpoints.ADD_BULK_HOST_RECORD
        response = self.post(
            endpoint,
            {
                "viewId": view_id,
                "absoluteName": absolute_name,
                "ttl": ttl,
                "network": network_id,
                "startAddr": start_address,
                "numOfAddresses": num_of_addresses,
                "properties": encode_options(properties),
            },
        )
        self._check_remote_error(endpoint, response)
        return self._decode_list(endpoint, response, APIEntity)

    def add_external_host_record(
        self, view_id: int, name: str, properties: OptionsArg = None
    ) -> str:
        """Add an external host record to a view. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_EXTERNAL_HOST_RECORD,
            {"viewId": view_id, "name": name, "properties": encode_options(properties)},
        )

    def add_enum_zone(self, parent_id: int, prefix: str, properties: OptionsArg = None) -> str:
        """Add an ENUM zone under a view or ENUM zone."""
        return self._mutate(
            BAMEndpoints.ADD_ENUM_ZONE,
            {"parentId": parent_id, "prefix": prefix, "properties": encode_options(properties)},
        )

    def add_enum_number(
        self, enum_zone_id: int, number: int, properties: OptionsArg = None
    ) -> str:
        """Add an ENUM number to an ENUM zone."""
        return self._mutate(
            BAMEndpoints.ADD_ENUM_NUMBER,
            {
                "enumZoneId": enum_zone_id,
                "number": number,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # Deployment options
    # -------------------------------------------------------------------------

    def get_deployment_options(
        self,
        entity_id: int,
        option_types: Iterable[str] | str = "",
        server_id: int = -1,
    ) -> list[APIDeploymentOption]:
        """
        Get deployment options of an entity, including inherited ones.

        Args:
            entity_id: Object ID of the entity
            option_types: Option types (e.g. "DNSOption", "DHCPServiceOption"),
                sent pipe-separated. Empty returns every type
            server_id: >0 options for that server, 0 options for all servers,
                <0 every option regardless of server

        Returns:
            Options; an overridden inherited option appears once, as the override
        """
        return self._fetch_list(
            BAMEndpoints.GET_DEPLOYMENT_OPTIONS,
            {
                "entityId": entity_id,
                "optionTypes": join_values(option_types, "|"),
                "serverId": server_id,
            },
            APIDeploymentOption,
        )

    def _get_named_option(
        self, endpoint: str, entity_id: int, name: str, server_id: int
    ) -> APIDeploymentOption:
        return self._fetch(
            endpoint,
            {"entityId": entity_id, "name": name, "serverId": server_id},
            APIDeploymentOption,
        )

    def get_dhcp_client_deployment_option(
        self, entity_id: int, name: str, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DHCPv4 client option (e.g. "router") set on an entity."""
        return self._get_named_option(
            BAMEndpoints.GET_DHCP_CLIENT_DEPLOYMENT_OPTION, entity_id, name, server_id
        )

    def get_dhcp_service_deployment_option(
        self, entity_id: int, name: str, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DHCPv4 service option (e.g. "default-lease-time") set on an entity."""
        return self._get_named_option(
            BAMEndpoints.GET_DHCP_SERVICE_DEPLOYMENT_OPTION, entity_id, name, server_id
        )

    def get_dhcp6_client_deployment_option(
        self, entity_id: int, name: str, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DHCPv6 client option set on an entity."""
        return self._get_named_option(
            BAMEndpoints.GET_DHCP6_CLIENT_DEPLOYMENT_OPTION, entity_id, name, server_id
        )

    def get_dhcp6_service_deployment_option(
        self, entity_id: int, name: str, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DHCPv6 service option set on an entity."""
        return self._get_named_option(
            BAMEndpoints.GET_DHCP6_SERVICE_DEPLOYMENT_OPTION, entity_id, name, server_id
        )

    def get_dns_deployment_option(
        self, entity_id: int, name: str, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DNS option set on an entity."""
        return self._get_named_option(
            BAMEndpoints.GET_DNS_DEPLOYMENT_OPTION, entity_id, name, server_id
        )

    def get_dhcp_vendor_deployment_option(
        self, entity_id: int, option_id: int, server_id: int = 0
    ) -> APIDeploymentOption:
        """Get a DHCP vendor option by its option definition ID."""
        return self._fetch(
            BAMEndpoints.GET_DHCP_VENDOR_DEPLOYMENT_OPTION,
            {"entityId": entity_id, "optionId": option_id, "serverId": server_id},
            APIDeploymentOption,
        )

    def _add_named_option(
        self, endpoint: str, entity_id: int, name: str, value: str, properties: OptionsArg
    ) -> str:
        return self._mutate(
            endpoint,
            {
                "entityId": entity_id,
                "name": name,
                "value": value,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp_client_deployment_option(
        self, entity_id: int, name: str, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCPv4 client option to an entity. Returns its ID."""
        return self._add_named_option(
            BAMEndpoints.ADD_DHCP_CLIENT_DEPLOYMENT_OPTION, entity_id, name, value, properties
        )

    def add_dhcp_service_deployment_option(
        self, entity_id: int, name: str, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCPv4 service option to an entity. Returns its ID."""
        return self._add_named_option(
            BAMEndpoints.ADD_DHCP_SERVICE_DEPLOYMENT_OPTION, entity_id, name, value, properties
        )

    def add_dhcp6_client_deployment_option(
        self, entity_id: int, name: str, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCPv6 client option to an entity. Returns its ID."""
        return self._add_named_option(
            BAMEndpoints.ADD_DHCP6_CLIENT_DEPLOYMENT_OPTION, entity_id, name, value, properties
        )

    def add_dhcp6_service_deployment_option(
        self, entity_id: int, name: str, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCPv6 service option to an entity. Returns its ID."""
        return self._add_named_option(
            BAMEndpoints.ADD_DHCP6_SERVICE_DEPLOYMENT_OPTION, entity_id, name, value, properties
        )

    def add_dns_deployment_option(
        self, entity_id: int, name: str, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DNS option to an entity. Returns its ID."""
        return self._add_named_option(
            BAMEndpoints.ADD_DNS_DEPLOYMENT_OPTION, entity_id, name, value, properties
        )

    def add_dhcp_vendor_deployment_option(
        self, entity_id: int, option_id: int, value: str, properties: OptionsArg = None
    ) -> str:
        """Add a DHCP vendor option to an entity. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP_VENDOR_DEPLOYMENT_OPTION,
            {
                "entityId": entity_id,
                "optionId": option_id,
                "value": value,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # Deployment roles and servers
    # -------------------------------------------------------------------------

    def get_deployment_roles(self, entity_id: int) -> list[APIDeploymentRole]:
        """
        Get the DNS and DHCP roles assigned to an entity.

        Views and zones only carry DNS roles; address space objects carry both.
        """
        return self._fetch_list(
            BAMEndpoints.GET_DEPLOYMENT_ROLES, {"entityId": entity_id}, APIDeploymentRole
        )

    def get_dhcp_deployment_role(
        self, entity_id: int, server_interface_id: int
    ) -> APIDeploymentRole:
        """Get the DHCP role of an entity on one server interface."""
        return self._fetch(
            BAMEndpoints.GET_DHCP_DEPLOYMENT_ROLE,
            {"entityId": entity_id, "serverInterfaceId": server_interface_id},
            APIDeploymentRole,
        )

    def get_dns_deployment_role(
        self, entity_id: int, server_interface_id: int
    ) -> APIDeploymentRole:
        """Get the DNS role of an entity on one server interface."""
        return self._fetch(
            BAMEndpoints.GET_DNS_DEPLOYMENT_ROLE,
            {"entityId": entity_id, "serverInterfaceId": server_interface_id},
            APIDeploymentRole,
        )

    def get_dns_deployment_role_for_view(
        self, entity_id: int, server_interface_id: int, view_id: int
    ) -> APIDeploymentRole:
        """Get the DNS role of an address space entity for one view."""
        return self._fetch(
            BAMEndpoints.GET_DNS_DEPLOYMENT_ROLE_FOR_VIEW,
            {
                "entityId": entity_id,
                "serverInterfaceId": server_interface_id,
                "viewId": view_id,
            },
            APIDeploymentRole,
        )

    def get_server_deployment_roles(self, server_id: int) -> list[APIDeploymentRole]:
        """Get every role deployed to a server."""
        return self._fetch_list(
            BAMEndpoints.GET_SERVER_DEPLOYMENT_ROLES, {"serverId": server_id}, APIDeploymentRole
        )

    def get_server_for_role(self, role_id: int) -> APIEntity:
        """Get the server a deployment role is assigned to."""
        return self._fetch(BAMEndpoints.GET_SERVER_FOR_ROLE, {"roleId": role_id}, APIEntity)

    def get_server_deployment_status(self, properties: OptionsArg, server_id: int) -> str:
        """Get the deployment status code of a server."""
        return self._fetch_scalar(
            BAMEndpoints.GET_SERVER_DEPLOYMENT_STATUS,
            {"properties": encode_options(properties), "serverId": server_id},
        )

    def get_deployment_task_status(self, deployment_task_token: str) -> str:
        """Get the status of a task started by selectiveDeploy."""
        return self._fetch_scalar(
            BAMEndpoints.GET_DEPLOYMENT_TASK_STATUS,
            {"deploymentTaskToken": deployment_task_token},
        )

    def get_additional_ip_addresses(self, adonis_id: int, properties: OptionsArg = None) -> str:
        """
        Get the extra service and loopback addresses of a DNS server.

        Args:
            adonis_id: Object ID of the server
            properties: Optional ``serviceType`` ("SERVICE" or "LOOPBACK")

        Returns:
            ``IP,serviceType|IP,serviceType`` string, e.g.
            ``10.0.0.10/32,loopback|11.0.0.3/24,service``
        """
        return self._fetch_scalar(
            BAMEndpoints.GET_ADDITIONAL_IP_ADDRESSES,
            {"adonisId": adonis_id, "properties": encode_options(properties)},
        )

    def add_additional_ip_addresses(
        self, server_id: int, ips_to_add: str, properties: OptionsArg = None
    ) -> str:
        """Add ``IP,serviceType|...`` addresses to a server's service interface."""
        return self._mutate(
            BAMEndpoints.ADD_ADDITIONAL_IP_ADDRESSES,
            {
                "serverId": server_id,
                "ipsToAdd": ips_to_add,
                "properties": encode_options(properties),
            },
        )

    def add_dhcp_deployment_role(
        self,
        entity_id: int,
        server_interface_id: int,
        role_type: str,
        properties: OptionsArg = None,
    ) -> str:
        """Assign a DHCP role (MASTER, NONE) to an entity. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DHCP_DEPLOYMENT_ROLE,
            {
                "entityId": entity_id,
                "serverInterfaceId": server_interface_id,
                "type": role_type,
                "properties": encode_options(properties),
            },
        )

    def add_dns_deployment_role(
        self,
        entity_id: int,
        server_interface_id: int,
        role_type: str,
        properties: OptionsArg = None,
    ) -> str:
        """
        Assign a DNS role to a view, zone or network.

        Args:
            entity_id: Object ID of the entity
            server_interface_id: Object ID of the server interface
            role_type: MASTER, MASTER_HIDDEN, SLAVE, SLAVE_STEALTH, FORWARDER,
                STUB, RECURSION, PEER or AD_MASTER
            properties: e.g. ``{"view": 12}`` for roles on address space

        Returns:
            Object ID of the new role
        """
        return self._mutate(
            BAMEndpoints.ADD_DNS_DEPLOYMENT_ROLE,
            {
                "entityId": entity_id,
                "serverInterfaceId": server_interface_id,
                "type": role_type,
                "properties": encode_options(properties),
            },
        )

    # -------------------------------------------------------------------------
    # Devices and discovery
    # -------------------------------------------------------------------------

    def _get_discovered(self, endpoint: str, device_id: int, policy_id: int) -> list[APIEntity]:
        return self._fetch_list(
            endpoint, {"deviceId": device_id, "policyId": policy_id}, APIEntity
        )

    def get_discovered_device(self, device_id: int, policy_id: int) -> APIEntity:
        """Get a device found by an IPv4 reconciliation policy."""
        return self._fetch(
            BAMEndpoints.GET_DISCOVERED_DEVICE,
            {"deviceId": device_id, "policyId": policy_id},
            APIEntity,
        )

    def get_discovered_devices(self, policy_id: int) -> list[APIEntity]:
        """Get every device found by an IPv4 reconciliation policy."""
        return self._fetch_list(
            BAMEndpoints.GET_DISCOVERED_DEVICES, {"policyId": policy_id}, APIEntity
        )

    def get_discovered_device_arp_entries(
        self, device_id: int, policy_id: int
    ) -> list[APIEntity]:
        """Get the ARP entries of a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_ARP_ENTRIES, device_id, policy_id
        )

    def get_discovered_device_hosts(self, device_id: int, policy_id: int) -> list[APIEntity]:
        """Get the hosts seen by a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_HOSTS, device_id, policy_id
        )

    def get_discovered_device_interfaces(
        self, device_id: int, policy_id: int
    ) -> list[APIEntity]:
        """Get the interfaces of a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_INTERFACES, device_id, policy_id
        )

    def get_discovered_device_mac_address_entries(
        self, device_id: int, policy_id: int
    ) -> list[APIEntity]:
        """Get the MAC address table of a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_MAC_ADDRESS_ENTRIES, device_id, policy_id
        )

    def get_discovered_device_networks(
        self, device_id: int, policy_id: int
    ) -> list[APIEntity]:
        """Get the networks attached to a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_NETWORKS, device_id, policy_id
        )

    def get_discovered_device_vlans(self, device_id: int, policy_id: int) -> list[APIEntity]:
        """Get the VLANs of a discovered device."""
        return self._get_discovered(
            BAMEndpoints.GET_DISCOVERED_DEVICE_VLANS, device_id, policy_id
        )

    def add_device(
        self,
        configuration_id: int,
        name: str,
        device_type_id: int = 0,
        device_subtype_id: int = 0,
        ip4_addresses: Iterable[str] | str = "",
        ip6_addresses: Iterable[str] | str = "",
        properties: OptionsArg = None,
    ) -> str:
        """
        Add a device to a configuration.

        Args:
            configuration_id: Object ID of the configuration
            name: Device name
            device_type_id: Object ID of the device type, 0 for none
            device_subtype_id: Object ID of the device subtype, 0 for none
            ip4_addresses: IPv4 addresses to link, sent comma-separated
            ip6_addresses: IPv6 addresses to link, sent comma-separated
            properties: Object properties and user-defined fields

        Returns:
            Object ID of the new device
        """
        return self._mutate(
            BAMEndpoints.ADD_DEVICE,
            {
                "configurationId": configuration_id,
                "name": name,
                "deviceTypeId": device_type_id,
                "deviceSubtypeId": device_subtype_id,
                "ip4Addresses": join_values(ip4_addresses, ","),
                "ip6Addresses": join_values(ip6_addresses, ","),
                "properties": encode_options(properties),
            },
        )

    def add_device_type(self, name: str, properties: OptionsArg = None) -> str:
        """Add a device type. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DEVICE_TYPE,
            {"name": name, "properties": encode_options(properties)},
        )

    def add_device_subtype(self, parent_id: int, name: str, properties: OptionsArg = None) -> str:
        """Add a subtype under a device type. Returns its ID."""
        return self._mutate(
            BAMEndpoints.ADD_DEVICE_SUBTYPE,
            {"parentId": parent_id, "name": name, "properties": encode_options(properties)},
        )

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------

    def get_all_used_locations(self) -> list[APIEntity]:
        """Get the locations that annotate at least one object."""
        return self._fetch_list(BAMEndpoints.GET_ALL_USED_LOCATIONS, {}, APIEntity)

    def get_location_by_code(self, code: str) -> APIEntity:
        """Get a location by hierarchical code (e.g. "CA TOR")."""
        return self._fetch(BAMEndpoints.GET_LOCATION_BY_CODE, {"code": code}, APIEntity)

    # -------------------------------------------------------------------------
    # User-Defined Fields (UDFs)
    # -------------------------------------------------------------------------

    def get_user_defined_fields(
        self, required_fields_only: bool, object_type: str
    ) -> list[APIUserDefinedField]:
        """
        Get the user-defined field definitions of an object type.

        Args:
            required_fields_only: Only return fields marked as required
            object_type: Object type the fields belong to
        """
        return self._fetch_list(
            BAMEndpoints.GET_USER_DEFINED_FIELDS,
            {"requiredFieldsOnly": required_fields_only, "type": object_type},
            APIUserDefinedField,
        )

    # -------------------------------------------------------------------------
    # System, probes and tasks
    # -------------------------------------------------------------------------

    def get_system_info(self) -> str:
        """Get the ``name=value|...`` system information string."""
        return self._fetch_scalar(BAMEndpoints.GET_SYSTEM_INFO)

    def get_replication_info(self) -> str:
        """Get the database replication status string."""
        return self._fetch_scalar(BAMEndpoints.GET_REPLICATION_INFO)

    def get_probe_data(self, defined_probe: str) -> APIData:
        """Get the result of a predefined database probe."""
        return self._fetch(
            BAMEndpoints.GET_PROBE_DATA, {"definedProbe": defined_probe}, APIData
        )

    def get_probe_status(self, defined_probe: str) -> str:
        """Get the run status of a predefined database probe."""
        return self._fetch_scalar(BAMEndpoints.GET_PROBE_STATUS, {"definedProbe": defined_probe})

    def get_template_task_status(self, task_id: int) -> str:
        """Get the status of an IP template application task."""
        return self._fetch_scalar(BAMEndpoints.GET_TEMPLATE_TASK_STATUS, {"taskId": task_id})

    def is_migration_running(self, filename: str = "") -> str:
        """
        Check whether a migration file is being processed.

        An empty filename asks whether any migration is queued or running.
        """
        return self._fetch_scalar(BAMEndpoints.IS_MIGRATION_RUNNING, {"filename": filename})


def new_session(
    server: str,
    username: str,
    password: str,
    *,
    api_path: str | None = None,
    verify_ssl: bool = True,
    timeout: float | None = None,
) -> BAMClient:
    """
    Log in to a BAM server and return a ready client.

    Args:
        server: Host name (optionally ``host:port``) of the BAM server
        username: API user name
        password: API user password
        api_path: REST path prefix, defaults to /Services/REST/v1
        verify_ssl: Verify the server certificate. Only disable for lab servers
        timeout: Request timeout in seconds, None for the httpx default

    Returns:
        An authenticated BAMClient

    Raises:
        BAMAuthenticationError: If login fails
    """
    config = BAMConfig(
        server=server,
        username=username,
        password=password,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    if api_path:
        config.api_path = api_path
    client = BAMClient(config)
    client.login()
    return client
