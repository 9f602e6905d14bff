"""Centralized API Endpoint Configuration for the BlueCat Address Manager REST API v1.

The legacy v1 API exposes one URL per API method under a fixed path prefix
(``/Services/REST/v1``). Every method takes its arguments in the query string,
whatever the HTTP verb.

Usage:
    from bluecat.bam.endpoints import BAMEndpoints

    url = f"{base_url}/{BAMEndpoints.GET_ENTITY_BY_ID}"
    # Returns: "https://bam.example.com/Services/REST/v1/getEntityById"

The endpoint name doubles as the operation name attached to errors and logs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BAMEndpoints:
    """
    Centralized BAM REST API v1 endpoint constants.

    All endpoints are relative to the API prefix (e.g., /Services/REST/v1/).
    """

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    LOGIN: str = "login"

    # -------------------------------------------------------------------------
    # Generic entities
    # -------------------------------------------------------------------------
    GET_ENTITIES: str = "getEntities"
    GET_ENTITIES_BY_NAME: str = "getEntitiesByName"
    GET_ENTITIES_BY_NAME_USING_OPTIONS: str = "getEntitiesByNameUsingOptions"
    GET_ENTITY_BY_CIDR: str = "getEntityByCIDR"
    GET_ENTITY_BY_ID: str = "getEntityById"
    GET_ENTITY_BY_NAME: str = "getEntityByName"
    GET_ENTITY_BY_PREFIX: str = "getEntityByPrefix"
    GET_ENTITY_BY_RANGE: str = "getEntityByRange"
    GET_PARENT: str = "getParent"
    GET_LINKED_ENTITIES: str = "getLinkedEntities"
    LINK_ENTITIES: str = "linkEntities"

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------
    CUSTOM_SEARCH: str = "customSearch"
    SEARCH_BY_CATEGORY: str = "searchByCategory"
    SEARCH_BY_OBJECT_TYPES: str = "searchByObjectTypes"
    SEARCH_RESPONSE_POLICY_ITEM: str = "searchResponsePolicyItem"
    FIND_RESPONSE_POLICIES_WITH_ITEM: str = "findResponsePoliciesWithItem"

    # -------------------------------------------------------------------------
    # Access rights
    # -------------------------------------------------------------------------
    GET_ACCESS_RIGHT: str = "getAccessRight"
    GET_ACCESS_RIGHTS_FOR_ENTITY: str = "getAccessRightsForEntity"
    GET_ACCESS_RIGHTS_FOR_USER: str = "getAccessRightsForUser"
    ADD_ACCESS_RIGHT: str = "addAccessRight"
    ADD_ACL: str = "addACL"

    # -------------------------------------------------------------------------
    # Configurations
    # -------------------------------------------------------------------------
    GET_CONFIGURATION_GROUPS: str = "getConfigurationGroups"
    GET_CONFIGURATION_SETTING: str = "getConfigurationSetting"
    GET_CONFIGURATIONS_BY_GROUP: str = "getConfigurationsByGroup"

    # -------------------------------------------------------------------------
    # IPv4 / IPv6 address space
    # -------------------------------------------------------------------------
    GET_IP4_ADDRESS: str = "getIP4Address"
    GET_IP4_NETWORKS_BY_HINT: str = "getIP4NetworksByHint"
    GET_IP6_ADDRESS: str = "getIP6Address"
    GET_IP6_OBJECTS_BY_HINT: str = "getIP6ObjectsByHint"
    GET_IP_RANGE_BY_IP: str = "getIPRangeByIP"
    GET_MAC_ADDRESS: str = "getMACAddress"
    GET_MAX_ALLOWED_RANGE: str = "getMaxAllowedRange"
    GET_NETWORK_LINKED_PROPERTIES: str = "getNetworkLinkedProperties"
    GET_NEXT_AVAILABLE_IP4_ADDRESS: str = "getNextAvailableIP4Address"
    GET_NEXT_AVAILABLE_IP4_NETWORK: str = "getNextAvailableIP4Network"
    GET_NEXT_AVAILABLE_IP_RANGE: str = "getNextAvailableIPRange"
    GET_NEXT_AVAILABLE_IP_RANGES: str = "getNextAvailableIPRanges"
    GET_NEXT_IP4_ADDRESS: str = "getNextIP4Address"
    GET_SHARED_NETWORKS: str = "getSharedNetworks"
    IS_ADDRESS_ALLOCATED: str = "isAddressAllocated"

    # -------------------------------------------------------------------------
    # DHCP ranges and classes
    # -------------------------------------------------------------------------
    ADD_DHCP4_RANGE: str = "addDHCP4Range"
    ADD_DHCP4_RANGE_BY_SIZE: str = "addDHCP4RangeBySize"
    ADD_DHCP6_RANGE: str = "addDHCP6Range"
    ADD_DHCP6_RANGE_BY_SIZE: str = "addDHCP6RangeBySize"
    ADD_DHCP_SUB_CLASS: str = "addDHCPSubClass"
    ADD_CUSTOM_OPTION_DEFINITION: str = "addCustomOptionDefinition"

    # -------------------------------------------------------------------------
    # DNS
    # -------------------------------------------------------------------------
    GET_ALIASES_BY_HINT: str = "getAliasesByHint"
    GET_HOST_RECORDS_BY_HINT: str = "getHostRecordsByHint"
    GET_ZONES_BY_HINT: str = "getZonesByHint"
    GET_KSK: str = "getKSK"
    ADD_GENERIC_RECORD: str = "addGenericRecord"
    ADD_ALIAS_RECORD: str = "addAliasRecord"
    ADD_BULK_HOST_RECORD: str = "addBulkHostRecord"
    ADD_EXTERNAL_HOST_RECORD: str = "addExternalHostRecord"
    ADD_ENUM_ZONE: str = "addEnumZone"
    ADD_ENUM_NUMBER: str = "addEnumNumber"

    # -------------------------------------------------------------------------
    # Deployment options
    # -------------------------------------------------------------------------
    GET_DEPLOYMENT_OPTIONS: str = "getDeploymentOptions"
    GET_DHCP_CLIENT_DEPLOYMENT_OPTION: str = "getDHCPClientDeploymentOption"
    GET_DHCP_SERVICE_DEPLOYMENT_OPTION: str = "getDHCPServiceDeploymentOption"
    GET_DHCP_VENDOR_DEPLOYMENT_OPTION: str = "getDHCPVendorDeploymentOption"
    GET_DHCP6_CLIENT_DEPLOYMENT_OPTION: str = "getDHCP6ClientDeploymentOption"
    GET_DHCP6_SERVICE_DEPLOYMENT_OPTION: str = "getDHCP6ServiceDeploymentOption"
    GET_DNS_DEPLOYMENT_OPTION: str = "getDNSDeploymentOption"
    ADD_DHCP_CLIENT_DEPLOYMENT_OPTION: str = "addDHCPClientDeploymentOption"
    ADD_DHCP_SERVICE_DEPLOYMENT_OPTION: str = "addDHCPServiceDeploymentOption"
    ADD_DHCP_VENDOR_DEPLOYMENT_OPTION: str = "addDHCPVendorDeploymentOption"
    ADD_DHCP6_CLIENT_DEPLOYMENT_OPTION: str = "addDHCP6ClientDeploymentOption"
    ADD_DHCP6_SERVICE_DEPLOYMENT_OPTION: str = "addDHCP6ServiceDeploymentOption"
    ADD_DNS_DEPLOYMENT_OPTION: str = "addDNSDeploymentOption"

    # -------------------------------------------------------------------------
    # Deployment roles and servers
    # -------------------------------------------------------------------------
    GET_DEPLOYMENT_ROLES: str = "getDeploymentRoles"
    GET_DHCP_DEPLOYMENT_ROLE: str = "getDHCPDeploymentRole"
    GET_DNS_DEPLOYMENT_ROLE: str = "getDNSDeploymentRole"
    GET_DNS_DEPLOYMENT_ROLE_FOR_VIEW: str = "getDNSDeploymentRoleForView"
    GET_SERVER_DEPLOYMENT_ROLES: str = "getServerDeploymentRoles"
    GET_SERVER_FOR_ROLE: str = "getServerForRole"
    GET_SERVER_DEPLOYMENT_STATUS: str = "getServerDeploymentStatus"
    GET_DEPLOYMENT_TASK_STATUS: str = "getDeploymentTaskStatus"
    GET_ADDITIONAL_IP_ADDRESSES: str = "getAdditionalIPAddresses"
    ADD_ADDITIONAL_IP_ADDRESSES: str = "addAdditionalIPAddresses"
    ADD_DHCP_DEPLOYMENT_ROLE: str = "addDHCPDeploymentRole"
    ADD_DNS_DEPLOYMENT_ROLE: str = "addDNSDeploymentRole"

    # -------------------------------------------------------------------------
    # Devices and discovery
    # -------------------------------------------------------------------------
    GET_DISCOVERED_DEVICE: str = "getDiscoveredDevice"
    GET_DISCOVERED_DEVICES: str = "getDiscoveredDevices"
    GET_DISCOVERED_DEVICE_ARP_ENTRIES: str = "getDiscoveredDeviceArpEntries"
    GET_DISCOVERED_DEVICE_HOSTS: str = "getDiscoveredDeviceHosts"
    GET_DISCOVERED_DEVICE_INTERFACES: str = "getDiscoveredDeviceInterfaces"
    GET_DISCOVERED_DEVICE_MAC_ADDRESS_ENTRIES: str = "getDiscoveredDeviceMacAddressEntries"
    GET_DISCOVERED_DEVICE_NETWORKS: str = "getDiscoveredDeviceNetworks"
    GET_DISCOVERED_DEVICE_VLANS: str = "getDiscoveredDeviceVlans"
    ADD_DEVICE: str = "addDevice"
    ADD_DEVICE_TYPE: str = "addDeviceType"
    ADD_DEVICE_SUBTYPE: str = "addDeviceSubtype"

    # -------------------------------------------------------------------------
    # Locations
    # -------------------------------------------------------------------------
    GET_ALL_USED_LOCATIONS: str = "getAllUsedLocations"
    GET_LOCATION_BY_CODE: str = "getLocationByCode"

    # -------------------------------------------------------------------------
    # User-Defined Fields (UDFs)
    # -------------------------------------------------------------------------
    GET_USER_DEFINED_FIELDS: str = "getUserDefinedFields"

    # -------------------------------------------------------------------------
    # System, probes and tasks
    # -------------------------------------------------------------------------
    GET_SYSTEM_INFO: str = "getSystemInfo"
    GET_REPLICATION_INFO: str = "getReplicationInfo"
    GET_PROBE_DATA: str = "getProbeData"
    GET_PROBE_STATUS: str = "getProbeStatus"
    GET_TEMPLATE_TASK_STATUS: str = "getTemplateTaskStatus"
    IS_MIGRATION_RUNNING: str = "isMigrationRunning"
