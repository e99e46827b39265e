"""Public response and request models for the Shodan API."""

from shodan_sdk.models.account import ApiInfo, Org, OrgMember, Profile, SimpleResponse, UsageLimits
from shodan_sdk.models.alert import Alert, AlertDetails, AlertFilters, Trigger
from shodan_sdk.models.data import Dataset, DatasetFile
from shodan_sdk.models.dns import DnsRecord, Domain
from shodan_sdk.models.exploit import Exploit, ExploitResult
from shodan_sdk.models.host import Host, Location, Service
from shodan_sdk.models.scan import Scan, ScanList
from shodan_sdk.models.search import (
    FacetBucket,
    QueryTags,
    SavedQuery,
    SearchQueries,
    SearchResult,
    Tokens,
)

__all__ = [
    "Alert",
    "AlertDetails",
    "AlertFilters",
    "ApiInfo",
    "Dataset",
    "DatasetFile",
    "DnsRecord",
    "Domain",
    "Exploit",
    "ExploitResult",
    "FacetBucket",
    "Host",
    "Location",
    "Org",
    "OrgMember",
    "Profile",
    "QueryTags",
    "SavedQuery",
    "Scan",
    "ScanList",
    "SearchQueries",
    "SearchResult",
    "Service",
    "SimpleResponse",
    "Tokens",
    "Trigger",
    "UsageLimits",
]
