"""User-facing async client for the Shodan API.

Example:
    from shodan_sdk import HostParams, SearchParams, ShodanClient

    async with ShodanClient(api_key="your-api-key") as client:
        host = await client.host(HostParams(ip="1.2.3.4"))
        result = await client.search(SearchParams(query="nginx", filters={"country": "DE"}))
"""

import os
from typing import Any

import httpx

from shodan_sdk._internal import routes
from shodan_sdk._internal.dispatch import (
    CallContext,
    Dispatcher,
    EndpointTarget,
    MappingOf,
    Origin,
    RecordOf,
    ScalarOf,
    SequenceOf,
)
from shodan_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from shodan_sdk._internal.routes import route
from shodan_sdk.exceptions import (
    ShodanConfigError,
    ShodanMissingParameterError,
    ShodanRequestTooLargeError,
    ShodanValidationError,
)
from shodan_sdk.models import (
    Alert,
    AlertDetails,
    ApiInfo,
    Dataset,
    DatasetFile,
    Domain,
    ExploitResult,
    Host,
    Org,
    Profile,
    QueryTags,
    Scan,
    ScanList,
    SearchQueries,
    SearchResult,
    SimpleResponse,
    Tokens,
    Trigger,
)
from shodan_sdk.params import ExploitParams, HostParams, SearchParams

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)

# Longest comma-joined list the DNS endpoints accept in one query value.
HOSTNAMES_LEN_LIMIT = 3575
IPS_LEN_LIMIT = 3369

MAX_PORT = 65535


def _require(value: str | None, name: str) -> str:
    if not value:
        raise ShodanMissingParameterError(f"empty {name}")
    return value


def _join_limited(items: list[str] | None, limit: int, name: str) -> str:
    """Comma-join a bulk list, enforcing the API's length ceiling."""
    if not items:
        raise ShodanMissingParameterError(f"empty {name}")
    joined = ",".join(items)
    if len(joined) > limit:
        raise ShodanRequestTooLargeError(
            f"request is too big: {name} joined to {len(joined)} characters, limit is {limit}"
        )
    return joined


class ShodanClient:
    """Async client for the Shodan REST and exploits APIs.

    Every method validates its arguments locally, then performs exactly one
    request. Errors are raised as subclasses of ShodanError; nothing is
    retried. Each method takes an optional ``context`` (CallContext) for
    cancellation and deadlines.

    Use ``ShodanClient.from_env()`` to create a client from environment
    variables.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        api_url: str = routes.API_ROOT,
        exploits_url: str = routes.API_EXPLOITS,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: The Shodan API key.
            api_url: Base URL of the main API.
            exploits_url: Base URL of the exploits API.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional preconfigured httpx.AsyncClient. It is not
                closed by ``aclose()``.
        """
        if not api_key:
            raise ShodanConfigError("Missing API key")
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(timeout=timeout_ms / 1000)
        self._dispatcher = Dispatcher(
            api_key=api_key,
            http_client=self._http,
            api_url=api_url,
            exploits_url=exploits_url,
            debug=debug,
        )

    @classmethod
    def from_env(cls) -> "ShodanClient":
        """Create a client from environment variables.

        Required environment variables:
            SHODAN_API_KEY: The Shodan API key.

        Optional environment variables:
            SHODAN_API_URL: Base URL of the main API.
            SHODAN_EXPLOITS_URL: Base URL of the exploits API.
            SHODAN_TIMEOUT_MS: Request timeout in milliseconds.
            SHODAN_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ShodanConfigError: SHODAN_API_KEY is missing or empty.
            ValueError: SHODAN_TIMEOUT_MS is not an integer.
        """
        api_key = os.environ.get("SHODAN_API_KEY")
        if not api_key:
            raise ShodanConfigError("Missing API key: set SHODAN_API_KEY")

        api_url = os.environ.get("SHODAN_API_URL") or routes.API_ROOT
        exploits_url = os.environ.get("SHODAN_EXPLOITS_URL") or routes.API_EXPLOITS
        debug = os.environ.get("SHODAN_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("SHODAN_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            api_key=api_key,
            api_url=api_url,
            exploits_url=exploits_url,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "ShodanClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Search Methods
    # =========================================================================

    async def host(self, params: HostParams, *, context: CallContext | None = None) -> Host:
        """Return all services that have been found on the given host IP."""
        _require(params.ip, "ip")
        target = EndpointTarget(
            "GET", route(routes.SHODAN_HOST_VIEW, params.ip), params=params.to_query()
        )
        return await self._dispatcher.dispatch(target, RecordOf(Host), context)

    async def count(
        self, params: SearchParams, *, context: CallContext | None = None
    ) -> SearchResult:
        """Search without returning host results.

        Returns only the total number of matches and any requested facet
        information. Does not consume query credits.
        """
        target = EndpointTarget("GET", routes.SHODAN_HOST_COUNT, params=params.to_query())
        return await self._dispatcher.dispatch(target, RecordOf(SearchResult), context)

    async def search(
        self, params: SearchParams, *, context: CallContext | None = None
    ) -> SearchResult:
        """Search hosts using the website query syntax, with optional facets.

        Consumes 1 query credit if the query contains a filter, and 1 credit
        per 100 results past the first page.
        """
        values = params.to_query()
        if not values:
            raise ShodanMissingParameterError("empty parameters")
        target = EndpointTarget("GET", routes.SHODAN_HOST_SEARCH, params=values)
        return await self._dispatcher.dispatch(target, RecordOf(SearchResult), context)

    async def search_tokens(
        self, params: SearchParams, *, context: CallContext | None = None
    ) -> Tokens:
        """Break a search query into the filters and text it is made of."""
        values = params.to_query()
        if not values:
            raise ShodanMissingParameterError("empty parameters")
        target = EndpointTarget("GET", routes.SHODAN_HOST_SEARCH_TOKENS, params=values)
        return await self._dispatcher.dispatch(target, RecordOf(Tokens), context)

    async def ports(self, *, context: CallContext | None = None) -> list[int]:
        """Return the port numbers the crawlers are looking for."""
        target = EndpointTarget("GET", routes.SHODAN_PORTS)
        return await self._dispatcher.dispatch(target, SequenceOf(int), context)

    async def protocols(self, *, context: CallContext | None = None) -> dict[str, str]:
        """Return the protocols that can be used when launching an Internet scan."""
        target = EndpointTarget("GET", routes.SHODAN_PROTOCOLS)
        return await self._dispatcher.dispatch(target, MappingOf(str), context)

    async def services(self, *, context: CallContext | None = None) -> dict[str, str]:
        """Return all the services Shodan can detect."""
        target = EndpointTarget("GET", routes.SHODAN_SERVICES)
        return await self._dispatcher.dispatch(target, MappingOf(str), context)

    # =========================================================================
    # Scanning Methods
    # =========================================================================

    async def submit_scan(
        self, ips: list[str], force: bool = False, *, context: CallContext | None = None
    ) -> Scan:
        """Request Shodan to crawl IPs or netblocks.

        Uses 1 scan credit per IP and requires a paid API plan.
        """
        if not ips:
            raise ShodanMissingParameterError("empty parameters: ips")
        form = {"ips": ",".join(ips)}
        if force:
            form["force"] = "true"
        target = EndpointTarget("POST", routes.SHODAN_SCAN).with_form(form)
        return await self._dispatcher.dispatch(target, RecordOf(Scan), context)

    async def list_scans(self, page: int = 1, *, context: CallContext | None = None) -> ScanList:
        """Return a page of the account's scans."""
        target = EndpointTarget("GET", routes.SHODAN_SCANS, params={"page": str(max(page, 1))})
        return await self._dispatcher.dispatch(target, RecordOf(ScanList), context)

    async def get_scan(self, scan_id: str, *, context: CallContext | None = None) -> Scan:
        """Check the progress of a previously submitted scan."""
        _require(scan_id, "scan id")
        target = EndpointTarget("GET", route(routes.SHODAN_SCAN_VIEW, scan_id))
        return await self._dispatcher.dispatch(target, RecordOf(Scan), context)

    async def scan_internet(
        self, port: int, protocol: str, *, context: CallContext | None = None
    ) -> Scan:
        """Request a crawl of the whole Internet for one port.

        Restricted to security researchers and Enterprise Data licensees.
        """
        if not 0 <= port <= MAX_PORT:
            raise ShodanValidationError(f"port out of range: {port}")
        _require(protocol, "protocol")
        form = {"port": str(port), "protocol": protocol}
        target = EndpointTarget("POST", routes.SHODAN_SCAN_INTERNET).with_form(form)
        return await self._dispatcher.dispatch(target, RecordOf(Scan), context)

    # =========================================================================
    # Saved Query Methods
    # =========================================================================

    async def query_list(
        self,
        page: int = 0,
        sort: str = "",
        order: str = "",
        *,
        context: CallContext | None = None,
    ) -> SearchQueries:
        """List the search queries users have saved.

        Args:
            page: Page number, 10 items per page (0 omits it).
            sort: Property to sort by: ``votes`` or ``timestamp``.
            order: ``asc`` or ``desc``.
        """
        params: dict[str, str] = {}
        if page > 0:
            params["page"] = str(page)
        if sort:
            params["sort"] = sort
        if order:
            params["order"] = order
        target = EndpointTarget("GET", routes.SHODAN_QUERY, params=params)
        return await self._dispatcher.dispatch(target, RecordOf(SearchQueries), context)

    async def query_search(
        self, query: str, page: int = 0, *, context: CallContext | None = None
    ) -> SearchQueries:
        """Search the directory of saved search queries."""
        _require(query, "search query")
        params = {"query": query}
        if page > 0:
            params["page"] = str(page)
        target = EndpointTarget("GET", routes.SHODAN_QUERY_SEARCH, params=params)
        return await self._dispatcher.dispatch(target, RecordOf(SearchQueries), context)

    async def query_tags(self, size: int = 0, *, context: CallContext | None = None) -> QueryTags:
        """Return popular tags of saved search queries."""
        params = {"size": str(size)} if size > 0 else {}
        target = EndpointTarget("GET", routes.SHODAN_QUERY_TAGS, params=params)
        return await self._dispatcher.dispatch(target, RecordOf(QueryTags), context)

    # =========================================================================
    # Bulk Data Methods
    # =========================================================================

    async def datasets(self, *, context: CallContext | None = None) -> list[Dataset]:
        """List the datasets available for download."""
        target = EndpointTarget("GET", routes.SHODAN_DATA)
        return await self._dispatcher.dispatch(target, SequenceOf(Dataset), context)

    async def dataset_files(
        self, dataset: str, *, context: CallContext | None = None
    ) -> list[DatasetFile]:
        """List the files available for download from a dataset."""
        _require(dataset, "dataset id")
        target = EndpointTarget("GET", route(routes.SHODAN_DATASET, dataset))
        return await self._dispatcher.dispatch(target, SequenceOf(DatasetFile), context)

    # =========================================================================
    # Organization & Account Methods
    # =========================================================================

    async def org(self, *, context: CallContext | None = None) -> Org:
        """Return the organization: members, upgrades, authorized domains."""
        target = EndpointTarget("GET", routes.ORG)
        return await self._dispatcher.dispatch(target, RecordOf(Org), context)

    async def add_org_member(
        self, username: str, notify: bool = False, *, context: CallContext | None = None
    ) -> SimpleResponse:
        """Add a Shodan user to the organization and upgrade them."""
        _require(username, "username")
        params = {"notify": "true"} if notify else {}
        target = EndpointTarget("PUT", route(routes.ORG_MEMBER, username), params=params)
        return await self._dispatcher.dispatch(target, RecordOf(SimpleResponse), context)

    async def delete_org_member(
        self, username: str, *, context: CallContext | None = None
    ) -> SimpleResponse:
        """Remove and downgrade a member of the organization."""
        _require(username, "username")
        target = EndpointTarget("DELETE", route(routes.ORG_MEMBER, username))
        return await self._dispatcher.dispatch(target, RecordOf(SimpleResponse), context)

    async def account_profile(self, *, context: CallContext | None = None) -> Profile:
        """Return the account linked to this API key."""
        target = EndpointTarget("GET", routes.ACCOUNT_PROFILE)
        return await self._dispatcher.dispatch(target, RecordOf(Profile), context)

    async def api_info(self, *, context: CallContext | None = None) -> ApiInfo:
        """Return the API plan belonging to this API key."""
        target = EndpointTarget("GET", routes.API_INFO)
        return await self._dispatcher.dispatch(target, RecordOf(ApiInfo), context)

    # =========================================================================
    # DNS Methods
    # =========================================================================

    async def dns_resolve(
        self, hostnames: list[str], *, context: CallContext | None = None
    ) -> dict[str, str | None]:
        """Look up the IP address of each hostname."""
        joined = _join_limited(hostnames, HOSTNAMES_LEN_LIMIT, "hostnames")
        target = EndpointTarget("GET", routes.DNS_RESOLVE, params={"hostnames": joined})
        return await self._dispatcher.dispatch(target, MappingOf(str | None), context)

    async def dns_reverse(
        self, ips: list[str], *, context: CallContext | None = None
    ) -> dict[str, list[str] | None]:
        """Look up the hostnames defined for each IP address."""
        joined = _join_limited(ips, IPS_LEN_LIMIT, "ips")
        target = EndpointTarget("GET", routes.DNS_REVERSE, params={"ips": joined})
        return await self._dispatcher.dispatch(target, MappingOf(list[str] | None), context)

    async def dns_domain(self, domain: str, *, context: CallContext | None = None) -> Domain:
        """Return subdomains and DNS records known for a domain."""
        _require(domain, "domain")
        target = EndpointTarget("GET", route(routes.DNS_DOMAIN, domain))
        return await self._dispatcher.dispatch(target, RecordOf(Domain), context)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    async def http_headers(self, *, context: CallContext | None = None) -> dict[str, str]:
        """Return the HTTP headers this client sends to a webserver."""
        target = EndpointTarget("GET", routes.TOOLS_HTTP_HEADERS)
        return await self._dispatcher.dispatch(target, MappingOf(str), context)

    async def my_ip(self, *, context: CallContext | None = None) -> str:
        """Return the current IP address as seen from the Internet."""
        target = EndpointTarget("GET", routes.TOOLS_MY_IP)
        return await self._dispatcher.dispatch(target, ScalarOf(str), context)

    async def honeyscore(self, ip: str, *, context: CallContext | None = None) -> float:
        """Return the honeypot probability of a host, from 0.0 to 1.0."""
        _require(ip, "ip")
        target = EndpointTarget("GET", route(routes.LABS_HONEYSCORE, ip))
        return await self._dispatcher.dispatch(target, ScalarOf(float), context)

    # =========================================================================
    # Network Alert Methods
    # =========================================================================

    async def create_alert(
        self, alert: Alert, *, context: CallContext | None = None
    ) -> AlertDetails:
        """Create a network alert for IPs/netblocks to subscribe to changes in them."""
        target = EndpointTarget("POST", routes.SHODAN_ALERT).with_json(alert)
        return await self._dispatcher.dispatch(target, RecordOf(AlertDetails), context)

    async def alert_info(
        self, alert_id: str, *, context: CallContext | None = None
    ) -> AlertDetails:
        """Return a specific network alert."""
        _require(alert_id, "alert id")
        target = EndpointTarget("GET", route(routes.SHODAN_ALERT_ID_INFO, alert_id))
        return await self._dispatcher.dispatch(target, RecordOf(AlertDetails), context)

    async def delete_alert(
        self, alert_id: str, *, context: CallContext | None = None
    ) -> dict[str, Any]:
        """Remove a network alert."""
        _require(alert_id, "alert id")
        target = EndpointTarget("DELETE", route(routes.SHODAN_ALERT_ID, alert_id))
        return await self._dispatcher.dispatch(target, MappingOf(Any), context)

    async def list_alerts(self, *, context: CallContext | None = None) -> list[AlertDetails]:
        """List the network alerts currently active on the account."""
        target = EndpointTarget("GET", routes.SHODAN_ALERT_INFO)
        return await self._dispatcher.dispatch(target, SequenceOf(AlertDetails), context)

    async def list_triggers(self, *, context: CallContext | None = None) -> list[Trigger]:
        """List the triggers that can be enabled on network alerts."""
        target = EndpointTarget("GET", routes.SHODAN_ALERT_TRIGGERS)
        return await self._dispatcher.dispatch(target, SequenceOf(Trigger), context)

    async def create_alert_trigger(
        self, alert_id: str, trigger: str, *, context: CallContext | None = None
    ) -> SimpleResponse:
        """Enable notifications when the trigger is met."""
        return await self._trigger_action("PUT", alert_id, trigger, context)

    async def delete_alert_trigger(
        self, alert_id: str, trigger: str, *, context: CallContext | None = None
    ) -> SimpleResponse:
        """Stop notifications for the trigger."""
        return await self._trigger_action("DELETE", alert_id, trigger, context)

    async def create_trigger_ignore(
        self,
        alert_id: str,
        trigger: str,
        service: str,
        *,
        context: CallContext | None = None,
    ) -> SimpleResponse:
        """Ignore a service (``ip:port``) when it matches the trigger."""
        return await self._trigger_ignore("PUT", alert_id, trigger, service, context)

    async def delete_trigger_ignore(
        self,
        alert_id: str,
        trigger: str,
        service: str,
        *,
        context: CallContext | None = None,
    ) -> SimpleResponse:
        """Notify again about a previously ignored service."""
        return await self._trigger_ignore("DELETE", alert_id, trigger, service, context)

    async def _trigger_action(
        self, method: str, alert_id: str, trigger: str, context: CallContext | None
    ) -> SimpleResponse:
        _require(alert_id, "alert id")
        _require(trigger, "trigger name")
        target = EndpointTarget(
            method,  # type: ignore[arg-type]
            route(routes.SHODAN_ALERT_TRIGGER_ACTION, alert_id, trigger),
        )
        return await self._dispatcher.dispatch(target, RecordOf(SimpleResponse), context)

    async def _trigger_ignore(
        self,
        method: str,
        alert_id: str,
        trigger: str,
        service: str,
        context: CallContext | None,
    ) -> SimpleResponse:
        _require(alert_id, "alert id")
        _require(trigger, "trigger name")
        _require(service, "service")
        target = EndpointTarget(
            method,  # type: ignore[arg-type]
            route(routes.SHODAN_ALERT_TRIGGER_IGNORE, alert_id, trigger, service),
        )
        return await self._dispatcher.dispatch(target, RecordOf(SimpleResponse), context)

    # =========================================================================
    # Exploits API Methods
    # =========================================================================

    async def exploit_search(
        self, params: ExploitParams, *, context: CallContext | None = None
    ) -> ExploitResult:
        """Search exploits across the indexed sources, with optional facets."""
        return await self._exploits(routes.SEARCH, params, context)

    async def exploit_count(
        self, params: ExploitParams, *, context: CallContext | None = None
    ) -> ExploitResult:
        """Like ``exploit_search`` but without returning any matches."""
        return await self._exploits(routes.COUNT, params, context)

    async def _exploits(
        self, path: str, params: ExploitParams, context: CallContext | None
    ) -> ExploitResult:
        values = params.to_query()
        if not values:
            raise ShodanMissingParameterError("empty parameters")
        target = EndpointTarget("GET", path, origin=Origin.EXPLOITS, params=values)
        return await self._dispatcher.dispatch(target, RecordOf(ExploitResult), context)


def get_client() -> ShodanClient:
    """Get a client configured from environment variables.

    Raises:
        ShodanConfigError: SHODAN_API_KEY is not set.
    """
    return ShodanClient.from_env()
