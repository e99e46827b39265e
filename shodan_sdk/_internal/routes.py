"""Shodan API origins and path templates."""

from urllib.parse import quote

API_ROOT = "https://api.shodan.io"
API_EXPLOITS = "https://exploits.shodan.io/api"

# Exploits API
SEARCH = "/search"
COUNT = "/count"

SHODAN_HOST_VIEW = "/shodan/host/{}"
SHODAN_HOST_COUNT = "/shodan/host/count"
SHODAN_HOST_SEARCH = "/shodan/host/search"
SHODAN_HOST_SEARCH_TOKENS = "/shodan/host/search/tokens"
SHODAN_PORTS = "/shodan/ports"
SHODAN_SERVICES = "/shodan/services"
SHODAN_PROTOCOLS = "/shodan/protocols"
SHODAN_SCAN = "/shodan/scan"
SHODAN_SCANS = "/shodan/scans"
SHODAN_SCAN_VIEW = "/shodan/scan/{}"
SHODAN_SCAN_INTERNET = "/shodan/scan/internet"
SHODAN_QUERY = "/shodan/query"
SHODAN_QUERY_SEARCH = "/shodan/query/search"
SHODAN_QUERY_TAGS = "/shodan/query/tags"
SHODAN_ALERT = "/shodan/alert"
SHODAN_ALERT_INFO = "/shodan/alert/info"
SHODAN_ALERT_ID = "/shodan/alert/{}"
SHODAN_ALERT_ID_INFO = "/shodan/alert/{}/info"
SHODAN_ALERT_TRIGGERS = "/shodan/alert/triggers"
# [alert_id, trigger]
SHODAN_ALERT_TRIGGER_ACTION = "/shodan/alert/{}/trigger/{}"
# [alert_id, trigger, ip:port]
SHODAN_ALERT_TRIGGER_IGNORE = "/shodan/alert/{}/trigger/{}/ignore/{}"
SHODAN_DATA = "/shodan/data"
SHODAN_DATASET = "/shodan/data/{}"
ORG = "/org"
ORG_MEMBER = "/org/member/{}"
ACCOUNT_PROFILE = "/account/profile"
DNS_DOMAIN = "/dns/domain/{}"
DNS_RESOLVE = "/dns/resolve"
DNS_REVERSE = "/dns/reverse"
TOOLS_HTTP_HEADERS = "/tools/httpheaders"
TOOLS_MY_IP = "/tools/myip"
API_INFO = "/api-info"
LABS_HONEYSCORE = "/labs/honeyscore/{}"


def route(template: str, *args: str) -> str:
    """Fill the slots of a path template.

    Each argument is percent-encoded as a single path segment, so values such
    as ``1.2.3.4:80`` or usernames with slashes cannot change the route.
    """
    return template.format(*(quote(str(arg), safe=":@") for arg in args))
