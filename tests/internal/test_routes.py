"""Tests for the route table."""

from shodan_sdk._internal import routes
from shodan_sdk._internal.routes import route


class TestRoute:
    """Tests for route() template substitution."""

    def test_single_slot(self):
        """Should fill a single slot."""
        assert route(routes.SHODAN_HOST_VIEW, "1.2.3.4") == "/shodan/host/1.2.3.4"

    def test_multiple_slots(self):
        """Should fill slots in order."""
        path = route(routes.SHODAN_ALERT_TRIGGER_IGNORE, "ALERT1", "new_service", "1.2.3.4:80")
        assert path == "/shodan/alert/ALERT1/trigger/new_service/ignore/1.2.3.4:80"

    def test_escapes_path_separators(self):
        """Should not let an argument add path segments."""
        assert route(routes.ORG_MEMBER, "a/../b") == "/org/member/a%2F..%2Fb"

    def test_escapes_query_characters(self):
        """Should not let an argument start a query string."""
        assert route(routes.SHODAN_DATASET, "x?y=1") == "/shodan/data/x%3Fy%3D1"

    def test_origins(self):
        """Should point at the public origins."""
        assert routes.API_ROOT == "https://api.shodan.io"
        assert routes.API_EXPLOITS == "https://exploits.shodan.io/api"
