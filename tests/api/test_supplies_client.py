"""Unit tests for the Supplies API client."""

from datetime import date, datetime
from unittest.mock import Mock

import pytest

from wb_supplies_mcp.api.base import HTTPTransport
from wb_supplies_mcp.api.supplies import SuppliesAPIClient
from wb_supplies_mcp.exceptions import InvalidArgumentError


@pytest.fixture
def transport():
    """Create mock transport."""
    return Mock(spec=HTTPTransport)


@pytest.fixture
def client(transport):
    """Create supplies client over the mock transport."""
    return SuppliesAPIClient(transport)


class TestAcceptanceCoefficients:
    """Test acceptance coefficient requests."""

    def test_all_warehouses(self, client, transport):
        """No warehouse IDs means no query parameters."""
        transport.get.return_value = [{"warehouseID": 507, "coefficient": 0}]

        result = client.acceptance_coefficients([])

        transport.get.assert_called_once_with("/api/v1/acceptance/coefficients", None)
        assert result == [{"warehouseID": 507, "coefficient": 0}]

    def test_default_argument(self, client, transport):
        client.acceptance_coefficients()

        transport.get.assert_called_once_with("/api/v1/acceptance/coefficients", None)

    def test_warehouse_ids_joined(self, client, transport):
        """Warehouse IDs are sent as a comma-joined list."""
        client.acceptance_coefficients([1, 2, 3])

        transport.get.assert_called_once_with(
            "/api/v1/acceptance/coefficients", {"warehouseIDs": "1,2,3"}
        )

    def test_transport_error_propagates(self, client, transport):
        transport.get.side_effect = ConnectionError("boom")

        with pytest.raises(ConnectionError):
            client.acceptance_coefficients([1])


class TestAcceptanceOptions:
    """Test acceptance option requests."""

    def test_items_sent_as_body(self, client, transport):
        items = [{"barcode": "2000000000012", "quantity": 3}]
        transport.post.return_value = {"result": []}

        result = client.acceptance_options(items)

        transport.post.assert_called_once_with("/api/v1/acceptance/options", None, items)
        assert result == {"result": []}

    def test_warehouse_id_query(self, client, transport):
        items = [{"barcode": "2000000000012", "quantity": 3}]

        client.acceptance_options(items, warehouse_id=507)

        transport.post.assert_called_once_with(
            "/api/v1/acceptance/options", {"warehouseID": 507}, items
        )

    def test_max_items_accepted(self, client, transport):
        items = [{"barcode": str(i), "quantity": 1} for i in range(5000)]

        client.acceptance_options(items)

        transport.post.assert_called_once()

    def test_too_many_items(self, client, transport):
        """More than 5000 items is rejected before any request is made."""
        items = [{"barcode": str(i), "quantity": 1} for i in range(5001)]

        with pytest.raises(InvalidArgumentError) as exc_info:
            client.acceptance_options(items, warehouse_id=507)

        assert "5000" in str(exc_info.value)
        assert exc_info.value.limit == 5000
        transport.post.assert_not_called()


class TestWarehouses:
    """Test warehouse list requests."""

    def test_list_warehouses(self, client, transport):
        transport.get.return_value = [{"ID": 507, "name": "Коледино"}]

        result = client.list_warehouses()

        transport.get.assert_called_once_with("/api/v1/warehouses")
        assert result[0]["ID"] == 507


class TestSupplies:
    """Test supply list and detail requests."""

    def test_list_supplies_defaults(self, client, transport):
        client.list_supplies()

        transport.post.assert_called_once_with(
            "/api/v1/supplies",
            {"limit": 1000, "offset": 0},
            {"dates": [], "statusIDs": [1, 2, 3, 4, 5, 6]},
        )

    def test_list_supplies_offset_always_zero(self, client, transport):
        """The query offset stays 0 whatever offset is given."""
        client.list_supplies(offset=50)

        params = transport.post.call_args[0][1]
        assert params == {"limit": 1000, "offset": 0}

    def test_list_supplies_filters(self, client, transport):
        dates = [{"from": "2025-01-01", "till": "2025-01-31", "type": "createDate"}]

        client.list_supplies(dates=dates, limit=10, status_ids=[2, 3])

        transport.post.assert_called_once_with(
            "/api/v1/supplies",
            {"limit": 10, "offset": 0},
            {"dates": dates, "statusIDs": [2, 3]},
        )

    def test_list_supplies_date_values_serialized(self, client, transport):
        client.list_supplies(dates=[date(2025, 1, 1), datetime(2025, 1, 2, 10, 30)])

        body = transport.post.call_args[0][2]
        assert body["dates"] == ["2025-01-01", "2025-01-02T10:30:00"]

    def test_list_supplies_none_values(self, client, transport):
        """None limit and offset are left out of the query."""
        client.list_supplies(limit=None, offset=None, status_ids=None)

        transport.post.assert_called_once_with(
            "/api/v1/supplies", {}, {"dates": [], "statusIDs": None}
        )

    def test_list_supplies_limit_boundary(self, client, transport):
        client.list_supplies(limit=1000)

        transport.post.assert_called_once()

    def test_list_supplies_limit_exceeded(self, client, transport):
        with pytest.raises(InvalidArgumentError) as exc_info:
            client.list_supplies(limit=1001)

        assert "1000" in str(exc_info.value)
        transport.post.assert_not_called()

    def test_invalid_argument_is_value_error(self, client):
        with pytest.raises(ValueError):
            client.list_supplies(limit=5000)

    def test_get_supply_detail(self, client, transport):
        transport.get.return_value = {"statusID": 2}

        result = client.get_supply_detail(42)

        transport.get.assert_called_once_with("/api/v1/supplies/42")
        assert result == {"statusID": 2}
