"""Supplies API client for Wildberries FBW supply planning."""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..constants import (
    API_PATHS,
    DEFAULT_SUPPLIES_LIMIT,
    DEFAULT_SUPPLIES_OFFSET,
    DEFAULT_SUPPLY_STATUS_IDS,
    MAX_ACCEPTANCE_OPTION_ITEMS,
    MAX_SUPPLIES_LIMIT,
)
from ..utils.validators import validate_max_items, validate_max_value
from .base import HTTPTransport

logger = logging.getLogger(__name__)


def _serialize_dates(dates: Iterable[Any]) -> List[Any]:
    # date and datetime values become ISO 8601 strings, filter objects pass through
    return [value.isoformat() if isinstance(value, date) else value for value in dates]


class SuppliesAPIClient:
    """Client for the Wildberries Supplies API.

    Every method maps to a single request on the injected transport and
    returns its result as-is. Transport errors are not caught here.
    """

    def __init__(self, transport: HTTPTransport) -> None:
        self.transport = transport

    def acceptance_coefficients(self, warehouse_ids: Sequence[int] = ()) -> Any:
        """Get acceptance coefficients for the next 14 days.

        Acceptance for a supply is available only when the coefficient is 0 or 1
        and allowUnload is true.

        Args:
            warehouse_ids: Warehouse IDs. All warehouses are returned when empty.
        """
        params = {}
        if warehouse_ids:
            params["warehouseIDs"] = ",".join(str(warehouse_id) for warehouse_id in warehouse_ids)

        return self.transport.get(API_PATHS["acceptance_coefficients"], params or None)

    def acceptance_options(
        self,
        items: Sequence[Dict[str, Any]],
        warehouse_id: Optional[int] = None,
    ) -> Any:
        """Get warehouses and packaging types available for a supply.

        Args:
            items: Goods and planned quantities, [{"barcode": ..., "quantity": ...}]
            warehouse_id: Warehouse ID. All warehouses are returned when omitted.

        Raises:
            InvalidArgumentError: More than 5000 items requested
        """
        validate_max_items(items, MAX_ACCEPTANCE_OPTION_ITEMS, "items")

        params = None
        if warehouse_id is not None:
            params = {"warehouseID": warehouse_id}

        logger.debug(f"Requesting acceptance options for {len(items)} items")
        return self.transport.post(API_PATHS["acceptance_options"], params, list(items))

    def list_warehouses(self) -> Any:
        """Get the list of Wildberries warehouses."""
        return self.transport.get(API_PATHS["warehouses"])

    def list_supplies(
        self,
        dates: Sequence[Any] = (),
        limit: Optional[int] = DEFAULT_SUPPLIES_LIMIT,
        offset: Optional[int] = DEFAULT_SUPPLIES_OFFSET,
        status_ids: Optional[Sequence[int]] = tuple(DEFAULT_SUPPLY_STATUS_IDS),
    ) -> Any:
        """Get the list of supplies.

        Args:
            dates: Date filters
            limit: Number of supplies in the response, at most 1000
            offset: Accepted for compatibility; the query always carries offset=0
            status_ids: Supply status IDs to include

        Raises:
            InvalidArgumentError: limit is above 1000
        """
        validate_max_value(limit, MAX_SUPPLIES_LIMIT, "limit")

        params: Dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        # The service is always queried from the first supply.
        if offset is not None:
            params["offset"] = DEFAULT_SUPPLIES_OFFSET
        body = {
            "dates": _serialize_dates(dates),
            "statusIDs": list(status_ids) if status_ids is not None else None,
        }

        return self.transport.post(API_PATHS["supplies"], params, body)

    def get_supply_detail(self, supply_id: int) -> Any:
        """Get details of a single supply.

        Args:
            supply_id: Supply ID
        """
        return self.transport.get(API_PATHS["supply_detail"].format(supply_id=supply_id))
