"""Constants and configuration for the Wildberries Supplies API."""

# Supplies API host
SUPPLIES_API_URL = "https://supplies-api.wildberries.ru"

# API Paths
API_PATHS = {
    "acceptance_coefficients": "/api/v1/acceptance/coefficients",
    "acceptance_options": "/api/v1/acceptance/options",
    "warehouses": "/api/v1/warehouses",
    "supplies": "/api/v1/supplies",
    "supply_detail": "/api/v1/supplies/{supply_id}",
}

# Default request timeout (seconds)
DEFAULT_TIMEOUT = 30

# Request limits enforced before dispatch
MAX_ACCEPTANCE_OPTION_ITEMS = 5_000
MAX_SUPPLIES_LIMIT = 1_000

# Supply list defaults
DEFAULT_SUPPLIES_LIMIT = 1_000
DEFAULT_SUPPLIES_OFFSET = 0

# Supply statuses (statusIDs in the supplies list filter)
SUPPLY_STATUSES = {
    1: "Not planned",
    2: "Planned",
    3: "Unloading allowed",
    4: "Accepting",
    5: "Accepted",
    6: "Unloaded at the gate",
}

DEFAULT_SUPPLY_STATUS_IDS = list(SUPPLY_STATUSES)

# Seconds to wait when the server does not say
DEFAULT_RETRY_AFTER = 60
