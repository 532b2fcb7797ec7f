from prometheus_client import Counter

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

STORE_OPERATIONS = Counter(
    "inventory_store_operations_total",
    "Total number of inventory store operations",
    ["operation", "outcome"],
)

VALIDATION_FAILURES = Counter(
    "product_validation_failures_total",
    "Total number of rejected product inputs, per violated rule",
    ["issue"],
)
