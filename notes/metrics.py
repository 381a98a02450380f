"""Prometheus metrics for the notes subsystem.

All metric objects are defined here so they can be imported from any module.
"""

from prometheus_client import Counter, Gauge

# ---------------------------------------------------------------------------
# Note operations
# ---------------------------------------------------------------------------

NOTE_OPERATIONS = Counter(
    "notes_operations_total",
    "Total note operations",
    ["operation"],  # create, delete, load
)

STORED_NOTES = Gauge(
    "notes_stored",
    "Number of notes in the last loaded or saved collection",
)

# ---------------------------------------------------------------------------
# Storage metrics
# ---------------------------------------------------------------------------

STORE_LOAD_FAILURES = Counter(
    "notes_store_load_failures_total",
    "Persisted note values that could not be read and were treated as empty",
    ["reason"],  # invalid_json, invalid_schema, unknown_version
)
