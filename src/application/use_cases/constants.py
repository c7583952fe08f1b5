"""Shared constants for application use cases."""

LEDGER_SUPPLIERS = "suppliers"
LEDGER_PERSONS = "persons"
LEDGER_SPENDS = "spends"

COUNTERPARTY_LEDGERS = (LEDGER_SUPPLIERS, LEDGER_PERSONS)
REPORT_LEDGERS = (LEDGER_SUPPLIERS, LEDGER_PERSONS, LEDGER_SPENDS)

UNKNOWN_COUNTERPARTY_NAME = "Unknown"


__all__ = [
    "LEDGER_SUPPLIERS",
    "LEDGER_PERSONS",
    "LEDGER_SPENDS",
    "COUNTERPARTY_LEDGERS",
    "REPORT_LEDGERS",
    "UNKNOWN_COUNTERPARTY_NAME",
]
