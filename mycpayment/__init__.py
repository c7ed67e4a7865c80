"""Merchant, payment and settlement ledger module: records, storage, messages, queries and genesis."""

__version__ = "0.1.0"
__all__ = ["address", "errors", "keeper", "module", "msg_server", "query", "store", "types"]