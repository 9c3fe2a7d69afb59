"""Configuration module for the ledger service."""

from ipledger.api.config.settings import LedgerConfig, configure_logging, get_allowed_origins, get_ledger

__all__ = ["LedgerConfig", "configure_logging", "get_allowed_origins", "get_ledger"]
