"""HTTP service for the patent dispute ledger."""
