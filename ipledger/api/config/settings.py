"""
Service configuration.
Provides a singleton ledger instance built from environment settings.
"""

import logging
import os
from typing import Optional

import structlog
from dotenv import load_dotenv

from ipledger.chain.context import BlockHeight, ChainContext
from ipledger.governance.policy_engine import PolicyEngine
from ipledger.ledger import IPLedger

# Load environment variables
load_dotenv()


def configure_logging() -> None:
    """Configure structlog for JSON output at LOG_LEVEL (default INFO)."""
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def get_allowed_origins() -> list:
    return [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]


class LedgerConfig:
    """Singleton class for managing the service's ledger instance."""

    _instance: Optional[IPLedger] = None

    @classmethod
    def get_ledger(cls) -> IPLedger:
        """
        Get or create the ledger instance.

        CONTRACT_OWNER overrides the owner named in the policy file.

        Returns:
            IPLedger: Ledger instance
        """
        if cls._instance is None:
            policy = PolicyEngine(os.getenv("LEDGER_POLICY_PATH"))
            owner = os.getenv("CONTRACT_OWNER") or policy.get_contract_owner()
            chain = ChainContext(
                contract_owner=owner,
                height=BlockHeight(policy.get_genesis_height()),
            )
            cls._instance = IPLedger(policy_engine=policy, chain=chain)

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the current instance so the next call builds a fresh ledger."""
        cls._instance = None


# Convenience function for FastAPI dependencies
def get_ledger() -> IPLedger:
    """
    Get the service ledger.

    Returns:
        IPLedger: Ledger instance
    """
    return LedgerConfig.get_ledger()
