"""
Policy Engine
Loads ledger policy from YAML configuration
Owner identity, genesis height and field limits come from policy, not code
"""

import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime


DEFAULT_LIMITS = {
    "name": 100,
    "specialization": 100,
    "bar_number": 50,
    "description": 500,
    "terms": 500,
    "outcome": 500,
}


class PolicyEngine:
    """
    Policy engine for the patent dispute ledger
    """

    def __init__(self, policy_config_path: Optional[str] = None):
        """
        Initialize policy engine with configuration file

        Args:
            policy_config_path: Path to ledger_policy.yaml
        """
        if policy_config_path is None:
            policy_config_path = os.getenv(
                "LEDGER_POLICY_PATH",
                str(Path(__file__).parent.parent.parent / "config" / "ledger_policy.yaml")
            )

        self.policy_config_path = policy_config_path
        self.policy_config: Dict[str, Any] = {}
        self.policy_version: str = "1.0.0"
        self.last_loaded: Optional[datetime] = None

        self._load_policies()

    def _load_policies(self) -> None:
        """Load policy configuration from YAML file"""
        try:
            with open(self.policy_config_path, 'r', encoding='utf-8') as f:
                self.policy_config = yaml.safe_load(f) or {}

            self.last_loaded = datetime.now()
            self.policy_version = str(self.policy_config.get('version', '1.0.0'))
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Policy configuration file not found: {e}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing policy YAML: {e}")

    def reload_policies(self) -> None:
        """Reload policies from disk"""
        self._load_policies()

    # Ledger identity

    def get_contract_owner(self) -> str:
        """Get the privileged owner identity"""
        owner = self.policy_config.get('ledger', {}).get('contract_owner')
        if not owner:
            raise ValueError("Policy does not define ledger.contract_owner")
        return owner

    def get_genesis_height(self) -> int:
        return int(self.policy_config.get('ledger', {}).get('genesis_height', 0))

    # Field limits

    def get_max_length(self, field: str) -> int:
        """
        Get the maximum accepted length for a text field

        Args:
            field: One of 'name', 'specialization', 'bar_number',
                'description', 'terms', 'outcome'
        """
        limits = self.policy_config.get('limits', {})
        if field in limits:
            return int(limits[field])
        if field not in DEFAULT_LIMITS:
            raise KeyError(f"No length limit defined for field: {field}")
        return DEFAULT_LIMITS[field]

    def check_length(self, field: str, value: str) -> bool:
        """Check that a text value fits the policy limit for its field"""
        return len(value) <= self.get_max_length(field)

    # Policy Metadata

    def get_policy_version(self) -> str:
        """Get current policy version"""
        return self.policy_version

    def get_last_loaded_time(self) -> Optional[datetime]:
        """Get when policies were last loaded"""
        return self.last_loaded
