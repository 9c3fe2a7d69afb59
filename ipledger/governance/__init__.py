from .policy_engine import PolicyEngine

__all__ = ["PolicyEngine"]
