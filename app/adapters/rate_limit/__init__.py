"""Rate limiting adapters.

The faucet starts with an in-memory, per-process limiter; the abstract
interface leaves room for a shared store without changing the service layer.
"""

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitDecision
from app.adapters.rate_limit.in_memory import InMemoryAddressRateLimiter

__all__ = ["AbstractRateLimiter", "InMemoryAddressRateLimiter", "RateLimitDecision"]
