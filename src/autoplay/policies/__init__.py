"""Move policies for headless autoplay."""

from src.autoplay.policies.random import policy_random
from src.autoplay.policies.greedy import policy_greedy

__all__ = ["policy_random", "policy_greedy"]
