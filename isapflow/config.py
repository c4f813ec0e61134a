"""Configuration classes for isapflow components."""

from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Numeric configuration shared by the flow reductions."""

    # Capacity used for edges that must never limit the flow. Python ints do
    # not overflow, but every finite quantity in a problem instance has to
    # stay strictly below this value or reduction results are wrong.
    infinite_capacity: int = 10**9

    def fits(self, value: int) -> bool:
        """Return True if `value` stays strictly below the infinite sentinel."""
        return value < self.infinite_capacity


# Global configuration instance
FLOW_CONFIG = FlowConfig()
