"""Type definitions for the GMV campaign domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Snapshot:
    """Today's performance of the campaign. Rebuilt on every request."""
    cost: float
    orders: int
    gross: float

    @property
    def cpo(self) -> float:
        """Cost per order (0 when there are no orders)."""
        return self.cost / self.orders if self.orders > 0 else 0.0

    @property
    def roi(self) -> float:
        """Gross revenue as a percentage of cost (0 when nothing was spent)."""
        return self.gross / self.cost * 100 if self.cost > 0 else 0.0


@dataclass(frozen=True)
class BudgetState:
    """Daily budget currently configured on the campaign."""
    current_budget: float
