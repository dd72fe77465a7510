"""Abstract order collaborator.

The sink is atomic from the storefront's point of view: it either
returns a confirmation or raises SinkFailure.  Correcting a partially
written order is the sink's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.order import OrderConfirmation, OrderLine
from purplehaze.domain.model.value_objects import Money


class OrderSink(ABC):

    @abstractmethod
    def submit_order(
        self,
        identity: Identity,
        line_items: list[OrderLine],
        total: Money,
    ) -> OrderConfirmation:
        """Record an order; raises SinkFailure on any rejection."""
