from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OrderItem:
    """A line of an order: what is bought and how many."""

    identifier: str
    quantity: int


@dataclass(frozen=True, slots=True)
class Order:
    """Value object for the items a payment is made for.

    Any iterable of items is accepted and stored as a tuple, so the
    order cannot change after construction. items=None builds an empty
    order. An empty order is constructible; PaymentGateway.pay rejects it.
    """

    items: tuple[OrderItem, ...] = ()

    def __post_init__(self) -> None:
        if self.items is None:
            object.__setattr__(self, "items", ())
        elif not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: OrderItem) -> Order:
        return cls(items=items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)
