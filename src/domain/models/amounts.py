"""Multi-commodity amounts."""

from collections.abc import Iterable, Iterator, Mapping
from decimal import Decimal


class Amount(Mapping[str, Decimal]):
    """Immutable mapping from commodity code to an exact quantity.

    Commodities keep their insertion order so rendering is deterministic.
    Quantities in different commodities are never merged into one number.
    """

    __slots__ = ("_quantities",)

    def __init__(
        self,
        quantities: Mapping[str, Decimal]
        | Iterable[tuple[str, Decimal]]
        | None = None,
    ) -> None:
        items = (
            quantities.items()
            if isinstance(quantities, Mapping)
            else quantities or ()
        )
        merged: dict[str, Decimal] = {}
        for commodity, quantity in items:
            if commodity in merged:
                merged[commodity] += quantity
            else:
                merged[commodity] = quantity
        self._quantities = merged

    @classmethod
    def of(cls, quantity: Decimal, commodity: str) -> "Amount":
        """Build an amount holding a single commodity."""
        return cls({commodity: quantity})

    def __getitem__(self, commodity: str) -> Decimal:
        return self._quantities[commodity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._quantities)

    def __len__(self) -> int:
        return len(self._quantities)

    def __hash__(self) -> int:
        return hash(frozenset(self._quantities.items()))

    def __repr__(self) -> str:
        return f"Amount({self._quantities!r})"

    def __add__(self, other: object) -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        return Amount([*self.items(), *other.items()])

    @property
    def commodities(self) -> tuple[str, ...]:
        """Return the commodity codes in insertion order."""
        return tuple(self._quantities)


def sum_amounts(amounts: Iterable[Amount]) -> Amount:
    """Merge amounts with commodity-wise addition.

    Args:
        amounts: Amounts to merge.

    Returns:
        Amount: Commodity-wise total, empty when no amounts are given.
    """
    pairs: list[tuple[str, Decimal]] = []
    for amount in amounts:
        pairs.extend(amount.items())
    return Amount(pairs)


__all__ = ["Amount", "sum_amounts"]
