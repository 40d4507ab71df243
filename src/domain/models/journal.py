"""Domain models for a parsed ledger journal."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.amounts import Amount


@dataclass(frozen=True)
class Include:
    """Header directive naming another ledger file.

    The path is recorded verbatim and never followed.
    """

    path: str


@dataclass(frozen=True)
class CommodityDeclaration:
    """Header directive declaring a commodity format, kept verbatim."""

    spec: str


Header = Include | CommodityDeclaration


@dataclass(frozen=True)
class Posting:
    """One leg of a transaction or budget.

    Attributes:
        account: Colon-delimited account path.
        amount: Quantity posted to the account.
        purchase_price: Optional total cost paid in another commodity.
    """

    account: str
    amount: Amount
    purchase_price: Amount | None = None


@dataclass(frozen=True)
class Transaction:
    """Dated movement of value across its postings."""

    date: date
    description: str
    postings: tuple[Posting, ...] = ()


@dataclass(frozen=True)
class Budget:
    """Recurring target postings for a free-text period label."""

    period: str
    postings: tuple[Posting, ...] = ()


@dataclass(frozen=True)
class PriceObservation:
    """Price of one unit of a commodity on a given date.

    Attributes:
        commodity: Commodity being priced.
        date: Observation date.
        price: Unit price expressed in the reference commodity.
        reference_commodity: Commodity the price is quoted in.
    """

    commodity: str
    date: date
    price: Decimal
    reference_commodity: str


class PriceTable(Mapping[str, tuple[PriceObservation, ...]]):
    """Read-only price observations keyed by commodity.

    Unlike ``types.MappingProxyType`` the table pickles, so journals can be
    stored by ``st.cache_data``.
    """

    __slots__ = ("_observations",)

    def __init__(
        self,
        observations: Mapping[str, tuple[PriceObservation, ...]]
        | None = None,
    ) -> None:
        self._observations = {
            commodity: tuple(entries)
            for commodity, entries in (observations or {}).items()
        }

    def __getitem__(self, commodity: str) -> tuple[PriceObservation, ...]:
        return self._observations[commodity]

    def __iter__(self) -> Iterator[str]:
        return iter(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def __repr__(self) -> str:
        return f"PriceTable({self._observations!r})"


@dataclass(frozen=True)
class Journal:
    """Parsed ledger contents, the sole input to reporting."""

    headers: tuple[Header, ...] = ()
    prices: PriceTable = field(default_factory=PriceTable)
    budgets: tuple[Budget, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def prices_for(self, commodity: str) -> tuple[PriceObservation, ...]:
        """Return the recorded observations for a commodity in file order."""
        return self.prices.get(commodity, ())


__all__ = [
    "Include",
    "CommodityDeclaration",
    "Header",
    "Posting",
    "Transaction",
    "Budget",
    "PriceObservation",
    "PriceTable",
    "Journal",
]
