"""Income tax calculation from a progressive bracket table."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

from payrun_engine.calculators.money import round2
from payrun_engine.calculators.types import TaxBracket

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class InvalidTaxTableError(ValueError):
    """Raised when a bracket table is malformed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid tax bracket table: {reason}")


@dataclass(frozen=True)
class TaxBracketTable:
    """Immutable, ordered set of tax brackets.

    Brackets must start at 0, ascend without overlapping, and only the last
    one may be unbounded. Gaps between brackets are allowed; amounts falling
    in a gap take the fallback path of ``TaxCalculator.calculate_tax``.
    """

    brackets: tuple[TaxBracket, ...]

    def __post_init__(self) -> None:
        """Validate bracket ordering and bounds."""
        if not self.brackets:
            raise InvalidTaxTableError("at least one bracket is required")
        if self.brackets[0].min_amount != 0:
            raise InvalidTaxTableError("first bracket must start at 0")

        for i, bracket in enumerate(self.brackets):
            if not 0 <= bracket.rate <= 1:
                raise InvalidTaxTableError(f"bracket {i} rate {bracket.rate} outside [0, 1]")
            if bracket.base < 0:
                raise InvalidTaxTableError(f"bracket {i} has negative base {bracket.base}")
            # Earlier brackets are bounded, or the loop has already raised
            if i > 0 and bracket.min_amount <= self.brackets[i - 1].max_amount:
                raise InvalidTaxTableError(f"bracket {i} overlaps bracket {i - 1}")
            if bracket.max_amount is None:
                if i != len(self.brackets) - 1:
                    raise InvalidTaxTableError(f"bracket {i} is unbounded but not last")
            elif bracket.max_amount < bracket.min_amount:
                raise InvalidTaxTableError(f"bracket {i} max is below its min")

    def __iter__(self) -> Iterator[TaxBracket]:
        return iter(self.brackets)

    def __len__(self) -> int:
        return len(self.brackets)

    def find(self, amount: Decimal) -> TaxBracket | None:
        """Return the first bracket containing ``amount``, or None."""
        return next((b for b in self.brackets if b.contains(amount)), None)

    @classmethod
    def from_payload(cls, payload: Iterable[dict[str, Any]]) -> TaxBracketTable:
        """Build a table from JSON-style rows.

        Each row is ``{"min": ..., "max": ..., "rate": ..., "base": ...}``;
        a missing or null ``max`` means no upper limit.
        """
        brackets = []
        for b in payload:
            try:
                brackets.append(
                    TaxBracket(
                        min_amount=Decimal(str(b["min"])),
                        max_amount=Decimal(str(b["max"])) if b.get("max") is not None else None,
                        rate=Decimal(str(b["rate"])),
                        base=Decimal(str(b.get("base", 0))),
                    )
                )
            except KeyError as e:
                raise InvalidTaxTableError(f"bracket row missing field {e}") from None
        return cls(brackets=tuple(brackets))

    @classmethod
    def from_json_file(cls, path: str | Path) -> TaxBracketTable:
        """Load a table from a JSON file holding a list of bracket rows."""
        with open(path, encoding="utf-8") as f:
            return cls.from_payload(json.load(f))


DEFAULT_TAX_BRACKETS = TaxBracketTable(
    brackets=(
        TaxBracket(Decimal("0"), Decimal("370"), Decimal("0"), Decimal("0")),
        TaxBracket(Decimal("370.01"), Decimal("900"), Decimal("0.10"), Decimal("0")),
        # 10% of (900 - 370)
        TaxBracket(Decimal("900.01"), Decimal("1500"), Decimal("0.19"), Decimal("53")),
        # 53 + 19% of (1500 - 900)
        TaxBracket(Decimal("1500.01"), Decimal("3000"), Decimal("0.325"), Decimal("167")),
        # 167 + 32.5% of (3000 - 1500)
        TaxBracket(Decimal("3000.01"), Decimal("5000"), Decimal("0.37"), Decimal("654.5")),
        # 654.5 + 37% of (5000 - 3000)
        TaxBracket(Decimal("5000.01"), None, Decimal("0.45"), Decimal("1394.5")),
    )
)


class TaxCalculator:
    """Calculates income tax for a pay period's gross amount.

    The bracket table is injected so alternate regimes can be tested without
    touching the defaults.
    """

    def __init__(self, table: TaxBracketTable = DEFAULT_TAX_BRACKETS):
        self.table = table

    def calculate_tax(self, gross: Decimal) -> Decimal:
        """Calculate tax owed on ``gross``.

        Within a bracket: TAX = base + (gross - min + 0.01) * rate, where the
        0.01 restores the cent dropped between consecutive bracket bounds.
        Gross is rounded to cents first, so sub-cent input is taxed as the
        nearest cent (half-up) and never falls between brackets.
        """
        if gross <= 0:
            return Decimal("0")

        amount = round2(gross)
        bracket = self.table.find(amount)

        if bracket is None:
            # Gap or uncovered amount: highest bracket, no cent adjustment
            highest = self.table.brackets[-1]
            logger.warning(
                "No tax bracket contains %s; using highest bracket from %s",
                amount,
                highest.min_amount,
            )
            excess = amount - highest.min_amount
            return round2(highest.base + excess * highest.rate)

        if bracket.rate == 0:
            return Decimal("0")

        excess = amount - bracket.min_amount + CENT
        return round2(bracket.base + excess * bracket.rate)


_default_calculator = TaxCalculator()


def calculate_tax(gross: Decimal) -> Decimal:
    """Calculate tax using the default bracket table."""
    return _default_calculator.calculate_tax(gross)
