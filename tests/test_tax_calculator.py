"""Unit tests for TaxCalculator.

Tests the bracket lookup with the default table and with injected tables.
"""

import json
from decimal import Decimal

import pytest

from payrun_engine.calculators.tax_calculator import (
    DEFAULT_TAX_BRACKETS,
    InvalidTaxTableError,
    TaxBracketTable,
    TaxCalculator,
    calculate_tax,
)
from payrun_engine.calculators.types import TaxBracket


class TestDefaultTable:
    """Test the default bracket table."""

    def test_brackets_are_contiguous_to_the_cent(self):
        """Each bracket starts one cent after the previous one ends."""
        brackets = DEFAULT_TAX_BRACKETS.brackets
        for prev, nxt in zip(brackets, brackets[1:]):
            assert nxt.min_amount == prev.max_amount + Decimal("0.01")

    def test_bases_are_cumulative(self):
        """Each base is the previous base plus the previous bracket's full tax."""
        brackets = DEFAULT_TAX_BRACKETS.brackets
        for prev, nxt in zip(brackets[1:], brackets[2:]):
            width = prev.max_amount - prev.min_amount + Decimal("0.01")
            assert nxt.base == prev.base + prev.rate * width

    def test_last_bracket_unbounded(self):
        assert DEFAULT_TAX_BRACKETS.brackets[-1].max_amount is None


class TestProgressiveTaxCalculation:
    """Test tax amounts across the default brackets."""

    def test_zero_or_negative_gross(self):
        """Zero and negative wages return zero tax."""
        assert calculate_tax(Decimal("0")) == Decimal("0")
        assert calculate_tax(Decimal("-100")) == Decimal("0")

    def test_tax_free_threshold(self):
        """Nothing owed up to 370."""
        assert calculate_tax(Decimal("200")) == Decimal("0")
        assert calculate_tax(Decimal("370")) == Decimal("0")

    def test_ten_percent_bracket(self):
        """10% of (gross - 370.01 + 0.01)."""
        assert calculate_tax(Decimal("400")) == Decimal("3.00")
        assert calculate_tax(Decimal("500")) == Decimal("13.00")
        assert calculate_tax(Decimal("900")) == Decimal("53.00")

    def test_nineteen_percent_bracket(self):
        assert calculate_tax(Decimal("1000")) == Decimal("72.00")
        assert calculate_tax(Decimal("1200")) == Decimal("110.00")
        assert calculate_tax(Decimal("1500")) == Decimal("167.00")

    def test_higher_brackets(self):
        assert calculate_tax(Decimal("2000")) == Decimal("329.50")
        assert calculate_tax(Decimal("4000")) == Decimal("1024.50")
        assert calculate_tax(Decimal("6000")) == Decimal("1844.50")

    @pytest.mark.parametrize(
        "upper, next_min",
        [("370", "370.01"), ("900", "900.01"), ("1500", "1500.01"), ("3000", "3000.01"), ("5000", "5000.01")],
    )
    def test_continuous_across_boundaries(self, upper, next_min):
        """Crossing a boundary moves tax by well under a cent."""
        below = calculate_tax(Decimal(upper))
        above = calculate_tax(Decimal(next_min))
        assert Decimal("0") <= above - below <= Decimal("0.01")

    def test_reference_cases(self):
        """Alice: 1325 -> 133.75. Bob: 2328 -> 436.10."""
        assert calculate_tax(Decimal("1325")) == Decimal("133.75")
        assert calculate_tax(Decimal("2328")) == Decimal("436.10")

    def test_sub_cent_gross_rounded_before_lookup(self):
        """Amounts between bracket bounds resolve to a bracket, not the fallback."""
        assert calculate_tax(Decimal("370.004")) == Decimal("0")
        assert calculate_tax(Decimal("900.006")) == Decimal("53.00")


class TestInjectedTable:
    """Test calculation with alternate tax regimes."""

    def test_flat_rate_table(self):
        """Single unbounded bracket."""
        table = TaxBracketTable(
            brackets=(TaxBracket(Decimal("0"), None, Decimal("0.20"), Decimal("0")),)
        )
        calc = TaxCalculator(table)
        # 20% of (1000 - 0 + 0.01)
        assert calc.calculate_tax(Decimal("1000")) == Decimal("200.00")

    def test_fallback_uses_highest_bracket_without_cent_adjustment(self, caplog):
        """Amounts above a bounded table take the highest bracket formula."""
        table = TaxBracketTable(
            brackets=(
                TaxBracket(Decimal("0"), Decimal("100"), Decimal("0"), Decimal("0")),
                TaxBracket(Decimal("100.01"), Decimal("1000"), Decimal("0.9"), Decimal("0")),
            )
        )
        calc = TaxCalculator(table)

        with caplog.at_level("WARNING"):
            tax = calc.calculate_tax(Decimal("2000"))

        # 0.9 * (2000 - 100.01) = 1709.991; with the cent adjustment it would be 1710.00
        assert tax == Decimal("1709.99")
        assert "No tax bracket contains" in caplog.text

    def test_in_bracket_uses_cent_adjustment(self):
        table = TaxBracketTable(
            brackets=(
                TaxBracket(Decimal("0"), Decimal("100"), Decimal("0"), Decimal("0")),
                TaxBracket(Decimal("100.01"), Decimal("1000"), Decimal("0.9"), Decimal("0")),
            )
        )
        # 0.9 * (1000 - 100.01 + 0.01)
        assert TaxCalculator(table).calculate_tax(Decimal("1000")) == Decimal("810.00")

    def test_sub_cent_gross_taxed_as_nearest_cent(self):
        """9.996 is taxed as 10.00: 0.5 * 10.01 = 5.005, rounded up."""
        table = TaxBracketTable(
            brackets=(TaxBracket(Decimal("0"), None, Decimal("0.5"), Decimal("0")),)
        )
        # On the raw amount it would be 0.5 * 10.006 = 5.003, i.e. 5.00
        assert TaxCalculator(table).calculate_tax(Decimal("9.996")) == Decimal("5.01")

    def test_from_payload(self):
        """Rows parse like rule payloads; null max means unbounded."""
        table = TaxBracketTable.from_payload(
            [
                {"min": 0, "max": 500, "rate": 0, "base": 0},
                {"min": 500.01, "max": None, "rate": 0.25, "base": 0},
            ]
        )
        assert len(table) == 2
        assert table.brackets[1].min_amount == Decimal("500.01")
        assert table.brackets[1].max_amount is None
        assert TaxCalculator(table).calculate_tax(Decimal("600")) == Decimal("25.00")

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "brackets.json"
        path.write_text(
            json.dumps(
                [
                    {"min": 0, "max": 370, "rate": 0, "base": 0},
                    {"min": 370.01, "rate": 0.1, "base": 0},
                ]
            )
        )
        table = TaxBracketTable.from_json_file(path)
        assert table.brackets[-1].max_amount is None
        assert TaxCalculator(table).calculate_tax(Decimal("900")) == Decimal("53.00")


class TestTableValidation:
    """Test bracket table validation."""

    def test_empty_table_rejected(self):
        with pytest.raises(InvalidTaxTableError):
            TaxBracketTable(brackets=())

    def test_must_start_at_zero(self):
        with pytest.raises(InvalidTaxTableError, match="start at 0"):
            TaxBracketTable(
                brackets=(TaxBracket(Decimal("1"), None, Decimal("0.1"), Decimal("0")),)
            )

    def test_overlap_rejected(self):
        with pytest.raises(InvalidTaxTableError, match="overlaps"):
            TaxBracketTable(
                brackets=(
                    TaxBracket(Decimal("0"), Decimal("100"), Decimal("0"), Decimal("0")),
                    TaxBracket(Decimal("100"), None, Decimal("0.1"), Decimal("0")),
                )
            )

    def test_unbounded_must_be_last(self):
        with pytest.raises(InvalidTaxTableError, match="unbounded"):
            TaxBracketTable(
                brackets=(
                    TaxBracket(Decimal("0"), None, Decimal("0"), Decimal("0")),
                    TaxBracket(Decimal("100"), None, Decimal("0.1"), Decimal("0")),
                )
            )

    def test_rate_out_of_range(self):
        with pytest.raises(InvalidTaxTableError, match="rate"):
            TaxBracketTable(
                brackets=(TaxBracket(Decimal("0"), None, Decimal("1.5"), Decimal("0")),)
            )

    def test_missing_field_in_payload(self):
        with pytest.raises(InvalidTaxTableError, match="missing field"):
            TaxBracketTable.from_payload([{"min": 0, "max": None}])

    def test_invalid_table_is_value_error(self):
        with pytest.raises(ValueError):
            TaxBracketTable(brackets=())
