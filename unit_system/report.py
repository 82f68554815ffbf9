"""Plain-text reports for conversions and uncertainty budgets."""

from typing import Optional

from .conversion import convert_to_system
from .formatting import format_number
from .registry import UnitSystem, get_category
from .uncertainty_engine import DerivedQuantity


class ConversionReport:
    """Generates formatted summary tables."""

    @staticmethod
    def _hline(width=72):
        return "─" * width

    @staticmethod
    def _dline(width=72):
        return "═" * width

    @classmethod
    def conversion_table(cls, value: float, from_unit: str, category: str,
                         system: UnitSystem, uncertainty: Optional[float] = None,
                         title: str = "") -> str:
        """
        One input converted into every ``system`` unit of ``category``.
        """
        cat = get_category(category)
        source = cat.units[from_unit].symbol if from_unit in cat.units else from_unit
        results = convert_to_system(value, from_unit, category, system, uncertainty)

        w = 72
        lines = [cls._dline(w)]
        lines.append(f"  {title or f'{cat.name.upper()} → {system.name} UNITS'}")
        lines.append(cls._dline(w))

        given = format_number(value)
        if uncertainty is not None:
            given = f"{given} ± {format_number(abs(uncertainty))}"
        lines.append(f"    Input: {given} {source}")
        lines.append("")

        if not results:
            lines.append(f"    No {system.name} units available for {cat.name}")
        else:
            lines.append(f"  {'Result':<30} {'Unit':<14} {'Name'}")
            lines.append(cls._hline(w))
            for r in results:
                lines.append(f"  {r.formatted:<30} {r.symbol:<14} {r.name}")
        lines.append(cls._dline(w))
        return "\n".join(lines)

    @classmethod
    def budget(cls, derived: DerivedQuantity, coverage_p: float = 0.95,
               title: str = "") -> str:
        """
        Uncertainty budget of a derived quantity with its expanded uncertainty.
        """
        U, k = derived.expanded_uncertainty(coverage_p)
        w = 72

        lines = [cls._dline(w)]
        lines.append(f"  {title or f'UNCERTAINTY BUDGET: {derived.name}'}")
        lines.append(cls._dline(w))
        lines.append(f"    {derived.symbol} = {derived.formula_str}")
        lines.append("")

        header = (
            f"  {'Var':<8} {'Value':<14} {'u(xᵢ)':<12} "
            f"{'|cᵢ|':<12} {'Contribution'}"
        )
        lines.append(header)
        lines.append(cls._hline(w))
        for row in derived.uncertainty_budget():
            pct_bar = "█" * int(row["pct_contribution"] / 5)
            lines.append(
                f"  {row['variable']:<8} "
                f"{row['best_value']:<14.6g} "
                f"{row['u_input']:<12.4g} "
                f"{abs(row['sensitivity_coeff']):<12.4g} "
                f"{row['pct_contribution']:5.1f}%  {pct_bar}"
            )
        lines.append("")

        result = derived.to_measurement()
        lines.append(f"    Result:               {derived.symbol} = {result} {derived.unit}".rstrip())
        lines.append(f"    Relative uncertainty: {result.relative_uncertainty() * 100:.3f}%")
        lines.append(f"    Coverage factor:      k = {k:.3f} (p = {coverage_p * 100:.0f}%)")
        lines.append(f"    Expanded uncertainty: U = {U:.4g} {derived.unit}".rstrip())
        lines.append(cls._dline(w))
        return "\n".join(lines)
