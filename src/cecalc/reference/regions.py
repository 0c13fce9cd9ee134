from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegionSalaries:
    analyst: int
    investigator: int


DEFAULT_REGION = "North America"

# Average annual salary by region and role (USD)
REGION_SALARIES: dict[str, RegionSalaries] = {
    "North America": RegionSalaries(analyst=85000, investigator=95000),
    "Europe": RegionSalaries(analyst=70000, investigator=80000),
    "Asia Pacific": RegionSalaries(analyst=55000, investigator=65000),
    "Latin America": RegionSalaries(analyst=45000, investigator=55000),
    "Middle East & Africa": RegionSalaries(analyst=50000, investigator=60000),
}

REGIONS: tuple[str, ...] = tuple(REGION_SALARIES)


def region_salaries(region: str) -> RegionSalaries:
    """Salary table entry for `region`; unknown names use the North America row."""
    return REGION_SALARIES.get(region, REGION_SALARIES[DEFAULT_REGION])


def _is_unset(value) -> bool:
    # 0, None and NaN all count as "not provided"
    return not value or value != value


def resolve_salaries(region: str, analyst_salary=None, investigator_salary=None) -> RegionSalaries:
    """
    Effective salaries for the calculation.
    - Explicit (non-zero) inputs win.
    - Otherwise the region's defaults are used, per role.
    """
    defaults = region_salaries(region)
    return RegionSalaries(
        analyst=defaults.analyst if _is_unset(analyst_salary) else analyst_salary,
        investigator=(
            defaults.investigator
            if _is_unset(investigator_salary)
            else investigator_salary
        ),
    )
