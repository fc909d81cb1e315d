"""Display formatting for converted measurements."""


NOT_AVAILABLE = "N/A"


def format_weight(weight: float, unit: str, decimals: int = 2) -> str:
    """Format a weight with its unit, e.g. '12.50g'."""
    return f"{weight:.{decimals}f}{unit}"


def format_temperature(temp: float, unit: str, decimals: int = 0) -> str:
    """Format a temperature with its unit, e.g. '90°C'."""
    return f"{temp:.{decimals}f}{unit}"


def format_pressure(pressure: float, unit: str, decimals: int = 0) -> str:
    """Format a pressure with a space before the unit, e.g. '1000 PSI'."""
    return f"{pressure:.{decimals}f} {unit}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage, e.g. '21.5%'."""
    return f"{value:.{decimals}f}%"


def calculate_yield_percentage(yield_amount: float, start_amount: float) -> float:
    """
    Yield as a percentage of the starting material.

    Returns 0 when there is no starting amount.
    """
    if start_amount == 0:
        return 0.0
    return (yield_amount / start_amount) * 100


def format_optional(value: float | None, unit: str, decimals: int = 0) -> str:
    """
    Format a value that may not have been recorded.

    None and 0 both mean "not recorded" and render as 'N/A'.
    """
    if value is None or value == 0:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}{unit}"
