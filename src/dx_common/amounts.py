"""Integer arithmetic utilities for lot/tick denominated amounts.

All sizes, prices and amounts stay int end-to-end. No float, no Decimal.
Scaling by a coin's decimals happens only when rendering a display string.
"""


def format_units(raw: int, decimals: int | None) -> str:
    """Render raw base units as a decimal string: (123456, 4) -> '12.3456'.

    decimals=None means the asset has no coin metadata (generic base asset),
    so the raw amount is rendered unscaled.
    """
    if decimals is None or decimals == 0:
        return str(raw)
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    sign = "-" if raw < 0 else ""
    whole, frac = divmod(abs(raw), 10**decimals)
    return f"{sign}{whole}.{frac:0{decimals}d}"


def lots_to_base_units(size: int, lot_size: int) -> int:
    """Order size in lots -> base asset units."""
    return size * lot_size


def ticks_to_quote_units(size: int, price: int, tick_size: int) -> int:
    """Quote asset units for `size` lots at `price` ticks per lot.

    quote = size * price * tick_size
    """
    return size * price * tick_size
