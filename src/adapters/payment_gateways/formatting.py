from __future__ import annotations


def format_amount(amount: float) -> str:
    """Render whole amounts without decimals ("20"), others with two ("12.50")."""

    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"
