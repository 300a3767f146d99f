def format_currency(value, symbol="", decimal_digits=2):
    """
    Render a value currency-style: symbol prefix, thousands grouping,
    fixed decimals. `format_currency(1234.5, "$")` -> "$1,234.50".
    """
    amount = float(value)
    sign = "-" if amount < 0 else ""
    body = f"{abs(amount):,.{decimal_digits}f}"
    # Rounding can turn a tiny negative into zero
    if sign and float(body.replace(",", "")) == 0:
        sign = ""
    return f"{sign}{symbol}{body}"


def format_step(step_value):
    """Popup text shown after a cycle completes, e.g. "+ 0.5"."""
    return f"+ {float(step_value)}"
