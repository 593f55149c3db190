"""Number formatting for report strings."""


def format_number(value: float) -> str:
    """Render a quantity as a plain decimal: no exponent, no trailing zeros.

    ``8.0`` -> ``'8'``, ``1500000`` -> ``'1500000'``, ``12.5`` -> ``'12.5'``.
    """
    text = f"{float(value):f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
