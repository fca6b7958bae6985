POINT_PLACES = 3


def coord_format(v, places=POINT_PLACES):
    """Format a single coordinate with a fixed number of decimal places."""
    return f"{float(v):.{places}f}"


def point_format(x, y, places=POINT_PLACES):
    """Human readable `(x, y)` text for logs and debugging.

    There is no parser for this form.
    """
    return f"({coord_format(x, places)}, {coord_format(y, places)})"
