from datetime import datetime


def _indian_grouping(digits):
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount):
    if amount is None:
        return "-"
    sign = "-" if amount < 0 else ""
    whole, frac = f"{abs(float(amount)):.2f}".split(".")
    return f"{sign}₹{_indian_grouping(whole)}.{frac}"


def format_date(value):
    if not value:
        return "-"
    ts = datetime.fromisoformat(value.rstrip("Z"))
    return ts.strftime("%d %b %Y")


def table(headers, rows):
    """Plain text table, column widths fitted to content."""
    cells = [[str(h) for h in headers]] + [[str(c) for c in row] for row in rows]
    widths = [max(len(r[i]) for r in cells) for i in range(len(headers))]
    lines = ["  ".join(c.ljust(w) for c, w in zip(r, widths)).rstrip() for r in cells]
    lines.insert(1, "  ".join("-" * w for w in widths))
    return "\n".join(lines)
