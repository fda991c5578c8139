from .analytics import monthly_totals
from .export import EXPORT_FILENAME, XLSX_MIMETYPE, export_expenses
from .stats import get_stats

__all__ = ["get_stats", "monthly_totals", "export_expenses", "EXPORT_FILENAME", "XLSX_MIMETYPE"]
