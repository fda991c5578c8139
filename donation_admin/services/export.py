from io import BytesIO

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from sqlalchemy.orm import joinedload

from ..models import Expense

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
EXPORT_FILENAME = "expenses.xlsx"

# (header, column width)
COLUMNS = [
    ("Date", 15),
    ("Description", 30),
    ("Amount", 15),
    ("Category", 20),
    ("Campaign", 25),
]


def expense_rows():
    expenses = (
        Expense.query.options(joinedload(Expense.campaign))
        .order_by(Expense.created_at.asc())
        .all()
    )
    return [
        [
            e.created_at.date().isoformat(),
            e.description,
            e.amount,
            e.category,
            e.campaign_name,
        ]
        for e in expenses
    ]


def build_workbook(rows):
    wb = Workbook()
    ws = wb.active
    ws.title = "Expenses"
    ws.append([header for header, _ in COLUMNS])
    for idx, (_, width) in enumerate(COLUMNS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width
    for row in rows:
        ws.append(row)
    return wb


def export_expenses():
    """Render every expense into an in-memory .xlsx file, rewound for sending."""
    buf = BytesIO()
    build_workbook(expense_rows()).save(buf)
    buf.seek(0)
    return buf
