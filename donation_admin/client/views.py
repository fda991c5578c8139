"""Console views, one per dashboard tab.

``ViewKind`` picks the view; every view owns its fetch (``load``) and its
``render``. Mutations reload the affected lists explicitly once the server
has accepted them. A failed call leaves its message in ``view.error`` and
can be repeated with ``view.retry()``; nothing is retried automatically.
"""
from enum import Enum

from .api import ApiClientError
from .formatting import format_currency, format_date, table


class ViewKind(str, Enum):
    DASHBOARD = "dashboard"
    EXPENSES = "expenses"
    DONORS = "donors"
    CAMPAIGNS = "campaigns"
    BENEFICIARIES = "beneficiaries"


class View:
    kind = None
    title = ""

    def __init__(self, api):
        self.api = api
        self.error = None
        self._retry = None

    # ---------------- fetch / mutate ----------------
    def fetch(self):
        raise NotImplementedError

    def load(self):
        return self._attempt(self.fetch)

    def reload(self):
        return self.load()

    def retry(self):
        if self._retry is None:
            return True
        return self._retry()

    def _attempt(self, action, then_reload=False):
        try:
            action()
        except ApiClientError as exc:
            self.error = exc.message
            self._retry = lambda: self._attempt(action, then_reload)
            return False
        self.error = None
        self._retry = None
        if then_reload:
            # the write is saved; a failed reload only leaves view.error set
            self.reload()
        return True

    def _mutate(self, action):
        return self._attempt(action, then_reload=True)

    # ---------------- render ----------------
    def body(self):
        raise NotImplementedError

    def render(self):
        out = [self.title, "=" * len(self.title)]
        if self.error:
            out.append(f"Error: {self.error} (retry available)")
        else:
            out.append(self.body())
        return "\n".join(out)


class DashboardView(View):
    kind = ViewKind.DASHBOARD
    title = "Dashboard"

    def __init__(self, api):
        super().__init__(api)
        self.stats = None

    def fetch(self):
        self.stats = self.api.get_dashboard_stats()

    def export(self, destination="expenses.xlsx"):
        return self._attempt(lambda: self.api.export_expenses(destination))

    def body(self):
        s = self.stats or {}
        donations = s.get("totalDonations", 0)
        expenses = s.get("totalExpenses", 0)
        lines = [
            f"Total donations:  {format_currency(donations)}",
            f"Total expenses:   {format_currency(expenses)}",
            f"Balance:          {format_currency(donations - expenses)}",
            f"Active campaigns: {s.get('activeCampaigns', 0)}",
            "",
            "Recent donations",
        ]
        recent = s.get("recentDonors") or []
        if not recent:
            lines.append("No donations yet.")
        else:
            lines.append(table(
                ["Date", "Donor", "Amount", "Campaign"],
                [
                    [
                        format_date(d["createdAt"]),
                        (d.get("donor") or {}).get("name", "-"),
                        format_currency(d["amount"]),
                        (d.get("campaign") or {}).get("name", "-"),
                    ]
                    for d in recent
                ],
            ))
        return "\n".join(lines)


class ExpenseView(View):
    kind = ViewKind.EXPENSES
    title = "Expense Management"

    def __init__(self, api):
        super().__init__(api)
        self.expenses = []
        self.campaigns = []

    def fetch(self):
        self.expenses = self.api.get_expenses()
        self.campaigns = self.api.get_campaigns()

    def add(self, data):
        return self._mutate(lambda: self.api.create_expense(data))

    def edit(self, expense_id, data):
        return self._mutate(lambda: self.api.update_expense(expense_id, data))

    def delete(self, expense_id):
        return self._mutate(lambda: self.api.delete_expense(expense_id))

    def export(self, destination="expenses.xlsx"):
        return self._attempt(lambda: self.api.export_expenses(destination))

    def body(self):
        if not self.expenses:
            return "No expenses recorded yet."
        return table(
            ["ID", "Date", "Description", "Category", "Amount", "Campaign"],
            [
                [
                    e["id"],
                    format_date(e["createdAt"]),
                    e["description"],
                    e["category"],
                    format_currency(e["amount"]),
                    (e.get("campaign") or {}).get("name", "-"),
                ]
                for e in self.expenses
            ],
        )


class DonorView(View):
    kind = ViewKind.DONORS
    title = "Donor Management"

    def __init__(self, api):
        super().__init__(api)
        self.donors = []
        self.campaigns = []

    def fetch(self):
        self.donors = self.api.get_donors()
        self.campaigns = self.api.get_campaigns()

    def add(self, data):
        return self._mutate(lambda: self.api.create_donor(data))

    def add_donation(self, donor_id, data):
        payload = dict(data, donorId=donor_id)
        return self._mutate(lambda: self.api.create_donation(payload))

    def body(self):
        if not self.donors:
            return "No donors yet."
        return table(
            ["ID", "Name", "Email", "Phone", "Donations", "Since"],
            [
                [
                    d["id"],
                    d["name"],
                    d.get("email") or "-",
                    d.get("phone") or "-",
                    (d.get("_count") or {}).get("donations", 0),
                    format_date(d["createdAt"]),
                ]
                for d in self.donors
            ],
        )


class CampaignView(View):
    kind = ViewKind.CAMPAIGNS
    title = "Campaign Management"

    def __init__(self, api):
        super().__init__(api)
        self.campaigns = []

    def fetch(self):
        self.campaigns = self.api.get_campaigns()

    def add(self, data):
        return self._mutate(lambda: self.api.create_campaign(data))

    def body(self):
        if not self.campaigns:
            return "No campaigns yet."
        return table(
            ["ID", "Name", "Status", "Target", "Donations", "Expenses"],
            [
                [
                    c["id"],
                    c["name"],
                    c["status"],
                    format_currency(c.get("targetAmount")),
                    (c.get("_count") or {}).get("donations", 0),
                    (c.get("_count") or {}).get("expenses", 0),
                ]
                for c in self.campaigns
            ],
        )


class BeneficiaryView(View):
    kind = ViewKind.BENEFICIARIES
    title = "Beneficiary Management"

    def __init__(self, api):
        super().__init__(api)
        self.beneficiaries = []

    def fetch(self):
        self.beneficiaries = self.api.get_beneficiaries()

    def add(self, data):
        return self._mutate(lambda: self.api.create_beneficiary(data))

    def body(self):
        if not self.beneficiaries:
            return "No beneficiaries yet."
        return table(
            ["ID", "Name", "Description", "Contact"],
            [
                [b["id"], b["name"], b.get("description") or "-", b.get("contactInfo") or "-"]
                for b in self.beneficiaries
            ],
        )


VIEWS = {
    ViewKind.DASHBOARD: DashboardView,
    ViewKind.EXPENSES: ExpenseView,
    ViewKind.DONORS: DonorView,
    ViewKind.CAMPAIGNS: CampaignView,
    ViewKind.BENEFICIARIES: BeneficiaryView,
}


def open_view(kind, api):
    """Build the view for ``kind`` and fetch its data."""
    view = VIEWS[ViewKind(kind)](api)
    view.load()
    return view
