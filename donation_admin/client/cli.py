#!/usr/bin/env python3
"""
Console front end for the donation admin API.

    donation-admin login admin
    donation-admin show dashboard
    donation-admin expense add --description Food --amount 500 --category Food
    donation-admin export -o expenses.xlsx
"""
import argparse
import getpass
import sys

from .api import DEFAULT_BASE_URL, ApiClient, ApiClientError
from .views import (
    BeneficiaryView,
    CampaignView,
    DashboardView,
    DonorView,
    ExpenseView,
    ViewKind,
    open_view,
)


def _compact(**fields):
    return {k: v for k, v in fields.items() if v is not None}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="donation-admin",
        description="Record donations and expenses, view statistics, export spreadsheets.",
    )
    parser.add_argument("--api", default=DEFAULT_BASE_URL, help="API base URL (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("login", help="Authenticate with a username and access key")
    p.add_argument("username")
    p.add_argument("--key", help="Access key (prompted when omitted)")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the logged-in user")

    p = sub.add_parser("show", help="Render one of the views")
    p.add_argument("view", choices=[k.value for k in ViewKind])

    p = sub.add_parser("export", help="Download all expenses as an .xlsx file")
    p.add_argument("-o", "--output", default="expenses.xlsx")

    expense = sub.add_parser("expense", help="Add, edit or delete expenses").add_subparsers(
        dest="action", required=True
    )
    for name in ("add", "edit"):
        p = expense.add_parser(name)
        if name == "edit":
            p.add_argument("id")
        p.add_argument("--description", required=True)
        p.add_argument("--amount", type=float, required=True)
        p.add_argument("--category", required=True)
        p.add_argument("--campaign", help="Campaign id")
    p = expense.add_parser("delete")
    p.add_argument("id")

    p = sub.add_parser("donation", help="Record a donation").add_subparsers(dest="action", required=True)
    p = p.add_parser("add")
    p.add_argument("--donor", required=True, help="Donor id")
    p.add_argument("--amount", type=float, required=True)
    p.add_argument("--campaign", help="Campaign id")

    p = sub.add_parser("campaign", help="Create campaigns").add_subparsers(dest="action", required=True)
    p = p.add_parser("add")
    p.add_argument("--name", required=True)
    p.add_argument("--description")
    p.add_argument("--target", type=float)
    p.add_argument("--status", choices=["ACTIVE", "COMPLETED", "PAUSED"])

    p = sub.add_parser("donor", help="Create donors").add_subparsers(dest="action", required=True)
    p = p.add_parser("add")
    p.add_argument("--name", required=True)
    p.add_argument("--email")
    p.add_argument("--phone")
    p.add_argument("--address")

    p = sub.add_parser("beneficiary", help="Create beneficiaries").add_subparsers(dest="action", required=True)
    p = p.add_parser("add")
    p.add_argument("--name", required=True)
    p.add_argument("--description")
    p.add_argument("--contact")

    return parser


def _finish(view, ok, out):
    print(view.render(), file=out)
    return 0 if ok else 1


def run(args, api, out=None):
    out = out or sys.stdout
    if args.command == "login":
        key = args.key or getpass.getpass("Access key: ")
        try:
            data = api.login(args.username, key)
        except ApiClientError as exc:
            print(f"Login failed: {exc.message}", file=out)
            return 1
        print(f"Logged in as {data['username']}", file=out)
        return 0

    if args.command == "logout":
        api.logout()
        print("Logged out.", file=out)
        return 0

    if not api.is_authenticated:
        print("Not logged in. Run `donation-admin login <username>` first.", file=out)
        return 1

    if args.command == "whoami":
        print(api.username, file=out)
        return 0

    if args.command == "show":
        view = open_view(args.view, api)
        return _finish(view, view.error is None, out)

    if args.command == "export":
        view = DashboardView(api)
        if view.export(args.output):
            print(f"Saved {args.output}", file=out)
            return 0
        print(f"Export failed: {view.error}", file=out)
        return 1

    if args.command == "expense":
        view = ExpenseView(api)
        if args.action == "delete":
            ok = view.delete(args.id)
        else:
            data = _compact(
                description=args.description,
                amount=args.amount,
                category=args.category,
                campaignId=args.campaign,
            )
            ok = view.add(data) if args.action == "add" else view.edit(args.id, data)
        return _finish(view, ok, out)

    if args.command == "donation":
        view = DonorView(api)
        ok = view.add_donation(args.donor, _compact(amount=args.amount, campaignId=args.campaign))
        return _finish(view, ok, out)

    if args.command == "campaign":
        view = CampaignView(api)
        ok = view.add(_compact(
            name=args.name, description=args.description, targetAmount=args.target, status=args.status
        ))
        return _finish(view, ok, out)

    if args.command == "donor":
        view = DonorView(api)
        ok = view.add(_compact(name=args.name, email=args.email, phone=args.phone, address=args.address))
        return _finish(view, ok, out)

    if args.command == "beneficiary":
        view = BeneficiaryView(api)
        ok = view.add(_compact(name=args.name, description=args.description, contactInfo=args.contact))
        return _finish(view, ok, out)

    raise ValueError(f"Unknown command {args.command!r}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    return run(args, ApiClient(args.api))


if __name__ == "__main__":
    sys.exit(main())
