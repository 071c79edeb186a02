"""
Command line front end for the GlobalTrotters API.

Usage examples:
    globaltrotters login me@example.com secret123
    globaltrotters trips list --page 2
    globaltrotters trips create "Summer in Europe" --start 2026-06-01 --end 2026-06-14 --destination Paris
    globaltrotters explore cities tok
"""
import argparse
import sys
from typing import List, Optional, TextIO

from globaltrotters import views
from globaltrotters.client.api import ApiError, GlobalTrottersClient
from globaltrotters.core.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="globaltrotters", description="Plan multi-city trips from the terminal")
    parser.add_argument("--api-url", default=None, help="API base URL (defaults to API_BASE_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("register", help="Create an account")
    p.add_argument("email")
    p.add_argument("password")
    p.add_argument("name")

    p = sub.add_parser("login", help="Log in and store the token")
    p.add_argument("email")
    p.add_argument("password")

    sub.add_parser("logout", help="Forget the stored token")
    sub.add_parser("me", help="Show the current profile")

    trips = sub.add_parser("trips", help="Manage your trips").add_subparsers(dest="action", required=True)

    p = trips.add_parser("list")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--status")

    for name in ("show", "delete", "budget", "calendar", "itinerary"):
        trips.add_parser(name).add_argument("trip_id", type=int)

    for name in ("create", "update"):
        p = trips.add_parser(name)
        if name == "create":
            p.add_argument("name")
        else:
            p.add_argument("trip_id", type=int)
            p.add_argument("--name")
        p.add_argument("--description")
        p.add_argument("--start", dest="start_date")
        p.add_argument("--end", dest="end_date")
        p.add_argument("--budget", type=float)
        p.add_argument("--destination", dest="destinations", action="append",
                       help="Destination city name (repeatable)")
        p.add_argument("--status")
        p.add_argument("--public", dest="is_public", action="store_true", default=None)
        p.add_argument("--private", dest="is_public", action="store_false")

    p = trips.add_parser("add-activity")
    p.add_argument("trip_id", type=int)
    p.add_argument("activity_id", type=int)
    p.add_argument("--date")
    p.add_argument("--notes")

    p = trips.add_parser("remove-activity")
    p.add_argument("trip_id", type=int)
    p.add_argument("activity_id", type=int)

    p = trips.add_parser("share")
    p.add_argument("trip_id", type=int)
    p.add_argument("--expires-in", type=int, help="Hours until the link expires")
    p.add_argument("--revoke", action="store_true")

    p = sub.add_parser("shared", help="Open a shared trip link")
    p.add_argument("token")

    explore = sub.add_parser("explore", help="Browse cities and public trips").add_subparsers(dest="action", required=True)
    p = explore.add_parser("cities")
    p.add_argument("keyword", nargs="?", default="")
    p = explore.add_parser("trips")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--limit", type=int, default=10)

    p = sub.add_parser("activities", help="Search the activity catalogue")
    p.add_argument("--city", dest="city_id", type=int)
    p.add_argument("--category")
    p.add_argument("--query")

    admin = sub.add_parser("admin", help="Admin dashboard").add_subparsers(dest="action", required=True)
    admin.add_parser("stats")
    p = admin.add_parser("users")
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--limit", type=int, default=10)

    return parser


def _trip_fields(args: argparse.Namespace) -> dict:
    keys = ("name", "description", "start_date", "end_date", "budget", "destinations", "status", "is_public")
    return {k: getattr(args, k) for k in keys if getattr(args, k, None) is not None}


def _mutate(out: TextIO, action) -> int:
    try:
        message = action()
    except ApiError as e:
        print(f"Error: {e.message}", file=out)
        return 1
    if message:
        print(message, file=out)
    return 0


def _run_trips(client: GlobalTrottersClient, args: argparse.Namespace, out: TextIO) -> int:
    action = args.action
    if action == "list":
        return views.trip_list_page(client, out, page=args.page, limit=args.limit, status=args.status)
    if action == "show":
        return views.trip_detail_page(client, out, args.trip_id)
    if action == "budget":
        return views.budget_page(client, out, args.trip_id)
    if action == "calendar":
        return views.calendar_page(client, out, args.trip_id)
    if action == "itinerary":
        return views.itinerary_page(client, out, args.trip_id)
    if action == "create":
        return _mutate(out, lambda: f"Created trip #{client.create_trip(**_trip_fields(args)).id}")
    if action == "update":
        return _mutate(out, lambda: f"Updated trip #{client.update_trip(args.trip_id, **_trip_fields(args)).id}")
    if action == "delete":
        return _mutate(out, lambda: client.delete_trip(args.trip_id) or "Trip deleted")
    if action == "add-activity":
        fields = {k: v for k, v in (("date", args.date), ("notes", args.notes)) if v is not None}
        return _mutate(
            out,
            lambda: f"Added {client.add_activity(args.trip_id, args.activity_id, **fields).activity.name} to trip"
        )
    if action == "remove-activity":
        return _mutate(out, lambda: client.remove_activity(args.trip_id, args.activity_id) or "Activity removed")
    if action == "share":
        if args.revoke:
            return _mutate(out, lambda: client.revoke_share_links(args.trip_id) or "Share links revoked")
        return _mutate(out, lambda: f"Share token: {client.create_share_link(args.trip_id, args.expires_in).token}")
    raise ValueError(f"Unknown trips action: {action}")


def run(args: argparse.Namespace, client: GlobalTrottersClient, out: TextIO) -> int:
    command = args.command
    if command == "register":
        return _mutate(out, lambda: f"Welcome, {client.register(args.email, args.password, args.name).user.name}!")
    if command == "login":
        return _mutate(out, lambda: f"Logged in as {client.login(args.email, args.password).user.email}")
    if command == "logout":
        client.logout()
        print("Logged out", file=out)
        return 0
    if command == "me":
        def profile():
            user = client.get_profile()
            return f"{user.name} <{user.email}> {user.role.value}"
        return _mutate(out, profile)
    if command == "trips":
        return _run_trips(client, args, out)
    if command == "shared":
        return views.shared_trip_page(client, out, args.token)
    if command == "explore":
        if args.action == "cities":
            return views.city_search_page(client, out, args.keyword)
        return views.trip_list_page(client, out, page=args.page, limit=args.limit, public=True)
    if command == "activities":
        return views.activity_search_page(client, out, args.city_id, args.category, args.query)
    if command == "admin":
        if args.action == "stats":
            return views.admin_stats_page(client, out)
        return views.admin_users_page(client, out, page=args.page, limit=args.limit)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None, client: Optional[GlobalTrottersClient] = None,
         out: TextIO = sys.stdout) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    if client is not None:
        return run(args, client, out)
    with GlobalTrottersClient(base_url=args.api_url) as owned:
        return run(args, owned, out)


if __name__ == "__main__":
    sys.exit(main())
