"""
Terminal pages rendered from the client data layer.

Each page prints a loading line, then either an empty-state message, the
rendered content, or the API error. Pages return a process exit code.
"""
from typing import Callable, List, Optional, TextIO

from globaltrotters.client.api import ApiError, GlobalTrottersClient
from globaltrotters.schemas.city import ActivityResponse
from globaltrotters.schemas.trip import TripActivityResponse, TripDetailResponse


def _money(value: Optional[float]) -> str:
    return f"${value:,.2f}" if value is not None else "-"


def _dates(start, end) -> str:
    if not start and not end:
        return "dates not set"
    return f"{start or '?'} -> {end or '?'}"


def _placement_line(placement: TripActivityResponse) -> str:
    activity = placement.activity
    city = activity.city.name if activity.city else "?"
    parts = [f"{activity.name} ({city})"]
    if activity.duration:
        parts.append(f"{activity.duration:g}h")
    if activity.estimated_cost is not None:
        parts.append(_money(activity.estimated_cost))
    if placement.notes:
        parts.append(f"- {placement.notes}")
    return " ".join(parts)


def _run(out: TextIO, loading: str, render: Callable[[], None]) -> int:
    print(loading, file=out)
    try:
        render()
    except ApiError as e:
        print(f"Error: {e.message}", file=out)
        return 1
    return 0


def trip_list_page(client: GlobalTrottersClient, out: TextIO, page: int = 1, limit: int = 10,
                   status: Optional[str] = None, public: bool = False) -> int:
    def render():
        if public:
            result = client.list_public_trips(page=page, limit=limit)
        else:
            result = client.list_trips(page=page, limit=limit, status=status)
        if not result.trips:
            print("No public trips to explore yet." if public else "No trips yet. Create your first trip!", file=out)
            return
        for trip in result.trips:
            visibility = "public" if trip.is_public else "private"
            owner = f" by {trip.user.name}" if public else ""
            print(f"#{trip.id} {trip.name}{owner} [{trip.status.value}, {visibility}] "
                  f"{_dates(trip.start_date, trip.end_date)} "
                  f"{len(trip.trip_activities)} activities", file=out)
        p = result.pagination
        print(f"Page {p.page} of {max(p.pages, 1)} ({p.total} trips)", file=out)

    return _run(out, "Loading trips...", render)


def _print_trip(trip: TripDetailResponse, out: TextIO) -> None:
    print(f"{trip.name} [{trip.status.value}]", file=out)
    print(f"Owner: {trip.user.name}", file=out)
    print(f"Dates: {_dates(trip.start_date, trip.end_date)}", file=out)
    print(f"Budget: {_money(trip.budget)}", file=out)
    if trip.description:
        print(trip.description, file=out)
    print(f"Destinations: {', '.join(trip.destinations) if trip.destinations else 'none yet'}", file=out)
    if not trip.trip_activities:
        print("No activities planned yet.", file=out)
        return
    print("Activities:", file=out)
    for placement in trip.trip_activities:
        when = placement.date.isoformat() if placement.date else "unscheduled"
        print(f"  {when}: {_placement_line(placement)}", file=out)


def trip_detail_page(client: GlobalTrottersClient, out: TextIO, trip_id: int) -> int:
    return _run(out, "Loading trip...", lambda: _print_trip(client.get_trip(trip_id), out))


def shared_trip_page(client: GlobalTrottersClient, out: TextIO, token: str) -> int:
    return _run(out, "Loading shared trip...", lambda: _print_trip(client.get_shared_trip(token), out))


def budget_page(client: GlobalTrottersClient, out: TextIO, trip_id: int) -> int:
    def render():
        budget = client.get_budget(trip_id)
        if not budget.total_budget:
            print("No budget set for this trip.", file=out)
        print(f"Total budget: {_money(budget.total_budget)}", file=out)
        for allocation in budget.allocations:
            print(f"  {allocation.name:<16} {allocation.percentage:>3}%  {_money(allocation.amount)}", file=out)
        print(f"Planned activities: {_money(budget.planned_activities_cost)}", file=out)
        for category, cost in sorted(budget.activity_costs_by_category.items()):
            print(f"  {category:<16} {_money(cost)}", file=out)
        print(f"Remaining: {_money(budget.remaining_budget)}", file=out)
        if budget.over_budget:
            print("Warning: planned activities exceed the budget.", file=out)
        if budget.trip_days:
            print(f"{budget.trip_days} days, {_money(budget.daily_budget)} per day", file=out)

    return _run(out, "Loading budget...", render)


def calendar_page(client: GlobalTrottersClient, out: TextIO, trip_id: int) -> int:
    def render():
        calendar = client.get_calendar(trip_id)
        if not calendar.days and not calendar.unscheduled:
            print("Nothing scheduled yet.", file=out)
            return
        for day in calendar.days:
            marker = "" if day.in_trip_range else " (outside trip dates)"
            print(f"{day.date.isoformat()}{marker}", file=out)
            if not day.activities:
                print("  No activities planned for this day.", file=out)
            for placement in day.activities:
                print(f"  - {_placement_line(placement)}", file=out)
        if calendar.unscheduled:
            print("Unscheduled:", file=out)
            for placement in calendar.unscheduled:
                print(f"  - {_placement_line(placement)}", file=out)

    return _run(out, "Loading calendar...", render)


def itinerary_page(client: GlobalTrottersClient, out: TextIO, trip_id: int) -> int:
    def render():
        itinerary = client.get_itinerary(trip_id)
        if not itinerary.stops:
            print("No destinations yet.", file=out)
            return
        for stop in itinerary.stops:
            where = f"{stop.city_name}, {stop.country}" if stop.country else stop.city_name
            extra = "" if stop.listed else " (not in destinations)"
            print(f"{stop.order}. {where}{extra} {_dates(stop.start_date, stop.end_date)}", file=out)
            for placement in stop.activities:
                print(f"   - {_placement_line(placement)}", file=out)

    return _run(out, "Loading itinerary...", render)


def city_search_page(client: GlobalTrottersClient, out: TextIO, keyword: str = "") -> int:
    def render():
        cities = client.search_cities(keyword) if keyword else client.popular_cities()
        if not cities:
            print(f"No cities match '{keyword}'.", file=out)
            return
        for city in cities:
            cost = f" cost index {city.cost_index:g}" if city.cost_index is not None else ""
            print(f"#{city.id} {city.name}, {city.country} (popularity {city.popularity}){cost}", file=out)

    return _run(out, "Searching cities..." if keyword else "Loading popular cities...", render)


def activity_search_page(client: GlobalTrottersClient, out: TextIO, city_id: Optional[int] = None,
                         category: Optional[str] = None, query: Optional[str] = None) -> int:
    def render():
        activities: List[ActivityResponse] = client.search_activities(city_id=city_id, category=category, query=query)
        if not activities:
            print("No activities found.", file=out)
            return
        for activity in activities:
            city = activity.city.name if activity.city else "?"
            print(f"#{activity.id} {activity.name} [{activity.category or 'other'}] in {city} "
                  f"{_money(activity.estimated_cost)}", file=out)

    return _run(out, "Searching activities...", render)


def admin_stats_page(client: GlobalTrottersClient, out: TextIO) -> int:
    def render():
        stats = client.get_stats()
        print(f"Users: {stats.total_users} ({stats.active_users} active, {stats.admin_users} admins)", file=out)
        print(f"Trips: {stats.total_trips} ({stats.public_trips} public)", file=out)
        print(f"Catalogue: {stats.total_cities} cities, {stats.total_activities} activities", file=out)
        print(f"Planned activities: {stats.total_trip_activities}", file=out)
        print("Trips by status:", file=out)
        for status, count in stats.trips_by_status.items():
            print(f"  {status:<10} {count}", file=out)
        if stats.top_destinations:
            print("Top destinations:", file=out)
            for dest in stats.top_destinations:
                print(f"  {dest.name}: {dest.count}", file=out)

    return _run(out, "Loading dashboard...", render)


def admin_users_page(client: GlobalTrottersClient, out: TextIO, page: int = 1, limit: int = 10) -> int:
    def render():
        result = client.list_users(page=page, limit=limit)
        if not result.users:
            print("No users found.", file=out)
            return
        for user in result.users:
            print(f"#{user.id} {user.name} <{user.email}> {user.role.value}/{user.status.value} "
                  f"{user.trip_count} trips", file=out)
        p = result.pagination
        print(f"Page {p.page} of {max(p.pages, 1)} ({p.total} users)", file=out)

    return _run(out, "Loading users...", render)
