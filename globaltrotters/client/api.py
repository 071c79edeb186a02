"""
Typed HTTP client for the GlobalTrotters API.

Every method unwraps the ``data`` envelope into a pydantic view model, or
raises ``ApiError`` carrying the HTTP status and raw payload.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from globaltrotters.core.config import settings
from globaltrotters.core.error_handlers import describe_validation_error
from globaltrotters.core.exceptions import ErrorCode
from globaltrotters.core.utils import format_error
from globaltrotters.client.storage import FileTokenStore, TokenStore
from globaltrotters.schemas.admin import AdminStats, AdminUserList
from globaltrotters.schemas.city import ActivityResponse, CityDetailResponse, CityResponse
from globaltrotters.schemas.share import ShareLinkResponse
from globaltrotters.schemas.trip import (
    BudgetBreakdown, TripActivityCreate, TripActivityResponse, TripActivityUpdate,
    TripCalendar, TripCreate, TripDetailResponse, TripItinerary, TripListResponse, TripUpdate
)
from globaltrotters.schemas.user import AuthResponse, UserResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error raised for non-2xx responses and transport failures."""

    def __init__(self, message: str, status: int, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @property
    def code(self) -> Optional[str]:
        if isinstance(self.data, dict) and isinstance(self.data.get("error"), dict):
            return self.data["error"].get("code")
        return None


def _error_message(payload: Any) -> str:
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if payload.get("message"):
            return payload["message"]
        if isinstance(error, str) and error:
            return error
    return "An error occurred"


def _invalid(message: str) -> ApiError:
    return ApiError(message, 400, format_error(ErrorCode.VALIDATION_ERROR.value, message))


def _build_body(schema, exclude_unset: bool = True, **fields):
    """Validate a request body locally; bad input never reaches the server."""
    try:
        model = schema(**fields)
    except ValidationError as e:
        raise _invalid(describe_validation_error(e)) from e
    return model, model.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)


class GlobalTrottersClient:
    """Wraps each REST endpoint in a typed method."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token_store = token_store or FileTokenStore(settings.TOKEN_FILE)
        self._http = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        headers = {"Content-Type": "application/json"}
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None and v != ""}

        try:
            response = self._http.request(
                method, f"{self.base_url}{endpoint}", json=json, params=params or None, headers=headers
            )
        except httpx.TransportError as e:
            logger.warning(f"{method} {endpoint} failed: {e}")
            raise ApiError("Network error", 0, e) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            raise ApiError(_error_message(payload), response.status_code, payload)

        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload

    # Authentication

    def register(self, email: str, password: str, name: str) -> AuthResponse:
        data = self._request("POST", "/auth/register", json={"email": email, "password": password, "name": name})
        auth = AuthResponse.model_validate(data)
        self.token_store.set(auth.token)
        return auth

    def login(self, email: str, password: str) -> AuthResponse:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        auth = AuthResponse.model_validate(data)
        self.token_store.set(auth.token)
        return auth

    def logout(self) -> None:
        self.token_store.clear()

    def get_profile(self) -> UserResponse:
        return UserResponse.model_validate(self._request("GET", "/auth/me")["user"])

    # Cities and activities

    def popular_cities(self, limit: Optional[int] = None) -> List[CityResponse]:
        data = self._request("GET", "/cities/popular", params={"limit": limit})
        return [CityResponse.model_validate(c) for c in data]

    def search_cities(self, keyword: str = "") -> List[CityResponse]:
        data = self._request("GET", "/cities/search", params={"keyword": keyword})
        return [CityResponse.model_validate(c) for c in data]

    def get_city(self, city_id: int) -> CityDetailResponse:
        return CityDetailResponse.model_validate(self._request("GET", f"/cities/{city_id}"))

    def search_activities(
        self,
        city_id: Optional[int] = None,
        category: Optional[str] = None,
        query: Optional[str] = None
    ) -> List[ActivityResponse]:
        data = self._request(
            "GET", "/activities/search",
            params={"cityId": city_id, "category": category, "query": query}
        )
        return [ActivityResponse.model_validate(a) for a in data]

    def get_activity(self, activity_id: int) -> ActivityResponse:
        return ActivityResponse.model_validate(self._request("GET", f"/activities/{activity_id}"))

    # Trips

    def list_trips(self, page: Optional[int] = None, limit: Optional[int] = None, status: Optional[str] = None) -> TripListResponse:
        data = self._request("GET", "/trips", params={"page": page, "limit": limit, "status": status})
        return TripListResponse.model_validate(data)

    def list_public_trips(self, page: Optional[int] = None, limit: Optional[int] = None) -> TripListResponse:
        data = self._request("GET", "/trips/public", params={"page": page, "limit": limit})
        return TripListResponse.model_validate(data)

    def get_trip(self, trip_id: int) -> TripDetailResponse:
        return TripDetailResponse.model_validate(self._request("GET", f"/trips/{trip_id}")["trip"])

    def create_trip(self, **fields) -> TripDetailResponse:
        trip, body = _build_body(TripCreate, **fields)
        if trip.start_date and trip.end_date and trip.start_date > trip.end_date:
            raise _invalid("Start date cannot be after end date.")
        return TripDetailResponse.model_validate(self._request("POST", "/trips", json=body)["trip"])

    def update_trip(self, trip_id: int, **fields) -> TripDetailResponse:
        _, body = _build_body(TripUpdate, **fields)
        return TripDetailResponse.model_validate(self._request("PUT", f"/trips/{trip_id}", json=body)["trip"])

    def delete_trip(self, trip_id: int) -> None:
        self._request("DELETE", f"/trips/{trip_id}")

    def add_activity(self, trip_id: int, activity_id: int, **fields) -> TripActivityResponse:
        _, body = _build_body(TripActivityCreate, exclude_unset=False, activity_id=activity_id, **fields)
        data = self._request("POST", f"/trips/{trip_id}/activities", json=body)
        return TripActivityResponse.model_validate(data["tripActivity"])

    def update_activity(self, trip_id: int, activity_id: int, **fields) -> TripActivityResponse:
        _, body = _build_body(TripActivityUpdate, **fields)
        data = self._request("PUT", f"/trips/{trip_id}/activities/{activity_id}", json=body)
        return TripActivityResponse.model_validate(data["tripActivity"])

    def remove_activity(self, trip_id: int, activity_id: int) -> None:
        self._request("DELETE", f"/trips/{trip_id}/activities/{activity_id}")

    def get_itinerary(self, trip_id: int) -> TripItinerary:
        return TripItinerary.model_validate(self._request("GET", f"/trips/{trip_id}/itinerary")["itinerary"])

    def get_budget(self, trip_id: int) -> BudgetBreakdown:
        return BudgetBreakdown.model_validate(self._request("GET", f"/trips/{trip_id}/budget")["budget"])

    def get_calendar(self, trip_id: int) -> TripCalendar:
        return TripCalendar.model_validate(self._request("GET", f"/trips/{trip_id}/calendar")["calendar"])

    # Share links

    def create_share_link(self, trip_id: int, expires_in: Optional[int] = None) -> ShareLinkResponse:
        body = {"expiresIn": expires_in} if expires_in else {}
        data = self._request("POST", f"/shared/trips/{trip_id}", json=body)
        return ShareLinkResponse.model_validate(data["shareLink"])

    def get_shared_trip(self, token: str) -> TripDetailResponse:
        return TripDetailResponse.model_validate(self._request("GET", f"/shared/{token}")["trip"])

    def revoke_share_links(self, trip_id: int) -> None:
        self._request("DELETE", f"/shared/trips/{trip_id}")

    # Admin

    def get_stats(self) -> AdminStats:
        return AdminStats.model_validate(self._request("GET", "/admin/stats"))

    def list_users(self, page: Optional[int] = None, limit: Optional[int] = None) -> AdminUserList:
        return AdminUserList.model_validate(self._request("GET", "/admin/users", params={"page": page, "limit": limit}))
