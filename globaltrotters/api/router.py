"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from globaltrotters.api.routes import (
    auth, trips, cities, activities, shared, admin
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(trips.router)
api_router.include_router(cities.router)
api_router.include_router(activities.router)
api_router.include_router(shared.router)
api_router.include_router(admin.router)
