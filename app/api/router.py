"""
API router aggregator: wires all endpoint modules together.
"""

from fastapi import APIRouter

from app.api.endpoints import auth, events, protected, public, volunteers

api_router = APIRouter()

# Public pages & event reads
api_router.include_router(public.router)

# Register / login
api_router.include_router(auth.router)

# Dashboard, admin area
api_router.include_router(protected.router)

# Event & volunteer management
api_router.include_router(events.router)
api_router.include_router(volunteers.router)
