"""
Userhub - API v1 Router
"""

from fastapi import APIRouter

from userhub.api.v1.endpoints import users

api_router = APIRouter()

api_router.include_router(users.router, tags=["Users"])
