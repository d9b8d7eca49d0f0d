"""
app/api/catalog.py

Purpose: Static demo catalogue for the frontend

Hardcoded lists from utils/constants.py; nothing here touches the
identity store.
"""

from fastapi import APIRouter

from utils.constants import APPOINTMENTS, CITIES, DEMO_USERS, SERVICES, TESTIMONIALS

router = APIRouter()


@router.get("/services")
async def list_services():
    return {"success": True, "services": SERVICES}


@router.get("/users")
async def list_users():
    return {"success": True, "message": "Users API is working", "data": DEMO_USERS}


@router.get("/appointments")
async def list_appointments():
    return {"success": True, "message": "Appointments API is working", "data": APPOINTMENTS}


@router.get("/cities")
async def list_cities():
    return {"success": True, "message": "Cities API is working", "data": CITIES}


@router.get("/testimonials")
async def list_testimonials():
    return {"success": True, "message": "Testimonials API is working", "data": TESTIMONIALS}
