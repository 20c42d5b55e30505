from fastapi import APIRouter
from app.api.v1.auth import routes as auth
from app.api.v1.patients import routes as patients
from app.api.v1.doctors import routes as doctors
from app.api.v1.records import routes as records
from app.api.v1.appointments import routes as appointments
from app.api.v1.permissions import routes as permissions

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(patients.router)
api_router.include_router(doctors.router)
api_router.include_router(records.router)
api_router.include_router(appointments.router)
api_router.include_router(permissions.router)
