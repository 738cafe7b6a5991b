# dealership/api/api.py

from fastapi import APIRouter

from dealership.api.endpoints import sales, salespersons

api_router = APIRouter()

api_router.include_router(sales.router, prefix="/sales", tags=["Sales"])
api_router.include_router(
    salespersons.router, prefix="/salespersons", tags=["Salespersons"]
)
