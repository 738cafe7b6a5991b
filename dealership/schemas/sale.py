# File: dealership/schemas/sale.py
"""
Sale schemas for the dealership API.

This module contains Pydantic models that parse request bodies into typed
values before they reach the sale service, and serialize sales and
salesperson statistics for responses.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, validator


class SaleTransactionCreate(BaseModel):
    """
    Schema for recording a vehicle sale.

    Carries everything the sale workflow needs: the parties, the sale terms
    and the maintenance appointment scheduled for the sold vehicle.
    """

    customer_id: int = Field(..., ge=1, description="ID of the buying customer")
    vehicle_id: int = Field(..., ge=1, description="ID of the vehicle being sold")
    salesperson_id: int = Field(..., ge=1, description="ID of the salesperson credited")
    sale_price: Decimal = Field(
        ..., ge=0, max_digits=18, decimal_places=2, description="Agreed sale price"
    )
    sale_date: date = Field(..., description="Date of sale")
    maintenance_date: date = Field(..., description="Scheduled maintenance date")
    maintenance_description: str = Field(
        ..., max_length=255, description="Maintenance work to be done"
    )
    maintenance_cost: Decimal = Field(
        ..., ge=0, max_digits=18, decimal_places=2, description="Expected maintenance cost"
    )

    @validator("maintenance_description")
    def description_must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("Maintenance description must not be blank")
        return v


class SaleTransactionResult(BaseModel):
    """
    Schema returned after a sale is recorded.
    """

    sale_id: int = Field(..., description="ID of the newly created sale")


class SaleResponse(BaseModel):
    """
    Schema for sale information as stored in the database.
    """

    sale_id: int
    customer_id: int
    vehicle_id: int
    salesperson_id: int
    sale_date: date
    sale_price: Decimal

    class Config:
        from_attributes = True


class SalespersonStatistics(BaseModel):
    """
    Stored salesperson counters alongside the values derived from the sales table.
    """

    salesperson_id: int
    total_sales: int = Field(..., description="Stored sale count")
    total_revenue: Decimal = Field(..., description="Stored revenue")
    derived_total_sales: int = Field(..., description="Sale count from the sales table")
    derived_total_revenue: Decimal = Field(..., description="Revenue from the sales table")
    is_consistent: bool = Field(..., description="Whether stored and derived values agree")
