from enum import Enum
from datetime import datetime
from pydantic import EmailStr, Field
from app.schemas.base import CamelModel


class EmployeeCount(str, Enum):
    XS = "1-10"
    S = "11-50"
    M = "51-200"
    L = "201-500"
    XL = "501-1000"
    XXL = "1000+"


class UserBase(CamelModel):
    full_name: str = Field(..., min_length=1, description="Full name")
    email: EmailStr
    company: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    employee_count: EmployeeCount


class UserCreate(UserBase):
    pass


class User(UserBase):
    id: int
    created_at: datetime
