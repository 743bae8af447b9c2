from datetime import datetime

from pydantic import BaseModel, EmailStr


class AccountResponse(BaseModel):
    account_id: int
    account_email: str
    account_name: str | None = None
    account_picture: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class UpdateProfileRequest(BaseModel):
    account_email: EmailStr | None = None
    account_name: str | None = None
    account_picture: str | None = None


class ProfileLocationRequest(BaseModel):
    latitude: float
    longitude: float


class ProfileLocationResponse(BaseModel):
    account_id: int
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}
