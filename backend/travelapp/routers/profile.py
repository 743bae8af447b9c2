from fastapi import APIRouter, Depends, Response
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travelapp.database import get_db
from travelapp.errors import AuthError, NotFoundError, PersistenceError, ValidationError
from travelapp.models.account import Account, ProfileLocation
from travelapp.schemas.profile import (
    AccountResponse,
    ProfileLocationRequest,
    ProfileLocationResponse,
    UpdateProfileRequest,
)

router = APIRouter()


async def _get_account(db: AsyncSession, account_id: int) -> Account | None:
    try:
        result = await db.execute(select(Account).where(Account.account_id == account_id))
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))
    return result.scalar_one_or_none()


@router.get("/profile/{account_id}", response_model=AccountResponse)
async def get_profile(account_id: int, db: AsyncSession = Depends(get_db)):
    account = await _get_account(db, account_id)
    if not account:
        raise NotFoundError("Account not found")
    return AccountResponse.model_validate(account)


@router.put("/profile/{account_id}", response_model=AccountResponse)
async def update_profile(
    account_id: int,
    req: UpdateProfileRequest,
    db: AsyncSession = Depends(get_db),
):
    account = await _get_account(db, account_id)
    if not account:
        raise NotFoundError("Account not found")

    if req.account_email is not None and req.account_email != account.account_email:
        taken = await db.execute(select(Account.account_id).where(Account.account_email == req.account_email))
        if taken.scalar_one_or_none() is not None:
            raise AuthError("Email already registered")
        account.account_email = req.account_email
    if req.account_name is not None:
        account.account_name = req.account_name
    if req.account_picture is not None:
        account.account_picture = req.account_picture

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise AuthError("Email already registered")
    except SQLAlchemyError as e:
        await db.rollback()
        raise PersistenceError(error=str(e))

    return AccountResponse.model_validate(account)


@router.post("/profile_location/{account_id}", response_model=ProfileLocationResponse)
async def upsert_profile_location(
    account_id: int,
    req: ProfileLocationRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create (201) or update (200) the account's last known coordinates."""
    if account_id <= 0 or not await _get_account(db, account_id):
        raise ValidationError("Invalid account id")

    result = await db.execute(select(ProfileLocation).where(ProfileLocation.account_id == account_id))
    location = result.scalar_one_or_none()
    if location:
        location.latitude = req.latitude
        location.longitude = req.longitude
        response.status_code = 200
    else:
        location = ProfileLocation(account_id=account_id, latitude=req.latitude, longitude=req.longitude)
        db.add(location)
        response.status_code = 201

    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise PersistenceError(error=str(e))

    return ProfileLocationResponse.model_validate(location)
