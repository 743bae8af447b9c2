import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends
from jose import jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travelapp.config import settings
from travelapp.database import get_db
from travelapp.errors import AuthError, PersistenceError
from travelapp.models.account import Account
from travelapp.schemas.auth import SignInRequest, SignUpRequest, SignUpResponse, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(account: Account) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "account_id": account.account_id,
        "account_email": account.account_email,
        "account_name": account.account_name,
        "account_picture": account.account_picture,
        "exp": expire,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


@router.post("/signup", status_code=201, response_model=SignUpResponse)
async def signup(req: SignUpRequest, db: AsyncSession = Depends(get_db)):
    if req.account_password != req.confirm_password:
        raise AuthError("Passwords do not match")

    try:
        result = await db.execute(select(Account).where(Account.account_email == req.account_email))
        if result.scalar_one_or_none():
            raise AuthError("Email already registered")

        account = Account(
            account_email=req.account_email,
            account_password=pwd_context.hash(req.account_password),
            account_name=req.account_name,
        )
        db.add(account)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise AuthError("Email already registered")
    except SQLAlchemyError as e:
        await db.rollback()
        raise PersistenceError(error=str(e))

    logger.info(f"Account {account.account_id} registered")
    return SignUpResponse(account_id=account.account_id)


@router.post("/signin", response_model=TokenResponse)
async def signin(req: SignInRequest, db: AsyncSession = Depends(get_db)):
    try:
        result = await db.execute(select(Account).where(Account.account_email == req.account_email))
    except SQLAlchemyError as e:
        raise PersistenceError(error=str(e))
    account = result.scalar_one_or_none()

    # Same answer for unknown email and wrong password
    if not account or not pwd_context.verify(req.account_password, account.account_password):
        raise AuthError()

    return TokenResponse(token=create_access_token(account))
