from pydantic import BaseModel, EmailStr


class SignUpRequest(BaseModel):
    account_email: EmailStr
    account_password: str
    confirm_password: str
    account_name: str | None = None


class SignUpResponse(BaseModel):
    success: bool = True
    message: str = "Account created"
    account_id: int


class SignInRequest(BaseModel):
    account_email: EmailStr
    account_password: str


class TokenResponse(BaseModel):
    success: bool = True
    token: str
