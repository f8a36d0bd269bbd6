from datetime import datetime
from pydantic import BaseModel, EmailStr

# Decoded session token claims
class TokenPayload(BaseModel):
    id: int  # user id
    username: str
    iat: datetime
    exp: datetime

# Pydantic models for request
class UserLogin(BaseModel):
    # Normalized like UserCreate.email so lookups match the stored address
    email: EmailStr
    password: str

# Pydantic models for response
class LoginResponse(BaseModel):
    token: str
    username: str
