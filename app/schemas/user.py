from pydantic import BaseModel, EmailStr, constr

class UserCreate(BaseModel):
    username: constr(strip_whitespace=True, min_length=1, max_length=100)
    email: EmailStr
    password: constr(min_length=1)

class UserSummary(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True

class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    user: UserSummary
