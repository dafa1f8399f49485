from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1, max_length=100)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    email: EmailStr
    role: str


class RegisterResponse(BaseModel):
    message: str
    userId: int
    user: UserProfile


class LoginResponse(BaseModel):
    message: str
    user: UserProfile
    access_token: str
    token_type: str = "bearer"
