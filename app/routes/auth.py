from fastapi import APIRouter, Depends, status
from app.dependencies.repositories import get_user_repository
from app.models.user import User
from app.repositories.base import UserRepository
from app.schemas.user_schemas import LoginResponse, RegisterResponse, UserLogin, UserProfile, UserRegister
from app.services import account_service
from app.utils.token import get_current_user


router = APIRouter()


# -------- AUTH ROUTES --------

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserRegister, users: UserRepository = Depends(get_user_repository)):
    user = account_service.register(users, payload)

    return RegisterResponse(
        message="Registered successfully",
        userId=user.id,
        user=UserProfile.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(payload: UserLogin, users: UserRepository = Depends(get_user_repository)):
    user, token = account_service.login(users, payload.email, payload.password)

    return LoginResponse(
        message="Login successful",
        user=UserProfile.model_validate(user),
        access_token=token,
        token_type="bearer",
    )


@router.get("/me", response_model=UserProfile)
def me(current_user: User = Depends(get_current_user)):
    return UserProfile.model_validate(current_user)
