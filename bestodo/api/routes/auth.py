from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from bestodo.database.connection import get_db
from bestodo.auth.dependencies import get_password_hasher, get_token_service
from bestodo.auth.utils import PasswordHasher, TokenService
from bestodo.schemas.token import AuthResponse
from bestodo.schemas.user import SignInRequest, SignUpRequest
from bestodo.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def get_auth_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, password_hasher, token_service)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user: SignUpRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Register a new user

    - **username**: At least 3 characters, unique
    - **email**: Valid email address, unique
    - **password**: At least 6 characters

    Returns a bearer token valid for 24 hours
    """
    token = auth_service.signup(user)
    return {"message": "User created successfully", "token": token}


@router.post("/signin", response_model=AuthResponse)
def signin(user_credentials: SignInRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Login user and get a bearer token

    - **email**: User's email address
    - **password**: User's password
    """
    token = auth_service.signin(user_credentials)
    return {"message": "Login successful", "token": token}
