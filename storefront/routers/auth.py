from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session
from pydantic import BaseModel
from storefront.db.session import AppContext, get_context, get_session
from storefront.models.user import User, UserPublic
from storefront.services.auth import AuthService
from storefront.core.errors import Unauthorized

router = APIRouter()

# auto_error=False so a missing token is reported as our own 401 body
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)


class UserCreate(BaseModel):
    name: str
    email: str
    password: str

class UserLogin(BaseModel):
    email: str
    password: str

class AuthResponse(BaseModel):
    token: str
    user: UserPublic

def get_auth_service(
    session: Session = Depends(get_session),
    context: AppContext = Depends(get_context),
) -> AuthService:
    return AuthService(session, context.settings)

def _auth_response(service: AuthService, user: User) -> AuthResponse:
    return AuthResponse(
        token=service.create_access_token(user.id),
        user=UserPublic(id=user.id, name=user.name, email=user.email),
    )

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    user = service.register_user(user_in.name, user_in.email, user_in.password)
    return _auth_response(service, user)

@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, service: AuthService = Depends(get_auth_service)):
    user = service.authenticate_user(credentials.email, credentials.password)
    return _auth_response(service, user)

async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    service: AuthService = Depends(get_auth_service),
) -> Optional[User]:
    """
    Resolve the bearer token to a user.

    A token for a user deleted after issuance yields None rather than an error.
    """
    if not token:
        raise Unauthorized()
    user_id = service.decode_access_token(token)
    return service.get_user(user_id)
