from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..core.jwt_handler import TokenService, get_token_service
from ..schemas.user import UserCreate, UserLogin, Token
from ..services.users import UserStore

router = APIRouter(tags=["auth"])


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


@router.post("/register", response_class=PlainTextResponse)
def register(user_in: UserCreate, users: UserStore = Depends(get_user_store)):
    users.register(user_in.name, user_in.email, user_in.password)
    return "Registered successfully"


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    users: UserStore = Depends(get_user_store),
    token_service: TokenService = Depends(get_token_service),
):
    user_id = users.login(credentials.email, credentials.password)
    return {"token": token_service.issue(user_id)}
