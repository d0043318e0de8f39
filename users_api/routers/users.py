from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase
from users_api.database import get_db
from users_api.repositories.user_repository import UserRepositoryError
from users_api.schemas import ErrorResponse, UserCreate, UserResponse
from users_api.services import user_service

router = APIRouter(prefix="/users", tags=["users"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}

@router.get("", response_model=list[UserResponse], responses=_ERROR_RESPONSES)
async def list_users(db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        return await user_service.get_users(db)
    except UserRepositoryError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, **_ERROR_RESPONSES},
)
async def create_user(data: UserCreate, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        return await user_service.create_user(db, data)
    except UserRepositoryError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
