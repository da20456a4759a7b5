from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from user_service.adapters.repository import UserStore
from user_service.entrypoints.schemas.user import UserRequest, UserResponse
from user_service.services.handlers.user import (
    create_new_user,
    delete_exist_user,
    get_user,
    get_user_list,
    update_exist_user,
)

router = APIRouter()

USER_NOT_FOUND = "User not found"


def get_store(request: Request) -> UserStore:
    return request.app.state.user_store


@router.get("/users", response_model=List[UserResponse], status_code=200, name="GetAllUsers", operation_id="GetAllUsers")
def get_users(store: UserStore = Depends(get_store)) -> List[UserResponse]:
    return [UserResponse(**user) for user in get_user_list(store=store)]


@router.get("/users/{user_id}", response_model=UserResponse, status_code=200, name="GetUserById", operation_id="GetUserById")
def get_user_by_id(user_id: int, store: UserStore = Depends(get_store)) -> UserResponse:
    user = get_user(user_id=user_id, store=store)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserResponse(**user)


@router.post("/users", response_model=UserResponse, status_code=201, name="CreateUser", operation_id="CreateUser")
def create_user(
    payload: UserRequest,
    request: Request,
    response: Response,
    store: UserStore = Depends(get_store),
) -> UserResponse:
    user = create_new_user(name=payload.name, email=payload.email, store=store)
    response.headers["Location"] = request.url_for("GetUserById", user_id=str(user["id"])).path
    return UserResponse(**user)


@router.put("/users/{user_id}", response_model=UserResponse, status_code=200, name="UpdateUser", operation_id="UpdateUser")
def update_user(user_id: int, payload: UserRequest, store: UserStore = Depends(get_store)) -> UserResponse:
    user = update_exist_user(user_id=user_id, name=payload.name, email=payload.email, store=store)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserResponse(**user)


@router.delete("/users/{user_id}", status_code=204, response_class=Response, name="DeleteUser", operation_id="DeleteUser")
def delete_user(user_id: int, store: UserStore = Depends(get_store)) -> Response:
    if not delete_exist_user(user_id=user_id, store=store):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
