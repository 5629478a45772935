"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Depends, Request, Response
from protean.utils.globals import current_domain

from identity.api.schemas import (
    AddAddressRequest,
    AddressListResponse,
    AddressResponse,
    LoginRequest,
    RegisterUserRequest,
    UserResponse,
)
from identity.user.addresses import AddAddress, RemoveAddress
from identity.user.authentication import authenticate, issue_token_for, revoke
from identity.user.passwords import hash_password
from identity.user.registration import RegisterUser
from identity.user.user import User, address_to_dict
from shared.api.schemas import MessageResponse
from shared.auth.dependencies import authorize, extract_token
from shared.auth.tokens import IssuedToken, Principal, decode_token
from shared.config import get_settings
from shared.exceptions import AuthenticationError

router = APIRouter(prefix="/api/auth", tags=["auth"])

any_user = authorize()


def _set_token_cookie(response: Response, issued: IssuedToken) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.cookie_name,
        value=issued.token,
        max_age=settings.jwt_expires_in_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


def _load_user(user_id: str) -> User:
    return current_domain.repository_for(User).get(user_id)


@router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterUserRequest, response: Response) -> UserResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        first_name=body.full_name.first_name,
        last_name=body.full_name.last_name,
        role=body.role,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = _load_user(user_id)

    _set_token_cookie(response, issue_token_for(user))
    return UserResponse(message="User registered successfully", user=user.to_public_dict())


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, response: Response) -> UserResponse:
    user = authenticate(body.password, username=body.username, email=body.email)

    _set_token_cookie(response, issue_token_for(user))
    return UserResponse(message="Login successful", user=user.to_public_dict())


@router.get("/me", response_model=UserResponse)
async def me(principal: Principal = Depends(any_user)) -> UserResponse:
    user = _load_user(principal.id)
    return UserResponse(message="Current user fetched successfully", user=user.to_public_dict())


@router.get("/logout", response_model=MessageResponse)
async def logout(request: Request, response: Response) -> MessageResponse:
    token = extract_token(request)
    if token:
        try:
            revoke(decode_token(token))
        except AuthenticationError:
            # An expired or forged token has nothing left to revoke
            pass
    settings = get_settings()
    response.delete_cookie(key=settings.cookie_name, httponly=True, secure=settings.cookie_secure)
    return MessageResponse(message="Logout successful")


@router.get("/users/me/addresses", response_model=AddressListResponse)
async def list_addresses(principal: Principal = Depends(any_user)) -> AddressListResponse:
    user = _load_user(principal.id)
    return AddressListResponse(
        message="User Addresses fetched successfully",
        addresses=[address_to_dict(a) for a in user.addresses],
    )


@router.post("/users/me/addresses", status_code=201, response_model=AddressResponse)
async def add_address(body: AddAddressRequest, principal: Principal = Depends(any_user)) -> AddressResponse:
    command = AddAddress(
        user_id=principal.id,
        street=body.street,
        city=body.city,
        state=body.state,
        pincode=body.pincode,
        country=body.country,
        is_default=body.is_default,
    )
    address = current_domain.process(command, asynchronous=False)
    return AddressResponse(message="Address added successfully", address=address)


@router.delete("/users/me/addresses/{address_id}", response_model=AddressListResponse)
async def remove_address(address_id: str, principal: Principal = Depends(any_user)) -> AddressListResponse:
    command = RemoveAddress(user_id=principal.id, address_id=address_id)
    addresses = current_domain.process(command, asynchronous=False)
    return AddressListResponse(message="Address deleted successfully", addresses=addresses)
