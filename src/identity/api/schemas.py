"""Pydantic request/response schemas for the Identity API.

Payloads are camelCase on the wire.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from shared.api.schemas import CamelModel

# --- Request Schemas ---


class FullNameSchema(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class RegisterUserRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "janedoe",
                    "email": "jane.doe@example.com",
                    "password": "s3cret-pass",
                    "fullName": {"firstName": "Jane", "lastName": "Doe"},
                    "role": "user",
                }
            ]
        }
    }

    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    full_name: FullNameSchema
    role: str | None = Field(None, max_length=20)


class LoginRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "s3cret-pass"}]}}

    username: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)

    @model_validator(mode="after")
    def username_or_email_required(self) -> LoginRequest:
        if not self.username and not self.email:
            raise ValueError("Either username or email is required")
        return self


class AddAddressRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "street": "221B Baker Street",
                    "city": "Pune",
                    "state": "MH",
                    "pincode": "411001",
                    "country": "India",
                    "isDefault": True,
                }
            ]
        }
    }

    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str | None = Field(None, max_length=100)
    pincode: str = Field(..., pattern=r"^\d{4,10}$")
    country: str = Field(..., min_length=1, max_length=100)
    is_default: bool = False


# --- Response Schemas ---


class AddressSchema(CamelModel):
    id: str
    street: str
    city: str
    state: str | None = None
    pincode: str
    country: str
    is_default: bool = False


class FullNameOut(CamelModel):
    first_name: str | None = None
    last_name: str | None = None


class UserSchema(CamelModel):
    id: str
    username: str
    email: str
    full_name: FullNameOut
    role: str
    addresses: list[AddressSchema] = []


class UserResponse(CamelModel):
    message: str
    user: UserSchema


class AddressResponse(CamelModel):
    message: str
    address: AddressSchema


class AddressListResponse(CamelModel):
    message: str
    addresses: list[AddressSchema]
