from pydantic import BaseModel, ConfigDict, Field


# --- User ---

class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    # Documents written outside the API may lack fields; list them anyway.
    id: str = Field(alias="_id")
    username: str | None = None
    email: str | None = None
    password: str | None = None
    model_config = ConfigDict(populate_by_name=True)


# --- Errors ---

class ErrorResponse(BaseModel):
    message: str
