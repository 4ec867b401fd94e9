"""Resource models for the JSONPlaceholder demo API."""

from pydantic import BaseModel, ConfigDict, Field


class Geo(BaseModel):
    """Geographic coordinates of an address."""

    lat: str
    lng: str


class Address(BaseModel):
    """Postal address of a user."""

    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(BaseModel):
    """Company a user works for."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    catch_phrase: str = Field(..., alias="catchPhrase")
    bs: str


class User(BaseModel):
    """User resource (``/users``)."""

    id: int
    name: str
    username: str
    email: str
    address: Address
    phone: str | None = None
    website: str | None = None
    company: Company | None = None


class PostCreate(BaseModel):
    """Request body for creating a post (``POST /posts``)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Post title")
    body: str = Field(..., description="Post body")
    user_id: int = Field(..., alias="userId", description="Author user ID")


class Post(BaseModel):
    """Post resource (``/posts``)."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId", description="Author user ID")
    id: int = Field(..., description="Post ID")
    title: str
    body: str
