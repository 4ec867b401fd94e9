"""
Basic usage example for apiservice SDK.

This example demonstrates the two calls against JSONPlaceholder:
- Listing users (GET /users) and decoding them
- Creating a post (POST /posts) from a typed request body
"""

import asyncio

from apiservice import (
    APIClient,
    APIRequest,
    DecodingFailureError,
    Failure,
    HTTPHeader,
    HTTPMethod,
    Post,
    PostCreate,
    Success,
    User,
)


async def list_users(client: APIClient) -> None:
    """GET /users and print the first user's name."""
    result = await client.perform(APIRequest(method=HTTPMethod.get, path="users"))

    match result:
        case Success(response):
            try:
                users = response.decode(to=list[User]).body
                print(f"Received users: {users[0].name if users else ''}")
            except DecodingFailureError:
                print(response.body)
                print("Failed to decode response")
        case Failure():
            print("Error perform network request")


async def create_post(client: APIClient) -> None:
    """POST /posts and print the created post."""
    headers = [HTTPHeader(field="content-type", value="application/json")]
    request = APIRequest.with_json_body(
        HTTPMethod.post,
        "posts",
        PostCreate(title="foo", body="bar", user_id=1),
        headers=headers,
    )

    match await client.perform(request):
        case Success(response):
            try:
                post = response.decode(to=Post).body
                print(f"Received post: {post}")
            except DecodingFailureError:
                print(response.body)
                print("Failed to decode response")
        case Failure():
            print("Error perform network request")


async def main() -> None:
    """Run basic usage example."""
    async with APIClient() as client:
        print("=== apiservice SDK Basic Usage Example ===\n")
        await asyncio.gather(list_users(client), create_post(client))


if __name__ == "__main__":
    asyncio.run(main())
