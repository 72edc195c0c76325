"""FastAPI + jsonbody example.

Request and response bodies go through a JsonProvider configured with
snake_case keys, no nulls and a fixed date format:

    curl -X POST localhost:8000/users \
        -H 'content-type: application/json' \
        -d '{"user_name": "ada", "email": "ada@example.com"}'
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.models import User, UserPage
from jsonbody import CodecConfig, FieldNamingPolicy, JsonProvider, configure
from jsonbody.adapters.fastapi import JsonBody, JsonProviderResponse

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)

provider = JsonProvider(
    CodecConfig(
        field_naming_policy=FieldNamingPolicy.LOWER_CASE_WITH_UNDERSCORES,
        serialize_nulls=False,
        date_format_pattern="%Y-%m-%dT%H:%M:%S",
    )
)
configure(provider)

# In-memory storage keyed by user name
users: dict[str, User] = {}

app = FastAPI(
    title="jsonbody FastAPI Example",
    description="REST API whose bodies are encoded by a jsonbody provider",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/users", status_code=201)
async def create_user(user: User = JsonBody(User)):
    """Create a user."""
    users[user.userName] = user
    return JsonProviderResponse(user, status_code=201, declared_type=User)


@app.get("/users")
async def list_users():
    """List all users."""
    page = UserPage(items=list(users.values()), total=len(users))
    return JsonProviderResponse(page, declared_type=UserPage)


@app.get("/users/{user_name}")
async def get_user(user_name: str):
    """Get a single user."""
    user = users.get(user_name)
    if user is None:
        return JsonProviderResponse({"error": f"No user {user_name}"}, status_code=404)
    return JsonProviderResponse(user, declared_type=User)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "codec": repr(provider.codec)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
