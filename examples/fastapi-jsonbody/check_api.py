#!/usr/bin/env python3
"""Script to verify the example API encodes bodies with the provider."""

import asyncio

import httpx

BASE_URL = "http://localhost:8000"


async def check_create_user(client: httpx.AsyncClient) -> bool:
    """POST a snake_case body and check the echoed representation."""
    print("\n" + "=" * 60)
    print("CHECK: Create user")
    print("=" * 60)

    payload = {"user_name": "ada", "email": "ada@example.com", "password_hash": "x"}
    response = await client.post(f"{BASE_URL}/users", json=payload)
    print(f"   Status: {response.status_code}")
    print(f"   Content-Type: {response.headers.get('content-type')}")

    body = response.json()
    ok = (
        response.status_code == 201
        and response.headers.get("content-type") == "application/json;charset=UTF-8"
        and body["user_name"] == "ada"
        and "age" not in body
        and "password_hash" not in body
    )
    print("\n✅ SUCCESS" if ok else f"\n❌ FAILURE: {body}")
    return ok


async def check_unsupported_media_type(client: httpx.AsyncClient) -> bool:
    """A non-JSON body must be rejected with 415."""
    print("\n" + "=" * 60)
    print("CHECK: Unsupported media type")
    print("=" * 60)

    response = await client.post(
        f"{BASE_URL}/users", content=b"user_name=ada", headers={"content-type": "text/plain"}
    )
    print(f"   Status: {response.status_code}")

    ok = response.status_code == 415
    print("\n✅ SUCCESS" if ok else "\n❌ FAILURE")
    return ok


async def main() -> None:
    async with httpx.AsyncClient() as client:
        results = [
            await check_create_user(client),
            await check_unsupported_media_type(client),
        ]
    print(f"\n{sum(results)}/{len(results)} checks passed")


if __name__ == "__main__":
    asyncio.run(main())
