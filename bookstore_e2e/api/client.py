"""
Bookstore HTTP API helpers (account registration, tokens, book collection).

All calls go through a Playwright APIRequestContext so UI and API scenarios
share one driver.
"""

import json
from typing import Any, Dict, Iterable, List

from playwright.sync_api import APIRequestContext, APIResponse

from ..core.config import StoreConfig
from ..core.types import Book

BOOKS_PATH = "/BookStore/v1/Books"
REGISTER_USER_PATH = "/Account/v1/User"
GENERATE_TOKEN_PATH = "/Account/v1/GenerateToken"
JSON_HEADERS = {"Content-Type": "application/json"}


class ApiError(RuntimeError):
    def __init__(self, action: str, status: int, message: str):
        self.action = action
        self.status = status
        self.message = message
        super().__init__(
            f"{action} failed: Response status is {status}, Error message is {message}")


def _read_body(response: APIResponse) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text()


def _error_message(body: Any) -> str:
    if isinstance(body, dict):
        return body.get("message") or json.dumps(body)
    return str(body)


def _expect_status(action: str, response: APIResponse, expected: Iterable[int]) -> Dict[str, Any]:
    body = _read_body(response)
    if response.status not in expected or not isinstance(body, dict):
        raise ApiError(action, response.status, _error_message(body))
    return body


class BookStoreApi:
    def __init__(self, request: APIRequestContext, config: StoreConfig):
        self.request = request
        self.config = config

    def list_books(self) -> List[Book]:
        response = self.request.get(self.config.url(BOOKS_PATH))
        body = _expect_status("Book listing", response, (200,))
        books = body.get("books")
        print(f"[Api] Listed {len(books or [])} books")
        return books

    def register_user(self, username: str, password: str) -> str:
        """Create an account and return its userID."""
        response = self.request.post(
            self.config.url(REGISTER_USER_PATH),
            data={"userName": username, "password": password},
            headers=JSON_HEADERS,
        )
        body = _expect_status("User registration", response, (201,))
        print(f"[Api] Registered user {username}")
        return body["userID"]

    def generate_token(self, username: str, password: str) -> str:
        """Return a bearer token for an existing account."""
        response = self.request.post(
            self.config.url(GENERATE_TOKEN_PATH),
            data={"userName": username, "password": password},
            headers=JSON_HEADERS,
        )
        body = _expect_status("Token generation", response, (200,))
        token = body.get("token")
        # The service answers 200 with a null token on bad credentials
        if not token:
            raise ApiError("Token generation", response.status,
                           body.get("result") or _error_message(body))
        return token

    def add_books(self, user_id: str, token: str, isbns: Iterable[str]) -> List[Book]:
        """Add books to a user's collection; returns the books the service echoes back."""
        payload = {
            "userId": user_id,
            "collectionOfIsbns": [{"isbn": isbn} for isbn in isbns],
        }
        response = self.request.post(
            self.config.url(BOOKS_PATH),
            data=payload,
            headers={**JSON_HEADERS, "Authorization": f"Bearer {token}"},
        )
        body = _expect_status("Adding books to collection", response, (200, 201))
        return body.get("books")
