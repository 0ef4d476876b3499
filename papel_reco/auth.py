from __future__ import annotations

from typing import Protocol


class AuthTokenProvider(Protocol):
    def current_token(self) -> str:
        """Bearer token of the signed-in user."""


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        self._token = token

    def current_token(self) -> str:
        return self._token
