from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a journal account.

    Note: plain data object, no DB access here.
    """

    user_id: int
    username: str
    password_hash: str
    role: str
    name: str
