"""
Client-side navigation state (the browser location & history).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

LOGIN_PATH = "/login"
FORBIDDEN_PATH = "/forbidden"


@dataclass(frozen=True)
class Redirect:
    to: str
    state: dict[str, Any] | None = None
    replace: bool = True


@dataclass
class Navigator:
    path: str = "/"
    state: dict[str, Any] | None = None
    history: list[str] = field(default_factory=list)

    def navigate(self, to: str, *, state: dict[str, Any] | None = None, replace: bool = False) -> None:
        if not replace:
            self.history.append(self.path)
        self.path = to
        self.state = state

    def follow(self, redirect: Redirect) -> None:
        self.navigate(redirect.to, state=redirect.state, replace=redirect.replace)
