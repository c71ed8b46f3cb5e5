from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class UsernamePassword:
    """Username and optional password. ``password=None`` means username only."""
    username: str
    password: str | None = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.password is None:
            return f"{self.username}@"
        return f"{self.username}:{self.password}@"


@dataclass(frozen=True, slots=True)
class HostPort:
    """Host and optional port. ``port=None`` leaves the driver's default port."""
    host: str
    port: int | None = None

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"
