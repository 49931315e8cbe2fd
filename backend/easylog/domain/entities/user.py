"""Domain entities for the mock session — the acting user and a login result."""

from dataclasses import asdict, dataclass
from typing import Any

MOCK_USER_ID = "dummy-user-123"
FALLBACK_USER_NAME = "Test User"


@dataclass(frozen=True)
class User:
    """The acting staff member. ``role`` is ``"admin"`` or ``"staff"``."""

    id: str
    email: str
    name: str
    role: str

    @classmethod
    def from_email(cls, email: str) -> "User":
        """Derive the mock user for an email address."""
        return cls(
            id=MOCK_USER_ID,
            email=email,
            name=email.split("@")[0] or FALLBACK_USER_NAME,
            role="admin" if "admin" in email else "staff",
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        """Build a user from stored JSON, raising ValueError on a bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            values = {key: data[key] for key in ("id", "email", "name", "role")}
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc
        if not all(isinstance(v, str) for v in values.values()):
            raise ValueError("user fields must be strings")
        return cls(**values)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful mock login."""

    user: User
    token: str
