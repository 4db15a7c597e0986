"""Authentication context model for typed user authentication."""

from dataclasses import dataclass, field

from src.database.models.users import User


@dataclass
class AuthenticatedUserContext:
    """Context containing the authenticated subscriber and the verified token claims."""

    user: User
    claims: dict = field(default_factory=dict)

    def __post_init__(self):
        """Ensure all required fields are present and valid."""
        if not self.user:
            raise ValueError("User is required in authentication context")
