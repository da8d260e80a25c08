"""User model for the user catalogue."""

from datetime import date

from pydantic import ConfigDict, Field

from usermanagement.models.entity import Entity


class User(Entity):
    """A mutable user record.

    Field formats (length bounds, email syntax) are validated by the
    presentation layer before a User reaches the directory; email
    uniqueness is not enforced.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    forename: str = Field(..., description="Given name")
    surname: str = Field(..., description="Family name")
    email: str = Field(..., description="Contact email address")
    is_active: bool = Field(default=True, description="Whether the account is active")
    date_of_birth: date = Field(..., description="Date of birth")

    @property
    def display_name(self) -> str:
        return f"{self.forename} {self.surname}"
