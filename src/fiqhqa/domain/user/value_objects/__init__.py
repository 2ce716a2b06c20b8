"""Value objects for the user domain."""

from fiqhqa.domain.user.value_objects.username import Username

__all__ = [
    "Username",
]
