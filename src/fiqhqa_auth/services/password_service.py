"""bcrypt credential hashing."""

import bcrypt

from fiqhqa_auth.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Hashes and checks passwords with a configurable bcrypt cost.

    Each hash gets its own salt, so equal passwords never share a digest.
    Only length is policed: at least ``MIN_LENGTH`` characters and at most
    ``MAX_BYTES`` once encoded, the most bcrypt will look at.

    >>> service = PasswordHashingService(rounds=4)
    >>> service.verify("secret1", service.hash("secret1"))
    True
    """

    MIN_LENGTH = 6
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the hashing service.

        Parameters
        ----------
        rounds
            bcrypt work factor, log2 of the iterations (default 12).
            Tests use the minimum of 4.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def validate_strength(self, password: str) -> None:
        """Check that a password may be stored.

        Parameters
        ----------
        password
            The plaintext password

        Raises
        ------
        WeakPasswordError
            If the password is empty, shorter than ``MIN_LENGTH``
            characters or longer than ``MAX_BYTES`` encoded bytes
        """
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if len(password.encode(_ENCODING)) > self.MAX_BYTES:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_BYTES} bytes",
            )

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt.

        Parameters
        ----------
        password
            The plaintext password

        Returns
        -------
        The bcrypt hash, work factor and salt included

        Raises
        ------
        WeakPasswordError
            If the password fails ``validate_strength``
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            A hash produced by ``hash``, with any work factor

        Returns
        -------
        True on a match. Mismatches, unreadable hashes and inputs bcrypt
        refuses all give False; this method never raises.
        """
        try:
            return bcrypt.checkpw(
                password.encode(_ENCODING),
                password_hash.encode(_ENCODING),
            )
        except (AttributeError, TypeError, ValueError):
            return False
