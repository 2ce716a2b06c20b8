"""Unit tests for PasswordHashingService."""

import pytest

from fiqhqa.domain.shared.exceptions import ErrorCode
from fiqhqa_auth.exceptions import WeakPasswordError
from fiqhqa_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("secret1")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_hash_never_contains_plaintext(self):
        """The stored digest does not leak the password."""
        hashed = self.service.hash("my_secret_password")

        assert "my_secret_password" not in hashed

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_verify_non_string_input_returns_false(self):
        """Verification never raises, even for nonsense input."""
        assert self.service.verify(None, "$2b$04$abc") is False  # type: ignore[arg-type]

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        # But both should verify
        assert self.service.verify("same_password", hash1)
        assert self.service.verify("same_password", hash2)

    def test_rounds_are_encoded_in_hash(self):
        """The configured work factor ends up in the digest."""
        hashed = self.service.hash("secret1")

        assert hashed.split("$")[2] == "04"
        assert self.service.rounds == 4


class TestPasswordValidation:
    """Tests for password strength validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)

    def test_validate_empty_password_raises(self):
        """Test that empty password raises WeakPasswordError."""
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.validate_strength("")

    def test_validate_short_password_raises(self):
        """Test that password shorter than minimum raises WeakPasswordError."""
        with pytest.raises(WeakPasswordError, match="at least 6 characters"):
            self.service.validate_strength("short")

    def test_validate_too_long_password_raises(self):
        """Passwords bcrypt would truncate are rejected instead."""
        with pytest.raises(WeakPasswordError, match="cannot exceed 72 bytes"):
            self.service.validate_strength("a" * 73)

    def test_validate_counts_bytes_not_characters(self):
        """Multi-byte characters count with their encoded size."""
        with pytest.raises(WeakPasswordError):
            self.service.validate_strength("ü" * 40)  # 80 bytes

    def test_validate_acceptable_password(self):
        """Test that a password within limits passes."""
        self.service.validate_strength("secret1")
        self.service.validate_strength("a" * 72)

    def test_hash_validates_strength(self):
        """Hashing a weak password fails before any digest is computed."""
        with pytest.raises(WeakPasswordError):
            self.service.hash("abc")

    def test_weak_password_is_bad_request(self):
        """Weak passwords are reported as a bad request."""
        with pytest.raises(WeakPasswordError) as exc_info:
            self.service.validate_strength("abc")

        assert exc_info.value.code == ErrorCode.BAD_REQUEST


class TestWorkFactor:
    def test_hash_embeds_configured_rounds(self):
        hashed = PasswordHashingService(rounds=5).hash("secret1")

        assert hashed.split("$")[2] == "05"

    def test_hash_from_other_work_factor_still_verifies(self):
        hashed = PasswordHashingService(rounds=5).hash("secret1")

        assert PasswordHashingService(rounds=4).verify("secret1", hashed)
