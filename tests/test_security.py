import pytest

from auth.security import get_password_hash, verify_password
from core.errors import HashingError


def test_hash_is_not_plaintext_and_verifies():
    hashed = get_password_hash("pw123")
    assert hashed != "pw123"
    assert verify_password("pw123", hashed)

def test_wrong_password_is_false_not_error():
    hashed = get_password_hash("pw123")
    assert verify_password("pw124", hashed) is False

def test_hashes_are_salted():
    assert get_password_hash("same") != get_password_hash("same")

def test_malformed_hash_raises():
    with pytest.raises(HashingError):
        verify_password("pw123", "definitely-not-a-bcrypt-hash")
