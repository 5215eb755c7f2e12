"""Site Passwords — verifies argon2 hashing and verification."""

from weddingsite.infrastructure.passwords import hash_password, verify_password


def test_hash_is_not_plaintext():
    hashed = hash_password("letmein")
    assert hashed != "letmein"
    assert hashed.startswith("$argon2")


def test_verify_accepts_correct_password():
    assert verify_password("letmein", hash_password("letmein"))


def test_verify_rejects_wrong_password():
    assert not verify_password("nope", hash_password("letmein"))


def test_verify_without_hash_is_false():
    assert not verify_password("letmein", None)
