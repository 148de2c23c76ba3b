from gymlog.utils.security import generate_access_token, hash_password, verify_password


def test_access_token_is_256_hex_characters():
    token = generate_access_token()
    assert len(token) == 256
    assert all(c in "0123456789abcdef" for c in token)


def test_access_tokens_are_unique():
    assert generate_access_token() != generate_access_token()


def test_password_hash_round_trip():
    password_hash = hash_password("longenough")
    assert password_hash != "longenough"
    assert verify_password("longenough", password_hash)
    assert not verify_password("wrongpassword", password_hash)


def test_password_hash_is_salted():
    assert hash_password("longenough") != hash_password("longenough")
