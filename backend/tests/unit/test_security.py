import datetime

import pytest

from services.errors import AuthenticationError
from services.security import (
    check_password,
    create_access_token,
    decode_access_token,
    generate_otp,
    hash_password,
    is_valid_email,
    is_valid_password,
)


@pytest.mark.parametrize(
    "email, valid",
    [
        ("alice@x.com", True),
        ("first.last+tag@sub.example.org", True),
        ("alice", False),
        ("alice@", False),
        ("@x.com", False),
        ("", False),
    ],
)
def test_is_valid_email(email, valid):
    assert is_valid_email(email) is valid


@pytest.mark.parametrize(
    "password, valid",
    [
        ("Secret#123", True),
        ("Pässwörd1€", True),
        ("Short#1", False),
        ("nouppercase#1", False),
        ("NoDigits#here", False),
        ("NoSymbol123", False),
    ],
)
def test_is_valid_password(password, valid):
    assert is_valid_password(password) is valid


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("Secret#123")
    second = hash_password("Secret#123")

    assert first != second
    assert first.startswith("pbkdf2_sha256$")
    assert check_password("Secret#123", first)
    assert not check_password("Secret#124", first)


def test_check_password_rejects_malformed_hash():
    assert not check_password("Secret#123", "not-a-hash")
    assert not check_password("Secret#123", "md5$1$salt$abc")


def test_generate_otp_is_six_digits():
    otp = generate_otp()
    assert len(otp) == 6
    assert otp.isdigit()


def test_access_token_round_trip():
    token = create_access_token("alice@x.com")
    assert decode_access_token(token) == "alice@x.com"


def test_expired_token_is_rejected():
    token = create_access_token("alice@x.com", datetime.timedelta(seconds=-10))
    with pytest.raises(AuthenticationError):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    token = create_access_token("alice@x.com")
    with pytest.raises(AuthenticationError):
        decode_access_token(token[:-2] + ("aa" if token[-2:] != "aa" else "bb"))
