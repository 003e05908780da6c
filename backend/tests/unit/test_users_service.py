import datetime

import pytest
from sqlmodel import Session

from models.users import ProfileUpdate, SignupRequest
from services import profile, users
from services.errors import (
    AuthenticationError,
    InvalidRequestError,
    NotFoundError,
    ServiceError,
)
from services.security import check_password, decode_access_token

TEST_PASSWORD = "Secret#123"


def signup_request(**overrides) -> SignupRequest:
    data = dict(
        email="Dana@Example.com",
        username="Dana",
        password=TEST_PASSWORD,
        country="Norway",
        city="Bergen",
    )
    data.update(overrides)
    return SignupRequest(**data)


@pytest.fixture
def send_mail(mocker):
    return mocker.patch(
        "services.email.send_verification_email", return_value=False
    )


def test_signup_stores_unverified_user_with_otp(test_session: Session, send_mail):
    user = users.signup(test_session, signup_request())

    assert user.email == "dana@example.com"
    assert user.username_lower == "dana"
    assert not user.is_verified
    assert len(user.otp) == 6
    assert user.otp_expires_at > datetime.datetime.now(datetime.timezone.utc)
    assert check_password(TEST_PASSWORD, user.password_hash)
    send_mail.assert_called_once_with("dana@example.com", user.otp)


@pytest.mark.parametrize("missing", ["email", "username", "password", "country", "city"])
def test_signup_requires_fields(test_session, send_mail, missing):
    with pytest.raises(InvalidRequestError) as e:
        users.signup(test_session, signup_request(**{missing: ""}))
    assert str(e.value) == "Country, City, Email, Username, and Password are required"


def test_signup_rejects_duplicates(test_session, send_mail, make_user):
    make_user("Taken", "dana@example.com")

    with pytest.raises(InvalidRequestError, match="Email already registered"):
        users.signup(test_session, signup_request())
    with pytest.raises(InvalidRequestError, match="Username already taken"):
        users.signup(test_session, signup_request(email="other@x.com", username="TAKEN"))


def test_signup_rejects_weak_password(test_session, send_mail):
    with pytest.raises(InvalidRequestError) as e:
        users.signup(test_session, signup_request(password="password"))
    assert str(e.value) == "Password does not meet complexity requirements"


def test_signup_fails_when_email_cannot_be_delivered(
    test_session, send_mail, mocker
):
    mocker.patch("services.email.smtp_configured", return_value=True)

    with pytest.raises(ServiceError, match="Failed to send verification email"):
        users.signup(test_session, signup_request())


def test_login(test_session, make_user):
    make_user("alice", "alice@x.com")

    token = users.login(test_session, "alice@x.com", TEST_PASSWORD)

    assert decode_access_token(token) == "alice@x.com"


def test_login_errors(test_session, make_user):
    make_user("alice", "alice@x.com")
    make_user("unverified", "new@x.com", is_verified=False)

    with pytest.raises(AuthenticationError, match="Email or password is incorrect"):
        users.login(test_session, "alice@x.com", "Wrong#123")
    with pytest.raises(AuthenticationError, match="Email or password is incorrect"):
        users.login(test_session, "nobody@x.com", TEST_PASSWORD)
    with pytest.raises(AuthenticationError, match="Email not verified"):
        users.login(test_session, "new@x.com", TEST_PASSWORD)


def test_verify_email(test_session, send_mail):
    user = users.signup(test_session, signup_request())

    with pytest.raises(InvalidRequestError, match="Invalid OTP"):
        users.verify_email(test_session, user.email, "not-it")

    token = users.verify_email(test_session, user.email, user.otp)

    assert decode_access_token(token) == user.email
    assert user.is_verified
    assert user.otp is None
    with pytest.raises(InvalidRequestError, match="Email is already verified"):
        users.verify_email(test_session, user.email, "123456")


def test_verify_email_expired_otp(test_session, send_mail):
    user = users.signup(test_session, signup_request())
    user.otp_expires_at = datetime.datetime.now(
        datetime.timezone.utc
    ) - datetime.timedelta(seconds=1)
    test_session.add(user)
    test_session.commit()

    with pytest.raises(InvalidRequestError, match="OTP has expired"):
        users.verify_email(test_session, user.email, user.otp)


def test_verify_unknown_email(test_session):
    with pytest.raises(InvalidRequestError, match="Invalid email or OTP"):
        users.verify_email(test_session, "nobody@x.com", "123456")


def test_resend_otp(test_session, send_mail, make_user):
    user = users.signup(test_session, signup_request())
    make_user("alice", "alice@x.com")

    users.resend_otp(test_session, user.email)

    assert send_mail.call_count == 2
    with pytest.raises(NotFoundError, match="Email not registered"):
        users.resend_otp(test_session, "nobody@x.com")
    with pytest.raises(InvalidRequestError, match="Email is already verified"):
        users.resend_otp(test_session, "alice@x.com")


def test_password_reset_flow(test_session, make_user, mocker):
    send_reset = mocker.patch(
        "services.email.send_password_reset_email", return_value=False
    )
    user = make_user("alice", "alice@x.com")

    users.forgot_password(test_session, "alice@x.com")
    otp = send_reset.call_args.args[1]

    with pytest.raises(InvalidRequestError, match="complexity"):
        users.reset_password(test_session, "alice@x.com", otp, "weak")
    users.reset_password(test_session, "alice@x.com", otp, "Brand#New1")

    assert check_password("Brand#New1", user.password_hash)
    assert user.otp is None


def test_forgot_password_unknown_email_is_silent(test_session, mocker):
    send_reset = mocker.patch("services.email.send_password_reset_email")

    users.forgot_password(test_session, "nobody@x.com")

    send_reset.assert_not_called()


def test_search_users_by_prefix(test_session, make_user):
    make_user("alice", "alice@x.com")
    make_user("Alicia", "alicia@x.com")
    make_user("bob", "bob@x.com")
    make_user("al_bundy", "al@x.com")

    results = users.search_users(test_session, "alice@x.com", "ALI")

    assert [r.username for r in results] == ["Alicia"]
    assert users.search_users(test_session, "bob@x.com", "al_") == [
        users.UserSearchResult(username="al_bundy", email="al@x.com")
    ]


def test_update_profile(test_session, make_user):
    make_user("alice", "alice@x.com")

    user = profile.update_profile(
        test_session,
        "alice@x.com",
        ProfileUpdate(
            current_password=TEST_PASSWORD,
            username="AliceW",
            city="Oslo",
            new_password="Brand#New1",
        ),
    )

    assert user.username == "AliceW"
    assert user.username_lower == "alicew"
    assert user.city == "Oslo"
    assert user.email == "alice@x.com"
    assert check_password("Brand#New1", user.password_hash)


def test_update_profile_checks_current_password(test_session, make_user):
    make_user("alice", "alice@x.com")

    with pytest.raises(InvalidRequestError, match="Invalid current password"):
        profile.update_profile(
            test_session,
            "alice@x.com",
            ProfileUpdate(current_password="Wrong#123", city="Oslo"),
        )


def test_update_profile_username_must_be_unique(test_session, make_user):
    make_user("alice", "alice@x.com")
    make_user("bob", "bob@x.com")

    with pytest.raises(InvalidRequestError, match="Username already taken"):
        profile.update_profile(
            test_session,
            "alice@x.com",
            ProfileUpdate(current_password=TEST_PASSWORD, username="BOB"),
        )
