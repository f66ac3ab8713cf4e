from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import jwt
import pytest

from calgrid.config import AuthSettings
from calgrid.services import AuthService, InvalidCredentialsError, InvalidTokenError, ServiceContext, UsernameTakenError
from calgrid.services.auth import AuthNotConfiguredError, hash_password, verify_password


@pytest.fixture
def auth(service_context):
    return AuthService(service_context)


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("hunter2")
    second = hash_password("hunter2")

    assert first != second
    assert first.startswith("scrypt$")
    assert verify_password("hunter2", first)
    assert not verify_password("hunter3", first)
    assert not verify_password("hunter2", "plaintext")


def test_sign_up_stores_hashed_password(auth, service_context):
    user = auth.sign_up("grace", "cobol")

    stored = service_context.users.fetch_by_username("grace")
    assert stored.id == user.id
    assert stored.password_hash != "cobol"


def test_duplicate_username_is_refused(auth):
    auth.sign_up("grace", "cobol")

    with pytest.raises(UsernameTakenError):
        auth.sign_up("grace", "other")


def test_sign_in_issues_token_with_identity(auth, settings):
    user = auth.sign_up("grace", "cobol")

    token = auth.sign_in("grace", "cobol")

    claims = jwt.decode(token, settings.auth.token_secret, algorithms=[settings.auth.algorithm])
    assert claims["id"] == user.id
    assert auth.identity_from_token(token) == user.id


@pytest.mark.parametrize("username, password", [("grace", "wrong"), ("nobody", "cobol")])
def test_sign_in_failures(auth, username, password):
    auth.sign_up("grace", "cobol")

    with pytest.raises(InvalidCredentialsError):
        auth.sign_in(username, password)


def test_foreign_token_is_rejected(auth):
    forged = jwt.encode({"id": "someone"}, "another-secret-that-is-also-long-enough", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        auth.identity_from_token(forged)


def test_missing_secret(settings, document_store):
    context = ServiceContext(
        settings=replace(settings, auth=AuthSettings(token_secret=None, algorithm="HS256")),
        store=document_store,
    )

    with pytest.raises(AuthNotConfiguredError):
        AuthService(context).issue_token("u1")


def test_concurrent_sign_ups_register_one_user(auth, service_context):
    def attempt(index):
        try:
            auth.sign_up("race", f"pw-{index}")
        except UsernameTakenError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=6) as pool:
        outcomes = list(pool.map(attempt, range(6)))

    assert outcomes.count(True) == 1
    assert len(service_context.store.find("users", username="race")) == 1
