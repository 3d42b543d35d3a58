"""Tests for token signing and password hashing."""

import json

import pytest

from roomease_api.app.core.security import (
    _b64_url_decode,
    create_access_token,
    decode_access_token,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)
from roomease_api.app.schemas.user import Identity


IDENTITY = Identity(id="user_1", email="sam@example.com", role="student")


@pytest.mark.unit
def test_token_round_trip():
    token = issue_token(IDENTITY, secret_key="k1")
    assert token.count(".") == 2
    assert verify_token(token, "k1") == IDENTITY
    assert decode_access_token(token, "k1")["exp"] > 0


@pytest.mark.unit
def test_token_header_declares_hs256():
    header = issue_token(IDENTITY, secret_key="k1").split(".")[0]
    assert json.loads(_b64_url_decode(header)) == {"alg": "HS256", "typ": "JWT"}


@pytest.mark.unit
def test_token_signed_with_other_secret_is_rejected():
    token = issue_token(IDENTITY, secret_key="k1")
    assert verify_token(token, "k2") is None


@pytest.mark.unit
def test_expired_token_is_rejected():
    token = issue_token(IDENTITY, secret_key="k1", expires_delta=-60)
    assert verify_token(token, "k1") is None


@pytest.mark.unit
def test_tampered_payload_is_rejected():
    header, _, signature = issue_token(IDENTITY, secret_key="k1").split(".")
    forged_payload = create_access_token({"id": "user_2", "email": "x@example.com"}, secret_key="k1").split(".")[1]
    assert verify_token(f"{header}.{forged_payload}.{signature}", "k1") is None


@pytest.mark.unit
@pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c", "!!.??.%%"])
def test_garbage_tokens_are_rejected(token):
    assert verify_token(token, "k1") is None


@pytest.mark.unit
def test_token_without_id_claim_is_rejected():
    token = create_access_token({"email": "sam@example.com"}, secret_key="k1")
    assert verify_token(token, "k1") is None


@pytest.mark.unit
def test_password_hashing():
    hashed = hash_password("correct horse")
    assert hashed != hash_password("correct horse")  # random salt
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


@pytest.mark.unit
@pytest.mark.parametrize("stored", ["", "nodollar", "zz$zz"])
def test_malformed_hash_never_verifies(stored):
    assert not verify_password("anything", stored)
