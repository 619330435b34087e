# tests/test_credentials.py

import base64
import time
from unittest import mock

import pytest

from apps.core.credentials import (
    HASH_VERSION,
    KEY_SIZE,
    SALT_SIZE,
    hash_password,
    issue_token,
    validate_token,
    verify_password,
)

KEY = 'signing-key'
ISSUER = 'MiniPM'


@pytest.mark.parametrize('password', ['secret1', 'correct horse battery staple', 'sênha-ç0m-ácento', ''])
def test_verify_accepts_hash_of_same_password(password):
    assert verify_password(password, hash_password(password))


def test_hash_is_salted_per_call():
    first = hash_password('secret1')
    second = hash_password('secret1')

    assert first != second
    assert verify_password('secret1', first)
    assert verify_password('secret1', second)


def test_hash_layout_is_version_salt_key():
    blob = base64.b64decode(hash_password('secret1'))

    assert len(blob) == 1 + SALT_SIZE + KEY_SIZE
    assert blob[0] == HASH_VERSION


def test_verify_rejects_wrong_password():
    assert not verify_password('secret2', hash_password('secret1'))


@pytest.mark.parametrize('blob', [
    '',
    'not base64 at all!!',
    base64.b64encode(b'\x00short').decode(),
    base64.b64encode(b'\x07' + b'\x00' * (SALT_SIZE + KEY_SIZE)).decode(),
])
def test_verify_returns_false_for_malformed_blob(blob):
    assert verify_password('secret1', blob) is False


def test_token_round_trip_carries_claims():
    token = issue_token(42, 'alice', KEY, ISSUER)

    claims = validate_token(token, KEY, ISSUER)

    assert claims is not None
    assert claims.subject == '42'
    assert claims.username == 'alice'
    assert claims.issuer == ISSUER


def test_token_signed_with_other_key_is_rejected():
    token = issue_token(42, 'alice', 'other-key', ISSUER)
    assert validate_token(token, KEY, ISSUER) is None


def test_token_from_other_issuer_is_rejected():
    token = issue_token(42, 'alice', KEY, 'SomeoneElse')
    assert validate_token(token, KEY, ISSUER) is None


def test_tampered_token_is_rejected():
    token = issue_token(42, 'alice', KEY, ISSUER)
    tampered = token[:-2] + ('AA' if not token.endswith('AA') else 'BB')
    assert validate_token(tampered, KEY, ISSUER) is None


@pytest.mark.parametrize('garbage', ['', 'abc', 'a:b:c', 'Bearer'])
def test_garbage_token_is_rejected(garbage):
    assert validate_token(garbage, KEY, ISSUER) is None


def test_token_expires_after_seven_days():
    token = issue_token(42, 'alice', KEY, ISSUER)
    now = time.time()

    with mock.patch('django.core.signing.time.time', return_value=now + 6 * 24 * 3600):
        assert validate_token(token, KEY, ISSUER) is not None

    with mock.patch('django.core.signing.time.time', return_value=now + 8 * 24 * 3600):
        assert validate_token(token, KEY, ISSUER) is None
