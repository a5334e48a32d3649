"""
Tests for session token generation.

Tokens must look like UUID-v4 whatever randomness backs them, so the
shape is checked for the default source, for injected deterministic
sources, and for the pseudo-random fallback.
"""

import re
import secrets

import pytest

from registration_app import session_token
from registration_app.session_token import generate_session_token, select_random_source

UUID4_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}")


def assert_uuid4(token):
    assert len(token) == 36
    assert [i for i, c in enumerate(token) if c == "-"] == [8, 13, 18, 23]
    assert token[14] == "4"
    assert token[19] in "89ab"
    assert UUID4_PATTERN.fullmatch(token)


class TestGenerateSessionToken:
    def test_shape_and_uniqueness(self):
        tokens = [generate_session_token() for _ in range(10_000)]
        for token in tokens:
            assert_uuid4(token)
        assert len(set(tokens)) == len(tokens)

    def test_all_zero_source(self):
        token = generate_session_token(lambda n: bytes(n))
        assert token == "00000000-0000-4000-8000-000000000000"

    def test_all_ones_source(self):
        token = generate_session_token(lambda n: b"\xff" * n)
        assert token == "ffffffff-ffff-4fff-bfff-ffffffffffff"

    def test_requests_sixteen_bytes(self):
        requested = []

        def source(n):
            requested.append(n)
            return bytes(n)

        generate_session_token(source)
        assert requested == [16]

    def test_short_source_is_rejected(self):
        with pytest.raises(ValueError):
            generate_session_token(lambda n: b"\x01")


class TestSelectRandomSource:
    def test_prefers_os_source(self):
        assert select_random_source() is secrets.token_bytes

    def test_falls_back_to_pseudo_random(self, monkeypatch):
        def no_urandom(n):
            raise NotImplementedError

        monkeypatch.setattr(session_token.os, "urandom", no_urandom)
        source = select_random_source()

        assert source is not secrets.token_bytes
        tokens = {generate_session_token(source) for _ in range(100)}
        assert len(tokens) == 100
        for token in tokens:
            assert_uuid4(token)
