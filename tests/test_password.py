"""
Tests for bcrypt password hashing.
"""

import pytest

from auth.password import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret1", rounds=4)
        assert hashed != "secret1"
        assert "secret1" not in hashed
        assert hashed.startswith("$2")

    def test_verify_original_succeeds(self):
        hashed = hash_password("secret1", rounds=4)
        assert verify_password("secret1", hashed)

    @pytest.mark.parametrize("other", ["", "secret2", "Secret1", "secret1 "])
    def test_verify_other_fails(self, other):
        hashed = hash_password("secret1", rounds=4)
        assert not verify_password(other, hashed)

    def test_salts_differ(self):
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)

    def test_work_factor_is_encoded(self):
        assert hash_password("x", rounds=5).split("$")[2] == "05"

    def test_garbage_hash_is_rejected(self):
        assert not verify_password("secret1", "not-a-bcrypt-hash")


class TestAsyncWrappers:
    @pytest.mark.asyncio
    async def test_roundtrip_in_thread(self):
        hashed = await hash_password_async("secret1", rounds=4)
        assert await verify_password_async("secret1", hashed)
        assert not await verify_password_async("nope", hashed)


class TestLongPasswords:
    def test_over_72_bytes_hashes_and_verifies(self):
        password = "p" * 80
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed)

    def test_only_first_72_bytes_count(self):
        hashed = hash_password("a" * 72 + "tail-one", rounds=4)
        assert verify_password("a" * 72 + "tail-two", hashed)
        assert not verify_password("b" + "a" * 79, hashed)

    def test_multibyte_characters_are_cut_by_bytes(self):
        password = "ç" * 50
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed)
