import string

import pytest
from argon2.low_level import Type, hash_secret_raw

from atividades.services.password_service import (
    ARGON2_MEMORY_COST,
    ARGON2_PARALLELISM,
    ARGON2_TIME_COST,
    KEY_LENGTH,
    MalformedPasswordHash,
    hash_password,
    verify_password,
)


class TestHashPassword:

    def test_hash_has_key_and_salt_in_hex(self):
        hashed = hash_password('password123')

        assert hashed.count('.') == 1
        key_hex, salt_hex = hashed.split('.')
        assert len(key_hex) == 128
        assert len(salt_hex) == 32
        assert set(key_hex + salt_hex) <= set(string.hexdigits.lower())

    def test_same_password_gets_different_salts(self):
        assert hash_password('password123') != hash_password('password123')


class TestVerifyPassword:

    def test_correct_password(self):
        hashed = hash_password('password123')

        assert verify_password('password123', hashed) is True

    def test_wrong_password(self):
        hashed = hash_password('password123')

        assert verify_password('password124', hashed) is False
        assert verify_password('', hashed) is False

    def test_verify_is_case_sensitive(self):
        hashed = hash_password('Segredo!')

        assert verify_password('segredo!', hashed) is False

    @pytest.mark.parametrize('stored', ['semseparador', 'abc.', '.abc', 'zz.zz', 'a.b.c', 'abcd.0011'])
    def test_malformed_hash_raises(self, stored):
        with pytest.raises(MalformedPasswordHash):
            verify_password('password123', stored)


def test_key_is_argon2id_of_password_and_salt():
    hashed = hash_password('password123')
    key_hex, salt_hex = hashed.split('.')

    expected = hash_secret_raw(
        b'password123',
        bytes.fromhex(salt_hex),
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST,
        parallelism=ARGON2_PARALLELISM,
        hash_len=KEY_LENGTH,
        type=Type.ID,
    )

    assert bytes.fromhex(key_hex) == expected
