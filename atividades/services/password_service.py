"""Hash de senhas com Argon2id (argon2-cffi).

O valor armazenado tem o formato ``<chave hex>.<salt hex>``, entao a
verificacao nao depende de nenhuma outra coluna.
"""

import hmac
import secrets

from argon2.low_level import Type, hash_secret_raw

SALT_BYTES = 16
KEY_LENGTH = 64

# Custo do Argon2id (64 MiB por derivacao)
ARGON2_TIME_COST = 3
ARGON2_MEMORY_COST = 64 * 1024
ARGON2_PARALLELISM = 4


class MalformedPasswordHash(ValueError):
    pass


def _derive_key(password: str, salt: bytes) -> bytes:
    return hash_secret_raw(
        password.encode('utf-8'),
        salt,
        time_cost=ARGON2_TIME_COST,
        memory_cost=ARGON2_MEMORY_COST,
        parallelism=ARGON2_PARALLELISM,
        hash_len=KEY_LENGTH,
        type=Type.ID,
    )


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(SALT_BYTES)
    key = _derive_key(password, salt)
    return f'{key.hex()}.{salt.hex()}'


def _split_stored_hash(stored: str):
    if not isinstance(stored, str) or stored.count('.') != 1:
        raise MalformedPasswordHash('Hash de senha sem separador.')

    key_hex, salt_hex = stored.split('.')
    if not key_hex or not salt_hex:
        raise MalformedPasswordHash('Hash de senha incompleto.')

    try:
        key, salt = bytes.fromhex(key_hex), bytes.fromhex(salt_hex)
    except ValueError as exc:
        raise MalformedPasswordHash('Hash de senha nao esta em hexadecimal.') from exc

    # Argon2 exige salt de pelo menos 8 bytes
    if len(salt) < 8:
        raise MalformedPasswordHash('Salt curto demais.')
    return key, salt


def verify_password(password: str, stored: str) -> bool:
    """Confere ``password`` contra o valor salvo por :func:`hash_password`.

    Retorna False quando a senha nao confere. Um valor salvo mal formado
    levanta :class:`MalformedPasswordHash`.
    """
    expected_key, salt = _split_stored_hash(stored)
    supplied_key = _derive_key(password, salt)
    return hmac.compare_digest(expected_key, supplied_key)
