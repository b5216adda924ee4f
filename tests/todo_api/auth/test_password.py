import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('BCRYPT_ROUNDS', '4')

from todo_api.auth.password import dummy_password_hash, hash_password, verify_password  # noqa: E402


def test_hash_password_never_stores_plaintext() -> None:
    hashed = hash_password('secret12', rounds=4)

    assert hashed != 'secret12'
    assert 'secret12' not in hashed
    assert hashed.startswith('$2')


def test_hash_password_salts_each_hash() -> None:
    assert hash_password('secret12', rounds=4) != hash_password('secret12', rounds=4)


def test_verify_password_matches_only_original_plaintext() -> None:
    hashed = hash_password('secret12', rounds=4)

    assert verify_password('secret12', hashed)
    assert not verify_password('secret13', hashed)


def test_verify_password_returns_false_for_malformed_hash() -> None:
    assert not verify_password('secret12', 'not-a-bcrypt-hash')


def test_dummy_password_hash_is_reused_and_matches_nothing_guessable() -> None:
    hashed = dummy_password_hash()

    assert dummy_password_hash() is hashed
    assert hashed.startswith('$2')
    assert not verify_password('secret12', hashed)
    assert not verify_password('', hashed)
