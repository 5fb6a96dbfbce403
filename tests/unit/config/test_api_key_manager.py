from config.api_key_manager import CredentialPool
from config.settings import Settings


def test_pool_from_comma_separated_value():
    pool = CredentialPool.from_env_value(" key1, key2 ,,key3 ")

    assert pool.tokens == ("key1", "key2", "key3")
    assert len(pool) == 3
    assert list(pool) == ["key1", "key2", "key3"]


def test_blank_value_gives_empty_pool():
    assert not CredentialPool.from_env_value(None)
    assert not CredentialPool.from_env_value("  , ,")
    assert len(CredentialPool()) == 0


def test_repr_hides_tokens():
    pool = CredentialPool(("SECRETKEY1234567",))
    assert "SECRETKEY" not in repr(pool)
    assert "size=1" in repr(pool)


def test_settings_reads_pool_from_environment(monkeypatch):
    monkeypatch.setenv('ALPHAVANTAGE_API_KEY', 'aaa,bbb')
    monkeypatch.setenv('ALPHAVANTAGE_TIMEOUT_SECONDS', 'not-a-number')

    fresh = Settings()

    assert fresh.credential_pool.tokens == ('aaa', 'bbb')
    assert fresh.get_key_count() == 2
    assert fresh.ALPHAVANTAGE_TIMEOUT_SECONDS == 30.0


def test_mask_api_key():
    assert Settings.mask_api_key("ABCDEFGHIJKL") == "ABCD...IJKL"
    assert Settings.mask_api_key("short") == "****"
    assert Settings.mask_api_key("") == "****"
