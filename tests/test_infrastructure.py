import logging
from unittest.mock import MagicMock

import pytest
import redis

from bowen_hooks.core.config import Settings
from bowen_hooks.core.logging_config import configure_logging
from bowen_hooks.infrastructure.cache.redis_cache import RedisCache


@pytest.fixture
def redis_client():
    return MagicMock(spec=redis.Redis)


def test_redis_cache_operations(redis_client):
    cache = RedisCache(redis_client)
    redis_client.get.return_value = "value"

    cache.set_with_expiry("key", "value", 60)
    redis_client.setex.assert_called_once_with("key", 60, "value")
    assert cache.get("key") == "value"
    cache.delete("key")
    redis_client.delete.assert_called_once_with("key")


def test_redis_cache_propagates_errors(redis_client):
    redis_client.get.side_effect = redis.ConnectionError("down")
    with pytest.raises(redis.RedisError):
        RedisCache(redis_client).get("key")


def test_redis_ping(redis_client):
    cache = RedisCache(redis_client)
    redis_client.ping.return_value = True
    assert cache.ping() is True

    redis_client.ping.side_effect = redis.ConnectionError("down")
    assert cache.ping() is False


def test_allowed_email_domains():
    settings = Settings(UNIVERSITY_EMAIL_DOMAINS="@Bowen.edu.ng, uni.edu ,")
    assert settings.allowed_email_domains == ["bowen.edu.ng", "uni.edu"]


def test_is_production():
    assert Settings(ENVIRONMENT="production").is_production
    assert not Settings(ENVIRONMENT="development").is_production


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_bowen_hooks", False)]


def test_configure_logging_is_idempotent():
    settings = Settings(TESTING=True, LOG_LEVEL="DEBUG")
    configure_logging(settings)
    configure_logging(settings)

    handlers = _own_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_writes_files(tmp_path):
    configure_logging(Settings(TESTING=False, ENVIRONMENT="production", LOG_FILE_PATH=str(tmp_path)))
    try:
        handlers = _own_handlers()
        assert len(handlers) == 2
        logging.getLogger("bowen_hooks.test").error("disk full")
        for handler in handlers:
            handler.flush()
        assert "disk full" in (tmp_path / "error.log").read_text()
        assert "disk full" in (tmp_path / "combined.log").read_text()
    finally:
        configure_logging(Settings(TESTING=True, LOG_LEVEL="WARNING"))
