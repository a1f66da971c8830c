import logging
import pytest
from martcrowd.common.logging import setup_logger, log_execution_time

def test_setup_logger_single_handler():
    logger = setup_logger("martcrowd.test.single")
    setup_logger("martcrowd.test.single")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO

def test_sync_function_wrapped():
    logger = setup_logger("martcrowd.test.sync")

    @log_execution_time(logger)
    def add(a, b):
        return a + b

    assert add(1, 2) == 3
    assert add.__name__ == "add"

def test_sync_failure_reraised(caplog):
    logger = setup_logger("martcrowd.test.sync_fail")

    @log_execution_time(logger)
    def broken():
        raise KeyError("x")

    with caplog.at_level(logging.ERROR, logger="martcrowd.test.sync_fail"):
        with pytest.raises(KeyError):
            broken()
    assert "broken failed" in caplog.text

@pytest.mark.asyncio
async def test_coroutine_wrapped():
    logger = setup_logger("martcrowd.test.async")

    @log_execution_time(logger)
    async def double(x):
        return x * 2

    assert await double(4) == 8

@pytest.mark.asyncio
async def test_coroutine_failure_reraised():
    logger = setup_logger("martcrowd.test.async_fail")

    @log_execution_time(logger)
    async def broken():
        raise ValueError("nope")

    with pytest.raises(ValueError):
        await broken()
