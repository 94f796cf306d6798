import logging

import pytest

ENV_VARS = ["TOPK_N", "TOPK_K", "TOPK_SEED", "TOPK_VALUE_RANGE_FACTOR", "TOPK_VERIFY"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # CLI runs attach a handler to a stream the runner closes afterwards
    logger = logging.getLogger("topkbench")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
