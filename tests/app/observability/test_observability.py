"""Testes de correlation_id e métricas."""

from __future__ import annotations

import asyncio
import logging
import uuid

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    record_latency,
    record_verdict,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        token = set_correlation_id("corr-1")
        assert get_correlation_id() == "corr-1"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_generates_uuid_when_missing(self) -> None:
        token = set_correlation_id(None)
        try:
            uuid.UUID(get_correlation_id())
        finally:
            reset_correlation_id(token)

    def test_generate_returns_distinct_ids(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        async def _worker(value: str) -> str:
            token = set_correlation_id(value)
            try:
                await asyncio.sleep(0)
                return get_correlation_id()
            finally:
                reset_correlation_id(token)

        results = await asyncio.gather(*(_worker(f"id-{i}") for i in range(50)))
        assert results == [f"id-{i}" for i in range(50)]


class TestMetrics:
    def test_record_latency(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_latency("decide_endpoint", "decide", 1.23456, "c-1")
        record = caplog.records[-1]
        assert record.getMessage() == "metric_latency"
        assert record.latency_ms == 1.23
        assert record.component == "decide_endpoint"

    def test_record_verdict(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_verdict("YES", "random", "c-2")
        record = caplog.records[-1]
        assert record.getMessage() == "metric_verdict"
        assert record.answer == "YES"
        assert record.strategy == "random"
