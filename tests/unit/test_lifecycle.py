"""Unit tests for lifecycle.run: activate and uninstall from the command line."""

import logging
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from translation_stats import lifecycle


class _FakeInfrastructure:
    def __init__(self, service):
        self.service = service
        self.verify = AsyncMock()
        self.close = AsyncMock()

    @asynccontextmanager
    async def session_scope(self):
        yield SimpleNamespace()

    def settings_service(self, session, settings):
        return self.service


@pytest.fixture()
def fake_infra(monkeypatch):
    service = SimpleNamespace(
        activate=AsyncMock(return_value=True), uninstall=AsyncMock(return_value=True)
    )
    infra = _FakeInfrastructure(service)
    monkeypatch.setattr(
        lifecycle.InfrastructureContainer, "from_settings", classmethod(lambda cls, s: infra)
    )
    return infra


def _audit_lines(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == "audit"]


class TestRun:
    async def test_uninstall_is_audited(self, fake_infra, settings, caplog):
        caplog.set_level(logging.INFO, logger="audit")

        assert await lifecycle.run("uninstall", settings) is True

        fake_infra.service.uninstall.assert_awaited_once()
        fake_infra.close.assert_awaited_once()
        lines = _audit_lines(caplog)
        assert len(lines) == 1
        assert "action=uninstall" in lines[0]
        assert "role=operator" in lines[0]
        assert "host=" in lines[0]
        assert "result=True" in lines[0]

    async def test_activate_is_audited(self, fake_infra, settings, caplog):
        caplog.set_level(logging.INFO, logger="audit")
        fake_infra.service.activate.return_value = False

        assert await lifecycle.run("activate", settings) is False

        lines = _audit_lines(caplog)
        assert len(lines) == 1
        assert "action=activate" in lines[0]
        assert "result=False" in lines[0]

    async def test_failed_uninstall_is_not_audited(self, fake_infra, settings, caplog):
        caplog.set_level(logging.INFO, logger="audit")
        fake_infra.service.uninstall.side_effect = ConnectionError("redis down")

        with pytest.raises(ConnectionError):
            await lifecycle.run("uninstall", settings)

        fake_infra.close.assert_awaited_once()
        assert _audit_lines(caplog) == []

    async def test_unknown_command(self, settings):
        with pytest.raises(ValueError):
            await lifecycle.run("upgrade", settings)
