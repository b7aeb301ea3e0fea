"""Tests for BaseService."""

from vetted.config.settings import VettedSettings
from vetted.services.base import BaseService


def test_stores_settings(settings: VettedSettings) -> None:
    svc = BaseService(settings)
    assert svc._settings is settings
