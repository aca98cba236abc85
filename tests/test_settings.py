import logging

import pytest
from dishka import make_container

from orderkit.config.settings import OrderingSettings
from orderkit.configs import LoggingSettings
from orderkit.core.enums import TargetIndexCapture
from orderkit.core.services.ordering import OrderingService
from orderkit.di.config import OrderingConfigProvider
from orderkit.di.service import ServiceProvider
from orderkit.logger import init_logging


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TARGET_INDEX_CAPTURE", raising=False)
    monkeypatch.delenv("LOGGING__LEVEL", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = OrderingSettings()
    assert settings.TARGET_INDEX_CAPTURE == TargetIndexCapture.AFTER_REMOVAL
    assert settings.logging.LEVEL == "INFO"


def test_reads_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TARGET_INDEX_CAPTURE", "BEFORE_REMOVAL")
    clean_env.setenv("LOGGING__LEVEL", "DEBUG")

    settings = OrderingSettings()

    assert settings.TARGET_INDEX_CAPTURE == TargetIndexCapture.BEFORE_REMOVAL
    assert settings.logging.LEVEL == "DEBUG"


def test_reads_env_file(clean_env: pytest.MonkeyPatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("TARGET_INDEX_CAPTURE=BEFORE_REMOVAL\nUNRELATED=1\n", encoding="utf-8")
    assert OrderingSettings().TARGET_INDEX_CAPTURE == TargetIndexCapture.BEFORE_REMOVAL


def test_service_from_settings() -> None:
    settings = OrderingSettings(TARGET_INDEX_CAPTURE=TargetIndexCapture.BEFORE_REMOVAL)
    service = OrderingService.from_settings(settings)
    assert service.capture == TargetIndexCapture.BEFORE_REMOVAL


def test_container_provides_configured_service(clean_env: pytest.MonkeyPatch) -> None:
    settings = OrderingSettings(TARGET_INDEX_CAPTURE=TargetIndexCapture.BEFORE_REMOVAL)
    container = make_container(
        OrderingConfigProvider(),
        ServiceProvider(),
        context={OrderingSettings: settings},
    )
    try:
        service = container.get(OrderingService)
        assert service.capture == TargetIndexCapture.BEFORE_REMOVAL
        assert container.get(OrderingService) is service
        assert container.get(LoggingSettings) is settings.logging
    finally:
        container.close()


def test_init_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        init_logging(LoggingSettings(LEVEL="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
