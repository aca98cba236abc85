import logging

from orderkit.configs import LoggingSettings


def init_logging(settings: LoggingSettings | None = None) -> None:
    """Configure the root logger for scripts and applications embedding orderkit."""
    settings = settings or LoggingSettings()
    logging.basicConfig(level=settings.LEVEL.upper(), format=settings.FORMAT, force=True)
