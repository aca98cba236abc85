from pydantic.main import BaseModel


class LoggingSettings(BaseModel):
    LEVEL: str = "INFO"
    FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
