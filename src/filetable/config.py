import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://echo-serv.tbxnet.com/v1"
DEFAULT_API_KEY = "aSuperSecretKey"


@dataclass(frozen=True)
class FileSourceSettings:
    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY
    timeout_seconds: float = 10.0
    cors_origins: tuple[str, ...] = field(default=("*",))

    @property
    def auth_header(self) -> str:
        return f"Bearer {self.api_key}"


def get_settings() -> FileSourceSettings:
    origins = os.getenv("FILETABLE_CORS_ORIGINS", "*")
    return FileSourceSettings(
        base_url=os.getenv("FILETABLE_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        api_key=os.getenv("FILETABLE_API_KEY", DEFAULT_API_KEY),
        timeout_seconds=float(os.getenv("FILETABLE_HTTP_TIMEOUT", "10")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
    )
