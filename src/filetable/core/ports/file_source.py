from typing import Protocol


class FileSource(Protocol):
    async def list_files(self) -> list[str]: ...

    async def download_file_content(self, file_name: str) -> str | None: ...

    async def ping(self) -> bool: ...

    async def aclose(self) -> None: ...
