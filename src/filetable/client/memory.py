class InMemoryFileSource:
    """Dict-backed file source; ``None`` content simulates a failed download."""

    def __init__(self, files: dict[str, str | None] | None = None, list_error: Exception | None = None) -> None:
        self.files: dict[str, str | None] = dict(files or {})
        self.list_error = list_error
        self.downloads: list[str] = []

    async def list_files(self) -> list[str]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.files)

    async def download_file_content(self, file_name: str) -> str | None:
        self.downloads.append(file_name)
        return self.files.get(file_name)

    async def ping(self) -> bool:
        return self.list_error is None

    async def aclose(self) -> None:
        pass
