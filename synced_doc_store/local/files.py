"""LocalFileAccess implementation backed by aiofiles."""

from pathlib import Path

from ..protocol import LocalFileAccess
from .file_ops import file_exists, read_text, remove_file, write_text_atomic


class LocalFiles(LocalFileAccess):
    """Local filesystem access used by the store by default."""

    async def exists(self, path: Path) -> bool:
        return await file_exists(path)

    async def read_text(self, path: Path) -> str:
        return await read_text(path)

    async def write_text(self, path: Path, text: str) -> None:
        await write_text_atomic(path, text)

    async def delete(self, path: Path) -> bool:
        return await remove_file(path)
