"""Gateway: file-based persistence -- implements PersistenceGateway port."""

from __future__ import annotations

import logging
from pathlib import Path

from draft_zero.l1_entities.errors import DocumentIOError, DocumentNotFoundError

log = logging.getLogger('dz.persist')


class FilePersistenceGateway:
    """Reads and writes whole documents as UTF-8 text on the local filesystem."""

    def read_text(self, path: str) -> str:
        file_path = Path(path).expanduser()
        try:
            text = file_path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise DocumentNotFoundError(f'File not found: {file_path}') from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f'Cannot read {file_path}: {e}') from e
        log.debug('Read %d chars from %s', len(text), file_path)
        return text

    def write_text(self, path: str, text: str) -> Path:
        file_path = Path(path).expanduser()
        try:
            file_path.write_text(text, encoding='utf-8', newline='')
        except OSError as e:
            raise DocumentIOError(f'Cannot write {file_path}: {e}') from e
        log.debug('Wrote %d chars to %s', len(text), file_path.name)
        return file_path
