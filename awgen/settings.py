"""Project settings stored as key/value pairs in an SQLite file."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional, Union

SETTINGS_FILE_NAME = "settings.awgen"
"""Name of the settings file inside a project folder."""


class ProjectSettingsError(Exception):
    """Base error for project settings."""


class SettingsOpenError(ProjectSettingsError):
    """The settings file could not be opened."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"The settings file could not be opened: {cause}")


class SettingsQueryError(ProjectSettingsError):
    """An SQL query on the settings file failed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"An error occurred while executing a SQL query: {cause}")


class ProjectSettings:
    """Read and write access to the settings file of a project folder.

    With ``create`` set, a missing settings file is created; otherwise opening
    a folder without one raises SettingsOpenError.
    """

    def __init__(self, project_folder: Union[str, Path], create: bool = False) -> None:
        self._project_folder = Path(project_folder)
        settings_file = (self._project_folder / SETTINGS_FILE_NAME).resolve()
        mode = "rwc" if create else "rw"
        try:
            self._connection = sqlite3.connect(
                f"{settings_file.as_uri()}?mode={mode}",
                uri=True,
                check_same_thread=False,
            )
        except sqlite3.Error as err:
            raise SettingsOpenError(err) from err

        with self._query():
            self._connection.execute(
                "CREATE TABLE IF NOT EXISTS settings (key TEXT PRIMARY KEY, value TEXT)"
            )
            self._connection.commit()

    @property
    def project_folder(self) -> Path:
        """The folder that holds the settings file."""
        return self._project_folder

    def _query(self):
        return _QueryGuard()

    def get(self, key: str) -> Optional[str]:
        """The value stored under ``key``, or None when it is not set."""
        with self._query():
            row = self._connection.execute(
                "SELECT value FROM settings WHERE key = :key", {"key": key}
            ).fetchone()
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        with self._query():
            self._connection.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (:key, :value)",
                {"key": key, "value": value},
            )
            self._connection.commit()

    def remove(self, key: str) -> None:
        """Delete ``key``; nothing happens when it is not set."""
        with self._query():
            self._connection.execute("DELETE FROM settings WHERE key = :key", {"key": key})
            self._connection.commit()

    def close(self) -> None:
        """Close the connection to the settings file."""
        self._connection.close()

    def __enter__(self) -> ProjectSettings:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class _QueryGuard:
    """Turns SQLite errors into SettingsQueryError."""

    def __enter__(self) -> None:
        return None

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None and isinstance(exc, sqlite3.Error):
            raise SettingsQueryError(exc) from exc
        return False