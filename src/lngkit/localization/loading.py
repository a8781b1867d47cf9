"""Language file loading from disk.

Provides a directory-based loader with path-traversal security and an
immutable result type for tracking load attempts.

Components:
    LngFileLoader - Disk-based loader rooted at one directory
    LngLoadResult - Immutable result of a single load attempt

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from lngkit.constants import LNG_FILE_SUFFIX
from lngkit.diagnostics import LngError
from lngkit.enums import LoadStatus
from lngkit.syntax import LngParser

if TYPE_CHECKING:
    from lngkit.syntax import LngResource, TranslationHeader

__all__ = ["LngFileLoader", "LngLoadResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LngLoadResult:
    """Result of loading a single language file.

    Attributes:
        path: Human-readable path of the file
        status: Load status (success, not_found, error)
        resource: Parsed file if status is SUCCESS, None otherwise
        error: Exception if status is ERROR, None otherwise
    """

    path: str
    status: LoadStatus
    resource: LngResource | None = None
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file loaded and parsed successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file does not exist."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if reading or parsing failed."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LngFileLoader:
    """Loads language files from a fixed directory.

    Security:
        File names containing "..", path separators or absolute paths are
        rejected. All resolved paths are validated against root_dir.

    Example:
        >>> loader = LngFileLoader("Languages")
        >>> result = loader.load("german.lng")
        >>> if result.is_success:
        ...     print(result.resource.header.language_name)
        Deutsch

    Attributes:
        root_dir: Directory holding the language files
        parser: Parser used for every file (default: LngParser())
    """

    root_dir: str | Path
    parser: LngParser = field(default_factory=LngParser)
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_name(name: str) -> None:
        """Validate a file name for path traversal attacks.

        Raises:
            ValueError: If name is empty or contains unsafe path components
        """
        if not name or name.strip() != name:
            msg = f"Invalid language file name: {name!r}"
            raise ValueError(msg)
        if Path(name).is_absolute():
            msg = f"Absolute paths not allowed in file name: '{name}'"
            raise ValueError(msg)
        if ".." in name:
            msg = f"Path traversal sequences not allowed in file name: '{name}'"
            raise ValueError(msg)
        if "/" in name or "\\" in name:
            msg = f"Path separators not allowed in file name: '{name}'"
            raise ValueError(msg)

    def describe_path(self, name: str) -> str:
        """Return human-readable path for diagnostics."""
        return str(Path(self.root_dir) / name)

    def resolve(self, name: str) -> Path:
        """Resolve a file name inside root_dir.

        Raises:
            ValueError: If name would escape root_dir
        """
        self._validate_name(name)
        full_path = (self._resolved_root / name).resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = f"Path traversal detected: resolved path escapes root directory: '{name}'"
            raise ValueError(msg)
        return full_path

    def read(self, name: str) -> bytes:
        """Read raw file content.

        Raises:
            ValueError: If name contains path traversal sequences
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
        """
        return self.resolve(name).read_bytes()

    def available(self) -> tuple[str, ...]:
        """Names of all language files in root_dir, sorted."""
        if not self._resolved_root.is_dir():
            return ()
        return tuple(
            sorted(
                path.name
                for path in self._resolved_root.iterdir()
                if path.suffix == LNG_FILE_SUFFIX and path.is_file()
            )
        )

    def load(self, name: str) -> LngLoadResult:
        """Load and parse one language file.

        Never raises for I/O, naming or parse failures; they are reported
        through the returned result.

        Args:
            name: File name relative to root_dir (e.g. "german.lng")

        Returns:
            Load result with status and parsed resource or error
        """
        path = self.describe_path(name)
        try:
            source = self.read(name)
        except FileNotFoundError:
            logger.info("Language file not found: %s", path)
            return LngLoadResult(path=path, status=LoadStatus.NOT_FOUND)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read language file %s: %s", path, e)
            return LngLoadResult(path=path, status=LoadStatus.ERROR, error=e)

        try:
            resource = self.parser.parse(source)
        except (LngError, ValueError) as e:
            logger.warning("Failed to parse language file %s: %s", path, e)
            return LngLoadResult(path=path, status=LoadStatus.ERROR, error=e)

        return LngLoadResult(path=path, status=LoadStatus.SUCCESS, resource=resource)

    def load_all(self) -> tuple[LngLoadResult, ...]:
        """Load every available language file."""
        return tuple(self.load(name) for name in self.available())

    def load_header(self, name: str) -> TranslationHeader:
        """Read and parse only the header of one language file.

        Raises:
            ValueError: If name contains path traversal sequences
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
            LngSyntaxError: If the header is missing or incomplete
        """
        return self.parser.parse_header(self.read(name))
