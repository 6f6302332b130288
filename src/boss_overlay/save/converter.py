"""
Wrapper around the external ``uesave`` converter.

The converter turns a binary .sav file into JSON::

    uesave to-json --input <save.sav> --output <save.json>

Any failure (missing binary, non-zero exit, timeout, unreadable output) is
reported as ConverterError so callers can fall back gracefully.
"""

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Protocol

import orjson

from .models import SaveTree

CONVERTER_NAMES = ("uesave", "uesave.exe")
DEFAULT_TIMEOUT_SECONDS = 60.0


class ConverterError(Exception):
    """Raised when the converter is unavailable or fails."""
    pass


class SaveConverter(Protocol):
    """Anything that can turn a save file into a structured tree."""

    def convert(self, save_path: Path) -> SaveTree:
        ...


class UesaveConverter:
    """Runs the uesave binary in a temporary directory."""

    def __init__(
        self,
        executable: Optional[str | Path] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize the converter.

        Args:
            executable: Explicit path to the binary; searched on PATH when None
            timeout: Seconds to wait for a single conversion
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.executable = Path(executable) if executable else None
        self.timeout = timeout

    def find_executable(self) -> Optional[Path]:
        """Locate the converter binary.

        Returns:
            Path to the binary or None if it cannot be found
        """
        if self.executable is not None:
            return self.executable if self.executable.is_file() else None
        for name in CONVERTER_NAMES:
            found = shutil.which(name)
            if found:
                return Path(found)
        return None

    def is_available(self) -> bool:
        """Check whether the binary can be found."""
        return self.find_executable() is not None

    def convert(self, save_path: Path) -> SaveTree:
        """Convert a save file to its structured tree.

        Args:
            save_path: Path to the .sav file

        Returns:
            Parsed JSON tree

        Raises:
            ConverterError: On any conversion failure
        """
        executable = self.find_executable()
        if executable is None:
            raise ConverterError(
                f"uesave not found (configured: {self.executable or 'PATH lookup'})"
            )

        try:
            with tempfile.TemporaryDirectory(prefix="boss_overlay_") as temp_dir:
                tree = self._run(executable, save_path, Path(temp_dir))
        except OSError as e:
            raise ConverterError(f"Cannot use temporary directory: {e}") from e

        if not isinstance(tree, dict):
            raise ConverterError("Converter output is not a JSON object")
        return tree

    def _run(self, executable: Path, save_path: Path, temp_dir: Path) -> object:
        """Invoke uesave into temp_dir and parse what it wrote."""
        output_path = temp_dir / f"{save_path.stem}.json"
        command = [
            str(executable),
            "to-json",
            "--input",
            str(save_path),
            "--output",
            str(output_path),
        ]
        self.logger.debug(f"Running converter: {' '.join(command)}")

        try:
            subprocess.run(
                command,
                check=True,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", "replace").strip() if e.stderr else ""
            raise ConverterError(
                f"uesave exited with status {e.returncode}: {stderr}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ConverterError(f"uesave timed out after {self.timeout}s") from e
        except OSError as e:
            raise ConverterError(f"Cannot run uesave: {e}") from e

        try:
            with output_path.open("rb") as f:  # orjson works with bytes
                return orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            raise ConverterError(f"Unreadable converter output: {e}") from e
