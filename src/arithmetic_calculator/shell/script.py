"""Load and replay key-press scripts."""
import lzma
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.engine.session import CalculatorSession, resolve_control


class ReplayStep(BaseModel):
    """Display shown after one line of a key script."""

    model_config = ConfigDict(frozen=True)

    line: str = Field(..., description="Script line as written")
    display: str = Field(..., description="Display text after the last key of the line")

    def __str__(self) -> str:
        return f"{self.line} -> {self.display}"


def split_keys(line: str) -> List[str]:
    """
    Split a script line into single key presses.

    Words are separated by whitespace. A control action or keypad alias is one key;
    any other word is pressed character by character.

    :param str line: Script line, e.g. ``"12 + 7 toggleSign ="``

    :return: Keys in press order
    :rtype: List[str]
    """
    keys: List[str] = []
    for word in line.split():
        if resolve_control(word) is not None:
            keys.append(word)
        else:
            keys.extend(word)
    return keys


class KeyScript(BaseModel):
    """
    Key-press script read from a text file or an archive.

    Supported formats:
    - .txt
    - .zip, .tar.xz and .7z containing at least one .txt file
    """

    model_config = ConfigDict(frozen=True)

    path: FilePath = Field(..., description="Script file or archive")

    def read(self) -> str:
        """
        Return the script text.

        :return: Content of the script, or of the first .txt file in the archive
        :rtype: str
        :raises ValueError: If the archive format is unsupported, corrupt or contains no .txt file
        """
        if self.path.suffix == ".txt":
            return self.path.read_text(encoding="utf-8")
        try:
            return self._extract_archive(self.path)
        except (zipfile.BadZipFile, tarfile.TarError, lzma.LZMAError, py7zr.Bad7zFile) as exc:
            raise ValueError(f"📄❌ Corrupt archive {self.path.name}: {exc}") from exc

    def lines(self) -> List[str]:
        """Non-empty script lines, stripped."""
        return [line.strip() for line in self.read().splitlines() if line.strip()]

    def _extract_archive(self, archive_path: Path) -> str:
        """
        Extract the first .txt file found in a supported archive and return its content.

        :param Path archive_path: Path to the archive file

        :return: Content of the extracted .txt file
        :rtype: str
        :raises ValueError: If no .txt file is found or format is unsupported
        """
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            if archive_path.suffix == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    txt_files = [f for f in zf.namelist() if f.endswith(".txt")]
                    if not txt_files:
                        raise ValueError("📄❌ No .txt file found in zip archive")
                    zf.extract(txt_files[0], path=tmpdir_path)
                    return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                with tarfile.open(archive_path, "r:xz") as tf:
                    txt_members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
                    if not txt_members:
                        raise ValueError("📄❌ No .txt file found in tar.xz archive")
                    extracted = tf.extractfile(txt_members[0])
                    return extracted.read().decode("utf-8")

            elif archive_path.suffix == ".7z":
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    txt_files = [f for f in archive.getnames() if f.endswith(".txt")]
                    if not txt_files:
                        raise ValueError("📄❌ No .txt file found in 7z archive")
                    archive.extract(path=tmpdir_path, targets=[txt_files[0]])
                    return (tmpdir_path / txt_files[0]).read_text(encoding="utf-8")

            else:
                raise ValueError(f"📄❌ Unsupported script format: {archive_path.suffix}")


def replay(session: CalculatorSession, lines: List[str]) -> List[ReplayStep]:
    """
    Press the keys of each line in turn and record the display after each line.

    :param CalculatorSession session: Session receiving the keys
    :param List[str] lines: Script lines

    :return: One step per line
    :rtype: List[ReplayStep]
    """
    steps: List[ReplayStep] = []
    for line in lines:
        for key in split_keys(line):
            session.handle_input(key)
        steps.append(ReplayStep(line=line, display=session.get_display_text()))
        logger.debug(f"▶️ {line} -> {session.get_display_text()}")
    return steps
