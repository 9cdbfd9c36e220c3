"""
Command-line host for the calculator.

This script:
- Replays a key-press script (plain text or archive) given as argument
- Or, without argument, reads key lines from stdin and prints the display after each
- Writes a transcript and the history next to the replayed script
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional, TextIO

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_calculator.common.config import CalculatorSettings
from arithmetic_calculator.common.logger import configure_logging, logger
from arithmetic_calculator.engine.session import CalculatorSession
from arithmetic_calculator.shell.script import KeyScript, ReplayStep, replay


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        Key-press script to replay; interactive mode when omitted.
    """

    file_path: Optional[FilePath] = None


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, ``sys.argv[1:]`` when omitted
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(description="Left-to-right arithmetic calculator")

    parser.add_argument(
        "file_path",
        nargs="?",
        help="Key-press script (.txt, .zip, .tar.xz or .7z); reads stdin when omitted",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the transcript path for a key script.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: scripts/chaining.7z
    output: scripts/chaining_7z_results.txt

    :param input_path: Path to the key script
    :return: Path to the transcript file
    """
    base_name = input_path.name[: -len("".join(input_path.suffixes))] if input_path.suffixes else input_path.name
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{base_name}{suffix_safe}_results.txt")


def render_transcript(steps: List[ReplayStep], history: List[str]) -> str:
    """
    Render replay steps followed by the history as text.

    :param steps: Display after each script line
    :param history: History lines, newest first
    :return: Transcript text
    """
    lines = [str(step) for step in steps]
    lines.append("")
    lines.append("History:")
    lines.extend(history)
    return "\n".join(lines) + "\n"


def run_script(session: CalculatorSession, input_path: Path) -> Path:
    """
    Replay a key script and write its transcript.

    :param session: Session receiving the keys
    :param input_path: Key script to replay
    :return: Path of the written transcript
    :raises ValueError: If the script cannot be read
    """
    script = KeyScript(path=input_path)
    steps = replay(session, script.lines())

    output_path = build_output_path(input_path)
    transcript = render_transcript(steps, session.get_history())
    output_path.write_text(transcript, encoding="utf-8")
    logger.info(f"💾 Transcript written to {output_path}")

    print(transcript, end="")
    return output_path


def run_interactive(session: CalculatorSession, stream: TextIO) -> None:
    """
    Read key lines from a stream and print the display after each line.

    :param session: Session receiving the keys
    :param stream: Source of key lines, usually stdin
    """
    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue
        replay(session, [line])
        print(session.get_display_text())

    print("History:")
    for entry in session.get_history():
        print(entry)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function of the ``arithmetic-calculator`` command.
    """
    settings = CalculatorSettings()
    configure_logging(settings)

    cli_args = parse_args(argv)
    session = CalculatorSession(settings=settings)

    if cli_args.file_path is None:
        run_interactive(session, sys.stdin)
        return

    try:
        run_script(session, Path(cli_args.file_path))
    except ValueError as exc:
        logger.error(f"📄❌ Could not replay {cli_args.file_path}: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
