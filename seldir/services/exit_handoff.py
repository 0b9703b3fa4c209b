from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from seldir.core.errors import wrap_error


def emit_exit_path(
    path: Path,
    *,
    output_file: Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """Hand the chosen directory to whoever launched seldir.

    With ``output_file`` the path is written there (for a shell function that
    reads it back and ``cd``s); otherwise it is printed to stdout.
    """
    text = str(path)
    if output_file is not None:
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(f"{text}\n", encoding="utf-8")
        except OSError as exc:
            raise wrap_error(
                exc,
                code="output_file_unwritable",
                message=f"Unable to write {output_file}",
            ) from exc
        return
    target = stream if stream is not None else sys.stdout
    print(text, file=target)


SHELL_FUNCTION = """\
sd() {
    local target
    target="$(mktemp)"
    seldir --output-file "$target" "$@" && cd "$(cat "$target")"
    rm -f "$target"
}
"""
