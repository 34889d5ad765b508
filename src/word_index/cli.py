"""Interactive word lookup entrypoint."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from word_index.config import StartupOverrides
from word_index.index import IndexSourceError
from word_index.logging import AuditLogUnavailableError
from word_index.session import create_session


def main(
    work_dir: str | Path = ".",
    overrides: StartupOverrides | None = None,
    in_stream: TextIO | None = None,
    out_stream: TextIO | None = None,
    err_stream: TextIO | None = None,
) -> int:
    """Build the index, then run the interactive lookup loop."""
    err = err_stream if err_stream is not None else sys.stderr
    try:
        session = create_session(work_dir=work_dir, overrides=overrides, err_stream=err)
    except (IndexSourceError, AuditLogUnavailableError) as exc:
        err.write(f"error: {exc.reason}\n")
        err.write(f"hint: {exc.hint}\n")
        return 1
    except ValueError as exc:
        err.write(f"error: {exc}\n")
        return 1
    session.serve(
        in_stream=in_stream if in_stream is not None else sys.stdin,
        out_stream=out_stream if out_stream is not None else sys.stdout,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
