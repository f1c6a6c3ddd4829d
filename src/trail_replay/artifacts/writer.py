"""All-or-nothing JSON artifact writer."""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)


def to_json(payload: object) -> str:
    """Pretty-print *payload* with 2-space indentation (deterministic)."""
    return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)


class ArtifactWriter:
    """Write several JSON artifacts so that none is touched on a late failure.

    Every payload is serialized before any file is opened, then written to a
    sibling ``*.tmp`` file and moved into place with :func:`os.replace`.
    """

    def write_all(self, artifacts: dict[Path, object]) -> list[Path]:
        """Serialize and write each ``path → payload`` pair (UTF-8).

        Returns:
            The written paths, in input order.
        """
        rendered = {Path(path): to_json(payload) for path, payload in artifacts.items()}

        staged: list[tuple[Path, Path]] = []
        try:
            for path, text in rendered.items():
                path.parent.mkdir(parents=True, exist_ok=True)
                tmp = path.with_name(path.name + ".tmp")
                tmp.write_text(text + "\n", encoding="utf-8")
                staged.append((tmp, path))
        except OSError:
            for tmp, _ in staged:
                with contextlib.suppress(OSError):
                    tmp.unlink()
            raise

        for tmp, path in staged:
            os.replace(tmp, path)
            _logger.info("Wrote %s", path)
        return [path for _, path in staged]
