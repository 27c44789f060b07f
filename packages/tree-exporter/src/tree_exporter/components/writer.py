import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def write_tree(records: list[dict[str, Any]], output_path: str | Path, indent: int = 2) -> Path:
    """
    Write *records* to *output_path* as a JSON array.

    Missing parent directories are created. The file is written to a temp
    file in the same directory and then moved into place, so readers never
    see a partial tree.

    Returns:
        The path that was written.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    json_str = json.dumps(records, indent=indent, ensure_ascii=False)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".tmp",
            dir=output_path.parent,
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(json_str)

        # Atomic rename, replaces an existing export
        os.replace(tmp_path, output_path)
    except OSError:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.debug("Tree written to %s (%d records)", output_path, len(records))
    return output_path
