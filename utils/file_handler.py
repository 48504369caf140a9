import os
import tempfile
from pathlib import Path


def read_seed_file(path) -> str:
    return Path(path).read_text(encoding="utf-8")


def edit_in_tempfile(text: str, launcher) -> str:
    """
    Write `text` to a temporary file, let the user edit it, and return the
    edited text. The file is removed afterwards.
    """
    with tempfile.NamedTemporaryFile("w", suffix=".txt", encoding="utf-8", delete=False) as f:
        f.write(text)
        file_path = Path(f.name)

    try:
        launcher.edit(file_path)
        return file_path.read_text(encoding="utf-8")
    finally:
        try:
            os.remove(file_path)
        except FileNotFoundError:
            pass
