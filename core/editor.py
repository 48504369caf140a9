import shlex
import subprocess

from .errors import EditorLaunchError
from .logger import log_event


class EditorLauncher:
    def __init__(self, command: str):
        self.command = command

    def edit(self, path: str) -> int:
        """Open `path` in the editor and block until the editor exits."""
        argv = shlex.split(self.command) + [str(path)]
        try:
            completed = subprocess.run(argv)
        except OSError as err:
            log_event("ERROR", "Editor failed to start", {"editor": self.command, "error": str(err)})
            raise EditorLaunchError(self.command, str(err)) from err

        if completed.returncode != 0:
            log_event("WARNING", "Editor exited with non-zero status", {"returncode": completed.returncode})
        return completed.returncode
