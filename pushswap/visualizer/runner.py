"""Running an external sorter and collecting the instructions it prints."""

import subprocess
from typing import List

DEFAULT_PATH = "../../push_swap"


class PushSwapRunner:
    """Runs ``path`` through the shell with the numbers as its arguments."""

    def __init__(self, path: str = DEFAULT_PATH) -> None:
        self.path = path
        self.commands: List[str] = []

    def run(self, numbers: str) -> List[str]:
        """Run the sorter on ``numbers`` and return the lines it printed.

        The exit status is ignored. Raises RuntimeError when the shell cannot
        be started.
        """
        self.commands = []
        command = f"{self.path} {numbers}"
        try:
            completed = subprocess.run(
                command,
                shell=True,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as error:
            raise RuntimeError(f"cannot run {command!r}") from error
        output = completed.stdout
        self.commands = output.split("\n")
        if self.commands and self.commands[-1] == "":
            self.commands.pop()
        if output == "":
            self.commands = []
        return self.commands