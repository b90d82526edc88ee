"""src/kpopneon/ui/cli/commands/executor.py
What: Shared base for CLI command executors.
Why: Give every subcommand the same execute-and-return-exit-code shape.
"""

from abc import ABC, abstractmethod

EXIT_OK: int = 0
EXIT_SEARCH_FAILED: int = 1


class CommandExecutor(ABC):
    """Base class for command execution."""

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit code.
        """
        pass
