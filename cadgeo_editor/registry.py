"""
CommandRegistry - Explicit command registration pattern

Bounded Context: Editor command registration and validation
Responsibilities:
  - Register editor commands with handlers
  - Validate command existence before execution
  - Provide introspection (available_commands, get_help)

Problem: Scripts and scenario replays need to know which editor actions exist
Solution: Explicit registration; unknown commands fail fast with the list
          of available ones

Threading: Registration is guarded by a lock; execution is read-only
"""

from typing import Any, Callable, Dict, Optional, Set
import threading

from cadgeo_logging import LogEvent, StructuredLogger, create_logger


class CommandNotAvailableError(Exception):
    """Raised when attempting to execute an unregistered command"""
    pass


class CommandRegistry:
    """
    Registry for editor commands with explicit registration.

    Key Features:
      - Fail-fast: Invalid commands rejected immediately
      - Introspection: Can query available commands at runtime
      - Self-Documenting: Each command has description

    Example:
        registry = CommandRegistry()
        registry.register('toggle_grid', service.toggle_grid, "Show/hide the grid")
        registry.register('add_shape', service.add_shape_command, "Add a shape")

        registry.execute('toggle_grid')
        registry.execute('add_shape', {'kind': 'circle'})
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._commands: Dict[str, Callable] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()
        self.logger = logger or create_logger("registry")

    def register(self, command: str, handler: Callable, description: str) -> None:
        """
        Register a command with its handler function.

        Args:
            command: Command name (lowercase, no spaces)
            handler: Callable that executes the command
            description: Human-readable description for help text

        Raises:
            ValueError: If command already registered (double registration)
        """
        with self._lock:
            if command in self._commands:
                raise ValueError(f"Command '{command}' already registered")

            self._commands[command] = handler
            self._descriptions[command] = description

    def execute(self, command: str, command_data: Optional[dict] = None) -> Any:
        """
        Execute a registered command.

        Args:
            command: Command name to execute
            command_data: Optional arguments passed to the handler as one dict

        Returns:
            Whatever the handler returns

        Raises:
            CommandNotAvailableError: If command not registered
        """
        if command not in self._commands:
            raise CommandNotAvailableError(
                f"Command '{command}' not available. "
                f"Available commands: {', '.join(sorted(self.available_commands))}"
            )

        handler = self._commands[command]

        try:
            if command_data is not None:
                result = handler(command_data)
            else:
                result = handler()
        except Exception as e:
            self.logger.error(
                event=LogEvent.COMMAND_FAILED,
                message=f"Command '{command}' failed: {e}",
                metadata={'command': command},
                exc_info=e,
            )
            raise

        self.logger.debug(
            event=LogEvent.COMMAND_EXECUTED,
            message=f"Command '{command}' executed",
            metadata={'command': command},
        )
        return result

    def is_available(self, command: str) -> bool:
        return command in self._commands

    @property
    def available_commands(self) -> Set[str]:
        """Snapshot of all registered command names."""
        return set(self._commands.keys())

    def get_help(self) -> Dict[str, str]:
        """Commands with their descriptions (copy)."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._commands)
