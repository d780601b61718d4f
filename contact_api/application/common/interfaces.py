"""
Base interfaces for command handlers.

Usage:
    @dataclass(frozen=True)
    class SubmitContactCommand(Command[SubmitContactResult]):
        name: str | None
        ...

    class SubmitContactHandler(CommandHandler[SubmitContactResult]):
        async def execute(self, command: SubmitContactCommand) -> SubmitContactResult:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...
