# ==============================================
# Host API
# ==============================================
#
# PURPOSE:
#   The pieces of the host application the add-on calls into:
#   the game database, localized strings, modal dialogs and the
#   list of installed plugins. The plugin receives them bundled
#   in a HostApi.
#
#   ConsoleDialogs renders dialogs on a terminal for the CLI.
#
# ==============================================

import sys
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol, TextIO

from hdr_manager.library.database import GameDatabase
from hdr_manager.localization.resources import ResourceProvider


class MessageBoxImage(Enum):
    NONE = "none"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


@dataclass(eq=False)
class MessageBoxOption:
    """
    A button in a message box.

    Options compare by identity: the dialog returns one of the
    objects it was given.
    """
    title: str
    is_default: bool = False
    is_cancel: bool = False


class Dialogs(Protocol):
    def show_message(
        self,
        text: str,
        caption: str,
        image: MessageBoxImage,
        options: List[MessageBoxOption]
    ) -> MessageBoxOption:
        """Show a modal message and return the option the user picked."""
        ...


@dataclass
class PluginInfo:
    id: uuid.UUID
    name: str = ""


@dataclass
class HostApi:
    database: GameDatabase
    resources: ResourceProvider
    dialogs: Dialogs
    plugins: List[PluginInfo] = field(default_factory=list)


class ConsoleDialogs:
    """
    Dialogs on stdin/stdout.

    Options are numbered from 1. An empty answer picks the default
    option, end of input picks the cancel option.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None
    ):
        self._input = input_func
        self._output = output if output is not None else sys.stdout

    def show_message(
        self,
        text: str,
        caption: str,
        image: MessageBoxImage,
        options: List[MessageBoxOption]
    ) -> MessageBoxOption:
        if not options:
            raise ValueError("A message box needs at least one option")

        prefix = "" if image is MessageBoxImage.NONE else f"[{image.value.upper()}] "
        if caption:
            print(f"{prefix}{caption}", file=self._output)
            prefix = ""
        print(f"{prefix}{text}", file=self._output)
        for number, option in enumerate(options, start=1):
            marker = " (default)" if option.is_default else ""
            print(f"  {number}. {option.title}{marker}", file=self._output)

        default = next((option for option in options if option.is_default), options[0])
        cancel = next((option for option in options if option.is_cancel), default)

        while True:
            try:
                answer = self._input("> ").strip()
            except EOFError:
                return cancel
            if not answer:
                return default
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            print(f"Please enter a number between 1 and {len(options)}.", file=self._output)
