"""Display capability for tree labels."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class PrettyPrint(Protocol):
    """Anything that can render itself as one line of display text."""

    def ascii(self) -> str: ...


class PrettyPrintMixin(ABC):
    """Gives a PrettyPrint implementation a ``pretty_print`` method."""

    @abstractmethod
    def ascii(self) -> str:
        """One line of display text."""

    def pretty_print(self, file: TextIO | None = None) -> None:
        print(self.ascii(), file=file or sys.stdout)


def label_ascii(label: Any) -> str:
    """Display text for a label, used by the box-drawing renderer."""
    if isinstance(label, PrettyPrint):
        return label.ascii()
    return str(label)


def label_debug(label: Any) -> str:
    """Debug text for a label, used by the compact renderer."""
    return repr(label)
