"""
Record source abstraction.
A record source loads the full set of shortcut records from wherever they are kept
and reports the location the user edits them at (opened by `!config`).
"""

from abc import ABC, abstractmethod
from typing import List

from Shortcut.Model.Record import Record


class IRecordSource(ABC):

    @abstractmethod
    def Load(self) -> List[Record]:
        """Return every record; raise LoadError when the source is unusable."""
        pass

    @abstractmethod
    def GetPath(self) -> str:
        pass
