"""Front-end interface

A front-end turns the text of one input file into the script text that the
shared parser reads. Component formats return only their script region;
``None`` means the file has no script and yields an empty code block.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ScriptFrontend(ABC):
    """Extracts the script region of an input format"""

    name = "script"

    @abstractmethod
    def extract_script(self, text: str) -> Optional[str]:
        """Return the script text of a file, or None if it has none

        Args:
            text: Full file contents

        Returns:
            Script source, or None
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
