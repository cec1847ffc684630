from abc import ABC, abstractmethod
from pathlib import Path
from .models import OutputDocument

class IReportWriter(ABC):
    """
    Contract for persisting a finished report.
    """
    @abstractmethod
    def write(self, document: OutputDocument, destination: Path) -> None:
        """
        Writes the whole document in one step, replacing any existing file.
        Raises ReportWriteError on failure.
        """
        pass
