from dataclasses import dataclass, field
from typing import Any, Dict, List

from treescan.features.source_scanner.domain.models import FileRecord

@dataclass(frozen=True)
class OutputDocument:
    """
    Top-level envelope handed to the serialization boundary.
    file_data is the inventory; host_data / flag_data describe the run.
    """
    file_data: List[FileRecord]
    host_data: Dict[str, Any] = field(default_factory=dict)
    flag_data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host_data": dict(self.host_data),
            "flag_data": dict(self.flag_data),
            "file_data": [record.to_dict() for record in self.file_data],
        }
