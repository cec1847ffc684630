from dataclasses import dataclass

@dataclass(frozen=True)
class FileDigests:
    """
    Finalized lower-case hex digests of one file's content.
    Either all three are populated or all three are empty (directories).
    """
    md5: str
    sha1: str
    sha256: str

    def __post_init__(self):
        values = (self.md5, self.sha1, self.sha256)
        if any(values) and not all(values):
            raise ValueError("Digests must be all populated or all empty.")

    @classmethod
    def empty(cls) -> "FileDigests":
        return cls(md5="", sha1="", sha256="")

    @property
    def is_empty(self) -> bool:
        return not self.md5
