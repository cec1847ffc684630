# File: treescan/core/common/enums.py

from enum import Enum, unique

@unique
class HashAlgorithm(str, Enum):
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

@unique
class ReportFormat(str, Enum):
    JSON = "json"
    SQLITE = "sqlite"
