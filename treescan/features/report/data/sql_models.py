from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, BigInteger, Boolean, DateTime, JSON
from treescan.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class FileDataModel(Base):
    __tablename__ = "file_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    file_path = Column(String, nullable=False, index=True)
    file_name = Column(String, nullable=False)
    extension = Column(String, nullable=False, default="")
    size = Column(BigInteger, nullable=False, default=0)
    mod_time = Column(DateTime(timezone=True), nullable=False)
    is_dir = Column(Boolean, nullable=False, default=False)
    permissions = Column(BigInteger, nullable=False, default=0)

    # Empty strings for directories, never NULL
    md5 = Column(String(32), nullable=False, default="", index=True)
    sha1 = Column(String(40), nullable=False, default="")
    sha256 = Column(String(64), nullable=False, default="", index=True)

class ScanMetaModel(Base):
    __tablename__ = "scan_meta"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
    host_data = Column(JSON, default=dict)
    flag_data = Column(JSON, default=dict)
