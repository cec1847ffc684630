import logging
import os
import tempfile
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from treescan.core.database.base import Base
from treescan.core.database.connection import session_factory, sqlite_engine
from treescan.core.exceptions import ReportWriteError
from ..domain.interfaces import IReportWriter
from ..domain.models import OutputDocument
from .sql_models import FileDataModel, ScanMetaModel

logger = logging.getLogger(__name__)

class SqliteReportWriter(IReportWriter):
    """
    Writes the report as a SQLite database.
    The database is built in a temp file beside the destination and then
    moved over it, so readers never see a half-written report.
    """

    def write(self, document: OutputDocument, destination: Path) -> None:
        tmp_path = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
            )
            os.close(fd)
            tmp_path = Path(tmp_name)

            self._populate(document, tmp_path)
            os.replace(tmp_path, destination)
            tmp_path = None
        except (OSError, SQLAlchemyError, UnicodeError) as e:
            logger.error(f"Failed to write SQLite report to {destination}: {e}")
            raise ReportWriteError(f"Cannot write report to {destination}: {e}") from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()

        logger.info(f"Wrote {len(document.file_data)} records to {destination}")

    @staticmethod
    def _populate(document: OutputDocument, db_path: Path) -> None:
        engine = sqlite_engine(db_path)
        try:
            Base.metadata.create_all(bind=engine)
            SessionLocal = session_factory(engine)

            with SessionLocal() as db:
                try:
                    db.add(ScanMetaModel(
                        host_data=document.host_data,
                        flag_data=document.flag_data,
                    ))
                    db.add_all(
                        FileDataModel(
                            file_path=record.path,
                            file_name=record.name,
                            extension=record.extension,
                            size=record.size,
                            mod_time=record.modified_at,
                            is_dir=record.is_dir,
                            permissions=record.permissions,
                            md5=record.digests.md5,
                            sha1=record.digests.sha1,
                            sha256=record.digests.sha256,
                        )
                        for record in document.file_data
                    )
                    db.commit()
                except Exception:
                    db.rollback()
                    raise
        finally:
            # Release the file handle before the temp file is moved
            engine.dispose()
