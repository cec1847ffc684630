# File: treescan/core/database/connection.py

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def sqlite_engine(db_path: Path) -> Engine:
    """
    Engine for a single report file.
    One engine per output file: reports are written once and never reopened by treescan.
    """
    return create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )


def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autoflush=False, bind=engine)
