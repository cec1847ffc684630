# File: treescan/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Report tables (file_data, scan_meta) inherit from this.
Base = declarative_base()
