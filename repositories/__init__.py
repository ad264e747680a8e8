"""
Repository Layer Package

This package contains repository classes that encapsulate all data file
access. Repositories keep file handling out of the facade and the services,
making the code more testable.

Key Components:
- HutsFileRepository: Reads huts data files and parses their rows
"""

from repositories.huts_file_repo import HutsFileRepository, get_huts_file_repository

__all__ = [
    "HutsFileRepository",
    "get_huts_file_repository",
]
