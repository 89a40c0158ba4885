"""
Persistence adapters.

These modules encapsulate how students are stored/retrieved (today a flat
file, an in-process dict or a SQL database). The session depends on the
StudentRepository contract rather than on any concrete backend.
"""

from .base import StudentRepository
from .file_repository import FileStudentRepository
from .memory_repository import MemoryStudentRepository

__all__ = ["StudentRepository", "FileStudentRepository", "MemoryStudentRepository"]
