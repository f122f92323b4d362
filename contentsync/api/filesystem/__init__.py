"""Thin filesystem primitives used by the sync engine."""

from .copy_file import copy_file
from .create_directory_if_not_exists import create_directory_if_not_exists
from .get_files_in_directory import get_files_in_directory
from .remove_file import remove_file
from .resolve_file_path import resolve_file_path
from .write_file import write_file

__all__ = [
    "copy_file",
    "create_directory_if_not_exists",
    "get_files_in_directory",
    "remove_file",
    "resolve_file_path",
    "write_file",
]
