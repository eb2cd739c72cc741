# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for kernel argument and result file I/O.

Adapters implement these to handle different file formats.
"""
from abc import ABC, abstractmethod
from typing import Any


class ArgumentReader(ABC):
    """Port for reading operation arguments."""

    @abstractmethod
    def read_arguments(self, path: str) -> dict[str, Any]:
        """Read a file and return the named arguments it holds."""
        ...


class ResultWriter(ABC):
    """Port for writing operation results."""

    @abstractmethod
    def write_result(self, result: Any, path: str) -> int:
        """Write a result to the output file. Returns the number of rows written."""
        ...
