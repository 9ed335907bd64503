"""
File type classification using Pygments.
"""

import logging
import re
from enum import Enum
from typing import Final

from pygments.lexers import get_lexer_for_filename
from pygments.lexers.rust import RustLexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

RUST_PATTERN: Final[str] = r'^\s*(fn\s+\w+|pub\s+(fn|struct|enum)\s+\w+|use\s+\w+::|impl\b)'


class FileType(Enum):
    """File types the editor knows how to highlight."""

    RUST = 'Rust'
    TEXT = 'Text'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def detect(cls, filename: str, content: str = '') -> 'FileType':
        """
        Detect the file type from a file name, falling back to its content.

        Args:
            filename: The name of the file
            content: A sample of the file's content

        Returns:
            The detected file type, TEXT if nothing more specific matched
        """

        try:
            lexer = get_lexer_for_filename(filename)
        except ClassNotFound:
            lexer = None

        if lexer is not None:
            file_type = cls.RUST if isinstance(lexer, RustLexer) else cls.TEXT
            logger.debug("Detected %s for %s from its name", file_type, filename)
            return file_type

        if content and re.search(RUST_PATTERN, content, re.MULTILINE):
            logger.debug("Detected Rust for %s from its content", filename)
            return cls.RUST

        return cls.TEXT
