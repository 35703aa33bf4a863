"""
Markup Parser Module
Lenient parsing of task markup and the element queries answer rules rely on.
"""

import logging
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import ParseError

logger = logging.getLogger(__name__)


class TaskDocument:
    """
    Parsed task markup.

    Wraps a BeautifulSoup tree so the extraction rules only depend on
    tag/attribute queries, optionally scoped to an element found earlier.
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def text(self) -> str:
        """Concatenated text of the whole document."""
        return self.soup.get_text()

    def select(self, tag: str, attrs: Optional[Dict[str, str]] = None,
               scope: Optional[Tag] = None) -> List[Tag]:
        """
        Find elements by tag name and attribute values.

        Args:
            tag: Element name, e.g. 'vim-test-item'
            attrs: Attribute values that must match exactly; True matches presence
            scope: Element whose subtree is searched instead of the whole document

        Returns:
            Matching elements in document order
        """
        root = scope if scope is not None else self.soup
        return root.find_all(tag, attrs=attrs or {})

    def select_first(self, tag: str, attrs: Optional[Dict[str, str]] = None,
                     scope: Optional[Tag] = None) -> Optional[Tag]:
        root = scope if scope is not None else self.soup
        return root.find(tag, attrs=attrs or {})

    @staticmethod
    def text_of(element: Tag) -> str:
        return element.get_text()

    @staticmethod
    def attr(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            return ' '.join(value)
        return value


def parse_task_markup(markup: str) -> TaskDocument:
    """
    Parse task markup the way a browser would, tolerating broken HTML.

    Args:
        markup: Raw markup from the step content

    Returns:
        TaskDocument over the parsed tree
    """
    if not isinstance(markup, str):
        raise ParseError(f"Expected markup string, got {type(markup).__name__}")

    soup = BeautifulSoup(markup, 'lxml')
    logger.debug(f"Parsed task markup: {len(markup)} chars")
    return TaskDocument(soup)
