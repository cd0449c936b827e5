"""
Data models for SBM documents.

This module defines the in-memory structures produced by the parser and
consumed by the encoder: a Document owning an ordered list of categories,
each owning an ordered list of bookmarks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class Bookmark:
    """
    A single bookmark entry.

    All three fields always exist; a line that supplies fewer segments
    leaves the missing ones as empty strings.
    """

    name: str = ""
    description: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, str]:
        """
        Convert bookmark to dictionary for serialization.

        Returns:
            Dictionary representation of bookmark
        """
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        """Create a bookmark from a dictionary, defaulting missing fields."""
        return cls(
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            url=str(data.get("url") or ""),
        )

    def copy(self) -> "Bookmark":
        """Create a copy of this bookmark"""
        return Bookmark(name=self.name, description=self.description, url=self.url)


@dataclass
class Category:
    """
    A named grouping of bookmarks introduced by a header line.

    ``icon`` is None when the header had no icon segment at all, and an
    empty string when the segment was present but blank.
    """

    name: str = ""
    icon: Optional[str] = None
    bookmarks: List[Bookmark] = field(default_factory=list)

    @property
    def has_icon(self) -> bool:
        return self.icon is not None

    def add_bookmark(self, bookmark: Bookmark) -> Bookmark:
        """Append a bookmark and return it."""
        self.bookmarks.append(bookmark)
        return bookmark

    def remove_bookmark(self, bookmark: Bookmark) -> bool:
        """
        Remove a bookmark from this category.

        Removal is by identity so that two equal bookmarks in the same
        category are never confused.

        Returns:
            True if the bookmark was found and removed
        """
        for index, existing in enumerate(self.bookmarks):
            if existing is bookmark:
                del self.bookmarks[index]
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "bookmarks": [b.to_dict() for b in self.bookmarks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        icon = data.get("icon")
        return cls(
            name=str(data.get("name") or ""),
            icon=None if icon is None else str(icon),
            bookmarks=[Bookmark.from_dict(b) for b in data.get("bookmarks", [])],
        )

    def copy(self) -> "Category":
        """Create a deep copy of this category"""
        return Category(
            name=self.name,
            icon=self.icon,
            bookmarks=[b.copy() for b in self.bookmarks],
        )

    def __len__(self) -> int:
        return len(self.bookmarks)


@dataclass
class Document:
    """
    Root container of an SBM document.

    Bookmarks that appear before any header line live in the
    ``uncategorized`` slot rather than in ``categories``. The slot is None
    when there are no such bookmarks.
    """

    categories: List[Category] = field(default_factory=list)
    uncategorized: Optional[Category] = None

    def all_categories(self) -> List[Category]:
        """
        Get every category in document order.

        Returns:
            The implicit category first (when present), then named categories
        """
        if self.uncategorized is None:
            return list(self.categories)
        return [self.uncategorized] + list(self.categories)

    def iter_bookmarks(self) -> Iterator[Bookmark]:
        for category in self.all_categories():
            yield from category.bookmarks

    @property
    def bookmark_count(self) -> int:
        return sum(len(c.bookmarks) for c in self.all_categories())

    @property
    def is_empty(self) -> bool:
        return not self.categories and self.uncategorized is None

    def add_category(self, category: Category) -> Category:
        """Append a category after all existing ones and return it."""
        self.categories.append(category)
        return category

    def remove_category(self, category: Category) -> bool:
        """
        Remove a category (by identity) from the document.

        Passing the implicit category clears the uncategorized slot.

        Returns:
            True if the category was found and removed
        """
        if category is self.uncategorized:
            self.uncategorized = None
            return True

        for index, existing in enumerate(self.categories):
            if existing is category:
                del self.categories[index]
                return True
        return False

    def find_category(self, name: str) -> Optional[Category]:
        """Return the first named category called ``name``, if any."""
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def add_bookmark(
        self, bookmark: Bookmark, category: Optional[Category] = None
    ) -> Bookmark:
        """
        Add a bookmark to a category of this document.

        Args:
            bookmark: Bookmark to add
            category: Target category; None targets the implicit category,
                which is created on demand

        Returns:
            The added bookmark

        Raises:
            ValueError: If ``category`` does not belong to this document
        """
        if category is None:
            if self.uncategorized is None:
                self.uncategorized = Category()
            category = self.uncategorized
        elif not any(c is category for c in self.all_categories()):
            raise ValueError(f"Category {category.name!r} is not part of this document")

        return category.add_bookmark(bookmark)

    def remove_bookmark(self, bookmark: Bookmark) -> bool:
        """
        Remove a bookmark from whichever category holds it.

        An implicit category left empty by the removal is dropped so the
        document never carries an empty placeholder.

        Returns:
            True if the bookmark was found and removed
        """
        for category in self.all_categories():
            if category.remove_bookmark(bookmark):
                if category is self.uncategorized and not category.bookmarks:
                    self.uncategorized = None
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert document to dictionary for serialization.

        Returns:
            Dictionary with ``uncategorized`` (list of bookmarks or None)
            and ``categories``
        """
        return {
            "uncategorized": (
                [b.to_dict() for b in self.uncategorized.bookmarks]
                if self.uncategorized is not None
                else None
            ),
            "categories": [c.to_dict() for c in self.categories],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        uncategorized = None
        if data.get("uncategorized"):
            uncategorized = Category(
                bookmarks=[Bookmark.from_dict(b) for b in data["uncategorized"]]
            )
        return cls(
            categories=[Category.from_dict(c) for c in data.get("categories", [])],
            uncategorized=uncategorized,
        )

    def copy(self) -> "Document":
        """Create a deep copy of this document"""
        return Document(
            categories=[c.copy() for c in self.categories],
            uncategorized=(
                self.uncategorized.copy() if self.uncategorized is not None else None
            ),
        )

    def __str__(self) -> str:
        return (
            f"Document(categories={len(self.all_categories())}, "
            f"bookmarks={self.bookmark_count})"
        )
