"""
Unit tests for data models module.

Tests the Bookmark, Category and Document classes.
"""

import pytest

from sbm.core.data_models import Bookmark, Category, Document


class TestBookmark:
    """Test Bookmark class."""

    def test_default_creation(self):
        """All fields default to empty strings."""
        bookmark = Bookmark()
        assert bookmark.name == ""
        assert bookmark.description == ""
        assert bookmark.url == ""

    def test_creation_with_values(self):
        bookmark = Bookmark(
            "Rust", "Systems programming language", "https://www.rust-lang.org/"
        )
        assert bookmark.name == "Rust"
        assert bookmark.description == "Systems programming language"
        assert bookmark.url == "https://www.rust-lang.org/"

    def test_to_dict(self):
        bookmark = Bookmark("a", "b", "c")
        assert bookmark.to_dict() == {"name": "a", "description": "b", "url": "c"}

    def test_from_dict_defaults_missing(self):
        bookmark = Bookmark.from_dict({"name": "a", "url": None})
        assert bookmark == Bookmark("a", "", "")

    def test_copy_is_independent(self):
        bookmark = Bookmark("a", "b", "c")
        copied = bookmark.copy()
        copied.name = "changed"
        assert bookmark.name == "a"


class TestCategory:
    """Test Category class."""

    def test_default_creation(self):
        category = Category()
        assert category.name == ""
        assert category.icon is None
        assert category.bookmarks == []
        assert not category.has_icon

    def test_empty_icon_differs_from_absent(self):
        assert Category("Dev", "") != Category("Dev", None)
        assert Category("Dev", "").has_icon

    def test_add_and_remove_bookmark(self):
        category = Category("Work")
        first = category.add_bookmark(Bookmark("a", "", ""))
        second = category.add_bookmark(Bookmark("a", "", ""))

        assert len(category) == 2
        assert category.remove_bookmark(second)
        assert category.bookmarks[0] is first
        assert not category.remove_bookmark(second)

    def test_to_dict_round_trip(self):
        category = Category("Dev", "🛠", [Bookmark("a", "b", "c")])
        assert Category.from_dict(category.to_dict()) == category

    def test_from_dict_keeps_empty_icon(self):
        assert Category.from_dict({"name": "x", "icon": ""}).icon == ""
        assert Category.from_dict({"name": "x"}).icon is None


class TestDocument:
    """Test Document class."""

    def test_empty_document(self):
        document = Document()
        assert document.is_empty
        assert document.all_categories() == []
        assert document.bookmark_count == 0

    def test_all_categories_puts_implicit_first(self, sample_document):
        categories = sample_document.all_categories()
        assert categories[0] is sample_document.uncategorized
        assert [c.name for c in categories[1:]] == ["Work", "Dev"]

    def test_iter_bookmarks(self, sample_document):
        names = [b.name for b in sample_document.iter_bookmarks()]
        assert names == ["Orphan", "Mail", "Calendar", "Rust", "Search"]

    def test_add_category_appends(self):
        document = Document()
        first = document.add_category(Category("A"))
        second = document.add_category(Category("A"))
        assert document.categories == [first, second]
        assert document.categories[0] is first

    def test_remove_category(self, sample_document):
        work = sample_document.find_category("Work")
        assert sample_document.remove_category(work)
        assert [c.name for c in sample_document.categories] == ["Dev"]
        assert not sample_document.remove_category(work)

    def test_remove_implicit_category(self, sample_document):
        assert sample_document.remove_category(sample_document.uncategorized)
        assert sample_document.uncategorized is None

    def test_find_category_returns_first(self):
        document = Document(categories=[Category("A", "1"), Category("A", "2")])
        assert document.find_category("A").icon == "1"
        assert document.find_category("missing") is None

    def test_add_bookmark_creates_implicit_category(self):
        document = Document()
        bookmark = document.add_bookmark(Bookmark("Orphan", "", ""))

        assert document.uncategorized is not None
        assert document.uncategorized.bookmarks == [bookmark]
        assert document.categories == []

    def test_add_bookmark_to_category(self, sample_document):
        dev = sample_document.find_category("Dev")
        sample_document.add_bookmark(Bookmark("New", "", ""), dev)
        assert dev.bookmarks[-1].name == "New"

    def test_add_bookmark_to_foreign_category(self):
        document = Document(categories=[Category("A")])
        with pytest.raises(ValueError, match="not part of this document"):
            document.add_bookmark(Bookmark(), Category("A"))

    def test_remove_bookmark(self, sample_document):
        mail = sample_document.find_category("Work").bookmarks[0]
        assert sample_document.remove_bookmark(mail)
        assert [b.name for b in sample_document.find_category("Work").bookmarks] == ["Calendar"]
        assert not sample_document.remove_bookmark(mail)

    def test_remove_last_implicit_bookmark_drops_slot(self, sample_document):
        orphan = sample_document.uncategorized.bookmarks[0]
        assert sample_document.remove_bookmark(orphan)
        assert sample_document.uncategorized is None

    def test_remove_last_named_bookmark_keeps_category(self):
        document = Document(categories=[Category("A", bookmarks=[Bookmark("x")])])
        document.remove_bookmark(document.categories[0].bookmarks[0])
        assert [c.name for c in document.categories] == ["A"]

    def test_to_dict(self, sample_document):
        data = sample_document.to_dict()
        assert data["uncategorized"] == [
            {"name": "Orphan", "description": "no category yet", "url": "https://orphan.example.org"}
        ]
        assert data["categories"][1]["icon"] == "🛠"
        assert data["categories"][0]["icon"] is None

    def test_dict_round_trip(self, sample_document):
        assert Document.from_dict(sample_document.to_dict()) == sample_document

    def test_from_dict_without_uncategorized(self):
        document = Document.from_dict({"uncategorized": None, "categories": []})
        assert document.is_empty

    def test_copy_is_deep(self, sample_document):
        copied = sample_document.copy()
        assert copied == sample_document
        copied.categories[0].bookmarks[0].name = "changed"
        assert sample_document.categories[0].bookmarks[0].name == "Mail"

    def test_str(self, sample_document):
        assert str(sample_document) == "Document(categories=3, bookmarks=5)"
