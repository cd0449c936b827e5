"""
Pytest configuration and shared fixtures for SBM tests.

This module provides sample documents in text and object form that are
shared across multiple test modules.
"""

from pathlib import Path

import pytest

from sbm.core.data_models import Bookmark, Category, Document

# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_SBM_TEXT = """// personal bookmarks
Orphan | no category yet | https://orphan.example.org

# Work
Mail | Webmail | https://mail.example.com
Calendar|Team calendar|https://calendar.example.com

#Dev | 🛠
Rust   |  Systems programming language |   https://www.rust-lang.org/
Search | Code search | https://example.com/search?q=a|b
// trailing comment
"""

CANONICAL_SAMPLE_SBM_TEXT = (
    "Orphan | no category yet | https://orphan.example.org\n"
    "# Work\n"
    "Mail | Webmail | https://mail.example.com\n"
    "Calendar | Team calendar | https://calendar.example.com\n"
    "# Dev | 🛠\n"
    "Rust | Systems programming language | https://www.rust-lang.org/\n"
    "Search | Code search | https://example.com/search?q=a|b\n"
)


@pytest.fixture
def sample_sbm_text() -> str:
    """Hand-written SBM document with comments and irregular spacing."""
    return SAMPLE_SBM_TEXT


@pytest.fixture
def canonical_sample_sbm_text() -> str:
    """Canonical encoding of sample_sbm_text."""
    return CANONICAL_SAMPLE_SBM_TEXT


@pytest.fixture
def sample_document() -> Document:
    """Document equivalent to sample_sbm_text."""
    return Document(
        uncategorized=Category(
            bookmarks=[
                Bookmark("Orphan", "no category yet", "https://orphan.example.org")
            ]
        ),
        categories=[
            Category(
                name="Work",
                bookmarks=[
                    Bookmark("Mail", "Webmail", "https://mail.example.com"),
                    Bookmark("Calendar", "Team calendar", "https://calendar.example.com"),
                ],
            ),
            Category(
                name="Dev",
                icon="🛠",
                bookmarks=[
                    Bookmark(
                        "Rust",
                        "Systems programming language",
                        "https://www.rust-lang.org/",
                    ),
                    Bookmark("Search", "Code search", "https://example.com/search?q=a|b"),
                ],
            ),
        ],
    )


@pytest.fixture
def sample_sbm_file(tmp_path, sample_sbm_text) -> Path:
    """Sample document written to a temporary file."""
    path = tmp_path / "bookmarks.sbm"
    path.write_text(sample_sbm_text, encoding="utf-8")
    return path


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty working directory."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("SBM_LOG_LEVEL", raising=False)
    return workdir

