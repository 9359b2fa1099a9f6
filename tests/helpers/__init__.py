"""Test helpers for datatypes tests."""

from tests.helpers.entities import Address, Article, Profile, User, make_article

__all__ = ["Address", "Article", "Profile", "User", "make_article"]
