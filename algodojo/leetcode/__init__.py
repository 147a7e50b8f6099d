"""Solutions to well-known interview problems."""

__all__ = ["arrays", "linked_list", "numbers", "strings"]