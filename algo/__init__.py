"""Small algorithms: base conversion, arithmetic, list and text helpers, Big O examples and sorting."""

__version__ = "0.1.0"