"""Classic sorts, searches, text utilities, heaps, trees and graphs in plain Python."""

__version__ = "0.1.0"