"""Classic algorithms and data structures: sorts, searches, lists, heaps, trees and a word counter."""

__version__ = "0.1.0"