"""Building blocks for console homebrew tooling: binary structures, NID hashing, YAML trees and directory listing."""

__version__ = "0.1.0"