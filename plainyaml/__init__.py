"""Line-oriented YAML reading and writing that keeps comments, quoting and blank lines."""

__version__ = "0.1.0"
__all__ = ["cursor", "document", "line", "node"]