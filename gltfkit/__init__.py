"""Read-only views over decoded glTF 2.0 documents and the transform math they need."""

__version__ = "0.1.0"