"""Higher-order function adaptors for selecting, composing, projecting, deferring and piping callables."""

__version__ = "0.1.0"