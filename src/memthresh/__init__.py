"""memthresh - run a shell command when memory usage crosses a threshold."""

__version__ = "0.1.0"
