"""bigfiles - find large files and delete the ones you no longer need."""

__version__ = "0.1.0"
