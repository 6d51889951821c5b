from .general_utils import setup_logging, log, handle_error

__all__ = ['setup_logging', 'log', 'handle_error']
