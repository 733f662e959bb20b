from sanitize_filename.sanitize import (
    MAX_LENGTH,
    Options,
    is_windows_host,
    sanitize,
    sanitize_with_options,
)

__version__ = "0.2.0"
