"""
Export layer
------------

Tabular text export of a series for download.
"""

from .csv_export import (  # noqa: F401
    CSV_MIME_TYPE,
    export_filename,
    save_csv_export,
    to_csv,
)

__all__ = ["CSV_MIME_TYPE", "export_filename", "save_csv_export", "to_csv"]
