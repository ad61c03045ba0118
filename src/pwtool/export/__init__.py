"""Export subsystem for pwtool: TXT and CSV writers."""

from pwtool.export.writers import write_csv, write_txt

__all__ = [
    "write_csv",
    "write_txt",
]
