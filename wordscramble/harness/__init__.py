from .core import run_case, run_batch, read_transcripts
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "read_transcripts", "write_csv", "write_manifest"]
