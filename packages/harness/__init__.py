from .core import GameSession, Submission, run_script
from .io import write_csv, write_manifest

__all__ = ["GameSession", "Submission", "run_script", "write_csv", "write_manifest"]
