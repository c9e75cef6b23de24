from filehunt.scanner.roots import scan_known_roots
from filehunt.scanner.scanner import ProgressSink, scan_directory
from filehunt.scanner.types import ScanResult, SkippedEntry

__all__ = ["ProgressSink", "ScanResult", "SkippedEntry", "scan_directory", "scan_known_roots"]
