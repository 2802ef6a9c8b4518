from bingoboard.scan.adapter import (
    ScanAdapter,
    ScanResult,
    build_prompt,
    extract_json,
    normalize_grid,
    parse_scan_payload,
)
from bingoboard.scan.anthropic_scanner import AnthropicScanAdapter
from bingoboard.scan.demo import DemoScanAdapter
from bingoboard.scan.session import EntryMode, ScanOutcome, ScanPhase, ScanSession

__all__ = [
    "AnthropicScanAdapter",
    "DemoScanAdapter",
    "EntryMode",
    "ScanAdapter",
    "ScanOutcome",
    "ScanPhase",
    "ScanResult",
    "ScanSession",
    "build_prompt",
    "extract_json",
    "normalize_grid",
    "parse_scan_payload",
]
