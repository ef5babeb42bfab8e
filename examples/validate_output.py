"""\
Example Output Validation Script

This script validates that the SkewTCharts example produced reasonable output.

Checks:
- PNG chart exists, exceeds a minimum size and carries the PNG signature
- SVG export exists and contains an <svg> root element

Usage:
  python examples/basic_skewt.py
  python examples/validate_output.py
"""

from __future__ import annotations

from pathlib import Path

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _check_png(path: Path, min_bytes: int) -> tuple[bool, str]:
    if not path.exists():
        return False, f"MISSING: {path}"
    size = path.stat().st_size
    if size < min_bytes:
        return False, f"TOO SMALL: {path} ({size} bytes < {min_bytes})"
    with path.open("rb") as f:
        if f.read(len(PNG_SIGNATURE)) != PNG_SIGNATURE:
            return False, f"NOT PNG?: {path} (bad signature)"
    return True, f"OK: {path} ({size/1024:.1f} KB)"


def _check_svg(path: Path) -> tuple[bool, str]:
    if not path.exists():
        return False, f"MISSING: {path}"
    if "<svg" not in path.read_text(encoding="utf-8", errors="replace"):
        return False, f"NOT SVG?: {path} (no <svg> element)"
    return True, f"OK: {path} (looks like SVG)"


def main() -> int:
    output = Path("output")

    print("Validating SkewTCharts example outputs")
    print("=" * 60)

    ok_all = True

    print("\nChart:")
    ok, msg = _check_png(output / "SkewT-Payerne-Radiosonde.png", min_bytes=10_000)
    print(f"  {msg}")
    ok_all = ok_all and ok

    print("\nSVG export:")
    ok, msg = _check_svg(output / "SkewT-Payerne-Radiosonde.svg")
    print(f"  {msg}")
    ok_all = ok_all and ok

    print("\nSummary:")
    if ok_all:
        print("  SUCCESS: All expected outputs look reasonable")
        return 0

    print("  FAIL: One or more outputs missing/invalid")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
