"""
Run every chunking strategy over a document and print counts and metrics.

Usage:
  python scripts/compare_strategies.py --file notes.txt
  python scripts/compare_strategies.py --sample drawing_note --size sentences=120
  python scripts/compare_strategies.py --text "One. Two. Three." --overlap 20 --show-chunks
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

# Ensure repo root on path when invoked as a script (python scripts/compare_strategies.py ...)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chunklab.domain.chunking import STRATEGY_NAMES, resolve_size, run_strategy
from chunklab.domain.metrics import summarize_chunks
from chunklab.domain.samples import DEFAULT_SAMPLE, SAMPLES, get_sample


def load_text(args: argparse.Namespace) -> str:
    if args.text:
        return args.text
    if args.file:
        if not args.file.exists():
            raise FileNotFoundError(f"File not found: {args.file}")
        return args.file.read_text(encoding="utf-8")
    return get_sample(args.sample or DEFAULT_SAMPLE)


def parse_sizes(pairs: List[str]) -> Dict[str, int]:
    """Parse repeated `name=size` options into a strategy -> size map."""
    sizes: Dict[str, int] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or name not in STRATEGY_NAMES:
            raise SystemExit(f"Invalid --size '{pair}'. Use one of {', '.join(STRATEGY_NAMES)} as name=size.")
        try:
            sizes[name] = int(raw)
        except ValueError:
            raise SystemExit(f"Invalid size in --size '{pair}'.")
    return sizes


def compare(text: str, sizes: Dict[str, int], overlap: int, show_chunks: bool) -> List[dict]:
    report = []
    for name in STRATEGY_NAMES:
        size = resolve_size(name, sizes.get(name))
        chunks = run_strategy(name, text, size, overlap if name == "characters" else 0)
        summary = summarize_chunks(chunks)
        entry = {
            "strategy": name,
            "size": size,
            "metrics": summary.metrics.model_dump(),
            "iou": summary.iou,
        }
        if show_chunks:
            entry["chunks"] = [c.model_dump() for c in chunks]
        report.append(entry)
    return report


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare chunking strategies on one document.")
    parser.add_argument("--file", type=Path, help="Path to a UTF-8 text file")
    parser.add_argument("--text", type=str, help="Inline document text")
    parser.add_argument("--sample", choices=sorted(SAMPLES), help=f"Bundled sample (default: {DEFAULT_SAMPLE})")
    parser.add_argument("--size", action="append", default=[], metavar="NAME=SIZE", help="Override a strategy size")
    parser.add_argument("--overlap", type=int, default=0, help="Overlap for the characters strategy")
    parser.add_argument("--show-chunks", action="store_true", help="Include every chunk in the output")
    parser.add_argument("--verbose", action="store_true", help="Log chunker debug output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = load_text(args)
    if not text.strip():
        raise SystemExit("Provide --file, --text or --sample with content.")

    try:
        report = compare(text, parse_sizes(args.size), args.overlap, args.show_chunks)
    except ValueError as exc:
        raise SystemExit(f"Invalid parameters: {exc}")

    print(json.dumps({"text_length": len(text), "results": report}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
