"""Command-line interface for single and batch ID-card / plate extraction.

``extract`` prints the fields of one capture as JSON; ``batch`` runs a
whole folder of captures and writes one CSV row per image.
"""

import argparse
import csv
import json
import sys
from pathlib import Path

from visitor_ocr.reader import CaptureReader
from visitor_ocr.utils.config import load_config
from visitor_ocr.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_SUPPORTED_EXTENSIONS = ("*.png", "*.jpg", "*.jpeg", "*.bmp", "*.tiff", "*.tif")
_KINDS = ("id-card", "plate")
_COLUMNS: dict[str, list[str]] = {
    "id-card": ["filename", "status", "name", "idNumber", "address", "city"],
    "plate": ["filename", "status", "plateNumber"],
}


def _find_images(input_dir: Path) -> list[Path]:
    """Find all supported image files in a directory.

    Args:
        input_dir: Directory to scan.

    Returns:
        Sorted list of image paths.
    """
    files: list[Path] = []
    for ext in _SUPPORTED_EXTENSIONS:
        files.extend(input_dir.glob(ext))
        files.extend(input_dir.glob(ext.upper()))
    return sorted(set(files))


def extract_single(
    reader: CaptureReader, source: Path, kind: str, from_text: bool = False
) -> dict[str, str]:
    """Extract the fields of one capture, or of one OCR text file.

    Args:
        reader: Configured capture reader.
        source: Image file, or text file when ``from_text`` is set.
        kind: ``"id-card"`` or ``"plate"``.
        from_text: Treat ``source`` as already recognized text.

    Returns:
        Populated fields only; empty when nothing was found.
    """
    if from_text:
        text = source.read_text(encoding="utf-8", errors="replace")
        if kind == "plate":
            return reader.read_plate_text(text).as_dict()
        return reader.read_id_card_text(text).as_dict()

    if kind == "plate":
        return reader.read_plate(source).as_dict()
    return reader.read_id_card(source).as_dict()


def process_folder(
    reader: CaptureReader,
    input_dir: Path,
    output_csv: Path,
    kind: str,
    verbose: bool = False,
) -> dict[str, int]:
    """Extract every capture in a folder and write the results to CSV.

    Args:
        reader: Configured capture reader.
        input_dir: Directory containing captures.
        output_csv: Path for the output CSV file.
        kind: ``"id-card"`` or ``"plate"``.
        verbose: Whether to print per-file progress.

    Returns:
        Summary dict with total, extracted and empty counts.
    """
    files = _find_images(input_dir)
    if not files:
        logger.warning("No images found in %s", input_dir)
        return {"total": 0, "extracted": 0, "empty": 0}

    logger.info("Found %d images to process", len(files))
    rows: list[dict[str, str]] = []
    extracted = 0

    for i, file_path in enumerate(files, 1):
        if verbose:
            print(f"Processing [{i}/{len(files)}]: {file_path.name}")
        fields = extract_single(reader, file_path, kind)
        status = "extracted" if fields else "empty"
        if fields:
            extracted += 1
        rows.append({"filename": file_path.name, "status": status, **fields})

    _write_csv(rows, output_csv, _COLUMNS[kind])
    logger.info("Results written to %s", output_csv)

    summary = {
        "total": len(files),
        "extracted": extracted,
        "empty": len(files) - extracted,
    }
    _print_summary(summary, output_csv)
    return summary


def _write_csv(
    rows: list[dict[str, str]], output_path: Path, columns: list[str]
) -> None:
    """Write extraction rows to a CSV file, blank cells for unset fields."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)


def _print_summary(summary: dict[str, int], output_csv: Path) -> None:
    """Print batch processing summary to stdout."""
    print(f"\n{'=' * 50}")
    print("Batch Extraction Complete")
    print(f"{'=' * 50}")
    print(f"Total:      {summary['total']}")
    print(f"Extracted:  {summary['extracted']}")
    print(f"Empty:      {summary['empty']}")
    print(f"Output:     {output_csv}")


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(description="Visitor ID card and plate OCR")
    parser.add_argument("-c", "--config", type=Path, help="YAML configuration file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    single_parser = subparsers.add_parser("extract", help="Extract one capture")
    single_parser.add_argument("kind", choices=_KINDS, help="Capture type")
    single_parser.add_argument("file", type=Path, help="Image file to process")
    single_parser.add_argument(
        "--text",
        action="store_true",
        help="Treat FILE as already recognized OCR text",
    )
    single_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    batch_parser = subparsers.add_parser("batch", help="Extract a folder of captures")
    batch_parser.add_argument("kind", choices=_KINDS, help="Capture type")
    batch_parser.add_argument("input_dir", type=Path, help="Directory with captures")
    batch_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("results.csv"),
        help="Output CSV file (default: results.csv)",
    )
    batch_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = load_config(args.config)
    setup_logging(config.log_level)
    reader = CaptureReader(config)

    if args.command == "batch":
        if not args.input_dir.is_dir():
            print(f"Error: {args.input_dir} is not a directory", file=sys.stderr)
            sys.exit(1)
        process_folder(reader, args.input_dir, args.output, args.kind, args.verbose)
    elif args.command == "extract":
        if not args.file.exists():
            print(f"Error: {args.file} does not exist", file=sys.stderr)
            sys.exit(1)
        result = extract_single(reader, args.file, args.kind, args.text)
        output_str = json.dumps(result, indent=2)
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output_str)
            print(f"Output written to {args.output}")
        else:
            print(output_str)


if __name__ == "__main__":
    main()
