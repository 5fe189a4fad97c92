import argparse
import sys
from pathlib import Path

from snapextract.config.settings import Settings
from snapextract.logging.logger import Log
from snapextract.processor.exceptions import ProcessorError
from snapextract.processor.exporter import Exporter
from snapextract.processor.image_loader import ImageLoader
from snapextract.processor.processor import build_processor
from snapextract.transcription.exceptions import TranscriptionError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snapextract",
        description="Transcribe screenshots and extract structured data from the text.",
    )
    parser.add_argument("images", nargs="+", type=Path, help="Image files to process")
    parser.add_argument(
        "--requirements",
        default=None,
        help="Extra instructions for the vision model",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON results here instead of stdout",
    )
    parser.add_argument("--csv", type=Path, default=None, help="Also write a CSV export")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load images -> process batch -> write JSON (and CSV)."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    loader = ImageLoader(max_bytes=settings.max_upload_bytes)
    exporter = Exporter()

    try:
        processor = build_processor(settings)
        images = [loader.load(path) for path in args.images]
        extractions = processor.process_batch(images, requirements=args.requirements)
    except (ProcessorError, TranscriptionError, FileNotFoundError, ValueError) as exc:
        Log.error(f"Extraction failed: {exc}")
        return 1

    payload = exporter.to_json(extractions)
    if args.output is not None:
        args.output.write_text(payload + "\n", encoding="utf-8")
        Log.info(f"Wrote {len(extractions)} results to {args.output}")
    else:
        sys.stdout.write(payload + "\n")

    if args.csv is not None:
        args.csv.write_text(exporter.to_csv(extractions), encoding="utf-8")
        Log.info(f"Wrote CSV export to {args.csv}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
