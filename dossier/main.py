import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from dossier.config.settings import Settings
from dossier.logging.logger import Log
from dossier.processor.dossier import build_dossier
from dossier.processor.exceptions import ProcessorError
from dossier.processor.file_loader import FileLoader
from dossier.processor.models import ExtractionResult, SourceFile
from dossier.processor.processor import build_processor


def _load_files(loader: FileLoader, paths: list[Path]) -> list[SourceFile]:
    files: list[SourceFile] = []
    for path in paths:
        try:
            files.append(loader.load(path))
        except (ProcessorError, FileNotFoundError) as exc:
            Log.error(f"Skipping {path}: {exc}")
    return files


def _log_progress(results: list[ExtractionResult]) -> None:
    report = build_dossier(results).report
    Log.info(f"{len(results)} result(s), compliance score {report.score}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load scans -> extract sequentially -> print the dossier as JSON."""
    parser = argparse.ArgumentParser(
        prog="dossier",
        description="Build an applicant profile and compliance report from document scans.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="passport, diploma, SNILS or certificate scans")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    files = _load_files(FileLoader(settings.max_file_size_bytes), args.files)
    if not files:
        Log.error("No files could be loaded")
        return 1

    processor = build_processor(settings, on_update=_log_progress)
    results = processor.process(files)
    dossier = build_dossier(results)

    output = {
        "results": [asdict(r) for r in results],
        "profile": asdict(dossier.profile),
        "report": asdict(dossier.report),
        "variables": dossier.variables,
    }
    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
