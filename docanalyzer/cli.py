"""Command line entry point: process one or more documents and report."""

from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from rich import print
from rich.table import Table
from rich.console import Console
from tqdm import tqdm

from .exceptions import DocumentProcessingError
from .error_handler import log_error
from .models import ProcessedDocument
from .processor import DocumentProcessor


def _parse_arguments(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(prog="docanalyzer", description="Extract and analyze documents (pdf, docx, doc, txt, rtf)")
    ap.add_argument('files', nargs='+', help='Documents to process')
    ap.add_argument('--mime', default=None, help='Declared MIME type, applied to every file')
    ap.add_argument('--json', action='store_true', help='Print results as JSON instead of a summary')
    ap.add_argument('--out', default=None, help='Write JSON results to this file')
    ap.add_argument('--sequential', action='store_true', help='Run structure and content analysis one after the other')
    return ap.parse_args(argv)


def _summary_table(doc: ProcessedDocument) -> Table:
    meta, analysis, structure = doc.metadata, doc.analysis, doc.structure
    table = Table(title=meta.file_name, show_header=False)
    table.add_row("Format", f"{meta.file_type} ({meta.extraction_method})")
    if meta.page_count is not None:
        table.add_row("Pages", str(meta.page_count))
    table.add_row("Words / chars", f"{meta.word_count} / {meta.character_count}")
    table.add_row("Processing", f"{meta.processing_time:.1f} ms")
    table.add_row("Sections", str(len(structure.sections)))
    table.add_row("Lists / tables", f"{len(structure.lists)} / {len(structure.tables)}")
    table.add_row("Complexity", analysis.complexity)
    table.add_row("Readability", str(analysis.readability_score))
    table.add_row("Jargon density", f"{analysis.jargon_density:.3f}")
    table.add_row("Technical terms", ", ".join(analysis.technical_terms[:8]) or "-")
    table.add_row("Key phrases", ", ".join(analysis.key_phrases[:5]) or "-")
    for warning in meta.warnings:
        table.add_row("[yellow]Warning[/]", warning)
    return table


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_arguments(argv)
    processor = DocumentProcessor(parallel=not args.sequential)
    console = Console()

    results: List[dict] = []
    failures = 0
    for path in tqdm(args.files, desc="Documents", disable=len(args.files) < 2):
        try:
            doc = processor.process_file(path, mime_type=args.mime)
        except (DocumentProcessingError, OSError) as e:
            failures += 1
            log_error(e, f"Failed to process {path}")
            print(f"[red]Failed:[/] {path}: {getattr(e, 'message', str(e))}")
            continue
        results.append(doc.to_dict())
        if not args.json and not args.out:
            console.print(_summary_table(doc))

    if args.json:
        sys.stdout.write(json.dumps(results, indent=2, ensure_ascii=False) + "\n")
    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        print(f"[green]Wrote[/] {len(results)} result(s) to {args.out}")

    return 1 if failures else 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
