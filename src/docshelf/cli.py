"""CLI entry point for DocShelf."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from docshelf.config import DocShelfSettings, get_settings
from docshelf.engine import RAGEngine
from docshelf.errors import DocShelfError
from docshelf.ingesters import get_ingester

logger = logging.getLogger(__name__)


def _open_engine(args: argparse.Namespace) -> RAGEngine:
    settings: DocShelfSettings = get_settings()
    if args.store:
        settings = settings.model_copy(update={"store_path": Path(args.store)})
    return RAGEngine.from_settings(settings)


def add(engine: RAGEngine, sources: Sequence[str]) -> int:
    """Add files, folders or zip archives to the shelf.

    Each file is added independently; one failure does not stop the rest.

    Returns:
        Number of files that could not be added
    """
    failures = 0
    for source in sources:
        source_path = Path(source)
        ingester = get_ingester(source_path)
        if ingester is None:
            logger.error(f"Cannot process: {source}")
            logger.error("Supported inputs: files, folders, .zip files")
            failures += 1
            continue

        try:
            for source_file in ingester.ingest(source_path):
                try:
                    doc = engine.store.add_source(source_file)
                except DocShelfError as e:
                    logger.error(f"  {source_file.name}: {e}")
                    failures += 1
                    continue
                logger.info(f"  {doc.name} -> {doc.id} ({len(doc.chunks)} chunks)")
        except DocShelfError as e:
            logger.error(f"{source}: {e}")
            failures += 1

    stats = engine.store.get_stats()
    logger.info(f"Shelf now holds {stats.total} documents, {stats.total_chunks} chunks")
    return failures


def list_documents(engine: RAGEngine) -> None:
    """Print one line per stored document."""
    documents = engine.store.get_documents()
    if not documents:
        print("No documents stored")
        return

    for doc in documents:
        flag = "*" if doc.active else " "
        print(
            f"{flag} {doc.id}  {doc.name:<40} "
            f"{len(doc.chunks):>4} chunks  {doc.size_bytes / 1024:>8.1f} KB"
        )


def show(engine: RAGEngine, doc_id: str) -> int:
    """Print a document's metadata and chunks."""
    doc = engine.store.get_document(doc_id)
    if doc is None:
        logger.error(f"Document not found: {doc_id}")
        return 1

    print(f"Document: {doc.name}")
    print(f"  Id: {doc.id}")
    print(f"  Type: {doc.mime_type}")
    print(f"  Size: {doc.size_bytes} bytes")
    print(f"  Added: {doc.added_at.isoformat()}")
    print(f"  Active: {'yes' if doc.active else 'no'}")
    print(f"")
    for index, chunk in enumerate(doc.chunks, 1):
        print(f"--- Chunk {index} ({len(chunk)} chars)")
        print(chunk)
    return 0


def toggle(engine: RAGEngine, doc_id: str) -> int:
    doc = engine.store.toggle_document(doc_id)
    if doc is None:
        logger.error(f"Document not found: {doc_id}")
        return 1
    logger.info(f"{doc.name}: {'active' if doc.active else 'inactive'}")
    return 0


def remove(engine: RAGEngine, doc_id: str) -> int:
    doc = engine.store.get_document(doc_id)
    if doc is None:
        logger.error(f"Document not found: {doc_id}")
        return 1
    engine.store.remove_document(doc_id)
    logger.info(f"Removed {doc.name}")
    return 0


def stats(engine: RAGEngine) -> None:
    """Print collection statistics."""
    s = engine.store.get_stats()
    print(f"Documents: {s.active}/{s.total} active")
    print(f"Chunks: {s.total_chunks}")
    print(f"Size: {s.total_size_bytes / 1024:.1f} KB")


def query(engine: RAGEngine, text: str, top_k: int | None, as_json: bool) -> None:
    """Print the context block (or JSON results) for a query."""
    chunks = engine.retrieve_context(text, top_k)
    if as_json:
        for chunk in chunks:
            print(json.dumps(asdict(chunk), ensure_ascii=False))
        return

    if not chunks:
        logger.info(f"No results found for: {text}")
        return
    print(engine.format_context(chunks), end="")


def serve(engine: RAGEngine, transport: str = "stdio") -> None:
    """Start an MCP server over the shelf."""
    # Import here to avoid loading MCP unless needed
    from docshelf.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {engine.store.key!r} via {transport}")
    mcp = create_mcp_server(engine)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docshelf",
        description="DocShelf - keyword retrieval over your own documents",
    )
    parser.add_argument(
        "--store",
        help="SQLite file holding the documents (default: $DOCSHELF_STORE_PATH or docshelf.db)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add files, folders or zip archives")
    add_parser.add_argument("sources", nargs="+", help="Paths to add")

    subparsers.add_parser("ls", help="List stored documents")

    show_parser = subparsers.add_parser("show", help="Show a document and its chunks")
    show_parser.add_argument("doc_id", help="Document id")

    toggle_parser = subparsers.add_parser(
        "toggle",
        help="Include or exclude a document from retrieval",
    )
    toggle_parser.add_argument("doc_id", help="Document id")

    rm_parser = subparsers.add_parser("rm", help="Remove a document")
    rm_parser.add_argument("doc_id", help="Document id")

    subparsers.add_parser("clear", help="Remove all documents")
    subparsers.add_parser("stats", help="Show collection statistics")

    query_parser = subparsers.add_parser("query", help="Retrieve context for a query")
    query_parser.add_argument("text", help="Query text")
    query_parser.add_argument(
        "-k",
        "--top-k",
        type=int,
        default=None,
        help="Number of chunks to return (default: $DOCSHELF_TOP_K or 3)",
    )
    query_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per chunk instead of a context block",
    )

    serve_parser = subparsers.add_parser("serve", help="Start MCP server for the shelf")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        engine = _open_engine(args)

        if args.command == "add":
            return 1 if add(engine, args.sources) else 0
        elif args.command == "ls":
            list_documents(engine)
        elif args.command == "show":
            return show(engine, args.doc_id)
        elif args.command == "toggle":
            return toggle(engine, args.doc_id)
        elif args.command == "rm":
            return remove(engine, args.doc_id)
        elif args.command == "clear":
            engine.store.clear_all()
            logger.info("Removed all documents")
        elif args.command == "stats":
            stats(engine)
        elif args.command == "query":
            query(engine, args.text, args.top_k, args.json)
        elif args.command == "serve":
            serve(engine, args.transport)
    except DocShelfError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
