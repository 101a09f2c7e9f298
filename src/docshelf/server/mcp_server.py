"""FastMCP server implementation for DocShelf."""

from mcp.server.fastmcp import FastMCP

from docshelf.engine import RAGEngine
from docshelf.errors import UnsupportedFormatError


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


class ShelfTools:
    """MCP tool implementations over one engine.

    Each public method is registered as a tool; user-facing failures come
    back as "Error: ..." strings rather than exceptions.
    """

    def __init__(self, engine: RAGEngine):
        self.engine = engine
        self.store = engine.store

    def list_documents(self) -> str:
        """List stored documents with their status, chunk count and size.

        Returns:
            One line per document: id, active flag, name, chunks, size
        """
        documents = self.store.get_documents()
        if not documents:
            return "No documents stored"

        lines = []
        for doc in documents:
            flag = "[x]" if doc.active else "[ ]"
            lines.append(
                f"{flag} {doc.id}  {doc.name:<40} "
                f"{len(doc.chunks):>4} chunks {_format_size(doc.size_bytes):>10}"
            )
        return "\n".join(lines)

    def add_text(self, name: str, content: str, mime_type: str = "text/plain") -> str:
        """Add a text document to the shelf.

        Args:
            name: Name to show for the document (e.g. a filename)
            content: Full text of the document
            mime_type: MIME type of the content (binary types such as PDF are rejected)

        Returns:
            The new document id, or an error message
        """
        try:
            doc = self.store.add_document(content.encode("utf-8"), name, mime_type)
        except UnsupportedFormatError as e:
            return f"Error: {e}"
        return f"Added {doc.name} as {doc.id} ({len(doc.chunks)} chunks)"

    def toggle_document(self, doc_id: str) -> str:
        """Include or exclude a document from retrieval without deleting it.

        Args:
            doc_id: Document id as shown by list_documents
        """
        doc = self.store.toggle_document(doc_id)
        if doc is None:
            return f"Error: Document not found: {doc_id}"
        state = "active" if doc.active else "inactive"
        return f"{doc.name} is now {state}"

    def remove_document(self, doc_id: str) -> str:
        """Delete a document from the shelf.

        Args:
            doc_id: Document id as shown by list_documents
        """
        doc = self.store.get_document(doc_id)
        if doc is None:
            return f"Error: Document not found: {doc_id}"
        self.store.remove_document(doc_id)
        return f"Removed {doc.name}"

    def stats(self) -> str:
        """Summarize the shelf: document counts, total size and chunks."""
        s = self.store.get_stats()
        return (
            f"{s.active}/{s.total} active, {s.total_chunks} chunks, "
            f"{_format_size(s.total_size_bytes)}"
        )

    def retrieve_context(self, query: str, top_k: int = 3) -> str:
        """Find the chunks of active documents that best match a query.

        Matching is keyword based: query words of three or more letters are
        counted in each chunk.

        Args:
            query: Words to look for
            top_k: Maximum number of chunks to return (default: 3)

        Returns:
            A context block ready to prepend to a prompt
        """
        chunks = self.engine.retrieve_context(query, top_k)
        if not chunks:
            return f"No results found for: {query}"
        return self.engine.format_context(chunks)


TOOL_NAMES = (
    "list_documents",
    "add_text",
    "toggle_document",
    "remove_document",
    "stats",
    "retrieve_context",
)


def create_mcp_server(engine: RAGEngine) -> FastMCP:
    """Create an MCP server exposing a document shelf.

    Args:
        engine: Engine whose store and retriever back the tools

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="docshelf",
    )

    tools = ShelfTools(engine)
    for name in TOOL_NAMES:
        mcp.tool()(getattr(tools, name))

    return mcp
