from docshelf.models import ScoredChunk
from docshelf.retrieval import enhance_message, format_context
from docshelf.retrieval.context import CONTEXT_FOOTER, CONTEXT_HEADER


def chunk(name: str, index: int, text: str, score: int = 1) -> ScoredChunk:
    return ScoredChunk(
        document_id=f"id-{name}",
        document_name=name,
        chunk_text=text,
        chunk_index=index,
        score=score,
    )


def test_empty_input_formats_to_empty_string():
    assert format_context([]) == ""


def test_single_chunk_uses_one_based_numbering():
    assert format_context([chunk("notes.txt", 0, "Buy apples.")]) == (
        "=== RELEVANT DOCUMENT CONTEXT ===\n"
        "[Source: notes.txt, Chunk 1]\n"
        "Buy apples."
        "\n=== END CONTEXT ===\n\n"
    )


def test_blocks_keep_input_order_and_separator():
    text = format_context([chunk("b.txt", 4, "second", 9), chunk("a.txt", 0, "first", 1)])
    assert text == (
        CONTEXT_HEADER
        + "[Source: b.txt, Chunk 5]\nsecond"
        + "\n\n---\n\n"
        + "[Source: a.txt, Chunk 1]\nfirst"
        + CONTEXT_FOOTER
    )


def test_header_and_footer_appear_once():
    text = format_context([chunk("a.txt", i, f"text {i}") for i in range(3)])
    assert text.count("=== RELEVANT DOCUMENT CONTEXT ===") == 1
    assert text.count("=== END CONTEXT ===") == 1
    assert text.count("[Source: a.txt") == 3


def test_enhance_message_prefixes_context():
    context = format_context([chunk("a.txt", 0, "facts")])
    assert enhance_message(context, "What?") == context + "User Query: What?"


def test_enhance_message_without_context_is_unchanged():
    assert enhance_message("", "What?") == "What?"
