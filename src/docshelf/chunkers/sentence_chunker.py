"""Sentence-aware chunking strategy with word overlap."""

import re

# A sentence is a run of non-terminators closed by one or more of . ! ?
# Trailing text with no terminator is kept as a final sentence.
SENTENCE_PATTERN = re.compile(r"[^.!?]+(?:[.!?]+|$)")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping their leading whitespace.

    Whitespace-only fragments are dropped. Text with no sentence
    boundary comes back as a single sentence.
    """
    sentences = [s for s in SENTENCE_PATTERN.findall(text) if s.strip()]
    return sentences or [text]


class SentenceChunker:
    """Default chunking: greedy sentence packing with word overlap.

    - Sentences are packed into a buffer until the next one would push it
      past ``chunk_size`` characters
    - Each new chunk is seeded with the last ``overlap_chars // 5`` words of
      the previous one
    - Sentences are never split, so one longer than ``chunk_size`` becomes
      an oversized chunk on its own
    """

    DEFAULT_CHUNK_SIZE = 500
    DEFAULT_OVERLAP_CHARS = 50
    CHARS_PER_WORD = 5

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap_chars: int = DEFAULT_OVERLAP_CHARS,
    ):
        _validate(chunk_size, overlap_chars)
        self.chunk_size = chunk_size
        self.overlap_chars = overlap_chars

    def chunk(
        self,
        text: str,
        chunk_size: int | None = None,
        overlap_chars: int | None = None,
    ) -> list[str]:
        """Split text into ordered, overlapping chunks.

        Args:
            text: The text content to chunk
            chunk_size: Target chunk length in characters (instance default if None)
            overlap_chars: Overlap budget; divided by 5 to get a word count

        Returns:
            List of non-empty chunk strings in text order
        """
        size = self.chunk_size if chunk_size is None else chunk_size
        overlap = self.overlap_chars if overlap_chars is None else overlap_chars
        _validate(size, overlap)

        if not text or not text.strip():
            return []

        overlap_words = overlap // self.CHARS_PER_WORD
        chunks: list[str] = []
        buffer = ""

        for sentence in split_sentences(text):
            if buffer and len(buffer) + len(sentence) > size:
                chunks.append(buffer.strip())
                buffer = _overlap_seed(buffer, overlap_words)

            buffer += sentence

        if buffer.strip():
            chunks.append(buffer.strip())

        return chunks


def _overlap_seed(closed: str, word_count: int) -> str:
    """Build the start of the next buffer from the tail of the closed one."""
    if word_count <= 0:
        return ""
    words = closed.split(" ")
    return " ".join(words[-word_count:]) + " "


def _validate(chunk_size: int, overlap_chars: int) -> None:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap_chars < 0:
        raise ValueError(f"overlap_chars must be non-negative, got {overlap_chars}")
