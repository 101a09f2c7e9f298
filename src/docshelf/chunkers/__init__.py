"""Text chunking strategies."""

from docshelf.chunkers.sentence_chunker import SentenceChunker, split_sentences

__all__ = ["SentenceChunker", "split_sentences"]
