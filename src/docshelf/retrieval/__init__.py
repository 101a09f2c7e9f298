"""Chunk retrieval and context formatting."""

from docshelf.retrieval.context import enhance_message, format_context
from docshelf.retrieval.keyword_retriever import KeywordRetriever, tokenize

__all__ = ["KeywordRetriever", "tokenize", "format_context", "enhance_message"]
