from __future__ import annotations

from typing import Dict, List

from .analyzer import LineAnalyzer
from .languages import Language
from .models import Document, DocumentStats


def process_document(
    doc: Document, analyzer: LineAnalyzer, language: Language | str
) -> DocumentStats:
    """Analyze a single document."""
    return analyzer.analyze_document(doc.text, language)


def process_corpus(
    documents: List[Document], analyzer: LineAnalyzer, language: Language | str
) -> Dict[str, DocumentStats]:
    """Process all documents with one shared analyzer and return per-document stats."""
    resolved = Language.parse(language)
    results: Dict[str, DocumentStats] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, analyzer, resolved)
    return results
