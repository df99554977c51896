"""
Prompt context assembly from ranked chunks

Groups retrieved chunks by source document so the model sees each document's
passages together, under a header naming the document.
"""

from typing import Dict, List, Sequence

from .models import ScoredChunk

NO_CONTEXT = "No relevant document content found."

SYSTEM_PROMPT_TEMPLATE = """You are DocuMind AI, an intelligent document assistant. Answer questions based on the provided document context below.

Guidelines:
- Ground your answers in the document content provided
- If the answer is not in the documents, say so clearly
- Be concise, accurate, and helpful
- Use markdown formatting for structured responses
- Cite which document(s) you're drawing from when relevant

Document Context:
{context}"""


def assemble_context(scored_chunks: Sequence[ScoredChunk]) -> str:
    """
    Render ranked chunks as one prompt-ready text block.

    Documents appear in the order of their best-ranked chunk; chunks within
    a document keep their ranked order (not chunk_index order).

    Args:
        scored_chunks: Output of score_and_rank

    Returns:
        Formatted context, or NO_CONTEXT when nothing was retrieved

    Example:
        --- Document: biology.pdf ---

        Photosynthesis converts light...

        --- Document: notes.md ---

        Cellular respiration...
    """
    if not scored_chunks:
        return NO_CONTEXT

    # dict keeps first-seen order of documents
    by_document: Dict[str, List[ScoredChunk]] = {}
    for chunk in scored_chunks:
        by_document.setdefault(chunk.document_id, []).append(chunk)

    parts = []
    for document_chunks in by_document.values():
        parts.append(f"\n--- Document: {document_chunks[0].document_name} ---\n")
        for chunk in document_chunks:
            parts.append(f"\n{chunk.content}\n")

    return ''.join(parts).strip()


def cite_sources(scored_chunks: Sequence[ScoredChunk]) -> List[str]:
    """Document names in rank order, each listed once"""
    return list(dict.fromkeys(chunk.document_name for chunk in scored_chunks))


def build_system_prompt(context: str) -> str:
    """Embed an assembled context block in the assistant system prompt"""
    return SYSTEM_PROMPT_TEMPLATE.format(context=context)
