"""Scripted knowledge-base lookup: ``q: <question> -> A: <answer>`` lines."""
from __future__ import annotations

import logging
import re

from backend.app.constants import KB_ANSWER_DELIMITER, KB_KEY_SEPARATOR
from backend.app.core.text_utils import normalize_text
from backend.app.models.character import CharacterData

logger = logging.getLogger(__name__)

_QUESTION_PREFIX_RE = re.compile(r"^q:\s*", re.IGNORECASE)
_QUOTE_CHARS = ("'", '"')


def extract_question(line: str) -> str | None:
    """Return the raw question part of a knowledge-base line, or None if the line has no separator."""
    parts = line.split(KB_KEY_SEPARATOR)
    if len(parts) < 2:
        return None
    return _QUESTION_PREFIX_RE.sub("", parts[0])


def _strip_quotes(answer: str) -> str:
    for quote in _QUOTE_CHARS:
        if answer.startswith(quote) and answer.endswith(quote):
            return answer[1:-1]
    return answer


def extract_answer(line: str) -> str | None:
    """Return the answer after the ``-> A: `` delimiter with wrapping quotes removed."""
    parts = line.split(KB_ANSWER_DELIMITER)
    if len(parts) < 2:
        return None
    return _strip_quotes(parts[1].strip())


def find_entry(character: CharacterData, question: str) -> str | None:
    """First knowledge-base line whose normalized question equals the normalized input."""
    if not character.knowledge_base:
        return None
    norm_question = normalize_text(question)
    for line in character.knowledge_base:
        key = extract_question(line)
        if key is None:
            continue
        if normalize_text(key) == norm_question:
            return line
    return None


def find_canonical_response(character: CharacterData, question: str) -> str | None:
    """Look up the scripted answer to ``question``; None when nothing usable matches."""
    entry = find_entry(character, question)
    if entry is None:
        logger.debug("No knowledge-base match for %s: %r", character.id, question)
        return None
    answer = extract_answer(entry)
    if answer is None:
        logger.debug("Matched line for %s has no answer delimiter: %r", character.id, entry)
    return answer
