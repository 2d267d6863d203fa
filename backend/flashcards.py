"""
flashcards.py - Interview flash cards generated per technology and topic
"""

import uuid

import llm
import prompts
from catalog import DEFAULT_CARD_COUNT, DIFFICULTIES
from logger import get_logger

logger = get_logger("flashcards")

# Suggested topics per technology, offered to the client as a starting point
TECH_TOPICS = {
    "React": ["Hooks", "State Management", "Component Lifecycle", "Performance", "Context API", "Redux", "Testing"],
    "JavaScript": ["ES6+", "Async/Await", "Closures", "Prototypes", "DOM", "Event Loop", "Modules"],
    "TypeScript": ["Types", "Interfaces", "Generics", "Decorators", "Utility Types", "Type Guards"],
    "Node.js": ["Express", "Middleware", "Streams", "File System", "REST API", "Authentication"],
    "Python": ["Data Structures", "OOP", "Decorators", "Generators", "Async", "Testing"],
    "SQL": ["Queries", "Joins", "Indexes", "Transactions", "Normalization", "Performance"],
    "System Design": ["Scalability", "Load Balancing", "Caching", "Databases", "Microservices"],
    "Data Structures": ["Arrays", "Trees", "Graphs", "Hash Tables", "Stacks", "Queues"],
    "Algorithms": ["Sorting", "Searching", "Dynamic Programming", "Recursion", "Big O"],
}


class FlashCardFormatError(ValueError):
    """Raised when the model reply has no usable card list."""


def _optional_text(value):
    return value.strip() if isinstance(value, str) and value.strip() else None


def sanitize_card(card: dict, technology: str, topic: str) -> dict:
    """Fill in missing card fields; unknown difficulties become medium."""
    tags = card.get("tags")
    if isinstance(tags, list) and tags:
        tags = [str(t) for t in tags if t is not None]
    else:
        tags = [technology, topic]

    result = {
        "id": str(card.get("id") or uuid.uuid4()),
        "front": _optional_text(card.get("front")) or "Question not available",
        "back": _optional_text(card.get("back")) or "Answer not available",
        "difficulty": card.get("difficulty") if card.get("difficulty") in DIFFICULTIES else "medium",
        "tags": tags,
    }
    for key in ("hint", "codeSnippet"):
        value = _optional_text(card.get(key))
        if value:
            result[key] = value
    return result


def cards_from_reply(reply, technology: str, topic: str) -> list:
    if not isinstance(reply, dict) or not isinstance(reply.get("cards"), list):
        keys = list(reply) if isinstance(reply, dict) else type(reply).__name__
        logger.error("❌ Flash card reply without a cards array: %s", keys)
        raise FlashCardFormatError("Invalid response format: missing cards array")
    return [sanitize_card(c, technology, topic) for c in reply["cards"] if isinstance(c, dict)]


def generate_flashcards(technology: str, topic: str, count: int = DEFAULT_CARD_COUNT) -> list:
    """Ask Gemini for `count` cards. AIServiceError and FlashCardFormatError propagate."""
    logger.info("🃏 Generating %d flash cards for %s - %s", count, technology, topic)
    reply = llm.generate_json(
        prompts.flashcard_generator_prompt(technology, topic, count),
        system=prompts.FLASHCARD_SYSTEM_MESSAGE,
    )
    cards = cards_from_reply(reply, technology, topic)
    if not cards:
        raise FlashCardFormatError("No flash cards generated")
    logger.info("✅ Generated %d flash cards", min(len(cards), count))
    return cards[:count]
