"""Vocab Sensei Agent - Builds flashcard decks for technical vocabulary."""

import logging

from study_companion.agents.base import BaseAgent, source_excerpt, strip_quotes
from study_companion.models import (
    Flashcard,
    FlashcardMetadata,
    FlashcardOptions,
    GeneratedFlashcards,
)
from study_companion.providers import ProviderClient

logger = logging.getLogger(__name__)

FLASHCARD_MAX_TOKENS = 3500
PRONUNCIATION_MAX_TOKENS = 200
MEMORY_TECHNIQUE_MAX_TOKENS = 300

DEFAULT_MEMORY_TECHNIQUE = "Try to connect this term with similar words you already know."


def pronunciation_unavailable(term: str) -> str:
    return f"{term} [pronunciation guide unavailable]"


class VocabSenseiAgent(BaseAgent):
    """Creates flashcards for technical terms, with pronunciation and memory aids."""

    def __init__(self, provider: ProviderClient):
        super().__init__(
            provider,
            "Vocab Sensei",
            "You are a German language expert specializing in technical Material Science "
            "vocabulary. You create memorable flashcards that help students master German "
            "technical terms with clear explanations, pronunciation hints, and memory "
            "techniques. You understand the challenges of learning technical German.",
        )

    def get_name(self) -> str:
        return "Vocab Sensei Agent"

    def get_description(self) -> str:
        return "Expert in German technical vocabulary and spaced repetition learning"

    def build_prompt(self, source_text: str, options: FlashcardOptions) -> str:
        """Build the flashcard generation prompt."""
        formulas = "Include key formulas as their own cards" if options.include_formulas else "Do not include formulas"
        return f"""As Vocab Sensei, extract exactly {options.card_count} technical terms from this content and create flashcards.

CONTENT:
{source_text}

FOCUS: {options.focus_level.value}

REQUIREMENTS:
- Language: {options.language.value} (German terms preferred for technical vocabulary)
- Front: term or concept with a pronunciation hint
- Back: clear, concise definition or explanation with context
- {formulas}
- Include memory techniques where helpful
- Categorize by topic area
- Vary difficulty levels

Return exactly this JSON structure and nothing else:
{{
  "cards": [
    {{
      "front": "Term [pronunciation]",
      "back": "Explanation with context and a usage note",
      "category": "Topic area, e.g. Crystal Structures",
      "difficulty": "easy|medium|hard"
    }}
  ]
}}"""

    async def generate(self, source_text: str, options: FlashcardOptions) -> GeneratedFlashcards:
        """
        Generate a flashcard deck from source text.

        Raises:
            ResponseParseError: If the reply is not JSON
            ArtifactSchemaError: If the card count or a card is invalid
        """
        response = await self.call(self.build_prompt(source_text, options), FLASHCARD_MAX_TOKENS)
        payload = self.parse_json_response(response)

        items = self.extract_items(
            payload,
            "cards",
            options.card_count,
            "card count in generated flashcards",
        )
        cards = self.validate_items(items, Flashcard)

        return GeneratedFlashcards(
            cards=cards,
            metadata=FlashcardMetadata(
                source_text=source_excerpt(source_text),
                generated_at=self.timestamp(),
                total_cards=len(cards),
            ),
        )

    async def add_pronunciation_hint(self, term: str) -> str:
        """
        Return ``"Term [pronunciation]"`` for a technical term.

        Never raises: any failure yields the "unavailable" placeholder.
        """
        prompt = f"""As Vocab Sensei, provide a simple pronunciation guide for this technical term: "{term}"

Return format: "Term [pronunciation-guide]"
Sample: "Kristallstruktur [KRIS-tall-shtrook-toor]"

Return only the term with pronunciation guide."""

        try:
            response = await self.call(prompt, PRONUNCIATION_MAX_TOKENS, json_only=False)
        except Exception as e:
            logger.error("Vocab Sensei pronunciation error: %s", e)
            return pronunciation_unavailable(term)

        hint = strip_quotes(response)
        if not hint:
            return pronunciation_unavailable(term)
        return hint

    async def suggest_memory_technique(self, term: str, meaning: str) -> str:
        """Suggest a mnemonic for a term; falls back to a generic tip."""
        prompt = f"""As Vocab Sensei, suggest a memory technique for this term.

Term: {term}
Meaning: {meaning}

Create a short, memorable association or mnemonic. Return only the memory technique."""

        try:
            response = await self.call(prompt, MEMORY_TECHNIQUE_MAX_TOKENS, json_only=False)
        except Exception as e:
            logger.error("Vocab Sensei memory technique error: %s", e)
            return DEFAULT_MEMORY_TECHNIQUE

        return strip_quotes(response) or DEFAULT_MEMORY_TECHNIQUE
