"""
Command Parser: turns a raw input line into a verb plus argument words.

Provides:
- Tokenization (lower-case, whitespace split, empty tokens dropped)
- Noise word removal ("the", "a", "my", ...)
- Phrase splitting for multi-object verbs ("take key and sword")
- Preposition boundary detection for two-object verbs ("use key on chest")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

NOISE_WORDS = frozenset({"a", "an", "the", "and", "then", "my"})
PREPOSITIONS = ("on", "with", "in", "to")

# Separates item phrases inside one argument list
PHRASE_SEPARATORS = frozenset({"and", ","})

USE_USAGE = "Try 'use [item] on [object]'."


class CommandUsageError(Exception):
    """
    Raised when a command is recognised but its arguments are unusable.

    The message is shown to the player as-is; the session continues.
    """


@dataclass(frozen=True)
class ParsedCommand:
    """A normalized player command."""

    verb: str
    args: Tuple[str, ...] = ()
    # Argument phrases split at "and" / commas, each noise-filtered
    phrases: Tuple[Tuple[str, ...], ...] = ()
    raw: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.verb

    @property
    def arg_text(self) -> str:
        return " ".join(self.args)


@dataclass(frozen=True)
class TwoObjectArgs:
    """Arguments of a two-object verb, split at the preposition boundary."""

    item_words: Tuple[str, ...]
    preposition: str
    target_words: Tuple[str, ...]

    @property
    def item_phrase(self) -> str:
        return " ".join(self.item_words)

    @property
    def target_phrase(self) -> str:
        return " ".join(self.target_words)


def tokenize(raw: str) -> List[str]:
    """Lower-case and split a line; commas become their own tokens."""
    cleaned = (raw or "").lower().replace(",", " , ")
    return [token for token in cleaned.split() if token]


def strip_noise(words: Iterable[str]) -> List[str]:
    """Drop noise words and stray separators."""
    return [word for word in words if word not in NOISE_WORDS and word != ","]


def split_phrases(words: Iterable[str]) -> Tuple[Tuple[str, ...], ...]:
    """
    Split raw argument words into item phrases.

    "the key and the sword" -> (("key",), ("sword",))
    """
    phrases: List[Tuple[str, ...]] = []
    current: List[str] = []
    for word in words:
        if word in PHRASE_SEPARATORS:
            if current:
                phrases.append(tuple(strip_noise(current)))
            current = []
        else:
            current.append(word)
    if current:
        phrases.append(tuple(strip_noise(current)))
    return tuple(phrase for phrase in phrases if phrase)


def parse_command(raw: str) -> ParsedCommand:
    """
    Convert user text into a ParsedCommand.

    Never raises: an input with no meaningful words yields a command whose
    `is_empty` is True.
    """
    tokens = tokenize(raw)
    words = strip_noise(tokens)
    if not words:
        return ParsedCommand(verb="", raw=raw or "")

    verb = words[0]
    # Phrase splitting works on the unfiltered tail so "and" still separates
    verb_index = tokens.index(verb)
    return ParsedCommand(
        verb=verb,
        args=tuple(words[1:]),
        phrases=split_phrases(tokens[verb_index + 1:]),
        raw=raw,
    )


def split_preposition(args: Iterable[str], usage: str = USE_USAGE) -> TwoObjectArgs:
    """
    Locate the preposition boundary in a two-object argument list.

    The first word found in PREPOSITIONS (scanning left to right) is the
    boundary. Both sides are noise-filtered independently.

    Raises:
        CommandUsageError: fewer than three words, no preposition, or nothing
            on one side of it.
    """
    words = [word for word in args if word != ","]
    if len(strip_noise(words)) < 3:
        raise CommandUsageError(f"Use what on what? {usage}")

    boundary = next((i for i, word in enumerate(words) if word in PREPOSITIONS), -1)
    if boundary == -1:
        raise CommandUsageError(
            f"Please specify a proper preposition and items/objects. {usage}"
        )

    item_words = tuple(strip_noise(words[:boundary]))
    target_words = tuple(strip_noise(words[boundary + 1:]))
    if not item_words or not target_words:
        raise CommandUsageError(
            f"Please specify a proper preposition and items/objects. {usage}"
        )

    return TwoObjectArgs(
        item_words=item_words,
        preposition=words[boundary],
        target_words=target_words,
    )
