"""
Load and save decks as YAML files.

The on-disk format is a mapping with a single `cards` key holding a list of
`front`/`back` records. Reading goes through a PyYAML safe loader that
keeps plain values as text, then a pydantic schema; writing goes through
ruamel.yaml so the file stays easy to edit by hand.
"""

import logging
from io import StringIO
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import (
    DoubleQuotedScalarString,
    SingleQuotedScalarString,
)
from yaml.nodes import ScalarNode
from yaml.resolver import Resolver

from .deck import Deck
from .exceptions import CardValidationError, PersistenceError
from .models import Card

logger = logging.getLogger(__name__)

_writer = YAML()
_writer.indent(mapping=2, sequence=4, offset=2)
_writer.default_flow_style = False

_reader_resolver = Resolver()
_STR_TAG = "tag:yaml.org,2002:str"
_NULL_TAG = "tag:yaml.org,2002:null"

# Line breaks other than \n are folded or dropped unless escaped.
_ODD_BREAKS = ("\r", "\x85", "\u2028", "\u2029")


class _TextLoader(yaml.SafeLoader):
    """Safe loader that reads every plain scalar as text, except null."""


_TextLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _RawCard(BaseModel):
    model_config = ConfigDict(extra="forbid")

    front: str
    back: str


class _RawDeckFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cards: Optional[List[_RawCard]] = None


def _scalar(text: str) -> str:
    """Quote text that a YAML 1.1 reader would not read back verbatim."""
    if any(ch in text for ch in _ODD_BREAKS):
        return DoubleQuotedScalarString(text)
    tag = _reader_resolver.resolve(ScalarNode, text, (True, False))
    if tag != _STR_TAG:
        return SingleQuotedScalarString(text)
    return text


def deck_to_yaml(deck: Deck) -> str:
    """
    Serialize a deck to YAML text.

    Only `front` and `back` are written; the revealed flag is display state.
    """
    data = {
        "cards": [
            {"front": _scalar(card.front), "back": _scalar(card.back)}
            for card in deck.cards
        ]
    }
    string_stream = StringIO()
    _writer.dump(data, string_stream)
    return string_stream.getvalue()


def deck_from_yaml(text: str, source: Union[str, Path] = "<string>") -> Deck:
    """
    Parse YAML text into a deck.

    An empty document yields an empty deck.

    Raises:
        PersistenceError: If the YAML is malformed, the top level is not a
            mapping, the schema does not match, or a card has an empty side.
    """
    source_path = Path(source)
    try:
        raw_yaml_content = yaml.load(text, Loader=_TextLoader)
    except yaml.YAMLError as e:
        raise PersistenceError(
            source_path, f"Invalid YAML syntax: {e}", e
        ) from e

    if raw_yaml_content is None:
        return Deck()

    if not isinstance(raw_yaml_content, dict):
        raise PersistenceError(
            source_path, "Top level of YAML must be a mapping with 'cards'."
        )

    try:
        deck_data = _RawDeckFile.model_validate(raw_yaml_content)
    except ValidationError as e:
        error_details = e.errors()[0]
        field = ".".join(map(str, error_details["loc"]))
        msg = error_details["msg"]
        raise PersistenceError(
            source_path, f"Validation error in field '{field}': {msg}", e
        ) from e

    cards: List[Card] = []
    for idx, raw_card in enumerate(deck_data.cards or []):
        try:
            cards.append(Card.create(raw_card.front, raw_card.back))
        except CardValidationError as e:
            raise PersistenceError(
                source_path, f"Card at index {idx}: {e}", e
            ) from e
    return Deck(cards)


def load_deck(path: Path) -> Deck:
    """
    Read the deck stored at `path`.

    A missing file is not an error: it yields an empty deck, and the file
    is created on the next save.

    Raises:
        PersistenceError: If the file exists but cannot be read or parsed.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            content = fh.read()
    except FileNotFoundError:
        logger.info(f"Deck file {path} not found; starting an empty deck.")
        return Deck()
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(path, f"Could not read file: {e}", e) from e

    deck = deck_from_yaml(content, source=path)
    logger.info(f"Loaded {len(deck)} cards from {path}")
    return deck


def save_deck(deck: Deck, path: Path) -> None:
    """
    Write the whole deck to `path`, replacing any previous content.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    content = deck_to_yaml(deck)
    try:
        with path.open("w", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as e:
        raise PersistenceError(path, f"Could not write file: {e}", e) from e
    logger.info(f"Saved {len(deck)} cards to {path}")
