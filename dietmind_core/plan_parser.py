from __future__ import annotations

"""
dietmind_core.plan_parser
=========================

Extraction of a `NormalizedPlan` from the markdown document returned by the LLM.

The generator is asked to answer with this shape (see `prompts.py`):

    ## Breakfast
    - **Dish 1**: <name>
      - <benefit>
      - <benefit>
    - **Dish 2**: <name>
      - <benefit>
    ## Lunch
    ... (same shape)
    ## Dinner
    ... (same shape)
    ## Recommended Foods
    - <item>
    ## Foods to Avoid
    - <item>

but nothing guarantees it follows the format. The scanner is therefore
best-effort: it never raises, and anything it cannot place is dropped instead
of aborting the whole plan.

How it works
------------
1) The document is split into lines (`\\r\\n`, `\\r` and `\\n` all accepted) and
   each line is trimmed.
2) `classify_line` assigns a `LineKind` to each line (header, dish, item, ...).
   Classification does not depend on the current state.
3) The pair (`ScanState`, `LineKind`) is looked up in `TRANSITIONS`, which
   yields the `Action` to apply. `ScanState` is derived from the current
   section plus whether a dish is open.

Rules worth remembering
-----------------------
- A header always closes the open dish, whatever section it names.
- An unknown header (e.g. "## Snacks") enters discard mode: every bullet is
  dropped until the next known header.
- A benefit with no open dish in its section is dropped. It is never attached
  to a dish from a previous section.
- Dish numbering is not validated: "Dish 7" after "Dish 1" is accepted as is,
  and there is no minimum or maximum number of dishes or benefits.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from .domain_models import DishEntry, NormalizedPlan

logger = logging.getLogger(__name__)


# ============================================================
# Grammar
# ============================================================

class Section(str, Enum):
    """Section the scanner is currently inside."""

    NONE = "none"
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    RECOMMENDED = "recommended"
    AVOID = "avoid"
    UNRECOGNIZED = "unrecognized"


MEAL_SECTIONS = frozenset({Section.BREAKFAST, Section.LUNCH, Section.DINNER})
LIST_SECTIONS = frozenset({Section.RECOMMENDED, Section.AVOID})

# Header label (lower-cased, whitespace collapsed) -> section
SECTION_VOCABULARY: Dict[str, Section] = {
    "breakfast": Section.BREAKFAST,
    "lunch": Section.LUNCH,
    "dinner": Section.DINNER,
    "recommended foods": Section.RECOMMENDED,
    "foods to avoid": Section.AVOID,
}


class LineKind(str, Enum):
    """Classification of a single trimmed line."""

    HEADER = "header"
    DISH = "dish"
    # Starts like a dish marker but the name is missing or the shape is broken.
    MALFORMED_DISH = "malformed_dish"
    ITEM = "item"
    OTHER = "other"


_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_HEADER_RE = re.compile(r"^##\s+(?P<label>\S.*)$")
_BULLET_RE = re.compile(r"^[-*+]\s+(?P<text>\S.*)$")
_DISH_PREFIX_RE = re.compile(r"^\*\*dish", re.IGNORECASE)
_DISH_RE = re.compile(
    r"^\*\*dish\s+\d+\*\*\s*:\s*(?P<name>\S.*)$",
    re.IGNORECASE,
)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ClassifiedLine:
    """
    Result of `classify_line`.

    `text` depends on `kind`:
    - HEADER: the normalized label ("recommended foods")
    - DISH / MALFORMED_DISH / ITEM: the bullet text without the marker
    - OTHER: empty string

    `name` is only set for DISH: the trimmed text after the colon.
    """

    kind: LineKind
    text: str = ""
    name: str = ""


def normalize_label(label: str) -> str:
    return _WHITESPACE_RE.sub(" ", label).strip().lower()


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one line of the document.

    Priority: header, dish, item, other. The line is trimmed first, so nested
    benefit bullets ("  - High in iron") are plain items.
    """
    line = line.strip()

    match = _HEADER_RE.match(line)
    if match:
        return ClassifiedLine(LineKind.HEADER, normalize_label(match.group("label")))

    match = _BULLET_RE.match(line)
    if not match:
        return ClassifiedLine(LineKind.OTHER)

    text = match.group("text").strip()
    if _DISH_PREFIX_RE.match(text):
        dish = _DISH_RE.match(text)
        if dish:
            return ClassifiedLine(LineKind.DISH, text, dish.group("name").strip())
        return ClassifiedLine(LineKind.MALFORMED_DISH, text)

    return ClassifiedLine(LineKind.ITEM, text)


def section_for_label(label: str) -> Section:
    """Map a header label to its section, or UNRECOGNIZED."""
    return SECTION_VOCABULARY.get(normalize_label(label), Section.UNRECOGNIZED)


# ============================================================
# State machine
# ============================================================

class ScanState(str, Enum):
    """
    Coarse state used as the key of `TRANSITIONS`.

    - IDLE: before the first header.
    - DISCARD: after an unrecognized header.
    - MEAL: inside breakfast/lunch/dinner with no open dish.
    - DISH_OPEN: inside a meal section with an open dish.
    - LIST: inside recommended/avoid.
    """

    IDLE = "idle"
    DISCARD = "discard"
    MEAL = "meal"
    DISH_OPEN = "dish_open"
    LIST = "list"


class Action(str, Enum):
    ENTER_SECTION = "enter_section"
    OPEN_DISH = "open_dish"
    ATTACH_BENEFIT = "attach_benefit"
    APPEND_ITEM = "append_item"
    DISCARD = "discard"
    IGNORE = "ignore"


TRANSITIONS: Dict[Tuple[ScanState, LineKind], Action] = {
    # Headers always switch section and close the open dish.
    (ScanState.IDLE, LineKind.HEADER): Action.ENTER_SECTION,
    (ScanState.DISCARD, LineKind.HEADER): Action.ENTER_SECTION,
    (ScanState.MEAL, LineKind.HEADER): Action.ENTER_SECTION,
    (ScanState.DISH_OPEN, LineKind.HEADER): Action.ENTER_SECTION,
    (ScanState.LIST, LineKind.HEADER): Action.ENTER_SECTION,

    # Dish lines only open dishes inside meal sections.
    (ScanState.IDLE, LineKind.DISH): Action.DISCARD,
    (ScanState.DISCARD, LineKind.DISH): Action.DISCARD,
    (ScanState.MEAL, LineKind.DISH): Action.OPEN_DISH,
    (ScanState.DISH_OPEN, LineKind.DISH): Action.OPEN_DISH,
    (ScanState.LIST, LineKind.DISH): Action.APPEND_ITEM,

    # A broken dish marker is neither a dish nor a benefit.
    (ScanState.IDLE, LineKind.MALFORMED_DISH): Action.DISCARD,
    (ScanState.DISCARD, LineKind.MALFORMED_DISH): Action.DISCARD,
    (ScanState.MEAL, LineKind.MALFORMED_DISH): Action.DISCARD,
    (ScanState.DISH_OPEN, LineKind.MALFORMED_DISH): Action.DISCARD,
    (ScanState.LIST, LineKind.MALFORMED_DISH): Action.APPEND_ITEM,

    # Plain bullets.
    (ScanState.IDLE, LineKind.ITEM): Action.DISCARD,
    (ScanState.DISCARD, LineKind.ITEM): Action.DISCARD,
    (ScanState.MEAL, LineKind.ITEM): Action.DISCARD,
    (ScanState.DISH_OPEN, LineKind.ITEM): Action.ATTACH_BENEFIT,
    (ScanState.LIST, LineKind.ITEM): Action.APPEND_ITEM,

    # Blank lines and prose never change anything.
    (ScanState.IDLE, LineKind.OTHER): Action.IGNORE,
    (ScanState.DISCARD, LineKind.OTHER): Action.IGNORE,
    (ScanState.MEAL, LineKind.OTHER): Action.IGNORE,
    (ScanState.DISH_OPEN, LineKind.OTHER): Action.IGNORE,
    (ScanState.LIST, LineKind.OTHER): Action.IGNORE,
}


@dataclass
class ParseState:
    """
    Mutable state of a single `extract` call. Never shared between calls.
    """

    plan: NormalizedPlan = field(default_factory=NormalizedPlan)
    current_section: Section = Section.NONE
    current_dish: Optional[DishEntry] = None

    @property
    def scan_state(self) -> ScanState:
        if self.current_section in MEAL_SECTIONS:
            return ScanState.DISH_OPEN if self.current_dish is not None else ScanState.MEAL
        if self.current_section in LIST_SECTIONS:
            return ScanState.LIST
        if self.current_section is Section.UNRECOGNIZED:
            return ScanState.DISCARD
        return ScanState.IDLE


def apply_line(state: ParseState, line: str) -> Action:
    """
    Classify `line`, apply the matching transition to `state` and return the
    action taken.
    """
    classified = classify_line(line)
    action = TRANSITIONS[(state.scan_state, classified.kind)]

    if action is Action.ENTER_SECTION:
        state.current_section = section_for_label(classified.text)
        state.current_dish = None
        logger.debug("section %r -> %s", classified.text, state.current_section.value)

    elif action is Action.OPEN_DISH:
        dish = DishEntry(name=classified.name)
        getattr(state.plan, state.current_section.value).append(dish)
        state.current_dish = dish

    elif action is Action.ATTACH_BENEFIT:
        # TRANSITIONS only yields this in DISH_OPEN
        state.current_dish.benefits.append(classified.text)

    elif action is Action.APPEND_ITEM:
        getattr(state.plan, state.current_section.value).append(classified.text)

    elif action is Action.DISCARD:
        logger.debug("discarded line in %s: %r", state.current_section.value, line.strip())

    return action


def iter_lines(document: str) -> Iterator[str]:
    """Yield the lines of `document` one by one, whatever the line terminator."""
    pos = 0
    for match in _LINE_BREAK_RE.finditer(document):
        yield document[pos:match.start()]
        pos = match.end()
    yield document[pos:]


def _coerce_document(document) -> str:
    if document is None:
        return ""
    if isinstance(document, (bytes, bytearray)):
        document = bytes(document).decode("utf-8", errors="replace")
    elif not isinstance(document, str):
        document = str(document)
    # str.strip() keeps U+FEFF, which would hide the first header
    return document.lstrip("\ufeff")


def extract(document: str) -> NormalizedPlan:
    """
    Extract a `NormalizedPlan` from a generated meal-plan document.

    Never raises. Unrecognized content is dropped, so the worst case is a plan
    with all five fields empty; the caller decides what to do with that
    (see `engine.build_response_payload`).

    Args:
        document: Raw text returned by the generator. `None` and bytes are
            accepted too (bytes are decoded as UTF-8 with replacement).

    Returns:
        A fresh `NormalizedPlan`. Dishes and items keep document order.
    """
    state = ParseState()
    for line in iter_lines(_coerce_document(document)):
        apply_line(state, line)
    return state.plan
