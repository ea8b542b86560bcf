"""Edge operator catalogs for the class-diagram and flowchart dialects.

The two dialects reuse some glyphs (``-->``, ``--``) with different meanings, so each
keeps its own catalog and nothing here is shared between them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .utils import RelationKind, is_identifier

_COLON_LABEL_PATTERN = re.compile(r"^(\w+)\s*:\s*(.+)$")


@dataclass(frozen=True)
class RelationOperator:
    """Literal class-diagram operator.

    ``reversed`` marks arrows whose head points left: the text right of the operator
    is the logical source.
    """

    token: str
    kind: RelationKind
    reversed: bool = False

    def orient(self, left: str, right: str) -> Tuple[str, str]:
        if self.reversed:
            return right, left
        return left, right


@dataclass(frozen=True)
class Relationship:
    source: str
    target: str
    kind: RelationKind
    label: str = ""


# Longer tokens come first: the first token found in a line wins.
CLASS_OPERATORS: Tuple[RelationOperator, ...] = (
    RelationOperator("<|--", RelationKind.INHERITANCE, reversed=True),
    RelationOperator("--|>", RelationKind.INHERITANCE),
    RelationOperator("<|..", RelationKind.REALIZATION, reversed=True),
    RelationOperator("..|>", RelationKind.REALIZATION),
    RelationOperator("--*", RelationKind.COMPOSITION, reversed=True),
    RelationOperator("*--", RelationKind.COMPOSITION),
    RelationOperator("--o", RelationKind.AGGREGATION, reversed=True),
    RelationOperator("o--", RelationKind.AGGREGATION),
    RelationOperator("<--", RelationKind.ASSOCIATION, reversed=True),
    RelationOperator("-->", RelationKind.ASSOCIATION),
    RelationOperator("<..", RelationKind.DEPENDENCY, reversed=True),
    RelationOperator("..>", RelationKind.DEPENDENCY),
    RelationOperator("--", RelationKind.LINK),
)

# Flowchart edge glyphs, as regex alternatives in matching priority.
FLOW_OPERATORS: Tuple[Tuple[str, RelationKind], ...] = (
    ("-.->", RelationKind.DEPENDENCY),
    ("==>", RelationKind.COMPOSITION),
    ("-->", RelationKind.ASSOCIATION),
    ("---", RelationKind.LINK),
    ("--", RelationKind.LINK),
)

_FLOW_KIND_BY_TOKEN = dict(FLOW_OPERATORS)


def flow_operator_pattern(include_bare_dash: bool = True) -> str:
    tokens = [token for token, _ in FLOW_OPERATORS if include_bare_dash or token != "--"]
    return "|".join(re.escape(token) for token in tokens)


def flow_kind(token: str) -> RelationKind:
    return _FLOW_KIND_BY_TOKEN.get(token, RelationKind.LINK)


def _split_target(rest: str) -> Tuple[str, str]:
    match = _COLON_LABEL_PATTERN.match(rest)
    if match:
        return match.group(1), match.group(2).strip()
    tokens = rest.split()
    return (tokens[0] if tokens else ""), ""


def parse_relationship(line: str) -> Optional[Relationship]:
    """Match ``line`` against :data:`CLASS_OPERATORS`.

    Returns ``None`` when no operator yields bare identifiers on both sides, which
    rejects lines where an operator glyph only appears inside a label or member.
    """

    for operator in CLASS_OPERATORS:
        index = line.find(operator.token)
        if index == -1:
            continue
        left = line[:index].strip()
        right, label = _split_target(line[index + len(operator.token):].strip())
        if not is_identifier(left) or not is_identifier(right):
            continue
        source, target = operator.orient(left, right)
        return Relationship(source=source, target=target, kind=operator.kind, label=label)
    return None
