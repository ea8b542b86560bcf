"""Tests for the class-diagram operator table."""

import pytest

from parsers import CLASS_OPERATORS, FLOW_OPERATORS, RelationKind, parse_relationship


class TestOperatorTable:
    def test_longer_tokens_precede_their_substrings(self):
        tokens = [op.token for op in CLASS_OPERATORS]
        for i, token in enumerate(tokens):
            for later in tokens[i + 1:]:
                assert token not in later, f"{later!r} would be shadowed by {token!r}"

    def test_plain_link_is_last(self):
        assert CLASS_OPERATORS[-1].token == "--"
        assert CLASS_OPERATORS[-1].kind is RelationKind.LINK

    def test_catalogs_are_independent(self):
        flow = dict(FLOW_OPERATORS)
        assert flow["-->"] is RelationKind.ASSOCIATION
        assert flow["==>"] is RelationKind.COMPOSITION
        assert flow["-.->"] is RelationKind.DEPENDENCY
        assert flow["--"] is RelationKind.LINK


class TestParseRelationship:
    @pytest.mark.parametrize(
        "line, source, target, kind",
        [
            ("Animal <|-- Dog", "Dog", "Animal", RelationKind.INHERITANCE),
            ("Dog --|> Animal", "Dog", "Animal", RelationKind.INHERITANCE),
            ("Shape <|.. Circle", "Circle", "Shape", RelationKind.REALIZATION),
            ("Circle ..|> Shape", "Circle", "Shape", RelationKind.REALIZATION),
            ("Car *-- Wheel", "Car", "Wheel", RelationKind.COMPOSITION),
            ("Wheel --* Car", "Car", "Wheel", RelationKind.COMPOSITION),
            ("Pond o-- Duck", "Pond", "Duck", RelationKind.AGGREGATION),
            ("Duck --o Pond", "Pond", "Duck", RelationKind.AGGREGATION),
            ("A --> B", "A", "B", RelationKind.ASSOCIATION),
            ("A <-- B", "B", "A", RelationKind.ASSOCIATION),
            ("A ..> B", "A", "B", RelationKind.DEPENDENCY),
            ("A <.. B", "B", "A", RelationKind.DEPENDENCY),
            ("A -- B", "A", "B", RelationKind.LINK),
        ],
    )
    def test_operator_orientation(self, line, source, target, kind):
        rel = parse_relationship(line)
        assert rel is not None
        assert (rel.source, rel.target, rel.kind) == (source, target, kind)

    def test_label_after_colon(self):
        rel = parse_relationship("Driver --> Vehicle :  drives daily ")
        assert rel.label == "drives daily"

    def test_target_is_first_token_without_colon(self):
        rel = parse_relationship("A --> B extra words")
        assert rel.target == "B"
        assert rel.label == ""

    def test_non_identifier_sides_rejected(self):
        assert parse_relationship("+method() --> x") is None
        assert parse_relationship('Customer "1" --> "*" Ticket') is None

    def test_missing_target_rejected(self):
        assert parse_relationship("A -->") is None

    def test_no_operator(self):
        assert parse_relationship("just some text") is None
