"""Tests for the OPML importer."""

from __future__ import annotations

import pytest

from opmltree.errors import MalformedInputError
from opmltree.importer import GENERATOR, convert, import_document, parse
from opmltree.models.outline import OutlineNode


def test_convert_copies_attributes_and_drops_reserved_names() -> None:
    """Attributes become fields, 'subs' and 'children' are skipped, '$' is removed."""

    source = {"$": {"text": "a", "subs": "x", "children": "y", "type": "link"}}
    dest: dict = {}
    convert(source, dest)
    assert dest == {"text": "a", "type": "link"}
    assert "$" not in source


def test_convert_collects_outlines_into_children() -> None:
    """Nested outline elements become ordered children lists."""

    source = {
        "outline": [
            {"$": {"text": "a"}},
            {"$": {"text": "b"}, "outline": {"$": {"text": "c"}}},
        ]
    }
    dest: dict = {}
    convert(source, dest)
    assert dest == {"children": [{"text": "a"}, {"text": "b", "children": [{"text": "c"}]}]}


def test_single_and_list_outlines_import_alike() -> None:
    """One bare outline and a list of the same outline give 1 and N equal children."""

    item = {"$": {"text": "a"}}
    single = import_document({"opml": {"head": {"title": "t"}, "body": {"outline": dict(item)}}})
    several = import_document(
        {"opml": {"head": {"title": "t"}, "body": {"outline": [dict(item), dict(item), dict(item)]}}}
    )

    assert single.outlines == [OutlineNode(attributes={"text": "a"})]
    assert several.outlines == [OutlineNode(attributes={"text": "a"})] * 3


def test_parse_sample(sample_text: str) -> None:
    """A full document keeps head fields, attribute values and child order."""

    document = parse(sample_text)

    assert document.head["title"] == "Reading list"
    assert document.head["ownerName"] == "Sam"
    assert [n.get_scalar("text") for n in document.outlines] == ["Feeds", "Notes", "Done"]

    feeds, notes, done = document.outlines
    assert [n.get_scalar("text") for n in feeds.get_children()] == ["Scripting News", "Tom & Jerry"]
    assert feeds.get_children()[1].get_scalar("xmlUrl") == "http://example.com/feed?a=1&b=2"
    assert len(notes.get_children()) == 1
    assert done.children is None


def test_generator_is_stamped_and_overwritten() -> None:
    """The generator field is always set, replacing any existing value."""

    document = parse("<opml><head><generator>other tool</generator></head><body/></opml>")
    assert document.head == {"generator": GENERATOR}


def test_missing_body_becomes_empty() -> None:
    """A document without a body imports with an empty body mapping."""

    document = parse('<opml version="2.0"><head><title>x</title></head></opml>')
    assert document.body == OutlineNode()
    assert document.to_mapping()["opml"]["body"] == {}
    assert document.outlines == []


def test_missing_head_is_empty_without_generator() -> None:
    """Without a head element there is nothing to stamp; head is still a mapping."""

    document = parse('<opml><body><outline text="a"/></body></opml>')
    assert document.head == {}
    assert document.outlines == [OutlineNode(attributes={"text": "a"})]


def test_empty_head_and_body_elements() -> None:
    """Empty or whitespace-only head/body elements are coerced to empty mappings."""

    document = parse("<opml><head>\n</head><body/></opml>")
    assert document.head == {}
    assert document.body == OutlineNode()


def test_outline_without_attributes() -> None:
    """A bare <outline/> imports as an empty node."""

    document = parse("<opml><head/><body><outline/><outline/></body></opml>")
    assert document.outlines == [OutlineNode(), OutlineNode()]

    document = parse("<opml><head/><body><outline><outline/></outline></body></opml>")
    assert document.outlines == [OutlineNode(children=[OutlineNode()])]


@pytest.mark.parametrize("root", [None, {}])
def test_empty_root_raises(root: dict | None) -> None:
    """An empty tokenizer result is malformed input."""

    with pytest.raises(MalformedInputError):
        import_document(root)


def test_non_opml_root_raises() -> None:
    """Documents whose root is not <opml> are rejected."""

    with pytest.raises(MalformedInputError):
        parse("<rss><channel/></rss>")


def test_unparseable_text_raises() -> None:
    """Tokenizer failures surface as MalformedInputError."""

    with pytest.raises(MalformedInputError):
        parse("<opml><body>")


@pytest.mark.parametrize(
    "text",
    [
        '<opml><head/><body><outline text="a"><note lang="en"/></outline></body></opml>',
        '<opml><head><title lang="en">x</title></head><body/></opml>',
        "<opml><head><title>a</title><title>b</title></head><body/></opml>",
    ],
)
def test_structure_outside_outline_convention_raises(text: str) -> None:
    """Nested or repeated non-outline elements are not part of the format."""

    with pytest.raises(MalformedInputError):
        parse(text)


def test_body_attributes_are_dropped() -> None:
    """Attributes of <body> are not kept; only its outlines are."""

    document = parse('<opml><head/><body foo="x"><outline text="a"/></body></opml>')
    assert document.body.attributes == {}
    assert document.to_mapping()["opml"]["body"] == {"children": [{"text": "a"}]}
