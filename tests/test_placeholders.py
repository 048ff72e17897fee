from formatted_text.markdown.nodes import Bold, InlineCode, Text
from formatted_text.markdown.placeholders import decode, encode
from formatted_text.markdown.registry import NodeRegistry


def test_encode_formats_index() -> None:
    assert encode(0) == "{{0}}"
    assert encode(42) == "{{42}}"


def test_registry_indices_are_dense_from_zero() -> None:
    registry = NodeRegistry()
    assert registry.register(Text("a")) == 0
    assert registry.register(Text("b")) == 1
    assert registry.register(Text("c")) == 2
    assert len(registry) == 3


def test_registry_take_clears_slot() -> None:
    registry = NodeRegistry()
    node = Text("a")
    index = registry.register(node)
    assert registry.take(index) is node
    assert registry.take(index) is None
    assert registry.remaining() == 0


def test_registry_take_unknown_index() -> None:
    registry = NodeRegistry()
    assert registry.take(0) is None
    assert registry.take(-1) is None


def test_round_trip_single_token() -> None:
    registry = NodeRegistry()
    node = InlineCode("x")
    token = encode(registry.register(node))
    assert decode(token, registry) == [node]
    assert decode(token, registry) == []


def test_leak_between_tokens_is_unescaped() -> None:
    registry = NodeRegistry()
    first = Bold((Text("one"),))
    second = InlineCode("two")
    registry.register(first)
    registry.register(second)

    nodes = decode("{{0}}raw &amp; text{{1}}", registry)

    assert nodes == [first, Text("raw & text"), second]
    assert nodes[0] is first
    assert nodes[2] is second


def test_plain_ampersand_leak() -> None:
    registry = NodeRegistry()
    first, second = InlineCode("a"), InlineCode("b")
    registry.register(first)
    registry.register(second)
    assert decode("{{0}}raw & text{{1}}", registry) == [first, Text("raw & text"), second]


def test_trailing_leak() -> None:
    registry = NodeRegistry()
    node = InlineCode("a")
    registry.register(node)
    assert decode("{{0}}[tail", registry) == [node, Text("[tail")]


def test_stream_without_tokens_is_one_leak() -> None:
    assert decode("just text", NodeRegistry()) == [Text("just text")]


def test_empty_stream() -> None:
    assert decode("", NodeRegistry()) == []


def test_malformed_token_is_leaked_text() -> None:
    registry = NodeRegistry()
    node = InlineCode("a")
    registry.register(node)
    assert decode("{{x}}{{0}}", registry) == [Text("{{x}}"), node]


def test_stray_brace_before_token() -> None:
    registry = NodeRegistry()
    node = InlineCode("a")
    registry.register(node)
    assert decode("{{{0}}", registry) == [Text("{"), node]


def test_unknown_and_repeated_tokens_are_skipped() -> None:
    registry = NodeRegistry()
    node = InlineCode("a")
    registry.register(node)
    assert decode("{{0}}{{0}}{{9}}", registry) == [node]


def test_decode_is_reentrant_on_substrings() -> None:
    registry = NodeRegistry()
    inner = Text("inner")
    registry.register(inner)
    outer = Bold(tuple(decode("{{0}}", registry)))
    registry.register(outer)
    assert decode("before{{1}}", registry) == [Text("before"), outer]
    assert outer.children == (inner,)
