#!/usr/bin/env pytest

import io
import random
import re

import pytest

from helpers import ShortReader

from pdfenc import (
    NULL,
    Array,
    Boolean,
    Dict,
    HexString,
    Indirect,
    Integer,
    LiteralString,
    Name,
    Real,
    Reference,
    Stream,
    TruncatedStream,
    UnsupportedObject,
    encode_object,
    encodes,
)


def test_null_and_booleans():
    assert encodes(NULL) == b'null'
    assert encodes(Boolean(True)) == b'true'
    assert encodes(Boolean(False)) == b'false'


def test_integer():
    assert encodes(Integer(0)) == b'0'
    assert encodes(Integer(-42)) == b'-42'
    assert encodes(Integer(2**63 - 1)) == b'9223372036854775807'


def test_real_is_fixed_point():
    assert encodes(Real(1.5)) == b'1.500000'
    assert encodes(Real(-0.25)) == b'-0.250000'
    assert encodes(Real(3)) == b'3.000000'
    for x in (1e-10, 1e15, 1.5e300, -7e22):
        encoded = encodes(Real(x))
        assert b'e' not in encoded.lower()
        assert re.fullmatch(rb'-?\d+\.\d+', encoded)


def test_literal_string_escapes():
    assert encodes(LiteralString(b'plain text')) == b'(plain text)'
    assert encodes(LiteralString(b'a(b)c\\')) == b'(a\\(b\\)c\\\\)'
    assert encodes(LiteralString(b'')) == b'()'


def test_literal_string_control_bytes():
    assert encodes(LiteralString(b'a\nb\rc\td\be\ff')) == b'(a\\nb\\rc\\td\\be\\ff)'
    assert encodes(LiteralString(b'\x00\x01\x1f\x7f')) == b'(\\000\\001\\037\\177)'
    assert encodes(LiteralString(b'\xe9\xff')) == b'(\xe9\xff)'


def test_unbalanced_parentheses_are_escaped():
    assert encodes(LiteralString(b'((')) == b'(\\(\\()'
    assert encodes(LiteralString(b')')) == b'(\\))'


def test_hex_string():
    assert encodes(HexString(b'')) == b'<>'
    assert encodes(HexString(b'\x00\xab\xff')) == b'<00ABFF>'


def test_hex_string_shape():
    rng = random.Random(7)
    for n in (0, 1, 2, 17, 256):
        b = bytes(rng.randrange(256) for _ in range(n))
        encoded = encodes(HexString(b))
        assert len(encoded) == 2 * n + 2
        assert re.fullmatch(rb'<[0-9A-F]*>', encoded)
        assert bytes.fromhex(encoded[1:-1].decode()) == b


def test_name_printable_passes_through():
    printable = ''.join(chr(c) for c in range(0x21, 0x7f) if c != ord('#'))
    assert encodes(Name(printable)) == b'/' + printable.encode()
    assert encodes(Name('Type')) == b'/Type'


def test_name_escapes():
    assert encodes(Name('A#B')) == b'/A#23B'
    assert encodes(Name('##a#')) == b'/#23#23a#23'
    assert encodes(Name('A B')) == b'/A#20B'
    assert encodes(Name('tab\t')) == b'/tab#09'
    assert encodes(Name('\x7f')) == b'/#7F'
    assert encodes(Name('é')) == b'/#E9'
    assert encodes(Name('a\xff')) == b'/a#FF'
    assert encodes(Name('\x00')) == b'/#00'
    assert encodes(Name('')) == b'/'


def test_name_beyond_latin1_escapes_utf8_bytes():
    assert encodes(Name('€')) == b'/#E2#82#AC'
    assert encodes(Name('x\u0100y')) == b'/x#C4#80y'
    assert encodes(Name('é€')) == b'/#E9#E2#82#AC'


def test_array():
    assert encodes(Array([])) == b'[]'
    assert encodes(Array([1])) == b'[1]'
    assert encodes(Array([1, 2.0, True, None, Name('X')])) == b'[1 2.000000 true null /X]'
    assert encodes(Array([[1], [], [2, 3]])) == b'[[1] [] [2 3]]'


def test_dict():
    assert encodes(Dict({})) == b'<<\n>>'
    assert encodes(Dict({'Type': Name('Catalog')})) == b'<<\n/Type /Catalog\n>>'
    assert encodes(Dict({'A#': [1, 2]})) == b'<<\n/A#23 [1 2]\n>>'


def test_dict_insertion_order():
    assert encodes(Dict([('B', 1), ('A', 2), ('C', 3)])) == b'<<\n/B 1\n/A 2\n/C 3\n>>'


def test_nested_dict():
    d = Dict({'Outer': {'Inner': 'x'}})
    assert encodes(d) == b'<<\n/Outer <<\n/Inner (x)\n>>\n>>'


def test_native_values():
    assert encodes([None, 'a', b'b', {'K': 1}]) == b'[null (a) (b) <<\n/K 1\n>>]'


def test_stream():
    assert encodes(Stream.from_bytes(b'hello')) == b'<<\n/Length 5\n>>\nstream\nhello\nendstream\n'
    assert encodes(Stream(0, b'')) == b'<<\n/Length 0\n>>\nstream\n\nendstream\n'


def test_stream_copies_declared_length_only():
    data = io.BytesIO(b'hello world')
    assert encodes(Stream(5, data)) == b'<<\n/Length 5\n>>\nstream\nhello\nendstream\n'
    assert data.read() == b' world'


def test_stream_binary_passes_verbatim():
    payload = bytes(range(256))
    encoded = encodes(Stream.from_bytes(payload))
    assert encoded.split(b'stream\n', 1)[1] == payload + b'\nendstream\n'


def test_stream_short_reads():
    encoded = encodes(Stream(6, ShortReader(b'abcdefgh', step=2)))
    assert encoded == b'<<\n/Length 6\n>>\nstream\nabcdef\nendstream\n'


def test_bytes_stream_encodes_again():
    stream = Stream.from_bytes(b'hello')
    value = Array([stream, stream])
    first = encodes(value)
    assert first == encodes(value)
    assert first.count(b'stream\nhello\nendstream') == 2
    assert stream.data == b'hello'


def test_file_stream_is_consumed():
    stream = Stream(5, io.BytesIO(b'hello'))
    assert encodes(stream) == b'<<\n/Length 5\n>>\nstream\nhello\nendstream\n'
    with pytest.raises(TruncatedStream):
        encodes(stream)


def test_truncated_stream():
    output = io.BytesIO()
    with pytest.raises(TruncatedStream) as excinfo:
        encode_object(output, Stream(10, b'hello'))
    assert excinfo.value.declared_length == 10
    assert excinfo.value.available == 5
    assert output.getvalue() == b'<<\n/Length 10\n>>\nstream\nhello'
    assert b'endstream' not in output.getvalue()


def test_truncated_stream_inside_array():
    output = io.BytesIO()
    with pytest.raises(TruncatedStream):
        encode_object(output, Array([1, Stream(3, ShortReader(b'ab'))]))
    assert output.getvalue() == b'[1 <<\n/Length 3\n>>\nstream\nab'


def test_indirect():
    catalog = Indirect('Catalog', Dict({'Type': Name('Catalog')}))
    assert encodes(catalog) == b'0 0 obj\n<<\n/Type /Catalog\n>>\nendobj\n'
    assert encodes(Reference('Catalog')) == b'0 0 R'


def test_subclass_of_variant_is_rejected():
    class Custom(Name):
        pass
    with pytest.raises(UnsupportedObject):
        encodes(Custom('x'))
