'''
Objects are documented in section 7.3 of ISO 32000-1:2008.

Each renderer writes one object into an encode context and recurses into its
children through the same context.
'''

from ._errors import TruncatedStream, UnsupportedObject
from ._objects import (
    Array,
    Boolean,
    Dict,
    HexString,
    Indirect,
    Integer,
    LiteralString,
    Name,
    Null,
    Real,
    Reference,
    Stream,
    wrap,
)

import re

REAL_FORMAT = '%f'

literal_escape_regex = re.compile(rb'[()\\\x00-\x1f\x7f]')

literal_escapes = {  # table 3 (7.3.4.2)
    b'\n': b'\\n',
    b'\r': b'\\r',
    b'\t': b'\\t',
    b'\b': b'\\b',
    b'\f': b'\\f',
    b'(': b'\\(',
    b')': b'\\)',
    b'\\': b'\\\\',
}

name_escape_regex = re.compile(r'[^!-~]|#')

def escape_literal(x):
    return literal_escape_regex.sub(
        lambda m: literal_escapes.get(m.group()) or b'\\%03o' % ord(m.group()),
        x,
    )

def escape_name_char(c):
    # one escape per code point up to U+00FF, one per UTF-8 byte beyond
    if ord(c) <= 0xff: return '#%02X' % ord(c)
    return ''.join('#%02X' % b for b in c.encode('utf-8'))

def escape_name(x):
    return name_escape_regex.sub(lambda m: escape_name_char(m.group()), x).encode('ascii')

def render_null(ctx, x):
    ctx.write(b'null')

def render_bool(ctx, x):
    ctx.write(b'true' if x.value else b'false')

def render_integer(ctx, x):
    ctx.write(b'%d' % x.value)

def render_real(ctx, x):
    ctx.write_string(REAL_FORMAT % x.value)

def render_literal_string(ctx, x):
    ctx.write_byte(ord('('))
    ctx.write(escape_literal(x.value))
    ctx.write_byte(ord(')'))

def render_hex_string(ctx, x):
    ctx.write_byte(ord('<'))
    ctx.write_string(x.value.hex().upper())
    ctx.write_byte(ord('>'))

def render_name(ctx, x):
    ctx.write_byte(ord('/'))
    ctx.write(escape_name(x.value))

def render_array(ctx, x):
    ctx.write_byte(ord('['))
    for i, item in enumerate(x):
        if i: ctx.write_byte(ord(' '))
        render(ctx, item)
    ctx.write_byte(ord(']'))

def render_dictionary(ctx, x):
    ctx.write(b'<<')
    for k, v in x.items():
        ctx.write_byte(ord('\n'))
        render_name(ctx, k)
        ctx.write_byte(ord(' '))
        render(ctx, v)
    ctx.write(b'\n>>')

def render_stream(ctx, x):
    render_dictionary(ctx, Dict({'Length': Integer(x.length)}))
    ctx.write(b'\nstream\n')
    remaining = x.length
    source = x.open()
    while remaining > 0:
        chunk = source.read(min(remaining, ctx.buffer_size))
        if not chunk:
            raise TruncatedStream(x.length, x.length - remaining)
        ctx.write(chunk)
        remaining -= len(chunk)
    ctx.write(b'\nendstream\n')

def render_indirect(ctx, x):
    ctx.write(b'%d 0 obj\n' % ctx.resolve_id(x.name))
    render(ctx, x.value)
    ctx.write(b'\nendobj\n')

def render_reference(ctx, x):
    ctx.write(b'%d 0 R' % ctx.resolve_id(x.name))

renderers = {
    Null: render_null,
    Boolean: render_bool,
    Integer: render_integer,
    Real: render_real,
    LiteralString: render_literal_string,
    HexString: render_hex_string,
    Name: render_name,
    Array: render_array,
    Dict: render_dictionary,
    Stream: render_stream,
    Indirect: render_indirect,
    Reference: render_reference,
}

def render(ctx, object):
    object = wrap(object)
    renderer = renderers.get(object.__class__)
    if renderer is None: raise UnsupportedObject(object)
    renderer(ctx, object)
