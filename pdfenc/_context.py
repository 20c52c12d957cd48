'''
Buffered, single-pass encoding.

An `EncodeContext` lives for exactly one top-level encode. It owns the output
buffer and the table numbering indirect objects by name, so object numbers are
consistent within a pass and start over at 0 in the next one.

The first failure of the output sink is recorded and re-raised; from then on
every write is a no-op, so code still unwinding can write without checking.
'''

from ._to_bytes import render

import io
import logging

DEFAULT_BUFFER_SIZE = 4096

logger = logging.getLogger(__name__)

class EncodeContext:
    def __init__(self, output, buffer_size=DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError('buffer_size must be positive, got {}'.format(buffer_size))
        self.output = output
        self.buffer_size = buffer_size
        self.buffer = bytearray()
        self.error = None
        self.names = {}
        self.flushed = 0

    def __enter__(self):
        logger.debug('encode context opened on %r', self.output)
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.finish()
            return
        # keep what was rendered before the failure, the original error wins
        if self.error is None:
            try:
                self._flush()
            except Exception as e:
                logger.warning('flush failed after %r: %s', exc, e)

    def write(self, data):
        if self.error is not None: return
        self.buffer += data
        if len(self.buffer) >= self.buffer_size:
            self._flush()

    def write_string(self, text):
        self.write(text.encode('ascii'))

    def write_byte(self, b):
        self.write(bytes((b,)))

    def resolve_id(self, name):
        n = self.names.get(name)
        if n is None:
            n = self.names[name] = len(self.names)
            logger.debug('object %r numbered %d', name, n)
        return n

    def render(self, value):
        render(self, value)

    def finish(self):
        if self.error is not None: raise self.error
        self._flush()
        logger.debug('encode context finished: %d bytes, %d objects', self.flushed, len(self.names))

    def _flush(self):
        if not self.buffer: return
        try:
            self.output.write(bytes(self.buffer))
        except Exception as e:
            self.error = e
            raise
        self.flushed += len(self.buffer)
        self.buffer.clear()

def encode_object(output, value):
    '''
    Encode `value` into the binary file-like `output`.

    `None` is written as `null` directly. Anything else is rendered through a
    fresh context, so object numbers start at 0.
    '''
    if value is None:
        output.write(b'null')
        return
    with EncodeContext(output) as ctx:
        ctx.render(value)

def encodes(value):
    output = io.BytesIO()
    encode_object(output, value)
    return output.getvalue()
