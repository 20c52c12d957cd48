'''
This file makes section references to ISO 32000-1:2008.

Overall file structure is documented in section 7.5.

Only the header, the body and the end-of-file marker are written. There is no
cross-reference table (7.5.4) or trailer (7.5.5); whoever needs a complete
file has to append those.

The whole body is encoded in one pass through a single `EncodeContext`, so
object numbers are shared across the document: a reference in one object
gets the same number as the object it names, wherever that is in the body.
'''

from ._context import EncodeContext
from ._objects import Indirect, Reference

import io
import logging
import pprint
import re

VERSION = '1.7'

logger = logging.getLogger(__name__)

class Pdf:
    def __init__(self, body=None, version=VERSION):
        if not re.fullmatch(r'\d+\.\d+', version):
            raise ValueError('invalid version {!r}'.format(version))
        self.version = version
        self.body = []
        for obj in body or []:
            if not isinstance(obj, Indirect):
                raise TypeError('body holds indirect objects, got {!r}'.format(obj))
            self.body.append(obj)

    def __repr__(self):
        return (
            '===== header =====\n'
            '%PDF-{}\n'
            '\n'
            '===== body =====\n'
            '{}'
        ).format(self.version, pprint.pformat(self.body))

    def add(self, name, value):
        if any(i.name == name for i in self.body):
            raise ValueError('object {!r} already in body'.format(name))
        obj = Indirect(name, value)
        self.body.append(obj)
        return Reference(obj)

    def object(self, name):
        for i in self.body:
            if i.name == name: return i.value
        raise KeyError(name)

    def encode(self, output):
        # one context for the whole body, so references resolve across objects
        with EncodeContext(output) as ctx:
            # header 7.5.2
            ctx.write_string('%PDF-{}\n'.format(self.version))
            # body 7.5.3
            for obj in self.body:
                ctx.render(obj)
            # end of file 7.5.5
            ctx.write(b'%%EOF')
            logger.debug('encoded %d objects, %d numbered', len(self.body), len(ctx.names))

    def encodes(self):
        output = io.BytesIO()
        self.encode(output)
        return output.getvalue()

    def save(self, file_name):
        with open(file_name, 'wb') as file:
            self.encode(file)
