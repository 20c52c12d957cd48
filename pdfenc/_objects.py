'''
This file makes section references to ISO 32000-1:2008.

Objects are documented in section 7.3 of ISO 32000-1:2008.

Every value is an instance of one of the classes in `VARIANTS`. Values are not
mutated once constructed, so they can be encoded any number of times. The
exception is a `Stream` over a caller supplied file-like object, which is
consumed as it is read.
'''

from ._errors import UnsupportedObject

import io
import math
import operator

INTEGER_MIN = -2**63
INTEGER_MAX = 2**63 - 1

def encode_text(text):
    '''
    Bytes for a text string, see 7.9.2.2.

    ASCII text is kept as is, anything else becomes UTF-16BE behind a byte
    order marker.
    '''
    try: return text.encode('ascii')
    except UnicodeEncodeError: pass
    return b'\xfe\xff' + text.encode('utf-16-be')

def _to_bytes(value):
    if isinstance(value, str): return encode_text(value)
    if isinstance(value, (bytes, bytearray, memoryview)): return bytes(value)
    raise TypeError('expected bytes or str, got {}'.format(type(value).__name__))

class _Scalar:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if other.__class__ is not self.__class__: return False
        return self.value == other.value

    def __hash__(self):
        return hash((self.__class__, self.value))

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.value)

class Null:
    def __eq__(self, other):
        return isinstance(other, Null)

    def __hash__(self):
        return hash(Null)

    def __repr__(self):
        return 'null'

NULL = Null()

class Boolean(_Scalar):  # 7.3.2
    def __init__(self, value):
        if not isinstance(value, bool):
            raise TypeError('boolean must be bool, got {}'.format(type(value).__name__))
        super().__init__(value)

class Integer(_Scalar):  # 7.3.3
    def __init__(self, value):
        value = operator.index(value)
        if not INTEGER_MIN <= value <= INTEGER_MAX:
            raise ValueError('integer {} out of 64-bit range'.format(value))
        super().__init__(value)

class Real(_Scalar):  # 7.3.3
    def __init__(self, value):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError('real must be finite, got {}'.format(value))
        super().__init__(value)

class LiteralString(_Scalar):  # 7.3.4.2
    def __init__(self, value):
        super().__init__(_to_bytes(value))

class HexString(_Scalar):  # 7.3.4.3
    def __init__(self, value):
        super().__init__(_to_bytes(value))

class Name(_Scalar):  # 7.3.5
    def __init__(self, value):
        if isinstance(value, Name): value = value.value
        if not isinstance(value, str):
            raise TypeError('name must be str, got {}'.format(type(value).__name__))
        super().__init__(value)

    def __repr__(self):
        return '/{}'.format(self.value)

class Array:  # 7.3.6
    def __init__(self, items=()):
        self.items = tuple(wrap(i) for i in items)

    def __eq__(self, other):
        if not isinstance(other, Array): return False
        return self.items == other.items

    def __hash__(self):
        return hash((Array, self.items))

    def __repr__(self):
        return 'Array({!r})'.format(list(self.items))

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, i):
        return self.items[i]

class Dict:  # 7.3.7
    '''
    Entries keep insertion order so encoded output is byte-stable.
    Keys may be given as `Name` or `str`.
    '''
    def __init__(self, entries=()):
        if hasattr(entries, 'items'): entries = entries.items()
        self._entries = {}
        for k, v in entries:
            if not isinstance(k, (Name, str)):
                raise TypeError('dictionary key must be Name or str, got {}'.format(type(k).__name__))
            self._entries[Name(k)] = wrap(v)

    def __eq__(self, other):
        if not isinstance(other, Dict): return False
        return list(self._entries.items()) == list(other._entries.items())

    def __hash__(self):
        return hash((Dict, tuple(self._entries.items())))

    def __repr__(self):
        return 'Dict({!r})'.format(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, key):
        return self._entries[Name(key)]

    def __contains__(self, key):
        return Name(key) in self._entries

    def items(self):
        return self._entries.items()

    def get(self, key, default=None):
        return self._entries.get(Name(key), default)

class Stream:  # 7.3.8
    '''
    `data` is `bytes` or a readable binary file-like object. Exactly `length`
    bytes of it are encoded; a source with fewer fails the encode.
    '''
    def __init__(self, length, data):
        length = operator.index(length)
        if length < 0: raise ValueError('stream length must not be negative')
        if isinstance(data, (bytearray, memoryview)): data = bytes(data)
        if not isinstance(data, bytes) and not hasattr(data, 'read'):
            raise TypeError('stream data must be bytes or readable, got {}'.format(type(data).__name__))
        self.length = length
        self.data = data

    @classmethod
    def from_bytes(cls, data):
        return cls(len(data), data)

    def open(self):
        '''
        Readable for the data. Bytes get a fresh reader every time; a caller
        supplied file-like object is returned as is and consumed by reading.
        '''
        if isinstance(self.data, bytes): return io.BytesIO(self.data)
        return self.data

    def __repr__(self):
        return 'Stream(<< /Length {} >>)'.format(self.length)

class Indirect:  # 7.3.10
    def __init__(self, name, value):
        if not isinstance(name, str):
            raise TypeError('indirect object name must be str, got {}'.format(type(name).__name__))
        self.name = name
        self.value = wrap(value)

    def __eq__(self, other):
        if not isinstance(other, Indirect): return False
        return (self.name, self.value) == (other.name, other.value)

    def __hash__(self):
        return hash((Indirect, self.name, self.value))

    def __repr__(self):
        return '{} obj {!r}'.format(self.name, self.value)

class Reference:
    def __init__(self, target):
        types = [type(target)]
        if types == [str]:
            self.name = target
        elif types == [Indirect] or types == [Reference]:
            self.name = target.name
        else:
            raise TypeError('invalid reference target {!r}'.format(target))

    def __eq__(self, other):
        if not isinstance(other, Reference): return False
        return self.name == other.name

    def __hash__(self):
        return hash((Reference, self.name))

    def __repr__(self):
        return '{} R'.format(self.name)

VARIANTS = (
    Null,
    Boolean,
    Integer,
    Real,
    LiteralString,
    HexString,
    Name,
    Array,
    Dict,
    Stream,
    Indirect,
    Reference,
)

def wrap(value):
    '''
    Convert a native Python value into the matching object.

    Objects are returned unchanged. `str` and `bytes` become literal strings;
    use `HexString` or `Name` explicitly for those.
    '''
    if isinstance(value, VARIANTS): return value
    if value is None: return NULL
    # bool before int, bool is an int subclass
    if isinstance(value, bool): return Boolean(value)
    if isinstance(value, int): return Integer(value)
    if isinstance(value, float): return Real(value)
    if isinstance(value, (str, bytes, bytearray)): return LiteralString(value)
    if isinstance(value, (list, tuple)): return Array(value)
    if isinstance(value, dict): return Dict(value)
    raise UnsupportedObject(value)
