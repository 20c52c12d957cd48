'''
Errors raised while encoding.

Failures of the output sink itself are not wrapped; the sink's own `OSError`
propagates unchanged.
'''

class EncodeError(Exception):
    '''
    Base class for errors in the data being encoded.
    '''

class TruncatedStream(EncodeError):
    '''
    A stream's data source ran dry before its declared length was copied.
    '''
    def __init__(self, declared_length, available):
        self.declared_length = declared_length
        self.available = available
        super().__init__('stream declares {} bytes but its source only had {}'.format(
            declared_length, available,
        ))

class UnsupportedObject(EncodeError, TypeError):
    def __init__(self, value):
        self.value = value
        super().__init__('cannot encode object of type {}'.format(type(value).__name__))
