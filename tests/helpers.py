class FailingSink:
    '''Binary sink whose writes start failing after `fail_after` successful calls.'''

    def __init__(self, fail_after):
        self.fail_after = fail_after
        self.calls = 0
        self.data = bytearray()

    def write(self, data):
        self.calls += 1
        if self.calls > self.fail_after:
            raise BrokenPipeError('sink closed')
        self.data += data
        return len(data)


class ShortReader:
    '''Readable that hands out at most `step` bytes per read.'''

    def __init__(self, data, step=1):
        self.data = data
        self.step = step
        self.i = 0

    def read(self, n=-1):
        if n < 0:
            n = len(self.data)
        chunk = self.data[self.i:self.i + min(n, self.step)]
        self.i += len(chunk)
        return chunk
