import sys
from collections import deque


class Channel:
    """
    Character I/O used by the backends.

    read() returns one character or None when no input is available,
    write() emits one character.
    """

    def read(self):
        return None

    def write(self, ch):
        pass


class NullChannel(Channel):
    pass


class ConsoleChannel(Channel):
    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read(self):
        self.stdout.flush()
        ch = self.stdin.read(1)
        if not ch:
            return None
        return ch

    def write(self, ch):
        self.stdout.write(ch)


class BufferChannel(Channel):
    def __init__(self, input_text=''):
        self.input = deque(input_text)
        self.output = []

    def read(self):
        if not self.input:
            return None
        return self.input.popleft()

    def write(self, ch):
        self.output.append(ch)

    def getvalue(self):
        return ''.join(self.output)
