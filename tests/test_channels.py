#!/usr/bin/env python3
'''
Unit tests for I/O channels
'''

from io import StringIO
from pathlib import Path
import sys
import unittest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bfvm import BufferChannel, ConsoleChannel, NullChannel


class TestChannels(unittest.TestCase):

    def test_null(self):
        channel = NullChannel()
        channel.write('x')
        self.assertIsNone(channel.read())

    def test_buffer(self):
        channel = BufferChannel('hi')
        self.assertEqual(channel.read(), 'h')
        self.assertEqual(channel.read(), 'i')
        self.assertIsNone(channel.read())
        channel.write('a')
        channel.write('\n')
        self.assertEqual(channel.getvalue(), 'a\n')

    def test_console(self):
        out = StringIO()
        channel = ConsoleChannel(stdin=StringIO('z'), stdout=out)
        channel.write('q')
        self.assertEqual(channel.read(), 'z')
        self.assertIsNone(channel.read())
        self.assertEqual(out.getvalue(), 'q')


if __name__ == '__main__':
    unittest.main()
