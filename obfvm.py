#!/usr/bin/env python

import sys
import os
import argparse
import importlib
import logging
import time

from bfvm import VmError, NullChannel, dump, parse

logger = logging.getLogger('obfvm')

SKIP_MODULES = ['__init__.py', 'backend.py', 'channels.py', 'compiler.py', 'errors.py', 'vmops.py']
CHANNELS = ['console', 'null']


def read(fname):
    try:
        with open(fname, 'r', encoding='latin-1') as fd:
            res = fd.read()
    except OSError:
        res = None
    return res


def memory_size(value):
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError('tape size must be at least 1, got %s' % (value))
    return size


def find_class(suffix, name):
    mod = importlib.import_module('bfvm')
    findname = name + suffix
    for item in dir(mod):
        if findname == item.lower():
            return getattr(mod, item)
    return None


def get_backend(oname, flags):
    name = flags['backend']
    fdir = os.path.dirname(importlib.import_module('bfvm').__file__)
    files = os.listdir(fdir)
    for f in files:
        if f.endswith('.py') and f not in SKIP_MODULES:
            fname = f.replace('.py', '')
            if fname == name:
                constr = find_class('backend', name)
                if constr is not None:
                    return constr(oname, flags)

    return None


def get_channel(flags):
    if flags['io'] not in CHANNELS:
        return None
    constr = find_class('channel', flags['io'])
    if constr is None:
        return None
    return constr()


def bench(backend, count):
    times = []
    for _ in range(count):
        start = time.perf_counter()
        backend.run(NullChannel())
        times.append(time.perf_counter() - start)
    return times


def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Optimizing BrainFuck virtual machine')
    parser.add_argument('--backend', action='store', default='vm', help='Define backend, default "vm"')
    parser.add_argument('--io', action='store', default='console', help='I/O channel: console or null, default "console"')
    parser.add_argument('-m', '--memory-size', action='store', type=memory_size, default=30000, help='Tape size in cells, default 30000')
    parser.add_argument('--bench', action='store', type=int, default=0, metavar='N', help='Run N times with discarded output and report timings')
    parser.add_argument('--dump', action='store_true', help='Print compiled operations instead of running')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('file', action='store', help='BrainFuck source file')

    args = parser.parse_args(argv)
    flags = vars(args)
    setup_logging(flags['verbose'])

    fname = flags['file']
    data = read(fname)
    if data is None:
        print('\nERROR: File not found: %s\n' % (fname))
        return 1

    backend = get_backend(os.path.basename(fname), flags)
    if backend is None:
        print('Backend not found: %s' % (flags['backend']))
        return 1
    channel = get_channel(flags)
    if channel is None:
        print('I/O channel not found: %s' % (flags['io']))
        return 1

    try:
        backend.translate(parse(data))
    except VmError as e:
        print('Compilation error %s' % (e))
        return 1

    if flags['dump']:
        if flags['backend'] != 'vm':
            print('Nothing to dump for backend: %s' % (flags['backend']))
            return 1
        print(dump(backend.code))
        return 0

    try:
        if flags['bench'] > 0:
            times = bench(backend, flags['bench'])
            print('%s runs, best %.6fs, mean %.6fs' % (len(times), min(times), sum(times) / len(times)))
        else:
            backend.run(channel)
    except VmError as e:
        logger.debug('Execution of %s failed', fname, exc_info=True)
        print('\nRuntime error %s' % (e))
        return 1

    print('\nDone')
    return 0


if __name__ == '__main__':
    sys.exit(main())
