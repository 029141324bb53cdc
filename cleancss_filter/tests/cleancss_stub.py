#!/usr/bin/env python
"""Stands in for cleancss: echoes the input file given as last argument."""
import os
import sys


def main():
    args = sys.argv[1:]
    exit_code = os.environ.get("CLEANCSS_STUB_EXIT")
    if exit_code:
        sys.exit(int(exit_code))

    with open(args[-1], 'rb') as f:
        content = f.read()

    if content.startswith(b'{{{'):
        sys.stderr.write('parse error')
        sys.exit(2)

    if '--debug' in args:
        sys.stderr.write('Original: %d bytes' % len(content))

    if os.environ.get("CLEANCSS_STUB_MODE") == "node-path":
        content = os.environ.get("NODE_PATH", "").encode()

    sys.stdout.buffer.write(content)


if __name__ == '__main__':
    main()
