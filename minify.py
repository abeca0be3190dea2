#!/usr/bin/env python3
"""
JS / CSS Minifier
Minifies with uglifyjs or cleancss and names the result after its
content hash, so browsers never hold on to a stale copy
"""

import argparse
import logging
import os
import sys

from minify_bundle import build
from minify_paths import MinifyError

logger = logging.getLogger('minify')

USAGE = """minify [-css] [-concat] [-v] <unminified file names (comma separated list)> <output>

output:
  - if only 1 file, a directory (or a file path whose dir is used);
    with -css a name ending in .css is used as-is and not hashed
  - in case of multiple files output needs to end with .js or .css

options:
  -css     minify and hash css files (cleancss) instead of js (uglifyjs)
  -concat  join multiple files before minifying instead of after
  -v       verbose logging

environment:
  MINIFY_UGLIFYJS, MINIFY_CLEANCSS  override the minifier executables
"""

def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

def parse_args(argv):
    parser = argparse.ArgumentParser(prog='minify', usage=USAGE, add_help=False)
    parser.add_argument('-css', action='store_true')
    parser.add_argument('-concat', action='store_true')
    parser.add_argument('-v', dest='verbose', action='store_true')
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('src', nargs='?')
    parser.add_argument('output', nargs='?')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.help or not args.src or not args.output:
        print(USAGE)
        return 1

    setup_logging(args.verbose)

    try:
        hashed = build(args.src, args.output, args.css, concat=args.concat)
    except (MinifyError, OSError) as e:
        logger.error("minify failed: %s", e)
        output = getattr(e, 'output', None)
        if output:
            logger.error(output.strip())
        return 1

    print(f"Minified: {os.path.basename(hashed)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
