"""
Build Pipeline
Turns one file, or a comma separated list of files, into a single
minified and hash-named output
"""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass

from minify_hash import hash_rename, remove_stale
from minify_paths import (
    MinifyError,
    bundle_name,
    check_extensions,
    resolve_dir,
    split_sources,
    target_name,
)
from minify_runner import run_minifier

logger = logging.getLogger(__name__)

@dataclass
class MinifyResult:
    target: str
    rename: bool

def minify(src, to, css):
    """
    Minify a single file

    A CSS run whose output already ends in .css is a named version: the
    file is written exactly there and keeps its name. Everything else
    becomes `<name>.min.<ext>` in the output dir and is hash-renamed later.
    """
    print(f"Minifying {src} to {to}")

    if css and to.endswith('.css') and not os.path.isdir(to):
        resolve_dir(to)
        result = MinifyResult(target=to, rename=False)
    else:
        target, filename = target_name(src, to)
        remove_stale(os.path.dirname(target), filename)
        result = MinifyResult(target=target, rename=True)

    run_minifier(src, result.target, css)
    return result

def minify_multiple(sources, to, css, workdir):
    """
    Minify each source into `workdir`, return the minified paths in order

    Every source gets its own numbered file, so sources sharing a file
    name never overwrite each other.
    """
    remove_stale(resolve_dir(to), os.path.basename(to))

    minified = []
    for index, src in enumerate(sources):
        _, filename = target_name(src, workdir)
        target = os.path.join(workdir, f"{index}-{filename}")
        print(f"Minifying {src} to {target}")
        minified.append(run_minifier(src, target, css))
    return minified

def concat_in_memory(sources, ext):
    """Read and join the sources, all of which must end in `ext`"""
    print("Concatenating")
    check_extensions(sources, ext)

    chunks = []
    for path in sources:
        print(path)
        try:
            with open(path, 'rb') as f:
                chunks.append(f.read())
        except OSError as e:
            raise MinifyError(f"Failed to read {path}") from e
    return b''.join(chunks)

def concat_files(files, to):
    """Write `files` in order into `to`, replacing whatever was there"""
    data = concat_in_memory(files, os.path.splitext(to)[1])
    try:
        with open(to, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise MinifyError(f"Failed to write {to}") from e
    return MinifyResult(target=to, rename=True)

def _concat_then_minify(sources, to, css, ext, workdir):
    """Join the raw sources first, then run the minifier once on the result"""
    remove_stale(resolve_dir(to), os.path.basename(to))

    joined = os.path.join(workdir, f"joined{ext}")
    with open(joined, 'wb') as f:
        f.write(concat_in_memory(sources, ext))

    print(f"Minifying {joined} to {to}")
    run_minifier(joined, to, css)
    return MinifyResult(target=to, rename=True)

def minify_files(src, to, css, concat=False):
    """
    Minify `src` (one path or a comma separated list) towards `to`

    With several files the output must be a .js/.css file name. By default
    every file is minified on its own and the results are joined; with
    `concat` the sources are joined first and minified in one go.
    Intermediate files live in a scratch dir next to the output that is
    removed whether or not the run succeeds.
    """
    sources = split_sources(src)
    if not sources:
        raise MinifyError(f"No source files in {src!r}")

    if len(sources) == 1:
        try:
            return minify(sources[0], to, css)
        except MinifyError as e:
            raise MinifyError(f"src {src} to {to}: {e}", output=e.output) from e

    try:
        ext = bundle_name(to, css)
        check_extensions(sources, ext)

        workdir = tempfile.mkdtemp(prefix='.minify-', dir=resolve_dir(to))
        try:
            if concat:
                return _concat_then_minify(sources, to, css, ext, workdir)

            minified = minify_multiple(sources, to, css, workdir)
            return concat_files(minified, to)
        finally:
            shutil.rmtree(workdir, ignore_errors=True)
            logger.debug("removed scratch dir %s", workdir)
    except MinifyError as e:
        raise MinifyError(
            f"minify multiple files src {src} to {to}: {e}", output=e.output
        ) from e

def build(src, to, css, concat=False):
    """Run the whole pipeline and return the final (hash-named) path"""
    result = minify_files(src, to, css, concat=concat)
    if result.rename:
        return hash_rename(result.target)
    return result.target
