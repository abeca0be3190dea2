"""
Input Resolver
Works out where minified output goes and what it is called
"""

import logging
import os

logger = logging.getLogger(__name__)

EXTENSIONS = {True: '.css', False: '.js'}

class MinifyError(Exception):
    """Raised when any step of a minify run fails"""

    def __init__(self, message, output=None):
        super().__init__(message)
        self.output = output

def split_sources(src):
    """Split a comma separated source list"""
    return [s.strip() for s in src.split(',') if s.strip()]

def is_multiple_files(src):
    return len(split_sources(src)) > 1

def resolve_dir(to):
    """Directory the output lands in

    `to` is used as-is when it is an existing directory, otherwise it is
    treated as a file path and its parent directory is used.
    """
    directory = to
    if not os.path.isdir(to):
        # most probably a file, take the dir from the path
        directory = os.path.dirname(to) or '.'

    if not os.path.isdir(directory):
        raise MinifyError(f"Failed to resolve dir from {to}")

    return directory

def target_name(src, to, extra='.min'):
    """
    Build the minified file name for `src` inside the output dir

    Returns:
        tuple: (full path, bare filename) e.g. ('dist/app.min.js', 'app.min.js')
    """
    name, ext = os.path.splitext(os.path.basename(src))
    filename = f"{name}{extra}{ext}"

    directory = resolve_dir(to)
    logger.debug("target name for %s: %s/%s", src, directory, filename)
    return os.path.join(directory, filename), filename

def check_extensions(sources, ext):
    """All files of a bundle must share the bundle's extension"""
    for path in sources:
        if os.path.splitext(path)[1] != ext:
            raise MinifyError(
                f"Extension differs for file {path} output ext {ext}"
            )

def bundle_name(to, css):
    """
    Validate the output of a multi-file run

    The bundle needs an explicit file name ending in .js or .css
    (matching the mode), a bare directory is not enough.
    """
    ext = EXTENSIONS[css]
    if os.path.isdir(to) or not to.endswith(ext):
        raise MinifyError(
            f"Output for multiple files must be a file name ending in {ext}, got {to}"
        )
    resolve_dir(to)
    return ext
