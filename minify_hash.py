"""
Cache-busting names
Hashes minified output into its filename and clears out older hashed copies
"""

import hashlib
import logging
import os
import re

from minify_paths import MinifyError

logger = logging.getLogger(__name__)

def stale_pattern(filename):
    """Matches `<md5 hex>-<filename>`"""
    return re.compile(rf'^[0-9a-f]{{32}}-{re.escape(filename)}$')

def remove_stale(directory, filename):
    """
    Delete earlier hashed versions of `filename` in `directory`

    Returns:
        list: names of the removed files
    """
    logger.debug("removing stale %s in %s", filename, directory)

    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        raise MinifyError(f"Failed to read dir {directory}") from e

    pattern = stale_pattern(filename)
    removed = []

    for name in entries:
        if not pattern.match(name):
            continue

        fullpath = os.path.join(directory, name)
        try:
            os.remove(fullpath)
        except OSError as e:
            raise MinifyError(f"Failed to remove {fullpath}") from e

        print(f"Removed: {name}")
        removed.append(name)

    return removed

def md5_hash(path):
    """Hex MD5 digest of a file's bytes"""
    with open(path, 'rb') as f:
        return hashlib.md5(f.read()).hexdigest()

def hash_rename(path):
    """Rename `path` to `<dir>/<md5>-<basename>` and return the new path"""
    try:
        digest = md5_hash(path)
        directory, filename = os.path.split(path)
        new_path = os.path.join(directory, f"{digest}-{filename}")
        os.replace(path, new_path)
    except OSError as e:
        raise MinifyError(f"Failed to hash and rename {path}") from e

    return new_path
