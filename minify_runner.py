"""
Minifier Invoker
Runs uglifyjs / cleancss on a single input file
"""

import logging
import os
import shlex
import subprocess

from minify_paths import MinifyError

logger = logging.getLogger(__name__)

# executables can be swapped out, e.g. MINIFY_UGLIFYJS="npx uglifyjs"
UGLIFYJS_ENV = 'MINIFY_UGLIFYJS'
CLEANCSS_ENV = 'MINIFY_CLEANCSS'

def _executable(env_name, default):
    value = os.getenv(env_name)
    if value:
        return shlex.split(value)
    return [default]

def minifier_command(src, target, css):
    """Command line for the external minifier"""
    if css:
        # --skip-rebase would keep relative urls untouched, left at the default
        return _executable(CLEANCSS_ENV, 'cleancss') + [src, '-o', target]
    return _executable(UGLIFYJS_ENV, 'uglifyjs') + [src, '-o', target, '-c', '-m']

def run_minifier(src, target, css):
    """
    Minify `src` into `target`

    Raises:
        MinifyError: the command could not run, exited non-zero or left
            no output file behind. The combined tool output is kept on
            the exception's `output`.
    """
    cmd = minifier_command(src, target, css)
    logger.debug("running %s", ' '.join(cmd))

    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors='replace',
        )
    except OSError as e:
        raise MinifyError(f"Failed to run {cmd}: {e}") from e

    if proc.returncode != 0:
        print(f"exit status {proc.returncode}: {proc.stdout}")
        raise MinifyError(
            f"Command failed {cmd} (exit status {proc.returncode})",
            output=proc.stdout,
        )

    if not os.path.exists(target):
        print(f"Failed to create minified file {target}")
        raise MinifyError(
            f"Failed to create minified file {target}",
            output=proc.stdout,
        )

    return target
