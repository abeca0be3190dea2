import subprocess

import pytest

import minify_runner as runner

EXAMPLE_JS = """// example
function greet(name) {
    return 'hello ' + name;
}
"""

SECOND_JS = """var answer   =   42;
console.log( greet('world'), answer );
"""

EXAMPLE_CSS = """/* example */
body {
    margin: 0;
    color: #333;
}
"""


def fake_minify(text):
    return ' '.join(text.split())


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Sources in the cwd and an empty dist/ next to them"""
    (tmp_path / 'example.js').write_text(EXAMPLE_JS)
    (tmp_path / 'second.js').write_text(SECOND_JS)
    (tmp_path / 'example.css').write_text(EXAMPLE_CSS)
    (tmp_path / 'dist').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def calls(monkeypatch):
    """Replace the external minifiers with a whitespace squasher"""
    seen = []

    def run(cmd, **kwargs):
        seen.append(cmd)
        i = cmd.index('-o')
        src, target = cmd[i - 1], cmd[i + 1]
        with open(src) as f:
            data = f.read()
        with open(target, 'w') as f:
            f.write(fake_minify(data))
        return subprocess.CompletedProcess(cmd, 0, stdout='')

    monkeypatch.setattr(runner.subprocess, 'run', run)
    return seen
