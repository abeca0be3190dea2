import os

import pytest

from minify_paths import (
    MinifyError,
    bundle_name,
    check_extensions,
    is_multiple_files,
    resolve_dir,
    split_sources,
    target_name,
)


def test_split_sources():
    assert split_sources('a.js') == ['a.js']
    assert split_sources('a.js, b.js,') == ['a.js', 'b.js']


def test_is_multiple_files():
    assert not is_multiple_files('example.js')
    assert not is_multiple_files('example.js,')
    assert is_multiple_files('example.js,second.js')


def test_resolve_dir_existing_directory(workdir):
    assert resolve_dir('dist') == 'dist'


def test_resolve_dir_from_file_path(workdir):
    assert resolve_dir('dist/bundle.min.js') == 'dist'
    assert resolve_dir('bundle.min.js') == '.'


def test_resolve_dir_missing(workdir):
    with pytest.raises(MinifyError, match='Failed to resolve dir'):
        resolve_dir('nope/bundle.min.js')


def test_target_name(workdir):
    path, filename = target_name('src/example.js', 'dist')
    assert filename == 'example.min.js'
    assert path == os.path.join('dist', 'example.min.js')


def test_target_name_uses_dir_of_file_output(workdir):
    path, filename = target_name('example.css', 'dist/whatever.css')
    assert path == os.path.join('dist', 'example.min.css')


def test_check_extensions():
    check_extensions(['a.js', 'b.js'], '.js')
    with pytest.raises(MinifyError, match='Extension differs for file b.css'):
        check_extensions(['a.js', 'b.css'], '.js')


def test_bundle_name(workdir):
    assert bundle_name('dist/bundle.min.js', css=False) == '.js'
    assert bundle_name('dist/site.css', css=True) == '.css'


@pytest.mark.parametrize('to, css', [
    ('dist', False),
    ('dist/bundle.min.css', False),
    ('dist/bundle.min.js', True),
])
def test_bundle_name_rejects(workdir, to, css):
    with pytest.raises(MinifyError, match='must be a file name'):
        bundle_name(to, css)


def test_minify_error_keeps_output():
    e = MinifyError('boom', output='tool said no')
    assert str(e) == 'boom'
    assert e.output == 'tool said no'
