"""Tests for splitting files into chunk directories."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from chunker.reconstructor import reconstruct_file
from chunker.splitter import split_file
from common.constants import CHUNK_SIZE_BYTES
from common.exceptions import (
    AlreadyPopulatedError,
    ChunkIOError,
    MalformedMetadataError,
    SourceNotFoundError,
)


@pytest.mark.parametrize(
    'size, chunk_size, expected_sizes',
    [
        (1, 4, [1]),
        (3, 4, [3]),
        (8, 4, [4, 4]),
        (10, 4, [4, 4, 2]),
    ],
)
def test_chunk_sizes(make_source, chunk_dir, size, chunk_size, expected_sizes):
    """All chunks but the last are full; no empty trailing chunk."""
    source = make_source(size)

    result = split_file(source, chunk_dir, chunk_size=chunk_size)

    assert [p.stat().st_size for p in result.chunk_paths] == expected_sizes
    assert [p.name for p in result.chunk_paths] == [f'chunk{i:03d}' for i in range(len(expected_sizes))]
    assert result.total_bytes == size
    assert result.chunk_count == len(expected_sizes)


def test_chunk_contents_are_contiguous(make_source, chunk_dir):
    """Concatenated chunk bytes equal the source bytes."""
    source = make_source(25)

    result = split_file(source, chunk_dir, chunk_size=7)

    assert b''.join(p.read_bytes() for p in result.chunk_paths) == source.read_bytes()


def test_default_chunk_size_exact_multiple(make_source, chunk_dir):
    """A source of exactly two default chunks gives two full chunks."""
    source = make_source(2 * CHUNK_SIZE_BYTES)

    result = split_file(source, chunk_dir)

    assert result.chunk_count == 2
    assert all(p.stat().st_size == CHUNK_SIZE_BYTES for p in result.chunk_paths)


def test_empty_source_writes_only_metadata(make_source, chunk_dir):
    """An empty file produces no chunks."""
    source = make_source(0, name='empty.dat')

    result = split_file(source, chunk_dir, chunk_size=4)

    assert result.chunk_count == 0
    assert sorted(p.name for p in chunk_dir.iterdir()) == ['info.json']


def test_metadata_records_base_name(make_source, chunk_dir):
    """info.json holds the source's base name, not its path."""
    source = make_source(5, name='report.pdf')

    split_file(source, chunk_dir, chunk_size=4)

    info = json.loads((chunk_dir / 'info.json').read_text())
    assert info == {'original_filename': 'report.pdf'}


def test_creates_nested_target_directory(make_source, tmp_path):
    """Missing parents of the target directory are created."""
    target = tmp_path / 'a' / 'b' / 'chunks'

    split_file(make_source(5), target, chunk_size=4)

    assert (target / 'chunk001').exists()


def test_existing_empty_directory_is_accepted(make_source, chunk_dir):
    """An existing but empty directory can receive a split."""
    chunk_dir.mkdir()

    result = split_file(make_source(5), chunk_dir, chunk_size=4)

    assert result.chunk_count == 2


def test_non_empty_directory_refused(make_source, chunk_dir):
    """Splitting into a populated directory fails and writes nothing."""
    chunk_dir.mkdir()
    (chunk_dir / 'stale.txt').write_text('old')

    with pytest.raises(AlreadyPopulatedError):
        split_file(make_source(10), chunk_dir, chunk_size=4)

    assert [p.name for p in chunk_dir.iterdir()] == ['stale.txt']


def test_missing_source_leaves_target_untouched(tmp_path, chunk_dir):
    """A missing source fails before the target directory is created."""
    with pytest.raises(SourceNotFoundError):
        split_file(tmp_path / 'nope.bin', chunk_dir)

    assert not chunk_dir.exists()


def test_directory_source_is_not_found(tmp_path, chunk_dir):
    """Directories are not splittable sources."""
    with pytest.raises(SourceNotFoundError):
        split_file(tmp_path, chunk_dir)


def test_target_is_a_file(make_source, tmp_path):
    """A regular file in place of the target directory is an I/O failure."""
    target = tmp_path / 'occupied'
    target.write_text('x')

    with pytest.raises(ChunkIOError):
        split_file(make_source(5), target, chunk_size=4)


def test_invalid_chunk_size(make_source, chunk_dir):
    """Chunk size must be positive."""
    with pytest.raises(ValueError):
        split_file(make_source(5), chunk_dir, chunk_size=0)


def test_warns_past_ordered_chunk_limit(make_source, chunk_dir, caplog):
    """Going past 999 chunks logs the ordering limitation."""
    source = make_source(1001)
    app_logger = logging.getLogger('chunksplit')
    original_propagate = app_logger.propagate
    app_logger.propagate = True

    try:
        with caplog.at_level(logging.WARNING, logger='chunksplit'):
            result = split_file(source, chunk_dir, chunk_size=1)
    finally:
        app_logger.propagate = original_propagate

    assert result.chunk_count == 1001
    assert (chunk_dir / 'chunk1000').exists()
    assert 'no longer sort' in caplog.text


@pytest.mark.skipif(os.altsep == '\\', reason='backslash is a path separator here')
def test_backslash_name_round_trips(tmp_path, chunk_dir):
    """A name containing a backslash is recorded and restored as is."""
    source = tmp_path / 'a\\b.txt'
    source.write_bytes(b'backslash content')

    split_file(source, chunk_dir, chunk_size=4)

    assert reconstruct_file(chunk_dir) == 'a\\b.txt'
    assert (chunk_dir / 'a\\b.txt').read_bytes() == b'backslash content'


@pytest.mark.skipif(sys.platform != 'linux', reason='needs a filesystem accepting non-UTF-8 names')
def test_undecodable_name_recorded_lossily(tmp_path, chunk_dir):
    """Non-UTF-8 bytes in the source name are replaced, not fatal."""
    source = tmp_path / os.fsdecode(b'bad\xff.bin')
    source.write_bytes(b'0123456789')

    result = split_file(source, chunk_dir, chunk_size=4)

    assert result.chunk_count == 3
    info = json.loads((chunk_dir / 'info.json').read_text(encoding='utf-8'))
    assert info == {'original_filename': 'bad�.bin'}


def test_chunk_write_failure_raises_chunk_io_error(make_source, chunk_dir):
    """An OSError while writing a chunk surfaces as ChunkIOError."""
    source = make_source(10)

    with patch('chunker.splitter.write_chunk', side_effect=OSError('disk full')):
        with pytest.raises(ChunkIOError) as excinfo:
            split_file(source, chunk_dir, chunk_size=4)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert 'disk full' in str(excinfo.value)


def test_unrecordable_name_fails_before_target_created(tmp_path, chunk_dir):
    """A name that cannot be recorded fails without creating the target."""
    source = tmp_path / 'ok.bin'
    source.write_bytes(b'abc')

    with patch('chunker.splitter.build_metadata', side_effect=MalformedMetadataError('bad name')):
        with pytest.raises(ChunkIOError):
            split_file(source, chunk_dir, chunk_size=4)

    assert not chunk_dir.exists()
