"""Disk Fragmenter: compacting files on a disk map."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import takewhile

from .grid import char_to_int
from .inputs import split_lines


@dataclass(frozen=True)
class DiskBlock:
    """A file of ``file_blocks`` blocks followed by ``empty_blocks`` free ones."""

    file_id: int
    file_blocks: int
    empty_blocks: int


@dataclass(eq=False)
class _Segment:
    file_id: int | None
    length: int


def parse(text: str, test: bool = False) -> tuple[DiskBlock, ...]:
    blocks: list[DiskBlock] = []
    for line in split_lines(text):
        digits = [char_to_int(char) for char in line]
        for file_id, start in enumerate(range(0, len(digits), 2)):
            file_blocks = digits[start]
            if start + 1 < len(digits):
                blocks.append(DiskBlock(file_id, file_blocks, digits[start + 1]))
            elif file_blocks:
                blocks.append(DiskBlock(file_id, file_blocks, 0))
    return tuple(blocks)


def part1(puzzle: Sequence[DiskBlock]) -> str:
    disk: list[int | None] = []
    for block in puzzle:
        disk.extend([block.file_id] * block.file_blocks)
        disk.extend([None] * block.empty_blocks)
    right = len(disk) - 1
    for left in range(len(disk)):
        if disk[left] is None:
            while right > left and disk[right] is None:
                right -= 1
            if right > left:
                disk[left], disk[right] = disk[right], None
        if left >= right:
            break
    return str(
        sum(index * value for index, value in enumerate(takewhile(lambda v: v is not None, disk)))
    )


def _find_space(segments: list[_Segment], moving: _Segment) -> int | None:
    for index, segment in enumerate(segments):
        if segment.file_id == moving.file_id:
            return None
        if segment.file_id is None and segment.length >= moving.length:
            return index
    return None


def part2(puzzle: Sequence[DiskBlock]) -> str:
    segments: list[_Segment] = []
    files: list[_Segment] = []
    for block in puzzle:
        file_segment = _Segment(block.file_id, block.file_blocks)
        segments.append(file_segment)
        segments.append(_Segment(None, block.empty_blocks))
        files.append(file_segment)

    for moving in reversed(files):
        index = _find_space(segments, moving)
        if index is None:
            continue
        target = segments[index]
        remaining = target.length - moving.length
        target.file_id, target.length = moving.file_id, moving.length
        if remaining > 0:
            segments.insert(index + 1, _Segment(None, remaining))
        moving.file_id = None

    total = 0
    position = 0
    for segment in segments:
        if segment.file_id is not None:
            total += segment.file_id * sum(range(position, position + segment.length))
        position += segment.length
    return str(total)