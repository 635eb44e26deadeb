"""Algorithms over plain lists of integers."""

from itertools import pairwise


def get_concatenation(nums):
    """Return ``nums`` followed by ``nums`` again."""
    return nums + nums


def remove_duplicates_option1(nums):
    """Collapse runs of equal values in place; return the kept count."""
    written = 0
    for value in nums:
        if written == 0 or value != nums[written - 1]:
            nums[written] = value
            written += 1
    return written


def remove_duplicates_option2(nums):
    """Collapse runs of equal values in place; an empty list reports 1."""
    written = 1
    for previous, current in pairwise(list(nums)):
        if current != previous:
            nums[written] = current
            written += 1
    return written


def remove_duplicates2(nums):
    """Keep at most two copies of each sorted value in place; return the count."""
    if len(nums) < 3:
        return len(nums)
    written = 2
    for value in nums[2:]:
        if value != nums[written - 2]:
            nums[written] = value
            written += 1
    return written


def remove_element(nums, val):
    """Move items not equal to ``val`` to the front; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)