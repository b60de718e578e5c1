#!/usr/bin/env python3
"""
Patch primitive.
A patch pairs a presence predicate with the procedure that produces its effect.
"""
from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass(frozen=True)
class Patch:
    name: str
    is_present: Callable[[str], bool]
    apply: Callable[[str], str]

    def __call__(self, content: str) -> str:
        if self.is_present(content):
            return content
        return self.apply(content)


def apply_patches(content: str, patches: Iterable[Patch]) -> str:
    """Run patches in order; any PatchError propagates before anything is written."""
    for patch in patches:
        content = patch(content)
    return content
