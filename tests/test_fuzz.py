from __future__ import annotations

import os

import pytest
from gtoc.canonical import canonical_anchor, canonical_heading
from gtoc.exceptions import NoHeadingsFoundError
from gtoc.generator import build_toc

atheris = pytest.importorskip("atheris")


def test_canonical_anchor_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    generated = set()

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        anchor = canonical_anchor(text)
        assert " " not in anchor
        assert "`" not in canonical_heading(text)
        generated.add(anchor)

    assert generated  # ensure we exercised the loop


def test_build_toc_with_fuzzed_lines():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 64:
        prefix = "#" * provider.ConsumeIntInRange(0, 4)
        lines.append(prefix + provider.ConsumeUnicodeNoSurrogates(32))

    try:
        toc = build_toc(lines)
    except NoHeadingsFoundError:
        return

    assert toc.endswith("\n")
    assert toc.lstrip(" ").startswith("* [")
