# topmark:header:start
#
#   project      : PipeChain
#   file         : strategies_pipechain.py
#   file_relpath : tests/strategies_pipechain.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for pipeline inputs, step chains and transport writes.

The generated values stay small: property tests explore the shape of the
input space (scalars vs. structured values, chain lengths), not its volume.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs",)

s_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_categories=EXCLUDED_CATEGORIES, max_codepoint=0x00FF),
    max_size=20,
)

# Values `is_scalar()` accepts (None included).
s_scalar: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    s_text,
    st.binary(max_size=10),
)

s_structured: st.SearchStrategy[Any] = st.one_of(
    st.lists(s_scalar, max_size=5),
    st.dictionaries(s_text, s_scalar, max_size=5),
    st.tuples(s_scalar, s_scalar),
)

s_any_value: st.SearchStrategy[Any] = st.one_of(s_scalar, s_structured)

s_storage_key: st.SearchStrategy[str] = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=8
)


@st.composite
def s_suffix_chain(draw: Draw, max_steps: int = 8) -> list[str]:
    """Generate the suffixes of a chain of string-appending steps."""
    size: int = draw(st.integers(min_value=1, max_value=max_steps))
    return draw(st.lists(s_text, min_size=size, max_size=size))


@st.composite
def s_scalar_writes(draw: Draw) -> list[tuple[str, Any]]:
    """Generate a sequence of ``(key, scalar)`` writes over a small key set."""
    keys: list[str] = draw(st.lists(s_storage_key, min_size=1, max_size=3, unique=True))
    return draw(
        st.lists(st.tuples(st.sampled_from(keys), s_scalar), min_size=1, max_size=12)
    )
